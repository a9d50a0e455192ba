"""Context enricher.

Best-effort translation of a coordinate into place names. Enrichment is
advisory: any failure yields ``None`` and never fails the boundary check.
"""

from __future__ import annotations

import logging

from domain.location.errors import EnrichmentUnavailableError
from domain.location.repositories import ReverseGeocoder
from domain.location.value_objects import Coordinate, PlaceDescription

logger = logging.getLogger(__name__)


class ContextEnricher:
    def __init__(self, geocoder: ReverseGeocoder | None) -> None:
        self._geocoder = geocoder

    async def describe(self, coord: Coordinate) -> PlaceDescription | None:
        """Return a place description for ``coord``, or None if unavailable."""
        if self._geocoder is None:
            return None
        try:
            return await self._geocoder.reverse(coord)
        except EnrichmentUnavailableError as e:
            logger.warning("Could not get detailed location info: %s", e)
            return None
