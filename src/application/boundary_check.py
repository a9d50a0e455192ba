"""Boundary check orchestration.

Acquirer -> Evaluator -> (outside only) Enricher + Distance -> MembershipResult.

Suspension happens only while acquiring the position and while enriching.
An acquisition failure short-circuits: no enrichment, no distance, and an
undetermined result carrying a fallback message.
"""

from __future__ import annotations

import logging

from domain.location.errors import AcquisitionError
from domain.location.regions import NIGERIA_BOUNDS, NIGERIA_CENTER, REGION_NAME
from domain.location.services import (
    APP_NAME,
    distance_km,
    inside_message,
    is_in_region,
    outside_message,
    undetermined_message,
)
from domain.location.value_objects import BoundingRegion, Coordinate, MembershipResult

from .acquisition import GeolocationAcquirer
from .enrichment import ContextEnricher

logger = logging.getLogger(__name__)


class BoundaryChecker:
    """Determine whether the current position is inside the target region."""

    def __init__(
        self,
        acquirer: GeolocationAcquirer,
        enricher: ContextEnricher,
        region: BoundingRegion = NIGERIA_BOUNDS,
        reference: Coordinate = NIGERIA_CENTER,
        region_name: str = REGION_NAME,
        app_name: str = APP_NAME,
    ) -> None:
        self._acquirer = acquirer
        self._enricher = enricher
        self.region = region
        self.reference = reference
        self.region_name = region_name
        self.app_name = app_name

    async def check(self) -> MembershipResult:
        """Acquire the current position and evaluate it. Never raises
        ``AcquisitionError``; failures become undetermined results."""
        try:
            coord = await self._acquirer.acquire()
        except AcquisitionError as e:
            logger.info(
                "Unable to determine location (cause=%s): %s", e.cause.value, e.message
            )
            return MembershipResult(
                is_in_region=False,
                determined=False,
                failure=e.cause,
                message=undetermined_message(self.region_name, self.app_name),
            )
        return await self.check_coordinate(coord)

    async def check_coordinate(self, coord: Coordinate) -> MembershipResult:
        """Evaluate an already-acquired coordinate."""
        if is_in_region(coord, self.region):
            return MembershipResult(
                is_in_region=True,
                message=inside_message(self.region_name, self.app_name),
            )

        # Membership is settled before enrichment; enrichment cannot change it
        distance = distance_km(coord, self.reference)
        place = await self._enricher.describe(coord)
        logger.info(
            "Position outside %s (%.0f km from reference, place=%s)",
            self.region_name,
            distance,
            place.label if place else "unknown",
        )
        return MembershipResult(
            is_in_region=False,
            country=place.country if place else None,
            state=place.state if place else None,
            city=place.city if place else None,
            distance_km=distance,
            message=outside_message(place, self.region_name, self.app_name),
        )
