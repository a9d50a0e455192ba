"""Domain Port(s) for Location I/O.

Defines interfaces (Protocols) that infrastructure adapters must implement.
No concrete I/O here.
"""

from __future__ import annotations

from typing import Protocol

from .value_objects import Coordinate, PlaceDescription, PositionOptions


class PositionProvider(Protocol):
    """Port for the platform's single-shot positioning capability.

    Implementations live in infrastructure (static fix, IP geolocation).
    """

    async def get_current_position(self, options: PositionOptions) -> Coordinate:
        """Return the current position.

        Raises:
            AcquisitionError: Subclass matching the failure cause.
        """
        ...


class ReverseGeocoder(Protocol):
    """Port for translating a coordinate into place names."""

    async def reverse(self, coord: Coordinate) -> PlaceDescription | None:
        """Return the locality for ``coord`` or None when nothing is known.

        Raises:
            EnrichmentUnavailableError: Transport, status or payload failure.
        """
        ...
