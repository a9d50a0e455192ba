"""Location Bounded Context - Target Region Catalogue.

Fixed constants describing the target country. Never mutated at runtime.
"""

from __future__ import annotations

from domain.location.value_objects import BoundingRegion, Coordinate, NamedPlace

REGION_NAME = "Nigeria"

# Nigeria's approximate boundaries
NIGERIA_BOUNDS = BoundingRegion(
    north=13.9,  # Northern border (near Chad/Niger)
    south=4.3,  # Southern border (Gulf of Guinea)
    west=2.7,  # Western border (near Benin)
    east=14.7,  # Eastern border (near Cameroon)
)

# Abuja; reference point for distance estimates
NIGERIA_CENTER = Coordinate(latitude=9.0765, longitude=7.3986)


def _place(name: str, latitude: float, longitude: float) -> NamedPlace:
    return NamedPlace(
        name=name, coordinate=Coordinate(latitude=latitude, longitude=longitude)
    )


# Major cities for fallback positioning. Order matters for tie-breaking.
NIGERIAN_CITIES: tuple[NamedPlace, ...] = (
    _place("Lagos", 6.5244, 3.3792),
    _place("Abuja", 9.0765, 7.3986),
    _place("Kano", 12.0022, 8.5920),
    _place("Ibadan", 7.3775, 3.9470),
    _place("Benin City", 6.3350, 5.6037),
    _place("Jos", 9.8965, 8.8583),
    _place("Kaduna", 10.5222, 7.4383),
    _place("Maiduguri", 11.8311, 13.1510),
    _place("Zaria", 11.0804, 7.7076),
    _place("Aba", 5.1066, 7.3667),
)
