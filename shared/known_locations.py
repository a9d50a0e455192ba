"""Single source of truth for known diagnostic locations.

This module defines the reference places used by both:
- scripts/check_location.py (``--known`` report)
- tests (membership and distance expectations)

Location: shared/ (not tests/) to avoid scripts->tests dependency.
"""

from __future__ import annotations

from domain.location.value_objects import Coordinate, NamedPlace


def _known(name: str, latitude: float, longitude: float) -> NamedPlace:
    return NamedPlace(
        name=name, coordinate=Coordinate(latitude=latitude, longitude=longitude)
    )


KNOWN_LOCATIONS: dict[str, NamedPlace] = {
    # Inside the target region
    "lagos": _known("Lagos, Nigeria", 6.5244, 3.3792),
    "abuja": _known("Abuja, Nigeria", 9.0765, 7.3986),
    "kano": _known("Kano, Nigeria", 12.0022, 8.5920),
    # Outside
    "indore": _known("Indore, MP, India", 22.7196, 75.8577),
    "london": _known("London, UK", 51.5074, -0.1278),
    "new_york": _known("New York, USA", 40.7128, -74.0060),
}

INSIDE_KEYS: tuple[str, ...] = ("lagos", "abuja", "kano")
OUTSIDE_KEYS: tuple[str, ...] = ("indore", "london", "new_york")
