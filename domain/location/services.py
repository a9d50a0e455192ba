"""Location Bounded Context - Domain Services.

Pure domain logic for boundary checks. NO I/O operations - positioning and
reverse geocoding are reached through the ports in `repositories.py`.

Every function here is total over its documented inputs and never raises.
"""

from __future__ import annotations

import math
from collections.abc import Iterable

from domain.location.regions import (
    NIGERIA_BOUNDS,
    NIGERIA_CENTER,
    NIGERIAN_CITIES,
    REGION_NAME,
)
from domain.location.value_objects import (
    BoundingRegion,
    Coordinate,
    LocationValidation,
    NamedPlace,
    PlaceDescription,
)

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------
EARTH_RADIUS_KM = 6371.0
APP_NAME = "NINja Map"
PLACE_SEPARATOR = ", "


# ---------------------------------------------------------------------------
# Region Membership
# ---------------------------------------------------------------------------
def is_location_in_region(
    latitude: float, longitude: float, region: BoundingRegion = NIGERIA_BOUNDS
) -> bool:
    """Check whether a raw latitude/longitude pair lies inside the region.

    All four edges are inclusive. Inputs are not re-validated, so physically
    invalid pairs simply evaluate to False.
    """
    return (
        region.south <= latitude <= region.north
        and region.west <= longitude <= region.east
    )


def is_in_region(coord: Coordinate, region: BoundingRegion = NIGERIA_BOUNDS) -> bool:
    """Check whether a coordinate lies inside the region (inclusive bounds)."""
    return is_location_in_region(coord.latitude, coord.longitude, region)


# ---------------------------------------------------------------------------
# Distance
# ---------------------------------------------------------------------------
def haversine_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Great-circle distance in kilometers between two lat/lon points."""
    phi1 = math.radians(lat1)
    phi2 = math.radians(lat2)
    d_phi = math.radians(lat2 - lat1)
    d_lambda = math.radians(lon2 - lon1)

    a = (
        math.sin(d_phi / 2.0) ** 2
        + math.cos(phi1) * math.cos(phi2) * math.sin(d_lambda / 2.0) ** 2
    )
    # Clamp guards against rounding pushing `a` marginally past 1
    a = min(1.0, max(0.0, a))
    c = 2.0 * math.atan2(math.sqrt(a), math.sqrt(1.0 - a))
    return EARTH_RADIUS_KM * c


def distance_km(coord: Coordinate, reference: Coordinate = NIGERIA_CENTER) -> float:
    """Distance in kilometers from a coordinate to the reference point.

    Symmetric in its arguments; distance_km(a, a) == 0.
    """
    return haversine_km(
        coord.latitude, coord.longitude, reference.latitude, reference.longitude
    )


# ---------------------------------------------------------------------------
# Place Description
# ---------------------------------------------------------------------------
def _clean(value: str | None) -> str | None:
    if value is None:
        return None
    value = value.strip()
    return value or None


def compose_place_description(
    city: str | None, state: str | None, country: str | None
) -> PlaceDescription | None:
    """Join non-empty city, state and country parts into a description.

    Returns None when every part is absent or blank.
    """
    city, state, country = _clean(city), _clean(state), _clean(country)
    parts = [p for p in (city, state, country) if p]
    if not parts:
        return None
    return PlaceDescription(
        label=PLACE_SEPARATOR.join(parts), city=city, state=state, country=country
    )


# ---------------------------------------------------------------------------
# Messages
# ---------------------------------------------------------------------------
def inside_message(region_name: str = REGION_NAME, app_name: str = APP_NAME) -> str:
    return f"Welcome! You are in {region_name} and can access all {app_name} features."


def outside_message(
    place: PlaceDescription | None,
    region_name: str = REGION_NAME,
    app_name: str = APP_NAME,
) -> str:
    where = f" (in {place.label})" if place else ""
    return (
        f"You are currently outside {region_name}{where}. "
        f"{app_name} is optimized for {_demonym(region_name)} navigation. "
        "Some features may be limited in your current location."
    )


def undetermined_message(
    region_name: str = REGION_NAME, app_name: str = APP_NAME
) -> str:
    return f"Unable to determine your location. {app_name} works best in {region_name}."


def _demonym(region_name: str) -> str:
    # Only the target region has a curated adjective
    return "Nigerian" if region_name == "Nigeria" else region_name


# ---------------------------------------------------------------------------
# Region Corrections
# ---------------------------------------------------------------------------
def clamp_to_region(
    coord: Coordinate, region: BoundingRegion = NIGERIA_BOUNDS
) -> Coordinate:
    """Move a coordinate onto the nearest point of the region's rectangle.

    Coordinates already inside are returned unchanged.
    """
    return Coordinate(
        latitude=max(region.south, min(region.north, coord.latitude)),
        longitude=max(region.west, min(region.east, coord.longitude)),
    )


def nearest_place(coord: Coordinate, places: Iterable[NamedPlace]) -> NamedPlace | None:
    """Return the place closest to ``coord``; the first one wins ties."""
    best: NamedPlace | None = None
    best_distance = math.inf
    for place in places:
        d = distance_km(coord, place.coordinate)
        if d < best_distance:
            best, best_distance = place, d
    return best


def nearest_city_outside(
    coord: Coordinate,
    region: BoundingRegion = NIGERIA_BOUNDS,
    cities: Iterable[NamedPlace] = NIGERIAN_CITIES,
) -> NamedPlace | None:
    """Nearest in-region city for a coordinate outside the region, else None."""
    if is_in_region(coord, region):
        return None
    return nearest_place(coord, cities)


def validate_location_for_region(
    coord: Coordinate,
    region: BoundingRegion = NIGERIA_BOUNDS,
    cities: tuple[NamedPlace, ...] = NIGERIAN_CITIES,
    region_name: str = REGION_NAME,
) -> LocationValidation:
    """Restrict a coordinate to the region, redirecting outsiders to a city.

    Falls back to clamping when the city catalogue is empty.
    """
    if is_in_region(coord, region):
        return LocationValidation(
            is_valid=True,
            corrected=coord,
            message=f"Location is within {region_name}",
        )

    city = nearest_place(coord, cities)
    if city is None:
        return LocationValidation(
            is_valid=False,
            corrected=clamp_to_region(coord, region),
            message=f"Location outside {region_name}. Moved to nearest border.",
        )
    return LocationValidation(
        is_valid=False,
        corrected=city.coordinate,
        message=f"Location outside {region_name}. Redirected to {city.name}, {region_name}.",
    )


# ---------------------------------------------------------------------------
# Diagnostics
# ---------------------------------------------------------------------------
def evaluate_places(
    places: Iterable[NamedPlace],
    region: BoundingRegion = NIGERIA_BOUNDS,
    reference: Coordinate = NIGERIA_CENTER,
) -> list[tuple[str, bool, int]]:
    """Evaluate places as ``(name, is_in_region, rounded km to reference)``."""
    return [
        (
            place.name,
            is_in_region(place.coordinate, region),
            round(distance_km(place.coordinate, reference)),
        )
        for place in places
    ]
