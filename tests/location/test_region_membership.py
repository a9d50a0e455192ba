"""Tests for the region membership evaluator and the target-region constants.

The target rectangle is lat [4.3, 13.9], lon [2.7, 14.7], inclusive on all
four edges.
"""

from __future__ import annotations

import pytest

from domain.location.regions import NIGERIA_BOUNDS
from domain.location.services import is_in_region, is_location_in_region
from domain.location.value_objects import BoundingRegion, Coordinate
from shared.known_locations import INSIDE_KEYS, KNOWN_LOCATIONS, OUTSIDE_KEYS


def test_region_constant_matches_rectangle():
    assert NIGERIA_BOUNDS.south == 4.3
    assert NIGERIA_BOUNDS.north == 13.9
    assert NIGERIA_BOUNDS.west == 2.7
    assert NIGERIA_BOUNDS.east == 14.7


def test_lagos_is_inside(lagos: Coordinate):
    assert is_in_region(lagos, NIGERIA_BOUNDS) is True


def test_london_is_outside(london: Coordinate):
    assert is_in_region(london, NIGERIA_BOUNDS) is False


@pytest.mark.parametrize("key", INSIDE_KEYS)
def test_known_inside_locations(key: str):
    assert is_in_region(KNOWN_LOCATIONS[key].coordinate) is True


@pytest.mark.parametrize("key", OUTSIDE_KEYS)
def test_known_outside_locations(key: str):
    assert is_in_region(KNOWN_LOCATIONS[key].coordinate) is False


@pytest.mark.parametrize(
    "lat,lng",
    [
        (4.3, 8.0),  # south edge
        (13.9, 8.0),  # north edge
        (9.0, 2.7),  # west edge
        (9.0, 14.7),  # east edge
        (4.3, 2.7),  # SW corner
        (13.9, 14.7),  # NE corner
    ],
)
def test_edges_are_inclusive(lat: float, lng: float):
    assert is_location_in_region(lat, lng) is True


@pytest.mark.parametrize(
    "lat,lng",
    [
        (4.29, 8.0),
        (13.91, 8.0),
        (9.0, 2.69),
        (9.0, 14.71),
    ],
)
def test_just_outside_one_axis(lat: float, lng: float):
    assert is_location_in_region(lat, lng) is False


def test_interior_grid_is_inside():
    lats = [4.3 + i * (13.9 - 4.3) / 10 for i in range(11)]
    lngs = [2.7 + j * (14.7 - 2.7) / 10 for j in range(11)]
    for lat in lats:
        for lng in lngs:
            assert is_location_in_region(min(lat, 13.9), min(lng, 14.7))


def test_physically_invalid_pair_is_not_rejected():
    """The evaluator does not re-validate; it just answers False."""
    assert is_location_in_region(200.0, -500.0) is False
    assert is_location_in_region(float("inf"), 8.0) is False


def test_custom_region():
    region = BoundingRegion(north=1.0, south=-1.0, east=1.0, west=-1.0)
    assert is_in_region(Coordinate(latitude=0, longitude=0), region)
    assert not is_in_region(Coordinate(latitude=0, longitude=1.5), region)


@pytest.mark.parametrize(
    "kwargs",
    [
        {"north": 4.0, "south": 5.0, "east": 10.0, "west": 0.0},
        {"north": 5.0, "south": 5.0, "east": 10.0, "west": 0.0},
        {"north": 10.0, "south": 0.0, "east": 0.0, "west": 10.0},
    ],
)
def test_bounding_region_rejects_bad_ordering(kwargs: dict):
    with pytest.raises(ValueError):
        BoundingRegion(**kwargs)


def test_bounding_region_is_frozen():
    with pytest.raises(ValueError):
        NIGERIA_BOUNDS.north = 20.0  # type: ignore[misc]
