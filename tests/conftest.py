"""Root pytest configuration for all tests.

Fixtures wiring the deterministic fakes from tests/fakes.py. Tests never
touch the network or wall-clock time for lifecycle timing.
"""

from __future__ import annotations

import pytest

from domain.location.value_objects import Coordinate, PlaceDescription
from tests.fakes import FakeScheduler, RecordingHost


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------
@pytest.fixture
def scheduler() -> FakeScheduler:
    return FakeScheduler()


@pytest.fixture
def host(scheduler: FakeScheduler) -> RecordingHost:
    return RecordingHost(clock=scheduler.time)


@pytest.fixture
def london() -> Coordinate:
    return Coordinate(latitude=51.5074, longitude=-0.1278)


@pytest.fixture
def lagos() -> Coordinate:
    return Coordinate(latitude=6.5244, longitude=3.3792)


@pytest.fixture
def london_place() -> PlaceDescription:
    return PlaceDescription(
        label="London, England, United Kingdom",
        city="London",
        state="England",
        country="United Kingdom",
    )
