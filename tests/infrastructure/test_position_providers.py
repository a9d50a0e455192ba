"""Tests for the static and IP-based position providers."""

from __future__ import annotations

import asyncio

import httpx
import pytest

from domain.location.errors import (
    AcquisitionTimeoutError,
    PermissionDeniedError,
    PositionUnavailableError,
)
from domain.location.value_objects import Coordinate, PositionOptions
from infrastructure.location import IpPositionProvider, StaticPositionProvider

ENDPOINT = "https://ip.test/json/"
OPTIONS = PositionOptions()


class ManualClock:
    def __init__(self) -> None:
        self.now = 100.0

    def __call__(self) -> float:
        return self.now


def run_ip(handler, *, options=OPTIONS, calls=1, clock=None, between=None):
    """Call the provider ``calls`` times, invoking ``between`` after each call."""

    async def scenario():
        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
            provider = IpPositionProvider(
                ENDPOINT, client=client, clock=clock or ManualClock()
            )
            results = []
            for _ in range(calls):
                results.append(await provider.get_current_position(options))
                if between:
                    between()
            return results

    return asyncio.run(scenario())


# ===========================================================================
# Static
# ===========================================================================
def test_static_returns_configured_coordinate(lagos):
    provider = StaticPositionProvider(lagos)
    assert asyncio.run(provider.get_current_position(OPTIONS)) == lagos


def test_static_without_coordinate_is_unavailable():
    with pytest.raises(PositionUnavailableError):
        asyncio.run(StaticPositionProvider(None).get_current_position(OPTIONS))


# ===========================================================================
# IP geolocation
# ===========================================================================
def test_ip_reads_latitude_longitude():
    (coord,) = run_ip(lambda r: httpx.Response(200, json={"latitude": 6.45, "longitude": 3.39}))
    assert coord == Coordinate(latitude=6.45, longitude=3.39)


def test_ip_reads_lat_lon_keys():
    (coord,) = run_ip(lambda r: httpx.Response(200, json={"lat": "51.5", "lon": "-0.12"}))
    assert coord == Coordinate(latitude=51.5, longitude=-0.12)


@pytest.mark.parametrize("status", [401, 403])
def test_ip_refusal_is_permission_denied(status):
    with pytest.raises(PermissionDeniedError):
        run_ip(lambda r: httpx.Response(status))


@pytest.mark.parametrize(
    "response",
    [
        httpx.Response(500),
        httpx.Response(429),
        httpx.Response(200, content=b"oops"),
        httpx.Response(200, json=[1, 2]),
        httpx.Response(200, json={"city": "Lagos"}),
        httpx.Response(200, json={"latitude": 123.0, "longitude": 3.0}),
        httpx.Response(200, json={"latitude": "north", "longitude": 3.0}),
    ],
)
def test_ip_bad_responses_are_unavailable(response):
    with pytest.raises(PositionUnavailableError):
        run_ip(lambda r: response)


def test_ip_timeout_is_classified():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("slow", request=request)

    with pytest.raises(AcquisitionTimeoutError):
        run_ip(handler)


def test_ip_network_error_is_unavailable():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("no route", request=request)

    with pytest.raises(PositionUnavailableError):
        run_ip(handler)


def test_ip_fix_is_cached_within_maximum_age():
    hits: list[httpx.Request] = []
    clock = ManualClock()

    def handler(request: httpx.Request) -> httpx.Response:
        hits.append(request)
        return httpx.Response(200, json={"latitude": 6.45, "longitude": 3.39})

    def tick() -> None:
        clock.now += 60

    first, second = run_ip(handler, calls=2, clock=clock, between=tick)
    assert first == second
    assert len(hits) == 1


def test_ip_fix_is_refreshed_after_maximum_age():
    hits: list[httpx.Request] = []
    clock = ManualClock()

    def handler(request: httpx.Request) -> httpx.Response:
        hits.append(request)
        return httpx.Response(200, json={"latitude": 6.45, "longitude": 3.39})

    def tick() -> None:
        clock.now += 301

    run_ip(handler, calls=2, clock=clock, between=tick)
    assert len(hits) == 2


def test_ip_zero_maximum_age_always_fetches():
    hits: list[httpx.Request] = []
    clock = ManualClock()

    def handler(request: httpx.Request) -> httpx.Response:
        hits.append(request)
        return httpx.Response(200, json={"latitude": 6.45, "longitude": 3.39})

    def tick() -> None:
        clock.now += 0.001

    run_ip(handler, options=PositionOptions(maximum_age_ms=0), calls=3, clock=clock, between=tick)
    assert len(hits) == 3
