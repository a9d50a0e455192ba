"""PositionProvider adapters.

- StaticPositionProvider: a fixed, configured fix (kiosks, tests, CI)
- IpPositionProvider: approximate position from an IP geolocation service

Both classify their failures into the acquisition taxonomy so the acquirer
never sees raw transport errors.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from typing import Any

import httpx
from pydantic import ValidationError

from domain.location.errors import (
    AcquisitionTimeoutError,
    PermissionDeniedError,
    PositionUnavailableError,
)
from domain.location.value_objects import Coordinate, PositionOptions

logger = logging.getLogger(__name__)

DEFAULT_IP_ENDPOINT = "https://ipapi.co/json/"


class StaticPositionProvider:
    """Always reports the same coordinate; None means no fix is available."""

    def __init__(self, coordinate: Coordinate | None) -> None:
        self.coordinate = coordinate

    async def get_current_position(self, options: PositionOptions) -> Coordinate:
        if self.coordinate is None:
            raise PositionUnavailableError("No static position configured")
        return self.coordinate


class IpPositionProvider:
    """Approximate position from an IP geolocation endpoint.

    The last successful fix is cached and reused while it is younger than
    ``options.maximum_age_ms``. IP lookups cannot honour high-accuracy
    requests; the flag is accepted and logged.

    Parameters
    ----------
    endpoint: str
        JSON endpoint exposing ``latitude``/``longitude`` (or ``lat``/``lon``).
    client: httpx.AsyncClient | None
        Shared client; when omitted a short-lived client is opened per call.
    clock: Callable[[], float]
        Monotonic clock in seconds, injectable for tests.
    """

    def __init__(
        self,
        endpoint: str = DEFAULT_IP_ENDPOINT,
        client: httpx.AsyncClient | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.endpoint = endpoint
        self._client = client
        self._clock = clock
        self._last_fix: Coordinate | None = None
        self._last_fix_at: float | None = None

    async def get_current_position(self, options: PositionOptions) -> Coordinate:
        cached = self._cached_fix(options.maximum_age_ms)
        if cached is not None:
            logger.debug("Reusing cached IP fix")
            return cached

        if options.enable_high_accuracy:
            logger.debug("High accuracy requested; IP geolocation is approximate")

        data = await self._fetch(options.timeout_s)
        lat = data.get("latitude", data.get("lat"))
        lon = data.get("longitude", data.get("lon"))
        if lat is None or lon is None:
            raise PositionUnavailableError("IP geolocation returned no coordinates")
        try:
            coord = Coordinate(latitude=float(lat), longitude=float(lon))
        except (TypeError, ValueError, ValidationError) as e:
            raise PositionUnavailableError(f"Invalid IP geolocation coordinates: {e}") from e

        self._last_fix = coord
        self._last_fix_at = self._clock()
        return coord

    def _cached_fix(self, maximum_age_ms: int) -> Coordinate | None:
        if self._last_fix is None or self._last_fix_at is None:
            return None
        age_ms = (self._clock() - self._last_fix_at) * 1000
        return self._last_fix if age_ms <= maximum_age_ms else None

    async def _fetch(self, timeout_s: float) -> dict[str, Any]:
        try:
            if self._client is not None:
                response = await self._client.get(self.endpoint, timeout=timeout_s)
            else:
                async with httpx.AsyncClient(timeout=timeout_s) as client:
                    response = await client.get(self.endpoint)
            if response.status_code in (401, 403):
                raise PermissionDeniedError(
                    f"IP geolocation refused access (HTTP {response.status_code})"
                )
            response.raise_for_status()
            data = response.json()
        except httpx.TimeoutException as e:
            raise AcquisitionTimeoutError() from e
        except httpx.HTTPError as e:
            raise PositionUnavailableError(f"IP geolocation request failed: {e}") from e
        except ValueError as e:
            raise PositionUnavailableError(f"Malformed IP geolocation payload: {e}") from e

        if not isinstance(data, dict):
            raise PositionUnavailableError("Malformed IP geolocation payload")
        return data
