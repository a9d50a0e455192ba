"""Geolocation acquirer.

Wraps the platform positioning capability into a single-shot awaitable with
a deadline, normalising every failure into an ``AcquisitionError`` subclass.
There is no internal retry; a fresh acquisition is a fresh call.
"""

from __future__ import annotations

import asyncio
import logging

from domain.location.errors import (
    AcquisitionError,
    AcquisitionTimeoutError,
    GeolocationUnsupportedError,
)
from domain.location.repositories import PositionProvider
from domain.location.value_objects import Coordinate, PositionOptions

logger = logging.getLogger(__name__)


class GeolocationAcquirer:
    """Single-shot position acquisition.

    Parameters
    ----------
    provider: PositionProvider | None
        The platform capability. ``None`` means the platform has none, which
        fails as unsupported without issuing any request.
    options: PositionOptions
        High-accuracy flag, timeout and maximum cached age.
    """

    def __init__(
        self,
        provider: PositionProvider | None,
        options: PositionOptions | None = None,
    ) -> None:
        self._provider = provider
        self.options = options or PositionOptions()

    async def acquire(self) -> Coordinate:
        """Return the current coordinate.

        Raises:
            GeolocationUnsupportedError: No positioning capability
            PermissionDeniedError: User declined access
            PositionUnavailableError: No fix could be determined
            AcquisitionTimeoutError: No fix within ``options.timeout_ms``
        """
        if self._provider is None:
            raise GeolocationUnsupportedError()

        try:
            try:
                coord = await asyncio.wait_for(
                    self._provider.get_current_position(self.options),
                    timeout=self.options.timeout_s,
                )
            except asyncio.TimeoutError as e:
                raise AcquisitionTimeoutError() from e
        except AcquisitionError as e:
            logger.info("Position acquisition failed (cause=%s): %s", e.cause.value, e)
            raise

        logger.debug("Acquired position (%.4f, %.4f)", coord.latitude, coord.longitude)
        return coord
