"""Location Bounded Context - Error Hierarchy.

Custom exceptions for position acquisition and place enrichment.

Acquisition errors are fatal to a boundary check (no membership can be
determined). Enrichment errors are always recovered by the caller.
"""

from __future__ import annotations

from enum import Enum


class AcquisitionFailureCause(str, Enum):
    """Why the platform could not produce a position."""

    PERMISSION_DENIED = "permission-denied"
    POSITION_UNAVAILABLE = "position-unavailable"
    TIMEOUT = "timeout"
    UNSUPPORTED = "unsupported"


_DEFAULT_MESSAGES: dict[AcquisitionFailureCause, str] = {
    AcquisitionFailureCause.PERMISSION_DENIED: "Location access denied by user",
    AcquisitionFailureCause.POSITION_UNAVAILABLE: "Location information unavailable",
    AcquisitionFailureCause.TIMEOUT: "Location request timed out",
    AcquisitionFailureCause.UNSUPPORTED: "Geolocation is not supported by this platform",
}


class LocationError(Exception):
    """Base error for location operations."""


class AcquisitionError(LocationError):
    """Position acquisition failed.

    Attributes:
        cause: The failure classification
        message: Human-readable description (for diagnostics)
    """

    cause: AcquisitionFailureCause = AcquisitionFailureCause.POSITION_UNAVAILABLE

    def __init__(self, message: str | None = None) -> None:
        self.message = message or _DEFAULT_MESSAGES[self.cause]
        super().__init__(self.message)


class PermissionDeniedError(AcquisitionError):
    """The user declined access to their position."""

    cause = AcquisitionFailureCause.PERMISSION_DENIED


class PositionUnavailableError(AcquisitionError):
    """The device cannot determine a fix."""

    cause = AcquisitionFailureCause.POSITION_UNAVAILABLE


class AcquisitionTimeoutError(AcquisitionError):
    """No fix arrived within the deadline."""

    cause = AcquisitionFailureCause.TIMEOUT


class GeolocationUnsupportedError(AcquisitionError):
    """The platform offers no positioning capability at all."""

    cause = AcquisitionFailureCause.UNSUPPORTED


class EnrichmentUnavailableError(LocationError):
    """Reverse lookup failed (network, status, or malformed payload)."""
