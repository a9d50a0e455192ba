"""Runtime configuration.

Defaults mirror the domain constants; every field can be overridden through
``BOUNDARY_ALERT_*`` environment variables via ``Settings.from_env``.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from domain.location.value_objects import (
    POSITION_MAXIMUM_AGE_MS,
    POSITION_TIMEOUT_MS,
    Coordinate,
    PositionOptions,
)
from domain.notification.value_objects import (
    AUTO_HIDE_MS,
    EXIT_ANIMATION_MS,
    NotificationTimings,
)

ENV_PREFIX = "BOUNDARY_ALERT_"

GEOCODER_URL = "https://api.bigdatacloud.net/data/reverse-geocode-client"
IP_LOCATION_URL = "https://ipapi.co/json/"


class Settings(BaseModel):
    """Application settings (immutable)."""

    geocoder_url: str = GEOCODER_URL
    geocoder_timeout_s: float = Field(default=10.0, gt=0)
    locality_language: str = "en"

    position_provider: Literal["none", "static", "ip"] = "ip"
    static_latitude: float | None = Field(default=None, ge=-90, le=90)
    static_longitude: float | None = Field(default=None, ge=-180, le=180)
    ip_location_url: str = IP_LOCATION_URL

    position_timeout_ms: int = Field(default=POSITION_TIMEOUT_MS, gt=0)
    position_maximum_age_ms: int = Field(default=POSITION_MAXIMUM_AGE_MS, ge=0)

    auto_hide_ms: int = Field(default=AUTO_HIDE_MS, gt=0)
    exit_animation_ms: int = Field(default=EXIT_ANIMATION_MS, ge=0)
    alert_when_outside: bool = True

    log_level: str = "INFO"

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def validate_static_pair(self) -> "Settings":
        if (self.static_latitude is None) != (self.static_longitude is None):
            raise ValueError("static_latitude and static_longitude must be set together")
        return self

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "Settings":
        """Load settings from ``BOUNDARY_ALERT_<FIELD>`` variables.

        Raises:
            ValueError: If any variable holds an invalid value.
        """
        env = os.environ if environ is None else environ
        values = {
            name: env[ENV_PREFIX + name.upper()]
            for name in cls.model_fields
            if ENV_PREFIX + name.upper() in env
        }
        try:
            return cls.model_validate(values)
        except ValidationError as e:
            raise ValueError(f"Invalid {ENV_PREFIX}* configuration: {e}") from e

    @property
    def static_coordinate(self) -> Coordinate | None:
        if self.static_latitude is None or self.static_longitude is None:
            return None
        return Coordinate(latitude=self.static_latitude, longitude=self.static_longitude)

    def position_options(self) -> PositionOptions:
        return PositionOptions(
            enable_high_accuracy=True,
            timeout_ms=self.position_timeout_ms,
            maximum_age_ms=self.position_maximum_age_ms,
        )

    def notification_timings(self) -> NotificationTimings:
        return NotificationTimings(
            auto_hide_ms=self.auto_hide_ms, exit_animation_ms=self.exit_animation_ms
        )
