"""Notification Bounded Context - Value Objects.

States, timings and the formatted content of a boundary notification.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from domain.location.value_objects import MembershipResult

# ---------------------------------------------------------------------------
# Timing Constants
# ---------------------------------------------------------------------------
AUTO_HIDE_MS = 5000  # visible -> dismissing unless the user acts first
EXIT_ANIMATION_MS = 300  # dismissing -> dismissed (presentation exit duration)


class NotificationState(str, Enum):
    """Lifecycle of a single notification. ``DISMISSED`` is terminal."""

    IDLE = "idle"
    VISIBLE = "visible"
    DISMISSING = "dismissing"
    DISMISSED = "dismissed"


class DismissalSource(str, Enum):
    """What moved the notification out of ``VISIBLE``."""

    TIMER = "timer"
    USER = "user"
    DISCARD = "discard"


class NotificationTimings(BaseModel):
    """Durations in milliseconds for one lifecycle."""

    auto_hide_ms: int = Field(default=AUTO_HIDE_MS, gt=0)
    exit_animation_ms: int = Field(default=EXIT_ANIMATION_MS, ge=0)

    model_config = ConfigDict(frozen=True)

    @property
    def auto_hide_s(self) -> float:
        return self.auto_hide_ms / 1000

    @property
    def exit_animation_s(self) -> float:
        return self.exit_animation_ms / 1000


class NotificationContent(BaseModel):
    """What the host should render."""

    title: str
    message: str = Field(min_length=1)
    country_hint: str | None = None

    model_config = ConfigDict(frozen=True)


def format_notification(result: MembershipResult) -> NotificationContent:
    """Thin formatting step from a membership result to notification content."""
    if not result.determined:
        title = "Location unavailable"
    elif result.is_in_region:
        title = "Inside region"
    else:
        title = "Outside region"
    return NotificationContent(
        title=title, message=result.message, country_hint=result.country
    )
