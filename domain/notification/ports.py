"""Domain Port(s) for Notification delivery and timing.

The lifecycle controller decides whether and what to show; rendering belongs
to the host, and time belongs to the scheduler.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol


class NotificationHost(Protocol):
    """Receiver of the three observable lifecycle events."""

    def show(self, message: str, country_hint: str | None = None) -> None: ...

    def auto_hide_scheduled(self, deadline: float) -> None:
        """``deadline`` is on the scheduler's clock (seconds)."""
        ...

    def dismissed(self) -> None: ...


class TimerHandle(Protocol):
    def cancel(self) -> None: ...


class Scheduler(Protocol):
    """Clock plus delayed callbacks.

    ``asyncio.AbstractEventLoop`` satisfies this protocol, so the running loop
    is the production scheduler.
    """

    def time(self) -> float: ...

    def call_later(self, delay: float, callback: Callable[[], object]) -> TimerHandle: ...
