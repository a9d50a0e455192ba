"""Region alert: one boundary check feeding one notification lifecycle.

Each ``run`` builds a fresh ``NotificationLifecycle`` (never shared across
checks). Overlapping runs are not coalesced; callers with a single
notification surface keep one run in flight at a time.

Cancelling the task awaiting ``run`` before the check resolves discards the
pending lifecycle, so no notification appears for a check nobody watches.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass

from domain.location.value_objects import MembershipResult
from domain.notification.lifecycle import NotificationLifecycle
from domain.notification.ports import NotificationHost, Scheduler
from domain.notification.value_objects import NotificationTimings

from .boundary_check import BoundaryChecker

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AlertSession:
    """The outcome of one run: the result and the lifecycle it drives."""

    result: MembershipResult
    lifecycle: NotificationLifecycle

    @property
    def notified(self) -> bool:
        return self.lifecycle.visible_at is not None


class RegionAlert:
    """Runs boundary checks and surfaces outside-region notifications.

    Parameters
    ----------
    checker: BoundaryChecker
        Produces the membership result.
    host: NotificationHost
        Renders notifications and calls ``session.lifecycle.dismiss()``.
    alert_when_outside: bool
        When False no notification is ever shown.
    scheduler: Scheduler | None
        Timer source for lifecycles; defaults to the running loop.
    timings: NotificationTimings | None
        Auto-hide and exit-animation durations.
    """

    def __init__(
        self,
        checker: BoundaryChecker,
        host: NotificationHost,
        *,
        alert_when_outside: bool = True,
        scheduler: Scheduler | None = None,
        timings: NotificationTimings | None = None,
    ) -> None:
        self._checker = checker
        self._host = host
        self.alert_when_outside = alert_when_outside
        self._scheduler = scheduler
        self._timings = timings or NotificationTimings()

    async def run(self) -> AlertSession:
        lifecycle = NotificationLifecycle(self._host, self._scheduler, self._timings)
        try:
            result = await self._checker.check()
        except asyncio.CancelledError:
            logger.debug("Boundary check abandoned before resolution")
            lifecycle.discard()
            raise
        lifecycle.present(result, alert_when_outside=self.alert_when_outside)
        return AlertSession(result=result, lifecycle=lifecycle)

    async def run_until_settled(self) -> AlertSession:
        """Run a check and wait until its notification (if any) is dismissed."""
        session = await self.run()
        await session.lifecycle.wait_settled()
        return session

