"""Notification Bounded Context - Lifecycle Controller.

State machine governing one notification's show / auto-hide / dismiss
timeline:

    IDLE --present(outside result)--> VISIBLE
    VISIBLE --auto-hide timer | dismiss()--> DISMISSING
    DISMISSING --exit animation elapsed--> DISMISSED (terminal)

Guarantees:
    - IDLE -> VISIBLE happens at most once per instance.
    - Only the first of (timer, user) dismissal triggers leaves VISIBLE;
      the other is a no-op.
    - ``host.dismissed()`` fires exactly once for every lifecycle that
      reached VISIBLE, never before the transition to DISMISSED.

One instance per boundary check; instances are never shared or reused.
"""

from __future__ import annotations

import asyncio
import logging

from domain.location.value_objects import MembershipResult
from domain.notification.ports import NotificationHost, Scheduler, TimerHandle
from domain.notification.value_objects import (
    DismissalSource,
    NotificationState,
    NotificationTimings,
    format_notification,
)

logger = logging.getLogger(__name__)


class NotificationLifecycle:
    """Lifecycle controller for a single boundary notification.

    Parameters
    ----------
    host: NotificationHost
        Receives ``show``, ``auto_hide_scheduled`` and ``dismissed`` events.
    scheduler: Scheduler | None
        Clock and timer source. Defaults to the running asyncio loop, resolved
        lazily on first use.
    timings: NotificationTimings
        Auto-hide and exit-animation durations.
    """

    def __init__(
        self,
        host: NotificationHost,
        scheduler: Scheduler | None = None,
        timings: NotificationTimings | None = None,
    ) -> None:
        self._host = host
        self._scheduler = scheduler
        self._timings = timings or NotificationTimings()
        self._state = NotificationState.IDLE
        self._presented = False
        self._discarded = False
        self._auto_hide: TimerHandle | None = None
        self._exit: TimerHandle | None = None
        self._settled = asyncio.Event()
        self.dismissed_by: DismissalSource | None = None
        self.visible_at: float | None = None
        self.dismissed_at: float | None = None

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------
    @property
    def state(self) -> NotificationState:
        return self._state

    @property
    def is_settled(self) -> bool:
        """True once nothing further will happen on this lifecycle."""
        return self._settled.is_set()

    async def wait_settled(self) -> NotificationState:
        """Suspend until the lifecycle is dismissed or decided not to show."""
        await self._settled.wait()
        return self._state

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------
    def present(
        self, result: MembershipResult, *, alert_when_outside: bool = True
    ) -> bool:
        """Feed the check's result; returns True if the notification is shown.

        Only the first call is considered. Results inside the region, or any
        result when outside-alerting is off, leave the controller IDLE for good.
        """
        if self._presented or self._discarded:
            logger.debug("Ignoring result: lifecycle already decided")
            return False
        self._presented = True

        if not alert_when_outside or result.is_in_region:
            logger.debug(
                "No notification (in_region=%s, alert_when_outside=%s)",
                result.is_in_region,
                alert_when_outside,
            )
            self._settled.set()
            return False

        content = format_notification(result)
        scheduler = self._clock()

        self._state = NotificationState.VISIBLE
        self.visible_at = scheduler.time()
        logger.debug("Notification visible at %.3f", self.visible_at)
        self._host.show(content.message, content.country_hint)

        delay = self._timings.auto_hide_s
        self._auto_hide = scheduler.call_later(delay, self._on_auto_hide)
        self._host.auto_hide_scheduled(self.visible_at + delay)
        return True

    def dismiss(self) -> bool:
        """User dismissal. Returns False when it had no effect."""
        return self._begin_dismissal(DismissalSource.USER)

    def discard(self) -> None:
        """Abandon the lifecycle (caller lost interest).

        A pending presentation is suppressed. A visible notification skips the
        exit animation; ``dismissed`` still fires exactly once.
        """
        if self._discarded:
            return
        self._discarded = True

        if self._state is NotificationState.IDLE:
            self._settled.set()
            return
        if self._state is NotificationState.VISIBLE:
            self._cancel_auto_hide()
            self._state = NotificationState.DISMISSING
            self.dismissed_by = DismissalSource.DISCARD
        if self._state is NotificationState.DISMISSING:
            if self._exit is not None:
                self._exit.cancel()
                self._exit = None
            self._finish()

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------
    def _clock(self) -> Scheduler:
        if self._scheduler is None:
            self._scheduler = asyncio.get_running_loop()
        return self._scheduler

    def _cancel_auto_hide(self) -> None:
        if self._auto_hide is not None:
            self._auto_hide.cancel()
            self._auto_hide = None

    def _on_auto_hide(self) -> None:
        self._auto_hide = None
        self._begin_dismissal(DismissalSource.TIMER)

    def _begin_dismissal(self, source: DismissalSource) -> bool:
        # Guard: the transition is only legal from VISIBLE
        if self._state is not NotificationState.VISIBLE:
            logger.debug("Ignoring %s dismissal in state %s", source.value, self._state.value)
            return False

        self._cancel_auto_hide()
        self._state = NotificationState.DISMISSING
        self.dismissed_by = source
        logger.debug("Notification dismissing (source=%s)", source.value)
        self._exit = self._clock().call_later(
            self._timings.exit_animation_s, self._on_exit_complete
        )
        return True

    def _on_exit_complete(self) -> None:
        self._exit = None
        self._finish()

    def _finish(self) -> None:
        if self._state is not NotificationState.DISMISSING:
            return
        self._state = NotificationState.DISMISSED
        self.dismissed_at = self._clock().time()
        self._settled.set()
        logger.debug("Notification dismissed at %.3f", self.dismissed_at)
        self._host.dismissed()
