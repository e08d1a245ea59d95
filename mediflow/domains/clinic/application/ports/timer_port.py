# ============================================================================
# SCOPE: APPLICATION LAYER (Clinic)
# Description: Deferred trigger port used by the reminder scheduler.
# ============================================================================
"""Timer Port.

A timer arms a one-shot callback after a delay and hands back a handle
that can cancel it. The scheduler owns the handles; the timer keeps no
knowledge of reminder keys.
"""

from collections.abc import Awaitable, Callable
from typing import Protocol, runtime_checkable

TimerCallback = Callable[[], Awaitable[None]]
MissedCallback = Callable[[], None]


@runtime_checkable
class ITimerHandle(Protocol):
    """Cancelable reference to an armed trigger."""

    def cancel(self) -> bool:
        """Cancel the trigger.

        Returns:
            True if a pending trigger was canceled, False if it had
            already fired or been canceled.
        """
        ...


@runtime_checkable
class ITimer(Protocol):
    """Interface for arming deferred callbacks.

    Implementations: APSchedulerTimer
    """

    def arm(
        self,
        delay_seconds: float,
        callback: TimerCallback,
        name: str = "",
        on_missed: MissedCallback | None = None,
    ) -> ITimerHandle:
        """Run `callback` once after `delay_seconds`.

        A trigger that cannot run on time (for example after the event
        loop stalled past the timer's grace period) is dropped without
        running `callback`; `on_missed` is called instead.

        Args:
            delay_seconds: Seconds from now until the callback runs.
            callback: Coroutine function invoked on the event loop.
            name: Label used in logs and job listings.
            on_missed: Called once if the trigger is dropped as missed.

        Returns:
            Handle for cancelling the trigger.
        """
        ...
