# ============================================================================
# SCOPE: INFRASTRUCTURE LAYER (Clinic)
# Description: Scheduler module for appointment reminders.
# ============================================================================
"""Scheduler module for appointment reminders.

- ReminderScheduler: arms, dispatches and cancels per-appointment reminders
- ReminderRegistry: live set of armed reminders owned by a scheduler
- APSchedulerTimer: AsyncIOScheduler-backed deferred triggers
"""

from .apscheduler_timer import APSchedulerJobHandle, APSchedulerTimer
from .reminder_registry import ReminderRegistry, ScheduledReminder
from .reminder_scheduler import ReminderContext, ReminderScheduler

__all__ = [
    "APSchedulerJobHandle",
    "APSchedulerTimer",
    "ReminderContext",
    "ReminderRegistry",
    "ReminderScheduler",
    "ScheduledReminder",
]
