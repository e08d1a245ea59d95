# ============================================================================
# SCOPE: APPLICATION LAYER (Clinic)
# Description: Ports (interfaces) for collaborators of the reminder core.
# ============================================================================
"""Clinic Application Ports.

- Recipient: display name and contact addresses of a reminder recipient
- IPatientLookup / IDoctorLookup: record lookups used at scheduling time
- IAppointmentRepository: appointment persistence for the record layer
- INotificationChannel: message delivery
- ITimer / ITimerHandle: deferred, cancelable triggers
"""

from .notification_port import INotificationChannel
from .recipient_port import IDoctorLookup, IPatientLookup, Recipient
from .record_port import IAppointmentRepository
from .timer_port import ITimer, ITimerHandle, MissedCallback, TimerCallback

__all__ = [
    "Recipient",
    "IPatientLookup",
    "IDoctorLookup",
    "IAppointmentRepository",
    "INotificationChannel",
    "ITimer",
    "ITimerHandle",
    "MissedCallback",
    "TimerCallback",
]
