# Domain Value Objects
from .appointment_status import AppointmentStatus
from .message import MessageContent, MessageTemplate
from .notification import NotificationChannel, RecipientType
from .reminder_offset import ReminderOffset, ReminderTimeCatalog

__all__ = [
    "AppointmentStatus",
    "MessageContent",
    "MessageTemplate",
    "NotificationChannel",
    "RecipientType",
    "ReminderOffset",
    "ReminderTimeCatalog",
]
