# Domain Entities
from .appointment import Appointment, ReminderSettings
from .doctor import Doctor
from .patient import Patient

__all__ = ["Appointment", "Doctor", "Patient", "ReminderSettings"]
