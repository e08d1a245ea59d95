from .appointment_service import AppointmentService
from .reminder_service import ReminderService
from .template_renderer import render

__all__ = ["AppointmentService", "ReminderService", "render"]
