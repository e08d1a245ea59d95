"""Appointment Status Value Object."""

from enum import Enum


class AppointmentStatus(str, Enum):
    """Lifecycle states of a clinic appointment."""

    PENDING = "pending"
    CONFIRMED = "confirmed"
    COMPLETED = "completed"
    CANCELLED = "cancelled"
