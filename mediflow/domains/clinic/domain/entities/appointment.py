"""Appointment Entity.

Appointments are owned by the record layer; the reminder scheduler
only reads them.
"""

import datetime as dt
from dataclasses import dataclass, field
from typing import Any

from pytz.tzinfo import BaseTzInfo

from mediflow.core.domain.entities import Entity

from ..value_objects.appointment_status import AppointmentStatus
from ..value_objects.notification import NotificationChannel


@dataclass
class ReminderSettings:
    """Declarative reminder configuration attached to an appointment.

    `patient_reminders` and `doctor_reminders` hold offset codes
    (see ReminderTimeCatalog). `notification_methods` applies to patient
    reminders only; None means email.
    """

    patient_reminders: list[str] = field(default_factory=list)
    doctor_reminders: list[str] = field(default_factory=list)
    notification_methods: list[NotificationChannel] | None = None

    @property
    def has_reminders(self) -> bool:
        return bool(self.patient_reminders or self.doctor_reminders)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ReminderSettings":
        methods = data.get("notification_methods")
        return cls(
            patient_reminders=list(data.get("patient_reminders") or []),
            doctor_reminders=list(data.get("doctor_reminders") or []),
            notification_methods=[NotificationChannel(m) for m in methods] if methods is not None else None,
        )


@dataclass(eq=False)
class Appointment(Entity[int]):
    """Clinic appointment."""

    patient_id: int | None = None
    doctor_id: int | None = None
    date: dt.date | None = None
    time: dt.time | None = None
    reason: str = ""
    notes: str = ""
    status: AppointmentStatus = AppointmentStatus.PENDING
    reminder_settings: ReminderSettings | None = None

    def starts_at(self, tz: BaseTzInfo) -> dt.datetime:
        """Combine date and time into an aware instant in the clinic timezone.

        Raises:
            ValueError: If the appointment has no date or time.
        """
        if self.date is None or self.time is None:
            raise ValueError(f"Appointment {self.id} has no date/time")
        return tz.localize(dt.datetime.combine(self.date, self.time))
