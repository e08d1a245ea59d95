# ============================================================================
# SCOPE: APPLICATION LAYER (Clinic)
# Description: Appointment CRUD with reminder side effects.
# ============================================================================
"""Appointment Service.

Create, update and delete appointments. Reminder scheduling runs as a side
effect whose failures are logged and never fail the record operation.
"""

import logging
from dataclasses import fields
from typing import TYPE_CHECKING, Any

from ...domain.entities import Appointment, ReminderSettings
from ...domain.value_objects import AppointmentStatus

if TYPE_CHECKING:
    from ..ports import IAppointmentRepository, IDoctorLookup, IPatientLookup
    from .reminder_service import ReminderService

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = frozenset(f.name for f in fields(Appointment)) - {"id", "created_at", "updated_at"}


class AppointmentService:
    """Appointment record operations."""

    def __init__(
        self,
        appointments: "IAppointmentRepository",
        patients: "IPatientLookup",
        doctors: "IDoctorLookup",
        reminders: "ReminderService",
    ):
        self._appointments = appointments
        self._patients = patients
        self._doctors = doctors
        self._reminders = reminders

    async def list_appointments(self) -> list[Appointment]:
        return await self._appointments.list_all()

    async def get_appointment(self, appointment_id: int) -> Appointment:
        return await self._appointments.get_by_id(appointment_id)

    async def create_appointment(self, appointment: Appointment) -> Appointment:
        """Store a new appointment and arm its reminders.

        Raises:
            EntityNotFoundException: If the patient or doctor does not exist.
        """
        await self._patients.get_by_id(appointment.patient_id)
        await self._doctors.get_by_id(appointment.doctor_id)

        if appointment.status is None:
            appointment.status = AppointmentStatus.PENDING

        created = await self._appointments.add(appointment)

        if created.reminder_settings is not None and created.reminder_settings.has_reminders:
            await self._schedule(created)

        return created

    async def update_appointment(self, appointment_id: int, changes: dict[str, Any]) -> Appointment:
        """Apply field changes to an appointment.

        When `reminder_settings` is among the changes, existing reminders are
        cancelled and the appointment is scheduled again.

        Raises:
            EntityNotFoundException: If the appointment, or a newly referenced
                patient or doctor, does not exist.
        """
        appointment = await self._appointments.get_by_id(appointment_id)

        unknown = set(changes) - UPDATABLE_FIELDS
        if unknown:
            logger.debug(f"Ignoring unknown appointment fields: {sorted(unknown)}")

        if changes.get("patient_id") is not None:
            await self._patients.get_by_id(changes["patient_id"])
        if changes.get("doctor_id") is not None:
            await self._doctors.get_by_id(changes["doctor_id"])

        for name, value in changes.items():
            if name not in UPDATABLE_FIELDS:
                continue
            if value is None and name != "reminder_settings":
                continue
            if name == "reminder_settings" and isinstance(value, dict):
                value = ReminderSettings.from_dict(value)
            if name == "status":
                value = AppointmentStatus(value)
            setattr(appointment, name, value)

        updated = await self._appointments.save(appointment)

        if "reminder_settings" in changes:
            self._cancel(updated.id)
            await self._schedule(updated)

        return updated

    async def delete_appointment(self, appointment_id: int) -> bool:
        """Remove an appointment and cancel its reminders.

        Returns:
            False if the appointment did not exist.
        """
        deleted = await self._appointments.delete(appointment_id)
        self._cancel(appointment_id)
        return deleted

    async def _schedule(self, appointment: Appointment) -> None:
        try:
            scheduled = await self._reminders.schedule_reminders(appointment)
        except Exception as e:
            logger.error(f"Error scheduling reminders for appointment {appointment.id}: {e}", exc_info=True)
            return
        if not scheduled:
            logger.warning(f"Reminders for appointment {appointment.id} could not be scheduled")

    def _cancel(self, appointment_id: Any) -> None:
        try:
            self._reminders.cancel_reminders(appointment_id)
        except Exception as e:
            logger.error(f"Error canceling reminders for appointment {appointment_id}: {e}", exc_info=True)
