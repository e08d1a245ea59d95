# ============================================================================
# Tests for appointment CRUD with reminder side effects
# ============================================================================
"""Unit tests for AppointmentService."""

from datetime import date, time
from unittest.mock import AsyncMock, MagicMock

import pytest

from mediflow.core.domain.exceptions import EntityNotFoundException
from mediflow.domains.clinic.application.services import AppointmentService
from mediflow.domains.clinic.domain.entities import Appointment, ReminderSettings
from mediflow.domains.clinic.domain.value_objects import AppointmentStatus


@pytest.fixture
def reminders() -> MagicMock:
    reminders = MagicMock()
    reminders.schedule_reminders = AsyncMock(return_value=True)
    reminders.cancel_reminders.return_value = True
    return reminders


@pytest.fixture
def service(appointment_repository, patient_repository, doctor_repository, reminders) -> AppointmentService:
    return AppointmentService(appointment_repository, patient_repository, doctor_repository, reminders)


def _new_appointment(patient, doctor, reminder_settings=None) -> Appointment:
    return Appointment(
        patient_id=patient.id,
        doctor_id=doctor.id,
        date=date(2030, 1, 15),
        time=time(14, 30),
        reason="Follow-up",
        reminder_settings=reminder_settings,
    )


class TestCreateAppointment:
    @pytest.mark.asyncio
    async def test_create_assigns_id_and_pending_status(self, service, reminders, patient, doctor) -> None:
        created = await service.create_appointment(_new_appointment(patient, doctor))

        assert created.id == 1
        assert created.status is AppointmentStatus.PENDING
        reminders.schedule_reminders.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_create_with_reminders_schedules(self, service, reminders, patient, doctor) -> None:
        settings = ReminderSettings(patient_reminders=["24h"])
        created = await service.create_appointment(_new_appointment(patient, doctor, settings))

        reminders.schedule_reminders.assert_awaited_once_with(created)

    @pytest.mark.asyncio
    async def test_empty_reminder_lists_do_not_schedule(self, service, reminders, patient, doctor) -> None:
        await service.create_appointment(_new_appointment(patient, doctor, ReminderSettings()))
        reminders.schedule_reminders.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_scheduling_failure_does_not_fail_create(self, service, reminders, patient, doctor) -> None:
        """Reminder errors are logged, never raised across the record operation."""
        reminders.schedule_reminders.side_effect = RuntimeError("timer unavailable")
        settings = ReminderSettings(doctor_reminders=["1h"])

        created = await service.create_appointment(_new_appointment(patient, doctor, settings))

        assert (await service.get_appointment(created.id)).reason == "Follow-up"

    @pytest.mark.asyncio
    async def test_unknown_patient_raises(self, service, patient, doctor) -> None:
        appointment = _new_appointment(patient, doctor)
        appointment.patient_id = 404
        with pytest.raises(EntityNotFoundException):
            await service.create_appointment(appointment)


class TestUpdateAppointment:
    @pytest.mark.asyncio
    async def test_update_without_reminder_settings_leaves_reminders(self, service, reminders, patient, doctor):
        created = await service.create_appointment(_new_appointment(patient, doctor))

        updated = await service.update_appointment(created.id, {"reason": "Consultation", "status": "confirmed"})

        assert updated.reason == "Consultation"
        assert updated.status is AppointmentStatus.CONFIRMED
        reminders.cancel_reminders.assert_not_called()
        reminders.schedule_reminders.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_update_with_reminder_settings_reschedules(self, service, reminders, patient, doctor) -> None:
        """Sending reminder settings cancels then schedules, in that order."""
        created = await service.create_appointment(_new_appointment(patient, doctor))
        calls = []
        reminders.cancel_reminders.side_effect = lambda appointment_id: calls.append("cancel") or True
        reminders.schedule_reminders.side_effect = lambda appointment: calls.append("schedule") or True

        updated = await service.update_appointment(
            created.id,
            {"reminder_settings": {"patient_reminders": ["2h"], "notification_methods": ["sms"]}},
        )

        assert calls == ["cancel", "schedule"]
        assert updated.reminder_settings.patient_reminders == ["2h"]
        reminders.cancel_reminders.assert_called_once_with(created.id)

    @pytest.mark.asyncio
    async def test_clearing_reminder_settings_cancels(self, service, reminders, patient, doctor) -> None:
        created = await service.create_appointment(
            _new_appointment(patient, doctor, ReminderSettings(patient_reminders=["24h"]))
        )

        updated = await service.update_appointment(created.id, {"reminder_settings": None})

        assert updated.reminder_settings is None
        reminders.cancel_reminders.assert_called_once_with(created.id)

    @pytest.mark.asyncio
    async def test_null_fields_are_ignored(self, service, patient, doctor) -> None:
        created = await service.create_appointment(_new_appointment(patient, doctor))

        updated = await service.update_appointment(created.id, {"date": None, "reason": None, "unknown": 1})

        assert updated.date == date(2030, 1, 15)
        assert updated.reason == "Follow-up"

    @pytest.mark.asyncio
    async def test_update_missing_appointment_raises(self, service) -> None:
        with pytest.raises(EntityNotFoundException):
            await service.update_appointment(99, {"reason": "x"})

    @pytest.mark.asyncio
    async def test_update_to_unknown_doctor_raises(self, service, patient, doctor) -> None:
        created = await service.create_appointment(_new_appointment(patient, doctor))
        with pytest.raises(EntityNotFoundException):
            await service.update_appointment(created.id, {"doctor_id": 77})


class TestDeleteAppointment:
    @pytest.mark.asyncio
    async def test_delete_cancels_reminders(self, service, reminders, patient, doctor) -> None:
        created = await service.create_appointment(_new_appointment(patient, doctor))

        assert await service.delete_appointment(created.id) is True

        reminders.cancel_reminders.assert_called_once_with(created.id)
        assert await service.list_appointments() == []

    @pytest.mark.asyncio
    async def test_delete_unknown_returns_false(self, service, reminders) -> None:
        assert await service.delete_appointment(5) is False

    @pytest.mark.asyncio
    async def test_cancel_failure_does_not_fail_delete(self, service, reminders, patient, doctor) -> None:
        created = await service.create_appointment(_new_appointment(patient, doctor))
        reminders.cancel_reminders.side_effect = RuntimeError("boom")

        assert await service.delete_appointment(created.id) is True
