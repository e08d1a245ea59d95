"""Unit tests for ReminderService."""

from unittest.mock import AsyncMock

import pytest

from mediflow.domains.clinic.application.services import ReminderService
from mediflow.domains.clinic.domain.entities import ReminderSettings
from mediflow.domains.clinic.domain.value_objects import MessageTemplate, NotificationChannel, RecipientType


@pytest.fixture
def service(scheduler, template_store, notification_channel) -> ReminderService:
    return ReminderService(scheduler, template_store, notification_channel, clinic_name="Test Clinic")


class TestReminderTimeOptions:
    def test_returns_catalog_as_dicts(self) -> None:
        options = ReminderService.get_reminder_time_options()
        assert options[0] == {"code": "24h", "label": "24 hours before", "hours_before": 24}
        assert options[-1] == {"code": "30m", "label": "30 minutes before", "hours_before": 0.5}
        assert [o["code"] for o in options] == ["24h", "12h", "6h", "2h", "1h", "30m"]


class TestTemplates:
    def test_round_trip(self, service: ReminderService) -> None:
        template = MessageTemplate(RecipientType.DOCTOR, NotificationChannel.SMS, body="{patientName} at {time}")
        assert service.update_template("doctor", "sms", template) is True
        assert service.get_template("doctor", "sms") is template

    def test_unknown_slot(self, service: ReminderService) -> None:
        template = MessageTemplate(RecipientType.DOCTOR, NotificationChannel.SMS, body="x")
        assert service.update_template("admin", "sms", template) is False
        assert service.get_template("admin", "sms") is None

    def test_list_templates(self, service: ReminderService) -> None:
        assert len(service.list_templates()) == 4


class TestNotificationTest:
    """Tests for one-off test notifications."""

    @pytest.mark.asyncio
    async def test_sends_rendered_sample(self, service: ReminderService, notification_channel: AsyncMock) -> None:
        """Should render with sample values and send to the given address."""
        assert await service.test_notification("patient", "sms", "+15551234567") is True

        channel, address, content = notification_channel.send.await_args.args
        assert channel is NotificationChannel.SMS
        assert address == "+15551234567"
        assert content.subject is None
        assert content.body.startswith("Reminder: Appointment with Dr. Smith on 2/15/2024 at 10:00.")
        assert content.body.endswith("Test Clinic")

    @pytest.mark.asyncio
    async def test_caller_variables_override_samples(self, service, notification_channel) -> None:
        await service.test_notification("doctor", "email", "doc@example.com", {"patientName": "Jane Roe"})

        content = notification_channel.send.await_args.args[2]
        assert content.subject == "Patient Appointment Reminder - Jane Roe"
        assert "- Contact: +1234567890" in content.body

    @pytest.mark.asyncio
    async def test_unknown_slot_returns_false(self, service, notification_channel) -> None:
        assert await service.test_notification("nurse", "email", "a@example.com") is False
        assert await service.test_notification("patient", "pager", "a@example.com") is False
        notification_channel.send.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_send_failure_returns_false(self, service, notification_channel) -> None:
        notification_channel.send.return_value = False
        assert await service.test_notification("patient", "email", "bad") is False

    @pytest.mark.asyncio
    async def test_with_real_gateway(self, scheduler, template_store, instant_gateway) -> None:
        service = ReminderService(scheduler, template_store, instant_gateway)
        assert await service.test_notification("patient", "email", "ann@example.com") is True
        assert await service.test_notification("patient", "sms", "not a phone") is False


class TestSchedulingDelegation:
    @pytest.mark.asyncio
    async def test_schedule_list_cancel(self, service, make_appointment) -> None:
        appointment = make_appointment(reminder_settings=ReminderSettings(patient_reminders=["24h"]))

        assert await service.schedule_reminders(appointment) is True
        assert [r.key for r in service.list_scheduled(1)] == ["appointment_1_patient_24h"]
        assert service.cancel_reminders(1) is True
        assert service.list_scheduled() == []
