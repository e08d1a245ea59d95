"""Unit tests for TemplateStore."""

import pytest

from mediflow.domains.clinic.domain.value_objects import MessageTemplate, NotificationChannel, RecipientType
from mediflow.domains.clinic.infrastructure.templates import DEFAULT_TEMPLATES, TemplateStore


class TestTemplateStoreDefaults:
    """Tests for the seeded templates."""

    @pytest.mark.parametrize("role", list(RecipientType))
    @pytest.mark.parametrize("channel", list(NotificationChannel))
    def test_every_slot_is_seeded(self, role: RecipientType, channel: NotificationChannel) -> None:
        template = TemplateStore().get_template(role, channel)
        assert template is not None
        assert template.recipient_type is role
        assert template.channel is channel

    def test_email_templates_have_subjects(self) -> None:
        store = TemplateStore()
        assert store.get_template("patient", "email").subject == "Appointment Reminder - {doctorName}"
        assert store.get_template("doctor", "email").subject == "Patient Appointment Reminder - {patientName}"

    def test_sms_templates_have_no_subject(self) -> None:
        store = TemplateStore()
        assert store.get_template("patient", "sms").subject is None
        assert store.get_template("doctor", "sms").subject is None

    def test_list_templates_patient_first(self) -> None:
        templates = TemplateStore().list_templates()
        assert len(templates) == len(DEFAULT_TEMPLATES)
        assert [t.recipient_type for t in templates[:2]] == [RecipientType.PATIENT] * 2


class TestTemplateStoreUpdate:
    """Tests for get/update round trips."""

    def test_update_then_get_returns_same_template(self) -> None:
        """Should return exactly the template that was stored."""
        store = TemplateStore()
        template = MessageTemplate(RecipientType.PATIENT, NotificationChannel.SMS, body="See you {date}")

        assert store.update_template(RecipientType.PATIENT, NotificationChannel.SMS, template) is True
        assert store.get_template(RecipientType.PATIENT, NotificationChannel.SMS) is template

    def test_accepts_string_slot_names(self) -> None:
        store = TemplateStore()
        template = MessageTemplate(RecipientType.DOCTOR, NotificationChannel.EMAIL, body="b", subject="s")
        assert store.update_template("Doctor", "EMAIL", template) is True
        assert store.get_template("doctor", "email") is template

    @pytest.mark.parametrize("role, channel", [("nurse", "email"), ("patient", "fax"), ("", "")])
    def test_unknown_slot_returns_false(self, role: str, channel: str) -> None:
        """Should refuse unknown slots without raising."""
        store = TemplateStore()
        template = MessageTemplate(RecipientType.PATIENT, NotificationChannel.EMAIL, body="x")
        assert store.update_template(role, channel, template) is False
        assert store.get_template(role, channel) is None

    def test_no_placeholder_validation(self) -> None:
        store = TemplateStore()
        template = MessageTemplate(RecipientType.PATIENT, NotificationChannel.EMAIL, body="{unclosed", subject="{?}")
        assert store.update_template("patient", "email", template) is True

    def test_stores_are_independent(self) -> None:
        first, second = TemplateStore(), TemplateStore()
        template = MessageTemplate(RecipientType.PATIENT, NotificationChannel.EMAIL, body="x")
        first.update_template("patient", "email", template)
        assert second.get_template("patient", "email") is not template
