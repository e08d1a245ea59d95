# ============================================================================
# SCOPE: APPLICATION LAYER (Clinic)
# Description: Reminder facade used by the record layer and the API.
# ============================================================================
"""Reminder Service.

Single entry point for reminder operations: scheduling and cancelling
appointment reminders, reading and replacing templates, listing the
supported lead times and sending one-off test notifications.
"""

import logging
from typing import TYPE_CHECKING, Any

from ...domain.value_objects import (
    MessageTemplate,
    NotificationChannel,
    RecipientType,
    ReminderTimeCatalog,
)

if TYPE_CHECKING:
    from ...domain.entities import Appointment
    from ...infrastructure.scheduler import ReminderScheduler, ScheduledReminder
    from ...infrastructure.templates import TemplateStore
    from ..ports import INotificationChannel

logger = logging.getLogger(__name__)

# Sample values for test notifications
DEFAULT_TEST_VARIABLES: dict[str, str] = {
    "patientName": "John Doe",
    "doctorName": "Dr. Smith",
    "date": "2/15/2024",
    "time": "10:00",
    "reason": "Regular Checkup",
    "patientPhone": "+1234567890",
}


class ReminderService:
    """Facade over the reminder scheduler, template store and gateway."""

    def __init__(
        self,
        scheduler: "ReminderScheduler",
        template_store: "TemplateStore",
        notification_channel: "INotificationChannel",
        clinic_name: str = "",
    ):
        self._scheduler = scheduler
        self._templates = template_store
        self._channel = notification_channel
        self._clinic_name = clinic_name

    # Scheduling

    async def schedule_reminders(self, appointment: "Appointment") -> bool:
        return await self._scheduler.schedule_reminders(appointment)

    def cancel_reminders(self, appointment_id: Any) -> bool:
        return self._scheduler.cancel_reminders(appointment_id)

    def list_scheduled(self, appointment_id: Any | None = None) -> list["ScheduledReminder"]:
        return self._scheduler.get_scheduled_reminders(appointment_id)

    # Templates

    def get_template(
        self,
        recipient_type: RecipientType | str,
        channel: NotificationChannel | str,
    ) -> MessageTemplate | None:
        return self._templates.get_template(recipient_type, channel)

    def update_template(
        self,
        recipient_type: RecipientType | str,
        channel: NotificationChannel | str,
        template: MessageTemplate,
    ) -> bool:
        return self._templates.update_template(recipient_type, channel, template)

    def list_templates(self) -> list[MessageTemplate]:
        return self._templates.list_templates()

    # Catalog

    @staticmethod
    def get_reminder_time_options() -> list[dict[str, Any]]:
        """Supported lead times as [{code, label, hours_before}], longest first."""
        return [option.to_dict() for option in ReminderTimeCatalog.options()]

    # Test notifications

    async def test_notification(
        self,
        recipient_type: RecipientType | str,
        channel: NotificationChannel | str,
        address: str,
        variables: dict[str, Any] | None = None,
    ) -> bool:
        """Render a template with sample values and send it to `address`.

        Caller-supplied variables override the samples.

        Returns:
            False when the slot has no template or the send fails.
        """
        role = RecipientType.parse(recipient_type)
        medium = NotificationChannel.parse(channel)
        if role is None or medium is None:
            logger.warning(f"Test notification for unknown slot ({recipient_type}, {channel})")
            return False

        merged = {**DEFAULT_TEST_VARIABLES, "clinicName": self._clinic_name, **(variables or {})}
        content = self._scheduler.render_content(role, medium, {k: str(v) for k, v in merged.items()})
        if content is None:
            logger.warning(f"No template found for {role.value} {medium.value}")
            return False

        logger.info(f"Sending test {medium.value} notification to {address}")
        return await self._channel.send(medium, address, content)
