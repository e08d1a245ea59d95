# ============================================================================
# SCOPE: INFRASTRUCTURE LAYER (Clinic)
# Description: In-memory store of reminder message templates.
# ============================================================================
"""Reminder Template Store.

Holds one template per (recipient type, channel) slot: Patient/Doctor x
Email/SMS. Slots are seeded with defaults and can be replaced at runtime.
Placeholder syntax is not validated on write; a malformed placeholder is
simply left verbatim when rendered.
"""

import logging

from ...domain.value_objects import MessageTemplate, NotificationChannel, RecipientType
from .defaults import DEFAULT_TEMPLATES

logger = logging.getLogger(__name__)

SlotKey = tuple[RecipientType, NotificationChannel]


class TemplateStore:
    """In-memory template store with a fixed set of four slots."""

    def __init__(self, templates: tuple[MessageTemplate, ...] = DEFAULT_TEMPLATES) -> None:
        self._templates: dict[SlotKey, MessageTemplate] = {
            (template.recipient_type, template.channel): template for template in templates
        }

    @staticmethod
    def _slot(
        recipient_type: "RecipientType | str",
        channel: "NotificationChannel | str",
    ) -> SlotKey | None:
        role = RecipientType.parse(recipient_type)
        medium = NotificationChannel.parse(channel)
        if role is None or medium is None:
            return None
        return role, medium

    def get_template(
        self,
        recipient_type: "RecipientType | str",
        channel: "NotificationChannel | str",
    ) -> MessageTemplate | None:
        """Get the template for a slot, or None for unknown combinations."""
        slot = self._slot(recipient_type, channel)
        if slot is None:
            return None
        return self._templates.get(slot)

    def update_template(
        self,
        recipient_type: "RecipientType | str",
        channel: "NotificationChannel | str",
        template: MessageTemplate,
    ) -> bool:
        """Replace the template of a known slot.

        Returns:
            False (no-op) when the recipient type or channel is unknown.
        """
        slot = self._slot(recipient_type, channel)
        if slot is None or slot not in self._templates:
            logger.info(f"Ignoring template update for unknown slot ({recipient_type}, {channel})")
            return False

        self._templates[slot] = template
        logger.info(f"Template updated for {slot[0].value}/{slot[1].value}")
        return True

    def list_templates(self) -> list[MessageTemplate]:
        """All templates, patient slots first."""
        return [
            self._templates[(role, medium)]
            for role in RecipientType
            for medium in NotificationChannel
            if (role, medium) in self._templates
        ]
