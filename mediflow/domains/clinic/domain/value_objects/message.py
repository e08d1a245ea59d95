"""Message Value Objects.

Templates as stored by the template store, and the rendered content
handed to a notification channel.
"""

from dataclasses import dataclass

from .notification import NotificationChannel, RecipientType


@dataclass(frozen=True)
class MessageTemplate:
    """Reminder template for one (recipient type, channel) slot.

    SMS templates have no subject.
    """

    recipient_type: RecipientType
    channel: NotificationChannel
    body: str
    subject: str | None = None


@dataclass(frozen=True)
class MessageContent:
    """Rendered message ready for delivery."""

    body: str
    subject: str | None = None
