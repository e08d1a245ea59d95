"""Notification Value Objects.

Recipient roles and delivery channels used by reminder templates
and the notification gateway.
"""

from enum import Enum


class RecipientType(str, Enum):
    """Who receives a reminder."""

    PATIENT = "patient"
    DOCTOR = "doctor"

    @classmethod
    def parse(cls, value: "str | RecipientType") -> "RecipientType | None":
        """Coerce a raw value, returning None when it is not a known role."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return None


class NotificationChannel(str, Enum):
    """Delivery medium for a notification."""

    EMAIL = "email"
    SMS = "sms"

    @property
    def display_name(self) -> str:
        return "Email" if self is NotificationChannel.EMAIL else "SMS"

    @property
    def has_subject(self) -> bool:
        """Only email messages carry a subject line."""
        return self is NotificationChannel.EMAIL

    @classmethod
    def parse(cls, value: "str | NotificationChannel") -> "NotificationChannel | None":
        """Coerce a raw value, returning None when it is not a known channel."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return None
