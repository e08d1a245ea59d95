# ============================================================================
# SCOPE: APPLICATION LAYER (Clinic)
# Description: Notification channel port (DIP compliant).
# ============================================================================
"""Notification Channel Port.

Defines the interface the reminder scheduler uses to deliver messages.
The transport behind it (mail relay, SMS gateway) is an external system.
"""

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from ...domain.value_objects import MessageContent, NotificationChannel


@runtime_checkable
class INotificationChannel(Protocol):
    """Interface for notification delivery.

    Implementations: NotificationGateway

    `send` reports failure by returning False; it must not raise for
    invalid addresses or transport errors.
    """

    async def send(
        self,
        channel: "NotificationChannel",
        address: str,
        content: "MessageContent",
    ) -> bool:
        """Deliver one message.

        Args:
            channel: Email or SMS.
            address: Email address or phone number.
            content: Rendered subject/body.

        Returns:
            True if the message was accepted by the transport.
        """
        ...
