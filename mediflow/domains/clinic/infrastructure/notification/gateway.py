# ============================================================================
# SCOPE: INFRASTRUCTURE LAYER (Clinic)
# Description: Notification gateway routing messages to channel senders.
# ============================================================================
"""Notification Gateway.

Implements INotificationChannel. Routes each message to the sender for its
channel and reports the outcome as a boolean, so a failing send never
propagates to sibling sends.
"""

import logging

from ...domain.value_objects import MessageContent, NotificationChannel
from .exceptions import NotificationDeliveryError
from .senders import ChannelSender, EmailSender, SmsSender

logger = logging.getLogger(__name__)


class NotificationGateway:
    """Routes notifications to Email/SMS senders."""

    def __init__(self, senders: list[ChannelSender]) -> None:
        self._senders: dict[NotificationChannel, ChannelSender] = {sender.channel: sender for sender in senders}

    @classmethod
    def simulated(cls, email_latency: float = 1.0, sms_latency: float = 0.5) -> "NotificationGateway":
        """Gateway with the simulated email and SMS senders."""
        return cls([EmailSender(latency_seconds=email_latency), SmsSender(latency_seconds=sms_latency)])

    @property
    def channels(self) -> list[NotificationChannel]:
        return list(self._senders)

    async def send(
        self,
        channel: NotificationChannel,
        address: str,
        content: MessageContent,
    ) -> bool:
        """Deliver one message.

        Returns:
            True on success, False on an unsupported channel, invalid
            address or transport failure.
        """
        sender = self._senders.get(channel)
        if sender is None:
            logger.warning(f"No sender configured for channel '{channel}'")
            return False

        try:
            await sender.send(address, content)
        except NotificationDeliveryError as e:
            logger.warning(f"{channel.display_name} delivery failed: {e.message}")
            return False
        except Exception as e:
            logger.error(f"Unexpected {channel.display_name} transport error for {address}: {e}", exc_info=True)
            return False

        logger.info(f"{channel.display_name} sent to {address}")
        return True
