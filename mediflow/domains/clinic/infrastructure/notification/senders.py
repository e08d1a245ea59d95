# ============================================================================
# SCOPE: INFRASTRUCTURE LAYER (Clinic)
# Description: Simulated email and SMS senders.
# ============================================================================
"""Channel senders.

Each sender validates the address for its medium and hands the message to
the transport. The transport is simulated: the message is logged and the
send completes after a configurable latency.
"""

import asyncio
import logging
import re
from abc import ABC, abstractmethod

from ...domain.value_objects import MessageContent, NotificationChannel
from .exceptions import InvalidAddressError

logger = logging.getLogger(__name__)

EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
PHONE_PATTERN = re.compile(r"^\+?[0-9]{7,15}$")


class ChannelSender(ABC):
    """Base class for a single delivery medium."""

    channel: NotificationChannel

    def __init__(self, latency_seconds: float = 0.0) -> None:
        self._latency_seconds = latency_seconds

    @abstractmethod
    def validate_address(self, address: str) -> str:
        """Return the normalized address or raise InvalidAddressError."""

    @abstractmethod
    async def deliver(self, address: str, content: MessageContent) -> None:
        """Hand a message with a validated address to the transport."""

    async def send(self, address: str, content: MessageContent) -> None:
        """Validate the address and deliver.

        Raises:
            InvalidAddressError: If the address is malformed.
            NotificationDeliveryError: If the transport fails.
        """
        normalized = self.validate_address(address)
        await self.deliver(normalized, content)

    async def _simulate_latency(self) -> None:
        if self._latency_seconds > 0:
            await asyncio.sleep(self._latency_seconds)


class EmailSender(ChannelSender):
    """Email sender (simulated mail relay)."""

    channel = NotificationChannel.EMAIL

    def validate_address(self, address: str) -> str:
        normalized = address.strip()
        if not EMAIL_PATTERN.match(normalized):
            raise InvalidAddressError(self.channel.value, address)
        return normalized

    async def deliver(self, address: str, content: MessageContent) -> None:
        logger.info(f"Sending email to: {address}")
        logger.info(f"Subject: {content.subject or ''}")
        logger.debug(f"Body: {content.body}")
        await self._simulate_latency()


class SmsSender(ChannelSender):
    """SMS sender (simulated SMS gateway)."""

    channel = NotificationChannel.SMS

    def validate_address(self, address: str) -> str:
        normalized = re.sub(r"[\s\-().]", "", address)
        if not PHONE_PATTERN.match(normalized):
            raise InvalidAddressError(self.channel.value, address)
        return normalized

    async def deliver(self, address: str, content: MessageContent) -> None:
        logger.info(f"Sending SMS to: {address}")
        logger.debug(f"Message: {content.body}")
        await self._simulate_latency()
