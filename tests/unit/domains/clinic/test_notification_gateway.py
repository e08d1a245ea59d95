# ============================================================================
# Tests for notification senders and gateway
# ============================================================================
"""Unit tests for EmailSender, SmsSender and NotificationGateway."""

from unittest.mock import AsyncMock, patch

import pytest

from mediflow.domains.clinic.domain.value_objects import MessageContent, NotificationChannel
from mediflow.domains.clinic.infrastructure.notification import (
    EmailSender,
    InvalidAddressError,
    NotificationDeliveryError,
    NotificationGateway,
    SmsSender,
)

CONTENT = MessageContent(body="Reminder body", subject="Reminder")


class TestSenders:
    """Tests for per-channel address validation."""

    @pytest.mark.parametrize("address", ["ann@example.com", "  ann.lee+clinic@mail.example.org "])
    def test_email_accepts_valid_addresses(self, address: str) -> None:
        assert EmailSender().validate_address(address) == address.strip()

    @pytest.mark.parametrize("address", ["", "ann", "ann@", "ann@example", "a b@example.com"])
    def test_email_rejects_invalid_addresses(self, address: str) -> None:
        with pytest.raises(InvalidAddressError):
            EmailSender().validate_address(address)

    def test_sms_normalizes_formatting(self) -> None:
        assert SmsSender().validate_address("+1 (555) 123-4567") == "+15551234567"

    @pytest.mark.parametrize("address", ["", "12345", "call me", "+1-555-CLINIC"])
    def test_sms_rejects_invalid_numbers(self, address: str) -> None:
        with pytest.raises(InvalidAddressError):
            SmsSender().validate_address(address)

    def test_invalid_address_error_code(self) -> None:
        error = InvalidAddressError("sms", "abc")
        assert isinstance(error, NotificationDeliveryError)
        assert error.code == "INVALID_ADDRESS"
        assert error.details == {"channel": "sms", "address": "abc"}

    @pytest.mark.asyncio
    async def test_simulated_latency_is_awaited(self) -> None:
        """Should sleep for the configured latency before completing."""
        with patch("mediflow.domains.clinic.infrastructure.notification.senders.asyncio.sleep") as sleep:
            sleep.return_value = None
            await EmailSender(latency_seconds=1.0).send("ann@example.com", CONTENT)
        sleep.assert_awaited_once_with(1.0)


class TestNotificationGateway:
    """Tests for routing and failure reporting."""

    @pytest.mark.asyncio
    async def test_send_email_succeeds(self, instant_gateway: NotificationGateway) -> None:
        assert await instant_gateway.send(NotificationChannel.EMAIL, "ann@example.com", CONTENT) is True

    @pytest.mark.asyncio
    async def test_send_sms_succeeds(self, instant_gateway: NotificationGateway) -> None:
        assert await instant_gateway.send(NotificationChannel.SMS, "+15551234567", CONTENT) is True

    @pytest.mark.asyncio
    async def test_invalid_address_returns_false(self, instant_gateway: NotificationGateway) -> None:
        """Should report invalid addresses as False instead of raising."""
        assert await instant_gateway.send(NotificationChannel.EMAIL, "not-an-email", CONTENT) is False
        assert await instant_gateway.send(NotificationChannel.SMS, "ann@example.com", CONTENT) is False

    @pytest.mark.asyncio
    async def test_transport_error_returns_false(self) -> None:
        sender = EmailSender()
        sender.deliver = AsyncMock(side_effect=NotificationDeliveryError("email", "ann@example.com"))
        gateway = NotificationGateway([sender])

        assert await gateway.send(NotificationChannel.EMAIL, "ann@example.com", CONTENT) is False

    @pytest.mark.asyncio
    async def test_unexpected_error_returns_false(self) -> None:
        sender = SmsSender()
        sender.deliver = AsyncMock(side_effect=ConnectionError("gateway down"))
        gateway = NotificationGateway([sender])

        assert await gateway.send(NotificationChannel.SMS, "+15551234567", CONTENT) is False

    @pytest.mark.asyncio
    async def test_unconfigured_channel_returns_false(self) -> None:
        gateway = NotificationGateway([EmailSender()])
        assert gateway.channels == [NotificationChannel.EMAIL]
        assert await gateway.send(NotificationChannel.SMS, "+15551234567", CONTENT) is False
