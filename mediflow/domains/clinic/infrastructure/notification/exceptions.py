"""Notification delivery errors.

Raised by senders; the gateway converts them into a False result.
"""

from mediflow.core.domain.exceptions import DomainException


class NotificationDeliveryError(DomainException):
    """Transport rejected or failed to deliver a message."""

    def __init__(self, channel: str, address: str, message: str | None = None):
        self.channel = channel
        self.address = address
        super().__init__(
            message or f"Failed to deliver {channel} message to {address}",
            "NOTIFICATION_DELIVERY_FAILED",
            {"channel": channel, "address": address},
        )


class InvalidAddressError(NotificationDeliveryError):
    """Address is not valid for the channel."""

    def __init__(self, channel: str, address: str):
        super().__init__(channel, address, f"Invalid {channel} address: {address!r}")
        self.code = "INVALID_ADDRESS"
