# ============================================================================
# SCOPE: INFRASTRUCTURE LAYER (Clinic)
# Description: Notification delivery (simulated email/SMS transport).
# ============================================================================
from .exceptions import InvalidAddressError, NotificationDeliveryError
from .gateway import NotificationGateway
from .senders import ChannelSender, EmailSender, SmsSender

__all__ = [
    "ChannelSender",
    "EmailSender",
    "SmsSender",
    "NotificationGateway",
    "NotificationDeliveryError",
    "InvalidAddressError",
]
