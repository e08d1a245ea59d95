# ============================================================================
# SCOPE: API
# Description: Pydantic schemas for reminder templates and scheduling.
# ============================================================================
"""
Reminder API Schemas.

Request and response models for:
- Reminder time options
- Message templates
- Test notifications
- Armed reminders
"""

import datetime as dt
from typing import Any

from pydantic import BaseModel, Field

from mediflow.domains.clinic.domain.value_objects import NotificationChannel, RecipientType


class ReminderTimeOptionResponse(BaseModel):
    """A supported reminder lead time."""

    code: str
    label: str
    hours_before: float


class TemplateResponse(BaseModel):
    """Schema for message template API response."""

    recipient_type: RecipientType
    channel: NotificationChannel
    subject: str | None = None
    body: str


class TemplateUpdate(BaseModel):
    """Schema for replacing a message template."""

    subject: str | None = Field(default=None, description="Email subject; ignored for SMS")
    body: str = Field(..., description="Message body with {placeholder} variables")


class NotificationTestRequest(BaseModel):
    """Schema for sending a test notification."""

    recipient_type: str = Field(..., description="patient or doctor")
    channel: str = Field(..., description="email or sms")
    address: str = Field(..., min_length=1, description="Email address or phone number")
    variables: dict[str, Any] = Field(default_factory=dict, description="Placeholder overrides")


class NotificationTestResponse(BaseModel):
    success: bool


class ScheduledReminderResponse(BaseModel):
    """An armed reminder."""

    key: str
    appointment_id: int
    recipient_type: RecipientType
    offset_code: str
    fire_at: dt.datetime
    methods: list[NotificationChannel]
    correlation_id: str | None = None


class ScheduleResultResponse(BaseModel):
    """Outcome of (re)arming the reminders of one appointment."""

    appointment_id: int
    scheduled: bool
    reminders: list[ScheduledReminderResponse] = Field(default_factory=list)


class CancelResultResponse(BaseModel):
    appointment_id: int
    canceled: bool
