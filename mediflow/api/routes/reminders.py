# ============================================================================
# SCOPE: API
# Description: Reminder templates, time options, test sends and armed
#              reminder inspection.
# ============================================================================
"""
Reminders API.

Provides endpoints for:
- Supported reminder lead times
- Reading and replacing message templates
- Sending a test notification
- Listing, re-arming and cancelling appointment reminders

API Prefix: /api/v1/reminders
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Query, status

from mediflow.api.dependencies import get_appointment_service, get_reminder_service
from mediflow.api.schemas.reminders import (
    CancelResultResponse,
    NotificationTestRequest,
    NotificationTestResponse,
    ReminderTimeOptionResponse,
    ScheduledReminderResponse,
    ScheduleResultResponse,
    TemplateResponse,
    TemplateUpdate,
)
from mediflow.domains.clinic.application.services import AppointmentService, ReminderService
from mediflow.domains.clinic.domain.value_objects import MessageTemplate, NotificationChannel, RecipientType

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Reminders"])


# ============================================================================
# HELPERS
# ============================================================================


def _parse_slot(recipient_type: str, channel: str) -> tuple[RecipientType, NotificationChannel]:
    """Parse a template slot, 404 when either part is unknown."""
    role = RecipientType.parse(recipient_type)
    medium = NotificationChannel.parse(channel)
    if role is None or medium is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Unknown template slot: {recipient_type}/{channel}",
        )
    return role, medium


def _template_to_response(template: MessageTemplate) -> TemplateResponse:
    return TemplateResponse(
        recipient_type=template.recipient_type,
        channel=template.channel,
        subject=template.subject,
        body=template.body,
    )


# ============================================================================
# CATALOG AND TEMPLATES
# ============================================================================


@router.get("/time-options", response_model=list[ReminderTimeOptionResponse])
async def get_time_options(
    service: ReminderService = Depends(get_reminder_service),  # noqa: B008
):
    """Supported reminder lead times, longest first."""
    return service.get_reminder_time_options()


@router.get("/templates", response_model=list[TemplateResponse])
async def list_templates(
    service: ReminderService = Depends(get_reminder_service),  # noqa: B008
):
    """All message templates."""
    return [_template_to_response(t) for t in service.list_templates()]


@router.get("/templates/{recipient_type}/{channel}", response_model=TemplateResponse)
async def get_template(
    recipient_type: str,
    channel: str,
    service: ReminderService = Depends(get_reminder_service),  # noqa: B008
):
    """Get the template of one slot."""
    role, medium = _parse_slot(recipient_type, channel)
    template = service.get_template(role, medium)
    if template is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Template not found")
    return _template_to_response(template)


@router.put("/templates/{recipient_type}/{channel}", response_model=TemplateResponse)
async def update_template(
    recipient_type: str,
    channel: str,
    data: TemplateUpdate,
    service: ReminderService = Depends(get_reminder_service),  # noqa: B008
):
    """Replace the template of one slot."""
    role, medium = _parse_slot(recipient_type, channel)
    template = MessageTemplate(
        recipient_type=role,
        channel=medium,
        body=data.body,
        subject=data.subject if medium.has_subject else None,
    )
    if not service.update_template(role, medium, template):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Template slot not found")
    return _template_to_response(template)


@router.post("/test", response_model=NotificationTestResponse)
async def send_test_notification(
    data: NotificationTestRequest,
    service: ReminderService = Depends(get_reminder_service),  # noqa: B008
):
    """Render a template with sample values and send it to an address."""
    success = await service.test_notification(data.recipient_type, data.channel, data.address, data.variables)
    return NotificationTestResponse(success=success)


# ============================================================================
# ARMED REMINDERS
# ============================================================================


@router.get("/scheduled", response_model=list[ScheduledReminderResponse])
async def list_scheduled_reminders(
    appointment_id: int | None = Query(None, description="Only reminders of this appointment"),
    service: ReminderService = Depends(get_reminder_service),  # noqa: B008
):
    """Armed reminders ordered by fire time."""
    return [ScheduledReminderResponse.model_validate(r.to_dict()) for r in service.list_scheduled(appointment_id)]


@router.post("/appointments/{appointment_id}/schedule", response_model=ScheduleResultResponse)
async def schedule_appointment_reminders(
    appointment_id: int,
    reminders: ReminderService = Depends(get_reminder_service),  # noqa: B008
    appointments: AppointmentService = Depends(get_appointment_service),  # noqa: B008
):
    """Arm (or re-arm) the reminders of an appointment."""
    appointment = await appointments.get_appointment(appointment_id)
    scheduled = await reminders.schedule_reminders(appointment)
    return ScheduleResultResponse(
        appointment_id=appointment_id,
        scheduled=scheduled,
        reminders=[
            ScheduledReminderResponse.model_validate(r.to_dict()) for r in reminders.list_scheduled(appointment_id)
        ],
    )


@router.delete("/appointments/{appointment_id}", response_model=CancelResultResponse)
async def cancel_appointment_reminders(
    appointment_id: int,
    service: ReminderService = Depends(get_reminder_service),  # noqa: B008
):
    """Cancel every armed reminder of an appointment."""
    return CancelResultResponse(appointment_id=appointment_id, canceled=service.cancel_reminders(appointment_id))
