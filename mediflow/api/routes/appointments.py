# ============================================================================
# SCOPE: API
# Description: Appointment endpoints. Creating, updating and deleting an
#              appointment arms or cancels its reminders.
# ============================================================================
"""
Appointments API.

API Prefix: /api/v1/appointments
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from mediflow.api.dependencies import get_appointment_service
from mediflow.api.schemas.records import AppointmentCreate, AppointmentResponse, AppointmentUpdate
from mediflow.domains.clinic.application.services import AppointmentService
from mediflow.domains.clinic.domain.entities import Appointment, ReminderSettings

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Appointments"])


@router.get("", response_model=list[AppointmentResponse])
async def list_appointments(
    service: AppointmentService = Depends(get_appointment_service),  # noqa: B008
):
    """List all appointments."""
    return [AppointmentResponse.model_validate(a) for a in await service.list_appointments()]


@router.post("", response_model=AppointmentResponse, status_code=status.HTTP_201_CREATED)
async def create_appointment(
    data: AppointmentCreate,
    service: AppointmentService = Depends(get_appointment_service),  # noqa: B008
):
    """Book an appointment and arm its reminders."""
    values = data.model_dump(exclude={"reminder_settings"})
    reminder_settings = (
        ReminderSettings.from_dict(data.reminder_settings.model_dump()) if data.reminder_settings else None
    )
    appointment = await service.create_appointment(Appointment(**values, reminder_settings=reminder_settings))
    return AppointmentResponse.model_validate(appointment)


@router.get("/{appointment_id}", response_model=AppointmentResponse)
async def get_appointment(
    appointment_id: int,
    service: AppointmentService = Depends(get_appointment_service),  # noqa: B008
):
    """Get an appointment by id."""
    return AppointmentResponse.model_validate(await service.get_appointment(appointment_id))


@router.put("/{appointment_id}", response_model=AppointmentResponse)
async def update_appointment(
    appointment_id: int,
    data: AppointmentUpdate,
    service: AppointmentService = Depends(get_appointment_service),  # noqa: B008
):
    """Update an appointment.

    Sending `reminder_settings` (even unchanged) re-arms the reminders.
    """
    changes = data.model_dump(exclude_unset=True)
    appointment = await service.update_appointment(appointment_id, changes)
    return AppointmentResponse.model_validate(appointment)


@router.delete("/{appointment_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_appointment(
    appointment_id: int,
    service: AppointmentService = Depends(get_appointment_service),  # noqa: B008
):
    """Delete an appointment and cancel its reminders."""
    if not await service.delete_appointment(appointment_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Appointment {appointment_id} not found",
        )
