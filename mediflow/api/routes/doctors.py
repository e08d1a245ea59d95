# ============================================================================
# SCOPE: API
# Description: Doctor roster endpoints.
# ============================================================================
"""
Doctors API.

API Prefix: /api/v1/doctors
"""

import logging

from fastapi import APIRouter, Depends, status

from mediflow.api.dependencies import get_doctor_repository
from mediflow.api.schemas.records import DoctorCreate, DoctorResponse, DoctorUpdate
from mediflow.domains.clinic.domain.entities import Doctor
from mediflow.domains.clinic.infrastructure.repositories import InMemoryDoctorRepository

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Doctors"])


@router.get("", response_model=list[DoctorResponse])
async def list_doctors(
    repository: InMemoryDoctorRepository = Depends(get_doctor_repository),  # noqa: B008
):
    """List the doctor roster."""
    return [DoctorResponse.model_validate(doctor) for doctor in await repository.list_all()]


@router.post("", response_model=DoctorResponse, status_code=status.HTTP_201_CREATED)
async def create_doctor(
    data: DoctorCreate,
    repository: InMemoryDoctorRepository = Depends(get_doctor_repository),  # noqa: B008
):
    """Add a doctor."""
    doctor = await repository.add(Doctor(**data.model_dump()))
    logger.info(f"Added doctor {doctor.id}")
    return DoctorResponse.model_validate(doctor)


@router.get("/{doctor_id}", response_model=DoctorResponse)
async def get_doctor(
    doctor_id: int,
    repository: InMemoryDoctorRepository = Depends(get_doctor_repository),  # noqa: B008
):
    """Get a doctor by id."""
    return DoctorResponse.model_validate(await repository.get_by_id(doctor_id))


@router.put("/{doctor_id}", response_model=DoctorResponse)
async def update_doctor(
    doctor_id: int,
    data: DoctorUpdate,
    repository: InMemoryDoctorRepository = Depends(get_doctor_repository),  # noqa: B008
):
    """Update a doctor. Only fields sent are changed."""
    doctor = await repository.get_by_id(doctor_id)
    for name, value in data.model_dump(exclude_unset=True).items():
        if value is not None:
            setattr(doctor, name, value)
    return DoctorResponse.model_validate(await repository.save(doctor))
