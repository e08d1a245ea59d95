# ============================================================================
# SCOPE: API
# Description: Patient registry endpoints.
# ============================================================================
"""
Patients API.

API Prefix: /api/v1/patients
"""

import logging

from fastapi import APIRouter, Depends, status

from mediflow.api.dependencies import get_patient_repository
from mediflow.api.schemas.records import PatientCreate, PatientResponse, PatientUpdate
from mediflow.domains.clinic.domain.entities import Patient
from mediflow.domains.clinic.infrastructure.repositories import InMemoryPatientRepository

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Patients"])


def _to_response(patient: Patient) -> PatientResponse:
    return PatientResponse.model_validate(patient)


@router.get("", response_model=list[PatientResponse])
async def list_patients(
    repository: InMemoryPatientRepository = Depends(get_patient_repository),  # noqa: B008
):
    """List all patients."""
    return [_to_response(patient) for patient in await repository.list_all()]


@router.post("", response_model=PatientResponse, status_code=status.HTTP_201_CREATED)
async def create_patient(
    data: PatientCreate,
    repository: InMemoryPatientRepository = Depends(get_patient_repository),  # noqa: B008
):
    """Register a patient."""
    patient = await repository.add(Patient(**data.model_dump()))
    logger.info(f"Registered patient {patient.id}")
    return _to_response(patient)


@router.get("/{patient_id}", response_model=PatientResponse)
async def get_patient(
    patient_id: int,
    repository: InMemoryPatientRepository = Depends(get_patient_repository),  # noqa: B008
):
    """Get a patient by id."""
    return _to_response(await repository.get_by_id(patient_id))


@router.put("/{patient_id}", response_model=PatientResponse)
async def update_patient(
    patient_id: int,
    data: PatientUpdate,
    repository: InMemoryPatientRepository = Depends(get_patient_repository),  # noqa: B008
):
    """Update a patient. Only fields sent are changed."""
    patient = await repository.get_by_id(patient_id)
    for name, value in data.model_dump(exclude_unset=True).items():
        if value is not None or name == "date_of_birth":
            setattr(patient, name, value)
    return _to_response(await repository.save(patient))
