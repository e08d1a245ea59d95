"""
FastAPI dependencies.

Resolve collaborators from the dependency container attached to the
running application.
"""

from fastapi import Depends, Request

from mediflow.core.container import DependencyContainer
from mediflow.domains.clinic.application.services import AppointmentService, ReminderService
from mediflow.domains.clinic.infrastructure.repositories import (
    InMemoryDoctorRepository,
    InMemoryPatientRepository,
)


def get_di_container(request: Request) -> DependencyContainer:
    """Get the application's dependency container."""
    return request.app.state.container


def get_patient_repository(
    container: DependencyContainer = Depends(get_di_container),  # noqa: B008
) -> InMemoryPatientRepository:
    return container.patients


def get_doctor_repository(
    container: DependencyContainer = Depends(get_di_container),  # noqa: B008
) -> InMemoryDoctorRepository:
    return container.doctors


def get_reminder_service(
    container: DependencyContainer = Depends(get_di_container),  # noqa: B008
) -> ReminderService:
    return container.reminder_service


def get_appointment_service(
    container: DependencyContainer = Depends(get_di_container),  # noqa: B008
) -> AppointmentService:
    return container.appointment_service
