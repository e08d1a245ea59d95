# ============================================================================
# SCOPE: APPLICATION LAYER (Clinic)
# Description: Recipient and record lookup ports (DIP compliant).
# ============================================================================
"""Recipient Lookup Ports.

The reminder scheduler resolves the patient and doctor of an appointment
through these interfaces. Lookups raise EntityNotFoundException when the
id is unknown.
"""

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from ...domain.entities import Doctor, Patient


@runtime_checkable
class Recipient(Protocol):
    """Anything a reminder can be addressed to.

    Implementations: Patient, Doctor
    """

    @property
    def display_name(self) -> str: ...

    @property
    def email_address(self) -> str | None: ...

    @property
    def phone_address(self) -> str | None: ...


@runtime_checkable
class IPatientLookup(Protocol):
    """Interface for resolving patients by id.

    Implementations: InMemoryPatientRepository
    """

    async def get_by_id(self, patient_id: int) -> "Patient":
        """Get a patient.

        Args:
            patient_id: Patient identifier.

        Returns:
            Patient entity.

        Raises:
            EntityNotFoundException: If no patient has this id.
        """
        ...


@runtime_checkable
class IDoctorLookup(Protocol):
    """Interface for resolving doctors by id.

    Implementations: InMemoryDoctorRepository
    """

    async def get_by_id(self, doctor_id: int) -> "Doctor":
        """Get a doctor.

        Args:
            doctor_id: Doctor identifier.

        Returns:
            Doctor entity.

        Raises:
            EntityNotFoundException: If no doctor has this id.
        """
        ...
