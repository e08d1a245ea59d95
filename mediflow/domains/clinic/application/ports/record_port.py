# ============================================================================
# SCOPE: APPLICATION LAYER (Clinic)
# Description: Appointment repository port (DIP compliant).
# ============================================================================
"""Appointment Repository Port."""

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from ...domain.entities import Appointment


@runtime_checkable
class IAppointmentRepository(Protocol):
    """Interface for appointment persistence.

    Implementations: InMemoryAppointmentRepository
    """

    async def get_by_id(self, appointment_id: int) -> "Appointment": ...

    async def list_all(self) -> list["Appointment"]: ...

    async def add(self, appointment: "Appointment") -> "Appointment": ...

    async def save(self, appointment: "Appointment") -> "Appointment": ...

    async def delete(self, appointment_id: int) -> bool: ...
