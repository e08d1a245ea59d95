from .in_memory import (
    InMemoryAppointmentRepository,
    InMemoryDoctorRepository,
    InMemoryPatientRepository,
    InMemoryRepository,
)

__all__ = [
    "InMemoryRepository",
    "InMemoryPatientRepository",
    "InMemoryDoctorRepository",
    "InMemoryAppointmentRepository",
]
