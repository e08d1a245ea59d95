"""
Shared pytest fixtures for all tests.

Provides record fixtures, a deterministic manual timer that replaces
APScheduler, a fixed clock and a fully wired reminder scheduler.
"""

import os
from datetime import datetime
from unittest.mock import AsyncMock

import pytest
import pytest_asyncio
from pytz import timezone

from mediflow.domains.clinic.domain.entities import Appointment, Doctor, Patient
from mediflow.domains.clinic.infrastructure.notification import NotificationGateway
from mediflow.domains.clinic.infrastructure.repositories import (
    InMemoryAppointmentRepository,
    InMemoryDoctorRepository,
    InMemoryPatientRepository,
)
from mediflow.domains.clinic.infrastructure.scheduler import ReminderRegistry, ReminderScheduler
from mediflow.domains.clinic.infrastructure.templates import TemplateStore

# Ensure test environment
os.environ["ENVIRONMENT"] = "test"

CLINIC_TZ = "America/New_York"
CLINIC_NAME = "Test Clinic"


# ============================================================================
# MANUAL TIMER
# ============================================================================


class ManualHandle:
    """Handle of a trigger armed on the ManualTimer."""

    def __init__(self, delay_seconds: float, callback, name: str, on_missed=None) -> None:
        self.delay_seconds = delay_seconds
        self.callback = callback
        self.name = name
        self.on_missed = on_missed
        self.canceled = False
        self.fired = False
        self.missed = False

    @property
    def pending(self) -> bool:
        return not (self.canceled or self.fired or self.missed)

    def cancel(self) -> bool:
        if not self.pending:
            return False
        self.canceled = True
        return True


class ManualTimer:
    """Timer whose triggers only run when a test fires them."""

    def __init__(self) -> None:
        self.handles: list[ManualHandle] = []
        self.started = False

    def arm(self, delay_seconds: float, callback, name: str = "", on_missed=None) -> ManualHandle:
        handle = ManualHandle(delay_seconds, callback, name, on_missed)
        self.handles.append(handle)
        return handle

    @property
    def pending(self) -> list[ManualHandle]:
        return [h for h in self.handles if h.pending]

    def pending_named(self, name: str) -> list[ManualHandle]:
        return [h for h in self.pending if h.name == name]

    async def fire(self, handle: ManualHandle) -> None:
        assert handle.pending, f"trigger '{handle.name}' is not pending"
        handle.fired = True
        await handle.callback()

    async def fire_all(self) -> None:
        for handle in sorted(self.pending, key=lambda h: h.delay_seconds):
            await self.fire(handle)

    def miss(self, handle: ManualHandle) -> None:
        """Drop a pending trigger the way a late timer does."""
        assert handle.pending, f"trigger '{handle.name}' is not pending"
        handle.missed = True
        if handle.on_missed is not None:
            handle.on_missed()

    async def start(self) -> None:
        self.started = True

    async def stop(self) -> None:
        self.started = False


# ============================================================================
# CLOCK
# ============================================================================


@pytest.fixture
def clinic_tz():
    return timezone(CLINIC_TZ)


@pytest.fixture
def now(clinic_tz) -> datetime:
    """Fixed current time: 2025-03-09 09:00 clinic time."""
    return clinic_tz.localize(datetime(2025, 3, 9, 9, 0))


# ============================================================================
# RECORDS
# ============================================================================


@pytest.fixture
def patient_repository() -> InMemoryPatientRepository:
    return InMemoryPatientRepository()


@pytest.fixture
def doctor_repository() -> InMemoryDoctorRepository:
    return InMemoryDoctorRepository()


@pytest.fixture
def appointment_repository() -> InMemoryAppointmentRepository:
    return InMemoryAppointmentRepository()


@pytest_asyncio.fixture
async def patient(patient_repository) -> Patient:
    return await patient_repository.add(
        Patient(name="John Doe", email="john.doe@example.com", phone="+1 (555) 123-4567")
    )


@pytest_asyncio.fixture
async def doctor(doctor_repository) -> Doctor:
    return await doctor_repository.add(
        Doctor(name="Dr. Smith", email="smith@clinic.example.com", phone="+15559876543", specialty="Cardiology")
    )


@pytest.fixture
def make_appointment(patient, doctor):
    """Factory for appointments between the patient and doctor fixtures."""

    def _make(**overrides) -> Appointment:
        values = {
            "id": 1,
            "patient_id": patient.id,
            "doctor_id": doctor.id,
            "date": datetime(2025, 3, 10).date(),
            "time": datetime(2025, 3, 10, 10, 0).time(),
            "reason": "Regular Checkup",
        }
        values.update(overrides)
        return Appointment(**values)

    return _make


# ============================================================================
# REMINDER STACK
# ============================================================================


@pytest.fixture
def manual_timer() -> ManualTimer:
    return ManualTimer()


@pytest.fixture
def template_store() -> TemplateStore:
    return TemplateStore()


@pytest.fixture
def notification_channel() -> AsyncMock:
    """Notification channel mock that accepts every message."""
    channel = AsyncMock()
    channel.send.return_value = True
    return channel


@pytest.fixture
def instant_gateway() -> NotificationGateway:
    """Simulated gateway without send latency."""
    return NotificationGateway.simulated(email_latency=0, sms_latency=0)


@pytest.fixture
def scheduler(
    patient_repository,
    doctor_repository,
    template_store,
    notification_channel,
    manual_timer,
    now,
) -> ReminderScheduler:
    return ReminderScheduler(
        patient_lookup=patient_repository,
        doctor_lookup=doctor_repository,
        template_store=template_store,
        notification_channel=notification_channel,
        timer=manual_timer,
        registry=ReminderRegistry(),
        timezone_name=CLINIC_TZ,
        clinic_name=CLINIC_NAME,
        clock=lambda: now,
    )
