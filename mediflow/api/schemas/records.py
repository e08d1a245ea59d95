# ============================================================================
# SCOPE: API
# Description: Pydantic schemas for patient, doctor and appointment records.
# ============================================================================
"""
Record API Schemas.

Request and response models for:
- Patients
- Doctors
- Appointments and their reminder settings
"""

import datetime as dt

from pydantic import BaseModel, ConfigDict, Field

from mediflow.domains.clinic.domain.value_objects import AppointmentStatus, NotificationChannel

# ============================================================================
# Patient Schemas
# ============================================================================


class PatientCreate(BaseModel):
    """Schema for registering a patient."""

    name: str = Field(..., min_length=1, description="Full name")
    email: str = Field(default="", description="Email address")
    phone: str = Field(default="", description="Phone number")
    date_of_birth: dt.date | None = Field(default=None, description="Date of birth")
    address: str = Field(default="", description="Postal address")


class PatientUpdate(BaseModel):
    """Schema for updating a patient."""

    name: str | None = Field(default=None, min_length=1)
    email: str | None = None
    phone: str | None = None
    date_of_birth: dt.date | None = None
    address: str | None = None


class PatientResponse(BaseModel):
    """Schema for patient API response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str
    phone: str
    date_of_birth: dt.date | None = None
    address: str


# ============================================================================
# Doctor Schemas
# ============================================================================


class DoctorCreate(BaseModel):
    """Schema for adding a doctor to the roster."""

    name: str = Field(..., min_length=1, description="Full name")
    email: str = Field(default="", description="Email address")
    phone: str = Field(default="", description="Phone number")
    specialty: str = Field(default="", description="Medical specialty")


class DoctorUpdate(BaseModel):
    """Schema for updating a doctor."""

    name: str | None = Field(default=None, min_length=1)
    email: str | None = None
    phone: str | None = None
    specialty: str | None = None


class DoctorResponse(BaseModel):
    """Schema for doctor API response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str
    phone: str
    specialty: str


# ============================================================================
# Appointment Schemas
# ============================================================================


class ReminderSettingsSchema(BaseModel):
    """Reminder configuration of an appointment."""

    model_config = ConfigDict(from_attributes=True)

    patient_reminders: list[str] = Field(default_factory=list, description="Offset codes, e.g. ['24h', '1h']")
    doctor_reminders: list[str] = Field(default_factory=list, description="Offset codes for the doctor")
    notification_methods: list[NotificationChannel] | None = Field(
        default=None, description="Patient channels; email when omitted"
    )


class AppointmentCreate(BaseModel):
    """Schema for booking an appointment."""

    patient_id: int
    doctor_id: int
    date: dt.date
    time: dt.time
    reason: str = ""
    notes: str = ""
    status: AppointmentStatus = AppointmentStatus.PENDING
    reminder_settings: ReminderSettingsSchema | None = None


class AppointmentUpdate(BaseModel):
    """Schema for updating an appointment. Only fields sent are applied."""

    patient_id: int | None = None
    doctor_id: int | None = None
    date: dt.date | None = None
    time: dt.time | None = None
    reason: str | None = None
    notes: str | None = None
    status: AppointmentStatus | None = None
    reminder_settings: ReminderSettingsSchema | None = None


class AppointmentResponse(BaseModel):
    """Schema for appointment API response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    patient_id: int
    doctor_id: int
    date: dt.date
    time: dt.time
    reason: str
    notes: str
    status: AppointmentStatus
    reminder_settings: ReminderSettingsSchema | None = None
