from fastapi import APIRouter

from mediflow.api.routes import appointments, doctors, patients, reminders

api_router = APIRouter()

# API routes (all have /api/v1 prefix from the app factory)
api_router.include_router(patients.router, prefix="/patients")
api_router.include_router(doctors.router, prefix="/doctors")
api_router.include_router(appointments.router, prefix="/appointments")
api_router.include_router(reminders.router, prefix="/reminders")
