"""Clinic domain: patients, doctors, appointments and appointment reminders."""
