# ============================================================================
# SCOPE: GLOBAL
# Description: Dependency container wiring the clinic reminder stack.
# ============================================================================
"""
Dependency Container.

Creates each collaborator once and hands out the same instance afterwards:
repositories, template store, notification gateway, timer, reminder
scheduler and the application services built on top of them.
"""

import logging

from mediflow.config.settings import Settings, get_settings
from mediflow.domains.clinic.application.services import AppointmentService, ReminderService
from mediflow.domains.clinic.infrastructure.notification import NotificationGateway
from mediflow.domains.clinic.infrastructure.repositories import (
    InMemoryAppointmentRepository,
    InMemoryDoctorRepository,
    InMemoryPatientRepository,
)
from mediflow.domains.clinic.infrastructure.scheduler import (
    APSchedulerTimer,
    ReminderRegistry,
    ReminderScheduler,
)
from mediflow.domains.clinic.infrastructure.templates import TemplateStore

logger = logging.getLogger(__name__)


class DependencyContainer:
    """
    Container for application singletons.

    Any collaborator may be passed in explicitly (tests swap the timer and
    the gateway); the rest are built lazily from settings.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        timer=None,
        notification_gateway: NotificationGateway | None = None,
    ):
        """
        Initialize container.

        Args:
            settings: Application settings (uses default if not provided)
            timer: Timer exposing arm/start/stop (APSchedulerTimer by default)
            notification_gateway: Gateway override (simulated senders by default)
        """
        self.settings = settings or get_settings()

        self.patients = InMemoryPatientRepository()
        self.doctors = InMemoryDoctorRepository()
        self.appointments = InMemoryAppointmentRepository()
        self.template_store = TemplateStore()
        self.registry = ReminderRegistry()

        self._timer = timer
        self._gateway = notification_gateway
        self._scheduler: ReminderScheduler | None = None
        self._reminder_service: ReminderService | None = None
        self._appointment_service: AppointmentService | None = None

        logger.info("DependencyContainer initialized")

    @property
    def timer(self):
        """Get the timer (singleton)."""
        if self._timer is None:
            self._timer = APSchedulerTimer(
                timezone_name=self.settings.CLINIC_TIMEZONE,
                misfire_grace_seconds=self.settings.REMINDER_MISFIRE_GRACE_SECONDS,
                enabled=self.settings.REMINDERS_ENABLED,
            )
        return self._timer

    @property
    def notification_gateway(self) -> NotificationGateway:
        """Get the notification gateway (singleton)."""
        if self._gateway is None:
            self._gateway = NotificationGateway.simulated(
                email_latency=self.settings.EMAIL_SEND_LATENCY_SECONDS,
                sms_latency=self.settings.SMS_SEND_LATENCY_SECONDS,
            )
        return self._gateway

    @property
    def reminder_scheduler(self) -> ReminderScheduler:
        """Get the reminder scheduler (singleton)."""
        if self._scheduler is None:
            self._scheduler = ReminderScheduler(
                patient_lookup=self.patients,
                doctor_lookup=self.doctors,
                template_store=self.template_store,
                notification_channel=self.notification_gateway,
                timer=self.timer,
                registry=self.registry,
                timezone_name=self.settings.CLINIC_TIMEZONE,
                clinic_name=self.settings.CLINIC_NAME,
                enabled=self.settings.REMINDERS_ENABLED,
            )
        return self._scheduler

    @property
    def reminder_service(self) -> ReminderService:
        """Get the reminder service (singleton)."""
        if self._reminder_service is None:
            self._reminder_service = ReminderService(
                scheduler=self.reminder_scheduler,
                template_store=self.template_store,
                notification_channel=self.notification_gateway,
                clinic_name=self.settings.CLINIC_NAME,
            )
        return self._reminder_service

    @property
    def appointment_service(self) -> AppointmentService:
        """Get the appointment service (singleton)."""
        if self._appointment_service is None:
            self._appointment_service = AppointmentService(
                appointments=self.appointments,
                patients=self.patients,
                doctors=self.doctors,
                reminders=self.reminder_service,
            )
        return self._appointment_service


# Global container instance
_container: DependencyContainer | None = None


def get_container() -> DependencyContainer:
    """Get or create the global dependency container."""
    global _container
    if _container is None:
        _container = DependencyContainer()
    return _container


def reset_container() -> None:
    """Drop the global container (used by tests)."""
    global _container
    _container = None
