# ============================================================================
# SCOPE: INFRASTRUCTURE LAYER (Clinic)
# Description: Per-appointment reminder scheduler.
# ============================================================================
"""Appointment Reminder Scheduler.

Turns the reminder settings of an appointment into timed message
dispatches and can fully undo them.

Flow:
- schedule_reminders(appointment): resolve patient and doctor, compute one
  fire time per configured offset, arm a trigger for each future one
- at fire time: render the recipient's templates with the snapshot taken
  when scheduling ran and send one message per configured channel
- cancel_reminders(appointment_id): cancel every armed trigger of the
  appointment
- a trigger the timer drops as missed removes its reminder unsent

Patient reminders use the appointment's notification methods (email when
none are configured). Doctor reminders are always email-only.
"""

import asyncio
import copy
import functools
import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import date, datetime
from typing import TYPE_CHECKING, Any

from pytz import timezone

from mediflow.core.request_context import get_correlation_id

from ...application.services.template_renderer import render
from ...domain.value_objects import (
    MessageContent,
    NotificationChannel,
    RecipientType,
    ReminderTimeCatalog,
)
from .reminder_registry import ReminderRegistry, ScheduledReminder

if TYPE_CHECKING:
    from ...application.ports import (
        IDoctorLookup,
        INotificationChannel,
        IPatientLookup,
        ITimer,
        Recipient,
    )
    from ...domain.entities import Appointment, Doctor, Patient
    from ..templates import TemplateStore

logger = logging.getLogger(__name__)

DOCTOR_REMINDER_METHODS: tuple[NotificationChannel, ...] = (NotificationChannel.EMAIL,)
DEFAULT_PATIENT_METHODS: tuple[NotificationChannel, ...] = (NotificationChannel.EMAIL,)


@dataclass(frozen=True)
class ReminderContext:
    """Appointment, patient and doctor as they were when scheduling ran."""

    appointment: "Appointment"
    patient: "Patient"
    doctor: "Doctor"

    def recipient(self, recipient_type: RecipientType) -> "Recipient":
        return self.patient if recipient_type is RecipientType.PATIENT else self.doctor


class ReminderScheduler:
    """Schedules, dispatches and cancels appointment reminders.

    Attributes:
        tz: Clinic timezone used to interpret appointment date and time.
        registry: Live set of armed reminders, owned by this scheduler.
    """

    def __init__(
        self,
        patient_lookup: "IPatientLookup",
        doctor_lookup: "IDoctorLookup",
        template_store: "TemplateStore",
        notification_channel: "INotificationChannel",
        timer: "ITimer",
        registry: ReminderRegistry | None = None,
        timezone_name: str = "UTC",
        clinic_name: str = "",
        clock: Callable[[], datetime] | None = None,
        enabled: bool = True,
    ):
        """Initialize scheduler.

        Args:
            patient_lookup: Resolves appointment patients.
            doctor_lookup: Resolves appointment doctors.
            template_store: Source of reminder templates.
            notification_channel: Delivery gateway.
            timer: Arms deferred triggers.
            registry: Armed-reminder registry (a fresh one if omitted).
            timezone_name: Clinic timezone.
            clinic_name: Value of the {clinicName} placeholder.
            clock: Returns the current aware time (defaults to now in tz).
            enabled: When False, scheduling is a logged no-op and nothing
                is armed.
        """
        self._patients = patient_lookup
        self._doctors = doctor_lookup
        self._templates = template_store
        self._channel = notification_channel
        self._timer = timer
        self.registry = registry if registry is not None else ReminderRegistry()
        self.tz = timezone(timezone_name)
        self._clinic_name = clinic_name
        self._clock = clock or (lambda: datetime.now(self.tz))
        self.enabled = enabled

    # =========================================================================
    # Scheduling
    # =========================================================================

    async def schedule_reminders(self, appointment: "Appointment") -> bool:
        """Arm reminders for an appointment.

        Re-scheduling the same appointment replaces existing triggers with
        the same key instead of duplicating them. Offsets whose fire time is
        not in the future are skipped.

        Returns:
            False if the patient/doctor lookup failed or the appointment has
            no usable date/time; True otherwise (even when nothing was armed).
        """
        if not self.enabled:
            logger.warning(f"Reminders are disabled, not scheduling appointment {appointment.id}")
            return True

        try:
            patient, doctor = await asyncio.gather(
                self._patients.get_by_id(appointment.patient_id),
                self._doctors.get_by_id(appointment.doctor_id),
            )
        except Exception as e:
            logger.error(f"Failed to schedule reminders for appointment {appointment.id}: {e}")
            return False

        settings = appointment.reminder_settings
        if settings is None or not settings.has_reminders:
            logger.debug(f"No reminders configured for appointment {appointment.id}")
            return True

        try:
            appointment_at = appointment.starts_at(self.tz)
            now = self._clock()
            context = ReminderContext(
                appointment=copy.deepcopy(appointment),
                patient=copy.deepcopy(patient),
                doctor=copy.deepcopy(doctor),
            )

            if settings.notification_methods is not None:
                patient_methods = list(settings.notification_methods)
            else:
                patient_methods = list(DEFAULT_PATIENT_METHODS)

            armed = self._arm_for_recipient(
                context, RecipientType.PATIENT, settings.patient_reminders, patient_methods, appointment_at, now
            )
            armed += self._arm_for_recipient(
                context,
                RecipientType.DOCTOR,
                settings.doctor_reminders,
                list(DOCTOR_REMINDER_METHODS),
                appointment_at,
                now,
            )
        except Exception as e:
            logger.error(f"Error scheduling reminders for appointment {appointment.id}: {e}", exc_info=True)
            return False

        logger.info(f"Armed {armed} reminder(s) for appointment {appointment.id}")
        return True

    def _arm_for_recipient(
        self,
        context: ReminderContext,
        recipient_type: RecipientType,
        offset_codes: list[str],
        methods: list[NotificationChannel],
        appointment_at: datetime,
        now: datetime,
    ) -> int:
        armed = 0
        appointment_id = context.appointment.id

        for code in offset_codes:
            offset = ReminderTimeCatalog.lookup(code)
            if offset is None:
                logger.warning(f"Unknown reminder offset '{code}' for appointment {appointment_id}, skipping")
                continue

            fire_at = self.tz.normalize(appointment_at - offset.delta)
            if fire_at <= now:
                logger.debug(f"Reminder {code} for appointment {appointment_id} is past due, skipping")
                continue

            reminder = ScheduledReminder(
                key=ReminderRegistry.make_key(appointment_id, recipient_type, code),
                appointment_id=appointment_id,
                recipient_type=recipient_type,
                offset_code=code,
                fire_at=fire_at,
                methods=list(methods),
                correlation_id=get_correlation_id(),
            )
            self._arm(reminder, context, delay_seconds=(fire_at - now).total_seconds())
            armed += 1

        return armed

    def _arm(self, reminder: ScheduledReminder, context: ReminderContext, delay_seconds: float) -> None:
        """Register a reminder, replacing any pending trigger with the same key."""
        previous = self.registry.get(reminder.key)
        if previous is not None and previous.handle is not None:
            previous.handle.cancel()

        reminder.handle = self._timer.arm(
            delay_seconds,
            functools.partial(self._fire, reminder, context),
            name=reminder.key,
            on_missed=functools.partial(self._expire, reminder),
        )
        self.registry.put(reminder)

        logger.debug(f"Reminder '{reminder.key}' armed for {reminder.fire_at.isoformat()}")

    # =========================================================================
    # Cancellation
    # =========================================================================

    def cancel_reminders(self, appointment_id: Any) -> bool:
        """Cancel every armed reminder of an appointment.

        Always returns True; cancelling an appointment without reminders
        is a no-op.
        """
        removed = self.registry.pop_appointment(appointment_id)
        for reminder in removed:
            if reminder.handle is not None:
                reminder.handle.cancel()

        if removed:
            logger.info(f"Canceled {len(removed)} reminder(s) for appointment {appointment_id}")
        return True

    def cancel_all(self) -> int:
        """Cancel every armed reminder. Returns how many were canceled."""
        removed = self.registry.pop_all()
        for reminder in removed:
            if reminder.handle is not None:
                reminder.handle.cancel()
        return len(removed)

    def get_scheduled_reminders(self, appointment_id: Any | None = None) -> list[ScheduledReminder]:
        """Armed reminders, optionally restricted to one appointment."""
        if appointment_id is None:
            return self.registry.all()
        return sorted(self.registry.for_appointment(appointment_id), key=lambda r: r.fire_at)

    # =========================================================================
    # Dispatch
    # =========================================================================

    async def _fire(self, reminder: ScheduledReminder, context: ReminderContext) -> None:
        """Timer callback: dispatch, then drop the reminder from the live set."""
        label = _label(reminder)
        logger.info(f"Sending reminder {label}")

        try:
            results = await self.dispatch(reminder.recipient_type, reminder.methods, context)
            sent = sum(1 for ok in results.values() if ok)
            logger.info(f"Reminder {label} done: {sent}/{len(results)} message(s) delivered")
        except Exception as e:
            logger.error(f"Error sending reminder {label}: {e}", exc_info=True)
        finally:
            self.registry.discard(reminder.key, reminder)

    def _expire(self, reminder: ScheduledReminder) -> None:
        """Timer missed-run callback: the reminder is dropped without sending."""
        if self.registry.discard(reminder.key, reminder):
            logger.warning(f"Reminder {_label(reminder)} missed its fire time {reminder.fire_at.isoformat()}, dropped")

    async def dispatch(
        self,
        recipient_type: RecipientType,
        methods: list[NotificationChannel],
        context: ReminderContext,
    ) -> dict[NotificationChannel, bool]:
        """Send one message per method to the recipient.

        Each method is attempted independently. Methods without a recipient
        address are skipped and do not appear in the result.

        Returns:
            Delivery outcome per attempted channel.
        """
        recipient = context.recipient(recipient_type)
        variables = self.build_variables(context)
        results: dict[NotificationChannel, bool] = {}

        for method in methods:
            address = recipient.email_address if method is NotificationChannel.EMAIL else recipient.phone_address
            if not address:
                logger.debug(f"{recipient.display_name} has no {method.display_name} address, skipping")
                continue

            try:
                content = self.render_content(recipient_type, method, variables)
                if content is None:
                    logger.warning(f"No {method.value} template for {recipient_type.value}, skipping")
                    results[method] = False
                    continue
                results[method] = await self._channel.send(method, address, content)
            except Exception as e:
                logger.error(f"Failed to send {method.value} reminder to {address}: {e}")
                results[method] = False

        return results

    def render_content(
        self,
        recipient_type: RecipientType,
        channel: NotificationChannel,
        variables: dict[str, str],
    ) -> MessageContent | None:
        """Render the stored template for a slot, or None if there is none."""
        template = self._templates.get_template(recipient_type, channel)
        if template is None:
            return None

        subject = render(template.subject, variables) if channel.has_subject and template.subject else None
        return MessageContent(body=render(template.body, variables), subject=subject)

    def build_variables(self, context: ReminderContext) -> dict[str, str]:
        """Placeholder values for an appointment snapshot."""
        appointment = context.appointment
        return {
            "patientName": context.patient.display_name,
            "doctorName": context.doctor.display_name,
            "date": format_date(appointment.date) if appointment.date else "",
            "time": appointment.time.strftime("%H:%M") if appointment.time else "",
            "reason": appointment.reason,
            "patientPhone": context.patient.phone_address or "N/A",
            "clinicName": self._clinic_name,
        }


def format_date(value: date) -> str:
    """Month/day/year without zero padding, e.g. 3/10/2025."""
    return f"{value.month}/{value.day}/{value.year}"


def _label(reminder: ScheduledReminder) -> str:
    if reminder.correlation_id:
        return f"'{reminder.key}' [{reminder.correlation_id}]"
    return f"'{reminder.key}'"
