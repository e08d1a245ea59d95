"""Default reminder templates seeded into the template store.

Placeholders: {patientName}, {doctorName}, {date}, {time}, {reason},
{patientPhone}, {clinicName}.
"""

from ...domain.value_objects import MessageTemplate, NotificationChannel, RecipientType

PATIENT_EMAIL_TEMPLATE = MessageTemplate(
    recipient_type=RecipientType.PATIENT,
    channel=NotificationChannel.EMAIL,
    subject="Appointment Reminder - {doctorName}",
    body="""Dear {patientName},

This is a reminder that you have an appointment scheduled with {doctorName} on {date} at {time}.

Appointment Details:
- Doctor: {doctorName}
- Date: {date}
- Time: {time}
- Reason: {reason}
- Location: {clinicName}

Please arrive 15 minutes early for check-in.

If you need to reschedule or cancel, please contact us as soon as possible.

Best regards,
{clinicName} Team""",
)

PATIENT_SMS_TEMPLATE = MessageTemplate(
    recipient_type=RecipientType.PATIENT,
    channel=NotificationChannel.SMS,
    body=(
        "Reminder: Appointment with {doctorName} on {date} at {time}. Reason: {reason}. "
        "Please arrive 15 mins early. {clinicName}"
    ),
)

DOCTOR_EMAIL_TEMPLATE = MessageTemplate(
    recipient_type=RecipientType.DOCTOR,
    channel=NotificationChannel.EMAIL,
    subject="Patient Appointment Reminder - {patientName}",
    body="""Dear Dr. {doctorName},

You have an upcoming appointment with {patientName} on {date} at {time}.

Patient Details:
- Name: {patientName}
- Date: {date}
- Time: {time}
- Reason: {reason}
- Contact: {patientPhone}

Please review the patient's medical history if needed.

Best regards,
{clinicName} System""",
)

DOCTOR_SMS_TEMPLATE = MessageTemplate(
    recipient_type=RecipientType.DOCTOR,
    channel=NotificationChannel.SMS,
    body="Appointment reminder: {patientName} on {date} at {time}. Reason: {reason}. {clinicName}",
)

DEFAULT_TEMPLATES: tuple[MessageTemplate, ...] = (
    PATIENT_EMAIL_TEMPLATE,
    PATIENT_SMS_TEMPLATE,
    DOCTOR_EMAIL_TEMPLATE,
    DOCTOR_SMS_TEMPLATE,
)
