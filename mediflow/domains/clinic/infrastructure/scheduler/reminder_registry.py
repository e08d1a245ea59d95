"""Live set of armed reminders.

Owned by a single ReminderScheduler instance. Keys are deterministic,
`appointment_{id}_{recipient}_{offset}`, so there is at most one armed
reminder per (appointment, recipient role, offset).
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from ...application.ports import ITimerHandle
from ...domain.value_objects import NotificationChannel, RecipientType


@dataclass
class ScheduledReminder:
    """An armed reminder trigger."""

    key: str
    appointment_id: int
    recipient_type: RecipientType
    offset_code: str
    fire_at: datetime
    methods: list[NotificationChannel] = field(default_factory=list)
    correlation_id: str | None = None
    handle: ITimerHandle | None = field(default=None, repr=False)

    def to_dict(self) -> dict[str, Any]:
        return {
            "key": self.key,
            "appointment_id": self.appointment_id,
            "recipient_type": self.recipient_type.value,
            "offset_code": self.offset_code,
            "fire_at": self.fire_at.isoformat(),
            "methods": [m.value for m in self.methods],
            "correlation_id": self.correlation_id,
        }


class ReminderRegistry:
    """Keyed store of armed reminders."""

    def __init__(self) -> None:
        self._reminders: dict[str, ScheduledReminder] = {}

    @staticmethod
    def appointment_prefix(appointment_id: Any) -> str:
        # Trailing separator keeps appointment 1 from matching appointment 12
        return f"appointment_{appointment_id}_"

    @classmethod
    def make_key(cls, appointment_id: Any, recipient_type: RecipientType, offset_code: str) -> str:
        return f"{cls.appointment_prefix(appointment_id)}{recipient_type.value}_{offset_code}"

    def get(self, key: str) -> ScheduledReminder | None:
        return self._reminders.get(key)

    def put(self, reminder: ScheduledReminder) -> ScheduledReminder | None:
        """Store a reminder, returning the one it replaced (if any)."""
        previous = self._reminders.get(reminder.key)
        self._reminders[reminder.key] = reminder
        return previous

    def discard(self, key: str, reminder: ScheduledReminder | None = None) -> bool:
        """Remove an entry.

        When `reminder` is given, the entry is removed only if it is that
        exact reminder, so a trigger that fires after being replaced does
        not evict its replacement.
        """
        current = self._reminders.get(key)
        if current is None or (reminder is not None and current is not reminder):
            return False
        del self._reminders[key]
        return True

    def for_appointment(self, appointment_id: Any) -> list[ScheduledReminder]:
        prefix = self.appointment_prefix(appointment_id)
        return [r for key, r in self._reminders.items() if key.startswith(prefix)]

    def pop_appointment(self, appointment_id: Any) -> list[ScheduledReminder]:
        """Remove and return every reminder of an appointment."""
        removed = self.for_appointment(appointment_id)
        for reminder in removed:
            del self._reminders[reminder.key]
        return removed

    def pop_all(self) -> list[ScheduledReminder]:
        removed = list(self._reminders.values())
        self._reminders.clear()
        return removed

    def all(self) -> list[ScheduledReminder]:
        """Armed reminders ordered by fire time."""
        return sorted(self._reminders.values(), key=lambda r: r.fire_at)

    def keys(self) -> set[str]:
        return set(self._reminders)

    def __len__(self) -> int:
        return len(self._reminders)

    def __contains__(self, key: object) -> bool:
        return key in self._reminders
