"""Reminder Offset Value Object.

Lead times at which reminders fire, relative to the appointment instant.
"""

from dataclasses import dataclass
from datetime import timedelta
from typing import Any


@dataclass(frozen=True)
class ReminderOffset:
    """A supported reminder lead time, e.g. "24h" = 24 hours before."""

    code: str
    label: str
    hours_before: float

    def __post_init__(self) -> None:
        if self.hours_before <= 0:
            raise ValueError(f"Reminder offset '{self.code}' must be positive, got {self.hours_before}")

    @property
    def delta(self) -> timedelta:
        return timedelta(hours=self.hours_before)

    def to_dict(self) -> dict[str, Any]:
        return {"code": self.code, "label": self.label, "hours_before": self.hours_before}


class ReminderTimeCatalog:
    """Fixed, ordered catalog of reminder offsets (longest lead time first)."""

    OPTIONS: tuple[ReminderOffset, ...] = (
        ReminderOffset("24h", "24 hours before", 24),
        ReminderOffset("12h", "12 hours before", 12),
        ReminderOffset("6h", "6 hours before", 6),
        ReminderOffset("2h", "2 hours before", 2),
        ReminderOffset("1h", "1 hour before", 1),
        ReminderOffset("30m", "30 minutes before", 0.5),
    )

    _BY_CODE: dict[str, ReminderOffset] = {option.code: option for option in OPTIONS}

    @classmethod
    def lookup(cls, code: str) -> ReminderOffset | None:
        """Resolve an offset code. Unknown codes return None."""
        return cls._BY_CODE.get(code)

    @classmethod
    def options(cls) -> list[ReminderOffset]:
        """All offsets in catalog order (a fresh list each call)."""
        return list(cls.OPTIONS)

    @classmethod
    def codes(cls) -> list[str]:
        return [option.code for option in cls.OPTIONS]
