"""Doctor Entity.

Represents a doctor on the clinic roster.
"""

from dataclasses import dataclass

from mediflow.core.domain.entities import Entity


@dataclass(eq=False)
class Doctor(Entity[int]):
    """Clinic doctor.

    Satisfies the reminder Recipient protocol through
    `display_name`, `email_address` and `phone_address`.
    """

    name: str = ""
    email: str = ""
    phone: str = ""
    specialty: str = ""

    @property
    def display_name(self) -> str:
        return self.name or f"Doctor #{self.id}"

    @property
    def email_address(self) -> str | None:
        return self.email.strip() or None

    @property
    def phone_address(self) -> str | None:
        return self.phone.strip() or None
