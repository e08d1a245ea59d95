"""Patient Entity.

Represents a patient in the clinic registry.
"""

from dataclasses import dataclass
from datetime import date

from mediflow.core.domain.entities import Entity


@dataclass(eq=False)
class Patient(Entity[int]):
    """Clinic patient.

    Satisfies the reminder Recipient protocol through
    `display_name`, `email_address` and `phone_address`.
    """

    name: str = ""
    email: str = ""
    phone: str = ""
    date_of_birth: date | None = None
    address: str = ""

    @property
    def display_name(self) -> str:
        return self.name or f"Patient #{self.id}"

    @property
    def email_address(self) -> str | None:
        return self.email.strip() or None

    @property
    def phone_address(self) -> str | None:
        return self.phone.strip() or None
