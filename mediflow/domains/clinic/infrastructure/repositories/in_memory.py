# ============================================================================
# SCOPE: INFRASTRUCTURE LAYER (Clinic)
# Description: Process-memory repositories for clinic records.
# ============================================================================
"""In-memory record repositories.

Implement IPatientLookup, IDoctorLookup and IAppointmentRepository. Stored
entities are copies, so callers holding an entity never see later edits
through it and vice versa.
"""

import copy
import itertools
import logging
from typing import Generic, TypeVar

from mediflow.core.domain.entities import Entity
from mediflow.core.domain.exceptions import EntityNotFoundException

from ...domain.entities import Appointment, Doctor, Patient

logger = logging.getLogger(__name__)

TEntity = TypeVar("TEntity", bound=Entity)


class InMemoryRepository(Generic[TEntity]):
    """Dict-backed repository with auto-incrementing integer ids."""

    entity_type: str = "Entity"

    def __init__(self) -> None:
        self._items: dict[int, TEntity] = {}
        self._ids = itertools.count(1)

    async def get_by_id(self, entity_id: int) -> TEntity:
        """Get an entity by id.

        Raises:
            EntityNotFoundException: If the id is unknown.
        """
        item = self._items.get(self._coerce_id(entity_id))
        if item is None:
            raise EntityNotFoundException(self.entity_type, entity_id)
        return copy.deepcopy(item)

    async def list_all(self) -> list[TEntity]:
        return [copy.deepcopy(item) for _, item in sorted(self._items.items())]

    async def add(self, entity: TEntity) -> TEntity:
        """Store a new entity and assign its id."""
        entity.id = next(self._ids)
        self._items[entity.id] = copy.deepcopy(entity)
        logger.debug(f"{self.entity_type} {entity.id} created")
        return entity

    async def save(self, entity: TEntity) -> TEntity:
        """Replace a stored entity.

        Raises:
            EntityNotFoundException: If the entity was never added.
        """
        if entity.id is None or entity.id not in self._items:
            raise EntityNotFoundException(self.entity_type, entity.id)
        entity.touch()
        self._items[entity.id] = copy.deepcopy(entity)
        return entity

    async def delete(self, entity_id: int) -> bool:
        """Remove an entity. Returns False if it did not exist."""
        return self._items.pop(self._coerce_id(entity_id), None) is not None

    @staticmethod
    def _coerce_id(entity_id: int | str | None) -> int | None:
        try:
            return int(entity_id) if entity_id is not None else None
        except (TypeError, ValueError):
            return None


class InMemoryPatientRepository(InMemoryRepository[Patient]):
    entity_type = "Patient"


class InMemoryDoctorRepository(InMemoryRepository[Doctor]):
    entity_type = "Doctor"


class InMemoryAppointmentRepository(InMemoryRepository[Appointment]):
    entity_type = "Appointment"
