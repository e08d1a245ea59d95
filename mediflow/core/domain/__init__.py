from .entities import Entity
from .exceptions import DomainException, EntityNotFoundException, ValidationException

__all__ = [
    "Entity",
    "DomainException",
    "EntityNotFoundException",
    "ValidationException",
]
