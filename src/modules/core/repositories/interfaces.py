"""Generic repository interface (Dependency Inversion Principle).

Provides ``IRepository[T]``, the base abstract class that every
entity-specific repository interface extends.  Service-layer code
depends on this abstraction, never on the Django ORM directly.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, List, Optional, TypeVar

T = TypeVar("T")


class IRepository(ABC, Generic[T]):
    """Base generic repository contract.

    Type parameter ``T`` is the entity managed by the repository.
    Write methods commit before returning.
    """

    @abstractmethod
    def get_by_id(self, id: int) -> Optional[T]:
        """Retrieve an entity by its primary key, ``None`` when absent."""

    @abstractmethod
    def list(self) -> List[T]:
        """Return every entity in store order."""

    @abstractmethod
    def add(self, entity: T) -> T:
        """Insert a new entity and return it with its assigned ID."""

    @abstractmethod
    def update(self, entity: T) -> None:
        """Replace the stored entity that has the same ID."""

    @abstractmethod
    def delete(self, entity: T) -> None:
        """Remove a stored entity."""

    @abstractmethod
    def exists(self, id: int) -> bool:
        """Whether an entity with this ID is currently stored."""
