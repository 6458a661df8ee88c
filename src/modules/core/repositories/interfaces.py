"""Generic repository interface (Dependency Inversion Principle).

Provides ``IRepository[T]``, the base abstract class that all
domain-specific repository interfaces extend.  Service-layer code
depends on this abstraction, never on Django ORM directly.

Every operation returns a result kind from ``shared.domain.results``;
storage errors come back as ``StoreFault`` instead of being raised.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, Generic, List, Optional, TypeVar

from shared.domain.results import Result

T = TypeVar("T")


class IRepository(ABC, Generic[T]):
    """Base generic repository contract.

    Type parameter ``T`` represents the entity managed by the
    repository (e.g. ``Product``).  Identifiers are integer surrogate keys
    assigned by the store.
    """

    @abstractmethod
    def list(self) -> Result[List[T]]:
        """Return every stored entity."""

    @abstractmethod
    def get_by_id(self, id: int) -> Result[Optional[T]]:
        """Point lookup; ``Success(None)`` when nothing is stored at ``id``."""

    @abstractmethod
    def exists(self, id: int) -> Result[bool]:
        """Existence check that does not materialise the record."""

    @abstractmethod
    def create(self, entity: T) -> Result[T]:
        """Persist a new entity and return it with its assigned id."""

    @abstractmethod
    def update(self, id: int, fields: Dict[str, Any]) -> Result[int]:
        """Overwrite ``fields`` in place; the value is the affected row count."""

    @abstractmethod
    def delete(self, id: int) -> Result[int]:
        """Remove the entity at ``id``; deleting an absent id is a no-op."""
