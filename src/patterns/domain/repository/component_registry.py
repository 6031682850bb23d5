"""Abstract registry for catalog components.

Defined in the domain layer so the domain never depends on
infrastructure. The in-memory implementation lives in the
infrastructure layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, Iterator, TypeVar

from patterns.domain.model.catalog import CatalogComponent

T = TypeVar("T", bound=CatalogComponent)


class ComponentRegistry(ABC, Generic[T]):

    @abstractmethod
    def add(self, component: T) -> None:
        """Append a component. Duplicate codes are not rejected."""

    @abstractmethod
    def find(self, code: str) -> T | None:
        """Return the first component with this code, or None."""

    @abstractmethod
    def remove(self, code: str) -> T | None:
        """Remove every component with this code.

        Returns the first one removed, or None if nothing matched.
        """

    @abstractmethod
    def list_all(self) -> list[T]:
        """Return every component in insertion order."""

    def __len__(self) -> int:
        return len(self.list_all())

    def __iter__(self) -> Iterator[T]:
        return iter(self.list_all())
