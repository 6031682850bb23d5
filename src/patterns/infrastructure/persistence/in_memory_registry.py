"""List-backed implementation of ComponentRegistry.

Entries live for the lifetime of the process only.
"""

from __future__ import annotations

from patterns.domain.repository.component_registry import ComponentRegistry, T


class InMemoryRegistry(ComponentRegistry[T]):

    def __init__(self, components: list[T] | None = None) -> None:
        self._components: list[T] = list(components or [])

    # --- ComponentRegistry interface ------------------------------------------

    def add(self, component: T) -> None:
        self._components.append(component)

    def find(self, code: str) -> T | None:
        for component in self._components:
            if component.code == code:
                return component
        return None

    def remove(self, code: str) -> T | None:
        removed = self.find(code)
        if removed is not None:
            self._components = [c for c in self._components if c.code != code]
        return removed

    def list_all(self) -> list[T]:
        return list(self._components)
