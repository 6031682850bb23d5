"""Requirements document and its builder.

The builder collects fields one prompt at a time; ``build()`` takes an
immutable snapshot, so later builder calls never change a built document.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Requirement:
    code: str
    description: str


@dataclass(frozen=True)
class RequirementsDocument:
    """A finished document. Fields left unset on the builder stay None."""

    author: str | None
    name: str | None
    project: str | None
    requirements: tuple[Requirement, ...] = ()


class RequirementsDocumentBuilder:

    def __init__(self) -> None:
        self._author: str | None = None
        self._name: str | None = None
        self._project: str | None = None
        self._requirements: list[Requirement] = []

    def with_author(self, author: str) -> RequirementsDocumentBuilder:
        self._author = author
        return self

    def with_name(self, name: str) -> RequirementsDocumentBuilder:
        self._name = name
        return self

    def with_project(self, project: str) -> RequirementsDocumentBuilder:
        self._project = project
        return self

    def with_requirement(self, requirement: Requirement) -> RequirementsDocumentBuilder:
        """Append a requirement; order of calls is kept."""
        self._requirements.append(requirement)
        return self

    def build(self) -> RequirementsDocument:
        return RequirementsDocument(
            author=self._author,
            name=self._name,
            project=self._project,
            requirements=tuple(self._requirements),
        )
