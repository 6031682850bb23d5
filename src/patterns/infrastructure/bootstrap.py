"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
The CLI calls each factory once per run and hands the result to its
shell, so every action in a session sees the same registries.
"""

from __future__ import annotations

import logging

from patterns.application.catalog_facade import CatalogFacade
from patterns.domain.model.document import RequirementsDocumentBuilder
from patterns.infrastructure.persistence.in_memory_registry import InMemoryRegistry

LOG_FORMAT = "%(levelname)s: %(message)s"


def configure_logging(level: str = "WARNING") -> None:
    logging.basicConfig(level=getattr(logging, level.upper()), format=LOG_FORMAT)


def catalog_facade() -> CatalogFacade:
    return CatalogFacade(
        items=InMemoryRegistry(),
        bundles=InMemoryRegistry(),
        discounts=InMemoryRegistry(),
    )


def document_builder() -> RequirementsDocumentBuilder:
    return RequirementsDocumentBuilder()
