"""Interactive shell for the requirements document builder."""

from __future__ import annotations

import click

from patterns.domain.model.document import (
    Requirement,
    RequirementsDocument,
    RequirementsDocumentBuilder,
)
from patterns.infrastructure.bootstrap import document_builder
from patterns.infrastructure.cli.menu import prompt_text, run_menu

_UNSET = "(not set)"


def _display_document(doc: RequirementsDocument) -> None:
    click.echo(f"Document: {doc.name or _UNSET}")
    click.echo(f"Author:   {doc.author or _UNSET}")
    click.echo(f"Project:  {doc.project or _UNSET}")
    click.echo()

    if not doc.requirements:
        click.echo("No requirements.")
        return

    click.echo(f"  {'Code':<10} {'Description'}")
    click.echo(f"  {'-'*50}")
    for req in doc.requirements:
        click.echo(f"  {req.code:<10} {req.description}")


class DocumentShell:

    def __init__(self, builder: RequirementsDocumentBuilder) -> None:
        self._builder = builder

    def run(self) -> None:
        run_menu({
            "Add Author": self.add_author,
            "Add Name": self.add_name,
            "Add Project": self.add_project,
            "Add Requirements": self.add_requirement,
            "Create": self.create,
        })

    def add_author(self) -> None:
        author = prompt_text("Document Author?")
        self._builder.with_author(author)
        click.echo(f"New Author added {author}")

    def add_name(self) -> None:
        name = prompt_text("Document Name?")
        self._builder.with_name(name)
        click.echo(f"Added {name}")

    def add_project(self) -> None:
        project = prompt_text("Document Project?")
        self._builder.with_project(project)
        click.echo(f"Added {project}")

    def add_requirement(self) -> None:
        code = prompt_text("Requirement code?")
        description = prompt_text("Requirement description?")
        self._builder.with_requirement(Requirement(code, description))
        click.echo(
            f"New requirement added with code {code} and description \"{description}\""
        )

    def create(self) -> bool:
        """Build the document, print it and end the session."""
        _display_document(self._builder.build())
        return True


@click.command("document")
def document() -> None:
    """Build a requirements document interactively."""
    DocumentShell(document_builder()).run()
