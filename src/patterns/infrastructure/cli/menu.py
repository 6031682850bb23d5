"""Numbered-menu loop shared by the interactive shells."""

from __future__ import annotations

from typing import Callable

import click

from patterns.domain.exceptions import DomainException

EXIT = "Exit"

# An action returns True to end the session.
Action = Callable[[], "bool | None"]


def choose(actions: list[str]) -> str:
    """Echo the numbered actions and return the one picked."""
    click.echo()
    for number, label in enumerate(actions, start=1):
        click.echo(f"  {number}) {label}")
    choice = click.prompt(
        "What do you want to do?", type=click.IntRange(1, len(actions))
    )
    return actions[choice - 1]


def run_menu(actions: dict[str, Action]) -> None:
    """Dispatch one action per iteration until Exit or end of input.

    Domain errors are reported and the menu is shown again.
    """
    labels = [*actions, EXIT]
    try:
        while True:
            label = choose(labels)
            if label == EXIT:
                return
            try:
                done = actions[label]()
            except DomainException as exc:
                click.echo(f"Error: {exc}", err=True)
                continue
            if done:
                return
    except click.Abort:
        # Input stream closed.
        click.echo()


def prompt_text(message: str, *, allow_empty: bool = False) -> str:
    if allow_empty:
        return click.prompt(message, default="", show_default=False).strip()
    return click.prompt(message).strip()
