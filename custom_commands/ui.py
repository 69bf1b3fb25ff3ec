"""UI utilities for rich console output."""

from __future__ import annotations

from typing import Iterable, Tuple

from rich.markup import escape
from rich.table import Table

from .logging import console


def themed_grid(**kwargs) -> Table:
    """Return a borderless grid table used by the help screens."""
    kwargs.setdefault("padding", (0, 3))
    return Table.grid(**kwargs)


def success(message: str) -> None:
    console.print(f"[ok]✓ {escape(message)}[/]", soft_wrap=True)


def warning(message: str) -> None:
    console.print(f"[warn]! {escape(message)}[/]", soft_wrap=True)


def error(message: str) -> None:
    console.print(f"[error]✘ {escape(message)}[/]", soft_wrap=True)


def info(message: str) -> None:
    console.print(f"[info]{escape(message)}[/]", soft_wrap=True)


def show_commands(entries: Iterable[Tuple[str, str]]) -> None:
    """Print one ``alias: command`` line per entry."""
    console.print("[section]Custom Commands:[/]")
    for alias, command in entries:
        console.print(
            f"[alias]{escape(alias)}[/]: {escape(command)}",
            soft_wrap=True,
            highlight=False,
        )
