"""Interactive prompting used by the add, edit and delete operations."""

from __future__ import annotations

from typing import Optional, Protocol

from rich.console import Console
from rich.markup import escape
from rich.prompt import Confirm, Prompt

from .logging import console as default_console


class Prompter(Protocol):
    def text(self, message: str, *, default: Optional[str] = None) -> str:
        ...

    def confirm(self, message: str, *, default: bool = False) -> bool:
        ...


class RichPrompter:
    """Prompt on the terminal using Rich's ``Prompt`` and ``Confirm``."""

    def __init__(self, console: Optional[Console] = None) -> None:
        self.console = console or default_console

    def text(self, message: str, *, default: Optional[str] = None) -> str:
        """Ask for free text; an empty answer returns ``default`` when one is set."""
        prompt = f"[info]{escape(message)}[/]"
        if default is None:
            return Prompt.ask(prompt, console=self.console)
        return Prompt.ask(prompt, console=self.console, default=default)

    def confirm(self, message: str, *, default: bool = False) -> bool:
        return Confirm.ask(
            f"[warn]{escape(message)}[/]", console=self.console, default=default
        )


__all__ = ["Prompter", "RichPrompter"]
