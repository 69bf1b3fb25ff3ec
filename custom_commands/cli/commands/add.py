"""Add command for storing a new alias."""

from __future__ import annotations

from typing import List, Optional

import typer

from custom_commands import ui
from custom_commands.errors import CustomCommandsError

from ..common import COMMAND_CONTEXT, build_manager, fail
from ..help import RichHelpCommand
from ..type_defs import CommandMap


def register(app: typer.Typer) -> CommandMap:
    @app.command(cls=RichHelpCommand, context_settings=COMMAND_CONTEXT)
    def add(
        alias: str = typer.Argument(..., help="Name to store the command under."),
        command: Optional[List[str]] = typer.Argument(
            None, help="Command text; prompted for when omitted."
        ),
    ) -> None:
        """Add a new custom command (overwrites an existing alias with a warning)."""
        manager = build_manager()
        text = " ".join(command) if command else None
        try:
            manager.add(alias, text)
        except CustomCommandsError as exc:
            fail(f"Error: {exc}")
        ui.success(f'Command "{alias}" added successfully.')

    return {"add": add}
