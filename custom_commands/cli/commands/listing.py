"""List command for showing stored aliases."""

from __future__ import annotations

import typer

from custom_commands import ui

from ..common import COMMAND_CONTEXT, build_manager
from ..help import RichHelpCommand
from ..type_defs import CommandMap


def register(app: typer.Typer) -> CommandMap:
    @app.command(name="list", cls=RichHelpCommand, context_settings=COMMAND_CONTEXT)
    def list_commands() -> None:
        """List all custom commands."""
        entries = build_manager().entries()
        if not entries:
            ui.warning("No custom commands found.")
            return
        ui.show_commands(entries)

    return {"list": list_commands}
