"""Edit command for replacing the command stored under an alias."""

from __future__ import annotations

from typing import List, Optional

import typer

from custom_commands import ui
from custom_commands.errors import CustomCommandsError

from ..common import COMMAND_CONTEXT, build_manager, fail
from ..completions import alias_name_completion
from ..help import RichHelpCommand
from ..type_defs import CommandMap


def register(app: typer.Typer) -> CommandMap:
    @app.command(cls=RichHelpCommand, context_settings=COMMAND_CONTEXT)
    def edit(
        alias: str = typer.Argument(
            ...,
            help="Alias to edit.",
            shell_complete=alias_name_completion,
        ),
        command: Optional[List[str]] = typer.Argument(
            None, help="Replacement text; prompted for (current value as default) when omitted."
        ),
    ) -> None:
        """Edit an existing custom command."""
        manager = build_manager()
        text = " ".join(command) if command else None
        try:
            manager.edit(alias, text)
        except CustomCommandsError as exc:
            fail(f"Error: {exc}")
        ui.success(f'Command "{alias}" updated successfully.')

    return {"edit": edit}
