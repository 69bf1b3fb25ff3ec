"""Delete command for removing an alias after confirmation."""

from __future__ import annotations

import typer

from custom_commands import ui
from custom_commands.errors import CustomCommandsError

from ..common import COMMAND_CONTEXT, build_manager, fail
from ..completions import alias_name_completion
from ..help import RichHelpCommand
from ..type_defs import CommandMap


def register(app: typer.Typer) -> CommandMap:
    @app.command(cls=RichHelpCommand, context_settings=COMMAND_CONTEXT)
    def delete(
        alias: str = typer.Argument(
            ...,
            help="Alias to delete.",
            shell_complete=alias_name_completion,
        ),
        yes: bool = typer.Option(
            False, "--yes", "-y", help="Delete without asking for confirmation."
        ),
    ) -> None:
        """Delete a custom command; confirms before removing."""
        manager = build_manager()
        try:
            removed = manager.delete(alias, assume_yes=yes)
        except CustomCommandsError as exc:
            fail(f"Error: {exc}")
        if not removed:
            ui.warning("Deletion cancelled.")
            return
        ui.success(f'Command "{alias}" deleted successfully.')

    return {"delete": delete}
