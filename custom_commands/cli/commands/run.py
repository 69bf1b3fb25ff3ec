"""Run command; the default when the first argument is not a sub-command."""

from __future__ import annotations

import typer

from custom_commands.errors import AliasNotFoundError, ExecutionError

from ..common import COMMAND_CONTEXT, DEFAULT_COMMAND, build_manager, fail
from ..completions import alias_name_completion
from ..help import RichHelpCommand
from ..type_defs import CommandMap


def register(app: typer.Typer) -> CommandMap:
    @app.command(
        name=DEFAULT_COMMAND,
        cls=RichHelpCommand,
        context_settings=COMMAND_CONTEXT,
        hidden=True,
    )
    def run(
        alias: str = typer.Argument(
            ...,
            help="Alias whose command should be executed.",
            shell_complete=alias_name_completion,
        ),
    ) -> None:
        """Run a custom command through the shell."""
        manager = build_manager()
        try:
            manager.run(alias)
        except AliasNotFoundError as exc:
            fail(f"Error: {exc}")
        except ExecutionError as exc:
            fail(f"Error executing command: {exc}", code=exc.exit_code)

    return {"run": run}
