from __future__ import annotations

import typer

from custom_commands import __description__
from custom_commands.logging import set_verbose

from .commands import register_commands
from .common import print_version
from .dispatch import AliasDispatchGroup
from .help import show_root_help

app = typer.Typer(
    cls=AliasDispatchGroup,
    help=__description__,
    context_settings={"help_option_names": []},
    rich_markup_mode="rich",
)


@app.callback(invoke_without_command=True)
def _root_command(
    ctx: typer.Context,
    version: bool = typer.Option(
        False,
        "-v",
        "--version",
        help="Show CLI version and exit.",
        is_eager=True,
    ),
    help_: bool = typer.Option(
        False,
        "--help",
        "-h",
        help="Show this message and exit.",
        is_eager=True,
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        help="Print diagnostics about the command file on stderr.",
    ),
) -> None:
    set_verbose(verbose)
    if version:
        print_version()
        raise typer.Exit()
    if help_:
        show_root_help(ctx)
        raise typer.Exit()
    if ctx.invoked_subcommand is None:
        show_root_help(ctx)


register_commands(app)


def main() -> None:
    app(prog_name="custom-commands")


if __name__ == "__main__":
    main()
