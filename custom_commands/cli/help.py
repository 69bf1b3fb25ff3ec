"""Help text rendering and formatting for the CLI.

This module handles custom help display including:
- Root command help with usage and examples
- Per-command help with arguments and options
- Rich table rendering for terminal output
"""

from __future__ import annotations

from typing import Iterable, Sequence

import click
import typer
from rich.table import Table
from typer.core import TyperCommand

from custom_commands import __description__, ui
from custom_commands.logging import PALETTE, console

from .common import PROG_NAME

HELP_EXAMPLES = [
    (f"{PROG_NAME} add greet", "Prompt for a command and store it as 'greet'."),
    (f"{PROG_NAME} list", "Show every stored alias and its command."),
    (f"{PROG_NAME} edit greet", "Replace the command stored under 'greet'."),
    (f"{PROG_NAME} delete greet", "Remove 'greet' after confirmation."),
    (f"{PROG_NAME} greet", "Run the command stored under 'greet'."),
]


def show_root_help(ctx: typer.Context) -> None:
    console.print(__description__)
    console.print()
    console.print("[section]Usage[/section]")
    console.print(f"  {PROG_NAME} [OPTIONS] COMMAND [ARGS]...", markup=False)
    console.print(f"  {PROG_NAME} ALIAS\n", markup=False)
    console.print("[section]Commands[/section]")
    console.print(build_command_table(ctx))
    console.print()
    console.print("[section]Options[/section]")
    console.print(build_option_table(ctx.command))
    console.print()
    console.print("[section]Examples[/section]")
    console.print(build_examples_table())


def show_command_help(ctx: click.Context) -> None:
    command = ctx.command
    usage = " ".join(
        part
        for part in (PROG_NAME, ctx.info_name or command.name or "", usage_hint(command))
        if part
    )
    console.print("[section]Usage[/section]")
    console.print(f"  {usage}\n", markup=False)
    description = (command.help or command.short_help or "").strip()
    if description:
        console.print(description)
        console.print()
    arguments = build_argument_table(command)
    if arguments.row_count:
        console.print("[section]Arguments[/section]")
        console.print(arguments)
        console.print()
    console.print("[section]Options[/section]")
    console.print(build_option_table(command, ctx))


class RichHelpCommand(TyperCommand):
    """Command whose ``--help`` output uses the same renderer as the root help."""

    def get_help(self, ctx: click.Context) -> str:
        with console.capture() as capture:
            show_command_help(ctx)
        return capture.get().rstrip("\n")


def build_help_table(
    rows: Iterable[tuple[str, ...]],
    *,
    column_styles: Sequence[dict[str, object]] | None = None,
) -> Table:
    table = ui.themed_grid(padding=(0, 3))
    styles = column_styles or (
        {"style": f"bold {PALETTE['green']}", "no_wrap": True},
        {"style": f"bold {PALETTE['purple']}", "no_wrap": True},
        {"style": PALETTE["fg"]},
    )
    for column in styles:
        table.add_column(**column)
    for row in rows:
        table.add_row(*row)
    return table


def build_command_table(ctx: typer.Context) -> Table:
    return build_help_table(command_help_rows(ctx))


def build_option_table(
    command: click.Command | None, ctx: click.Context | None = None
) -> Table:
    return build_help_table(option_help_rows(command, ctx))


def build_argument_table(command: click.Command) -> Table:
    rows = [
        (format_argument_hint(param), "", getattr(param, "help", None) or "")
        for param in command.params
        if _is_argument(param)
    ]
    return build_help_table(rows)


def build_examples_table() -> Table:
    table = ui.themed_grid(padding=(0, 3))
    table.add_column(style=f"bold {PALETTE['cyan']}", no_wrap=True)
    table.add_column()
    for command, description in HELP_EXAMPLES:
        table.add_row(command, description)
    return table


def command_help_rows(ctx: typer.Context):
    command_group = ctx.command
    if not hasattr(command_group, "list_commands"):
        return []
    rows = []
    for name in command_group.list_commands(ctx):
        command = command_group.get_command(ctx, name)
        if not command or command.hidden:
            continue
        description = (command.short_help or command.help or "").strip()
        description = description.splitlines()[0] if description else ""
        rows.append((name, usage_hint(command), description))
    return rows


def option_help_rows(command: click.Command | None, ctx: click.Context | None = None):
    rows = []
    if command is None:
        return rows
    params = list(command.params)
    if ctx is not None:
        help_option = command.get_help_option(ctx)
        if help_option is not None and help_option not in params:
            params.append(help_option)
    for param in params:
        if not _is_option(param) or param.hidden:
            continue
        name = primary_long_option(param)
        short_text = format_short_options(param)
        description = (param.help or "").strip()
        rows.append((name, short_text, description))
    return rows


def usage_hint(command: click.Command) -> str:
    return " ".join(
        format_argument_hint(param)
        for param in command.params
        if _is_argument(param)
    )


def format_argument_hint(param: click.Argument) -> str:
    name = param.metavar or param.name or ""
    if not name:
        return ""
    normalized = name.replace("_", " ").strip()
    normalized = normalized.replace(" ", "-").upper()
    if param.required:
        hint = f"<{normalized}>"
    else:
        hint = f"[{normalized}]"
    if param.nargs == -1:
        hint += "..."
    return hint


def primary_long_option(param: click.Option) -> str:
    for opt in param.opts:
        if opt.startswith("--"):
            return opt
    return param.opts[0] if param.opts else ""


def format_short_options(param: click.Option) -> str:
    seen: list[str] = []
    for opt in list(param.opts) + list(param.secondary_opts):
        if not opt.startswith("-") or opt.startswith("--"):
            continue
        if opt not in seen:
            seen.append(opt)
    return ", ".join(seen)


# Typer may bundle its own copy of Click, so parameter kinds are checked by
# name rather than against ``click.Argument``/``click.Option``.
def _is_argument(param: click.Parameter) -> bool:
    return param.param_type_name == "argument"


def _is_option(param: click.Parameter) -> bool:
    return param.param_type_name == "option"
