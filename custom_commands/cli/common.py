from __future__ import annotations

from typing import NoReturn

import typer

from custom_commands import __version__, ui
from custom_commands.logging import console
from custom_commands.manager import AliasManager
from custom_commands.paths import config_path
from custom_commands.prompts import RichPrompter
from custom_commands.shell import ShellExecutor

PROG_NAME = "custom-commands"
HELP_OPTION_NAMES = ["-h", "--help"]
COMMAND_CONTEXT = {"help_option_names": HELP_OPTION_NAMES}

DEFAULT_COMMAND = "run"

prompter = RichPrompter()
executor = ShellExecutor()


def build_manager() -> AliasManager:
    """Create a manager bound to the command file in the current home directory."""
    return AliasManager(config_path(), prompter=prompter, executor=executor)


def fail(message: str, code: int = 1) -> NoReturn:
    """Report an error and end the invocation with ``code``."""
    ui.error(message)
    raise typer.Exit(code=code)


def print_version() -> None:
    console.print(f"[bold]{PROG_NAME}[/bold] [accent]v{__version__}[/]")
