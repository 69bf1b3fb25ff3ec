"""Sub-command modules; each exposes ``register(app) -> CommandMap``."""

from __future__ import annotations

import typer

from ..type_defs import CommandMap
from . import add, delete, edit, listing, run

COMMAND_MODULES = (add, listing, edit, delete, run)


def register_commands(app: typer.Typer) -> CommandMap:
    commands: CommandMap = {}
    for module in COMMAND_MODULES:
        commands.update(module.register(app))
    return commands
