"""Alias table operations: add, list, edit, delete and run."""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Tuple

from . import ui
from .errors import (
    AliasNotFoundError,
    EmptyCommandError,
    ExecutionError,
    InvalidAliasError,
)
from .prompts import Prompter
from .shell import CommandExecutor
from .store import AliasTable, load_table, save_table

# Sub-command names; an alias with one of these names could never be run.
RESERVED_NAMES = frozenset({"add", "list", "edit", "delete", "run"})

ADD_PROMPT = "Enter the command or command sequence"
EDIT_PROMPT = "Enter the new command or command sequence"


class AliasManager:
    """Apply operations to the alias table stored at ``path``.

    Every operation reloads the table from disk, and every mutation rewrites
    the whole file before returning.
    """

    def __init__(
        self,
        path: Path,
        *,
        prompter: Prompter,
        executor: CommandExecutor,
    ) -> None:
        self.path = path
        self.prompter = prompter
        self.executor = executor

    def load(self) -> AliasTable:
        return load_table(self.path)

    def save(self, table: AliasTable) -> None:
        save_table(table, self.path)

    def add(self, alias: str, command: Optional[str] = None) -> bool:
        """Store ``command`` under ``alias``; return True if an entry was replaced."""
        _validate_alias(alias)
        table = self.load()
        overwriting = alias in table
        if overwriting:
            ui.warning(f'Warning: Overwriting existing command for alias "{alias}"')
        if command is None:
            command = self.prompter.text(ADD_PROMPT)
        table[alias] = _validate_command(command)
        self.save(table)
        return overwriting

    def entries(self) -> List[Tuple[str, str]]:
        return list(self.load().items())

    def edit(self, alias: str, command: Optional[str] = None) -> str:
        """Replace the command stored under ``alias`` and return the new text."""
        table = self.load()
        if alias not in table:
            raise AliasNotFoundError(alias)
        if command is None:
            command = self.prompter.text(EDIT_PROMPT, default=table[alias])
        table[alias] = _validate_command(command)
        self.save(table)
        return table[alias]

    def delete(self, alias: str, *, assume_yes: bool = False) -> bool:
        """Remove ``alias`` after confirmation; return False if the user declined."""
        table = self.load()
        if alias not in table:
            raise AliasNotFoundError(alias)
        if not assume_yes and not self.prompter.confirm(
            f'Are you sure you want to delete the command "{alias}"?', default=False
        ):
            return False
        del table[alias]
        self.save(table)
        return True

    def resolve(self, alias: str) -> str:
        table = self.load()
        if alias not in table:
            raise AliasNotFoundError(alias)
        return table[alias]

    def run(self, alias: str) -> int:
        """Execute the command stored under ``alias`` through the shell."""
        command = self.resolve(alias)
        ui.info(f"Executing command: {command}")
        returncode = self.executor.execute(command)
        if returncode < 0:
            raise ExecutionError(
                f"command terminated by signal {-returncode}", returncode=returncode
            )
        if returncode != 0:
            raise ExecutionError(
                f"command exited with status {returncode}", returncode=returncode
            )
        return returncode


def _validate_alias(alias: str) -> None:
    if not alias or not alias.strip():
        raise InvalidAliasError("Alias name cannot be empty.")
    if alias in RESERVED_NAMES:
        raise InvalidAliasError(
            f'"{alias}" is a built-in sub-command and cannot be used as an alias.'
        )
    if alias.startswith("-"):
        raise InvalidAliasError(
            f'"{alias}" looks like an option; aliases cannot start with "-".'
        )


def _validate_command(command: Optional[str]) -> str:
    if command is None or not command.strip():
        raise EmptyCommandError("Command text cannot be empty.")
    return command
