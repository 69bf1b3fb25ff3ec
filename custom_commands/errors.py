"""Exceptions raised by the alias store and dispatcher."""

from __future__ import annotations

from typing import Optional


class CustomCommandsError(Exception):
    """Base class for user-facing failures."""


class ConfigReadError(CustomCommandsError):
    """Raised when the command file cannot be read or parsed."""


class ConfigWriteError(CustomCommandsError):
    """Raised when the command file cannot be written."""


class AliasNotFoundError(CustomCommandsError, KeyError):
    """Raised when an alias is not present in the command table."""

    def __init__(self, alias: str) -> None:
        super().__init__(alias)
        self.alias = alias

    def __str__(self) -> str:
        return f'Command "{self.alias}" not found.'


class InvalidAliasError(CustomCommandsError, ValueError):
    """Raised when an alias name cannot be stored."""


class EmptyCommandError(CustomCommandsError, ValueError):
    """Raised when a blank command string would be stored."""


class ExecutionError(CustomCommandsError):
    """Raised when a stored command fails to start or exits unsuccessfully."""

    def __init__(self, message: str, *, returncode: Optional[int] = None) -> None:
        super().__init__(message)
        self.returncode = returncode

    @property
    def exit_code(self) -> int:
        """Process exit code to report for this failure."""
        if self.returncode is None or self.returncode <= 0:
            return 1
        return self.returncode
