"""Pass-through execution of stored commands via the host shell."""

from __future__ import annotations

import subprocess
from typing import Optional, Protocol

from .errors import ExecutionError


class CommandExecutor(Protocol):
    def execute(self, command: str) -> int:
        ...


class ShellExecutor:
    """Run command strings through the system shell with inherited stdio.

    The child shares the invoking terminal's stdin, stdout and stderr so
    interactive programs (editors, pagers) behave as if run directly. The call
    blocks until the child exits.
    """

    def __init__(self, executable: Optional[str] = None) -> None:
        self.executable = executable

    def execute(self, command: str) -> int:
        """Run ``command`` and return its exit status."""
        try:
            proc = subprocess.run(command, shell=True, executable=self.executable)
        except OSError as exc:
            raise ExecutionError(f"failed to start shell: {exc}") from exc
        return proc.returncode


__all__ = ["CommandExecutor", "ShellExecutor"]
