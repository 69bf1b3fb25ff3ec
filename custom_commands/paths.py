"""Helpers for resolving the command file location."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

COMMANDS_FILENAME = ".custom-commands.json"


def config_path(home: Optional[Path] = None) -> Path:
    """Return the command file path under ``home`` (default: the user's home)."""
    base = home if home is not None else Path.home()
    return Path(base).expanduser() / COMMANDS_FILENAME
