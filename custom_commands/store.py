"""Persistence for the alias table.

The table is a flat JSON object mapping alias names to command strings. It is
always read in full and rewritten in full; there are no partial updates.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Dict

from pydantic import TypeAdapter, ValidationError

from .errors import ConfigReadError, ConfigWriteError
from .logging import debug

AliasTable = Dict[str, str]

_TABLE_ADAPTER: TypeAdapter[AliasTable] = TypeAdapter(AliasTable)


def read_table(path: Path) -> AliasTable:
    """Read and validate the command file, raising ``ConfigReadError`` on failure."""
    try:
        raw = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigReadError(f"Cannot read command file {path}: {exc}") from exc
    try:
        return _TABLE_ADAPTER.validate_json(raw)
    except ValidationError as exc:
        errors = exc.errors()
        reason = errors[0]["msg"] if errors else str(exc)
        raise ConfigReadError(f"Invalid command file {path}: {reason}") from exc


def load_table(path: Path) -> AliasTable:
    """Load the alias table, treating any read failure as an empty table."""
    if not path.exists():
        debug(f"no command file at {path}; starting with an empty table")
        return {}
    try:
        table = read_table(path)
    except ConfigReadError as exc:
        debug(f"{exc}; starting with an empty table")
        return {}
    debug(f"loaded {len(table)} command(s) from {path}")
    return table


def save_table(table: AliasTable, path: Path) -> None:
    """Overwrite the command file with ``table``, pretty-printed for hand edits."""
    payload = json.dumps(table, indent=2, ensure_ascii=False)
    try:
        path.write_text(payload, encoding="utf-8")
    except OSError as exc:
        raise ConfigWriteError(f"Cannot write command file {path}: {exc}") from exc
    debug(f"saved {len(table)} command(s) to {path}")


__all__ = ["AliasTable", "load_table", "read_table", "save_table"]
