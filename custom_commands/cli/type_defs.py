"""Type definitions for the CLI module.

Command modules return a ``CommandMap`` from ``register`` so the root app can
see which handlers were attached.
"""

from __future__ import annotations

from typing import Dict

from typer.models import CommandFunctionType

# Maps command names to their handler functions for registration
CommandMap = Dict[str, CommandFunctionType]
