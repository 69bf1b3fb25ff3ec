"""Click group that treats unknown sub-commands as aliases to run."""

from __future__ import annotations

from typing import Any, List, Optional, Tuple

import click
from typer.core import TyperGroup

from .common import DEFAULT_COMMAND


class AliasDispatchGroup(TyperGroup):
    """Route ``<tool> <alias>`` to the default ``run`` sub-command.

    Any first token that is neither an option nor a registered sub-command is
    treated as an alias name and handed to ``run`` unchanged.
    """

    default_command = DEFAULT_COMMAND

    def resolve_command(
        self, ctx: click.Context, args: List[str]
    ) -> Tuple[Optional[str], Optional[click.Command], List[str]]:
        if args and self._is_alias_token(ctx, args[0]):
            args = [self.default_command, *args]
        return super().resolve_command(ctx, args)

    def _is_alias_token(self, ctx: click.Context, token: Any) -> bool:
        name = str(token)
        if name.startswith("-"):
            return False
        return self.get_command(ctx, name) is None
