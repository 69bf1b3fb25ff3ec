"""Shell completion helpers for the custom-commands CLI."""

from __future__ import annotations

from typing import Iterable, List

import click
import typer
from click.shell_completion import CompletionItem

from . import common

CompletionList = List[CompletionItem]


def alias_name_completion(
    ctx: typer.Context | None,  # noqa: ARG001 - required by Click shell completion
    param: click.Parameter | None,  # noqa: ARG001
    incomplete: str,
) -> CompletionList:
    """Return stored aliases filtered by the user's partial input."""

    table = common.build_manager().load()
    matches = _match_candidates(table.keys(), incomplete)
    return [CompletionItem(match, help=table[match]) for match in matches]


def _match_candidates(candidates: Iterable[str], needle: str) -> List[str]:
    term = (needle or "").lower()
    return [candidate for candidate in candidates if candidate.lower().startswith(term)]


__all__ = ["alias_name_completion"]
