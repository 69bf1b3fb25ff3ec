from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.theme import Theme


# One Dark-inspired palette tuned for Rich output
PALETTE = {
    "fg": "#abb2bf",
    "fg_muted": "#5c6370",
    "green": "#98c379",
    "yellow": "#e5c07b",
    "orange": "#d19a66",
    "blue": "#61afef",
    "cyan": "#56b6c2",
    "purple": "#c678dd",
    "red": "#e06c75",
}

_theme = Theme(
    {
        "text": PALETTE["fg"],
        "muted": PALETTE["fg_muted"],
        "accent": PALETTE["orange"],
        "ok": PALETTE["green"],
        "warn": PALETTE["yellow"],
        "error": f"bold {PALETTE['red']}",
        "info": PALETTE["blue"],
        "alias": f"bold {PALETTE['green']}",
        "section": f"bold {PALETTE['orange']}",
    }
)

console = Console(theme=_theme, style=PALETTE["fg"])
err_console = Console(theme=_theme, stderr=True)

_verbose = False


def set_verbose(enabled: bool) -> None:
    """Toggle diagnostic output for the current invocation."""
    global _verbose
    _verbose = enabled


def debug(message: str) -> None:
    """Print a diagnostic line on stderr when verbose mode is enabled."""
    if _verbose:
        err_console.print(
            f"[muted]debug: {escape(message)}[/]", highlight=False, soft_wrap=True
        )
