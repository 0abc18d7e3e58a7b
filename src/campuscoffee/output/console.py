"""Rich Console factory and theme for campuscoffee output.

Creates Console instances that render to a StringIO buffer, preserving
the ``format_result() -> str`` contract. In non-TTY environments
(tests, pipes) Rich automatically disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

COFFEE_THEME = Theme(
    {
        "cc.ok": "bold green",
        "cc.error": "bold red",
        "cc.op": "bold cyan",
        "cc.key": "dim",
        "cc.id": "bold blue",
        "cc.name": "bold",
        "cc.type.cafe": "green",
        "cc.type.bakery": "yellow",
        "cc.type.vending_machine": "magenta",
        "cc.type.cafeteria": "blue",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes (used in tests).
        width: Override terminal width (useful for consistent test output).
    """
    return Console(
        file=StringIO(),
        theme=COFFEE_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_type(pos_type: str) -> str:
    """Return the Rich style name for a POS type value."""
    return f"cc.type.{pos_type.lower()}" if pos_type else ""
