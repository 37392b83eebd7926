"""Rich Console factory and theme for flavorhub output.

Consoles render into a StringIO buffer so formatters can return plain
strings. In non-TTY environments (tests, pipes) Rich drops color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

FLAVORHUB_THEME = Theme(
    {
        "fh.ok": "bold green",
        "fh.error": "bold red",
        "fh.warning": "bold yellow",
        "fh.op": "bold cyan",
        "fh.key": "dim",
        "fh.id": "bold blue",
        "fh.name": "bold",
        "fh.difficulty.easy": "green",
        "fh.difficulty.medium": "yellow",
        "fh.difficulty.hard": "red",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes.
        width: Override terminal width (useful for consistent test output).
    """
    return Console(
        file=StringIO(),
        theme=FLAVORHUB_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_difficulty(level: str | None) -> str:
    """Rich style name for a difficulty level ('' when unknown)."""
    if not level:
        return ""
    name = f"fh.difficulty.{level.lower()}"
    return name if name in FLAVORHUB_THEME.styles else ""
