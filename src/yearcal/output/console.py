"""Rich Console factory and theme for yearcal output.

Consoles render to a StringIO buffer so renderers keep a
``render_result() -> str`` contract. In non-TTY environments (tests,
pipes) Rich disables color codes automatically.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

YEARCAL_THEME = Theme(
    {
        "cal.ok": "bold green",
        "cal.error": "bold red",
        "cal.op": "bold cyan",
        "cal.key": "dim",
        "cal.title": "bold",
        "cal.weekend": "yellow",
        "cal.leap": "bold magenta",
        "cal.number": "bold blue",
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
        theme=YEARCAL_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 100,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
