"""Rich Console factory and theme for passctl output.

Creates Console instances that render to a StringIO buffer, preserving
the ``format_result() -> str`` contract.  In non-TTY environments
(tests, pipes) Rich automatically disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

PASS_THEME = Theme(
    {
        "pass.ok": "bold green",
        "pass.error": "bold red",
        "pass.warning": "bold yellow",
        "pass.op": "bold cyan",
        "pass.key": "dim",
        "pass.path": "dim",
        "pass.label": "dim",
        "pass.value": "bold",
        "pass.placeholder": "italic dim",
        "pass.style.storeCard": "green",
        "pass.style.coupon": "magenta",
        "pass.style.eventTicket": "blue",
        "pass.style.generic": "cyan",
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
        theme=PASS_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_pass_style(style: str) -> str:
    """Return the Rich style name for a pass style."""
    name = f"pass.style.{style}"
    return name if name in PASS_THEME.styles else ""
