"""Rich Console factory and theme for agelum output.

Consoles render into a StringIO buffer so formatters keep a plain
``-> str`` contract. In non-TTY environments (tests, pipes) Rich drops
color codes on its own.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

AGELUM_THEME = Theme(
    {
        "agelum.ok": "bold green",
        "agelum.error": "bold red",
        "agelum.warning": "bold yellow",
        "agelum.op": "bold cyan",
        "agelum.key": "dim",
        "agelum.path": "dim",
        "agelum.title": "bold",
        "agelum.state.pending": "yellow",
        "agelum.state.doing": "cyan",
        "agelum.state.done": "green",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer."""
    return Console(
        file=StringIO(),
        theme=AGELUM_THEME,
        no_color=no_color,
        highlight=False,
        emoji=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_state(state: str) -> str:
    """Rich style name for a task state."""
    return f"agelum.state.{state}" if state in ("pending", "doing", "done") else ""
