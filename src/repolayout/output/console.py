"""Rich Console factory and theme for repolayout output.

Consoles render to a StringIO buffer so formatters keep a
``format_result() -> str`` contract. In non-TTY environments (tests,
pipes) Rich disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

LAYOUT_THEME = Theme(
    {
        "rl.ok": "bold green",
        "rl.error": "bold red",
        "rl.warning": "bold yellow",
        "rl.op": "bold cyan",
        "rl.key": "dim",
        "rl.name": "bold blue",
        "rl.path": "dim",
        "rl.disabled": "dim strike",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer."""
    return Console(
        file=StringIO(),
        theme=LAYOUT_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
