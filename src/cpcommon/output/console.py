"""In-memory Rich rendering with the cp-common theme.

Renderers draw into a StringIO-backed Console and hand back plain text;
Rich drops colour codes when the real output is not a terminal.
"""

from __future__ import annotations

from collections.abc import Callable
from io import StringIO

from rich.console import Console
from rich.theme import Theme

CP_THEME = Theme(
    {
        "cp.ok": "bold green",
        "cp.error": "bold red",
        "cp.op": "bold cyan",
        "cp.key": "dim",
        "cp.id": "bold blue",
        "cp.code": "bold",
        "cp.name": "bold magenta",
    }
)

DEFAULT_WIDTH = 120


def create_console(buffer: StringIO, *, width: int = DEFAULT_WIDTH) -> Console:
    return Console(file=buffer, theme=CP_THEME, highlight=False, width=width)


def render_to_text(draw: Callable[[Console], None], *, width: int = DEFAULT_WIDTH) -> str:
    """Run *draw* against a fresh buffered console and return what it printed."""
    buffer = StringIO()
    draw(create_console(buffer, width=width))
    return buffer.getvalue().rstrip("\n")
