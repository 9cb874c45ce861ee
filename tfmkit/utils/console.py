"""
Rich console output for the tfmkit CLI.

Only what a command shows the user goes through here: status lines, result
tables and the markup helpers that color verdicts. Diagnostics belong in
:mod:`tfmkit.utils.logger`.

Color is on when stdout is a terminal and neither ``NO_COLOR`` nor ``CI``
is set, unless :func:`reset_console` was given an explicit choice (the
CLI's ``--color/--no-color``).
"""

from __future__ import annotations

import os
import sys
import threading
from typing import Any, Dict, Mapping, Optional, Sequence

from rich.table import Table
from rich.theme import Theme
from rich.markup import escape
from rich.console import Console

TFMKIT_THEME = Theme(
    {
        "ok": "bold green",
        "failure": "bold red",
        "notice": "bold yellow",
        "heading": "bold",
        "muted": "dim",
        "framework": "bold magenta",
    }
)

_console: Optional[Console] = None
_color_choice: Optional[bool] = None
_lock = threading.Lock()


def _auto_color() -> bool:
    if os.environ.get("NO_COLOR") or os.environ.get("CI"):
        return False
    isatty = getattr(sys.stdout, "isatty", None)
    if isatty is None:
        return False
    try:
        return bool(isatty())
    except OSError:
        return False


def get_console() -> Console:
    """Return the shared console, building it on first use."""
    global _console

    with _lock:
        if _console is None:
            color = _auto_color() if _color_choice is None else _color_choice
            _console = Console(theme=TFMKIT_THEME, no_color=not color, highlight=False)
        return _console


def reset_console(color: Optional[bool] = None) -> None:
    """Forget the shared console so the next use rebuilds it.

    Args:
        color: Force color on or off; ``None`` restores auto-detection.
    """
    global _console, _color_choice

    with _lock:
        _console = None
        _color_choice = color


def print_error(message: str) -> None:
    """Print ``message`` as an error line. Brackets are printed literally."""
    get_console().print(f"[ERROR] {message}", style="failure", markup=False)


def print_warning(message: str) -> None:
    """Print ``message`` as a warning line. Brackets are printed literally."""
    get_console().print(f"[WARNING] {message}", style="notice", markup=False)


def print_table(
    rows: Sequence[Mapping[str, Any]],
    *,
    title: Optional[str] = None,
    column_options: Optional[Mapping[str, Dict[str, Any]]] = None,
) -> None:
    """Print ``rows`` as a table whose columns are the first row's keys.

    Cell values may contain Rich markup; escape user input before passing
    it in.

    Args:
        rows: One mapping per row.
        title: Table title.
        column_options: Extra :meth:`rich.table.Table.add_column` keyword
            arguments per column, e.g. ``{"Moniker": {"no_wrap": True}}``.
    """
    if not rows:
        return

    options = column_options or {}
    table = Table(title=title, header_style="heading")
    columns = list(rows[0])
    for name in columns:
        table.add_column(name, **options.get(name, {}))
    for row in rows:
        table.add_row(*(str(row.get(name, "")) for name in columns))

    get_console().print(table)


def verdict_markup(compatible: bool) -> str:
    """Markup for a compatibility verdict."""
    return "[ok]compatible[/ok]" if compatible else "[failure]incompatible[/failure]"


def flag_markup(value: bool, *, miss_style: str = "muted") -> str:
    """Markup for a yes/no cell."""
    return "[ok]yes[/ok]" if value else f"[{miss_style}]no[/{miss_style}]"


def framework_markup(text: Optional[str]) -> str:
    """Markup for a framework name; ``None`` renders as *any*."""
    if text is None:
        return "[muted]any[/muted]"
    return f"[framework]{escape(text)}[/framework]"
