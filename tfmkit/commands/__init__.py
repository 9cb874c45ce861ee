"""
CLI subcommands for tfmkit.

Each module defines a single Click command; :mod:`tfmkit.cli` registers
them on the top-level group.
"""

from __future__ import annotations

import json
from typing import Any, Dict, List, Optional

import click

from tfmkit.constants import OUTPUT_FORMATS

#: Shared ``--format`` option; ``None`` means "use the configured default".
format_option = click.option(
    "--format",
    "-f",
    "output_format",
    type=click.Choice(list(OUTPUT_FORMATS), case_sensitive=False),
    default=None,
    help="Output format (defaults to the configured output_format).",
)


def echo_json(data: Any) -> None:
    """Write ``data`` to stdout as indented JSON."""
    click.echo(json.dumps(data, indent=2))


def echo_simple(rows: List[Dict[str, Any]], columns: Optional[List[str]] = None) -> None:
    """Write one tab-separated line per row."""
    for row in rows:
        keys = columns or list(row.keys())
        click.echo("\t".join(str(row.get(key, "")) for key in keys))
