"""Range command implementation for tfmkit.

Parses a version range in interval notation and optionally checks versions
against it.

Typical usage::

    $ tfmkit range "[1.2,2.3)" --check 1.2 --check 2.3
    $ tfmkit range --safe 2.9.45.6
"""

from __future__ import annotations

import sys
from typing import Any, Dict, List, Optional, Tuple

import click
from rich.markup import escape

from tfmkit.exceptions import TfmKitError
from tfmkit.models.version_range import VersionRange
from tfmkit.context import TfmKitContext, pass_context
from tfmkit.commands import echo_json, echo_simple, format_option
from tfmkit.core import get_safe_range, parse_version, parse_version_range
from tfmkit.utils import flag_markup, get_console, get_logger, print_error, print_table

logger = get_logger("commands.range")


@click.command(name="range")
@click.argument("expression")
@click.option(
    "--check",
    "-k",
    "versions",
    multiple=True,
    help="Version to test against the range (repeatable).",
)
@click.option(
    "--safe",
    is_flag=True,
    help="Treat EXPRESSION as a single version and show its safe upgrade range.",
)
@format_option
@pass_context
def range_(
    ctx: TfmKitContext,
    expression: str,
    versions: Tuple[str, ...],
    safe: bool,
    output_format: Optional[str],
) -> None:
    """Parse the version range EXPRESSION, e.g. ``[1.2,2.3)``.

    Exits:
        0 if EXPRESSION is valid and every checked version satisfies it, 1 otherwise.
    """
    try:
        if safe:
            version_range = get_safe_range(parse_version(expression))
        else:
            version_range = parse_version_range(expression)
    except TfmKitError as exc:
        print_error(str(exc))
        sys.exit(1)

    checks = [_check(version_range, version) for version in versions]

    fmt = ctx.resolve_format(output_format)
    if fmt == "json":
        entry = version_range.to_json()
        entry["pretty"] = version_range.pretty_print()
        entry["checks"] = checks
        echo_json(entry)
    elif fmt == "simple":
        click.echo(f"{version_range}\t{version_range.pretty_print()}")
        echo_simple(
            [{"version": c["version"], "satisfied": c["satisfied"]} for c in checks]
        )
    else:
        _display_table(version_range, checks)

    sys.exit(0 if all(c["satisfied"] for c in checks) else 1)


def _check(version_range: VersionRange, text: str) -> Dict[str, Any]:
    try:
        version = parse_version(text)
    except TfmKitError as exc:
        logger.info("Cannot check %r: %s", text, exc)
        return {"version": text, "satisfied": False, "error": exc.message}
    return {"version": text, "satisfied": version_range.satisfies(version), "error": None}


def _display_table(version_range: VersionRange, checks: List[Dict[str, Any]]) -> None:
    console = get_console()
    console.print(f"[heading]Range:[/heading] {escape(str(version_range))}")
    console.print(f"[heading]Meaning:[/heading] {escape(version_range.pretty_print())}")

    print_table(
        [
            {
                "Version": escape(c["version"]),
                "Satisfied": flag_markup(c["satisfied"], miss_style="failure"),
                "Note": escape(c["error"] or ""),
            }
            for c in checks
        ],
        title="Checks",
    )
