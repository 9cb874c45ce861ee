"""Parse command implementation for tfmkit.

Parses one or more target framework monikers and shows the normalized
descriptor for each.

Typical usage::

    $ tfmkit parse net40-client sl4-wp71 NET41235
    $ tfmkit parse --format json netmf4.1
"""

from __future__ import annotations

import sys
from typing import Any, Dict, List, Optional, Tuple

import click
from rich.markup import escape

from tfmkit.exceptions import TfmKitError
from tfmkit.models.framework import FrameworkName
from tfmkit.context import TfmKitContext, pass_context
from tfmkit.commands import echo_json, echo_simple, format_option
from tfmkit.core import (
    get_framework_string,
    get_short_framework_name,
    parse_framework_name,
)
from tfmkit.utils import get_logger, print_table, print_warning

logger = get_logger("commands.parse")

ParseOutcome = Tuple[str, Optional[FrameworkName], Optional[str]]


@click.command(name="parse")
@click.argument("monikers", nargs=-1, required=True)
@format_option
@pass_context
def parse(ctx: TfmKitContext, monikers: Tuple[str, ...], output_format: Optional[str]) -> None:
    """Parse framework monikers such as ``net40-client``.

    Unknown identifiers and malformed versions are reported as
    ``Unsupported``; monikers that cannot be parsed at all (``-client``,
    ``net-40-x``) are reported as errors.

    Exits:
        0 if every moniker parsed, 1 otherwise.
    """
    outcomes: List[ParseOutcome] = []
    for moniker in monikers:
        try:
            outcomes.append((moniker, parse_framework_name(moniker), None))
        except TfmKitError as exc:
            logger.info("Failed to parse %r: %s", moniker, exc)
            outcomes.append((moniker, None, exc.message))

    fmt = ctx.resolve_format(output_format)
    if fmt == "json":
        echo_json([_to_json(*outcome) for outcome in outcomes])
    elif fmt == "simple":
        echo_simple([_to_row(*outcome) for outcome in outcomes])
    else:
        print_table(
            [
                {column: escape(value) for column, value in _to_row(*outcome).items()}
                for outcome in outcomes
            ],
            title="Frameworks",
            column_options={"Moniker": {"style": "framework", "no_wrap": True}},
        )

    unsupported = [m for m, framework, _ in outcomes if framework and framework.is_unsupported]
    if unsupported and fmt == "table":
        print_warning(f"Unsupported framework(s): {', '.join(unsupported)}")

    failed = any(error is not None for _, _, error in outcomes)
    sys.exit(1 if failed else 0)


def _to_row(
    moniker: str,
    framework: Optional[FrameworkName],
    error: Optional[str],
) -> Dict[str, str]:
    if framework is None:
        return {
            "Moniker": moniker,
            "Identifier": "error",
            "Version": "-",
            "Profile": "-",
            "Canonical": error or "",
        }
    return {
        "Moniker": moniker,
        "Identifier": framework.identifier,
        "Version": str(framework.version),
        "Profile": framework.profile or "-",
        "Canonical": get_framework_string(framework),
    }


def _to_json(
    moniker: str,
    framework: Optional[FrameworkName],
    error: Optional[str],
) -> Dict[str, Any]:
    if framework is None:
        return {"moniker": moniker, "error": error}
    entry: Dict[str, Any] = {"moniker": moniker}
    entry.update(framework.to_json())
    entry["canonical"] = get_framework_string(framework)
    entry["short_name"] = get_short_framework_name(framework)
    return entry
