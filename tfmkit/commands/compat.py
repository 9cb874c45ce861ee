"""Compat command implementation for tfmkit.

Checks whether a project targeting one framework can consume assets built
for other frameworks.

Typical usage::

    $ tfmkit compat --target net40 net20 net40-client sl4
    $ tfmkit compat --target sl4-wp71 sl3-wp

When ``--target`` is omitted, ``default_target`` from the configuration
file is used.
"""

from __future__ import annotations

import sys
from typing import Any, Dict, Optional, Tuple

import click
from rich.markup import escape

from tfmkit.models.framework import FrameworkName
from tfmkit.exceptions import TfmKitError
from tfmkit.context import TfmKitContext, pass_context
from tfmkit.commands import echo_json, echo_simple, format_option
from tfmkit.core import get_framework_string, is_compatible, parse_framework_name
from tfmkit.utils import get_logger, print_error, print_table, verdict_markup

logger = get_logger("commands.compat")


@click.command(name="compat")
@click.argument("candidates", nargs=-1, required=True)
@click.option(
    "--target",
    "-t",
    default=None,
    help="Framework of the consuming project (defaults to default_target).",
)
@format_option
@pass_context
def compat(
    ctx: TfmKitContext,
    candidates: Tuple[str, ...],
    target: Optional[str],
    output_format: Optional[str],
) -> None:
    """Check CANDIDATES frameworks against a target framework.

    Exits:
        0 if every candidate is compatible, 1 otherwise.
    """
    moniker = ctx.resolve_target(target)
    if moniker is None:
        raise click.UsageError(
            "No target framework: pass --target or set default_target in the configuration."
        )

    try:
        target_framework = parse_framework_name(moniker)
    except TfmKitError as exc:
        print_error(f"Invalid target framework {moniker!r}: {exc.message}")
        sys.exit(1)

    results = [_evaluate(target_framework, candidate) for candidate in candidates]

    fmt = ctx.resolve_format(output_format)
    if fmt == "json":
        echo_json(
            {
                "target": target_framework.to_json(),
                "candidates": results,
            }
        )
    elif fmt == "simple":
        echo_simple(
            [
                {
                    "candidate": r["candidate"],
                    "verdict": "compatible" if r["compatible"] else "incompatible",
                }
                for r in results
            ]
        )
    else:
        print_table(
            [
                {
                    "Candidate": escape(r["candidate"]),
                    "Framework": escape(r["framework"] or r["error"]),
                    "Result": verdict_markup(r["compatible"]),
                }
                for r in results
            ],
            title=f"Compatibility with {escape(get_framework_string(target_framework))}",
        )

    sys.exit(0 if all(r["compatible"] for r in results) else 1)


def _evaluate(target: FrameworkName, candidate: str) -> Dict[str, Any]:
    result: Dict[str, Any] = {
        "candidate": candidate,
        "framework": None,
        "compatible": False,
        "error": None,
    }
    try:
        framework = parse_framework_name(candidate)
    except TfmKitError as exc:
        logger.info("Failed to parse candidate %r: %s", candidate, exc)
        result["error"] = exc.message
        return result

    result["framework"] = get_framework_string(framework)
    result["compatible"] = is_compatible(target, framework)
    return result
