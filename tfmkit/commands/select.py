"""Select command implementation for tfmkit.

Shows the framework each package asset path is scoped to, and which assets
a project targeting a given framework would use.

Typical usage::

    $ tfmkit select --target net40 foo.dll net20/foo.dll net35/foo.dll sl4/foo.dll
"""

from __future__ import annotations

import sys
from typing import Any, Dict, List, Optional, Tuple

import click
from rich.markup import escape

from tfmkit.exceptions import TfmKitError
from tfmkit.context import TfmKitContext, pass_context
from tfmkit.commands import echo_json, echo_simple, format_option
from tfmkit.core import (
    get_compatible_items,
    get_short_framework_name,
    parse_framework_folder_name,
    parse_framework_name,
)
from tfmkit.utils import (
    flag_markup,
    framework_markup,
    get_logger,
    print_error,
    print_table,
    print_warning,
)

logger = get_logger("commands.select")


@click.command(name="select")
@click.argument("paths", nargs=-1, required=True)
@click.option(
    "--target",
    "-t",
    default=None,
    help="Framework of the consuming project (defaults to default_target).",
)
@format_option
@pass_context
def select(
    ctx: TfmKitContext,
    paths: Tuple[str, ...],
    target: Optional[str],
    output_format: Optional[str],
) -> None:
    """Select the asset PATHS usable by the target framework.

    Exits:
        0 if at least one asset was selected, 1 otherwise.
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

    selected = set(get_compatible_items(target_framework, paths))
    logger.info("Selected %d of %d asset(s)", len(selected), len(paths))

    rows = [_describe(path, path in selected) for path in paths]

    fmt = ctx.resolve_format(output_format)
    if fmt == "json":
        echo_json({"target": target_framework.to_json(), "assets": rows})
    elif fmt == "simple":
        echo_simple([row for row in rows if row["selected"]], columns=["path"])
    else:
        _display_table(rows)
        if not selected:
            print_warning(f"No assets apply to {moniker}")

    sys.exit(0 if selected else 1)


def _describe(path: str, selected: bool) -> Dict[str, Any]:
    framework = parse_framework_folder_name(path)
    if framework is None:
        scope = None
    elif framework.is_unsupported:
        scope = framework.identifier
    else:
        scope = get_short_framework_name(framework)
    return {"path": path, "framework": scope, "selected": selected}


def _display_table(rows: List[Dict[str, Any]]) -> None:
    print_table(
        [
            {
                "Path": escape(row["path"]),
                "Framework": framework_markup(row["framework"]),
                "Selected": flag_markup(row["selected"]),
            }
            for row in rows
        ],
        title="Assets",
    )
