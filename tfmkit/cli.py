"""
Command-line front end for tfmkit.

The ``tfmkit`` group loads configuration, sets up logging and console
color, and hands a :class:`~tfmkit.context.TfmKitContext` to the
subcommands in :mod:`tfmkit.commands`.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional, Sequence

import click

from tfmkit.config import load_config
from tfmkit.__version__ import __version__
from tfmkit.context import TfmKitContext
from tfmkit.exceptions import ConfigError, TfmKitError
from tfmkit.commands.parse import parse
from tfmkit.commands.range import range_
from tfmkit.commands.compat import compat
from tfmkit.commands.select import select
from tfmkit.utils.logger import configure_logging, get_logger
from tfmkit.utils.console import print_error, print_warning, reset_console

logger = get_logger("cli")


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    envvar="TFMKIT_CONFIG",
    help="Configuration file (default: ./tfmkit.toml or [tool.tfmkit] in ./pyproject.toml).",
)
@click.option("--verbose", "-v", count=True, help="Log more (-v info, -vv debug).")
@click.option(
    "--color/--no-color",
    default=None,
    help="Force colored output on or off (default: auto-detect).",
)
@click.version_option(__version__, prog_name="tfmkit", message="%(prog)s %(version)s")
@click.pass_context
def cli(
    ctx: click.Context,
    config_path: Optional[Path],
    verbose: int,
    color: Optional[bool],
) -> None:
    """Target framework monikers, version ranges and compatibility.

    \b
    Examples:
      tfmkit parse net40-client sl4-wp71
      tfmkit compat -t net40 net20 net40-client
      tfmkit range "[1.2,2.3)" -k 2.0
      tfmkit select -t net40 a.dll net20/a.dll sl4/a.dll
    """
    configure_logging(verbose, color=color)
    reset_console(color)

    try:
        config = load_config(config_path)
    except ConfigError as exc:
        print_error(str(exc))
        sys.exit(1)

    state = ctx.ensure_object(TfmKitContext)
    state.config_path = config_path or config.source_path
    state.verbose = verbose
    state.color = color
    state.config = config

    logger.debug("tfmkit %s, config: %s", __version__, state.config_path or "<defaults>")


for _command in (parse, compat, range_, select):
    cli.add_command(_command)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the CLI and translate failures into exit codes.

    ====  ==================================================
    Code  Meaning
    ====  ==================================================
    0     success
    1     a check failed, or a tfmkit or unexpected error
    2     usage error
    130   interrupted
    ====  ==================================================
    """
    try:
        result = cli.main(args=argv, prog_name="tfmkit", standalone_mode=False)
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except (click.Abort, KeyboardInterrupt):
        print_warning("Interrupted")
        return 130
    except TfmKitError as exc:
        print_error(str(exc))
        logger.debug("%r", exc, exc_info=True)
        return 1
    except Exception as exc:
        logger.exception("Unhandled exception")
        print_error(f"Unexpected error: {exc}")
        return 1

    return result if isinstance(result, int) else 0


if __name__ == "__main__":
    sys.exit(main())
