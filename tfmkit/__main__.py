"""``python -m tfmkit``: same as the ``tfmkit`` console script."""

from __future__ import annotations

import sys


def _print_startup_error(exc: ImportError) -> None:
    """Report why the CLI could not be imported."""
    try:
        from tfmkit.__version__ import __version__ as version
    except ImportError:
        version = "<unknown>"

    sys.stderr.write(
        "tfmkit CLI could not be loaded.\n"
        f"Python version : {sys.version}\n"
        f"tfmkit version: {version}\n"
        f"ImportError: {exc}\n"
    )


def main() -> int:
    """Run the CLI; return 1 if its dependencies cannot be imported."""
    try:
        # click and rich are only needed once the CLI actually runs
        from tfmkit.cli import main as run_cli
    except ImportError as exc:
        _print_startup_error(exc)
        return 1
    return run_cli()


if __name__ == "__main__":
    sys.exit(main())
