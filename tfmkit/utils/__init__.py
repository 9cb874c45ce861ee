"""Console and logging helpers shared by the tfmkit CLI and library code."""

from __future__ import annotations

from tfmkit.utils.logger import (
    configure_logging,
    disable_logging,
    get_logger,
    is_logging_configured,
    verbosity_to_level,
)
from tfmkit.utils.console import (
    flag_markup,
    framework_markup,
    get_console,
    print_error,
    print_table,
    print_warning,
    reset_console,
    verdict_markup,
)

__all__ = [
    # Console
    "get_console",
    "reset_console",
    "print_error",
    "print_warning",
    "print_table",
    "verdict_markup",
    "flag_markup",
    "framework_markup",
    # Logging
    "get_logger",
    "configure_logging",
    "disable_logging",
    "is_logging_configured",
    "verbosity_to_level",
]
