"""
Logging setup for tfmkit.

Library modules get their loggers from :func:`get_logger` and log under the
``tfmkit`` namespace. A ``NullHandler`` sits on that namespace, so nothing
is printed until the host application configures logging or calls
:func:`configure_logging` (the CLI does this from its ``-v`` count).

Soft parser fallbacks and compatibility decisions are logged at DEBUG.
"""

from __future__ import annotations

import os
import sys
import copy
import logging
import threading
from typing import IO, Mapping, Optional

from tfmkit.constants import (
    LOG_DATE_FORMAT,
    LOG_DEFAULT_FORMAT,
    LOG_VERBOSE_FORMAT,
)

ROOT_LOGGER_NAME = "tfmkit"

# Set on handlers installed by configure_logging so they can be told apart
# from handlers the host application attached.
_HANDLER_MARK = "_tfmkit_cli_handler"

_configure_lock = threading.Lock()

logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())


class ColoredFormatter(logging.Formatter):
    """Formatter that wraps the level name in an ANSI color.

    Whether to color is decided when the formatter is built, from the
    stream its handler writes to.
    """

    LEVEL_COLORS: Mapping[int, str] = {
        logging.DEBUG: "36",
        logging.INFO: "32",
        logging.WARNING: "33",
        logging.ERROR: "31",
        logging.CRITICAL: "35",
    }

    def __init__(
        self,
        fmt: str,
        *,
        datefmt: Optional[str] = None,
        color: bool = False,
    ) -> None:
        super().__init__(fmt=fmt, datefmt=datefmt)
        self.color = color

    def format(self, record: logging.LogRecord) -> str:
        code = self.LEVEL_COLORS.get(record.levelno) if self.color else None
        if code is None:
            return super().format(record)

        # Other handlers may format the same record
        tinted = copy.copy(record)
        tinted.levelname = f"\033[{code}m{record.levelname}\033[0m"
        return super().format(tinted)


def stream_supports_color(stream: IO[str]) -> bool:
    """True if ``stream`` is a terminal and neither NO_COLOR nor CI is set."""
    if os.environ.get("NO_COLOR") or os.environ.get("CI"):
        return False
    isatty = getattr(stream, "isatty", None)
    if isatty is None:
        return False
    try:
        return bool(isatty())
    except OSError:
        return False


def verbosity_to_level(verbose: int) -> int:
    """Map a ``-v`` count to a logging level (0=WARNING, 1=INFO, 2+=DEBUG)."""
    if verbose <= 0:
        return logging.WARNING
    if verbose == 1:
        return logging.INFO
    return logging.DEBUG


def configure_logging(
    verbosity: int = 0,
    *,
    stream: Optional[IO[str]] = None,
    color: Optional[bool] = None,
) -> logging.Handler:
    """Send tfmkit log records to ``stream``.

    A handler installed by an earlier call is replaced; handlers attached
    by anyone else are left alone. Records no longer propagate to the root
    logger while the handler is installed.

    Args:
        verbosity: ``-v`` count. Two or more also switches to the format
            with timestamps and logger names.
        stream: Destination; defaults to ``sys.stderr``.
        color: Force level colors on or off; ``None`` detects from
            ``stream``.

    Returns:
        The installed handler.
    """
    target = stream if stream is not None else sys.stderr
    level = verbosity_to_level(verbosity)

    handler = logging.StreamHandler(target)
    handler.setLevel(level)
    handler.setFormatter(
        ColoredFormatter(
            LOG_VERBOSE_FORMAT if verbosity > 1 else LOG_DEFAULT_FORMAT,
            datefmt=LOG_DATE_FORMAT,
            color=stream_supports_color(target) if color is None else color,
        )
    )
    setattr(handler, _HANDLER_MARK, True)

    with _configure_lock:
        root = logging.getLogger(ROOT_LOGGER_NAME)
        _detach_installed(root)
        root.addHandler(handler)
        root.setLevel(level)
        root.propagate = False

    return handler


def disable_logging() -> None:
    """Remove the handler installed by :func:`configure_logging`.

    tfmkit goes back to its library defaults: no output of its own, and
    records propagate to the host application's handlers.
    """
    with _configure_lock:
        root = logging.getLogger(ROOT_LOGGER_NAME)
        _detach_installed(root)
        root.setLevel(logging.NOTSET)
        root.propagate = True


def is_logging_configured() -> bool:
    """True while a handler from :func:`configure_logging` is installed."""
    root = logging.getLogger(ROOT_LOGGER_NAME)
    return any(getattr(handler, _HANDLER_MARK, False) for handler in root.handlers)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a logger inside the ``tfmkit`` namespace.

    ``get_logger("core.compatibility")`` and
    ``get_logger("tfmkit.core.compatibility")`` are the same logger.
    """
    if not name or name == ROOT_LOGGER_NAME:
        return logging.getLogger(ROOT_LOGGER_NAME)
    if name.startswith(f"{ROOT_LOGGER_NAME}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def _detach_installed(logger: logging.Logger) -> None:
    for handler in list(logger.handlers):
        if getattr(handler, _HANDLER_MARK, False):
            logger.removeHandler(handler)
            handler.close()
