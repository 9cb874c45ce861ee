"""State shared between the ``tfmkit`` group and its subcommands."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import click

from tfmkit.config import TfmKitConfig


class TfmKitContext:
    """Options resolved by the ``tfmkit`` group callback.

    ``color`` is ``True`` or ``False`` when ``--color`` or ``--no-color``
    was given; otherwise it is ``None`` and the console auto-detects.
    """

    __slots__ = ("config_path", "verbose", "color", "config")

    def __init__(self) -> None:
        self.config_path: Optional[Path] = None
        self.verbose = 0
        self.color: Optional[bool] = None
        self.config = TfmKitConfig()

    def resolve_format(self, requested: Optional[str]) -> str:
        """The ``--format`` value, else the configured output format."""
        return requested.lower() if requested else self.config.output_format

    def resolve_target(self, requested: Optional[str]) -> Optional[str]:
        """The ``--target`` value, else the configured default target."""
        return requested or self.config.default_target


pass_context = click.make_pass_decorator(TfmKitContext, ensure=True)
