"""
Framework descriptor model for tfmkit.

A :class:`FrameworkName` is the parsed, structured form of a target
framework moniker such as ``net40-client``. Instances are created by
:func:`tfmkit.core.framework_parser.parse_framework_name` and never
mutated.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict

from tfmkit.constants import UNSUPPORTED_IDENTIFIER
from tfmkit.models.version import Version


@dataclass(frozen=True)
class FrameworkName:
    """
    Represents a target framework: identifier, version and profile.

    Attributes:
        identifier: Canonical framework identifier (e.g. ``.NETFramework``)
            or ``Unsupported``.
        version: Framework version.
        profile: Canonical profile, or ``""`` for the full framework.
    """

    identifier: str
    version: Version = field(default_factory=lambda: Version(0, 0))
    profile: str = ""

    @property
    def is_unsupported(self) -> bool:
        """True if this descriptor is the ``Unsupported`` sentinel family."""
        return self.identifier == UNSUPPORTED_IDENTIFIER

    @property
    def full_name(self) -> str:
        """
        Long display form, e.g. ``.NETFramework,Version=v4.0,Profile=Client``.
        """
        text = f"{self.identifier},Version=v{self.version}"
        if self.profile:
            text += f",Profile={self.profile}"
        return text

    def to_json(self) -> Dict[str, Any]:
        """
        Serialize the descriptor to a JSON-compatible dictionary.

        Returns:
            Mapping with ``identifier``, ``version`` and ``profile`` keys.
        """
        return {
            "identifier": self.identifier,
            "version": str(self.version),
            "profile": self.profile,
        }

    def __str__(self) -> str:
        """Return the long display form."""
        return self.full_name


#: Result of every soft parsing fallback.
UNSUPPORTED_FRAMEWORK = FrameworkName(UNSUPPORTED_IDENTIFIER, Version(0, 0))
