"""
Version range data model for tfmkit.

A :class:`VersionRange` is an interval over :class:`Version` values with
independently inclusive or exclusive bounds, as written in dependency
declarations using interval notation (``[1.2,2.3)``).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from tfmkit.models.version import Version


@dataclass(frozen=True)
class VersionRange:
    """
    Represents an interval of acceptable versions.

    An absent bound means the range is unbounded on that side.

    Attributes:
        min_version: Lower bound, or ``None``.
        is_min_inclusive: Whether ``min_version`` itself is accepted.
        max_version: Upper bound, or ``None``.
        is_max_inclusive: Whether ``max_version`` itself is accepted.
    """

    min_version: Optional[Version] = None
    is_min_inclusive: bool = False
    max_version: Optional[Version] = None
    is_max_inclusive: bool = False

    def satisfies(self, version: Version) -> bool:
        """
        Check whether ``version`` falls inside the range.

        Args:
            version: Candidate version.

        Returns:
            True if both bounds accept the version.
        """
        if self.min_version is not None:
            above_min = version > self.min_version or (
                self.is_min_inclusive and version == self.min_version
            )
            if not above_min:
                return False

        if self.max_version is not None:
            below_max = version < self.max_version or (
                self.is_max_inclusive and version == self.max_version
            )
            if not below_max:
                return False

        return True

    @property
    def is_exact(self) -> bool:
        """True if both bounds are the same version."""
        return self.min_version is not None and self.min_version == self.max_version

    def pretty_print(self) -> str:
        """
        Render the range as a human-readable comparison.

        Returns:
            A string such as ``(>= 1.2 && < 2.3)`` or ``(= 1.2)``.
        """
        if self.is_exact and self.is_min_inclusive and self.is_max_inclusive:
            return f"(= {self.min_version})"

        parts: List[str] = []
        if self.min_version is not None:
            operator = ">=" if self.is_min_inclusive else ">"
            parts.append(f"{operator} {self.min_version}")
        if self.max_version is not None:
            operator = "<=" if self.is_max_inclusive else "<"
            parts.append(f"{operator} {self.max_version}")

        if not parts:
            return "(any)"
        return f"({' && '.join(parts)})"

    def to_json(self) -> Dict[str, Any]:
        """
        Serialize the range to a JSON-compatible dictionary.

        Returns:
            JSON-safe range representation.
        """
        return {
            "min_version": str(self.min_version) if self.min_version else None,
            "is_min_inclusive": self.is_min_inclusive,
            "max_version": str(self.max_version) if self.max_version else None,
            "is_max_inclusive": self.is_max_inclusive,
            "interval": str(self),
        }

    def __str__(self) -> str:
        """Return the interval notation that parses back to this range."""
        if (
            self.min_version is not None
            and self.is_min_inclusive
            and self.max_version is None
            and not self.is_max_inclusive
        ):
            return str(self.min_version)

        left = "[" if self.is_min_inclusive else "("
        right = "]" if self.is_max_inclusive else ")"

        if self.is_exact:
            return f"{left}{self.min_version}{right}"

        low = str(self.min_version) if self.min_version is not None else ""
        high = str(self.max_version) if self.max_version is not None else ""
        return f"{left}{low},{high}{right}"
