"""
Version data model for tfmkit.

A :class:`Version` is a four-part numeric version (major, minor, build,
revision) as used by framework monikers and dependency ranges. Unlike PEP
440 versions it has no pre-release or local segments; unspecified trailing
components are simply zero.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True, order=True)
class Version:
    """
    Immutable four-part version.

    Equality and ordering are lexicographic over all four fields, so
    ``Version(1, 2)`` equals ``Version(1, 2, 0, 0)``.

    Attributes:
        major: Major component.
        minor: Minor component.
        build: Build component (defaults to 0).
        revision: Revision component (defaults to 0).
    """

    major: int
    minor: int
    build: int = 0
    revision: int = 0

    def __post_init__(self) -> None:
        """Reject negative components."""
        for name, value in zip(
            ("major", "minor", "build", "revision"), self.to_tuple()
        ):
            if value < 0:
                raise ValueError(f"Version {name} must be non-negative, got {value}")

    def to_tuple(self) -> Tuple[int, int, int, int]:
        """Return all four components."""
        return self.major, self.minor, self.build, self.revision

    def trim(self) -> Tuple[int, ...]:
        """
        Return the components with trailing zeros removed.

        The revision is dropped when it is zero; the build is dropped only
        when the revision was dropped and the build is also zero. Major and
        minor are always kept.

        Returns:
            Tuple of two to four components.

        Examples:
            >>> Version(1, 2, 3, 0).trim()
            (1, 2, 3)
            >>> Version(1, 2, 0, 0).trim()
            (1, 2)
            >>> Version(1, 2, 0, 5).trim()
            (1, 2, 0, 5)
        """
        if self.revision != 0:
            return self.to_tuple()
        if self.build != 0:
            return self.major, self.minor, self.build
        return self.major, self.minor

    def __str__(self) -> str:
        """Return the trimmed dotted form."""
        return ".".join(str(part) for part in self.trim())

    def __repr__(self) -> str:
        """Return a debug-friendly representation."""
        return f"Version({str(self)!r})"
