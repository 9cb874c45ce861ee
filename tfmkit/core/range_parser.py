"""Version range parsing in interval notation.

Accepted forms (whitespace is ignored throughout)::

    1.2          1.2 <= x
    (1.2,)       1.2 <  x
    [1.2]        x == 1.2
    (,1.2]       x <= 1.2
    (,1.2)       x <  1.2
    [1.2,2.3]    1.2 <= x <= 2.3
    (1.2,2.3)    1.2 <  x <  2.3
    [1.2,2.3)    1.2 <= x <  2.3

Also provides :func:`get_safe_range`, the conservative upgrade window used
when a dependency declares a single version.

Typical usage::

    from tfmkit.core.range_parser import parse_version_range

    allowed = parse_version_range("[1.2,2.3)")
    allowed.satisfies(parse_version("2.0"))  # True
"""

from __future__ import annotations

from typing import Optional

from tfmkit.models.version import Version
from tfmkit.models.version_range import VersionRange
from tfmkit.utils.logger import get_logger
from tfmkit.core.version_parser import parse_version
from tfmkit.exceptions import MissingArgumentError, VersionFormatError

logger = get_logger("core.range_parser")

_OPENERS = "[("
_CLOSERS = "])"
_EXPECTED_SHAPE = "{version} or ([|(){min},{max}(]|)) or [{version}]"


def parse_version_range(value: Optional[str]) -> VersionRange:
    """Parse a version range string.

    Args:
        value: Range text, e.g. ``"[1.2,2.3)"`` or ``"1.2"``.

    Returns:
        The parsed :class:`VersionRange`.

    Raises:
        MissingArgumentError: ``value`` is ``None``.
        VersionFormatError: Brackets are unbalanced or misplaced, there is
            more than one comma, both bounds are empty, or a bound is not a
            valid version.
    """
    if value is None:
        raise MissingArgumentError("Version range is missing.", param_name="value")

    text = value.strip()

    # A bare version is a minimum-inclusive range with no upper bound
    if not any(char in text for char in _OPENERS + _CLOSERS):
        return VersionRange(
            min_version=parse_version(text),
            is_min_inclusive=True,
        )

    if len(text) < 2 or text[0] not in _OPENERS or text[-1] not in _CLOSERS:
        raise _format_error(value, "must start with '[' or '(' and end with ']' or ')'")

    is_min_inclusive = text[0] == "["
    is_max_inclusive = text[-1] == "]"

    parts = text[1:-1].split(",")
    if len(parts) > 2:
        raise _format_error(value, "contains more than one ','")

    if len(parts) == 1:
        if not parts[0].strip():
            raise _format_error(value, "has no version between the brackets")
        exact = _parse_bound(parts[0], value)
        return VersionRange(
            min_version=exact,
            is_min_inclusive=is_min_inclusive,
            max_version=exact,
            is_max_inclusive=is_max_inclusive,
        )

    low, high = parts
    if not low.strip() and not high.strip():
        raise _format_error(value, "specifies neither a lower nor an upper bound")

    return VersionRange(
        min_version=_parse_bound(low, value) if low.strip() else None,
        is_min_inclusive=is_min_inclusive,
        max_version=_parse_bound(high, value) if high.strip() else None,
        is_max_inclusive=is_max_inclusive,
    )


def try_parse_version_range(value: Optional[str]) -> Optional[VersionRange]:
    """Parse a version range, returning ``None`` on any failure."""
    try:
        return parse_version_range(value)
    except (MissingArgumentError, VersionFormatError) as exc:
        logger.debug("Could not parse version range %r: %s", value, exc)
        return None


def get_safe_range(version: Optional[Version]) -> VersionRange:
    """Return the safe upgrade range for ``version``.

    The range accepts ``version`` and every later build or revision within
    the same minor line, and rejects the next minor line.

    Args:
        version: The declared version.

    Returns:
        ``[version, major.(minor+1))``.

    Raises:
        MissingArgumentError: ``version`` is ``None``.

    Example::

        >>> str(get_safe_range(parse_version("2.9.45.6")))
        '[2.9.45.6,2.10)'
    """
    if version is None:
        raise MissingArgumentError("Version is missing.", param_name="version")

    return VersionRange(
        min_version=version,
        is_min_inclusive=True,
        max_version=Version(version.major, version.minor + 1),
        is_max_inclusive=False,
    )


def _parse_bound(text: str, original: str) -> Version:
    try:
        return parse_version(text)
    except VersionFormatError as exc:
        raise _format_error(original, f"has an invalid bound '{text.strip()}'") from exc


def _format_error(value: str, reason: str) -> VersionFormatError:
    return VersionFormatError(
        f"'{value}' is not a valid version range: it {reason}.",
        value=value,
        expected=_EXPECTED_SHAPE,
    )
