"""Parsing helpers for four-part numeric versions.

Two encodings are supported:

- **Dotted** (``"4.0"``, ``" 1 . 2 "``, ``"2.9.45.6"``): two to four
  dot-separated decimal components. Whitespace anywhere in the string is
  ignored.
- **Digit run** (``"40"``, ``"41235"``): one digit per component, used by
  framework monikers. Digits beyond the fourth are ignored.

:func:`parse_version` is strict and raises :class:`VersionFormatError`;
:func:`try_parse_version` is the lenient variant used where a malformed
version downgrades the result instead of failing.
"""

from __future__ import annotations

import re
from typing import Optional, Tuple

from tfmkit.models.version import Version
from tfmkit.constants import MAX_VERSION_COMPONENTS
from tfmkit.exceptions import MissingArgumentError, VersionFormatError

_DOTTED_VERSION = re.compile(r"[0-9]+(?:\.[0-9]+){1,3}")
_DIGIT_RUN = re.compile(r"[0-9]+")
_WHITESPACE = re.compile(r"\s+")

_EXPECTED_SHAPE = "{major}.{minor}[.{build}[.{revision}]]"


def _collapse(value: str) -> str:
    return _WHITESPACE.sub("", value)


def parse_version(value: Optional[str]) -> Version:
    """Parse a dotted version string.

    Args:
        value: Version text such as ``"1.2"`` or ``"  1 . 2 "``.

    Returns:
        The parsed :class:`Version`; missing build/revision default to 0.

    Raises:
        MissingArgumentError: ``value`` is ``None``.
        VersionFormatError: ``value`` is not 2–4 dot-separated integers.

    Example::

        >>> parse_version("1.2.3")
        Version('1.2.3')
    """
    if value is None:
        raise MissingArgumentError("Version is missing.", param_name="value")

    text = _collapse(value)
    if not _DOTTED_VERSION.fullmatch(text):
        raise VersionFormatError(
            f"'{value}' is not a valid version string.",
            value=value,
            expected=_EXPECTED_SHAPE,
        )

    parts = [int(part) for part in text.split(".")]
    return Version(*parts)


def try_parse_version(value: Optional[str]) -> Optional[Version]:
    """Parse a dotted version, returning ``None`` instead of raising."""
    if value is None:
        return None
    try:
        return parse_version(value)
    except VersionFormatError:
        return None


def is_digit_run(value: str) -> bool:
    """True if ``value`` is a non-empty run of decimal digits."""
    return bool(_DIGIT_RUN.fullmatch(value))


def parse_digit_run(value: str) -> Version:
    """Parse the digit-run shorthand used in framework monikers.

    Each digit becomes one component, in order. Missing trailing
    components are 0 and digits past the fourth are ignored.

    Args:
        value: A run of decimal digits, e.g. ``"40"`` or ``"41235"``.

    Returns:
        The positional :class:`Version`.

    Raises:
        VersionFormatError: ``value`` contains anything but digits.

    Example::

        >>> parse_digit_run("41235")
        Version('4.1.2.3')
        >>> parse_digit_run("4")
        Version('4.0')
    """
    if not is_digit_run(value):
        raise VersionFormatError(
            f"'{value}' is not a digit-run version.",
            value=value,
            expected="one digit per version component",
        )

    digits = [int(char) for char in value[:MAX_VERSION_COMPONENTS]]
    digits.extend([0] * (MAX_VERSION_COMPONENTS - len(digits)))
    return Version(*digits)


def trim_version(version: Optional[Version]) -> Tuple[int, ...]:
    """Return the components of ``version`` without trailing zeros.

    See :meth:`Version.trim` for the exact rule.

    Raises:
        MissingArgumentError: ``version`` is ``None``.
    """
    if version is None:
        raise MissingArgumentError("Version is missing.", param_name="version")
    return version.trim()
