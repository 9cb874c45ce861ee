"""
Exceptions raised by tfmkit.

Every error derives from :class:`TfmKitError`, which carries a plain
message plus a ``details`` dict for logs and JSON output.

Parsers raise two kinds of error, and callers must be able to tell them
apart:

- :class:`MissingArgumentError`: a required input was not supplied.
- :class:`ParseError` and its subclasses: the input was supplied but does
  not match the grammar.

Both are also :class:`ValueError` subclasses, so code that knows nothing
about tfmkit can still catch them. An unrecognized framework is not an
error at all: the parser returns the ``Unsupported`` framework instead.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

#: Longest input echoed back in ``details``.
MAX_DETAIL_LENGTH = 200


def _shorten(text: Optional[str], limit: int = MAX_DETAIL_LENGTH) -> Optional[str]:
    """Cut ``text`` to ``limit`` characters, marking the cut with ``...``."""
    if text is None or len(text) <= limit:
        return text
    return f"{text[:limit]}..."


class TfmKitError(Exception):
    """Base class for every error tfmkit raises.

    Args:
        message: Human-readable message.
        **details: Context for diagnostics. Keys whose value is ``None``
            are left out.
    """

    __slots__ = ("message", "details")

    def __init__(self, message: str, **details: Any) -> None:
        super().__init__(message)
        self.message = message
        self.details: Dict[str, Any] = {
            key: value for key, value in details.items() if value is not None
        }

    def __str__(self) -> str:
        if not self.details:
            return self.message
        pairs = ", ".join(f"{key}={value}" for key, value in self.details.items())
        return f"{self.message} ({pairs})"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r}, details={self.details!r})"


class MissingArgumentError(TfmKitError, ValueError):
    """A required input was ``None`` or empty.

    Args:
        message: Error description.
        param_name: Name of the parameter that was missing.
    """

    __slots__ = ("param_name",)

    def __init__(self, message: str, *, param_name: Optional[str] = None) -> None:
        super().__init__(message, param=param_name)
        self.param_name = param_name


class ParseError(TfmKitError, ValueError):
    """A supplied value does not match its grammar.

    Args:
        message: Error description.
        value: The rejected input. ``details`` holds a shortened copy.
        expected: The shape the input should have had.
    """

    __slots__ = ("value", "expected")

    def __init__(
        self,
        message: str,
        *,
        value: Optional[str] = None,
        expected: Optional[str] = None,
    ) -> None:
        super().__init__(message, value=_shorten(value), expected=expected)
        self.value = value
        self.expected = expected


class VersionFormatError(ParseError):
    """A version or version range string is malformed."""

    __slots__ = ()


class FrameworkNameFormatError(ParseError):
    """A framework moniker has more than one profile separator."""

    __slots__ = ()


class ConfigError(TfmKitError):
    """A configuration file cannot be read or holds an invalid option.

    Args:
        message: Error description.
        config_path: File the problem was found in.
        option: The offending option, if the problem is a single option.
    """

    __slots__ = ("config_path", "option")

    def __init__(
        self,
        message: str,
        *,
        config_path: Optional[str] = None,
        option: Optional[str] = None,
    ) -> None:
        super().__init__(message, path=config_path, option=option)
        self.config_path = config_path
        self.option = option
