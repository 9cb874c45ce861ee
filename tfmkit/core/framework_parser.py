"""Target framework moniker parser.

A moniker has the shape ``{identifier}{version}[-{profile}]``:

- ``identifier``: everything before the first digit, matched
  case-insensitively against :data:`~tfmkit.constants.KNOWN_IDENTIFIERS`
  (``net``, ``.NETFramework``, ``sl``, ``netmf`` ...). When it is empty the
  generic ``.NETFramework`` family is assumed (``"20"`` is ``net20``).
- ``version``: either dotted (``4.0``) or the digit-run shorthand
  (``40``, ``41235``).
- ``profile``: optional; normalized through the profile tables for the
  resolved family, preserved verbatim when unknown.

Failure policy:

- A missing name (``""``, ``"-"``, ``"-client"``) raises
  :class:`MissingArgumentError`.
- More than one hyphen (``"---"``) raises :class:`FrameworkNameFormatError`.
- An unknown identifier, or a version token that cannot be parsed, does
  **not** raise: the result is :data:`UNSUPPORTED_FRAMEWORK`. The same
  malformed version raises when given to :func:`parse_version` directly.

Typical usage::

    from tfmkit.core.framework_parser import parse_framework_name

    fx = parse_framework_name("net40-client")
    fx.identifier   # ".NETFramework"
    fx.profile      # "Client"
    get_framework_string(fx)  # ".NETFramework4.0-Client"
"""

from __future__ import annotations

import re
from typing import Optional

from tfmkit.models.version import Version
from tfmkit.utils.logger import get_logger
from tfmkit.exceptions import FrameworkNameFormatError, MissingArgumentError
from tfmkit.models.framework import UNSUPPORTED_FRAMEWORK, FrameworkName
from tfmkit.core.version_parser import (
    is_digit_run,
    parse_digit_run,
    try_parse_version,
)
from tfmkit.constants import (
    COMMON_PROFILES,
    FAMILY_PROFILES,
    FRAMEWORK_NAME_SHAPE,
    KNOWN_IDENTIFIERS,
    NET_FRAMEWORK_IDENTIFIER,
    SHORT_IDENTIFIERS,
    SILVERLIGHT_IDENTIFIER,
    WINDOWS_PHONE_PROFILE,
    WINDOWS_PHONE_SHORT_PREFIX,
)

logger = get_logger("core.framework_parser")

_FIRST_DIGIT = re.compile(r"[0-9]")
_WINDOWS_PHONE_TOKEN = re.compile(r"wp([0-9]*)", re.IGNORECASE)
_WINDOWS_PHONE_PROFILE = re.compile(rf"{WINDOWS_PHONE_PROFILE}([0-9]*)")


def parse_framework_name(value: Optional[str]) -> FrameworkName:
    """Parse a target framework moniker.

    Args:
        value: Moniker such as ``"net40-client"``, ``"sl4-wp71"`` or
            ``".NETMicroFramework4.1"``.

    Returns:
        The normalized :class:`FrameworkName`, or
        :data:`UNSUPPORTED_FRAMEWORK` when the identifier is unknown or the
        version token is malformed.

    Raises:
        MissingArgumentError: ``value`` is ``None`` or has no name before
            the profile separator.
        FrameworkNameFormatError: ``value`` contains more than one ``-``.
    """
    if value is None:
        raise _missing_name()

    parts = value.strip().split("-")
    if len(parts) > 2:
        raise FrameworkNameFormatError(
            f"Invalid framework name format. Expected {FRAMEWORK_NAME_SHAPE}.",
            value=value,
            expected=FRAMEWORK_NAME_SHAPE,
        )

    name = parts[0].strip()
    profile_token = parts[1].strip() if len(parts) == 2 else ""
    if not name:
        raise _missing_name()

    match = _FIRST_DIGIT.search(name)
    if match:
        identifier_token = name[: match.start()].strip()
        version_token = name[match.start() :].strip()
    else:
        identifier_token, version_token = name, ""

    if identifier_token:
        identifier = KNOWN_IDENTIFIERS.get(identifier_token.lower())
        if identifier is None:
            logger.debug("Unknown framework identifier %r in %r", identifier_token, value)
            return UNSUPPORTED_FRAMEWORK
    else:
        # Only a version was given
        identifier = NET_FRAMEWORK_IDENTIFIER

    version = _parse_version_token(version_token)
    if version is None:
        logger.debug("Malformed framework version %r in %r", version_token, value)
        return UNSUPPORTED_FRAMEWORK

    return FrameworkName(identifier, version, _normalize_profile(identifier, profile_token))


def get_framework_string(framework: Optional[FrameworkName]) -> str:
    """Render the canonical string for a framework.

    Args:
        framework: The descriptor to render.

    Returns:
        ``{identifier}{trimmedVersion}[-{profile}]``, e.g.
        ``".NETFramework4.0-Client"``.

    Raises:
        MissingArgumentError: ``framework`` is ``None``.
    """
    if framework is None:
        raise MissingArgumentError("Framework is missing.", param_name="framework")

    text = f"{framework.identifier}{framework.version}"
    if framework.profile:
        text += f"-{framework.profile}"
    return text


def get_short_framework_name(framework: Optional[FrameworkName]) -> str:
    """Render the short moniker for a framework, e.g. ``net40-client``.

    The result parses back to an equal descriptor for every known family.
    Frameworks outside the known families fall back to
    :func:`get_framework_string`.

    Raises:
        MissingArgumentError: ``framework`` is ``None``.
    """
    if framework is None:
        raise MissingArgumentError("Framework is missing.", param_name="framework")

    prefix = SHORT_IDENTIFIERS.get(framework.identifier)
    if prefix is None:
        return get_framework_string(framework)

    parts = framework.version.trim()
    if framework.version == Version(0, 0):
        version_text = ""
    elif all(part < 10 for part in parts):
        version_text = "".join(str(part) for part in parts)
    else:
        version_text = str(framework.version)

    text = f"{prefix}{version_text}"
    if framework.profile:
        text += f"-{_short_profile(framework.identifier, framework.profile)}"
    return text


def _parse_version_token(token: str) -> Optional[Version]:
    if not token:
        return Version(0, 0)
    if "." in token:
        return try_parse_version(token)
    if is_digit_run(token):
        return parse_digit_run(token)
    return None


def _normalize_profile(identifier: str, token: str) -> str:
    if not token:
        return ""

    key = token.lower()
    if key in COMMON_PROFILES:
        return COMMON_PROFILES[key]

    family = FAMILY_PROFILES.get(identifier, {})
    if key in family:
        return family[key]

    if identifier == SILVERLIGHT_IDENTIFIER:
        match = _WINDOWS_PHONE_TOKEN.fullmatch(token)
        if match:
            return f"{WINDOWS_PHONE_PROFILE}{match.group(1)}"

    return token


def _short_profile(identifier: str, profile: str) -> str:
    for table in (COMMON_PROFILES, FAMILY_PROFILES.get(identifier, {})):
        for token, canonical in table.items():
            if canonical == profile:
                return token

    if identifier == SILVERLIGHT_IDENTIFIER:
        match = _WINDOWS_PHONE_PROFILE.fullmatch(profile)
        if match:
            return f"{WINDOWS_PHONE_SHORT_PREFIX}{match.group(1)}"

    return profile


def _missing_name() -> MissingArgumentError:
    return MissingArgumentError(
        "Framework name is missing.",
        param_name="framework_name",
    )
