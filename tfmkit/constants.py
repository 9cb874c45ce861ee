"""
Centralized constants for tfmkit.

This module defines immutable values used across tfmkit, including the
canonical framework identifiers, the moniker alias tables, configuration
defaults, and logging formats. All values are read-only; the alias tables
are exposed as ``MappingProxyType`` views so they cannot be mutated at
runtime.
"""

from types import MappingProxyType
from typing import Final, Mapping, Sequence

# ---------------------------------------------------------------------------
# Canonical framework identifiers
# ---------------------------------------------------------------------------

#: Generic full-runtime family.
NET_FRAMEWORK_IDENTIFIER: Final[str] = ".NETFramework"

#: Micro-runtime family.
NET_MICRO_FRAMEWORK_IDENTIFIER: Final[str] = ".NETMicroFramework"

#: Lightweight-runtime family.
SILVERLIGHT_IDENTIFIER: Final[str] = "Silverlight"

#: Sentinel identifier for monikers that could not be recognized.
UNSUPPORTED_IDENTIFIER: Final[str] = "Unsupported"

# ---------------------------------------------------------------------------
# Canonical profiles
# ---------------------------------------------------------------------------

CLIENT_PROFILE: Final[str] = "Client"
COMPACT_FRAMEWORK_PROFILE: Final[str] = "CompactFramework"
WINDOWS_PHONE_PROFILE: Final[str] = "WindowsPhone"
WINDOWS_PHONE_71_PROFILE: Final[str] = "WindowsPhone71"

#: Short profile prefix expanded to ``WindowsPhone`` for Silverlight.
WINDOWS_PHONE_SHORT_PREFIX: Final[str] = "wp"

# ---------------------------------------------------------------------------
# Alias tables
# ---------------------------------------------------------------------------

#: Lower-cased identifier token -> canonical identifier.
KNOWN_IDENTIFIERS: Final[Mapping[str, str]] = MappingProxyType(
    {
        "net": NET_FRAMEWORK_IDENTIFIER,
        ".net": NET_FRAMEWORK_IDENTIFIER,
        "netframework": NET_FRAMEWORK_IDENTIFIER,
        ".netframework": NET_FRAMEWORK_IDENTIFIER,
        "netmf": NET_MICRO_FRAMEWORK_IDENTIFIER,
        ".netmicroframework": NET_MICRO_FRAMEWORK_IDENTIFIER,
        "sl": SILVERLIGHT_IDENTIFIER,
        "silverlight": SILVERLIGHT_IDENTIFIER,
    }
)

#: Lower-cased profile token -> canonical profile, valid for every family.
COMMON_PROFILES: Final[Mapping[str, str]] = MappingProxyType(
    {
        "client": CLIENT_PROFILE,
        "full": "",
    }
)

#: Canonical identifier -> (lower-cased profile token -> canonical profile).
FAMILY_PROFILES: Final[Mapping[str, Mapping[str, str]]] = MappingProxyType(
    {
        NET_FRAMEWORK_IDENTIFIER: MappingProxyType(
            {"cf": COMPACT_FRAMEWORK_PROFILE}
        ),
        SILVERLIGHT_IDENTIFIER: MappingProxyType(
            {"wp": WINDOWS_PHONE_PROFILE}
        ),
    }
)

#: Canonical identifier -> short moniker prefix.
SHORT_IDENTIFIERS: Final[Mapping[str, str]] = MappingProxyType(
    {
        NET_FRAMEWORK_IDENTIFIER: "net",
        NET_MICRO_FRAMEWORK_IDENTIFIER: "netmf",
        SILVERLIGHT_IDENTIFIER: "sl",
    }
)

# ---------------------------------------------------------------------------
# Grammar
# ---------------------------------------------------------------------------

#: Path separators accepted by the folder resolver.
PATH_SEPARATORS: Final[Sequence[str]] = ("/", "\\")

#: Maximum number of components in a dotted or digit-run version.
MAX_VERSION_COMPONENTS: Final[int] = 4

#: Expected moniker shape, used in error messages.
FRAMEWORK_NAME_SHAPE: Final[str] = "{framework}{version}-{profile}"

# ---------------------------------------------------------------------------
# Configuration defaults
# ---------------------------------------------------------------------------

#: Output formats understood by every CLI command.
OUTPUT_FORMATS: Final[Sequence[str]] = ("table", "simple", "json")

#: Default output format.
DEFAULT_OUTPUT_FORMAT: Final[str] = "table"

#: Default target framework for ``compat`` and ``select`` (none).
DEFAULT_TARGET: Final[None] = None

# ---------------------------------------------------------------------------
# Logging configuration
# ---------------------------------------------------------------------------

#: Timestamp format for verbose logging.
LOG_DATE_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"

#: Default log format (non-verbose).
LOG_DEFAULT_FORMAT: Final[str] = "%(levelname)s: %(message)s"

#: Verbose log format including timestamp and logger name.
LOG_VERBOSE_FORMAT: Final[str] = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
