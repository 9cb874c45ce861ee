"""
tfmkit: target framework monikers, version ranges and compatibility.

tfmkit parses the two small grammars a package manager uses to decide
whether a package asset is usable by a consuming project:

    • Target framework monikers (``net40-client``, ``sl4-wp71``)
    • Version ranges in interval notation (``[1.2,2.3)``)

and evaluates the directional compatibility relation between two
frameworks. Every operation is a pure function and safe to call from
multiple threads.

Example:
    >>> from tfmkit import parse_framework_name, is_compatible
    >>> is_compatible(parse_framework_name("net40"), parse_framework_name("net20"))
    True
"""

from __future__ import annotations

from tfmkit.__version__ import __version__
from tfmkit.models import UNSUPPORTED_FRAMEWORK, FrameworkName, Version, VersionRange
from tfmkit.exceptions import (
    FrameworkNameFormatError,
    MissingArgumentError,
    ParseError,
    TfmKitError,
    VersionFormatError,
)
from tfmkit.core import (
    get_compatible_items,
    get_framework_string,
    get_safe_range,
    get_short_framework_name,
    is_compatible,
    parse_framework_folder_name,
    parse_framework_name,
    parse_version,
    parse_version_range,
    trim_version,
)

__license__ = "Apache-2.0"

__all__ = [
    "__version__",
    # Models
    "Version",
    "VersionRange",
    "FrameworkName",
    "UNSUPPORTED_FRAMEWORK",
    # Errors
    "TfmKitError",
    "MissingArgumentError",
    "ParseError",
    "VersionFormatError",
    "FrameworkNameFormatError",
    # Operations
    "parse_version",
    "trim_version",
    "parse_version_range",
    "get_safe_range",
    "parse_framework_name",
    "get_framework_string",
    "get_short_framework_name",
    "parse_framework_folder_name",
    "get_compatible_items",
    "is_compatible",
]
