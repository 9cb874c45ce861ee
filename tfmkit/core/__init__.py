"""
Core functionality exports for tfmkit.

Every function here is pure: no I/O, no shared mutable state, safe to call
concurrently. Importing from here keeps user-facing imports stable:

    from tfmkit.core import parse_framework_name, is_compatible
"""

from __future__ import annotations

from tfmkit.core.compatibility import is_compatible
from tfmkit.core.folder_resolver import (
    get_compatible_items,
    parse_framework_folder_name,
)
from tfmkit.core.framework_parser import (
    get_framework_string,
    get_short_framework_name,
    parse_framework_name,
)
from tfmkit.core.range_parser import (
    get_safe_range,
    parse_version_range,
    try_parse_version_range,
)
from tfmkit.core.version_parser import (
    parse_digit_run,
    parse_version,
    trim_version,
    try_parse_version,
)

__all__ = [
    "parse_version",
    "try_parse_version",
    "parse_digit_run",
    "trim_version",
    "parse_version_range",
    "try_parse_version_range",
    "get_safe_range",
    "parse_framework_name",
    "get_framework_string",
    "get_short_framework_name",
    "parse_framework_folder_name",
    "get_compatible_items",
    "is_compatible",
]
