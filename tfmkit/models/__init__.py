"""
Unified data model exports for tfmkit.

This module re-exports all core data models to provide a stable and
convenient public API. Users can import models directly from
``tfmkit.models`` instead of individual submodules.

Example:
    >>> from tfmkit.models import FrameworkName, Version, VersionRange
"""

from __future__ import annotations

from tfmkit.models.version import Version
from tfmkit.models.version_range import VersionRange
from tfmkit.models.framework import UNSUPPORTED_FRAMEWORK, FrameworkName

__all__ = [
    "Version",
    "VersionRange",
    "FrameworkName",
    "UNSUPPORTED_FRAMEWORK",
]
