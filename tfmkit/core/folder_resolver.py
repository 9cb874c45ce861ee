"""Framework resolution from package asset paths.

Package assets are scoped to a framework by their first folder::

    foo.dll                  -> None (applies to every framework)
    sl4/foo.dll              -> Silverlight 4.0
    SL3/sub1/foo.dll         -> Silverlight 3.0 (deeper folders ignored)
    sub/foo.dll              -> Unsupported (cannot tell if "sub" was meant
                                as a framework name)

Both ``/`` and ``\\`` are accepted as separators.
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional

from tfmkit.exceptions import MissingArgumentError, TfmKitError
from tfmkit.constants import PATH_SEPARATORS
from tfmkit.utils.logger import get_logger
from tfmkit.models.framework import UNSUPPORTED_FRAMEWORK, FrameworkName
from tfmkit.core.compatibility import is_compatible
from tfmkit.core.framework_parser import parse_framework_name

logger = get_logger("core.folder_resolver")


def _split_path(path: str) -> List[str]:
    normalized = path
    for separator in PATH_SEPARATORS[1:]:
        normalized = normalized.replace(separator, PATH_SEPARATORS[0])
    return normalized.lstrip(PATH_SEPARATORS[0]).split(PATH_SEPARATORS[0])


def parse_framework_folder_name(path: Optional[str]) -> Optional[FrameworkName]:
    """Return the framework an asset path is scoped to.

    Args:
        path: Asset path relative to its package folder.

    Returns:
        ``None`` when the path has no folder, the parsed framework of the
        first folder otherwise, or :data:`UNSUPPORTED_FRAMEWORK` when that
        folder is not a valid moniker.

    Raises:
        MissingArgumentError: ``path`` is ``None``.
    """
    if path is None:
        raise MissingArgumentError("Path is missing.", param_name="path")

    segments = _split_path(path)
    if len(segments) < 2:
        return None

    try:
        return parse_framework_name(segments[0])
    except TfmKitError as exc:
        logger.debug("Folder %r is not a framework name: %s", segments[0], exc)
        return UNSUPPORTED_FRAMEWORK


def get_compatible_items(
    target: Optional[FrameworkName],
    paths: Iterable[str],
) -> List[str]:
    """Select the asset paths a project targeting ``target`` should use.

    Paths are grouped by folder framework. Among the groups compatible with
    ``target`` the one with the highest version wins; at equal versions a
    group whose profile matches the target's is preferred. Unscoped
    (root-level) paths are used only when no framework group is
    compatible.

    Args:
        target: Framework of the consuming project.
        paths: Asset paths relative to the package folder.

    Returns:
        Selected paths in input order, or an empty list.

    Raises:
        MissingArgumentError: ``target`` is ``None``.

    Example::

        >>> get_compatible_items(
        ...     parse_framework_name("net40"),
        ...     ["a.dll", "net20/a.dll", "net35/a.dll", "sl4/a.dll"],
        ... )
        ['net35/a.dll']
    """
    if target is None:
        raise MissingArgumentError("Target framework is missing.", param_name="target")

    groups: Dict[Optional[FrameworkName], List[str]] = {}
    for path in paths:
        groups.setdefault(parse_framework_folder_name(path), []).append(path)

    compatible = [
        framework
        for framework in groups
        if framework is not None and is_compatible(target, framework)
    ]
    if not compatible:
        logger.debug("No framework-specific assets for %s", target)
        return list(groups.get(None, []))

    best = max(
        compatible,
        key=lambda framework: (framework.version, framework.profile == target.profile),
    )
    logger.debug("Selected %s assets for %s", best, target)
    return list(groups[best])
