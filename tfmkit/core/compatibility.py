"""Framework compatibility rules.

:func:`is_compatible` answers one directional question: may a project
targeting ``target`` consume an asset built for ``candidate``?

The relation is neither symmetric nor transitive. It is expressed as an
ordered list of rules; each rule either decides (``True``/``False``) or
defers (``None``) to the next one. The first decision wins.

==========================  =====================================================
Rule                        Decision
==========================  =====================================================
``unsupported``             Either side is ``Unsupported`` → incompatible.
``identifier_mismatch``     Different families → incompatible.
``windows_phone_silo``      Silverlight: full profile vs ``WindowsPhone*`` →
                            incompatible in both directions, any version.
``windows_phone_forward``   Silverlight: ``WindowsPhone71`` target accepts a
                            ``WindowsPhone`` candidate of a lower or equal
                            version; the reverse is incompatible.
``client_subset``           .NETFramework: a full-profile target accepts a
                            ``Client`` candidate of a lower or equal version.
``same_family``             Candidate version not newer than target and
                            candidate profile empty or equal to the target's.
==========================  =====================================================
"""

from __future__ import annotations

from typing import Callable, Optional, Sequence, Tuple

from tfmkit.models.framework import FrameworkName
from tfmkit.utils.logger import get_logger
from tfmkit.exceptions import MissingArgumentError
from tfmkit.constants import (
    CLIENT_PROFILE,
    NET_FRAMEWORK_IDENTIFIER,
    SILVERLIGHT_IDENTIFIER,
    WINDOWS_PHONE_71_PROFILE,
    WINDOWS_PHONE_PROFILE,
)

logger = get_logger("core.compatibility")

Rule = Callable[[FrameworkName, FrameworkName], Optional[bool]]

#: Silverlight profile pairs where a newer phone target accepts an older
#: phone candidate: (target profile, candidate profile).
WINDOWS_PHONE_FORWARD_PAIRS: Tuple[Tuple[str, str], ...] = (
    (WINDOWS_PHONE_71_PROFILE, WINDOWS_PHONE_PROFILE),
)


def _is_windows_phone(framework: FrameworkName) -> bool:
    return (
        framework.identifier == SILVERLIGHT_IDENTIFIER
        and framework.profile.startswith(WINDOWS_PHONE_PROFILE)
    )


def _version_allows(target: FrameworkName, candidate: FrameworkName) -> bool:
    return candidate.version <= target.version


def _unsupported(target: FrameworkName, candidate: FrameworkName) -> Optional[bool]:
    if target.is_unsupported or candidate.is_unsupported:
        return False
    return None


def _identifier_mismatch(
    target: FrameworkName, candidate: FrameworkName
) -> Optional[bool]:
    if target.identifier != candidate.identifier:
        return False
    return None


def _windows_phone_silo(
    target: FrameworkName, candidate: FrameworkName
) -> Optional[bool]:
    if target.identifier != SILVERLIGHT_IDENTIFIER:
        return None
    if not target.profile and _is_windows_phone(candidate):
        return False
    if _is_windows_phone(target) and not candidate.profile:
        return False
    return None


def _windows_phone_forward(
    target: FrameworkName, candidate: FrameworkName
) -> Optional[bool]:
    if not (_is_windows_phone(target) and _is_windows_phone(candidate)):
        return None
    if target.profile == candidate.profile:
        return None
    if (target.profile, candidate.profile) in WINDOWS_PHONE_FORWARD_PAIRS:
        return _version_allows(target, candidate)
    return False


def _client_subset(target: FrameworkName, candidate: FrameworkName) -> Optional[bool]:
    if target.identifier != NET_FRAMEWORK_IDENTIFIER or target.profile:
        return None
    if candidate.profile != CLIENT_PROFILE:
        return None
    return _version_allows(target, candidate)


def _same_family(target: FrameworkName, candidate: FrameworkName) -> bool:
    if not _version_allows(target, candidate):
        return False
    return not candidate.profile or candidate.profile == target.profile


#: Evaluated in order; the last rule always decides.
COMPATIBILITY_RULES: Sequence[Tuple[str, Rule]] = (
    ("unsupported", _unsupported),
    ("identifier_mismatch", _identifier_mismatch),
    ("windows_phone_silo", _windows_phone_silo),
    ("windows_phone_forward", _windows_phone_forward),
    ("client_subset", _client_subset),
    ("same_family", _same_family),
)


def is_compatible(
    target: Optional[FrameworkName],
    candidate: Optional[FrameworkName],
) -> bool:
    """Check whether ``target`` may consume an asset built for ``candidate``.

    Args:
        target: Framework declared by the consuming project.
        candidate: Framework the asset was built for.

    Returns:
        True if the asset is usable by the project.

    Raises:
        MissingArgumentError: Either argument is ``None``.

    Example::

        >>> net40 = parse_framework_name("net40")
        >>> net20 = parse_framework_name("net20")
        >>> is_compatible(net40, net20), is_compatible(net20, net40)
        (True, False)
    """
    if target is None:
        raise MissingArgumentError("Target framework is missing.", param_name="target")
    if candidate is None:
        raise MissingArgumentError(
            "Candidate framework is missing.", param_name="candidate"
        )

    for name, rule in COMPATIBILITY_RULES:
        decision = rule(target, candidate)
        if decision is not None:
            logger.debug(
                "%s -> %s: %s (rule: %s)",
                target,
                candidate,
                "compatible" if decision else "incompatible",
                name,
            )
            return decision

    # The final rule never defers
    raise AssertionError("compatibility rules did not reach a decision")
