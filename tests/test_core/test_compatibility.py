"""Unit tests for tfmkit.core.compatibility module.

Test Coverage:
- Version ordering within a family
- Profile matching
- Family and Unsupported mismatches
- Silverlight phone silo and phone-to-phone forward rule
- Decision logging
"""

from __future__ import annotations

import logging

import pytest

from tfmkit.exceptions import MissingArgumentError
from tfmkit.models.framework import UNSUPPORTED_FRAMEWORK
from tfmkit.core.framework_parser import parse_framework_name
from tfmkit.core.compatibility import COMPATIBILITY_RULES, is_compatible


def _compatible(target: str, candidate: str) -> bool:
    return is_compatible(parse_framework_name(target), parse_framework_name(candidate))


@pytest.mark.unit
class TestSameFamily:
    """Tests for version and profile checks within a family."""

    def test_older_candidate_is_compatible(self) -> None:
        assert _compatible("net40", "net20") is True

    def test_newer_candidate_is_incompatible(self) -> None:
        assert _compatible("net20", "net40") is False

    def test_equal_frameworks_are_compatible(self) -> None:
        assert _compatible("net40-client", "net40-client") is True

    def test_profileless_candidate_serves_profiled_target(self) -> None:
        assert _compatible("net40-client", "net40") is True
        assert _compatible("net40-client", "net35") is True

    def test_profiled_candidate_does_not_serve_other_profile(self) -> None:
        assert _compatible("net20-cf", "net20-client") is False
        assert _compatible("net40-client", "net40-cf") is False
        assert _compatible("net40-cf", "net40-client") is False

    def test_full_target_accepts_client_candidate(self) -> None:
        """Test the Client profile is a subset of the full framework."""
        assert _compatible("net40", "net40-client") is True
        assert _compatible("net40-client", "net40") is True
        assert _compatible("net40-full", "net35-client") is True

    def test_client_candidate_still_checks_version(self) -> None:
        assert _compatible("net35", "net40-client") is False

    def test_full_target_rejects_compact_candidate(self) -> None:
        assert _compatible("net40", "net40-cf") is False

    def test_client_rule_is_net_framework_only(self) -> None:
        assert _compatible("sl4", "sl4-client") is False

    def test_client_profile_kept_after_parsing(self) -> None:
        assert parse_framework_name("net40-client").profile == "Client"

    def test_unversioned_candidate_serves_every_version(self) -> None:
        assert _compatible("net40", "net") is True


@pytest.mark.unit
class TestFamilyMismatch:
    """Tests for different identifiers and the Unsupported sentinel."""

    def test_different_identifiers(self) -> None:
        assert _compatible("net40", "sl3") is False
        assert _compatible("sl4", "net20") is False
        assert _compatible("netmf4.1", "net20") is False

    def test_unsupported_on_either_side(self) -> None:
        net40 = parse_framework_name("net40")

        assert is_compatible(net40, UNSUPPORTED_FRAMEWORK) is False
        assert is_compatible(UNSUPPORTED_FRAMEWORK, net40) is False
        assert is_compatible(UNSUPPORTED_FRAMEWORK, UNSUPPORTED_FRAMEWORK) is False


@pytest.mark.unit
class TestWindowsPhone:
    """Tests for the Silverlight phone profile rules."""

    def test_full_silverlight_and_phone_are_siloed(self) -> None:
        """Test sl3 and sl3-wp reject each other in both directions."""
        assert _compatible("sl3", "sl3-wp") is False
        assert _compatible("sl3-wp", "sl3") is False

    def test_silo_ignores_versions(self) -> None:
        assert _compatible("sl4-wp", "sl3") is False
        assert _compatible("sl4", "sl3-wp") is False

    def test_phone71_target_accepts_phone_candidate(self) -> None:
        assert _compatible("sl4-wp71", "sl4-wp") is True
        assert _compatible("sl4-wp71", "sl3-wp") is True

    def test_phone_target_rejects_phone71_candidate(self) -> None:
        assert _compatible("sl4-wp", "sl4-wp71") is False

    def test_phone_forward_still_checks_version(self) -> None:
        assert _compatible("sl3-wp71", "sl4-wp") is False

    def test_phone71_target_rejects_other_phone_suffix(self) -> None:
        """Test only the bare WindowsPhone profile is forward compatible."""
        assert _compatible("sl4-wp71", "sl4-wp7") is False
        assert _compatible("sl4-wp7", "sl4-wp") is False

    def test_same_phone_profile(self) -> None:
        assert _compatible("sl4-wp71", "sl4-wp71") is True
        assert _compatible("sl3-wp", "sl4-wp") is False


@pytest.mark.unit
class TestIsCompatible:
    """Tests for argument validation and rule plumbing."""

    def test_none_target(self) -> None:
        with pytest.raises(MissingArgumentError) as exc_info:
            is_compatible(None, parse_framework_name("net40"))

        assert exc_info.value.param_name == "target"

    def test_none_candidate(self) -> None:
        with pytest.raises(MissingArgumentError) as exc_info:
            is_compatible(parse_framework_name("net40"), None)

        assert exc_info.value.param_name == "candidate"

    def test_rules_end_with_same_family(self) -> None:
        names = [name for name, _ in COMPATIBILITY_RULES]

        assert names[0] == "unsupported"
        assert names[-2:] == ["client_subset", "same_family"]

    def test_decision_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        """Test the deciding rule is named in the debug log."""
        logger = logging.getLogger("tfmkit.core.compatibility")
        logger.addHandler(caplog.handler)
        try:
            with caplog.at_level(logging.DEBUG, logger="tfmkit.core.compatibility"):
                _compatible("sl3", "sl3-wp")
        finally:
            logger.removeHandler(caplog.handler)

        assert "windows_phone_silo" in caplog.text
        assert "incompatible" in caplog.text
