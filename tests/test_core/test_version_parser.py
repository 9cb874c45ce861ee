"""Unit tests for tfmkit.core.version_parser module.

Test Coverage:
- Dotted version parsing including whitespace tolerance
- Missing-argument vs malformed-input failures
- Lenient parsing
- Digit-run shorthand used by framework monikers
- Trailing-zero trimming
"""

from __future__ import annotations

import pytest

from tfmkit.models.version import Version
from tfmkit.exceptions import MissingArgumentError, VersionFormatError
from tfmkit.core.version_parser import (
    is_digit_run,
    parse_digit_run,
    parse_version,
    trim_version,
    try_parse_version,
)


@pytest.mark.unit
class TestParseVersion:
    """Tests for parse_version."""

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("1.2", Version(1, 2)),
            ("4.0", Version(4, 0)),
            ("1.2.3", Version(1, 2, 3)),
            ("2.9.45.6", Version(2, 9, 45, 6)),
            ("0.10", Version(0, 10)),
        ],
    )
    def test_dotted_versions(self, text: str, expected: Version) -> None:
        assert parse_version(text) == expected

    def test_whitespace_is_ignored(self) -> None:
        """Test whitespace around and between components is dropped."""
        assert parse_version("  1  .   2  ") == Version(1, 2)
        assert str(parse_version("  1  .   2  ")) == "1.2"

    def test_none_raises_missing_argument(self) -> None:
        with pytest.raises(MissingArgumentError) as exc_info:
            parse_version(None)

        assert exc_info.value.param_name == "value"

    @pytest.mark.parametrize(
        "text",
        ["", "1", "1.", ".1", "1.2.3.4.5", "a.b", "1.2-beta", "1..2"],
    )
    def test_malformed_raises_format_error(self, text: str) -> None:
        with pytest.raises(VersionFormatError) as exc_info:
            parse_version(text)

        assert exc_info.value.value == text

    def test_format_error_is_value_error(self) -> None:
        """Test callers can catch parse failures as ValueError."""
        with pytest.raises(ValueError):
            parse_version("not-a-version")

    @pytest.mark.parametrize("text", ["1.2", "1.2.0.0", "1.2.0.5", "0.10", " 3 . 4 . 5 "])
    def test_string_form_parses_back(self, text: str) -> None:
        version = parse_version(text)

        assert parse_version(str(version)) == version


@pytest.mark.unit
class TestTryParseVersion:
    """Tests for try_parse_version."""

    def test_returns_version_when_valid(self) -> None:
        assert try_parse_version("1.2") == Version(1, 2)

    def test_returns_none_when_malformed(self) -> None:
        assert try_parse_version("1.2.3.4.5") is None

    def test_returns_none_for_none(self) -> None:
        assert try_parse_version(None) is None


@pytest.mark.unit
class TestDigitRun:
    """Tests for the digit-run shorthand."""

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("4", Version(4, 0)),
            ("40", Version(4, 0)),
            ("20", Version(2, 0)),
            ("35", Version(3, 5)),
            ("403", Version(4, 0, 3)),
            ("41235", Version(4, 1, 2, 3)),
        ],
    )
    def test_one_digit_per_component(self, text: str, expected: Version) -> None:
        assert parse_digit_run(text) == expected

    def test_non_digits_raise(self) -> None:
        with pytest.raises(VersionFormatError):
            parse_digit_run("40Foo")

    @pytest.mark.parametrize(
        "text, expected",
        [("40", True), ("0", True), ("", False), ("4.0", False), ("4a", False)],
    )
    def test_is_digit_run(self, text: str, expected: bool) -> None:
        assert is_digit_run(text) is expected


@pytest.mark.unit
class TestTrimVersion:
    """Tests for trim_version."""

    @pytest.mark.parametrize(
        "version, expected",
        [
            (Version(1, 2, 3, 0), (1, 2, 3)),
            (Version(1, 2, 0, 0), (1, 2)),
            (Version(1, 2, 0, 5), (1, 2, 0, 5)),
        ],
    )
    def test_trims_trailing_zeros(self, version: Version, expected: tuple) -> None:
        assert trim_version(version) == expected

    def test_none_raises_missing_argument(self) -> None:
        with pytest.raises(MissingArgumentError) as exc_info:
            trim_version(None)

        assert exc_info.value.param_name == "version"
