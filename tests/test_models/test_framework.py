"""Unit tests for tfmkit.models.framework module."""

from __future__ import annotations

import pytest

from tfmkit.models.version import Version
from tfmkit.models.framework import UNSUPPORTED_FRAMEWORK, FrameworkName


@pytest.mark.unit
class TestFrameworkName:
    """Tests for the FrameworkName descriptor."""

    def test_defaults(self) -> None:
        framework = FrameworkName(".NETFramework")

        assert framework.version == Version(0, 0)
        assert framework.profile == ""

    def test_structural_equality(self) -> None:
        assert FrameworkName("Silverlight", Version(4, 0), "WindowsPhone") == FrameworkName(
            "Silverlight", Version(4, 0, 0, 0), "WindowsPhone"
        )
        assert FrameworkName("Silverlight", Version(4, 0)) != FrameworkName(
            "Silverlight", Version(4, 0), "WindowsPhone"
        )

    def test_is_immutable(self) -> None:
        framework = FrameworkName(".NETFramework", Version(4, 0))

        with pytest.raises(AttributeError):
            framework.profile = "Client"  # type: ignore[misc]

    def test_full_name(self) -> None:
        assert FrameworkName(".NETFramework", Version(4, 0)).full_name == (
            ".NETFramework,Version=v4.0"
        )
        assert FrameworkName(".NETFramework", Version(4, 0), "Client").full_name == (
            ".NETFramework,Version=v4.0,Profile=Client"
        )

    def test_str_is_full_name(self) -> None:
        framework = FrameworkName("Silverlight", Version(3, 0))

        assert str(framework) == framework.full_name

    def test_to_json(self) -> None:
        framework = FrameworkName(".NETMicroFramework", Version(4, 1))

        assert framework.to_json() == {
            "identifier": ".NETMicroFramework",
            "version": "4.1",
            "profile": "",
        }


@pytest.mark.unit
class TestUnsupportedFramework:
    """Tests for the Unsupported sentinel."""

    def test_sentinel_shape(self) -> None:
        assert UNSUPPORTED_FRAMEWORK.identifier == "Unsupported"
        assert UNSUPPORTED_FRAMEWORK.version == Version(0, 0)
        assert UNSUPPORTED_FRAMEWORK.profile == ""

    def test_is_unsupported(self) -> None:
        assert UNSUPPORTED_FRAMEWORK.is_unsupported is True
        assert FrameworkName(".NETFramework").is_unsupported is False
