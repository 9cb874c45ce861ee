from __future__ import annotations

import sys
from typing import Generator
from unittest.mock import patch

import pytest
from rich.console import Console

from tfmkit.utils import console as console_module
from tfmkit.utils.console import (
    TFMKIT_THEME,
    _auto_color,
    flag_markup,
    framework_markup,
    get_console,
    print_error,
    print_table,
    print_warning,
    reset_console,
    verdict_markup,
)


@pytest.fixture(autouse=True)
def fresh_console() -> Generator[None, None, None]:
    """Drop the shared console before and after each test."""
    reset_console()
    yield
    reset_console()


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove environment variables that affect color detection."""
    monkeypatch.delenv("NO_COLOR", raising=False)
    monkeypatch.delenv("CI", raising=False)


@pytest.mark.unit
class TestTheme:
    """Tests for TFMKIT_THEME."""

    @pytest.mark.parametrize(
        "style_name",
        ["ok", "failure", "notice", "heading", "muted", "framework"],
    )
    def test_theme_has_style(self, style_name: str) -> None:
        assert style_name in TFMKIT_THEME.styles


@pytest.mark.unit
class TestAutoColor:
    """Tests for terminal color detection."""

    def test_no_color_env_disables_color(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("NO_COLOR", "1")

        assert _auto_color() is False

    def test_ci_env_disables_color(
        self, clean_env: None, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("CI", "true")

        assert _auto_color() is False

    @pytest.mark.parametrize("is_tty", [True, False])
    def test_follows_stdout_tty(self, clean_env: None, is_tty: bool) -> None:
        with patch.object(sys.stdout, "isatty", return_value=is_tty):
            assert _auto_color() is is_tty

    def test_isatty_error_disables_color(self, clean_env: None) -> None:
        with patch.object(sys.stdout, "isatty", side_effect=OSError):
            assert _auto_color() is False


@pytest.mark.unit
class TestGetConsole:
    """Tests for the shared console."""

    def test_returns_same_instance(self) -> None:
        first = get_console()

        assert isinstance(first, Console)
        assert get_console() is first

    def test_reset_builds_new_instance(self) -> None:
        first = get_console()
        reset_console()

        assert get_console() is not first

    def test_explicit_choice_overrides_detection(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("NO_COLOR", "1")
        reset_console(True)

        assert get_console().no_color is False

    def test_forced_off(self, clean_env: None) -> None:
        reset_console(False)

        assert get_console().no_color is True

    def test_reset_clears_choice(self) -> None:
        reset_console(True)
        reset_console()

        assert console_module._color_choice is None


@pytest.mark.unit
class TestStatusLines:
    """Tests for print_error and print_warning."""

    def test_print_error(self, capsys: pytest.CaptureFixture) -> None:
        reset_console(False)

        print_error("bad [thing]")

        assert capsys.readouterr().out.strip() == "[ERROR] bad [thing]"

    def test_print_warning(self, capsys: pytest.CaptureFixture) -> None:
        reset_console(False)

        print_warning("Interrupted")

        assert capsys.readouterr().out.strip() == "[WARNING] Interrupted"


@pytest.mark.unit
class TestPrintTable:
    """Tests for print_table."""

    def test_columns_come_from_first_row(self, capsys: pytest.CaptureFixture) -> None:
        reset_console(False)

        print_table(
            [
                {"Moniker": "net40", "Identifier": ".NETFramework"},
                {"Moniker": "sl4", "Identifier": "Silverlight"},
            ],
            title="Frameworks",
        )

        out = capsys.readouterr().out
        assert "Frameworks" in out
        assert "Moniker" in out
        assert "Identifier" in out
        assert ".NETFramework" in out
        assert "Silverlight" in out

    def test_missing_cells_render_empty(self, capsys: pytest.CaptureFixture) -> None:
        reset_console(False)

        print_table([{"A": "x", "B": "y"}, {"A": "z"}])

        assert "z" in capsys.readouterr().out

    def test_column_options_are_applied(self) -> None:
        with patch("tfmkit.utils.console.Table") as table_cls:
            print_table([{"A": 1}], column_options={"A": {"no_wrap": True}})

        table_cls.return_value.add_column.assert_called_once_with("A", no_wrap=True)
        table_cls.return_value.add_row.assert_called_once_with("1")

    def test_empty_rows_print_nothing(self, capsys: pytest.CaptureFixture) -> None:
        print_table([])

        assert capsys.readouterr().out == ""


@pytest.mark.unit
class TestMarkupHelpers:
    """Tests for the markup helpers used by commands."""

    def test_verdict_markup(self) -> None:
        assert verdict_markup(True) == "[ok]compatible[/ok]"
        assert verdict_markup(False) == "[failure]incompatible[/failure]"

    def test_flag_markup(self) -> None:
        assert flag_markup(True) == "[ok]yes[/ok]"
        assert flag_markup(False) == "[muted]no[/muted]"
        assert flag_markup(False, miss_style="failure") == "[failure]no[/failure]"

    def test_framework_markup(self) -> None:
        assert framework_markup(".NETFramework") == "[framework].NETFramework[/framework]"

    def test_framework_markup_any(self) -> None:
        assert framework_markup(None) == "[muted]any[/muted]"

    def test_framework_markup_escapes_brackets(self) -> None:
        assert framework_markup("[x]") == "[framework]\\[x][/framework]"
