"""Tests for switching the theme package import."""

import pytest

from radtools.model.results import SwitchErrorKind
from radtools.theme import switcher
from radtools.theme.switcher import (
    current_theme_import,
    find_theme_import,
    is_valid_theme_package_name,
    replace_theme_import,
    switch_theme_import,
)


class TestPackageNameValidation:
    @pytest.mark.parametrize("name", ["@radflow/theme-rad-os", "theme-paper", "theme-v2", "@radflow/theme-a-b-c"])
    def test_valid(self, name):
        assert is_valid_theme_package_name(name)

    @pytest.mark.parametrize(
        "name",
        ["not-a-theme", "theme-", "@other/theme-x", "theme-Rad", "theme-x; color: red", "../theme-x", ""],
    )
    def test_invalid(self, name):
        assert not is_valid_theme_package_name(name)


class TestImportRewriting:
    def test_find_theme_import(self, sample_css):
        assert find_theme_import(sample_css) == "@radflow/theme-rad-os"

    def test_find_returns_none_without_import(self):
        assert find_theme_import('@import "tailwindcss";') is None

    def test_replace_reports_previous_theme(self, sample_css):
        updated, previous = replace_theme_import(sample_css, "@radflow/theme-paper")
        assert previous == "rad-os"
        assert '@import "@radflow/theme-paper";' in updated
        assert "theme-rad-os" not in updated

    def test_replace_only_touches_import(self, sample_css):
        updated, _ = replace_theme_import(sample_css, "@radflow/theme-paper")
        assert updated.replace("theme-paper", "theme-rad-os") == sample_css

    def test_replace_first_import_only(self):
        css = '@import "@radflow/theme-a";\n@import "@radflow/theme-b";\n'
        updated, previous = replace_theme_import(css, "@radflow/theme-c")
        assert previous == "a"
        assert updated == '@import "@radflow/theme-c";\n@import "@radflow/theme-b";\n'

    def test_single_quotes(self):
        updated, previous = replace_theme_import("@import '@radflow/theme-x';", "theme-y")
        assert (updated, previous) == ('@import "theme-y";', "x")

    def test_replace_without_import(self):
        assert replace_theme_import("body {}", "theme-y") is None


# ---------------------------------------------------------------------------
# switch_theme_import
# ---------------------------------------------------------------------------


class TestSwitchThemeImport:
    def test_success(self, stylesheet):
        result = switch_theme_import(stylesheet, "@radflow/theme-paper")
        assert result.success
        assert result.previous_theme == "rad-os"
        assert result.new_theme == "@radflow/theme-paper"
        assert '@import "@radflow/theme-paper";' in stylesheet.read_text()

    def test_invalid_name_writes_nothing(self, stylesheet, monkeypatch):
        writes = []
        monkeypatch.setattr(switcher, "atomic_write_text", lambda *args: writes.append(args))
        before = stylesheet.read_text()

        result = switch_theme_import(stylesheet, "not-a-theme")

        assert result.failed
        assert result.error_kind is SwitchErrorKind.VALIDATION
        assert writes == []
        assert stylesheet.read_text() == before

    def test_invalid_name_checked_before_file_access(self, tmp_path):
        result = switch_theme_import(tmp_path / "missing.css", "bad name")
        assert result.error_kind is SwitchErrorKind.VALIDATION

    def test_no_theme_import(self, tmp_path):
        path = tmp_path / "globals.css"
        path.write_text('@import "tailwindcss";\nbody {}\n')
        result = switch_theme_import(path, "theme-paper")
        assert result.failed
        assert result.error_kind is SwitchErrorKind.NOT_FOUND
        assert path.read_text() == '@import "tailwindcss";\nbody {}\n'

    def test_unreadable_file(self, tmp_path):
        result = switch_theme_import(tmp_path / "missing.css", "theme-paper")
        assert result.failed
        assert result.error_kind is SwitchErrorKind.IO

    def test_write_failure_reported(self, stylesheet, monkeypatch):
        def boom(path, text):
            raise OSError("disk full")

        monkeypatch.setattr(switcher, "atomic_write_text", boom)
        result = switch_theme_import(stylesheet, "theme-paper")
        assert result.error_kind is SwitchErrorKind.IO
        assert "disk full" in result.error

    def test_previous_theme_allows_switching_back(self, stylesheet, sample_css):
        result = switch_theme_import(stylesheet, "@radflow/theme-paper")
        switch_theme_import(stylesheet, f"@radflow/theme-{result.previous_theme}")
        assert stylesheet.read_text() == sample_css


class TestCurrentThemeImport:
    def test_reads_file(self, stylesheet):
        assert current_theme_import(stylesheet) == "@radflow/theme-rad-os"

    def test_missing_file(self, tmp_path):
        assert current_theme_import(tmp_path / "missing.css") is None
