"""Tests for the classforge CLI."""

from __future__ import annotations

from pathlib import Path

from typer.testing import CliRunner

from classforge.builders import button_classes_from_strings, card_classes_from_strings
from classforge.cli import app
from classforge.themes import JUPITER_THEME, THEME_ENV_VAR, VIBE_THEME

runner = CliRunner()


class TestThemes:
    def test_list_themes(self) -> None:
        result = runner.invoke(app, ["themes"])
        assert result.exit_code == 0
        assert "vibe" in result.output
        assert "jupiter" in result.output
        assert "psychedelic" in result.output

    def test_palette(self) -> None:
        result = runner.invoke(app, ["palette", "jupiter"])
        assert result.exit_code == 0
        assert "jupiter-orange-500" in result.output

    def test_palette_unknown(self) -> None:
        result = runner.invoke(app, ["palette", "nonexistent"])
        assert result.exit_code == 1
        assert "Unknown theme preset" in result.output


class TestRenderCommands:
    def test_button(self) -> None:
        result = runner.invoke(app, ["button", "--variant", "danger", "--size", "lg"])
        assert result.exit_code == 0
        assert result.output.strip() == button_classes_from_strings(VIBE_THEME, "danger", "lg")

    def test_button_with_theme(self) -> None:
        result = runner.invoke(app, ["--theme", "jupiter", "button"])
        assert result.exit_code == 0
        assert result.output.strip() == button_classes_from_strings(JUPITER_THEME, "primary", "md")

    def test_theme_from_env(self) -> None:
        result = runner.invoke(app, ["button"], env={THEME_ENV_VAR: "jupiter"})
        assert result.exit_code == 0
        assert "bg-jupiter-orange-500" in result.output

    def test_card(self) -> None:
        result = runner.invoke(app, ["card", "--elevation", "floating", "--selected"])
        assert result.exit_code == 0
        expected = card_classes_from_strings(
            VIBE_THEME, "standard", "floating", "standard", "static", selected=True
        )
        assert result.output.strip() == expected

    def test_text(self) -> None:
        result = runner.invoke(app, ["text", "title", "--align", "center"])
        assert result.exit_code == 0
        tokens = result.output.split()
        assert "text-4xl" in tokens
        assert "text-center" in tokens

    def test_text_element(self) -> None:
        result = runner.invoke(app, ["text", "heading", "--element"])
        assert result.exit_code == 0
        assert "<h2>" in result.output

    def test_state(self) -> None:
        result = runner.invoke(app, ["state", "loading", "--loading-variant", "spinner"])
        assert result.exit_code == 0
        assert "animate-spin" in result.output.split()

    def test_unknown_option_value_degrades(self) -> None:
        result = runner.invoke(app, ["button", "--size", "gigantic"])
        assert result.exit_code == 0
        assert result.output.strip() == button_classes_from_strings(VIBE_THEME, "primary", "md")


class TestThemeFile:
    def test_theme_file(self, tmp_path: Path) -> None:
        path = tmp_path / "classforge.yaml"
        path.write_text("extends: vibe\npalette:\n  primary: teal-600\n")
        result = runner.invoke(app, ["--theme-file", str(path), "button"])
        assert result.exit_code == 0
        assert "bg-teal-600" in result.output

    def test_bad_theme_file(self, tmp_path: Path) -> None:
        path = tmp_path / "classforge.yaml"
        path.write_text("palette:\n  brand: red-500\n")
        result = runner.invoke(app, ["--theme-file", str(path), "button"])
        assert result.exit_code == 1
        assert "Theme error" in result.output

    def test_version(self) -> None:
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert "classforge" in result.output
