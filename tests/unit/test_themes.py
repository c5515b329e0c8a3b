"""
Unit tests for classforge themes.

Tests presets, color resolution, the resolver and theme files.
"""

from pathlib import Path

import pytest
from pydantic import ValidationError

from classforge.colors import Color, parse_color
from classforge.errors import ThemeError
from classforge.themes import (
    DEFAULT_COLOR_TOKEN,
    DEFAULT_HEX,
    DEFAULT_THEME_KEY,
    JUPITER_THEME,
    LLASI_THEME,
    THEME_ENV_VAR,
    THEME_FILE,
    VIBE_THEME,
    Palette,
    Theme,
    default_theme,
    get_theme,
    list_themes,
    load_project_theme,
    load_theme_file,
    parse_theme_data,
    resolve_theme,
    save_theme_file,
    theme_file_exists,
    theme_from_env,
)
from classforge.tokens import Size, Spacing, Typography


class TestThemePresets:
    """Tests for theme preset definitions."""

    def test_list_themes(self):
        presets = list_themes()
        assert len(presets) == 5
        assert presets == ["vibe", "water-wellness", "jupiter", "llasi", "psychedelic"]

    def test_default_theme_is_vibe(self):
        assert DEFAULT_THEME_KEY == "vibe"
        assert default_theme() is VIBE_THEME

    @pytest.mark.parametrize("name", ["jupiter", "JUPITER", " Jupiter "])
    def test_get_theme_case_insensitive(self, name):
        assert get_theme(name) is JUPITER_THEME

    def test_get_theme_normalizes_separators(self):
        assert get_theme("water_wellness") is get_theme("water-wellness")
        assert get_theme("Water Wellness") is not None

    def test_get_unknown_theme(self):
        assert get_theme("nonexistent") is None

    def test_theme_is_frozen(self):
        with pytest.raises(ValidationError):
            VIBE_THEME.name = "Changed"  # type: ignore[misc]


class TestColorResolution:
    """Tests for the color capability."""

    def test_vibe_classes(self, theme):
        assert theme.resolve(Color.PRIMARY) == "jupiter-blue-500"
        assert theme.text_class(Color.TEXT_PRIMARY) == "text-gray-900"
        assert theme.bg_class(Color.SURFACE) == "bg-white"
        assert theme.border_class(Color.BORDER) == "border-gray-200"

    def test_ring_color_uses_lighter_shade(self, theme):
        assert theme.ring_color_class() == "ring-jupiter-blue-300"

    def test_ring_color_keeps_non_500_shades(self, blue_theme):
        assert blue_theme.ring_color_class(Color.PRIMARY) == "ring-blue-600"

    def test_resolve_accepts_strings(self, theme):
        assert theme.resolve("primary") == "jupiter-blue-500"

    def test_unknown_color_falls_back(self, theme):
        assert theme.resolve("not-a-color") == DEFAULT_COLOR_TOKEN

    def test_empty_entry_falls_back(self):
        theme = Theme(palette=Palette(accent=""))
        assert theme.resolve(Color.ACCENT) == DEFAULT_COLOR_TOKEN
        assert theme.bg_class(Color.ACCENT) == "bg-gray-500"

    def test_hex_without_hex_palette(self, theme):
        assert theme.hex_color(Color.PRIMARY) == DEFAULT_HEX

    def test_hex_palette(self):
        assert LLASI_THEME.hex_color(Color.PRIMARY) == "#212121"
        # LLASI leaves some hex entries empty
        assert LLASI_THEME.hex_color(Color.SUCCESS) == DEFAULT_HEX

    def test_custom_prefixes(self):
        theme = Theme(text_prefix="fg", bg_prefix="background")
        assert theme.text_class(Color.PRIMARY) == "fg-water-blue-500"
        assert theme.bg_class(Color.PRIMARY) == "background-water-blue-500"

    def test_parse_color(self):
        assert parse_color("text-primary") is Color.TEXT_PRIMARY
        assert parse_color("PRIMARY") is Color.PRIMARY
        assert parse_color("bogus") is None


class TestScales:
    def test_size_scale(self, theme):
        assert theme.width_class(Size.MEDIUM) == "w-12"
        assert theme.height_class(Size.XLARGE) == "h-24"

    def test_spacing_scale(self, theme):
        assert theme.padding_class(Spacing.MEDIUM) == "p-4"
        assert theme.margin_class(Spacing.NONE) == "m-0"

    def test_type_scale(self, theme):
        assert theme.typography_class(Typography.HEADING1) == "text-4xl"
        assert theme.typography_class(Typography.CAPTION) == "text-xs"


class TestResolveTheme:
    """Tests for the theme resolver."""

    def test_default(self):
        assert resolve_theme() is VIBE_THEME

    def test_preset(self):
        assert resolve_theme("jupiter") is JUPITER_THEME

    def test_unknown_preset_falls_back(self):
        assert resolve_theme("nonexistent") is VIBE_THEME

    def test_unknown_preset_strict(self):
        with pytest.raises(ThemeError, match="Unknown theme preset"):
            resolve_theme("nonexistent", strict=True)

    def test_project_overrides(self):
        theme = resolve_theme("vibe", project_overrides={"primary": "red-600"})
        assert theme.bg_class(Color.PRIMARY) == "bg-red-600"
        assert VIBE_THEME.resolve(Color.PRIMARY) == "jupiter-blue-500"

    def test_call_overrides_win(self):
        theme = resolve_theme(
            "vibe",
            project_overrides={"primary": "red-600", "accent": "pink-500"},
            call_overrides={"primary": "green-600"},
        )
        assert theme.resolve(Color.PRIMARY) == "green-600"
        assert theme.resolve(Color.ACCENT) == "pink-500"

    def test_hyphenated_override_keys(self):
        theme = resolve_theme("vibe", call_overrides={"text-primary": "slate-800"})
        assert theme.text_class(Color.TEXT_PRIMARY) == "text-slate-800"

    def test_none_override_ignored(self):
        theme = resolve_theme("vibe", call_overrides={"primary": None})
        assert theme.resolve(Color.PRIMARY) == "jupiter-blue-500"

    def test_unknown_override_key(self):
        with pytest.raises(ThemeError, match="Unknown palette colors"):
            resolve_theme("vibe", call_overrides={"brand": "red-500"})

    def test_theme_from_env(self, monkeypatch):
        monkeypatch.setenv(THEME_ENV_VAR, "llasi")
        assert theme_from_env() is LLASI_THEME

    def test_theme_from_env_unset(self, monkeypatch):
        monkeypatch.delenv(THEME_ENV_VAR, raising=False)
        assert theme_from_env() is VIBE_THEME


class TestThemeFiles:
    """Tests for YAML theme files."""

    def test_parse_extends(self):
        theme = parse_theme_data(
            {"extends": "jupiter", "name": "Acme", "palette": {"primary": "acme-red-500"}}
        )
        assert theme.name == "Acme"
        assert theme.resolve(Color.PRIMARY) == "acme-red-500"
        # Untouched colors come from the base preset
        assert theme.resolve(Color.SECONDARY) == JUPITER_THEME.resolve(Color.SECONDARY)

    def test_parse_without_extends_uses_default(self):
        theme = parse_theme_data({"palette": {"text-primary": "gray-800"}})
        assert theme.resolve(Color.TEXT_PRIMARY) == "gray-800"
        assert theme.resolve(Color.PRIMARY) == "jupiter-blue-500"

    def test_parse_unknown_extends(self):
        with pytest.raises(ThemeError, match="unknown preset"):
            parse_theme_data({"extends": "nonexistent"})

    def test_parse_invalid_field(self):
        with pytest.raises(ThemeError, match="Invalid theme definition"):
            parse_theme_data({"palette": {"brand": "red-500"}})

    def test_load_missing_file(self, tmp_path: Path):
        with pytest.raises(ThemeError, match="not found"):
            load_theme_file(tmp_path / THEME_FILE)

    def test_load_invalid_yaml(self, tmp_path: Path):
        path = tmp_path / THEME_FILE
        path.write_text("palette: [unclosed\n")
        with pytest.raises(ThemeError, match="Invalid YAML"):
            load_theme_file(path)

    def test_load_empty_file(self, tmp_path: Path):
        path = tmp_path / THEME_FILE
        path.write_text("")
        assert load_theme_file(path) is VIBE_THEME

    def test_load_non_mapping(self, tmp_path: Path):
        path = tmp_path / THEME_FILE
        path.write_text("- a\n- b\n")
        with pytest.raises(ThemeError, match="mapping"):
            load_theme_file(path)

    def test_load_file(self, tmp_path: Path):
        path = tmp_path / THEME_FILE
        path.write_text("extends: llasi\npalette:\n  primary: rose-700\n")
        theme = load_theme_file(path)
        assert theme.resolve(Color.PRIMARY) == "rose-700"
        assert theme.name == "LLASI"

    def test_save_and_load(self, tmp_path: Path, jupiter):
        path = tmp_path / THEME_FILE
        save_theme_file(path, jupiter)
        assert load_theme_file(path) == jupiter

    def test_load_project_theme(self, tmp_path: Path):
        assert not theme_file_exists(tmp_path)
        assert load_project_theme(tmp_path) is VIBE_THEME

        with pytest.raises(ThemeError):
            load_project_theme(tmp_path, use_defaults=False)

        (tmp_path / THEME_FILE).write_text("extends: psychedelic\n")
        assert theme_file_exists(tmp_path)
        assert load_project_theme(tmp_path).name == "Psychedelic"
