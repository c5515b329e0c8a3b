"""
Themes: palettes, presets, resolution and theme files.

Usage:
    from classforge.themes import get_theme, resolve_theme

    theme = resolve_theme("jupiter", call_overrides={"primary": "red-600"})
    theme.bg_class(Color.PRIMARY)  # "bg-red-600"
"""

from .loader import (
    THEME_FILE,
    get_theme_file_path,
    load_project_theme,
    load_theme_file,
    parse_theme_data,
    save_theme_file,
    theme_file_exists,
)
from .models import (
    DEFAULT_COLOR_TOKEN,
    DEFAULT_HEX,
    Palette,
    SizeScale,
    SpacingScale,
    Theme,
    ThemeGradients,
    TypeScale,
)
from .presets import (
    DEFAULT_THEME_KEY,
    JUPITER_THEME,
    LLASI_THEME,
    PSYCHEDELIC_THEME,
    THEME_PRESETS,
    VIBE_THEME,
    WATER_WELLNESS_THEME,
    default_theme,
    get_theme,
    list_themes,
)
from .resolver import THEME_ENV_VAR, resolve_theme, theme_from_env

__all__ = [
    # Models
    "DEFAULT_COLOR_TOKEN",
    "DEFAULT_HEX",
    "Palette",
    "SizeScale",
    "SpacingScale",
    "Theme",
    "ThemeGradients",
    "TypeScale",
    # Presets
    "DEFAULT_THEME_KEY",
    "JUPITER_THEME",
    "LLASI_THEME",
    "PSYCHEDELIC_THEME",
    "THEME_PRESETS",
    "VIBE_THEME",
    "WATER_WELLNESS_THEME",
    "default_theme",
    "get_theme",
    "list_themes",
    # Resolution
    "THEME_ENV_VAR",
    "resolve_theme",
    "theme_from_env",
    # Theme files
    "THEME_FILE",
    "get_theme_file_path",
    "load_project_theme",
    "load_theme_file",
    "parse_theme_data",
    "save_theme_file",
    "theme_file_exists",
]
