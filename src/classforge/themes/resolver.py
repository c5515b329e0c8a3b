"""
Theme resolver for classforge.

Resolves the final theme by merging:
1. Base preset (from preset key)
2. Project palette overrides (e.g. from a theme file)
3. Call-site palette overrides (highest precedence)
"""

from __future__ import annotations

import logging
import os
from typing import Any

from classforge.errors import ThemeError

from .models import Theme
from .presets import DEFAULT_THEME_KEY, default_theme, get_theme

logger = logging.getLogger(__name__)

THEME_ENV_VAR = "CLASSFORGE_THEME"


def resolve_theme(
    preset_name: str = DEFAULT_THEME_KEY,
    project_overrides: dict[str, Any] | None = None,
    call_overrides: dict[str, Any] | None = None,
    *,
    strict: bool = False,
) -> Theme:
    """
    Resolve the final theme by merging a preset with palette overrides.

    Args:
        preset_name: Preset key ("vibe", "jupiter", ...)
        project_overrides: Palette colors from project configuration
        call_overrides: Palette colors supplied by the caller

    Returns:
        Final Theme with all overrides applied

    Raises:
        ThemeError: In strict mode, if the preset is unknown. Always, if an
            override names a color the palette does not have.
    """
    base_theme = get_theme(preset_name)
    if base_theme is None:
        if strict:
            raise ThemeError(f"Unknown theme preset: {preset_name!r}")
        # Fall back to the default preset if unknown
        logger.debug(f"Unknown theme preset {preset_name!r}, using {DEFAULT_THEME_KEY!r}")
        base_theme = default_theme()

    if not project_overrides and not call_overrides:
        return base_theme

    merged = _merge_palette_overrides(project_overrides or {}, call_overrides or {})
    return base_theme.with_overrides(**merged)


def _merge_palette_overrides(
    project_overrides: dict[str, Any],
    call_overrides: dict[str, Any],
) -> dict[str, str]:
    """
    Merge palette overrides.

    Precedence: call > project. Keys may use hyphens (``text-primary``).
    """
    merged: dict[str, str] = {}
    for overrides in (project_overrides, call_overrides):
        for key, value in overrides.items():
            if value is None:
                continue
            merged[key.replace("-", "_")] = str(value)
    return merged


def theme_from_env(default: str = DEFAULT_THEME_KEY) -> Theme:
    """Resolve the preset named by ``CLASSFORGE_THEME`` (or ``default``)."""
    return resolve_theme(os.environ.get(THEME_ENV_VAR, default))


__all__ = ["THEME_ENV_VAR", "resolve_theme", "theme_from_env"]
