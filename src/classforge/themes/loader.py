"""
Theme file persistence.

Reads and writes theme definitions as YAML. A theme file names an
optional base preset and overrides any theme field:

    extends: jupiter
    name: Acme
    palette:
      primary: acme-red-500
      text-primary: gray-800

Default location: {project_root}/classforge.yaml
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from classforge.errors import ThemeError

from .models import Theme
from .presets import DEFAULT_THEME_KEY, default_theme, get_theme

logger = logging.getLogger(__name__)

THEME_FILE = "classforge.yaml"


# =============================================================================
# Path helpers
# =============================================================================


def get_theme_file_path(project_root: Path) -> Path:
    """Get the theme file path for a project."""
    return project_root / THEME_FILE


def theme_file_exists(project_root: Path) -> bool:
    return get_theme_file_path(project_root).exists()


# =============================================================================
# Parsing
# =============================================================================


def _normalize_keys(data: dict[str, Any]) -> dict[str, Any]:
    """Accept hyphenated keys (``text-primary``) as well as snake_case."""
    return {str(key).replace("-", "_"): value for key, value in data.items()}


def parse_theme_data(data: dict[str, Any]) -> Theme:
    """
    Build a Theme from raw theme-file data.

    Nested models (palette, hex_palette, scales, gradients) are merged
    field by field over the base preset, so a file only lists what it
    changes.

    Raises:
        ThemeError: If the base preset is unknown or the data is invalid.
    """
    data = _normalize_keys(data)
    extends = data.pop("extends", None)

    if extends is None:
        base = default_theme()
    else:
        found = get_theme(str(extends))
        if found is None:
            raise ThemeError(f"Theme extends unknown preset: {extends!r}")
        base = found

    merged = base.model_dump()
    for key, value in data.items():
        if isinstance(value, dict):
            nested = merged.get(key) or {}
            merged[key] = {**nested, **_normalize_keys(value)}
        else:
            merged[key] = value

    try:
        return Theme.model_validate(merged)
    except ValidationError as e:
        raise ThemeError(f"Invalid theme definition: {e}") from e


# =============================================================================
# Loading / saving
# =============================================================================


def load_theme_file(path: Path) -> Theme:
    """
    Load a theme from a YAML file.

    Raises:
        ThemeError: If the file is missing, not YAML, or not a valid theme.
    """
    if not path.exists():
        raise ThemeError(f"Theme file not found: {path}")

    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ThemeError(f"Invalid YAML in {path}: {e}") from e

    if not data:
        logger.warning(f"Empty theme file at {path}, using {DEFAULT_THEME_KEY!r}")
        return default_theme()
    if not isinstance(data, dict):
        raise ThemeError(f"Theme file {path} must contain a mapping")

    return parse_theme_data(data)


def load_project_theme(project_root: Path, *, use_defaults: bool = True) -> Theme:
    """
    Load the project's theme file.

    Args:
        project_root: Directory containing classforge.yaml.
        use_defaults: If True, return the default preset when no file exists.
    """
    path = get_theme_file_path(project_root)
    if not path.exists():
        if use_defaults:
            logger.debug("No classforge.yaml found, using default theme")
            return default_theme()
        raise ThemeError(f"Theme file not found: {path}")
    return load_theme_file(path)


def save_theme_file(path: Path, theme: Theme) -> Path:
    """Write a complete theme definition to YAML."""
    data = theme.model_dump(mode="json", exclude_none=True)
    path.write_text(
        yaml.dump(data, default_flow_style=False, sort_keys=False, allow_unicode=True),
        encoding="utf-8",
    )
    logger.debug(f"Saved theme {theme.name!r} to {path}")
    return path


__all__ = [
    "THEME_FILE",
    "get_theme_file_path",
    "load_project_theme",
    "load_theme_file",
    "parse_theme_data",
    "save_theme_file",
    "theme_file_exists",
]
