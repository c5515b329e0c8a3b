"""
Semantic color tokens and the color capability protocol.

Patterns and builders never hard-code brand colors. They ask a
``ColorProvider`` (normally a :class:`classforge.themes.Theme`) to turn a
semantic :class:`Color` into a concrete utility class.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Protocol, runtime_checkable


class Color(StrEnum):
    """Semantic color tokens. Values match the palette field names."""

    # Brand
    PRIMARY = "primary"
    SECONDARY = "secondary"
    ACCENT = "accent"

    # Semantic
    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"
    INFO = "info"

    # Neutral
    SURFACE = "surface"
    BACKGROUND = "background"
    FOREGROUND = "foreground"
    BORDER = "border"

    # Text
    TEXT_PRIMARY = "text_primary"
    TEXT_SECONDARY = "text_secondary"
    TEXT_TERTIARY = "text_tertiary"
    TEXT_INVERSE = "text_inverse"

    # Interactive states
    INTERACTIVE = "interactive"
    INTERACTIVE_HOVER = "interactive_hover"
    INTERACTIVE_ACTIVE = "interactive_active"
    INTERACTIVE_DISABLED = "interactive_disabled"


@runtime_checkable
class ColorProvider(Protocol):
    """Resolves semantic colors to utility classes."""

    def resolve(self, color: Color) -> str:
        """Return the concrete color token, e.g. ``"blue-500"``."""
        ...

    def text_class(self, color: Color) -> str:
        """Return the text color class, e.g. ``"text-blue-500"``."""
        ...

    def bg_class(self, color: Color) -> str:
        """Return the background color class."""
        ...

    def border_class(self, color: Color) -> str:
        """Return the border color class."""
        ...

    def ring_color_class(self, color: Color = Color.PRIMARY) -> str:
        """Return the focus-ring tint for a color."""
        ...


def parse_color(value: str) -> Color | None:
    """Parse a color name (``"text-primary"``, ``"TEXT_PRIMARY"``) or return None."""
    key = value.strip().lower().replace("-", "_")
    try:
        return Color(key)
    except ValueError:
        return None


__all__ = ["Color", "ColorProvider", "parse_color"]
