"""
Core design scales shared by themes and patterns.

Sizes, breakpoints, spacing steps and type roles are semantic names; a
theme maps each to the concrete utility suffix (see ``Theme.sizes`` and
friends).
"""

from __future__ import annotations

from enum import StrEnum


class Size(StrEnum):
    """Component size tokens."""

    XSMALL = "xsmall"
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"
    XLARGE = "xlarge"


class Breakpoint(StrEnum):
    """Responsive breakpoints and their utility prefixes."""

    MOBILE = "mobile"
    TABLET = "tablet"
    DESKTOP = "desktop"
    LARGE = "large"

    @property
    def prefix(self) -> str:
        """Variant prefix for this breakpoint (empty for mobile-first base)."""
        return _BREAKPOINT_PREFIXES[self]


_BREAKPOINT_PREFIXES: dict[Breakpoint, str] = {
    Breakpoint.MOBILE: "",
    Breakpoint.TABLET: "md:",
    Breakpoint.DESKTOP: "lg:",
    Breakpoint.LARGE: "xl:",
}


class Spacing(StrEnum):
    """Spacing steps."""

    NONE = "none"
    XSMALL = "xsmall"
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"
    XLARGE = "xlarge"
    XXLARGE = "xxlarge"


class Typography(StrEnum):
    """Typographic roles mapped to a text size by the theme's type scale."""

    HEADING1 = "heading1"
    HEADING2 = "heading2"
    HEADING3 = "heading3"
    HEADING4 = "heading4"
    HEADING5 = "heading5"
    HEADING6 = "heading6"
    BODY = "body"
    BODY_SMALL = "body_small"
    CAPTION = "caption"
    LABEL = "label"


class FontWeight(StrEnum):
    LIGHT = "light"
    NORMAL = "normal"
    MEDIUM = "medium"
    SEMIBOLD = "semibold"
    BOLD = "bold"


class FontFamily(StrEnum):
    SANS = "sans"
    SERIF = "serif"
    MONO = "mono"


def parse_size(value: str) -> Size | None:
    """Parse ``xs|extra_small``, ``sm|small``, ``md|medium``, ``lg|large``, ``xl|extra_large``."""
    return _SIZE_ALIASES.get(value.strip().lower().replace("-", "_"))


_SIZE_ALIASES: dict[str, Size] = {
    "xs": Size.XSMALL,
    "xsmall": Size.XSMALL,
    "extra_small": Size.XSMALL,
    "sm": Size.SMALL,
    "small": Size.SMALL,
    "md": Size.MEDIUM,
    "medium": Size.MEDIUM,
    "lg": Size.LARGE,
    "large": Size.LARGE,
    "xl": Size.XLARGE,
    "xlarge": Size.XLARGE,
    "extra_large": Size.XLARGE,
}


__all__ = [
    "Breakpoint",
    "FontFamily",
    "FontWeight",
    "Size",
    "Spacing",
    "Typography",
    "parse_size",
]
