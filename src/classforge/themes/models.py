"""
Theme and palette models.

A Theme is the color capability provider every pattern and builder is
parameterized over. It is a frozen pydantic model: cheap to share across
renders, hashable, and never mutated after construction.
"""

from __future__ import annotations

import logging
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from classforge.colors import Color
from classforge.errors import ThemeError
from classforge.tokens import FontFamily, FontWeight, Size, Spacing, Typography

logger = logging.getLogger(__name__)

# Returned for any unmapped or empty palette entry.
DEFAULT_COLOR_TOKEN = "gray-500"
DEFAULT_HEX = "#000000"


# =============================================================================
# Palette
# =============================================================================


class Palette(BaseModel):
    """
    Concrete color token for every semantic :class:`Color`.

    Example:
        Palette(primary="blue-600", secondary="green-500", ...)
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    # Brand
    primary: str = Field(default="water-blue-500", description="Main brand color")
    secondary: str = Field(default="water-green-500", description="Secondary brand color")
    accent: str = Field(default="water-green-400", description="Highlight color")

    # Semantic
    success: str = Field(default="green-500", description="Positive outcome")
    warning: str = Field(default="amber-500", description="Needs attention")
    error: str = Field(default="red-500", description="Failure or destructive action")
    info: str = Field(default="blue-500", description="Neutral information")

    # Neutral
    surface: str = Field(default="white", description="Card and panel surfaces")
    background: str = Field(default="gray-50", description="Page background")
    foreground: str = Field(default="gray-900", description="Default foreground")
    border: str = Field(default="gray-200", description="Borders and dividers")

    # Text
    text_primary: str = Field(default="gray-900")
    text_secondary: str = Field(default="gray-600")
    text_tertiary: str = Field(default="gray-400")
    text_inverse: str = Field(default="white")

    # Interactive states
    interactive: str = Field(default="water-blue-500")
    interactive_hover: str = Field(default="water-blue-600")
    interactive_active: str = Field(default="water-blue-700")
    interactive_disabled: str = Field(default="gray-300")

    def get(self, color: Color) -> str:
        """Raw palette value for a color (may be empty)."""
        return getattr(self, Color(color).value)

    def with_overrides(self, **overrides: str) -> Palette:
        """
        Return a copy with some colors replaced.

        Raises:
            ThemeError: If an override names an unknown color.
        """
        unknown = sorted(set(overrides) - set(type(self).model_fields))
        if unknown:
            raise ThemeError(f"Unknown palette colors: {', '.join(unknown)}")
        return self.model_copy(update=overrides)


# =============================================================================
# Scales
# =============================================================================


class SizeScale(BaseModel):
    """Width/height suffix per :class:`Size`."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    xsmall: str = "4"
    small: str = "8"
    medium: str = "12"
    large: str = "16"
    xlarge: str = "24"


class SpacingScale(BaseModel):
    """Padding/margin suffix per :class:`Spacing`."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    none: str = "0"
    xsmall: str = "1"
    small: str = "2"
    medium: str = "4"
    large: str = "6"
    xlarge: str = "8"
    xxlarge: str = "12"


class TypeScale(BaseModel):
    """Text size suffix per :class:`Typography` role."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    heading1: str = "4xl"
    heading2: str = "3xl"
    heading3: str = "2xl"
    heading4: str = "xl"
    heading5: str = "lg"
    heading6: str = "base"
    body: str = "base"
    body_small: str = "sm"
    caption: str = "xs"
    label: str = "sm"


class ThemeGradients(BaseModel):
    """Brand gradient class strings."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    primary: str = ""
    secondary: str = ""
    hero: str = ""
    brand: str = ""


# =============================================================================
# Theme
# =============================================================================


class Theme(BaseModel):
    """
    Color, size, spacing and typography capability provider.

    Derived class helpers default to ``"{prefix}-{token}"``. Override the
    ``*_prefix`` fields (or subclass) to target a CSS framework with
    different naming.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = Field(default="Water & Wellness", description="Display name")
    description: str | None = Field(default=None, description="Theme description")
    palette: Palette = Field(default_factory=Palette, description="Semantic color mapping")
    hex_palette: Palette | None = Field(
        default=None, description="Hex values for non-CSS contexts (SVG icons, etc.)"
    )
    gradients: ThemeGradients | None = Field(default=None, description="Brand gradients")
    css_custom_properties: str = Field(default="", description="Optional :root block")

    text_prefix: str = "text"
    bg_prefix: str = "bg"
    border_prefix: str = "border"
    ring_prefix: str = "ring"

    sizes: SizeScale = Field(default_factory=SizeScale)
    spacing: SpacingScale = Field(default_factory=SpacingScale)
    type_scale: TypeScale = Field(default_factory=TypeScale)

    # -------------------------------------------------------------------------
    # Color capability
    # -------------------------------------------------------------------------

    def resolve(self, color: Color | str) -> str:
        """Resolve a semantic color; unmapped or empty entries fall back to DEFAULT_COLOR_TOKEN."""
        try:
            value = self.palette.get(Color(color))
        except ValueError:
            logger.debug(f"Unknown color {color!r} in theme {self.name!r}, using fallback")
            return DEFAULT_COLOR_TOKEN
        if not value:
            logger.debug(f"Empty palette entry {color!s} in theme {self.name!r}, using fallback")
            return DEFAULT_COLOR_TOKEN
        return value

    def text_class(self, color: Color | str) -> str:
        return f"{self.text_prefix}-{self.resolve(color)}"

    def bg_class(self, color: Color | str) -> str:
        return f"{self.bg_prefix}-{self.resolve(color)}"

    def border_class(self, color: Color | str) -> str:
        return f"{self.border_prefix}-{self.resolve(color)}"

    def ring_color_class(self, color: Color | str = Color.PRIMARY) -> str:
        """Focus-ring tint: the color's 300 shade when it is a 500 shade."""
        return f"{self.ring_prefix}-{self.resolve(color).replace('-500', '-300')}"

    def hex_color(self, color: Color | str) -> str:
        """Hex value for non-CSS contexts, DEFAULT_HEX when the theme has none."""
        if self.hex_palette is None:
            return DEFAULT_HEX
        try:
            value = self.hex_palette.get(Color(color))
        except ValueError:
            return DEFAULT_HEX
        return value or DEFAULT_HEX

    # -------------------------------------------------------------------------
    # Size / spacing / typography capabilities
    # -------------------------------------------------------------------------

    def resolve_size(self, size: Size) -> str:
        return getattr(self.sizes, Size(size).value)

    def width_class(self, size: Size) -> str:
        return f"w-{self.resolve_size(size)}"

    def height_class(self, size: Size) -> str:
        return f"h-{self.resolve_size(size)}"

    def resolve_spacing(self, spacing: Spacing) -> str:
        return getattr(self.spacing, Spacing(spacing).value)

    def padding_class(self, spacing: Spacing) -> str:
        return f"p-{self.resolve_spacing(spacing)}"

    def margin_class(self, spacing: Spacing) -> str:
        return f"m-{self.resolve_spacing(spacing)}"

    def resolve_typography(self, typography: Typography) -> str:
        return getattr(self.type_scale, Typography(typography).value)

    def typography_class(self, typography: Typography) -> str:
        return f"text-{self.resolve_typography(typography)}"

    def font_weight_class(self, weight: FontWeight) -> str:
        return f"font-{FontWeight(weight).value}"

    def font_family_class(self, family: FontFamily) -> str:
        return f"font-{FontFamily(family).value}"

    # -------------------------------------------------------------------------
    # Derivation
    # -------------------------------------------------------------------------

    def with_overrides(self, **palette_overrides: str) -> Theme:
        """Return a copy of this theme with palette colors replaced."""
        return self.model_copy(update={"palette": self.palette.with_overrides(**palette_overrides)})

    def with_name(self, name: str, description: str | None = None) -> Theme:
        update: dict[str, Any] = {"name": name}
        if description is not None:
            update["description"] = description
        return self.model_copy(update=update)


__all__ = [
    "DEFAULT_COLOR_TOKEN",
    "DEFAULT_HEX",
    "Palette",
    "SizeScale",
    "SpacingScale",
    "Theme",
    "ThemeGradients",
    "TypeScale",
]
