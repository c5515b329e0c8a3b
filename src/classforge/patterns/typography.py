"""
Typography pattern.

Expresses text intent (hierarchy, emphasis, color role) independent of
concrete utility classes. An explicit size or weight replaces the
hierarchy's default for that property instead of being emitted next to it.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum

from classforge.canonical import canonicalize
from classforge.colors import Color, ColorProvider
from classforge.fluent import Fluent, enum_choices, parse_choice, split_custom

# =============================================================================
# Enums
# =============================================================================


class TypographyHierarchy(StrEnum):
    TITLE = "title"
    HEADING = "heading"
    SUBHEADING = "subheading"
    H4 = "h4"
    BODY = "body"
    BODY_LARGE = "body-large"
    BODY_SMALL = "body-small"
    CAPTION = "caption"
    OVERLINE = "overline"
    CODE = "code"


class TypographySize(StrEnum):
    XS = "xs"
    SM = "sm"
    MD = "md"
    LG = "lg"
    XL = "xl"
    XL2 = "2xl"
    XL3 = "3xl"
    XL4 = "4xl"


class TypographyWeight(StrEnum):
    LIGHT = "light"
    NORMAL = "normal"
    MEDIUM = "medium"
    SEMIBOLD = "semibold"
    BOLD = "bold"
    EXTRABOLD = "extrabold"


class TypographyColor(StrEnum):
    PRIMARY = "primary"
    SECONDARY = "secondary"
    ACCENT = "accent"
    MUTED = "muted"
    DISABLED = "disabled"
    WHITE = "white"
    BLACK = "black"
    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"
    INFO = "info"
    AUTO = "auto"


class TypographyAlignment(StrEnum):
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"
    JUSTIFY = "justify"


class TypographyOverflow(StrEnum):
    NORMAL = "normal"
    TRUNCATE = "truncate"
    CLAMP = "clamp"


class TypographyElement(StrEnum):
    AUTO = "auto"
    H1 = "h1"
    H2 = "h2"
    H3 = "h3"
    H4 = "h4"
    H5 = "h5"
    H6 = "h6"
    P = "p"
    SPAN = "span"
    DIV = "div"
    CODE = "code"


# =============================================================================
# Class tables
# =============================================================================

# Fragments a hierarchy always contributes.
HIERARCHY_BASE: dict[TypographyHierarchy, str] = {
    TypographyHierarchy.TITLE: "tracking-tight",
    TypographyHierarchy.HEADING: "tracking-tight",
    TypographyHierarchy.SUBHEADING: "tracking-tight",
    TypographyHierarchy.H4: "tracking-tight",
    TypographyHierarchy.BODY: "",
    TypographyHierarchy.BODY_LARGE: "",
    TypographyHierarchy.BODY_SMALL: "",
    TypographyHierarchy.CAPTION: "",
    TypographyHierarchy.OVERLINE: "uppercase tracking-wider",
    TypographyHierarchy.CODE: "font-mono bg-gray-100 px-1 py-0.5 rounded",
}

HIERARCHY_SIZE: dict[TypographyHierarchy, TypographySize] = {
    TypographyHierarchy.TITLE: TypographySize.XL4,
    TypographyHierarchy.HEADING: TypographySize.XL3,
    TypographyHierarchy.SUBHEADING: TypographySize.XL2,
    TypographyHierarchy.H4: TypographySize.XL,
    TypographyHierarchy.BODY: TypographySize.MD,
    TypographyHierarchy.BODY_LARGE: TypographySize.LG,
    TypographyHierarchy.BODY_SMALL: TypographySize.SM,
    TypographyHierarchy.CAPTION: TypographySize.SM,
    TypographyHierarchy.OVERLINE: TypographySize.XS,
    TypographyHierarchy.CODE: TypographySize.SM,
}

# Code has no default weight.
HIERARCHY_WEIGHT: dict[TypographyHierarchy, TypographyWeight] = {
    TypographyHierarchy.TITLE: TypographyWeight.BOLD,
    TypographyHierarchy.HEADING: TypographyWeight.BOLD,
    TypographyHierarchy.SUBHEADING: TypographyWeight.BOLD,
    TypographyHierarchy.H4: TypographyWeight.BOLD,
    TypographyHierarchy.BODY: TypographyWeight.NORMAL,
    TypographyHierarchy.BODY_LARGE: TypographyWeight.NORMAL,
    TypographyHierarchy.BODY_SMALL: TypographyWeight.NORMAL,
    TypographyHierarchy.CAPTION: TypographyWeight.MEDIUM,
    TypographyHierarchy.OVERLINE: TypographyWeight.MEDIUM,
}

SIZE_CLASSES: dict[TypographySize, str] = {
    TypographySize.XS: "text-xs",
    TypographySize.SM: "text-sm",
    TypographySize.MD: "text-base",
    TypographySize.LG: "text-lg",
    TypographySize.XL: "text-xl",
    TypographySize.XL2: "text-2xl",
    TypographySize.XL3: "text-3xl",
    TypographySize.XL4: "text-4xl",
}

WEIGHT_CLASSES: dict[TypographyWeight, str] = {
    weight: f"font-{weight.value}" for weight in TypographyWeight
}

ALIGNMENT_CLASSES: dict[TypographyAlignment, str] = {
    alignment: f"text-{alignment.value}" for alignment in TypographyAlignment
}

COLOR_TOKENS: dict[TypographyColor, Color] = {
    TypographyColor.PRIMARY: Color.PRIMARY,
    TypographyColor.SECONDARY: Color.SECONDARY,
    TypographyColor.ACCENT: Color.ACCENT,
    TypographyColor.MUTED: Color.TEXT_SECONDARY,
    TypographyColor.DISABLED: Color.INTERACTIVE_DISABLED,
    TypographyColor.WHITE: Color.TEXT_INVERSE,
    TypographyColor.BLACK: Color.FOREGROUND,
    TypographyColor.SUCCESS: Color.SUCCESS,
    TypographyColor.WARNING: Color.WARNING,
    TypographyColor.ERROR: Color.ERROR,
    TypographyColor.INFO: Color.INFO,
}

AUTO_COLORS: dict[TypographyHierarchy, Color] = {
    TypographyHierarchy.CAPTION: Color.TEXT_SECONDARY,
    TypographyHierarchy.OVERLINE: Color.TEXT_TERTIARY,
}

AUTO_ELEMENTS: dict[TypographyHierarchy, str] = {
    TypographyHierarchy.TITLE: "h1",
    TypographyHierarchy.HEADING: "h2",
    TypographyHierarchy.SUBHEADING: "h3",
    TypographyHierarchy.H4: "h4",
    TypographyHierarchy.CAPTION: "span",
    TypographyHierarchy.OVERLINE: "span",
    TypographyHierarchy.CODE: "code",
}


# =============================================================================
# String parsing
# =============================================================================

_HIERARCHY_CHOICES = enum_choices(TypographyHierarchy)
_SIZE_CHOICES = enum_choices(TypographySize, base=TypographySize.MD)
_WEIGHT_CHOICES = enum_choices(TypographyWeight)
_COLOR_CHOICES = enum_choices(TypographyColor)
_ALIGNMENT_CHOICES = enum_choices(TypographyAlignment)
_ELEMENT_CHOICES = enum_choices(TypographyElement)


def parse_hierarchy(value: str) -> TypographyHierarchy | None:
    return parse_choice(value, _HIERARCHY_CHOICES)


def parse_typography_size(value: str) -> TypographySize | None:
    return parse_choice(value, _SIZE_CHOICES)


def parse_weight(value: str) -> TypographyWeight | None:
    return parse_choice(value, _WEIGHT_CHOICES)


def parse_typography_color(value: str) -> TypographyColor | None:
    return parse_choice(value, _COLOR_CHOICES)


def parse_alignment(value: str) -> TypographyAlignment | None:
    return parse_choice(value, _ALIGNMENT_CHOICES)


def parse_element(value: str) -> TypographyElement | None:
    return parse_choice(value, _ELEMENT_CHOICES)


def line_clamp_style(lines: int) -> str:
    return (
        f"display: -webkit-box; -webkit-line-clamp: {lines}; "
        "-webkit-box-orient: vertical; overflow: hidden;"
    )


# =============================================================================
# Pattern
# =============================================================================


@dataclass(frozen=True)
class TypographyPattern(Fluent):
    """
    Semantic text styling.

    Example:
        typography_pattern(theme).hierarchy(TypographyHierarchy.TITLE).classes()
    """

    theme: ColorProvider
    _hierarchy: TypographyHierarchy = TypographyHierarchy.BODY
    _size: TypographySize | None = None
    _weight: TypographyWeight | None = None
    _color: TypographyColor = TypographyColor.AUTO
    _alignment: TypographyAlignment | None = None
    _overflow: TypographyOverflow = TypographyOverflow.NORMAL
    _clamp_lines: int | None = None
    _element: TypographyElement = TypographyElement.AUTO
    _custom: tuple[str, ...] = ()

    # -------------------------------------------------------------------------
    # Typed setters
    # -------------------------------------------------------------------------

    def hierarchy(self, hierarchy: TypographyHierarchy) -> TypographyPattern:
        return self._with(_hierarchy=hierarchy)

    def size(self, size: TypographySize) -> TypographyPattern:
        """Override the hierarchy's default size."""
        return self._with(_size=size)

    def weight(self, weight: TypographyWeight) -> TypographyPattern:
        """Override the hierarchy's default weight."""
        return self._with(_weight=weight)

    def color(self, color: TypographyColor) -> TypographyPattern:
        return self._with(_color=color)

    def alignment(self, alignment: TypographyAlignment) -> TypographyPattern:
        return self._with(_alignment=alignment)

    def truncate(self) -> TypographyPattern:
        return self._with(_overflow=TypographyOverflow.TRUNCATE, _clamp_lines=None)

    def clamp_lines(self, lines: int) -> TypographyPattern:
        return self._with(_overflow=TypographyOverflow.CLAMP, _clamp_lines=max(1, lines))

    def no_overflow(self) -> TypographyPattern:
        return self._with(_overflow=TypographyOverflow.NORMAL, _clamp_lines=None)

    def element(self, element: TypographyElement) -> TypographyPattern:
        return self._with(_element=element)

    def custom(self, classes: str | Iterable[str]) -> TypographyPattern:
        return self._with(_custom=self._custom + split_custom(classes))

    # -------------------------------------------------------------------------
    # String setters
    # -------------------------------------------------------------------------

    def hierarchy_str(self, value: str) -> TypographyPattern:
        parsed = parse_hierarchy(value)
        return self if parsed is None else self.hierarchy(parsed)

    def size_str(self, value: str) -> TypographyPattern:
        parsed = parse_typography_size(value)
        return self if parsed is None else self.size(parsed)

    def weight_str(self, value: str) -> TypographyPattern:
        parsed = parse_weight(value)
        return self if parsed is None else self.weight(parsed)

    def color_str(self, value: str) -> TypographyPattern:
        parsed = parse_typography_color(value)
        return self if parsed is None else self.color(parsed)

    def alignment_str(self, value: str) -> TypographyPattern:
        parsed = parse_alignment(value)
        return self if parsed is None else self.alignment(parsed)

    def element_str(self, value: str) -> TypographyPattern:
        parsed = parse_element(value)
        return self if parsed is None else self.element(parsed)

    # -------------------------------------------------------------------------
    # Rendering
    # -------------------------------------------------------------------------

    def _hierarchy_classes(self) -> list[str]:
        fragments = [HIERARCHY_BASE[self._hierarchy]]
        if self._size is None:
            fragments.append(SIZE_CLASSES[HIERARCHY_SIZE[self._hierarchy]])
        default_weight = HIERARCHY_WEIGHT.get(self._hierarchy)
        if self._weight is None and default_weight is not None:
            fragments.append(WEIGHT_CLASSES[default_weight])
        return fragments

    def _color_token(self) -> Color:
        if self._color is TypographyColor.AUTO:
            return AUTO_COLORS.get(self._hierarchy, Color.TEXT_PRIMARY)
        return COLOR_TOKENS[self._color]

    def classes(self) -> str:
        fragments = ["leading-relaxed", *self._hierarchy_classes()]
        if self._size is not None:
            fragments.append(SIZE_CLASSES[self._size])
        if self._weight is not None:
            fragments.append(WEIGHT_CLASSES[self._weight])
        fragments.append(self.theme.text_class(self._color_token()))
        if self._alignment is not None:
            fragments.append(ALIGNMENT_CLASSES[self._alignment])
        if self._overflow is TypographyOverflow.TRUNCATE:
            fragments.append("truncate")
        fragments.extend(self._custom)
        return canonicalize(fragments)

    def get_element(self) -> str:
        """HTML tag for this text; ``AUTO`` follows the hierarchy."""
        if self._element is TypographyElement.AUTO:
            return AUTO_ELEMENTS.get(self._hierarchy, "p")
        return self._element.value

    def clamp_style(self) -> str:
        """Inline style for line clamping (no utility class exists for it)."""
        if self._overflow is not TypographyOverflow.CLAMP or self._clamp_lines is None:
            return ""
        return line_clamp_style(self._clamp_lines)


# =============================================================================
# Constructors
# =============================================================================


def typography_pattern(theme: ColorProvider) -> TypographyPattern:
    return TypographyPattern(theme)


def title_typography(theme: ColorProvider) -> TypographyPattern:
    return TypographyPattern(theme).hierarchy(TypographyHierarchy.TITLE)


def heading_typography(theme: ColorProvider) -> TypographyPattern:
    return TypographyPattern(theme).hierarchy(TypographyHierarchy.HEADING)


def body_typography(theme: ColorProvider) -> TypographyPattern:
    return TypographyPattern(theme).hierarchy(TypographyHierarchy.BODY)


def caption_typography(theme: ColorProvider) -> TypographyPattern:
    return TypographyPattern(theme).hierarchy(TypographyHierarchy.CAPTION)


def code_typography(theme: ColorProvider) -> TypographyPattern:
    return TypographyPattern(theme).hierarchy(TypographyHierarchy.CODE)
