"""
Layout patterns for structural pieces such as card headers, bodies and
footers.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum

from classforge.canonical import canonicalize
from classforge.colors import Color, ColorProvider
from classforge.fluent import Fluent, enum_choices, parse_choice, split_custom


class LayoutSpacing(StrEnum):
    NONE = "none"
    XS = "xs"
    SM = "sm"
    MD = "md"
    LG = "lg"
    XL = "xl"
    XL2 = "2xl"


class LayoutDivider(StrEnum):
    NONE = "none"
    TOP = "top"
    BOTTOM = "bottom"
    LEFT = "left"
    RIGHT = "right"


class LayoutAlignment(StrEnum):
    START = "start"
    CENTER = "center"
    END = "end"
    BETWEEN = "between"
    AROUND = "around"
    EVENLY = "evenly"


class LayoutDirection(StrEnum):
    VERTICAL = "vertical"
    HORIZONTAL = "horizontal"


DIVIDER_SIDES: dict[LayoutDivider, str] = {
    LayoutDivider.TOP: "border-t",
    LayoutDivider.BOTTOM: "border-b",
    LayoutDivider.LEFT: "border-l",
    LayoutDivider.RIGHT: "border-r",
}

SPACING_CLASSES: dict[LayoutSpacing, str] = {
    LayoutSpacing.NONE: "",
    LayoutSpacing.XS: "p-1",
    LayoutSpacing.SM: "p-2",
    LayoutSpacing.MD: "p-4",
    LayoutSpacing.LG: "p-6",
    LayoutSpacing.XL: "p-8",
    LayoutSpacing.XL2: "p-12",
}

DIRECTION_CLASSES: dict[LayoutDirection, str] = {
    LayoutDirection.VERTICAL: "flex flex-col",
    LayoutDirection.HORIZONTAL: "flex flex-row",
}

ALIGNMENT_CLASSES: dict[LayoutAlignment, str] = {
    LayoutAlignment.START: "items-start justify-start",
    LayoutAlignment.CENTER: "items-center justify-center",
    LayoutAlignment.END: "items-end justify-end",
    LayoutAlignment.BETWEEN: "items-center justify-between",
    LayoutAlignment.AROUND: "items-center justify-around",
    LayoutAlignment.EVENLY: "items-center justify-evenly",
}

_SPACING_CHOICES = enum_choices(LayoutSpacing, xl2=LayoutSpacing.XL2)
_DIVIDER_CHOICES = enum_choices(LayoutDivider)
_ALIGNMENT_CHOICES = enum_choices(LayoutAlignment)
_DIRECTION_CHOICES = enum_choices(
    LayoutDirection, column=LayoutDirection.VERTICAL, row=LayoutDirection.HORIZONTAL
)


def parse_layout_spacing(value: str) -> LayoutSpacing | None:
    return parse_choice(value, _SPACING_CHOICES)


def parse_divider(value: str) -> LayoutDivider | None:
    return parse_choice(value, _DIVIDER_CHOICES)


def parse_layout_alignment(value: str) -> LayoutAlignment | None:
    return parse_choice(value, _ALIGNMENT_CHOICES)


def parse_direction(value: str) -> LayoutDirection | None:
    return parse_choice(value, _DIRECTION_CHOICES)


def section_classes(
    theme: ColorProvider,
    divider: LayoutDivider,
    spacing: LayoutSpacing,
    direction: LayoutDirection | None,
    alignment: LayoutAlignment | None,
    custom: Iterable[str] = (),
) -> str:
    """Render a section from its parts. Shared with the layout builder."""
    fragments: list[str] = []
    side = DIVIDER_SIDES.get(divider)
    if side:
        fragments.append(f"{side} {theme.border_class(Color.BORDER)}")
    fragments.append(SPACING_CLASSES[spacing])
    if direction is not None:
        fragments.append(DIRECTION_CLASSES[direction])
    if alignment is not None:
        fragments.append(ALIGNMENT_CLASSES[alignment])
    fragments.extend(custom)
    return canonicalize(fragments)


@dataclass(frozen=True)
class CardSectionLayout(Fluent):
    theme: ColorProvider
    _divider: LayoutDivider = LayoutDivider.NONE
    _spacing: LayoutSpacing = LayoutSpacing.MD
    _alignment: LayoutAlignment | None = None
    _direction: LayoutDirection | None = None
    _custom: tuple[str, ...] = ()

    def divider(self, divider: LayoutDivider) -> CardSectionLayout:
        return self._with(_divider=divider)

    def spacing(self, spacing: LayoutSpacing) -> CardSectionLayout:
        return self._with(_spacing=spacing)

    def alignment(self, alignment: LayoutAlignment) -> CardSectionLayout:
        return self._with(_alignment=alignment)

    def direction(self, direction: LayoutDirection) -> CardSectionLayout:
        return self._with(_direction=direction)

    def custom(self, classes: str | Iterable[str]) -> CardSectionLayout:
        return self._with(_custom=self._custom + split_custom(classes))

    def divider_str(self, value: str) -> CardSectionLayout:
        parsed = parse_divider(value)
        return self if parsed is None else self.divider(parsed)

    def spacing_str(self, value: str) -> CardSectionLayout:
        parsed = parse_layout_spacing(value)
        return self if parsed is None else self.spacing(parsed)

    def alignment_str(self, value: str) -> CardSectionLayout:
        parsed = parse_layout_alignment(value)
        return self if parsed is None else self.alignment(parsed)

    def direction_str(self, value: str) -> CardSectionLayout:
        parsed = parse_direction(value)
        return self if parsed is None else self.direction(parsed)

    def classes(self) -> str:
        return section_classes(
            self.theme, self._divider, self._spacing, self._direction, self._alignment, self._custom
        )


def card_header_layout(theme: ColorProvider) -> CardSectionLayout:
    return CardSectionLayout(theme).divider(LayoutDivider.BOTTOM).spacing(LayoutSpacing.MD)


def card_content_layout(theme: ColorProvider) -> CardSectionLayout:
    return CardSectionLayout(theme).spacing(LayoutSpacing.MD).custom("space-y-4")


def card_footer_layout(theme: ColorProvider) -> CardSectionLayout:
    return (
        CardSectionLayout(theme)
        .divider(LayoutDivider.TOP)
        .spacing(LayoutSpacing.MD)
        .direction(LayoutDirection.HORIZONTAL)
        .alignment(LayoutAlignment.BETWEEN)
    )


@dataclass(frozen=True)
class LayoutBuilder:
    """Entry point handing out card section layouts for one theme."""

    theme: ColorProvider

    def card_section(self) -> CardSectionLayout:
        return CardSectionLayout(self.theme)

    def card_header(self) -> CardSectionLayout:
        return card_header_layout(self.theme)

    def card_content(self) -> CardSectionLayout:
        return card_content_layout(self.theme)

    def card_footer(self) -> CardSectionLayout:
        return card_footer_layout(self.theme)


def layout(theme: ColorProvider) -> LayoutBuilder:
    return LayoutBuilder(theme)
