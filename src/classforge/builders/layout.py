"""Layout styling builder for card sections and other structural blocks."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from classforge.colors import ColorProvider
from classforge.fluent import Fluent, split_custom
from classforge.patterns.layout import (
    LayoutAlignment,
    LayoutDirection,
    LayoutDivider,
    LayoutSpacing,
    parse_direction,
    parse_divider,
    parse_layout_alignment,
    parse_layout_spacing,
    section_classes,
)
from classforge.tokens import Size, parse_size

SIZE_SPACING: dict[Size, LayoutSpacing] = {
    Size.XSMALL: LayoutSpacing.XS,
    Size.SMALL: LayoutSpacing.SM,
    Size.MEDIUM: LayoutSpacing.MD,
    Size.LARGE: LayoutSpacing.LG,
    Size.XLARGE: LayoutSpacing.XL,
}


@dataclass(frozen=True)
class LayoutStyles(Fluent):
    theme: ColorProvider
    _divider: LayoutDivider = LayoutDivider.NONE
    _spacing: LayoutSpacing = LayoutSpacing.MD
    _alignment: LayoutAlignment | None = None
    _direction: LayoutDirection | None = None
    _custom: tuple[str, ...] = ()

    def divider(self, divider: LayoutDivider) -> LayoutStyles:
        return self._with(_divider=divider)

    def spacing(self, spacing: LayoutSpacing) -> LayoutStyles:
        return self._with(_spacing=spacing)

    def alignment(self, alignment: LayoutAlignment) -> LayoutStyles:
        return self._with(_alignment=alignment)

    def direction(self, direction: LayoutDirection) -> LayoutStyles:
        return self._with(_direction=direction)

    def divider_str(self, value: str) -> LayoutStyles:
        parsed = parse_divider(value)
        return self if parsed is None else self.divider(parsed)

    def spacing_str(self, value: str) -> LayoutStyles:
        parsed = parse_layout_spacing(value)
        return self if parsed is None else self.spacing(parsed)

    def alignment_str(self, value: str) -> LayoutStyles:
        parsed = parse_layout_alignment(value)
        return self if parsed is None else self.alignment(parsed)

    def direction_str(self, value: str) -> LayoutStyles:
        parsed = parse_direction(value)
        return self if parsed is None else self.direction(parsed)

    def size_str(self, value: str) -> LayoutStyles:
        parsed = parse_size(value)
        return self if parsed is None else self.spacing(SIZE_SPACING[parsed])

    def divider_none(self) -> LayoutStyles:
        return self.divider(LayoutDivider.NONE)

    def divider_top(self) -> LayoutStyles:
        return self.divider(LayoutDivider.TOP)

    def divider_bottom(self) -> LayoutStyles:
        return self.divider(LayoutDivider.BOTTOM)

    def divider_left(self) -> LayoutStyles:
        return self.divider(LayoutDivider.LEFT)

    def divider_right(self) -> LayoutStyles:
        return self.divider(LayoutDivider.RIGHT)

    def spacing_none(self) -> LayoutStyles:
        return self.spacing(LayoutSpacing.NONE)

    def spacing_xs(self) -> LayoutStyles:
        return self.spacing(LayoutSpacing.XS)

    def spacing_sm(self) -> LayoutStyles:
        return self.spacing(LayoutSpacing.SM)

    def spacing_md(self) -> LayoutStyles:
        return self.spacing(LayoutSpacing.MD)

    def spacing_lg(self) -> LayoutStyles:
        return self.spacing(LayoutSpacing.LG)

    def spacing_xl(self) -> LayoutStyles:
        return self.spacing(LayoutSpacing.XL)

    def spacing_xl2(self) -> LayoutStyles:
        return self.spacing(LayoutSpacing.XL2)

    def direction_vertical(self) -> LayoutStyles:
        return self.direction(LayoutDirection.VERTICAL)

    def direction_horizontal(self) -> LayoutStyles:
        return self.direction(LayoutDirection.HORIZONTAL)

    def alignment_start(self) -> LayoutStyles:
        return self.alignment(LayoutAlignment.START)

    def alignment_center(self) -> LayoutStyles:
        return self.alignment(LayoutAlignment.CENTER)

    def alignment_end(self) -> LayoutStyles:
        return self.alignment(LayoutAlignment.END)

    def alignment_between(self) -> LayoutStyles:
        return self.alignment(LayoutAlignment.BETWEEN)

    def alignment_around(self) -> LayoutStyles:
        return self.alignment(LayoutAlignment.AROUND)

    def alignment_evenly(self) -> LayoutStyles:
        return self.alignment(LayoutAlignment.EVENLY)

    def custom(self, classes: str | Iterable[str]) -> LayoutStyles:
        return self._with(_custom=self._custom + split_custom(classes))

    def custom_classes(self, classes: str) -> LayoutStyles:
        return self._with(_custom=self._custom + tuple(classes.split()))

    def classes(self) -> str:
        return section_classes(
            self.theme, self._divider, self._spacing, self._direction, self._alignment, self._custom
        )

    build = classes


def layout_styles(theme: ColorProvider) -> LayoutStyles:
    return LayoutStyles(theme)


def card_header_styles(theme: ColorProvider) -> LayoutStyles:
    return layout_styles(theme).divider_bottom().spacing_md()


def card_content_styles(theme: ColorProvider) -> LayoutStyles:
    return layout_styles(theme).spacing_md().custom("space-y-4")


def card_footer_styles(theme: ColorProvider) -> LayoutStyles:
    return (
        layout_styles(theme)
        .divider_top()
        .spacing_md()
        .direction_horizontal()
        .alignment_between()
    )


def layout_classes_from_strings(
    theme: ColorProvider,
    divider: str = "none",
    spacing: str = "md",
    direction: str | None = None,
    alignment: str | None = None,
) -> str:
    builder = layout_styles(theme).divider_str(divider).spacing_str(spacing)
    if direction is not None:
        builder = builder.direction_str(direction)
    if alignment is not None:
        builder = builder.alignment_str(alignment)
    return builder.classes()
