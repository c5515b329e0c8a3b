"""
Text styling builder.

A thin CSS-facing wrapper over TypographyPattern with short setter names
(``title()``, ``bold()``, ``center()``) for template code.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from classforge.canonical import canonicalize
from classforge.colors import ColorProvider
from classforge.fluent import Fluent, split_custom
from classforge.patterns.typography import (
    AUTO_ELEMENTS,
    TypographyAlignment,
    TypographyColor,
    TypographyHierarchy,
    TypographyPattern,
    TypographySize,
    TypographyWeight,
    line_clamp_style,
    parse_hierarchy,
)


@dataclass(frozen=True)
class TextStyles(Fluent):
    pattern: TypographyPattern
    _custom: tuple[str, ...] = ()

    def _pattern(self, pattern: TypographyPattern) -> TextStyles:
        return self._with(pattern=pattern)

    # Typed setters

    def hierarchy(self, hierarchy: TypographyHierarchy) -> TextStyles:
        return self._pattern(self.pattern.hierarchy(hierarchy))

    def size(self, size: TypographySize) -> TextStyles:
        return self._pattern(self.pattern.size(size))

    def weight(self, weight: TypographyWeight) -> TextStyles:
        return self._pattern(self.pattern.weight(weight))

    def color(self, color: TypographyColor) -> TextStyles:
        return self._pattern(self.pattern.color(color))

    def alignment(self, alignment: TypographyAlignment) -> TextStyles:
        return self._pattern(self.pattern.alignment(alignment))

    def truncate(self) -> TextStyles:
        return self._pattern(self.pattern.truncate())

    def clamp_lines(self, lines: int) -> TextStyles:
        return self._pattern(self.pattern.clamp_lines(lines))

    # String setters

    def hierarchy_str(self, value: str) -> TextStyles:
        return self._pattern(self.pattern.hierarchy_str(value))

    def size_str(self, value: str) -> TextStyles:
        return self._pattern(self.pattern.size_str(value))

    def weight_str(self, value: str) -> TextStyles:
        return self._pattern(self.pattern.weight_str(value))

    def color_str(self, value: str) -> TextStyles:
        return self._pattern(self.pattern.color_str(value))

    def alignment_str(self, value: str) -> TextStyles:
        return self._pattern(self.pattern.alignment_str(value))

    # Hierarchy shortcuts

    def title(self) -> TextStyles:
        return self.hierarchy(TypographyHierarchy.TITLE)

    def heading(self) -> TextStyles:
        return self.hierarchy(TypographyHierarchy.HEADING)

    def subheading(self) -> TextStyles:
        return self.hierarchy(TypographyHierarchy.SUBHEADING)

    def h4(self) -> TextStyles:
        return self.hierarchy(TypographyHierarchy.H4)

    def body(self) -> TextStyles:
        return self.hierarchy(TypographyHierarchy.BODY)

    def body_large(self) -> TextStyles:
        return self.hierarchy(TypographyHierarchy.BODY_LARGE)

    def body_small(self) -> TextStyles:
        return self.hierarchy(TypographyHierarchy.BODY_SMALL)

    def caption(self) -> TextStyles:
        return self.hierarchy(TypographyHierarchy.CAPTION)

    def overline(self) -> TextStyles:
        return self.hierarchy(TypographyHierarchy.OVERLINE)

    def code(self) -> TextStyles:
        return self.hierarchy(TypographyHierarchy.CODE)

    # Size shortcuts

    def extra_small(self) -> TextStyles:
        return self.size(TypographySize.XS)

    def small(self) -> TextStyles:
        return self.size(TypographySize.SM)

    def medium(self) -> TextStyles:
        return self.size(TypographySize.MD)

    def large(self) -> TextStyles:
        return self.size(TypographySize.LG)

    def extra_large(self) -> TextStyles:
        return self.size(TypographySize.XL)

    # Weight shortcuts

    def light(self) -> TextStyles:
        return self.weight(TypographyWeight.LIGHT)

    def normal(self) -> TextStyles:
        return self.weight(TypographyWeight.NORMAL)

    def medium_weight(self) -> TextStyles:
        return self.weight(TypographyWeight.MEDIUM)

    def semibold(self) -> TextStyles:
        return self.weight(TypographyWeight.SEMIBOLD)

    def bold(self) -> TextStyles:
        return self.weight(TypographyWeight.BOLD)

    # Color shortcuts

    def primary(self) -> TextStyles:
        return self.color(TypographyColor.PRIMARY)

    def secondary(self) -> TextStyles:
        return self.color(TypographyColor.SECONDARY)

    def accent(self) -> TextStyles:
        return self.color(TypographyColor.ACCENT)

    def muted(self) -> TextStyles:
        return self.color(TypographyColor.MUTED)

    def disabled(self) -> TextStyles:
        return self.color(TypographyColor.DISABLED)

    def white(self) -> TextStyles:
        return self.color(TypographyColor.WHITE)

    def success(self) -> TextStyles:
        return self.color(TypographyColor.SUCCESS)

    def warning(self) -> TextStyles:
        return self.color(TypographyColor.WARNING)

    def error(self) -> TextStyles:
        return self.color(TypographyColor.ERROR)

    # Alignment shortcuts

    def left(self) -> TextStyles:
        return self.alignment(TypographyAlignment.LEFT)

    def center(self) -> TextStyles:
        return self.alignment(TypographyAlignment.CENTER)

    def right(self) -> TextStyles:
        return self.alignment(TypographyAlignment.RIGHT)

    def justify(self) -> TextStyles:
        return self.alignment(TypographyAlignment.JUSTIFY)

    def custom(self, classes: str | Iterable[str]) -> TextStyles:
        return self._with(_custom=self._custom + split_custom(classes))

    def custom_classes(self, classes: str) -> TextStyles:
        return self.custom(classes)

    # Rendering

    def classes(self) -> str:
        return canonicalize([self.pattern.classes(), *self._custom])

    build = classes

    def element(self) -> str:
        return self.pattern.get_element()

    def clamp_style(self) -> str:
        return self.pattern.clamp_style()


def text_styles(theme: ColorProvider) -> TextStyles:
    return TextStyles(TypographyPattern(theme))


def text_classes_from_strings(
    theme: ColorProvider,
    hierarchy: str,
    size: str | None = None,
    weight: str | None = None,
    color: str | None = None,
    alignment: str | None = None,
    truncate: bool = False,
    clamp_lines: int | None = None,
    custom_classes: str | None = None,
) -> str:
    builder = text_styles(theme).hierarchy_str(hierarchy)
    if size is not None:
        builder = builder.size_str(size)
    if weight is not None:
        builder = builder.weight_str(weight)
    if color is not None:
        builder = builder.color_str(color)
    if alignment is not None:
        builder = builder.alignment_str(alignment)
    if truncate:
        builder = builder.truncate()
    if clamp_lines is not None:
        builder = builder.clamp_lines(clamp_lines)
    if custom_classes:
        builder = builder.custom(custom_classes)
    return builder.classes()


def text_element_from_hierarchy(hierarchy: str) -> str:
    """HTML tag for a hierarchy name; unknown names render as ``p``."""
    parsed = parse_hierarchy(hierarchy)
    if parsed is None:
        return "p"
    return AUTO_ELEMENTS.get(parsed, "p")


def text_clamp_style(clamp_lines: int | None) -> str:
    return "" if clamp_lines is None else line_clamp_style(clamp_lines)
