"""
Interactive builders with pseudo-class state sub-builders.

Entering a state (``.hover()``, ``.focus()``, ``.active()``,
``.disabled()``) returns a state-scoped builder whose methods add
fragments to that state's bucket. Buckets render in a fixed order
(base, hover, focus, active, disabled), each non-empty state as a single
``state:(...)`` group, so the order of the chained calls never changes
the output.

Example::

    interactive_input(theme).standard_style() \\
        .hover().border_primary().shadow_md() \\
        .focus().ring_primary().outline_none() \\
        .build()
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Self

from classforge.builders.button import ButtonVariant
from classforge.canonical import canonicalize, split_classes, variant_group
from classforge.colors import Color, ColorProvider
from classforge.fluent import Fluent

STATE_ORDER = ("hover", "focus", "active", "disabled")

BUTTON_BASE = "inline-flex items-center justify-center px-4 py-2 font-medium rounded-md transition-colors"
INPUT_BASE = "w-full px-4 py-3 rounded-md transition-colors"


@dataclass(frozen=True)
class InteractiveBase(Fluent):
    """Per-state class buckets. ``_preset`` is replaced by presets, ``_base`` accumulates."""

    theme: ColorProvider
    _preset: tuple[str, ...] = ()
    _base: tuple[str, ...] = ()
    _hover: tuple[str, ...] = ()
    _focus: tuple[str, ...] = ()
    _active: tuple[str, ...] = ()
    _disabled: tuple[str, ...] = ()

    def base(self, classes: str) -> InteractiveBase:
        """Add classes that always apply."""
        return self._with(_base=self._base + tuple(split_classes(classes)))

    def preset(self, classes: str) -> InteractiveBase:
        return self._with(_preset=tuple(split_classes(classes)))

    def add(self, state: str, *tokens: str) -> InteractiveBase:
        field = f"_{state}"
        return self._with(**{field: getattr(self, field) + tokens})

    def hover(self) -> HoverBuilder:
        return HoverBuilder(self)

    def focus(self) -> FocusBuilder:
        return FocusBuilder(self)

    def active(self) -> ActiveBuilder:
        return ActiveBuilder(self)

    def disabled(self) -> DisabledBuilder:
        return DisabledBuilder(self)

    def build(self) -> str:
        fragments = [*self._preset, *self._base]
        for state in STATE_ORDER:
            fragments.append(variant_group(state, getattr(self, f"_{state}")))
        return canonicalize(fragments)


@dataclass(frozen=True)
class _StateBuilder:
    base: InteractiveBase

    state: ClassVar[str]

    def _add(self, *tokens: str) -> Self:
        return type(self)(self.base.add(self.state, *tokens))

    def classes(self, classes: str) -> Self:
        """Add arbitrary classes to this state."""
        return self._add(*split_classes(classes))

    def hover(self) -> HoverBuilder:
        return HoverBuilder(self.base)

    def focus(self) -> FocusBuilder:
        return FocusBuilder(self.base)

    def active(self) -> ActiveBuilder:
        return ActiveBuilder(self.base)

    def disabled(self) -> DisabledBuilder:
        return DisabledBuilder(self.base)

    def build(self) -> str:
        return self.base.build()


@dataclass(frozen=True)
class HoverBuilder(_StateBuilder):
    state: ClassVar[str] = "hover"

    def border_primary(self) -> HoverBuilder:
        return self._add(self.base.theme.border_class(Color.PRIMARY))

    def bg_primary(self) -> HoverBuilder:
        return self._add(self.base.theme.bg_class(Color.PRIMARY))

    def darken(self) -> HoverBuilder:
        return self._add(self.base.theme.bg_class(Color.INTERACTIVE_HOVER))

    def scale_105(self) -> HoverBuilder:
        return self._add("scale-105")

    def shadow_md(self) -> HoverBuilder:
        return self._add("shadow-md")

    def shadow_lg(self) -> HoverBuilder:
        return self._add("shadow-lg")


@dataclass(frozen=True)
class FocusBuilder(_StateBuilder):
    state: ClassVar[str] = "focus"

    def border_primary(self) -> FocusBuilder:
        return self._add(self.base.theme.border_class(Color.PRIMARY))

    def outline_none(self) -> FocusBuilder:
        return self._add("outline-none")

    def ring_primary(self) -> FocusBuilder:
        return self._add("ring-2", "ring-offset-2", self.base.theme.ring_color_class(Color.PRIMARY))


@dataclass(frozen=True)
class ActiveBuilder(_StateBuilder):
    state: ClassVar[str] = "active"

    def scale_95(self) -> ActiveBuilder:
        return self._add("scale-95")


@dataclass(frozen=True)
class DisabledBuilder(_StateBuilder):
    state: ClassVar[str] = "disabled"

    def opacity_50(self) -> DisabledBuilder:
        return self._add("opacity-50")

    def cursor_not_allowed(self) -> DisabledBuilder:
        return self._add("cursor-not-allowed")


@dataclass(frozen=True)
class InputBuilder:
    base: InteractiveBase

    def base_style(self) -> InputBuilder:
        return InputBuilder(self.base.preset(f"{INPUT_BASE} border"))

    def standard_style(self) -> InputBuilder:
        theme = self.base.theme
        return InputBuilder(
            self.base.preset(
                f"{INPUT_BASE} {theme.border_class(Color.BORDER)} {theme.bg_class(Color.SURFACE)}"
            )
        )

    def base_classes(self, classes: str) -> InputBuilder:
        return InputBuilder(self.base.base(classes))

    def hover(self) -> HoverBuilder:
        return self.base.hover()

    def focus(self) -> FocusBuilder:
        return self.base.focus()

    def disabled(self) -> DisabledBuilder:
        return self.base.disabled()

    def build(self) -> str:
        return self.base.build()


@dataclass(frozen=True)
class ButtonBuilder:
    base: InteractiveBase
    _variant: ButtonVariant = ButtonVariant.PRIMARY

    @property
    def current_variant(self) -> ButtonVariant:
        return self._variant

    def _preset(self, variant: ButtonVariant, classes: str) -> ButtonBuilder:
        return ButtonBuilder(self.base.preset(f"{BUTTON_BASE} {classes}"), variant)

    def primary(self) -> ButtonBuilder:
        theme = self.base.theme
        return self._preset(
            ButtonVariant.PRIMARY,
            f"{theme.bg_class(Color.PRIMARY)} {theme.text_class(Color.TEXT_INVERSE)}",
        )

    def secondary(self) -> ButtonBuilder:
        theme = self.base.theme
        return self._preset(
            ButtonVariant.SECONDARY,
            f"border {theme.bg_class(Color.SURFACE)} {theme.text_class(Color.TEXT_PRIMARY)} "
            f"{theme.border_class(Color.BORDER)}",
        )

    def ghost(self) -> ButtonBuilder:
        return self._preset(
            ButtonVariant.GHOST,
            f"bg-transparent {self.base.theme.text_class(Color.TEXT_PRIMARY)}",
        )

    def base_classes(self, classes: str) -> ButtonBuilder:
        return ButtonBuilder(self.base.base(classes), self._variant)

    def hover(self) -> HoverBuilder:
        return self.base.hover()

    def focus(self) -> FocusBuilder:
        return self.base.focus()

    def active(self) -> ActiveBuilder:
        return self.base.active()

    def disabled(self) -> DisabledBuilder:
        return self.base.disabled()

    def build(self) -> str:
        return self.base.build()


def interactive_element(theme: ColorProvider) -> InteractiveBase:
    return InteractiveBase(theme)


def interactive_input(theme: ColorProvider) -> InputBuilder:
    return InputBuilder(InteractiveBase(theme))


def interactive_button(theme: ColorProvider) -> ButtonBuilder:
    return ButtonBuilder(InteractiveBase(theme))
