"""
Button styling builder.

Assembles button classes directly from variant, size and state, for call
sites that want CSS rather than semantic intent (see
``classforge.patterns.button`` for the semantic version).
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum

from classforge.canonical import canonicalize
from classforge.colors import Color, ColorProvider
from classforge.fluent import Fluent, enum_choices, parse_choice, split_custom
from classforge.tokens import Size, parse_size


class ButtonVariant(StrEnum):
    PRIMARY = "primary"
    SECONDARY = "secondary"
    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"
    GHOST = "ghost"
    LINK = "link"


class ButtonState(StrEnum):
    DEFAULT = "default"
    HOVER = "hover"
    ACTIVE = "active"
    DISABLED = "disabled"
    LOADING = "loading"


BASE_CLASSES = (
    "inline-flex items-center justify-center font-medium transition-colors duration-200 "
    "disabled:opacity-50 disabled:cursor-not-allowed"
)

SIZE_CLASSES: dict[Size, str] = {
    Size.XSMALL: "px-2 py-1 text-xs rounded",
    Size.SMALL: "px-3 py-1.5 text-sm rounded",
    Size.MEDIUM: "px-4 py-2 text-sm rounded-md",
    Size.LARGE: "px-6 py-3 text-base rounded-md",
    Size.XLARGE: "px-8 py-4 text-lg rounded-lg",
}

STATE_CLASSES: dict[ButtonState, str] = {
    ButtonState.DEFAULT: "",
    ButtonState.HOVER: "hover:scale-105",
    ButtonState.ACTIVE: "active:scale-95",
    ButtonState.DISABLED: "opacity-50 cursor-not-allowed",
    ButtonState.LOADING: "cursor-wait",
}

VARIANT_CHOICES = enum_choices(
    ButtonVariant,
    outline=ButtonVariant.SECONDARY,
    danger=ButtonVariant.ERROR,
    water=ButtonVariant.PRIMARY,
)
_STATE_CHOICES = enum_choices(ButtonState)


def parse_variant(value: str) -> ButtonVariant | None:
    return parse_choice(value, VARIANT_CHOICES)


def parse_button_state(value: str) -> ButtonState | None:
    return parse_choice(value, _STATE_CHOICES)


def variant_classes(theme: ColorProvider, variant: ButtonVariant) -> str:
    match variant:
        case ButtonVariant.PRIMARY:
            return (
                f"{theme.bg_class(Color.PRIMARY)} {theme.text_class(Color.TEXT_INVERSE)} "
                f"hover:{theme.bg_class(Color.INTERACTIVE_HOVER)}"
            )
        case ButtonVariant.SECONDARY:
            return (
                f"{theme.bg_class(Color.SURFACE)} {theme.text_class(Color.TEXT_PRIMARY)} "
                f"{theme.border_class(Color.BORDER)} border"
            )
        case ButtonVariant.SUCCESS:
            return f"{theme.bg_class(Color.SUCCESS)} {theme.text_class(Color.TEXT_INVERSE)} hover:bg-green-600"
        case ButtonVariant.WARNING:
            return f"{theme.bg_class(Color.WARNING)} {theme.text_class(Color.TEXT_INVERSE)} hover:bg-amber-600"
        case ButtonVariant.ERROR:
            return f"{theme.bg_class(Color.ERROR)} {theme.text_class(Color.TEXT_INVERSE)} hover:bg-red-600"
        case ButtonVariant.GHOST:
            return (
                f"bg-transparent {theme.text_class(Color.TEXT_PRIMARY)} "
                f"hover:{theme.bg_class(Color.BACKGROUND)}"
            )
        case ButtonVariant.LINK:
            return f"bg-transparent {theme.text_class(Color.PRIMARY)} hover:underline"


@dataclass(frozen=True)
class ButtonStyles(Fluent):
    """
    Chainable button class builder.

    Example:
        button_styles(theme).primary().large().full_width().classes()
    """

    theme: ColorProvider
    _variant: ButtonVariant = ButtonVariant.PRIMARY
    _size: Size = Size.MEDIUM
    _state: ButtonState = ButtonState.DEFAULT
    _full_width: bool = False
    _with_icon: bool = False
    _custom: tuple[str, ...] = ()

    def variant(self, variant: ButtonVariant) -> ButtonStyles:
        return self._with(_variant=variant)

    def size(self, size: Size) -> ButtonStyles:
        return self._with(_size=size)

    def state(self, state: ButtonState) -> ButtonStyles:
        return self._with(_state=state)

    def variant_str(self, value: str) -> ButtonStyles:
        parsed = parse_variant(value)
        return self if parsed is None else self.variant(parsed)

    def size_str(self, value: str) -> ButtonStyles:
        parsed = parse_size(value)
        return self if parsed is None else self.size(parsed)

    def state_str(self, value: str) -> ButtonStyles:
        parsed = parse_button_state(value)
        return self if parsed is None else self.state(parsed)

    def primary(self) -> ButtonStyles:
        return self.variant(ButtonVariant.PRIMARY)

    def secondary(self) -> ButtonStyles:
        return self.variant(ButtonVariant.SECONDARY)

    def success(self) -> ButtonStyles:
        return self.variant(ButtonVariant.SUCCESS)

    def warning(self) -> ButtonStyles:
        return self.variant(ButtonVariant.WARNING)

    def error(self) -> ButtonStyles:
        return self.variant(ButtonVariant.ERROR)

    def ghost(self) -> ButtonStyles:
        return self.variant(ButtonVariant.GHOST)

    def link(self) -> ButtonStyles:
        return self.variant(ButtonVariant.LINK)

    def extra_small(self) -> ButtonStyles:
        return self.size(Size.XSMALL)

    def small(self) -> ButtonStyles:
        return self.size(Size.SMALL)

    def medium(self) -> ButtonStyles:
        return self.size(Size.MEDIUM)

    def large(self) -> ButtonStyles:
        return self.size(Size.LARGE)

    def extra_large(self) -> ButtonStyles:
        return self.size(Size.XLARGE)

    def hover(self) -> ButtonStyles:
        return self.state(ButtonState.HOVER)

    def active(self) -> ButtonStyles:
        return self.state(ButtonState.ACTIVE)

    def disabled(self) -> ButtonStyles:
        return self.state(ButtonState.DISABLED)

    def loading(self) -> ButtonStyles:
        return self.state(ButtonState.LOADING)

    def full_width(self, enabled: bool = True) -> ButtonStyles:
        return self._with(_full_width=enabled)

    def with_icon(self, enabled: bool = True) -> ButtonStyles:
        return self._with(_with_icon=enabled)

    def custom(self, classes: str | Iterable[str]) -> ButtonStyles:
        return self._with(_custom=self._custom + split_custom(classes))

    def custom_classes(self, classes: str) -> ButtonStyles:
        return self._with(_custom=self._custom + tuple(classes.split()))

    def classes(self) -> str:
        fragments = [
            BASE_CLASSES,
            SIZE_CLASSES[self._size],
            variant_classes(self.theme, self._variant),
            STATE_CLASSES[self._state],
        ]
        if self._full_width:
            fragments.append("w-full")
        if self._with_icon:
            fragments.append("space-x-2")
        fragments.extend(self._custom)
        return canonicalize(fragments)

    build = classes


def button_styles(theme: ColorProvider) -> ButtonStyles:
    return ButtonStyles(theme)


def button_classes_from_strings(
    theme: ColorProvider,
    variant: str,
    size: str,
    disabled: bool = False,
    loading: bool = False,
    full_width: bool = False,
) -> str:
    """One-shot classes from plain strings; ``loading`` wins over ``disabled``."""
    builder = button_styles(theme).variant_str(variant).size_str(size)
    if loading:
        builder = builder.loading()
    elif disabled:
        builder = builder.disabled()
    return builder.full_width(full_width).classes()
