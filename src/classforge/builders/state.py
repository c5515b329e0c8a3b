"""
State styling builder.

Wraps StatePattern and adds classes for the pieces a state screen is made
of: heading, description, icon and loading indicator.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from classforge.canonical import canonicalize
from classforge.colors import ColorProvider
from classforge.fluent import Fluent, split_custom
from classforge.patterns.states import (
    ActionRequirement,
    LoadingVariant,
    StateAlignment,
    StateIntent,
    StatePattern,
    StateProminence,
    StateSize,
)

# Indicator shape on top of the pattern's animation class.
INDICATOR_CLASSES: dict[LoadingVariant, str] = {
    LoadingVariant.SPINNER: "animate-spin border-4 border-t-transparent rounded-full",
    LoadingVariant.DOTS: "animate-bounce rounded-full",
    LoadingVariant.PULSE: "animate-pulse rounded-full",
    LoadingVariant.BARS: "animate-pulse rounded-sm",
    LoadingVariant.SKELETON: "animate-pulse rounded",
}

CONTENT_SIZES: dict[StateSize, str] = {
    StateSize.XS: "text-lg",
    StateSize.SM: "text-xl",
    StateSize.MD: "text-2xl",
    StateSize.LG: "text-3xl",
    StateSize.XL: "text-4xl",
}

DESCRIPTION_SIZES: dict[StateSize, str] = {
    StateSize.XS: "text-sm",
    StateSize.SM: "text-base",
    StateSize.MD: "text-lg",
    StateSize.LG: "text-xl",
    StateSize.XL: "text-2xl",
}

ICON_SIZES: dict[StateSize, str] = {
    StateSize.XS: "w-8 h-8",
    StateSize.SM: "w-12 h-12",
    StateSize.MD: "w-16 h-16",
    StateSize.LG: "w-20 h-20",
    StateSize.XL: "w-24 h-24",
}

LOADING_SIZES: dict[LoadingVariant, dict[StateSize, str]] = {
    LoadingVariant.SPINNER: {
        StateSize.XS: "w-6 h-6",
        StateSize.SM: "w-8 h-8",
        StateSize.MD: "w-12 h-12",
        StateSize.LG: "w-16 h-16",
        StateSize.XL: "w-20 h-20",
    },
    LoadingVariant.DOTS: {
        StateSize.XS: "w-2 h-2",
        StateSize.SM: "w-3 h-3",
        StateSize.MD: "w-4 h-4",
        StateSize.LG: "w-5 h-5",
        StateSize.XL: "w-6 h-6",
    },
}

DEFAULT_LOADING_SIZE = "w-8 h-8"


@dataclass(frozen=True)
class StateStyles(Fluent):
    pattern: StatePattern
    _custom: tuple[str, ...] = ()

    def _pattern(self, pattern: StatePattern) -> StateStyles:
        return self._with(pattern=pattern)

    # Typed setters

    def intent(self, intent: StateIntent) -> StateStyles:
        return self._pattern(self.pattern.intent(intent))

    def prominence(self, prominence: StateProminence) -> StateStyles:
        return self._pattern(self.pattern.prominence(prominence))

    def size(self, size: StateSize) -> StateStyles:
        return self._pattern(self.pattern.size(size))

    def alignment(self, alignment: StateAlignment) -> StateStyles:
        return self._pattern(self.pattern.alignment(alignment))

    def action_requirement(self, requirement: ActionRequirement) -> StateStyles:
        return self._pattern(self.pattern.action_requirement(requirement))

    def loading_variant(self, variant: LoadingVariant | None) -> StateStyles:
        return self._pattern(self.pattern.loading_variant(variant))

    def fullscreen(self, fullscreen: bool = True) -> StateStyles:
        return self._pattern(self.pattern.fullscreen(fullscreen))

    # String setters

    def intent_str(self, value: str) -> StateStyles:
        return self._pattern(self.pattern.intent_str(value))

    def prominence_str(self, value: str) -> StateStyles:
        return self._pattern(self.pattern.prominence_str(value))

    def size_str(self, value: str) -> StateStyles:
        return self._pattern(self.pattern.size_str(value))

    def alignment_str(self, value: str) -> StateStyles:
        return self._pattern(self.pattern.alignment_str(value))

    def action_requirement_str(self, value: str) -> StateStyles:
        return self._pattern(self.pattern.action_requirement_str(value))

    def loading_variant_str(self, value: str) -> StateStyles:
        return self._pattern(self.pattern.loading_variant_str(value))

    # Shortcuts

    def informational(self) -> StateStyles:
        return self.intent(StateIntent.INFORMATIONAL)

    def loading(self) -> StateStyles:
        return self.intent(StateIntent.LOADING)

    def success(self) -> StateStyles:
        return self.intent(StateIntent.SUCCESS)

    def warning(self) -> StateStyles:
        return self.intent(StateIntent.WARNING)

    def error(self) -> StateStyles:
        return self.intent(StateIntent.ERROR)

    def empty(self) -> StateStyles:
        return self.intent(StateIntent.EMPTY)

    def subtle(self) -> StateStyles:
        return self.prominence(StateProminence.SUBTLE)

    def standard(self) -> StateStyles:
        return self.prominence(StateProminence.STANDARD)

    def prominent(self) -> StateStyles:
        return self.prominence(StateProminence.PROMINENT)

    def xs(self) -> StateStyles:
        return self.size(StateSize.XS)

    def sm(self) -> StateStyles:
        return self.size(StateSize.SM)

    def md(self) -> StateStyles:
        return self.size(StateSize.MD)

    def lg(self) -> StateStyles:
        return self.size(StateSize.LG)

    def xl(self) -> StateStyles:
        return self.size(StateSize.XL)

    def left_aligned(self) -> StateStyles:
        return self.alignment(StateAlignment.LEFT)

    def center_aligned(self) -> StateStyles:
        return self.alignment(StateAlignment.CENTER)

    def right_aligned(self) -> StateStyles:
        return self.alignment(StateAlignment.RIGHT)

    def no_action(self) -> StateStyles:
        return self.action_requirement(ActionRequirement.NONE)

    def optional_action(self) -> StateStyles:
        return self.action_requirement(ActionRequirement.OPTIONAL)

    def recommended_action(self) -> StateStyles:
        return self.action_requirement(ActionRequirement.RECOMMENDED)

    def required_action(self) -> StateStyles:
        return self.action_requirement(ActionRequirement.REQUIRED)

    def spinner(self) -> StateStyles:
        return self.loading_variant(LoadingVariant.SPINNER)

    def dots(self) -> StateStyles:
        return self.loading_variant(LoadingVariant.DOTS)

    def pulse(self) -> StateStyles:
        return self.loading_variant(LoadingVariant.PULSE)

    def bars(self) -> StateStyles:
        return self.loading_variant(LoadingVariant.BARS)

    def skeleton(self) -> StateStyles:
        return self.loading_variant(LoadingVariant.SKELETON)

    def custom(self, classes: str | Iterable[str]) -> StateStyles:
        return self._with(_custom=self._custom + split_custom(classes))

    def custom_classes(self, classes: str) -> StateStyles:
        return self._with(_custom=self._custom + tuple(classes.split()))

    # Rendering

    def classes(self) -> str:
        variant = self.pattern.current_loading_variant
        indicator = INDICATOR_CLASSES[variant] if variant is not None else ""
        return canonicalize([self.pattern.classes(), indicator, *self._custom])

    build = classes

    def content_size_classes(self) -> str:
        return CONTENT_SIZES[self.pattern.current_size]

    def description_size_classes(self) -> str:
        return DESCRIPTION_SIZES[self.pattern.current_size]

    def icon_size_classes(self) -> str:
        return canonicalize([ICON_SIZES[self.pattern.current_size]])

    def loading_size_classes(self) -> str:
        variant = self.pattern.current_loading_variant
        sizes = LOADING_SIZES.get(variant) if variant is not None else None
        if sizes is None:
            return canonicalize([DEFAULT_LOADING_SIZE])
        return canonicalize([sizes[self.pattern.current_size]])

    def suggested_icon(self) -> str:
        return self.pattern.suggested_icon()

    def suggested_action_text(self) -> str | None:
        return self.pattern.suggested_action_text()


def state_styles(theme: ColorProvider) -> StateStyles:
    return StateStyles(StatePattern(theme))


def loading_state_styles(theme: ColorProvider) -> StateStyles:
    return state_styles(theme).loading().standard().center_aligned().spinner().no_action()


def empty_state_styles(theme: ColorProvider) -> StateStyles:
    return state_styles(theme).empty().standard().center_aligned().optional_action()


def error_state_styles(theme: ColorProvider) -> StateStyles:
    return state_styles(theme).error().prominent().center_aligned().recommended_action()


def success_state_styles(theme: ColorProvider) -> StateStyles:
    return state_styles(theme).success().standard().center_aligned().no_action()


def state_classes_from_strings(
    theme: ColorProvider,
    intent: str,
    prominence: str = "standard",
    size: str = "md",
    alignment: str = "center",
    loading_variant: str | None = None,
    fullscreen: bool = False,
) -> str:
    builder = (
        state_styles(theme)
        .intent_str(intent)
        .prominence_str(prominence)
        .size_str(size)
        .alignment_str(alignment)
        .fullscreen(fullscreen)
    )
    if loading_variant is not None:
        builder = builder.loading_variant_str(loading_variant)
    return builder.classes()
