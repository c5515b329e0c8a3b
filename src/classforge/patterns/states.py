"""
Generic application state: informational, loading, empty, error, success
and warning screens.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum

from classforge.canonical import canonicalize
from classforge.colors import Color, ColorProvider
from classforge.fluent import Fluent, enum_choices, parse_choice, split_custom


class StateIntent(StrEnum):
    INFORMATIONAL = "informational"
    LOADING = "loading"
    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"
    EMPTY = "empty"


class StateProminence(StrEnum):
    SUBTLE = "subtle"
    STANDARD = "standard"
    PROMINENT = "prominent"


class StateSize(StrEnum):
    XS = "xs"
    SM = "sm"
    MD = "md"
    LG = "lg"
    XL = "xl"


class StateAlignment(StrEnum):
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


class ActionRequirement(StrEnum):
    NONE = "none"
    OPTIONAL = "optional"
    RECOMMENDED = "recommended"
    REQUIRED = "required"


class LoadingVariant(StrEnum):
    SPINNER = "spinner"
    DOTS = "dots"
    PULSE = "pulse"
    BARS = "bars"
    SKELETON = "skeleton"


ALIGNMENT_CLASSES: dict[StateAlignment, str] = {
    StateAlignment.LEFT: "flex flex-col items-start text-left",
    StateAlignment.CENTER: "flex flex-col items-center text-center",
    StateAlignment.RIGHT: "flex flex-col items-end text-right",
}

SIZE_SPACING: dict[StateSize, str] = {
    StateSize.XS: "px-4 py-8",
    StateSize.SM: "px-6 py-12",
    StateSize.MD: "px-8 py-16",
    StateSize.LG: "px-12 py-20",
    StateSize.XL: "px-16 py-24",
}

LOADING_CLASSES: dict[LoadingVariant, str] = {
    LoadingVariant.SPINNER: "animate-spin",
    LoadingVariant.DOTS: "animate-bounce",
    LoadingVariant.PULSE: "animate-pulse",
    LoadingVariant.BARS: "animate-pulse",
    LoadingVariant.SKELETON: "animate-pulse",
}

SUGGESTED_ICONS: dict[StateIntent, str] = {
    StateIntent.INFORMATIONAL: "info",
    StateIntent.LOADING: "loader",
    StateIntent.SUCCESS: "check-circle",
    StateIntent.WARNING: "alert-triangle",
    StateIntent.ERROR: "alert-circle",
    StateIntent.EMPTY: "inbox",
}

SUGGESTED_ACTIONS: dict[tuple[StateIntent, ActionRequirement], str] = {
    (StateIntent.ERROR, ActionRequirement.RECOMMENDED): "Try Again",
    (StateIntent.EMPTY, ActionRequirement.OPTIONAL): "Refresh",
    (StateIntent.EMPTY, ActionRequirement.RECOMMENDED): "Add Item",
    (StateIntent.WARNING, ActionRequirement.REQUIRED): "Take Action",
}

_INTENT_CHOICES = enum_choices(
    StateIntent, info=StateIntent.INFORMATIONAL, warn=StateIntent.WARNING
)
_PROMINENCE_CHOICES = enum_choices(StateProminence)
_SIZE_CHOICES = enum_choices(StateSize)
_ALIGNMENT_CHOICES = enum_choices(StateAlignment)
_ACTION_CHOICES = enum_choices(ActionRequirement)
_LOADING_CHOICES = enum_choices(LoadingVariant)


def parse_state_intent(value: str) -> StateIntent | None:
    return parse_choice(value, _INTENT_CHOICES)


def parse_state_prominence(value: str) -> StateProminence | None:
    return parse_choice(value, _PROMINENCE_CHOICES)


def parse_state_size(value: str) -> StateSize | None:
    return parse_choice(value, _SIZE_CHOICES)


def parse_state_alignment(value: str) -> StateAlignment | None:
    return parse_choice(value, _ALIGNMENT_CHOICES)


def parse_action_requirement(value: str) -> ActionRequirement | None:
    return parse_choice(value, _ACTION_CHOICES)


def parse_loading_variant(value: str) -> LoadingVariant | None:
    return parse_choice(value, _LOADING_CHOICES)


def state_intent_colors(theme: ColorProvider, intent: StateIntent) -> str:
    match intent:
        case StateIntent.INFORMATIONAL:
            return f"{theme.text_class(Color.TEXT_PRIMARY)} {theme.bg_class(Color.BACKGROUND)}"
        case StateIntent.LOADING:
            return f"{theme.text_class(Color.PRIMARY)} {theme.bg_class(Color.BACKGROUND)}"
        case StateIntent.SUCCESS:
            return "text-green-600 bg-green-50"
        case StateIntent.WARNING:
            return "text-orange-600 bg-orange-50"
        case StateIntent.ERROR:
            return "text-red-600 bg-red-50"
        case StateIntent.EMPTY:
            return f"{theme.text_class(Color.TEXT_SECONDARY)} {theme.bg_class(Color.BACKGROUND)}"


@dataclass(frozen=True)
class StateSemanticInfo:
    intent: StateIntent
    prominence: StateProminence
    size: StateSize
    alignment: StateAlignment
    action_requirement: ActionRequirement
    loading_variant: LoadingVariant | None
    requires_action: bool
    is_interactive: bool


@dataclass(frozen=True)
class StatePattern(Fluent):
    """
    Communicates application state to the user.

    Prominence and action requirement carry meaning for the consumer
    (``semantic_info``, ``suggested_action_text``) but add no classes.
    """

    theme: ColorProvider
    _intent: StateIntent = StateIntent.INFORMATIONAL
    _prominence: StateProminence = StateProminence.STANDARD
    _size: StateSize = StateSize.MD
    _alignment: StateAlignment = StateAlignment.CENTER
    _action: ActionRequirement = ActionRequirement.NONE
    _loading_variant: LoadingVariant | None = None
    _fullscreen: bool = False
    _custom: tuple[str, ...] = ()

    @property
    def current_intent(self) -> StateIntent:
        return self._intent

    @property
    def current_size(self) -> StateSize:
        return self._size

    @property
    def current_loading_variant(self) -> LoadingVariant | None:
        return self._loading_variant

    # Typed setters

    def intent(self, intent: StateIntent) -> StatePattern:
        return self._with(_intent=intent)

    def prominence(self, prominence: StateProminence) -> StatePattern:
        return self._with(_prominence=prominence)

    def size(self, size: StateSize) -> StatePattern:
        return self._with(_size=size)

    def alignment(self, alignment: StateAlignment) -> StatePattern:
        return self._with(_alignment=alignment)

    def action_requirement(self, requirement: ActionRequirement) -> StatePattern:
        return self._with(_action=requirement)

    def loading_variant(self, variant: LoadingVariant | None) -> StatePattern:
        return self._with(_loading_variant=variant)

    def fullscreen(self, fullscreen: bool = True) -> StatePattern:
        return self._with(_fullscreen=fullscreen)

    def custom(self, classes: str | Iterable[str]) -> StatePattern:
        return self._with(_custom=self._custom + split_custom(classes))

    # String setters

    def intent_str(self, value: str) -> StatePattern:
        parsed = parse_state_intent(value)
        return self if parsed is None else self.intent(parsed)

    def prominence_str(self, value: str) -> StatePattern:
        parsed = parse_state_prominence(value)
        return self if parsed is None else self.prominence(parsed)

    def size_str(self, value: str) -> StatePattern:
        parsed = parse_state_size(value)
        return self if parsed is None else self.size(parsed)

    def alignment_str(self, value: str) -> StatePattern:
        parsed = parse_state_alignment(value)
        return self if parsed is None else self.alignment(parsed)

    def action_requirement_str(self, value: str) -> StatePattern:
        parsed = parse_action_requirement(value)
        return self if parsed is None else self.action_requirement(parsed)

    def loading_variant_str(self, value: str) -> StatePattern:
        parsed = parse_loading_variant(value)
        return self if parsed is None else self.loading_variant(parsed)

    # Shortcuts

    def informational(self) -> StatePattern:
        return self.intent(StateIntent.INFORMATIONAL)

    def loading(self) -> StatePattern:
        return self.intent(StateIntent.LOADING)

    def success(self) -> StatePattern:
        return self.intent(StateIntent.SUCCESS)

    def warning(self) -> StatePattern:
        return self.intent(StateIntent.WARNING)

    def error(self) -> StatePattern:
        return self.intent(StateIntent.ERROR)

    def empty(self) -> StatePattern:
        return self.intent(StateIntent.EMPTY)

    def subtle(self) -> StatePattern:
        return self.prominence(StateProminence.SUBTLE)

    def standard(self) -> StatePattern:
        return self.prominence(StateProminence.STANDARD)

    def prominent(self) -> StatePattern:
        return self.prominence(StateProminence.PROMINENT)

    def xs(self) -> StatePattern:
        return self.size(StateSize.XS)

    def sm(self) -> StatePattern:
        return self.size(StateSize.SM)

    def md(self) -> StatePattern:
        return self.size(StateSize.MD)

    def lg(self) -> StatePattern:
        return self.size(StateSize.LG)

    def xl(self) -> StatePattern:
        return self.size(StateSize.XL)

    def left_aligned(self) -> StatePattern:
        return self.alignment(StateAlignment.LEFT)

    def center_aligned(self) -> StatePattern:
        return self.alignment(StateAlignment.CENTER)

    def right_aligned(self) -> StatePattern:
        return self.alignment(StateAlignment.RIGHT)

    def no_action(self) -> StatePattern:
        return self.action_requirement(ActionRequirement.NONE)

    def optional_action(self) -> StatePattern:
        return self.action_requirement(ActionRequirement.OPTIONAL)

    def recommended_action(self) -> StatePattern:
        return self.action_requirement(ActionRequirement.RECOMMENDED)

    def required_action(self) -> StatePattern:
        return self.action_requirement(ActionRequirement.REQUIRED)

    def spinner(self) -> StatePattern:
        return self.loading_variant(LoadingVariant.SPINNER)

    def dots(self) -> StatePattern:
        return self.loading_variant(LoadingVariant.DOTS)

    def pulse(self) -> StatePattern:
        return self.loading_variant(LoadingVariant.PULSE)

    def bars(self) -> StatePattern:
        return self.loading_variant(LoadingVariant.BARS)

    def skeleton(self) -> StatePattern:
        return self.loading_variant(LoadingVariant.SKELETON)

    # Rendering

    def classes(self) -> str:
        fragments = [
            "state-pattern",
            ALIGNMENT_CLASSES[self._alignment],
            SIZE_SPACING[self._size],
            state_intent_colors(self.theme, self._intent),
        ]
        if self._fullscreen:
            fragments.append("min-h-screen justify-center")
        if self._loading_variant is not None:
            fragments.append(LOADING_CLASSES[self._loading_variant])
        fragments.extend(self._custom)
        return canonicalize(fragments)

    def suggested_icon(self) -> str:
        return SUGGESTED_ICONS[self._intent]

    def suggested_action_text(self) -> str | None:
        return SUGGESTED_ACTIONS.get((self._intent, self._action))

    def semantic_info(self) -> StateSemanticInfo:
        return StateSemanticInfo(
            intent=self._intent,
            prominence=self._prominence,
            size=self._size,
            alignment=self._alignment,
            action_requirement=self._action,
            loading_variant=self._loading_variant,
            requires_action=self._action is ActionRequirement.REQUIRED,
            is_interactive=self._action is not ActionRequirement.NONE,
        )


# =============================================================================
# Constructors
# =============================================================================


def state_pattern(theme: ColorProvider) -> StatePattern:
    return StatePattern(theme)


def informational_state(theme: ColorProvider) -> StatePattern:
    return state_pattern(theme).informational().standard().center_aligned().no_action()


def loading_state(theme: ColorProvider) -> StatePattern:
    return state_pattern(theme).loading().standard().center_aligned().spinner().no_action()


def empty_state(theme: ColorProvider) -> StatePattern:
    return state_pattern(theme).empty().standard().center_aligned().optional_action()


def error_state(theme: ColorProvider) -> StatePattern:
    return state_pattern(theme).error().prominent().center_aligned().recommended_action()


def success_state(theme: ColorProvider) -> StatePattern:
    return state_pattern(theme).success().standard().center_aligned().no_action()


def warning_state(theme: ColorProvider) -> StatePattern:
    return state_pattern(theme).warning().prominent().center_aligned().recommended_action()
