"""
Interactive element behavior: transitions, cursor, hover/press feedback
and state-specific styling.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum

from classforge.canonical import canonicalize
from classforge.colors import Color, ColorProvider
from classforge.fluent import Fluent, enum_choices, parse_choice, split_custom


class InteractiveState(StrEnum):
    DEFAULT = "default"
    HOVER = "hover"
    ACTIVE = "active"
    FOCUSED = "focused"
    DISABLED = "disabled"
    LOADING = "loading"


class InteractionIntensity(StrEnum):
    GENTLE = "gentle"
    STANDARD = "standard"
    PROMINENT = "prominent"


HOVER_CLASSES: dict[InteractionIntensity, str] = {
    InteractionIntensity.GENTLE: "hover:scale-101 hover:shadow-sm",
    InteractionIntensity.STANDARD: "hover:scale-105 hover:shadow-md",
    InteractionIntensity.PROMINENT: "hover:scale-110 hover:shadow-lg",
}

ACTIVE_CLASSES: dict[InteractionIntensity, str] = {
    InteractionIntensity.GENTLE: "active:scale-100",
    InteractionIntensity.STANDARD: "active:scale-95",
    InteractionIntensity.PROMINENT: "active:scale-95",
}

_STATE_CHOICES = enum_choices(InteractiveState, focus=InteractiveState.FOCUSED)
_INTENSITY_CHOICES = enum_choices(InteractionIntensity, subtle=InteractionIntensity.GENTLE)


def parse_interactive_state(value: str) -> InteractiveState | None:
    return parse_choice(value, _STATE_CHOICES)


def parse_intensity(value: str) -> InteractionIntensity | None:
    return parse_choice(value, _INTENSITY_CHOICES)


@dataclass(frozen=True)
class InteractiveElement(Fluent):
    theme: ColorProvider
    _state: InteractiveState = InteractiveState.DEFAULT
    _intensity: InteractionIntensity = InteractionIntensity.STANDARD
    _hoverable: bool = False
    _focusable: bool = False
    _pressable: bool = False
    _custom: tuple[str, ...] = ()

    @property
    def current_state(self) -> InteractiveState:
        return self._state

    @property
    def current_intensity(self) -> InteractionIntensity:
        return self._intensity

    def hoverable(self, enabled: bool = True) -> InteractiveElement:
        return self._with(_hoverable=enabled)

    def focusable(self, enabled: bool = True) -> InteractiveElement:
        return self._with(_focusable=enabled)

    def pressable(self, enabled: bool = True) -> InteractiveElement:
        return self._with(_pressable=enabled)

    def intensity(self, intensity: InteractionIntensity) -> InteractiveElement:
        return self._with(_intensity=intensity)

    def gentle_interaction(self) -> InteractiveElement:
        return self.intensity(InteractionIntensity.GENTLE)

    def standard_interaction(self) -> InteractiveElement:
        return self.intensity(InteractionIntensity.STANDARD)

    def prominent_interaction(self) -> InteractiveElement:
        return self.intensity(InteractionIntensity.PROMINENT)

    def state(self, state: InteractiveState) -> InteractiveElement:
        return self._with(_state=state)

    def hover(self) -> InteractiveElement:
        return self.state(InteractiveState.HOVER)

    def active(self) -> InteractiveElement:
        return self.state(InteractiveState.ACTIVE)

    def focused(self) -> InteractiveElement:
        return self.state(InteractiveState.FOCUSED)

    def disabled(self) -> InteractiveElement:
        return self.state(InteractiveState.DISABLED)

    def loading(self) -> InteractiveElement:
        return self.state(InteractiveState.LOADING)

    def custom(self, classes: str | Iterable[str]) -> InteractiveElement:
        return self._with(_custom=self._custom + split_custom(classes))

    def state_str(self, value: str) -> InteractiveElement:
        parsed = parse_interactive_state(value)
        return self if parsed is None else self.state(parsed)

    def intensity_str(self, value: str) -> InteractiveElement:
        parsed = parse_intensity(value)
        return self if parsed is None else self.intensity(parsed)

    def classes(self) -> str:
        fragments: list[str] = []
        disabled = self._state is InteractiveState.DISABLED

        if self._hoverable or self._focusable or self._pressable:
            fragments.append("transition-all duration-200 ease-in-out")

        if disabled:
            fragments.append("cursor-not-allowed")
        elif self._state is InteractiveState.LOADING:
            fragments.append("cursor-wait")
        elif self._hoverable or self._pressable:
            fragments.append("cursor-pointer")

        if self._hoverable and not disabled:
            fragments.append(HOVER_CLASSES[self._intensity])
        if self._pressable and not disabled:
            fragments.append(ACTIVE_CLASSES[self._intensity])

        ring = self.theme.ring_color_class(Color.PRIMARY)
        if self._focusable:
            fragments.append(f"focus:outline-none focus:ring-2 focus:ring-offset-2 focus:{ring}")

        if self._state is InteractiveState.FOCUSED and self._focusable:
            fragments.append(f"ring-2 ring-offset-2 {ring}")
        elif disabled:
            fragments.append("opacity-50 pointer-events-none")
        elif self._state is InteractiveState.LOADING:
            fragments.append("opacity-75")

        fragments.extend(self._custom)
        return canonicalize(fragments)


def interactive_element(theme: ColorProvider) -> InteractiveElement:
    return InteractiveElement(theme)
