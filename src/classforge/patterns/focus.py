"""
Focus management.

Focus ring classes plus the static ARIA/tabindex attributes that go with
a keyboard interaction pattern.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum

from classforge.canonical import canonicalize
from classforge.colors import Color, ColorProvider
from classforge.fluent import Fluent, enum_choices, parse_choice, split_custom


class FocusBehavior(StrEnum):
    STANDARD = "standard"
    SUBTLE = "subtle"
    PROMINENT = "prominent"
    NONE = "none"
    CUSTOM = "custom"


class KeyboardPattern(StrEnum):
    BUTTON = "button"
    LINK = "link"
    MENU_ITEM = "menu-item"
    TAB = "tab"
    TOGGLE = "toggle"
    EXPANDABLE = "expandable"


class ScreenReaderPattern(StrEnum):
    BUTTON = "button"
    LINK = "link"
    MENU_ITEM = "menu-item"
    TAB = "tab"
    TOGGLE_BUTTON = "toggle-button"
    EXPANDABLE = "expandable"


ROLES: dict[ScreenReaderPattern, str] = {
    ScreenReaderPattern.BUTTON: "button",
    ScreenReaderPattern.LINK: "link",
    ScreenReaderPattern.MENU_ITEM: "menuitem",
    ScreenReaderPattern.TAB: "tab",
    ScreenReaderPattern.TOGGLE_BUTTON: "button",
    ScreenReaderPattern.EXPANDABLE: "button",
}

_BEHAVIOR_CHOICES = enum_choices(FocusBehavior)


def parse_focus_behavior(value: str) -> FocusBehavior | None:
    return parse_choice(value, _BEHAVIOR_CHOICES)


def focus_ring(theme: ColorProvider, behavior: FocusBehavior) -> str:
    """``focus:`` ring fragments for a behavior."""
    match behavior:
        case FocusBehavior.STANDARD:
            return f"focus:ring-2 focus:ring-offset-2 focus:{theme.ring_color_class(Color.PRIMARY)}"
        case FocusBehavior.SUBTLE:
            return f"focus:ring-1 focus:ring-offset-1 focus:ring-{theme.resolve(Color.BORDER)}"
        case FocusBehavior.PROMINENT:
            return f"focus:ring-4 focus:ring-offset-2 focus:{theme.ring_color_class(Color.PRIMARY)}"
        case FocusBehavior.NONE:
            return "focus:ring-0"
        case FocusBehavior.CUSTOM:
            return ""


@dataclass(frozen=True)
class FocusManagement(Fluent):
    theme: ColorProvider
    _behavior: FocusBehavior = FocusBehavior.STANDARD
    _keyboard: KeyboardPattern | None = None
    _screen_reader: ScreenReaderPattern | None = None
    _focusable: bool = True
    _tab_index: int | None = None
    _custom: tuple[str, ...] = ()

    @property
    def current_behavior(self) -> FocusBehavior:
        return self._behavior

    @property
    def keyboard_pattern(self) -> KeyboardPattern | None:
        return self._keyboard

    @property
    def screen_reader_pattern(self) -> ScreenReaderPattern | None:
        return self._screen_reader

    def focus_behavior(self, behavior: FocusBehavior) -> FocusManagement:
        return self._with(_behavior=behavior)

    def focus_behavior_str(self, value: str) -> FocusManagement:
        parsed = parse_focus_behavior(value)
        return self if parsed is None else self.focus_behavior(parsed)

    def focusable(self, focusable: bool = True) -> FocusManagement:
        return self._with(_focusable=focusable)

    def tab_index(self, index: int) -> FocusManagement:
        return self._with(_tab_index=index)

    def custom(self, classes: str | Iterable[str]) -> FocusManagement:
        return self._with(_custom=self._custom + split_custom(classes))

    def _preset(
        self,
        keyboard: KeyboardPattern,
        screen_reader: ScreenReaderPattern,
        behavior: FocusBehavior,
    ) -> FocusManagement:
        return self._with(_keyboard=keyboard, _screen_reader=screen_reader, _behavior=behavior)

    def button(self) -> FocusManagement:
        return self._preset(KeyboardPattern.BUTTON, ScreenReaderPattern.BUTTON, FocusBehavior.STANDARD)

    def link(self) -> FocusManagement:
        return self._preset(KeyboardPattern.LINK, ScreenReaderPattern.LINK, FocusBehavior.STANDARD)

    def menu_item(self) -> FocusManagement:
        return self._preset(
            KeyboardPattern.MENU_ITEM, ScreenReaderPattern.MENU_ITEM, FocusBehavior.SUBTLE
        )

    def tab(self) -> FocusManagement:
        return self._preset(KeyboardPattern.TAB, ScreenReaderPattern.TAB, FocusBehavior.STANDARD)

    def toggle(self) -> FocusManagement:
        return self._preset(
            KeyboardPattern.TOGGLE, ScreenReaderPattern.TOGGLE_BUTTON, FocusBehavior.STANDARD
        )

    def expandable(self) -> FocusManagement:
        return self._preset(
            KeyboardPattern.EXPANDABLE, ScreenReaderPattern.EXPANDABLE, FocusBehavior.STANDARD
        )

    def classes(self) -> str:
        fragments: list[str] = []
        if self._focusable:
            fragments.append("focus:outline-none")
            fragments.append(focus_ring(self.theme, self._behavior))
        fragments.extend(self._custom)
        return canonicalize(fragments)

    def data_attributes(self) -> dict[str, str]:
        """Static tabindex/role/ARIA attributes for the element."""
        attrs: dict[str, str] = {}
        if self._tab_index is not None:
            attrs["tabindex"] = str(self._tab_index)
        elif self._focusable:
            attrs["tabindex"] = "0"

        if self._screen_reader is not None:
            attrs["role"] = ROLES[self._screen_reader]
        if self._screen_reader is ScreenReaderPattern.TOGGLE_BUTTON:
            attrs["aria-pressed"] = "false"
        elif self._screen_reader is ScreenReaderPattern.EXPANDABLE:
            attrs["aria-expanded"] = "false"
        return attrs


def focus_management(theme: ColorProvider) -> FocusManagement:
    return FocusManagement(theme)
