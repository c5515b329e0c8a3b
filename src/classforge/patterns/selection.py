"""
Selection pattern: filters, chips, tabs, selectable lists and cards.

Renders two class strings, one for the group container and one for each
item. Spacing between items comes from the size; the layout only decides
direction and flow.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum

from classforge.canonical import canonicalize
from classforge.colors import Color, ColorProvider
from classforge.fluent import Fluent, enum_choices, parse_choice, split_custom


class SelectionBehavior(StrEnum):
    NONE = "none"
    SINGLE = "single"
    MULTIPLE = "multiple"
    TOGGLE = "toggle"


class SelectionState(StrEnum):
    UNSELECTED = "unselected"
    SELECTED = "selected"
    PARTIALLY_SELECTED = "partially-selected"
    DISABLED = "disabled"


class SelectionDisplay(StrEnum):
    BUTTON = "button"
    CHIP = "chip"
    LIST_ITEM = "list-item"
    CARD = "card"
    TAB = "tab"


class SelectionLayout(StrEnum):
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"
    GRID = "grid"
    DROPDOWN = "dropdown"
    INLINE = "inline"


class SelectionSize(StrEnum):
    XS = "xs"
    SM = "sm"
    MD = "md"
    LG = "lg"
    XL = "xl"


class SelectionInteraction(StrEnum):
    SUBTLE = "subtle"
    STANDARD = "standard"
    PROMINENT = "prominent"


LAYOUT_CLASSES: dict[SelectionLayout, str] = {
    SelectionLayout.HORIZONTAL: "flex flex-row items-center",
    SelectionLayout.VERTICAL: "flex flex-col",
    SelectionLayout.GRID: "grid grid-cols-auto",
    SelectionLayout.DROPDOWN: "relative",
    SelectionLayout.INLINE: "flex flex-wrap items-center",
}

GAP_CLASSES: dict[SelectionSize, str] = {
    SelectionSize.XS: "gap-1",
    SelectionSize.SM: "gap-1.5",
    SelectionSize.MD: "gap-2",
    SelectionSize.LG: "gap-3",
    SelectionSize.XL: "gap-4",
}

DISPLAY_CLASSES: dict[SelectionDisplay, str] = {
    SelectionDisplay.BUTTON: "inline-flex items-center justify-center font-medium rounded-md transition-all duration-200",
    SelectionDisplay.CHIP: "inline-flex items-center rounded-full transition-all duration-200",
    SelectionDisplay.LIST_ITEM: "flex items-center w-full px-3 py-2 transition-all duration-200",
    SelectionDisplay.CARD: "flex flex-col items-center p-4 rounded-lg border transition-all duration-200",
    SelectionDisplay.TAB: "flex items-center px-4 py-2 border-b-2 transition-all duration-200",
}

# Buttons and chips size their own padding. Other displays already carry
# padding, so only the text size follows the selection size.
ITEM_SIZE_CLASSES: dict[SelectionDisplay, dict[SelectionSize, str]] = {
    SelectionDisplay.BUTTON: {
        SelectionSize.XS: "px-2 py-1 text-xs",
        SelectionSize.SM: "px-3 py-1.5 text-sm",
        SelectionSize.MD: "px-4 py-2 text-base",
        SelectionSize.LG: "px-6 py-3 text-lg",
        SelectionSize.XL: "px-8 py-4 text-xl",
    },
    SelectionDisplay.CHIP: {
        SelectionSize.XS: "px-2 py-0.5 text-xs",
        SelectionSize.SM: "px-3 py-1 text-sm",
        SelectionSize.MD: "px-3 py-1.5 text-base",
        SelectionSize.LG: "px-4 py-2 text-lg",
        SelectionSize.XL: "px-6 py-3 text-xl",
    },
}

ITEM_TEXT_SIZE: dict[SelectionSize, str] = {
    SelectionSize.XS: "text-xs",
    SelectionSize.SM: "text-sm",
    SelectionSize.MD: "text-base",
    SelectionSize.LG: "text-lg",
    SelectionSize.XL: "text-xl",
}

_BEHAVIOR_CHOICES = enum_choices(SelectionBehavior)
_STATE_CHOICES = enum_choices(
    SelectionState,
    inactive=SelectionState.UNSELECTED,
    active=SelectionState.SELECTED,
    partial=SelectionState.PARTIALLY_SELECTED,
)
_DISPLAY_CHOICES = enum_choices(SelectionDisplay, list=SelectionDisplay.LIST_ITEM)
_LAYOUT_CHOICES = enum_choices(SelectionLayout)
_SIZE_CHOICES = enum_choices(SelectionSize)
_INTERACTION_CHOICES = enum_choices(SelectionInteraction)


def parse_selection_behavior(value: str) -> SelectionBehavior | None:
    return parse_choice(value, _BEHAVIOR_CHOICES)


def parse_selection_state(value: str) -> SelectionState | None:
    return parse_choice(value, _STATE_CHOICES)


def parse_selection_display(value: str) -> SelectionDisplay | None:
    return parse_choice(value, _DISPLAY_CHOICES)


def parse_selection_layout(value: str) -> SelectionLayout | None:
    return parse_choice(value, _LAYOUT_CHOICES)


def parse_selection_size(value: str) -> SelectionSize | None:
    return parse_choice(value, _SIZE_CHOICES)


def parse_selection_interaction(value: str) -> SelectionInteraction | None:
    return parse_choice(value, _INTERACTION_CHOICES)


def selection_state_colors(theme: ColorProvider, state: SelectionState) -> str:
    match state:
        case SelectionState.UNSELECTED:
            bg, text, border = Color.SURFACE, Color.TEXT_PRIMARY, Color.BORDER
        case SelectionState.SELECTED:
            bg, text, border = Color.PRIMARY, Color.TEXT_INVERSE, Color.PRIMARY
        case SelectionState.PARTIALLY_SELECTED:
            bg, text, border = Color.BACKGROUND, Color.PRIMARY, Color.PRIMARY
        case SelectionState.DISABLED:
            bg, text, border = (
                Color.INTERACTIVE_DISABLED,
                Color.TEXT_TERTIARY,
                Color.INTERACTIVE_DISABLED,
            )
    return f"{theme.bg_class(bg)} {theme.text_class(text)} {theme.border_class(border)}"


def selection_interaction_classes(
    theme: ColorProvider, interaction: SelectionInteraction, state: SelectionState
) -> str:
    if state is SelectionState.DISABLED:
        return "cursor-not-allowed"

    fragments = ["cursor-pointer"]
    unselected = state is SelectionState.UNSELECTED
    match interaction:
        case SelectionInteraction.SUBTLE:
            fragments.append("hover:opacity-80")
        case SelectionInteraction.STANDARD:
            if unselected:
                fragments.append(
                    f"hover:{theme.bg_class(Color.BACKGROUND)} "
                    f"hover:{theme.border_class(Color.INTERACTIVE)}"
                )
            fragments.append("hover:scale-105 active:scale-95")
        case SelectionInteraction.PROMINENT:
            if unselected:
                fragments.append(
                    f"hover:{theme.bg_class(Color.INTERACTIVE)} "
                    f"hover:{theme.text_class(Color.TEXT_INVERSE)}"
                )
            fragments.append("hover:scale-110 active:scale-90 shadow-lg hover:shadow-xl")
    return " ".join(fragments)


@dataclass(frozen=True)
class SelectionSemanticInfo:
    behavior: SelectionBehavior
    state: SelectionState
    display: SelectionDisplay
    layout: SelectionLayout
    size: SelectionSize
    interaction: SelectionInteraction
    allows_multiple: bool
    is_interactive: bool
    has_counts: bool
    has_clear_all: bool


@dataclass(frozen=True)
class SelectionPattern(Fluent):
    theme: ColorProvider
    _behavior: SelectionBehavior = SelectionBehavior.SINGLE
    _state: SelectionState = SelectionState.UNSELECTED
    _display: SelectionDisplay = SelectionDisplay.BUTTON
    _layout: SelectionLayout = SelectionLayout.HORIZONTAL
    _size: SelectionSize = SelectionSize.MD
    _interaction: SelectionInteraction = SelectionInteraction.STANDARD
    _show_counts: bool = False
    _show_clear_all: bool = False
    _custom: tuple[str, ...] = ()

    # Typed setters

    def behavior(self, behavior: SelectionBehavior) -> SelectionPattern:
        return self._with(_behavior=behavior)

    def state(self, state: SelectionState) -> SelectionPattern:
        return self._with(_state=state)

    def display(self, display: SelectionDisplay) -> SelectionPattern:
        return self._with(_display=display)

    def layout(self, layout: SelectionLayout) -> SelectionPattern:
        return self._with(_layout=layout)

    def size(self, size: SelectionSize) -> SelectionPattern:
        return self._with(_size=size)

    def interaction(self, interaction: SelectionInteraction) -> SelectionPattern:
        return self._with(_interaction=interaction)

    def with_counts(self, show_counts: bool = True) -> SelectionPattern:
        return self._with(_show_counts=show_counts)

    def with_clear_all(self, show_clear_all: bool = True) -> SelectionPattern:
        return self._with(_show_clear_all=show_clear_all)

    def custom(self, classes: str | Iterable[str]) -> SelectionPattern:
        return self._with(_custom=self._custom + split_custom(classes))

    # String setters

    def behavior_str(self, value: str) -> SelectionPattern:
        parsed = parse_selection_behavior(value)
        return self if parsed is None else self.behavior(parsed)

    def state_str(self, value: str) -> SelectionPattern:
        parsed = parse_selection_state(value)
        return self if parsed is None else self.state(parsed)

    def display_str(self, value: str) -> SelectionPattern:
        parsed = parse_selection_display(value)
        return self if parsed is None else self.display(parsed)

    def layout_str(self, value: str) -> SelectionPattern:
        parsed = parse_selection_layout(value)
        return self if parsed is None else self.layout(parsed)

    def size_str(self, value: str) -> SelectionPattern:
        parsed = parse_selection_size(value)
        return self if parsed is None else self.size(parsed)

    def interaction_str(self, value: str) -> SelectionPattern:
        parsed = parse_selection_interaction(value)
        return self if parsed is None else self.interaction(parsed)

    # Shortcuts

    def no_selection(self) -> SelectionPattern:
        return self.behavior(SelectionBehavior.NONE)

    def single_selection(self) -> SelectionPattern:
        return self.behavior(SelectionBehavior.SINGLE)

    def multiple_selection(self) -> SelectionPattern:
        return self.behavior(SelectionBehavior.MULTIPLE)

    def toggle_selection(self) -> SelectionPattern:
        return self.behavior(SelectionBehavior.TOGGLE)

    def unselected(self) -> SelectionPattern:
        return self.state(SelectionState.UNSELECTED)

    def selected(self) -> SelectionPattern:
        return self.state(SelectionState.SELECTED)

    def partially_selected(self) -> SelectionPattern:
        return self.state(SelectionState.PARTIALLY_SELECTED)

    def disabled(self) -> SelectionPattern:
        return self.state(SelectionState.DISABLED)

    def button_display(self) -> SelectionPattern:
        return self.display(SelectionDisplay.BUTTON)

    def chip_display(self) -> SelectionPattern:
        return self.display(SelectionDisplay.CHIP)

    def list_item_display(self) -> SelectionPattern:
        return self.display(SelectionDisplay.LIST_ITEM)

    def card_display(self) -> SelectionPattern:
        return self.display(SelectionDisplay.CARD)

    def tab_display(self) -> SelectionPattern:
        return self.display(SelectionDisplay.TAB)

    def horizontal_layout(self) -> SelectionPattern:
        return self.layout(SelectionLayout.HORIZONTAL)

    def vertical_layout(self) -> SelectionPattern:
        return self.layout(SelectionLayout.VERTICAL)

    def grid_layout(self) -> SelectionPattern:
        return self.layout(SelectionLayout.GRID)

    def dropdown_layout(self) -> SelectionPattern:
        return self.layout(SelectionLayout.DROPDOWN)

    def inline_layout(self) -> SelectionPattern:
        return self.layout(SelectionLayout.INLINE)

    def xs(self) -> SelectionPattern:
        return self.size(SelectionSize.XS)

    def sm(self) -> SelectionPattern:
        return self.size(SelectionSize.SM)

    def md(self) -> SelectionPattern:
        return self.size(SelectionSize.MD)

    def lg(self) -> SelectionPattern:
        return self.size(SelectionSize.LG)

    def xl(self) -> SelectionPattern:
        return self.size(SelectionSize.XL)

    def subtle_interaction(self) -> SelectionPattern:
        return self.interaction(SelectionInteraction.SUBTLE)

    def standard_interaction(self) -> SelectionPattern:
        return self.interaction(SelectionInteraction.STANDARD)

    def prominent_interaction(self) -> SelectionPattern:
        return self.interaction(SelectionInteraction.PROMINENT)

    # Rendering

    def container_classes(self) -> str:
        fragments = [
            "selection-pattern",
            LAYOUT_CLASSES[self._layout],
            GAP_CLASSES[self._size],
            *self._custom,
        ]
        return canonicalize(fragments)

    def item_classes(self) -> str:
        size_table = ITEM_SIZE_CLASSES.get(self._display)
        size_classes = size_table[self._size] if size_table else ITEM_TEXT_SIZE[self._size]
        fragments = [
            "selection-item",
            DISPLAY_CLASSES[self._display],
            size_classes,
            selection_state_colors(self.theme, self._state),
            selection_interaction_classes(self.theme, self._interaction, self._state),
        ]
        return canonicalize(fragments)

    def count_classes(self) -> str:
        """Count badge classes; empty unless counts are shown."""
        if not self._show_counts:
            return ""
        if self._state is SelectionState.SELECTED:
            colors = f"{self.theme.bg_class(Color.PRIMARY)} {self.theme.text_class(Color.TEXT_INVERSE)}"
        else:
            colors = f"{self.theme.bg_class(Color.BACKGROUND)} {self.theme.text_class(Color.TEXT_SECONDARY)}"
        return canonicalize(["ml-2 px-2 py-0.5 text-xs rounded-full", colors])

    def semantic_info(self) -> SelectionSemanticInfo:
        return SelectionSemanticInfo(
            behavior=self._behavior,
            state=self._state,
            display=self._display,
            layout=self._layout,
            size=self._size,
            interaction=self._interaction,
            allows_multiple=self._behavior in (SelectionBehavior.MULTIPLE, SelectionBehavior.TOGGLE),
            is_interactive=(
                self._behavior is not SelectionBehavior.NONE
                and self._state is not SelectionState.DISABLED
            ),
            has_counts=self._show_counts,
            has_clear_all=self._show_clear_all,
        )


# =============================================================================
# Constructors
# =============================================================================


def selection_pattern(theme: ColorProvider) -> SelectionPattern:
    return SelectionPattern(theme)


def filter_selection(theme: ColorProvider) -> SelectionPattern:
    return (
        selection_pattern(theme)
        .single_selection()
        .button_display()
        .horizontal_layout()
        .standard_interaction()
        .with_counts()
    )


def chip_selection(theme: ColorProvider) -> SelectionPattern:
    return (
        selection_pattern(theme)
        .multiple_selection()
        .chip_display()
        .inline_layout()
        .subtle_interaction()
        .with_clear_all()
    )


def tab_selection(theme: ColorProvider) -> SelectionPattern:
    return (
        selection_pattern(theme)
        .single_selection()
        .tab_display()
        .horizontal_layout()
        .standard_interaction()
    )


def list_selection(theme: ColorProvider) -> SelectionPattern:
    return (
        selection_pattern(theme)
        .multiple_selection()
        .list_item_display()
        .vertical_layout()
        .standard_interaction()
        .with_counts()
    )


def card_selection(theme: ColorProvider) -> SelectionPattern:
    return (
        selection_pattern(theme)
        .single_selection()
        .card_display()
        .grid_layout()
        .prominent_interaction()
    )
