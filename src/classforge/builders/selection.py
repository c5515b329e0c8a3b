"""Selection styling builder for filters, chips, tabs and option lists."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from classforge.colors import ColorProvider
from classforge.fluent import Fluent
from classforge.patterns.selection import (
    SelectionBehavior,
    SelectionDisplay,
    SelectionInteraction,
    SelectionLayout,
    SelectionPattern,
    SelectionSize,
    SelectionState,
)


@dataclass(frozen=True)
class SelectionStyles(Fluent):
    pattern: SelectionPattern

    def _pattern(self, pattern: SelectionPattern) -> SelectionStyles:
        return self._with(pattern=pattern)

    def behavior(self, behavior: SelectionBehavior) -> SelectionStyles:
        return self._pattern(self.pattern.behavior(behavior))

    def state(self, state: SelectionState) -> SelectionStyles:
        return self._pattern(self.pattern.state(state))

    def display(self, display: SelectionDisplay) -> SelectionStyles:
        return self._pattern(self.pattern.display(display))

    def layout(self, layout: SelectionLayout) -> SelectionStyles:
        return self._pattern(self.pattern.layout(layout))

    def size(self, size: SelectionSize) -> SelectionStyles:
        return self._pattern(self.pattern.size(size))

    def interaction(self, interaction: SelectionInteraction) -> SelectionStyles:
        return self._pattern(self.pattern.interaction(interaction))

    def with_counts(self, show_counts: bool = True) -> SelectionStyles:
        return self._pattern(self.pattern.with_counts(show_counts))

    def with_clear_all(self, show_clear_all: bool = True) -> SelectionStyles:
        return self._pattern(self.pattern.with_clear_all(show_clear_all))

    def behavior_str(self, value: str) -> SelectionStyles:
        return self._pattern(self.pattern.behavior_str(value))

    def state_str(self, value: str) -> SelectionStyles:
        return self._pattern(self.pattern.state_str(value))

    def display_str(self, value: str) -> SelectionStyles:
        return self._pattern(self.pattern.display_str(value))

    def layout_str(self, value: str) -> SelectionStyles:
        return self._pattern(self.pattern.layout_str(value))

    def size_str(self, value: str) -> SelectionStyles:
        return self._pattern(self.pattern.size_str(value))

    def interaction_str(self, value: str) -> SelectionStyles:
        return self._pattern(self.pattern.interaction_str(value))

    # Behavior

    def no_selection(self) -> SelectionStyles:
        return self.behavior(SelectionBehavior.NONE)

    def single_selection(self) -> SelectionStyles:
        return self.behavior(SelectionBehavior.SINGLE)

    def multiple_selection(self) -> SelectionStyles:
        return self.behavior(SelectionBehavior.MULTIPLE)

    def toggle_selection(self) -> SelectionStyles:
        return self.behavior(SelectionBehavior.TOGGLE)

    # State

    def unselected(self) -> SelectionStyles:
        return self.state(SelectionState.UNSELECTED)

    def selected(self) -> SelectionStyles:
        return self.state(SelectionState.SELECTED)

    def partially_selected(self) -> SelectionStyles:
        return self.state(SelectionState.PARTIALLY_SELECTED)

    def disabled(self) -> SelectionStyles:
        return self.state(SelectionState.DISABLED)

    # Display

    def button_display(self) -> SelectionStyles:
        return self.display(SelectionDisplay.BUTTON)

    def chip_display(self) -> SelectionStyles:
        return self.display(SelectionDisplay.CHIP)

    def list_item_display(self) -> SelectionStyles:
        return self.display(SelectionDisplay.LIST_ITEM)

    def card_display(self) -> SelectionStyles:
        return self.display(SelectionDisplay.CARD)

    def tab_display(self) -> SelectionStyles:
        return self.display(SelectionDisplay.TAB)

    # Layout

    def horizontal_layout(self) -> SelectionStyles:
        return self.layout(SelectionLayout.HORIZONTAL)

    def vertical_layout(self) -> SelectionStyles:
        return self.layout(SelectionLayout.VERTICAL)

    def grid_layout(self) -> SelectionStyles:
        return self.layout(SelectionLayout.GRID)

    def dropdown_layout(self) -> SelectionStyles:
        return self.layout(SelectionLayout.DROPDOWN)

    def inline_layout(self) -> SelectionStyles:
        return self.layout(SelectionLayout.INLINE)

    # Size

    def xs(self) -> SelectionStyles:
        return self.size(SelectionSize.XS)

    def sm(self) -> SelectionStyles:
        return self.size(SelectionSize.SM)

    def md(self) -> SelectionStyles:
        return self.size(SelectionSize.MD)

    def lg(self) -> SelectionStyles:
        return self.size(SelectionSize.LG)

    def xl(self) -> SelectionStyles:
        return self.size(SelectionSize.XL)

    # Interaction

    def subtle_interaction(self) -> SelectionStyles:
        return self.interaction(SelectionInteraction.SUBTLE)

    def standard_interaction(self) -> SelectionStyles:
        return self.interaction(SelectionInteraction.STANDARD)

    def prominent_interaction(self) -> SelectionStyles:
        return self.interaction(SelectionInteraction.PROMINENT)

    def custom(self, classes: str | Iterable[str]) -> SelectionStyles:
        """Extra classes for the container."""
        return self._pattern(self.pattern.custom(classes))

    def custom_classes(self, classes: str) -> SelectionStyles:
        return self.custom(classes.split())

    def container_classes(self) -> str:
        return self.pattern.container_classes()

    def item_classes(self) -> str:
        return self.pattern.item_classes()

    def count_classes(self) -> str:
        return self.pattern.count_classes()

    build = container_classes


def selection_styles(theme: ColorProvider) -> SelectionStyles:
    return SelectionStyles(SelectionPattern(theme))


def filter_selection_styles(theme: ColorProvider) -> SelectionStyles:
    return (
        selection_styles(theme)
        .single_selection()
        .button_display()
        .horizontal_layout()
        .standard_interaction()
        .with_counts()
    )


def chip_selection_styles(theme: ColorProvider) -> SelectionStyles:
    return (
        selection_styles(theme)
        .multiple_selection()
        .chip_display()
        .inline_layout()
        .subtle_interaction()
        .with_clear_all()
    )


def tab_selection_styles(theme: ColorProvider) -> SelectionStyles:
    return (
        selection_styles(theme)
        .single_selection()
        .tab_display()
        .horizontal_layout()
        .standard_interaction()
    )


def selection_classes_from_strings(
    theme: ColorProvider,
    behavior: str,
    state: str,
    display: str,
    layout: str,
    size: str,
    interaction: str,
    show_counts: bool = False,
) -> tuple[str, str]:
    """Return ``(container_classes, item_classes)`` for one configuration."""
    builder = (
        selection_styles(theme)
        .behavior_str(behavior)
        .state_str(state)
        .display_str(display)
        .layout_str(layout)
        .size_str(size)
        .interaction_str(interaction)
        .with_counts(show_counts)
    )
    return builder.container_classes(), builder.item_classes()
