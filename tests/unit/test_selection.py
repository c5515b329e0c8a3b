"""Tests for the selection pattern and the selection styles builder."""

from classforge.builders import (
    chip_selection_styles,
    filter_selection_styles,
    selection_classes_from_strings,
    selection_styles,
    tab_selection_styles,
)
from classforge.patterns.selection import (
    SelectionDisplay,
    SelectionState,
    chip_selection,
    filter_selection,
    list_selection,
    selection_pattern,
)


class TestSelectionPattern:
    def test_container(self, theme):
        classes = selection_pattern(theme).container_classes().split()
        assert "selection-pattern" in classes
        assert "flex-row" in classes
        assert "gap-2" in classes

    def test_item_unselected(self, theme):
        classes = selection_pattern(theme).item_classes().split()
        assert "selection-item" in classes
        assert "bg-white" in classes
        assert "hover:bg-gray-50" in classes
        assert "px-4" in classes

    def test_item_selected(self, theme):
        classes = selection_pattern(theme).selected().item_classes().split()
        assert "bg-jupiter-blue-500" in classes
        assert "text-white" in classes
        # Selected items keep scale feedback but not the unselected hover colors
        assert "hover:bg-gray-50" not in classes
        assert "hover:scale-105" in classes

    def test_item_disabled(self, theme):
        classes = selection_pattern(theme).disabled().item_classes().split()
        assert "cursor-not-allowed" in classes
        assert not any(c.startswith("hover:") for c in classes)

    def test_list_item_sizes_text_only(self, theme):
        classes = list_selection(theme).lg().item_classes().split()
        assert "text-lg" in classes
        assert "px-6" not in classes

    def test_count_classes(self, theme):
        assert selection_pattern(theme).count_classes() == ""
        counts = filter_selection(theme).selected().count_classes().split()
        assert "bg-jupiter-blue-500" in counts
        assert "rounded-full" in counts

    def test_semantic_info(self, theme):
        info = chip_selection(theme).semantic_info()
        assert info.allows_multiple
        assert info.has_clear_all
        assert info.display is SelectionDisplay.CHIP

    def test_state_aliases(self, theme):
        pattern = selection_pattern(theme).state_str("active")
        assert pattern.semantic_info().state is SelectionState.SELECTED
        partial = selection_pattern(theme).state_str("partial")
        assert partial.semantic_info().state is SelectionState.PARTIALLY_SELECTED


class TestSelectionStyles:
    def test_delegates_to_pattern(self, theme):
        styles = selection_styles(theme).chip_display().selected().sm()
        pattern = selection_pattern(theme).chip_display().selected().sm()
        assert styles.item_classes() == pattern.item_classes()
        assert styles.container_classes() == pattern.container_classes()

    def test_build_is_container(self, theme):
        styles = filter_selection_styles(theme)
        assert styles.build() == styles.container_classes()

    def test_custom_goes_to_container(self, theme):
        styles = selection_styles(theme).custom_classes("border-b mb-4")
        assert "mb-4" in styles.container_classes().split()
        assert "mb-4" not in styles.item_classes().split()

    def test_constructors(self, theme):
        assert "flex-wrap" in chip_selection_styles(theme).container_classes().split()
        assert "border-b-2" in tab_selection_styles(theme).item_classes().split()
        assert filter_selection_styles(theme).count_classes() != ""

    def test_invalid_size_ignored(self, theme):
        base = selection_styles(theme)
        assert base.size_str("jumbo").item_classes() == base.item_classes()

    def test_from_strings(self, theme):
        container, item = selection_classes_from_strings(
            theme, "multiple", "active", "chip", "inline", "lg", "prominent"
        )
        assert "gap-3" in container.split()
        assert "rounded-full" in item.split()
        assert "bg-jupiter-blue-500" in item.split()
        assert "shadow-lg" in item.split()
