"""Tests for the card pattern and the card styles builder."""

import re

import pytest

from classforge.builders import card_classes_from_strings, card_styles
from classforge.patterns.card import (
    CardElevation,
    CardInteraction,
    card_pattern,
    content_card,
    glass_card,
    hero_card,
    interactive_card,
)


class TestCardPattern:
    def test_default(self, theme):
        classes = card_pattern(theme).classes().split()
        for token in ("rounded-lg", "border", "shadow-sm", "p-5", "bg-white", "border-gray-200"):
            assert token in classes
        assert not any(c.startswith("hover:") for c in classes)

    def test_hover_elevation_replaces_interaction_shadow(self, theme):
        classes = card_pattern(theme).raised_elevation().clickable_interaction().classes().split()
        assert "hover:shadow-lg" in classes
        assert "hover:shadow-md" not in classes
        assert [c for c in classes if c.startswith("hover:shadow-")] == ["hover:shadow-lg"]

    def test_clickable_is_focusable(self, theme):
        classes = card_pattern(theme).clickable_interaction().classes().split()
        assert "focus:ring-jupiter-blue-300" in classes
        assert "cursor-pointer" in classes

    @pytest.mark.parametrize(
        "interaction", [CardInteraction.CLICKABLE, CardInteraction.SELECTABLE, CardInteraction.DRAGGABLE]
    )
    def test_one_focus_ring(self, theme, interaction):
        classes = card_pattern(theme).interaction(interaction).classes().split()
        widths = [c for c in classes if re.fullmatch(r"focus:ring-\d+", c)]
        assert widths == ["focus:ring-2"]

    def test_static_card_not_focusable(self, theme):
        assert not any(c.startswith("focus:") for c in content_card(theme).classes().split())

    def test_selected_ring(self, theme):
        classes = card_pattern(theme).selected().classes().split()
        assert "ring-2" in classes
        assert "ring-jupiter-blue-300" in classes

    def test_order_independent(self, theme):
        a = card_pattern(theme).floating_elevation().hoverable_interaction().glass_surface()
        b = card_pattern(theme).glass_surface().hoverable_interaction().floating_elevation()
        assert a.classes() == b.classes()

    @pytest.mark.parametrize("value", ["high", "floating", "FLOATING"])
    def test_elevation_aliases(self, theme, value):
        assert card_pattern(theme).elevation_str(value).semantic_info().elevation is (
            CardElevation.FLOATING
        )

    def test_invalid_strings_ignored(self, theme):
        base = card_pattern(theme)
        assert base.elevation_str("sky-high").spacing_str("roomy").classes() == base.classes()

    def test_accessibility_attributes(self, theme):
        assert interactive_card(theme).accessibility_attributes()["role"] == "button"
        selectable = card_pattern(theme).selectable_interaction().selected()
        attrs = selectable.accessibility_attributes()
        assert attrs["role"] == "option"
        assert attrs["aria-selected"] == "true"
        assert content_card(theme).accessibility_attributes() == {}

    def test_constructors(self, theme):
        assert "shadow-2xl" in hero_card(theme).classes().split()
        assert "backdrop-blur-md" in glass_card(theme).classes().split()
        info = interactive_card(theme).semantic_info()
        assert info.interaction is CardInteraction.CLICKABLE
        assert info.is_interactive


class TestCardStyles:
    def test_default(self, theme):
        classes = card_styles(theme).classes().split()
        assert "shadow-sm" in classes
        assert "p-5" in classes

    def test_hover_lift(self, theme):
        classes = card_styles(theme).subtle_elevation().hoverable_interaction().classes().split()
        assert "hover:shadow-md" in classes
        assert "hover:shadow-sm" not in classes

    def test_from_strings(self, theme):
        classes = card_classes_from_strings(theme, "white", "high", "lg", "click", selected=True)
        tokens = classes.split()
        assert "shadow-lg" in tokens
        assert "p-6" in tokens
        assert "cursor-pointer" in tokens
        assert "ring-jupiter-blue-300" in tokens

    def test_custom(self, theme):
        assert "max-w-md" in card_styles(theme).custom_classes("max-w-md").classes().split()

    @pytest.mark.parametrize("size,padding", [("sm", "p-3"), ("md", "p-5"), ("lg", "p-6"), ("xl", "p-8")])
    def test_size_str_sets_padding(self, theme, size, padding):
        tokens = card_styles(theme).size_str(size).classes().split()
        assert padding in tokens
        assert len([t for t in tokens if re.fullmatch(r"p-\d+", t)]) == 1
