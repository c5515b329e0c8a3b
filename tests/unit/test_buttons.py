"""Tests for the semantic button pattern and the button styles builder."""

import re

import pytest

from classforge.builders import ButtonVariant, button_classes_from_strings, button_styles
from classforge.builders.button import parse_variant
from classforge.patterns.actions import ActionIntent
from classforge.patterns.button import (
    button_link,
    button_pattern,
    destructive_button,
    hero_button,
    navigation_button,
    primary_button,
)
from classforge.tokens import Size


class TestButtonPattern:
    def test_primary_button(self, theme):
        classes = primary_button(theme).classes().split()
        assert "bg-jupiter-blue-500" in classes
        assert "text-white" in classes
        assert "hover:bg-jupiter-blue-600" in classes
        assert "focus:ring-jupiter-blue-300" in classes
        assert "cursor-pointer" in classes

    def test_destructive(self, theme):
        classes = destructive_button(theme).classes().split()
        assert "bg-red-500" in classes
        assert destructive_button(theme).semantic_info().is_destructive

    def test_disabled(self, theme):
        button = primary_button(theme).disabled()
        classes = button.classes().split()
        assert "cursor-not-allowed" in classes
        assert "opacity-50" in classes
        assert button.accessibility_attributes()["aria-disabled"] == "true"

    def test_loading_wins_over_disabled(self, theme):
        a = primary_button(theme).disabled().loading()
        b = primary_button(theme).loading().disabled()
        assert a.classes() == b.classes()
        classes = a.classes().split()
        assert "cursor-wait" in classes
        assert "cursor-not-allowed" not in classes

    def test_accessibility_attributes(self, theme):
        attrs = primary_button(theme).loading().selected().accessibility_attributes()
        assert attrs == {
            "tabindex": "0",
            "role": "button",
            "aria-busy": "true",
            "aria-pressed": "true",
        }

    def test_intent_str(self, theme):
        button = button_pattern(theme).intent_str("danger")
        assert button.semantic_info().action_intent is ActionIntent.DESTRUCTIVE
        assert button_pattern(theme).intent_str("nope") == button_pattern(theme)

    def test_prominence_str(self, theme):
        assert "text-xl" in button_pattern(theme).prominence_str("hero").classes().split()

    def test_standard_prominence_str(self, theme):
        hero = button_pattern(theme).hero_prominence()
        assert hero.prominence_str("standard") == hero.standard_prominence()
        assert hero.prominence_str("standard").classes() != hero.classes()

    def test_constructors(self, theme):
        assert "shadow-lg" in hero_button(theme).classes().split()
        assert "w-full" in navigation_button(theme).classes().split()
        assert button_link(theme).accessibility_attributes()["role"] == "link"

    def test_custom(self, theme):
        assert "uppercase" in primary_button(theme).custom("uppercase").classes().split()


class TestButtonStyles:
    def test_primary_large(self, theme):
        classes = button_styles(theme).variant(ButtonVariant.PRIMARY).size(Size.LARGE).classes()
        tokens = classes.split(" ")
        assert tokens == sorted(tokens)
        assert [t for t in tokens if t.startswith("bg-")] == ["bg-jupiter-blue-500"]
        assert "px-6" in tokens

    def test_state(self, theme):
        assert "cursor-wait" in button_styles(theme).loading().classes().split()
        assert "opacity-50" in button_styles(theme).disabled().classes().split()

    def test_full_width_and_icon(self, theme):
        tokens = button_styles(theme).full_width().with_icon().classes().split()
        assert "w-full" in tokens
        assert "space-x-2" in tokens

    @pytest.mark.parametrize(
        "value,variant",
        [
            ("outline", ButtonVariant.SECONDARY),
            ("danger", ButtonVariant.ERROR),
            ("water", ButtonVariant.PRIMARY),
            ("Ghost", ButtonVariant.GHOST),
            ("bogus", None),
        ],
    )
    def test_parse_variant(self, value, variant):
        assert parse_variant(value) is variant

    def test_invalid_size_is_ignored(self, theme):
        assert button_styles(theme).size_str("bogus").classes() == button_styles(theme).classes()

    def test_from_strings(self, theme):
        classes = button_classes_from_strings(theme, "danger", "sm", disabled=True, loading=True)
        tokens = classes.split()
        assert "bg-red-500" in tokens
        assert "px-3" in tokens
        assert "cursor-wait" in tokens
        assert "opacity-50" not in tokens

    def test_theme_drives_colors(self, jupiter):
        assert "bg-jupiter-orange-500" in button_styles(jupiter).primary().classes().split()


def _focus_ring_widths(classes: str) -> list[str]:
    return [c for c in classes.split() if re.fullmatch(r"focus:ring-\d+", c)]


class TestButtonFocus:
    """Focus management alone decides the focus ring."""

    @pytest.mark.parametrize(
        "factory,width",
        [
            (primary_button, "focus:ring-2"),
            (hero_button, "focus:ring-4"),
            (navigation_button, "focus:ring-1"),
            (lambda theme: primary_button(theme).subtle_focus(), "focus:ring-1"),
        ],
    )
    def test_single_ring_width(self, theme, factory, width):
        assert _focus_ring_widths(factory(theme).classes()) == [width]

    def test_subtle_ring_color_only(self, theme):
        classes = navigation_button(theme).classes().split()
        assert "focus:ring-gray-200" in classes
        assert "focus:ring-jupiter-blue-300" not in classes
        assert [c for c in classes if c.startswith("focus:ring-offset-")] == ["focus:ring-offset-1"]
