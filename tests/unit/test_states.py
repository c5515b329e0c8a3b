"""Tests for the state pattern and the state styles builder."""

import pytest

from classforge.builders import (
    empty_state_styles,
    error_state_styles,
    loading_state_styles,
    state_classes_from_strings,
    state_styles,
)
from classforge.patterns.states import (
    ActionRequirement,
    StateIntent,
    empty_state,
    error_state,
    loading_state,
    state_pattern,
    warning_state,
)


class TestStatePattern:
    def test_default(self, theme):
        classes = state_pattern(theme).classes().split()
        assert "state-pattern" in classes
        assert "items-center" in classes
        assert "px-8" in classes
        assert "py-16" in classes
        assert "bg-gray-50" in classes

    @pytest.mark.parametrize(
        "intent,token",
        [
            (StateIntent.SUCCESS, "text-green-600"),
            (StateIntent.WARNING, "text-orange-600"),
            (StateIntent.ERROR, "text-red-600"),
            (StateIntent.LOADING, "text-jupiter-blue-500"),
            (StateIntent.EMPTY, "text-gray-600"),
        ],
    )
    def test_intent_colors(self, theme, intent, token):
        assert token in state_pattern(theme).intent(intent).classes().split()

    def test_loading_animation(self, theme):
        assert "animate-spin" in loading_state(theme).classes().split()

    def test_fullscreen(self, theme):
        classes = state_pattern(theme).fullscreen().classes().split()
        assert "min-h-screen" in classes

    def test_suggested_icon_and_action(self, theme):
        assert error_state(theme).suggested_icon() == "alert-circle"
        assert error_state(theme).suggested_action_text() == "Try Again"
        assert empty_state(theme).suggested_action_text() == "Refresh"
        assert loading_state(theme).suggested_action_text() is None

    def test_semantic_info(self, theme):
        info = warning_state(theme).required_action().semantic_info()
        assert info.requires_action
        assert info.is_interactive
        assert info.action_requirement is ActionRequirement.REQUIRED
        assert not loading_state(theme).semantic_info().is_interactive

    def test_intent_alias(self, theme):
        assert state_pattern(theme).intent_str("info").current_intent is StateIntent.INFORMATIONAL

    def test_invalid_strings_ignored(self, theme):
        base = state_pattern(theme)
        assert base.size_str("enormous").intent_str("confused").classes() == base.classes()


class TestStateStyles:
    def test_spinner_indicator(self, theme):
        classes = loading_state_styles(theme).classes().split()
        assert "animate-spin" in classes
        assert "border-t-transparent" in classes
        assert "rounded-full" in classes

    def test_sizes(self, theme):
        styles = state_styles(theme).lg()
        assert styles.content_size_classes() == "text-3xl"
        assert styles.description_size_classes() == "text-xl"
        assert styles.icon_size_classes() == "h-20 w-20"

    def test_loading_sizes(self, theme):
        assert loading_state_styles(theme).xs().loading_size_classes() == "h-6 w-6"
        assert state_styles(theme).dots().xl().loading_size_classes() == "h-6 w-6"
        assert state_styles(theme).loading_size_classes() == "h-8 w-8"

    def test_suggestions_pass_through(self, theme):
        assert empty_state_styles(theme).suggested_icon() == "inbox"
        assert error_state_styles(theme).suggested_action_text() == "Try Again"

    def test_custom_classes(self, theme):
        assert "shadow-inner" in state_styles(theme).custom_classes("shadow-inner").classes().split()

    def test_from_strings(self, theme):
        classes = state_classes_from_strings(
            theme, "loading", size="sm", alignment="left", loading_variant="dots"
        ).split()
        assert "animate-bounce" in classes
        assert "items-start" in classes
        assert "px-6" in classes

    def test_from_strings_unknown_values(self, theme):
        assert state_classes_from_strings(theme, "mystery", size="huge") == state_styles(
            theme
        ).classes()
