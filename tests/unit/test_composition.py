"""Tests for composition helpers and ready-made components."""

import pytest

from classforge.builders import button_styles, interactive_input
from classforge.composition import (
    ComponentClasses,
    button_component,
    card_component,
    compose,
    input_component,
    render,
)
from classforge.patterns.card import card_pattern


class TestCompose:
    def test_mixed_sources(self, theme):
        result = compose("p-4", None, card_pattern(theme), button_styles(theme).large())
        tokens = result.split(" ")
        assert tokens == sorted(set(tokens))
        assert "p-4" in tokens
        assert "px-6" in tokens

    def test_render_prefers_build(self, theme):
        builder = interactive_input(theme).standard_style()
        assert render(builder) == builder.build()

    def test_render_pattern(self, theme):
        assert render(card_pattern(theme)) == card_pattern(theme).classes()

    def test_render_none(self):
        assert render(None) == ""

    def test_render_unknown_type(self):
        with pytest.raises(TypeError):
            render(42)  # type: ignore[arg-type]

    def test_empty(self):
        assert compose() == ""


class TestComponents:
    def test_button_component(self, theme):
        component = button_component(theme, intent="danger", full_width=True, custom="mt-2")
        tokens = component.classes.split()
        assert "bg-red-500" in tokens
        assert "w-full" in tokens
        assert "mt-2" in tokens
        assert component.attributes["type"] == "button"
        assert component.attributes["role"] == "button"

    def test_button_component_loading(self, theme):
        component = button_component(theme, disabled=True, loading=True)
        assert component.attributes["aria-busy"] == "true"
        assert component.attributes["aria-disabled"] == "true"
        assert "cursor-wait" in component.classes.split()

    def test_card_component(self, theme):
        component = card_component(theme, elevation="floating", interaction="select", selected=True)
        assert "shadow-lg" in component.classes.split()
        assert component.attributes["role"] == "option"
        assert component.attributes["aria-selected"] == "true"

    def test_input_component(self, theme):
        component = input_component(theme)
        assert component.classes.count("focus:") == 1
        assert "ring-jupiter-blue-300" in component.classes
        assert component.attributes == {}

    def test_input_component_invalid(self, theme):
        component = input_component(theme, invalid=True, disabled=True)
        assert "ring-red-300" in component.classes
        assert component.attributes == {"aria-invalid": "true", "aria-disabled": "true"}

    def test_str(self):
        assert str(ComponentClasses("a b")) == "a b"
