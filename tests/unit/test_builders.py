"""
Cross-cutting builder behavior: determinism, order independence,
graceful degradation of string setters and pseudo-class sub-builders.
"""

import pytest

from classforge.builders import (
    ButtonVariant,
    button_styles,
    card_styles,
    interactive_button,
    interactive_element,
    interactive_input,
    layout_styles,
    product_styles,
    selection_styles,
    state_styles,
    text_classes_from_strings,
    text_clamp_style,
    text_element_from_hierarchy,
    text_styles,
)
from classforge.patterns.typography import TypographyHierarchy, typography_pattern
from classforge.tokens import Size

BUILDER_FACTORIES = [
    button_styles,
    card_styles,
    layout_styles,
    product_styles,
    selection_styles,
    state_styles,
    text_styles,
]


class TestRenderingContract:
    def test_title_under_custom_theme(self, blue_theme):
        classes = typography_pattern(blue_theme).hierarchy(TypographyHierarchy.TITLE).classes()
        assert "text-4xl" in classes
        assert "font-bold" in classes
        assert "text-base" not in classes

    def test_primary_large_button(self, blue_theme):
        classes = button_styles(blue_theme).variant(ButtonVariant.PRIMARY).size(Size.LARGE).classes()
        tokens = classes.split(" ")
        assert tokens == sorted(tokens)
        assert len([t for t in tokens if t.startswith("bg-")]) == 1

    def test_input_groups_each_state_once(self, theme):
        classes = (
            interactive_input(theme)
            .standard_style()
            .hover()
            .border_primary()
            .focus()
            .ring_primary()
            .build()
        )
        assert classes.count("hover:") == 1
        assert classes.count("focus:") == 1
        tokens = classes.split(" ")
        assert "hover:(border-jupiter-blue-500)" in tokens
        assert "focus:(ring-2 ring-jupiter-blue-300 ring-offset-2)" in tokens

    @pytest.mark.parametrize("factory", BUILDER_FACTORIES)
    def test_invalid_size_is_a_no_op(self, theme, factory):
        builder = factory(theme)
        assert builder.size_str("invalid").build() == builder.build()

    @pytest.mark.parametrize("factory", BUILDER_FACTORIES)
    def test_deterministic(self, theme, factory):
        builder = factory(theme)
        assert builder.build() == builder.build()
        assert factory(theme).build() == builder.build()

    @pytest.mark.parametrize("factory", BUILDER_FACTORIES)
    def test_canonical_output(self, theme, factory):
        tokens = factory(theme).build().split(" ")
        assert tokens == sorted(set(tokens))

    def test_order_independence(self, theme):
        a = button_styles(theme).large().ghost().full_width().disabled()
        b = button_styles(theme).disabled().full_width().ghost().large()
        assert a.classes() == b.classes()


class TestInteractiveBuilders:
    def test_call_order_does_not_matter(self, theme):
        a = (
            interactive_element(theme)
            .base("p-2")
            .hover()
            .scale_105()
            .focus()
            .outline_none()
            .hover()
            .shadow_md()
            .build()
        )
        b = (
            interactive_element(theme)
            .focus()
            .outline_none()
            .hover()
            .shadow_md()
            .scale_105()
            .base
            .base("p-2")
            .build()
        )
        assert a == b
        assert a == "focus:(outline-none) hover:(scale-105 shadow-md) p-2"

    def test_button_tracks_variant(self, theme):
        builder = interactive_button(theme).primary().ghost().base_classes("mt-2")
        assert builder.current_variant is ButtonVariant.GHOST
        assert interactive_button(theme).current_variant is ButtonVariant.PRIMARY

    def test_preset_replaces(self, theme):
        classes = interactive_button(theme).primary().ghost().build().split()
        assert "bg-transparent" in classes
        assert "bg-jupiter-blue-500" not in classes

    def test_button_states(self, theme):
        classes = (
            interactive_button(theme)
            .primary()
            .hover()
            .darken()
            .active()
            .scale_95()
            .disabled()
            .opacity_50()
            .cursor_not_allowed()
            .build()
        )
        tokens = classes.split(" ")
        assert "hover:(bg-jupiter-blue-600)" in tokens
        assert "active:(scale-95)" in tokens
        assert "disabled:(cursor-not-allowed opacity-50)" in tokens

    def test_state_builder_arbitrary_classes(self, theme):
        classes = interactive_input(theme).base_style().focus().classes("ring-4 ring-red-300").build()
        assert "focus:(ring-4 ring-red-300)" in classes.split(" ")

    def test_empty_states_render_nothing(self, theme):
        assert interactive_element(theme).build() == ""
        assert ":(" not in interactive_input(theme).standard_style().build()

    def test_builders_are_immutable(self, theme):
        base = interactive_input(theme).standard_style()
        base.hover().border_primary()
        assert "hover:" not in base.build()


class TestTextStyles:
    def test_shortcuts(self, theme):
        classes = text_styles(theme).heading().semibold().center().muted().classes().split()
        assert "text-3xl" in classes
        assert "font-semibold" in classes
        assert "font-bold" not in classes
        assert "text-center" in classes
        assert "text-gray-600" in classes

    def test_element(self, theme):
        assert text_styles(theme).subheading().element() == "h3"
        assert text_element_from_hierarchy("title") == "h1"
        assert text_element_from_hierarchy("nonsense") == "p"

    def test_clamp_style(self, theme):
        assert text_styles(theme).clamp_lines(2).clamp_style() == text_clamp_style(2)
        assert text_clamp_style(None) == ""

    def test_from_strings(self, theme):
        classes = text_classes_from_strings(
            theme, "caption", size="lg", weight="bold", alignment="right", truncate=True
        ).split()
        assert "text-lg" in classes
        assert "font-bold" in classes
        assert "text-right" in classes
        assert "truncate" in classes

    def test_from_strings_unknown_hierarchy(self, theme):
        assert text_classes_from_strings(theme, "banner") == text_styles(theme).classes()
