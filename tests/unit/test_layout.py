"""Tests for card section layouts."""

from classforge.builders import (
    card_content_styles,
    card_footer_styles,
    card_header_styles,
    layout_classes_from_strings,
    layout_styles,
)
from classforge.patterns.layout import (
    LayoutDirection,
    LayoutSpacing,
    card_footer_layout,
    card_header_layout,
    layout,
)


class TestCardSectionLayout:
    def test_header(self, theme):
        assert card_header_layout(theme).classes() == "border-b border-gray-200 p-4"

    def test_footer(self, theme):
        classes = card_footer_layout(theme).classes().split()
        assert "border-t" in classes
        assert "flex-row" in classes
        assert "justify-between" in classes

    def test_spacing_none(self, theme):
        assert layout(theme).card_section().spacing(LayoutSpacing.NONE).classes() == ""

    def test_direction_aliases(self, theme):
        section = layout(theme).card_section().direction_str("column")
        expected = layout(theme).card_section().direction(LayoutDirection.VERTICAL)
        assert section.classes() == expected.classes()

    def test_builder_entry_point(self, theme):
        assert layout(theme).card_header() == card_header_layout(theme)


class TestLayoutStyles:
    def test_matches_pattern_constructors(self, theme):
        assert card_header_styles(theme).classes() == card_header_layout(theme).classes()
        assert card_footer_styles(theme).classes() == card_footer_layout(theme).classes()

    def test_content(self, theme):
        classes = card_content_styles(theme).classes().split()
        assert "space-y-4" in classes
        assert "p-4" in classes

    def test_shortcuts(self, theme):
        classes = (
            layout_styles(theme)
            .divider_left()
            .spacing_xl2()
            .direction_vertical()
            .alignment_evenly()
            .classes()
            .split()
        )
        assert "border-l" in classes
        assert "p-12" in classes
        assert "flex-col" in classes
        assert "justify-evenly" in classes

    def test_invalid_strings_ignored(self, theme):
        base = layout_styles(theme)
        assert base.spacing_str("galactic").divider_str("diagonal").classes() == base.classes()

    def test_from_strings(self, theme):
        classes = layout_classes_from_strings(theme, "bottom", "lg", "row", "center").split()
        assert "border-b" in classes
        assert "p-6" in classes
        assert "flex-row" in classes
        assert "justify-center" in classes

    def test_size_str_maps_to_spacing(self, theme):
        assert layout_styles(theme).size_str("lg").classes() == layout_styles(theme).spacing_lg().classes()
        assert layout_styles(theme).size_str("huge").classes() == layout_styles(theme).classes()
