"""Tests for the typography pattern."""

import pytest

from classforge.patterns.typography import (
    TypographyColor,
    TypographyElement,
    TypographyHierarchy,
    TypographySize,
    TypographyWeight,
    body_typography,
    caption_typography,
    code_typography,
    line_clamp_style,
    title_typography,
    typography_pattern,
)


class TestHierarchyDefaults:
    def test_title(self, theme):
        assert (
            title_typography(theme).classes()
            == "font-bold leading-relaxed text-4xl text-gray-900 tracking-tight"
        )

    def test_title_with_custom_primary(self, blue_theme):
        classes = typography_pattern(blue_theme).hierarchy(TypographyHierarchy.TITLE).classes()
        assert "text-4xl" in classes
        assert "font-bold" in classes
        assert "text-base" not in classes

    def test_body(self, theme):
        classes = body_typography(theme).classes().split()
        assert "text-base" in classes
        assert "font-normal" in classes

    def test_caption_uses_secondary_text(self, theme):
        assert "text-gray-600" in caption_typography(theme).classes().split()

    def test_code_has_no_default_weight(self, theme):
        classes = code_typography(theme).classes().split()
        assert "font-mono" in classes
        assert not any(c in classes for c in ("font-normal", "font-bold", "font-medium"))


class TestOverrides:
    def test_size_replaces_default(self, theme):
        classes = title_typography(theme).size(TypographySize.SM).classes().split()
        assert "text-sm" in classes
        assert "text-4xl" not in classes

    def test_weight_replaces_default(self, theme):
        classes = title_typography(theme).weight(TypographyWeight.LIGHT).classes().split()
        assert "font-light" in classes
        assert "font-bold" not in classes

    def test_size_base_alias(self, theme):
        assert "text-base" in title_typography(theme).size_str("base").classes().split()

    def test_explicit_color(self, theme):
        classes = body_typography(theme).color(TypographyColor.PRIMARY).classes().split()
        assert "text-jupiter-blue-500" in classes
        assert "text-gray-900" not in classes

    def test_order_independent(self, theme):
        a = typography_pattern(theme).size(TypographySize.LG).hierarchy(TypographyHierarchy.HEADING)
        b = typography_pattern(theme).hierarchy(TypographyHierarchy.HEADING).size(TypographySize.LG)
        assert a.classes() == b.classes()

    def test_invalid_strings_are_ignored(self, theme):
        base = title_typography(theme)
        configured = base.size_str("huge").weight_str("heavy").color_str("rainbow")
        assert configured.classes() == base.classes()

    def test_truncate(self, theme):
        assert "truncate" in body_typography(theme).truncate().classes().split()

    def test_immutable(self, theme):
        base = body_typography(theme)
        base.truncate()
        assert "truncate" not in base.classes().split()


class TestElements:
    @pytest.mark.parametrize(
        "hierarchy,element",
        [
            (TypographyHierarchy.TITLE, "h1"),
            (TypographyHierarchy.HEADING, "h2"),
            (TypographyHierarchy.SUBHEADING, "h3"),
            (TypographyHierarchy.CAPTION, "span"),
            (TypographyHierarchy.CODE, "code"),
            (TypographyHierarchy.BODY, "p"),
        ],
    )
    def test_auto_element(self, theme, hierarchy, element):
        assert typography_pattern(theme).hierarchy(hierarchy).get_element() == element

    def test_explicit_element(self, theme):
        assert title_typography(theme).element(TypographyElement.DIV).get_element() == "div"


class TestClamp:
    def test_clamp_style(self, theme):
        assert body_typography(theme).clamp_lines(3).clamp_style() == line_clamp_style(3)
        assert "-webkit-line-clamp: 3;" in line_clamp_style(3)

    def test_clamp_minimum_one_line(self, theme):
        assert "-webkit-line-clamp: 1;" in body_typography(theme).clamp_lines(0).clamp_style()

    def test_no_clamp(self, theme):
        assert body_typography(theme).clamp_style() == ""
        assert body_typography(theme).clamp_lines(2).truncate().clamp_style() == ""
