"""Tests for the product card pattern and the product styles builder."""

from classforge.builders import (
    featured_product_styles,
    product_classes_from_strings,
    product_preview_styles,
    product_showcase_styles,
    product_styles,
    product_tile_styles,
)
from classforge.patterns.product import (
    ProductAction,
    ProductAvailability,
    ProductBadgeType,
    ProductDisplay,
    ProductInfoSection,
    ProductProminence,
    ProductVariantDisplay,
    product_card_pattern,
)


class TestProductCardPattern:
    def test_default(self, theme):
        assert product_card_pattern(theme).classes() == "bg-white product-card product-card--list"

    def test_modifiers(self, theme):
        pattern = (
            product_card_pattern(theme)
            .display(ProductDisplay.TILE)
            .availability(ProductAvailability.OUT_OF_STOCK)
            .prominence(ProductProminence.HERO)
        )
        assert pattern.modifiers() == [
            "product-card--tile",
            "product-card--out-of-stock",
            "product-card--hero",
        ]

    def test_unavailable_uses_disabled_text(self, theme):
        pattern = product_card_pattern(theme).availability(ProductAvailability.DISCONTINUED)
        classes = pattern.classes().split()
        assert "text-gray-300" in classes
        assert "bg-white" not in classes

    def test_prominence_colors(self, theme):
        hero = product_card_pattern(theme).prominence(ProductProminence.HERO)
        assert "bg-jupiter-blue-500" in hero.classes().split()
        prominent = product_card_pattern(theme).prominence(ProductProminence.PROMINENT)
        assert "bg-jupiter-green-500" in prominent.classes().split()

    def test_actions_deduplicated(self, theme):
        pattern = (
            product_card_pattern(theme)
            .action(ProductAction.WISHLIST)
            .action(ProductAction.ADD_TO_CART)
            .action(ProductAction.WISHLIST)
        )
        assert pattern.current_actions == (ProductAction.ADD_TO_CART, ProductAction.WISHLIST)

    def test_badges(self, theme):
        pattern = (
            product_card_pattern(theme)
            .badge(ProductBadgeType.SALE)
            .badge(ProductBadgeType.SALE)
            .badge(ProductBadgeType.CUSTOM, "Eco")
            .badge(ProductBadgeType.CUSTOM, "Local")
        )
        assert pattern.semantic_info().badge_labels == ("sale", "Eco", "Local")

    def test_purchasable(self, theme):
        assert product_card_pattern(theme).semantic_info().is_purchasable
        sold_out = product_card_pattern(theme).availability_str("sold-out")
        assert not sold_out.semantic_info().is_purchasable
        no_cart = product_card_pattern(theme).actions(ProductAction.QUICK_VIEW)
        assert not no_cart.semantic_info().is_purchasable

    def test_variants(self, theme):
        pattern = product_card_pattern(theme).variant_display(ProductVariantDisplay.SWATCHES)
        assert pattern.semantic_info().has_variants

    def test_invalid_strings_ignored(self, theme):
        base = product_card_pattern(theme)
        assert base.display_str("carousel").prominence_str("loud").classes() == base.classes()


class TestProductStyles:
    def test_classes_match_pattern(self, theme):
        assert product_styles(theme).classes() == product_card_pattern(theme).classes()

    def test_container(self, theme):
        classes = product_tile_styles(theme).container_classes().split()
        assert "product-card--tile" in classes
        assert "p-3" in classes
        assert "space-y-2" in classes

    def test_image(self, theme):
        classes = product_showcase_styles(theme).square_image().image_classes().split()
        assert classes == ["aspect-square", "h-80", "product-image", "w-80"]

    def test_actions_gap(self, theme):
        assert "gap-2" in product_tile_styles(theme).actions_classes().split()
        assert "gap-1" in product_preview_styles(theme).actions_classes().split()
        assert "gap-3" in featured_product_styles(theme).actions_classes().split()

    def test_badges_classes(self, theme):
        classes = product_styles(theme).badges_classes().split()
        assert "product-badges" in classes
        assert "absolute" in classes

    def test_info_sections_replaced(self, theme):
        styles = product_styles(theme).detailed_info().minimal_info()
        assert styles.pattern.info_section_list == (ProductInfoSection.MINIMAL,)

    def test_custom_badge(self, theme):
        styles = product_styles(theme).custom_badge("Vegan")
        assert styles.pattern.semantic_info().badge_labels == ("Vegan",)

    def test_custom_class(self, theme):
        assert "shadow-md" in product_styles(theme).custom_class("shadow-md").classes().split()

    def test_from_strings(self, theme):
        classes = product_classes_from_strings(theme, "featured", "limited", "prominent").split()
        assert "product-card--featured" in classes
        assert "product-card--limited" in classes
        assert "product-card--prominent" in classes

    def test_size_str_maps_to_prominence(self, theme):
        assert product_styles(theme).size_str("xl") == product_styles(theme).hero()
        assert product_styles(theme).size_str("sm") == product_styles(theme).subtle()
        assert product_styles(theme).size_str("gigantic") == product_styles(theme)
