"""
Product styling builder.

Besides the card classes it renders classes for the card's regions:
container, image, info block, action row and badge stack.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from classforge.canonical import canonicalize
from classforge.colors import ColorProvider
from classforge.fluent import Fluent, split_custom
from classforge.patterns.product import (
    ProductAction,
    ProductAvailability,
    ProductBadgeType,
    ProductCardPattern,
    ProductDisplay,
    ProductImage,
    ProductInfoSection,
    ProductInteractionState,
    ProductPrice,
    ProductProminence,
    ProductVariantDisplay,
)
from classforge.tokens import Size, parse_size

ACTION_GAPS: dict[ProductDisplay, str] = {
    ProductDisplay.TILE: "gap-2",
    ProductDisplay.PREVIEW: "gap-1",
}
DEFAULT_ACTION_GAP = "gap-3"

SIZE_PROMINENCE: dict[Size, ProductProminence] = {
    Size.XSMALL: ProductProminence.SUBTLE,
    Size.SMALL: ProductProminence.SUBTLE,
    Size.MEDIUM: ProductProminence.STANDARD,
    Size.LARGE: ProductProminence.PROMINENT,
    Size.XLARGE: ProductProminence.HERO,
}

BADGE_STACK = "absolute top-2 right-2 flex flex-col gap-1"


@dataclass(frozen=True)
class ProductStyles(Fluent):
    pattern: ProductCardPattern
    _custom: tuple[str, ...] = ()

    def _pattern(self, pattern: ProductCardPattern) -> ProductStyles:
        return self._with(pattern=pattern)

    # Display

    def list_item(self) -> ProductStyles:
        return self._pattern(self.pattern.display(ProductDisplay.LIST_ITEM))

    def featured(self) -> ProductStyles:
        return self._pattern(self.pattern.display(ProductDisplay.FEATURED))

    def tile(self) -> ProductStyles:
        return self._pattern(self.pattern.display(ProductDisplay.TILE))

    def showcase(self) -> ProductStyles:
        return self._pattern(self.pattern.display(ProductDisplay.SHOWCASE))

    def preview(self) -> ProductStyles:
        return self._pattern(self.pattern.display(ProductDisplay.PREVIEW))

    # Interaction state

    def focused(self) -> ProductStyles:
        return self._pattern(self.pattern.interaction_state(ProductInteractionState.FOCUSED))

    def selected(self) -> ProductStyles:
        return self._pattern(self.pattern.interaction_state(ProductInteractionState.SELECTED))

    def loading(self) -> ProductStyles:
        return self._pattern(self.pattern.interaction_state(ProductInteractionState.LOADING))

    def disabled(self) -> ProductStyles:
        return self._pattern(self.pattern.interaction_state(ProductInteractionState.DISABLED))

    # Availability

    def available(self) -> ProductStyles:
        return self._pattern(self.pattern.availability(ProductAvailability.AVAILABLE))

    def out_of_stock(self) -> ProductStyles:
        return self._pattern(self.pattern.availability(ProductAvailability.OUT_OF_STOCK))

    def backorder(self) -> ProductStyles:
        return self._pattern(self.pattern.availability(ProductAvailability.BACKORDER))

    def discontinued(self) -> ProductStyles:
        return self._pattern(self.pattern.availability(ProductAvailability.DISCONTINUED))

    def limited(self) -> ProductStyles:
        return self._pattern(self.pattern.availability(ProductAvailability.LIMITED))

    # Prominence

    def subtle(self) -> ProductStyles:
        return self._pattern(self.pattern.prominence(ProductProminence.SUBTLE))

    def standard(self) -> ProductStyles:
        return self._pattern(self.pattern.prominence(ProductProminence.STANDARD))

    def prominent(self) -> ProductStyles:
        return self._pattern(self.pattern.prominence(ProductProminence.PROMINENT))

    def hero(self) -> ProductStyles:
        return self._pattern(self.pattern.prominence(ProductProminence.HERO))

    # Image

    def standard_image(self) -> ProductStyles:
        return self._pattern(self.pattern.image(ProductImage.STANDARD))

    def square_image(self) -> ProductStyles:
        return self._pattern(self.pattern.image(ProductImage.SQUARE))

    def wide_image(self) -> ProductStyles:
        return self._pattern(self.pattern.image(ProductImage.WIDE))

    def portrait_image(self) -> ProductStyles:
        return self._pattern(self.pattern.image(ProductImage.PORTRAIT))

    def circle_image(self) -> ProductStyles:
        return self._pattern(self.pattern.image(ProductImage.CIRCLE))

    # Info sections

    def basic_info(self) -> ProductStyles:
        return self._pattern(self.pattern.info_sections(ProductInfoSection.BASIC))

    def extended_info(self) -> ProductStyles:
        return self._pattern(self.pattern.info_sections(ProductInfoSection.EXTENDED))

    def detailed_info(self) -> ProductStyles:
        return self._pattern(self.pattern.info_sections(ProductInfoSection.DETAILED))

    def minimal_info(self) -> ProductStyles:
        return self._pattern(self.pattern.info_sections(ProductInfoSection.MINIMAL))

    # Price

    def standard_price(self) -> ProductStyles:
        return self._pattern(self.pattern.price(ProductPrice.STANDARD))

    def price_with_compare(self) -> ProductStyles:
        return self._pattern(self.pattern.price(ProductPrice.WITH_COMPARE))

    def price_range(self) -> ProductStyles:
        return self._pattern(self.pattern.price(ProductPrice.RANGE))

    def price_with_discount(self) -> ProductStyles:
        return self._pattern(self.pattern.price(ProductPrice.WITH_DISCOUNT))

    def price_on_sale(self) -> ProductStyles:
        return self._pattern(self.pattern.price(ProductPrice.ON_SALE))

    # Actions

    def add_to_cart_action(self) -> ProductStyles:
        return self._pattern(self.pattern.action(ProductAction.ADD_TO_CART))

    def quick_view_action(self) -> ProductStyles:
        return self._pattern(self.pattern.action(ProductAction.QUICK_VIEW))

    def compare_action(self) -> ProductStyles:
        return self._pattern(self.pattern.action(ProductAction.COMPARE))

    def wishlist_action(self) -> ProductStyles:
        return self._pattern(self.pattern.action(ProductAction.WISHLIST))

    def share_action(self) -> ProductStyles:
        return self._pattern(self.pattern.action(ProductAction.SHARE))

    def view_details_action(self) -> ProductStyles:
        return self._pattern(self.pattern.action(ProductAction.VIEW_DETAILS))

    # Badges

    def sale_badge(self) -> ProductStyles:
        return self._pattern(self.pattern.badge(ProductBadgeType.SALE))

    def new_badge(self) -> ProductStyles:
        return self._pattern(self.pattern.badge(ProductBadgeType.NEW))

    def featured_badge(self) -> ProductStyles:
        return self._pattern(self.pattern.badge(ProductBadgeType.FEATURED))

    def best_seller_badge(self) -> ProductStyles:
        return self._pattern(self.pattern.badge(ProductBadgeType.BEST_SELLER))

    def limited_badge(self) -> ProductStyles:
        return self._pattern(self.pattern.badge(ProductBadgeType.LIMITED))

    def out_of_stock_badge(self) -> ProductStyles:
        return self._pattern(self.pattern.badge(ProductBadgeType.OUT_OF_STOCK))

    def custom_badge(self, text: str) -> ProductStyles:
        return self._pattern(self.pattern.badge(ProductBadgeType.CUSTOM, text))

    # Variants

    def dropdown_variants(self) -> ProductStyles:
        return self._pattern(self.pattern.variant_display(ProductVariantDisplay.DROPDOWN))

    def button_variants(self) -> ProductStyles:
        return self._pattern(self.pattern.variant_display(ProductVariantDisplay.BUTTONS))

    def swatch_variants(self) -> ProductStyles:
        return self._pattern(self.pattern.variant_display(ProductVariantDisplay.SWATCHES))

    def list_variants(self) -> ProductStyles:
        return self._pattern(self.pattern.variant_display(ProductVariantDisplay.LIST))

    def radio_variants(self) -> ProductStyles:
        return self._pattern(self.pattern.variant_display(ProductVariantDisplay.RADIO))

    # String setters

    def display_str(self, value: str) -> ProductStyles:
        return self._pattern(self.pattern.display_str(value))

    def availability_str(self, value: str) -> ProductStyles:
        return self._pattern(self.pattern.availability_str(value))

    def prominence_str(self, value: str) -> ProductStyles:
        return self._pattern(self.pattern.prominence_str(value))

    def interaction_state_str(self, value: str) -> ProductStyles:
        return self._pattern(self.pattern.interaction_state_str(value))

    def image_str(self, value: str) -> ProductStyles:
        return self._pattern(self.pattern.image_str(value))

    def price_str(self, value: str) -> ProductStyles:
        return self._pattern(self.pattern.price_str(value))

    def size_str(self, value: str) -> ProductStyles:
        """Size names map onto prominence."""
        parsed = parse_size(value)
        if parsed is None:
            return self
        return self._pattern(self.pattern.prominence(SIZE_PROMINENCE[parsed]))

    def custom_class(self, classes: str | Iterable[str]) -> ProductStyles:
        return self._with(_custom=self._custom + split_custom(classes))

    custom = custom_class

    # Rendering

    def classes(self) -> str:
        return canonicalize([self.pattern.classes(), *self._custom])

    build = classes

    def container_classes(self) -> str:
        return canonicalize(
            [
                self.pattern.classes(),
                self.pattern.suggested_container_padding(),
                self.pattern.suggested_spacing(),
                *self._custom,
            ]
        )

    def image_classes(self) -> str:
        return canonicalize(
            [
                "product-image",
                self.pattern.suggested_image_aspect_ratio(),
                self.pattern.suggested_image_sizes(),
            ]
        )

    def info_classes(self) -> str:
        return canonicalize(["product-info", self.pattern.suggested_spacing()])

    def actions_classes(self) -> str:
        gap = ACTION_GAPS.get(self.pattern.current_display, DEFAULT_ACTION_GAP)
        return canonicalize(["product-actions flex items-center", gap])

    def badges_classes(self) -> str:
        return canonicalize(["product-badges", BADGE_STACK])


def product_styles(theme: ColorProvider) -> ProductStyles:
    return ProductStyles(ProductCardPattern(theme))


def featured_product_styles(theme: ColorProvider) -> ProductStyles:
    return product_styles(theme).featured().prominent()


def product_tile_styles(theme: ColorProvider) -> ProductStyles:
    return product_styles(theme).tile().basic_info()


def product_showcase_styles(theme: ColorProvider) -> ProductStyles:
    return product_styles(theme).showcase().detailed_info()


def product_preview_styles(theme: ColorProvider) -> ProductStyles:
    return product_styles(theme).preview().minimal_info()


def product_classes_from_strings(
    theme: ColorProvider,
    display: str,
    availability: str = "available",
    prominence: str = "standard",
) -> str:
    return (
        product_styles(theme)
        .display_str(display)
        .availability_str(availability)
        .prominence_str(prominence)
        .classes()
    )
