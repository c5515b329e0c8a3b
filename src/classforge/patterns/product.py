"""
Product card pattern for commerce listings.

Class output is BEM-style ``product-card--*`` modifiers plus one theme
color; the layout helpers (image aspect ratio, sizes, padding, spacing)
are suggestions the product builder turns into sub-element classes.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum

from classforge.canonical import canonicalize
from classforge.colors import Color, ColorProvider
from classforge.fluent import Fluent, enum_choices, parse_choice, split_custom


class ProductDisplay(StrEnum):
    LIST_ITEM = "list"
    FEATURED = "featured"
    TILE = "tile"
    SHOWCASE = "showcase"
    PREVIEW = "preview"


class ProductInteractionState(StrEnum):
    DEFAULT = "default"
    FOCUSED = "focused"
    SELECTED = "selected"
    LOADING = "loading"
    DISABLED = "disabled"


class ProductAvailability(StrEnum):
    AVAILABLE = "available"
    OUT_OF_STOCK = "out-of-stock"
    BACKORDER = "backorder"
    DISCONTINUED = "discontinued"
    LIMITED = "limited"


class ProductProminence(StrEnum):
    SUBTLE = "subtle"
    STANDARD = "standard"
    PROMINENT = "prominent"
    HERO = "hero"


class ProductImage(StrEnum):
    STANDARD = "standard"
    SQUARE = "square"
    WIDE = "wide"
    PORTRAIT = "portrait"
    CIRCLE = "circle"


class ProductBadgeType(StrEnum):
    SALE = "sale"
    NEW = "new"
    FEATURED = "featured"
    BEST_SELLER = "best-seller"
    LIMITED = "limited"
    OUT_OF_STOCK = "out-of-stock"
    CUSTOM = "custom"


class ProductAction(StrEnum):
    ADD_TO_CART = "add-to-cart"
    QUICK_VIEW = "quick-view"
    COMPARE = "compare"
    WISHLIST = "wishlist"
    SHARE = "share"
    VIEW_DETAILS = "view-details"


class ProductInfoSection(StrEnum):
    BASIC = "basic"
    EXTENDED = "extended"
    DETAILED = "detailed"
    MINIMAL = "minimal"


class ProductPrice(StrEnum):
    STANDARD = "standard"
    WITH_COMPARE = "with-compare"
    RANGE = "range"
    WITH_DISCOUNT = "with-discount"
    ON_SALE = "on-sale"


class ProductVariantDisplay(StrEnum):
    DROPDOWN = "dropdown"
    BUTTONS = "buttons"
    SWATCHES = "swatches"
    LIST = "list"
    RADIO = "radio"


@dataclass(frozen=True)
class ProductBadge:
    """A badge; ``text`` is only used by custom badges."""

    kind: ProductBadgeType
    text: str = ""

    @property
    def label(self) -> str:
        return self.text if self.kind is ProductBadgeType.CUSTOM else self.kind.value


IMAGE_ASPECT_RATIOS: dict[ProductImage, str] = {
    ProductImage.STANDARD: "aspect-[4/3]",
    ProductImage.SQUARE: "aspect-square",
    ProductImage.WIDE: "aspect-[16/9]",
    ProductImage.PORTRAIT: "aspect-[3/4]",
    ProductImage.CIRCLE: "aspect-square rounded-full",
}

IMAGE_SIZES: dict[ProductDisplay, str] = {
    ProductDisplay.LIST_ITEM: "h-48 w-48",
    ProductDisplay.FEATURED: "h-64 w-64",
    ProductDisplay.TILE: "h-40 w-40",
    ProductDisplay.SHOWCASE: "h-80 w-80",
    ProductDisplay.PREVIEW: "h-32 w-32",
}

CONTAINER_PADDING: dict[ProductDisplay, str] = {
    ProductDisplay.LIST_ITEM: "p-4",
    ProductDisplay.FEATURED: "p-6",
    ProductDisplay.TILE: "p-3",
    ProductDisplay.SHOWCASE: "p-8",
    ProductDisplay.PREVIEW: "p-2",
}

ELEMENT_SPACING: dict[ProductDisplay, str] = {
    ProductDisplay.LIST_ITEM: "space-y-3",
    ProductDisplay.FEATURED: "space-y-4",
    ProductDisplay.TILE: "space-y-2",
    ProductDisplay.SHOWCASE: "space-y-6",
    ProductDisplay.PREVIEW: "space-y-1",
}

# Purchasable availabilities.
_IN_STOCK = (ProductAvailability.AVAILABLE, ProductAvailability.LIMITED, ProductAvailability.BACKORDER)

_DISPLAY_CHOICES = enum_choices(ProductDisplay, list_item=ProductDisplay.LIST_ITEM)
_AVAILABILITY_CHOICES = enum_choices(
    ProductAvailability, sold_out=ProductAvailability.OUT_OF_STOCK
)
_PROMINENCE_CHOICES = enum_choices(ProductProminence)
_INTERACTION_CHOICES = enum_choices(ProductInteractionState)
_IMAGE_CHOICES = enum_choices(ProductImage)
_PRICE_CHOICES = enum_choices(ProductPrice, sale=ProductPrice.ON_SALE)


def parse_product_display(value: str) -> ProductDisplay | None:
    return parse_choice(value, _DISPLAY_CHOICES)


def parse_availability(value: str) -> ProductAvailability | None:
    return parse_choice(value, _AVAILABILITY_CHOICES)


def parse_product_prominence(value: str) -> ProductProminence | None:
    return parse_choice(value, _PROMINENCE_CHOICES)


def parse_product_interaction(value: str) -> ProductInteractionState | None:
    return parse_choice(value, _INTERACTION_CHOICES)


def parse_product_image(value: str) -> ProductImage | None:
    return parse_choice(value, _IMAGE_CHOICES)


def parse_product_price(value: str) -> ProductPrice | None:
    return parse_choice(value, _PRICE_CHOICES)


@dataclass(frozen=True)
class ProductSemanticInfo:
    display: ProductDisplay
    availability: ProductAvailability
    prominence: ProductProminence
    is_purchasable: bool
    has_variants: bool
    actions: tuple[ProductAction, ...]
    badge_labels: tuple[str, ...]


@dataclass(frozen=True)
class ProductCardPattern(Fluent):
    theme: ColorProvider
    _display: ProductDisplay = ProductDisplay.LIST_ITEM
    _interaction_state: ProductInteractionState = ProductInteractionState.DEFAULT
    _availability: ProductAvailability = ProductAvailability.AVAILABLE
    _prominence: ProductProminence = ProductProminence.STANDARD
    _image: ProductImage = ProductImage.STANDARD
    _info_sections: tuple[ProductInfoSection, ...] = (ProductInfoSection.BASIC,)
    _price: ProductPrice = ProductPrice.STANDARD
    _actions: tuple[ProductAction, ...] = (ProductAction.ADD_TO_CART,)
    _badges: tuple[ProductBadge, ...] = ()
    _variant_display: ProductVariantDisplay | None = None
    _custom: tuple[str, ...] = ()

    @property
    def current_display(self) -> ProductDisplay:
        return self._display

    @property
    def current_actions(self) -> tuple[ProductAction, ...]:
        return self._actions

    @property
    def current_badges(self) -> tuple[ProductBadge, ...]:
        return self._badges

    @property
    def info_section_list(self) -> tuple[ProductInfoSection, ...]:
        return self._info_sections

    @property
    def price_display(self) -> ProductPrice:
        return self._price

    @property
    def variant_display_pattern(self) -> ProductVariantDisplay | None:
        return self._variant_display

    # Typed setters

    def display(self, display: ProductDisplay) -> ProductCardPattern:
        return self._with(_display=display)

    def interaction_state(self, state: ProductInteractionState) -> ProductCardPattern:
        return self._with(_interaction_state=state)

    def availability(self, availability: ProductAvailability) -> ProductCardPattern:
        return self._with(_availability=availability)

    def prominence(self, prominence: ProductProminence) -> ProductCardPattern:
        return self._with(_prominence=prominence)

    def image(self, image: ProductImage) -> ProductCardPattern:
        return self._with(_image=image)

    def info_sections(self, *sections: ProductInfoSection) -> ProductCardPattern:
        return self._with(_info_sections=tuple(sections))

    def price(self, price: ProductPrice) -> ProductCardPattern:
        return self._with(_price=price)

    def action(self, action: ProductAction) -> ProductCardPattern:
        """Add an action; adding one twice keeps a single entry."""
        if action in self._actions:
            return self
        return self._with(_actions=self._actions + (action,))

    def actions(self, *actions: ProductAction) -> ProductCardPattern:
        """Replace the action list."""
        return self._with(_actions=tuple(dict.fromkeys(actions)))

    def badge(self, kind: ProductBadgeType, text: str = "") -> ProductCardPattern:
        """Add a badge; built-in badges are kept once, custom badges accumulate."""
        badge = ProductBadge(kind, text if kind is ProductBadgeType.CUSTOM else "")
        if kind is not ProductBadgeType.CUSTOM and badge in self._badges:
            return self
        return self._with(_badges=self._badges + (badge,))

    def variant_display(self, variant: ProductVariantDisplay | None) -> ProductCardPattern:
        return self._with(_variant_display=variant)

    def custom(self, classes: str | Iterable[str]) -> ProductCardPattern:
        return self._with(_custom=self._custom + split_custom(classes))

    # String setters

    def display_str(self, value: str) -> ProductCardPattern:
        parsed = parse_product_display(value)
        return self if parsed is None else self.display(parsed)

    def availability_str(self, value: str) -> ProductCardPattern:
        parsed = parse_availability(value)
        return self if parsed is None else self.availability(parsed)

    def prominence_str(self, value: str) -> ProductCardPattern:
        parsed = parse_product_prominence(value)
        return self if parsed is None else self.prominence(parsed)

    def interaction_state_str(self, value: str) -> ProductCardPattern:
        parsed = parse_product_interaction(value)
        return self if parsed is None else self.interaction_state(parsed)

    def image_str(self, value: str) -> ProductCardPattern:
        parsed = parse_product_image(value)
        return self if parsed is None else self.image(parsed)

    def price_str(self, value: str) -> ProductCardPattern:
        parsed = parse_product_price(value)
        return self if parsed is None else self.price(parsed)

    # Rendering

    def _color_class(self) -> str:
        if self._availability is not ProductAvailability.AVAILABLE:
            return self.theme.text_class(Color.INTERACTIVE_DISABLED)
        match self._prominence:
            case ProductProminence.HERO:
                return self.theme.bg_class(Color.PRIMARY)
            case ProductProminence.PROMINENT:
                return self.theme.bg_class(Color.SECONDARY)
            case _:
                return self.theme.bg_class(Color.SURFACE)

    def modifiers(self) -> list[str]:
        """BEM modifiers for the current configuration."""
        modifiers = [f"product-card--{self._display.value}"]
        if self._interaction_state is not ProductInteractionState.DEFAULT:
            modifiers.append(f"product-card--{self._interaction_state.value}")
        if self._availability is not ProductAvailability.AVAILABLE:
            modifiers.append(f"product-card--{self._availability.value}")
        if self._prominence is not ProductProminence.STANDARD:
            modifiers.append(f"product-card--{self._prominence.value}")
        return modifiers

    def classes(self) -> str:
        return canonicalize(["product-card", *self.modifiers(), self._color_class(), *self._custom])

    def suggested_image_aspect_ratio(self) -> str:
        return IMAGE_ASPECT_RATIOS[self._image]

    def suggested_image_sizes(self) -> str:
        return IMAGE_SIZES[self._display]

    def suggested_container_padding(self) -> str:
        return CONTAINER_PADDING[self._display]

    def suggested_spacing(self) -> str:
        return ELEMENT_SPACING[self._display]

    def semantic_info(self) -> ProductSemanticInfo:
        return ProductSemanticInfo(
            display=self._display,
            availability=self._availability,
            prominence=self._prominence,
            is_purchasable=(
                self._availability in _IN_STOCK
                and self._interaction_state is not ProductInteractionState.DISABLED
                and ProductAction.ADD_TO_CART in self._actions
            ),
            has_variants=self._variant_display is not None,
            actions=self._actions,
            badge_labels=tuple(badge.label for badge in self._badges),
        )


def product_card_pattern(theme: ColorProvider) -> ProductCardPattern:
    return ProductCardPattern(theme)
