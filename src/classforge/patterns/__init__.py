"""
Semantic design patterns.

Each pattern describes intent (what an element means and how it behaves)
and renders it to canonical utility classes through a theme. Patterns are
immutable; every setter returns a new value.

Usage:
    from classforge.patterns import primary_button, title_typography
    from classforge.themes import default_theme

    theme = default_theme()
    primary_button(theme).loading().classes()
    title_typography(theme).alignment_str("center").classes()
"""

from .actions import (
    ActionContext,
    ActionHierarchy,
    ActionIntent,
    ActionSemantics,
    action_semantics,
    parse_action_hierarchy,
    parse_context,
    parse_intent,
)
from .button import (
    ButtonPattern,
    ButtonSemanticInfo,
    button_link,
    button_pattern,
    destructive_button,
    hero_button,
    navigation_button,
    primary_button,
    secondary_button,
)
from .card import (
    CardElevation,
    CardInteraction,
    CardPattern,
    CardSemanticInfo,
    CardSpacing,
    CardSurface,
    card_pattern,
    content_card,
    glass_card,
    hero_card,
    interactive_card,
    minimal_card,
    parse_card_interaction,
    parse_card_spacing,
    parse_elevation,
    parse_surface,
)
from .focus import (
    FocusBehavior,
    FocusManagement,
    KeyboardPattern,
    ScreenReaderPattern,
    focus_management,
    parse_focus_behavior,
)
from .interactions import (
    InteractionIntensity,
    InteractiveElement,
    InteractiveState,
    interactive_element,
    parse_intensity,
    parse_interactive_state,
)
from .layout import (
    CardSectionLayout,
    LayoutAlignment,
    LayoutBuilder,
    LayoutDirection,
    LayoutDivider,
    LayoutSpacing,
    card_content_layout,
    card_footer_layout,
    card_header_layout,
    layout,
)
from .product import (
    ProductAction,
    ProductAvailability,
    ProductBadge,
    ProductBadgeType,
    ProductCardPattern,
    ProductDisplay,
    ProductImage,
    ProductInfoSection,
    ProductInteractionState,
    ProductPrice,
    ProductProminence,
    ProductSemanticInfo,
    ProductVariantDisplay,
    product_card_pattern,
)
from .selection import (
    SelectionBehavior,
    SelectionDisplay,
    SelectionInteraction,
    SelectionLayout,
    SelectionPattern,
    SelectionSemanticInfo,
    SelectionSize,
    SelectionState,
    card_selection,
    chip_selection,
    filter_selection,
    list_selection,
    selection_pattern,
    tab_selection,
)
from .states import (
    ActionRequirement,
    LoadingVariant,
    StateAlignment,
    StateIntent,
    StatePattern,
    StateProminence,
    StateSemanticInfo,
    StateSize,
    empty_state,
    error_state,
    informational_state,
    loading_state,
    state_pattern,
    success_state,
    warning_state,
)
from .typography import (
    TypographyAlignment,
    TypographyColor,
    TypographyElement,
    TypographyHierarchy,
    TypographyOverflow,
    TypographyPattern,
    TypographySize,
    TypographyWeight,
    body_typography,
    caption_typography,
    code_typography,
    heading_typography,
    title_typography,
    typography_pattern,
)

__all__ = [
    # Actions
    "ActionContext",
    "ActionHierarchy",
    "ActionIntent",
    "ActionSemantics",
    "action_semantics",
    "parse_action_hierarchy",
    "parse_context",
    "parse_intent",
    # Buttons
    "ButtonPattern",
    "ButtonSemanticInfo",
    "button_link",
    "button_pattern",
    "destructive_button",
    "hero_button",
    "navigation_button",
    "primary_button",
    "secondary_button",
    # Cards
    "CardElevation",
    "CardInteraction",
    "CardPattern",
    "CardSemanticInfo",
    "CardSpacing",
    "CardSurface",
    "card_pattern",
    "content_card",
    "glass_card",
    "hero_card",
    "interactive_card",
    "minimal_card",
    "parse_card_interaction",
    "parse_card_spacing",
    "parse_elevation",
    "parse_surface",
    # Focus
    "FocusBehavior",
    "FocusManagement",
    "KeyboardPattern",
    "ScreenReaderPattern",
    "focus_management",
    "parse_focus_behavior",
    # Interactions
    "InteractionIntensity",
    "InteractiveElement",
    "InteractiveState",
    "interactive_element",
    "parse_intensity",
    "parse_interactive_state",
    # Layout
    "CardSectionLayout",
    "LayoutAlignment",
    "LayoutBuilder",
    "LayoutDirection",
    "LayoutDivider",
    "LayoutSpacing",
    "card_content_layout",
    "card_footer_layout",
    "card_header_layout",
    "layout",
    # Products
    "ProductAction",
    "ProductAvailability",
    "ProductBadge",
    "ProductBadgeType",
    "ProductCardPattern",
    "ProductDisplay",
    "ProductImage",
    "ProductInfoSection",
    "ProductInteractionState",
    "ProductPrice",
    "ProductProminence",
    "ProductSemanticInfo",
    "ProductVariantDisplay",
    "product_card_pattern",
    # Selection
    "SelectionBehavior",
    "SelectionDisplay",
    "SelectionInteraction",
    "SelectionLayout",
    "SelectionPattern",
    "SelectionSemanticInfo",
    "SelectionSize",
    "SelectionState",
    "card_selection",
    "chip_selection",
    "filter_selection",
    "list_selection",
    "selection_pattern",
    "tab_selection",
    # States
    "ActionRequirement",
    "LoadingVariant",
    "StateAlignment",
    "StateIntent",
    "StatePattern",
    "StateProminence",
    "StateSemanticInfo",
    "StateSize",
    "empty_state",
    "error_state",
    "informational_state",
    "loading_state",
    "state_pattern",
    "success_state",
    "warning_state",
    # Typography
    "TypographyAlignment",
    "TypographyColor",
    "TypographyElement",
    "TypographyHierarchy",
    "TypographyOverflow",
    "TypographyPattern",
    "TypographySize",
    "TypographyWeight",
    "body_typography",
    "caption_typography",
    "code_typography",
    "heading_typography",
    "title_typography",
    "typography_pattern",
]
