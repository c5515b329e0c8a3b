"""
CSS-focused builders.

Builders assemble utility classes directly (variant, size, spacing)
rather than from semantic intent. Each has an entry function, typed and
string setters and a ``*_classes_from_strings`` one-shot helper for
template code.

Usage:
    from classforge.builders import button_styles, interactive_input

    button_styles(theme).primary().large().full_width().classes()
    interactive_input(theme).standard_style().hover().border_primary().build()
"""

from .button import (
    ButtonState,
    ButtonStyles,
    ButtonVariant,
    button_classes_from_strings,
    button_styles,
    parse_button_state,
    parse_variant,
)
from .card import CardStyles, card_classes_from_strings, card_styles
from .interactive import (
    ActiveBuilder,
    ButtonBuilder,
    DisabledBuilder,
    FocusBuilder,
    HoverBuilder,
    InputBuilder,
    InteractiveBase,
    interactive_button,
    interactive_element,
    interactive_input,
)
from .layout import (
    LayoutStyles,
    card_content_styles,
    card_footer_styles,
    card_header_styles,
    layout_classes_from_strings,
    layout_styles,
)
from .product import (
    ProductStyles,
    featured_product_styles,
    product_classes_from_strings,
    product_preview_styles,
    product_showcase_styles,
    product_styles,
    product_tile_styles,
)
from .selection import (
    SelectionStyles,
    chip_selection_styles,
    filter_selection_styles,
    selection_classes_from_strings,
    selection_styles,
    tab_selection_styles,
)
from .state import (
    StateStyles,
    empty_state_styles,
    error_state_styles,
    loading_state_styles,
    state_classes_from_strings,
    state_styles,
    success_state_styles,
)
from .text import (
    TextStyles,
    text_clamp_style,
    text_classes_from_strings,
    text_element_from_hierarchy,
    text_styles,
)

__all__ = [
    # Button
    "ButtonState",
    "ButtonStyles",
    "ButtonVariant",
    "button_classes_from_strings",
    "button_styles",
    "parse_button_state",
    "parse_variant",
    # Card
    "CardStyles",
    "card_classes_from_strings",
    "card_styles",
    # Interactive
    "ActiveBuilder",
    "ButtonBuilder",
    "DisabledBuilder",
    "FocusBuilder",
    "HoverBuilder",
    "InputBuilder",
    "InteractiveBase",
    "interactive_button",
    "interactive_element",
    "interactive_input",
    # Layout
    "LayoutStyles",
    "card_content_styles",
    "card_footer_styles",
    "card_header_styles",
    "layout_classes_from_strings",
    "layout_styles",
    # Product
    "ProductStyles",
    "featured_product_styles",
    "product_classes_from_strings",
    "product_preview_styles",
    "product_showcase_styles",
    "product_styles",
    "product_tile_styles",
    # Selection
    "SelectionStyles",
    "chip_selection_styles",
    "filter_selection_styles",
    "selection_classes_from_strings",
    "selection_styles",
    "tab_selection_styles",
    # State
    "StateStyles",
    "empty_state_styles",
    "error_state_styles",
    "loading_state_styles",
    "state_classes_from_strings",
    "state_styles",
    "success_state_styles",
    # Text
    "TextStyles",
    "text_clamp_style",
    "text_classes_from_strings",
    "text_element_from_hierarchy",
    "text_styles",
]
