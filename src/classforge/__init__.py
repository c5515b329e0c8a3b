"""
classforge - design-token-driven utility CSS class generation.

Describe an element by intent ("primary button", "page title", "floating
card"), pass a theme, and get back one deduplicated, sorted class string.

Usage:
    from classforge import get_theme, primary_button, card_styles

    theme = get_theme("jupiter")
    primary_button(theme).loading().classes()
    card_styles(theme).raised_elevation().clickable_interaction().classes()
"""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _metadata_version

from .builders import (
    ButtonStyles,
    CardStyles,
    LayoutStyles,
    ProductStyles,
    SelectionStyles,
    StateStyles,
    TextStyles,
    button_classes_from_strings,
    button_styles,
    card_classes_from_strings,
    card_styles,
    interactive_button,
    interactive_input,
    layout_classes_from_strings,
    layout_styles,
    product_classes_from_strings,
    product_styles,
    selection_classes_from_strings,
    selection_styles,
    state_classes_from_strings,
    state_styles,
    text_classes_from_strings,
    text_styles,
)
from .builders import interactive_element as interactive_builder
from .cache import ClassCache
from .canonical import canonicalize, expand_variant_groups, merge_classes, split_classes
from .colors import Color, ColorProvider
from .composition import (
    ComponentClasses,
    button_component,
    card_component,
    compose,
    input_component,
)
from .errors import ClassforgeError, ThemeError
from .patterns import (
    ButtonPattern,
    CardPattern,
    TypographyPattern,
    button_pattern,
    card_pattern,
    primary_button,
    secondary_button,
    title_typography,
)
from .themes import Palette, Theme, default_theme, get_theme, list_themes, resolve_theme
from .tokens import Size


def _get_version() -> str:
    try:
        return _metadata_version("classforge")
    except PackageNotFoundError:
        return "0.0.0"


__version__ = _get_version()

__all__ = [
    "__version__",
    # Core
    "Color",
    "ColorProvider",
    "Size",
    "canonicalize",
    "expand_variant_groups",
    "merge_classes",
    "split_classes",
    # Errors
    "ClassforgeError",
    "ThemeError",
    # Themes
    "Palette",
    "Theme",
    "default_theme",
    "get_theme",
    "list_themes",
    "resolve_theme",
    # Patterns
    "ButtonPattern",
    "CardPattern",
    "TypographyPattern",
    "button_pattern",
    "card_pattern",
    "primary_button",
    "secondary_button",
    "title_typography",
    # Builders
    "ButtonStyles",
    "CardStyles",
    "LayoutStyles",
    "ProductStyles",
    "SelectionStyles",
    "StateStyles",
    "TextStyles",
    "button_classes_from_strings",
    "button_styles",
    "card_classes_from_strings",
    "card_styles",
    "interactive_builder",
    "interactive_button",
    "interactive_input",
    "layout_classes_from_strings",
    "layout_styles",
    "product_classes_from_strings",
    "product_styles",
    "selection_classes_from_strings",
    "selection_styles",
    "state_classes_from_strings",
    "state_styles",
    "text_classes_from_strings",
    "text_styles",
    # Composition
    "ClassCache",
    "ComponentClasses",
    "button_component",
    "card_component",
    "compose",
    "input_component",
]
