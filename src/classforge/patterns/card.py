"""
Card pattern.

Elevation, surface, spacing and interaction for container cards. The
interaction type decides which InteractiveElement and FocusManagement
configuration the card renders with; both are derived at render time so
the order of setter calls never matters.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum

from classforge.canonical import canonicalize, drop_prefixed
from classforge.colors import Color, ColorProvider
from classforge.fluent import Fluent, enum_choices, parse_choice, split_custom

from .focus import FocusManagement
from .interactions import InteractiveElement, InteractiveState

# =============================================================================
# Enums
# =============================================================================


class CardElevation(StrEnum):
    FLAT = "flat"
    SUBTLE = "subtle"
    RAISED = "raised"
    FLOATING = "floating"
    MODAL = "modal"


class CardSurface(StrEnum):
    STANDARD = "standard"
    ELEVATED = "elevated"
    BRANDED = "branded"
    GLASS = "glass"
    DARK = "dark"
    TRANSPARENT = "transparent"


class CardSpacing(StrEnum):
    NONE = "none"
    COMPACT = "compact"
    STANDARD = "standard"
    COMFORTABLE = "comfortable"
    SPACIOUS = "spacious"


class CardInteraction(StrEnum):
    STATIC = "static"
    HOVERABLE = "hoverable"
    CLICKABLE = "clickable"
    SELECTABLE = "selectable"
    DRAGGABLE = "draggable"


ELEVATION_CLASSES: dict[CardElevation, str] = {
    CardElevation.FLAT: "shadow-none",
    CardElevation.SUBTLE: "shadow-sm",
    CardElevation.RAISED: "shadow-md",
    CardElevation.FLOATING: "shadow-lg",
    CardElevation.MODAL: "shadow-2xl",
}

SPACING_CLASSES: dict[CardSpacing, str] = {
    CardSpacing.NONE: "p-0",
    CardSpacing.COMPACT: "p-3",
    CardSpacing.STANDARD: "p-5",
    CardSpacing.COMFORTABLE: "p-6",
    CardSpacing.SPACIOUS: "p-8",
}

HOVER_ELEVATION: dict[CardElevation, str] = {
    CardElevation.SUBTLE: "hover:shadow-md",
    CardElevation.RAISED: "hover:shadow-lg",
    CardElevation.FLOATING: "hover:shadow-xl",
}

# Elevation parsing accepts the builder vocabulary too (low/high/...).
ELEVATION_CHOICES = enum_choices(
    CardElevation,
    none=CardElevation.FLAT,
    low=CardElevation.SUBTLE,
    standard=CardElevation.RAISED,
    high=CardElevation.FLOATING,
    highest=CardElevation.MODAL,
)
SURFACE_CHOICES = enum_choices(
    CardSurface,
    white=CardSurface.STANDARD,
    theme=CardSurface.BRANDED,
    clear=CardSurface.TRANSPARENT,
)
SPACING_CHOICES = enum_choices(
    CardSpacing,
    sm=CardSpacing.COMPACT,
    md=CardSpacing.STANDARD,
    lg=CardSpacing.COMFORTABLE,
    xl=CardSpacing.SPACIOUS,
)
INTERACTION_CHOICES = enum_choices(
    CardInteraction,
    none=CardInteraction.STATIC,
    hover=CardInteraction.HOVERABLE,
    click=CardInteraction.CLICKABLE,
    select=CardInteraction.SELECTABLE,
    drag=CardInteraction.DRAGGABLE,
)


def parse_elevation(value: str) -> CardElevation | None:
    return parse_choice(value, ELEVATION_CHOICES)


def parse_surface(value: str) -> CardSurface | None:
    return parse_choice(value, SURFACE_CHOICES)


def parse_card_spacing(value: str) -> CardSpacing | None:
    return parse_choice(value, SPACING_CHOICES)


def parse_card_interaction(value: str) -> CardInteraction | None:
    return parse_choice(value, INTERACTION_CHOICES)


def surface_classes(theme: ColorProvider, surface: CardSurface, branded: str) -> str:
    """Surface fragments; ``branded`` is the gradient used for BRANDED."""
    match surface:
        case CardSurface.STANDARD:
            return " ".join(
                [
                    theme.bg_class(Color.SURFACE),
                    theme.text_class(Color.TEXT_PRIMARY),
                    theme.border_class(Color.BORDER),
                ]
            )
        case CardSurface.ELEVATED:
            return " ".join(
                [
                    theme.bg_class(Color.BACKGROUND),
                    theme.text_class(Color.TEXT_PRIMARY),
                    theme.border_class(Color.BORDER),
                ]
            )
        case CardSurface.BRANDED:
            return branded
        case CardSurface.GLASS:
            return "bg-white/10 backdrop-blur-md border-white/20 text-white"
        case CardSurface.DARK:
            return "bg-gray-900 border-gray-700 text-white"
        case CardSurface.TRANSPARENT:
            return "bg-transparent border-transparent"


BRANDED_SURFACE = (
    "bg-gradient-to-br from-water-navy-900/80 to-water-blue-900/80 border-white/10 text-white"
)


@dataclass(frozen=True)
class CardSemanticInfo:
    elevation: CardElevation
    surface: CardSurface
    spacing: CardSpacing
    interaction: CardInteraction
    is_selected: bool
    is_interactive: bool


@dataclass(frozen=True)
class CardPattern(Fluent):
    theme: ColorProvider
    _elevation: CardElevation = CardElevation.SUBTLE
    _surface: CardSurface = CardSurface.STANDARD
    _spacing: CardSpacing = CardSpacing.STANDARD
    _interaction: CardInteraction = CardInteraction.STATIC
    _state: InteractiveState = InteractiveState.DEFAULT
    _selected: bool = False
    _custom: tuple[str, ...] = ()

    # === Typed setters ===

    def elevation(self, elevation: CardElevation) -> CardPattern:
        return self._with(_elevation=elevation)

    def surface(self, surface: CardSurface) -> CardPattern:
        return self._with(_surface=surface)

    def spacing(self, spacing: CardSpacing) -> CardPattern:
        return self._with(_spacing=spacing)

    def interaction(self, interaction: CardInteraction) -> CardPattern:
        return self._with(_interaction=interaction)

    def selected(self, selected: bool = True) -> CardPattern:
        return self._with(_selected=selected)

    def custom(self, classes: str | Iterable[str]) -> CardPattern:
        return self._with(_custom=self._custom + split_custom(classes))

    # === String setters ===

    def elevation_str(self, value: str) -> CardPattern:
        parsed = parse_elevation(value)
        return self if parsed is None else self.elevation(parsed)

    def surface_str(self, value: str) -> CardPattern:
        parsed = parse_surface(value)
        return self if parsed is None else self.surface(parsed)

    def spacing_str(self, value: str) -> CardPattern:
        parsed = parse_card_spacing(value)
        return self if parsed is None else self.spacing(parsed)

    def interaction_str(self, value: str) -> CardPattern:
        parsed = parse_card_interaction(value)
        return self if parsed is None else self.interaction(parsed)

    # === Elevation shortcuts ===

    def flat_elevation(self) -> CardPattern:
        return self.elevation(CardElevation.FLAT)

    def subtle_elevation(self) -> CardPattern:
        return self.elevation(CardElevation.SUBTLE)

    def raised_elevation(self) -> CardPattern:
        return self.elevation(CardElevation.RAISED)

    def floating_elevation(self) -> CardPattern:
        return self.elevation(CardElevation.FLOATING)

    def modal_elevation(self) -> CardPattern:
        return self.elevation(CardElevation.MODAL)

    # === Surface shortcuts ===

    def standard_surface(self) -> CardPattern:
        return self.surface(CardSurface.STANDARD)

    def elevated_surface(self) -> CardPattern:
        return self.surface(CardSurface.ELEVATED)

    def branded_surface(self) -> CardPattern:
        return self.surface(CardSurface.BRANDED)

    def glass_surface(self) -> CardPattern:
        return self.surface(CardSurface.GLASS)

    def dark_surface(self) -> CardPattern:
        return self.surface(CardSurface.DARK)

    def transparent_surface(self) -> CardPattern:
        return self.surface(CardSurface.TRANSPARENT)

    # === Spacing shortcuts ===

    def no_spacing(self) -> CardPattern:
        return self.spacing(CardSpacing.NONE)

    def compact_spacing(self) -> CardPattern:
        return self.spacing(CardSpacing.COMPACT)

    def standard_spacing(self) -> CardPattern:
        return self.spacing(CardSpacing.STANDARD)

    def comfortable_spacing(self) -> CardPattern:
        return self.spacing(CardSpacing.COMFORTABLE)

    def spacious_spacing(self) -> CardPattern:
        return self.spacing(CardSpacing.SPACIOUS)

    # === Interaction shortcuts ===

    def static_interaction(self) -> CardPattern:
        return self.interaction(CardInteraction.STATIC)

    def hoverable_interaction(self) -> CardPattern:
        return self.interaction(CardInteraction.HOVERABLE)

    def clickable_interaction(self) -> CardPattern:
        return self.interaction(CardInteraction.CLICKABLE)

    def selectable_interaction(self) -> CardPattern:
        return self.interaction(CardInteraction.SELECTABLE)

    def draggable_interaction(self) -> CardPattern:
        return self.interaction(CardInteraction.DRAGGABLE)

    # === Momentary states ===

    def hover(self) -> CardPattern:
        return self._with(_state=InteractiveState.HOVER)

    def active(self) -> CardPattern:
        return self._with(_state=InteractiveState.ACTIVE)

    def focused(self) -> CardPattern:
        return self._with(_state=InteractiveState.FOCUSED)

    # === Composition ===

    def interactive_element(self) -> InteractiveElement:
        """InteractiveElement configured for the current interaction type."""
        element = InteractiveElement(self.theme, _state=self._state)
        match self._interaction:
            case CardInteraction.STATIC:
                return element
            case CardInteraction.HOVERABLE:
                return element.hoverable().gentle_interaction()
            case CardInteraction.CLICKABLE:
                return element.hoverable().focusable().pressable().standard_interaction()
            case CardInteraction.SELECTABLE:
                return element.hoverable().focusable().pressable().gentle_interaction()
            case CardInteraction.DRAGGABLE:
                return element.hoverable().focusable().standard_interaction()

    def focus_management(self) -> FocusManagement:
        """FocusManagement for the current interaction type; static cards are not focusable."""
        focus = FocusManagement(self.theme)
        match self._interaction:
            case CardInteraction.CLICKABLE:
                return focus.button()
            case CardInteraction.SELECTABLE:
                return focus.toggle()
            case CardInteraction.DRAGGABLE:
                return focus
            case _:
                return focus.focusable(False)

    # === Rendering ===

    def _hover_elevation(self) -> str:
        if self._interaction in (CardInteraction.HOVERABLE, CardInteraction.CLICKABLE):
            return HOVER_ELEVATION.get(self._elevation, "")
        return ""

    def classes(self) -> str:
        # Focus styling comes from focus_management() alone.
        interactive = drop_prefixed(self.interactive_element().classes(), "focus:")
        hover_elevation = self._hover_elevation()
        if hover_elevation:
            # The elevation-driven hover shadow replaces the generic one.
            interactive = drop_prefixed(interactive, "hover:shadow-")

        fragments = [
            "rounded-lg border transition-all duration-300",
            ELEVATION_CLASSES[self._elevation],
            surface_classes(self.theme, self._surface, BRANDED_SURFACE),
            SPACING_CLASSES[self._spacing],
            interactive,
            self.focus_management().classes(),
            hover_elevation,
        ]
        if self._selected:
            fragments.append(f"ring-2 ring-offset-2 {self.theme.ring_color_class(Color.PRIMARY)}")
        fragments.extend(self._custom)
        return canonicalize(fragments)

    def accessibility_attributes(self) -> dict[str, str]:
        attrs = self.focus_management().data_attributes()
        if self._selected:
            attrs["aria-selected"] = "true"
        if self._interaction is CardInteraction.CLICKABLE:
            attrs["role"] = "button"
        elif self._interaction is CardInteraction.SELECTABLE:
            attrs["role"] = "option"
        return attrs

    def semantic_info(self) -> CardSemanticInfo:
        return CardSemanticInfo(
            elevation=self._elevation,
            surface=self._surface,
            spacing=self._spacing,
            interaction=self._interaction,
            is_selected=self._selected,
            is_interactive=self._interaction is not CardInteraction.STATIC,
        )


# =============================================================================
# Constructors
# =============================================================================


def card_pattern(theme: ColorProvider) -> CardPattern:
    return CardPattern(theme)


def content_card(theme: ColorProvider) -> CardPattern:
    return (
        CardPattern(theme)
        .standard_surface()
        .raised_elevation()
        .standard_spacing()
        .static_interaction()
    )


def interactive_card(theme: ColorProvider) -> CardPattern:
    return (
        CardPattern(theme)
        .elevated_surface()
        .floating_elevation()
        .clickable_interaction()
        .comfortable_spacing()
    )


def hero_card(theme: ColorProvider) -> CardPattern:
    return (
        CardPattern(theme)
        .branded_surface()
        .modal_elevation()
        .spacious_spacing()
        .hoverable_interaction()
    )


def glass_card(theme: ColorProvider) -> CardPattern:
    return (
        CardPattern(theme)
        .glass_surface()
        .floating_elevation()
        .hoverable_interaction()
        .standard_spacing()
    )


def minimal_card(theme: ColorProvider) -> CardPattern:
    return (
        CardPattern(theme)
        .standard_surface()
        .flat_elevation()
        .compact_spacing()
        .static_interaction()
    )
