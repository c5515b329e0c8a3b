"""Card styling builder."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from classforge.canonical import canonicalize, split_classes
from classforge.colors import Color, ColorProvider
from classforge.fluent import Fluent, split_custom
from classforge.patterns.card import (
    ELEVATION_CLASSES,
    HOVER_ELEVATION,
    SPACING_CLASSES,
    CardElevation,
    CardInteraction,
    CardSpacing,
    CardSurface,
    parse_card_interaction,
    parse_card_spacing,
    parse_elevation,
    parse_surface,
    surface_classes,
)
from classforge.tokens import Size, parse_size

BASE_CLASSES = "rounded-lg border transition-all duration-300"

BRANDED_SURFACE = (
    "bg-gradient-to-br from-jupiter-navy-900/80 to-jupiter-blue-900/80 border-white/10 text-white"
)

INTERACTION_CLASSES: dict[CardInteraction, str] = {
    CardInteraction.STATIC: "",
    CardInteraction.HOVERABLE: "hover:scale-101 hover:shadow-sm",
    CardInteraction.CLICKABLE: (
        "cursor-pointer hover:scale-105 active:scale-95 "
        "focus:outline-none focus:ring-2 focus:ring-offset-2"
    ),
    CardInteraction.SELECTABLE: (
        "cursor-pointer hover:scale-101 focus:outline-none focus:ring-2 focus:ring-offset-2"
    ),
    CardInteraction.DRAGGABLE: "cursor-move hover:scale-105 active:scale-95",
}

_LIFTS_ON_HOVER = (CardInteraction.HOVERABLE, CardInteraction.CLICKABLE)

SIZE_SPACING: dict[Size, CardSpacing] = {
    Size.XSMALL: CardSpacing.COMPACT,
    Size.SMALL: CardSpacing.COMPACT,
    Size.MEDIUM: CardSpacing.STANDARD,
    Size.LARGE: CardSpacing.COMFORTABLE,
    Size.XLARGE: CardSpacing.SPACIOUS,
}


@dataclass(frozen=True)
class CardStyles(Fluent):
    theme: ColorProvider
    _elevation: CardElevation = CardElevation.SUBTLE
    _surface: CardSurface = CardSurface.STANDARD
    _spacing: CardSpacing = CardSpacing.STANDARD
    _interaction: CardInteraction = CardInteraction.STATIC
    _selected: bool = False
    _custom: tuple[str, ...] = ()

    def elevation(self, elevation: CardElevation) -> CardStyles:
        return self._with(_elevation=elevation)

    def surface(self, surface: CardSurface) -> CardStyles:
        return self._with(_surface=surface)

    def spacing(self, spacing: CardSpacing) -> CardStyles:
        return self._with(_spacing=spacing)

    def interaction(self, interaction: CardInteraction) -> CardStyles:
        return self._with(_interaction=interaction)

    def selected(self, selected: bool = True) -> CardStyles:
        return self._with(_selected=selected)

    def elevation_str(self, value: str) -> CardStyles:
        parsed = parse_elevation(value)
        return self if parsed is None else self.elevation(parsed)

    def surface_str(self, value: str) -> CardStyles:
        parsed = parse_surface(value)
        return self if parsed is None else self.surface(parsed)

    def spacing_str(self, value: str) -> CardStyles:
        parsed = parse_card_spacing(value)
        return self if parsed is None else self.spacing(parsed)

    def interaction_str(self, value: str) -> CardStyles:
        parsed = parse_card_interaction(value)
        return self if parsed is None else self.interaction(parsed)

    def size_str(self, value: str) -> CardStyles:
        """Size names pick the padding; unknown names change nothing."""
        parsed = parse_size(value)
        return self if parsed is None else self.spacing(SIZE_SPACING[parsed])

    # Elevation

    def flat_elevation(self) -> CardStyles:
        return self.elevation(CardElevation.FLAT)

    def subtle_elevation(self) -> CardStyles:
        return self.elevation(CardElevation.SUBTLE)

    def raised_elevation(self) -> CardStyles:
        return self.elevation(CardElevation.RAISED)

    def floating_elevation(self) -> CardStyles:
        return self.elevation(CardElevation.FLOATING)

    def modal_elevation(self) -> CardStyles:
        return self.elevation(CardElevation.MODAL)

    # Surface

    def standard_surface(self) -> CardStyles:
        return self.surface(CardSurface.STANDARD)

    def elevated_surface(self) -> CardStyles:
        return self.surface(CardSurface.ELEVATED)

    def branded_surface(self) -> CardStyles:
        return self.surface(CardSurface.BRANDED)

    def glass_surface(self) -> CardStyles:
        return self.surface(CardSurface.GLASS)

    def dark_surface(self) -> CardStyles:
        return self.surface(CardSurface.DARK)

    def transparent_surface(self) -> CardStyles:
        return self.surface(CardSurface.TRANSPARENT)

    # Spacing

    def no_spacing(self) -> CardStyles:
        return self.spacing(CardSpacing.NONE)

    def compact_spacing(self) -> CardStyles:
        return self.spacing(CardSpacing.COMPACT)

    def standard_spacing(self) -> CardStyles:
        return self.spacing(CardSpacing.STANDARD)

    def comfortable_spacing(self) -> CardStyles:
        return self.spacing(CardSpacing.COMFORTABLE)

    def spacious_spacing(self) -> CardStyles:
        return self.spacing(CardSpacing.SPACIOUS)

    # Interaction

    def static_interaction(self) -> CardStyles:
        return self.interaction(CardInteraction.STATIC)

    def hoverable_interaction(self) -> CardStyles:
        return self.interaction(CardInteraction.HOVERABLE)

    def clickable_interaction(self) -> CardStyles:
        return self.interaction(CardInteraction.CLICKABLE)

    def selectable_interaction(self) -> CardStyles:
        return self.interaction(CardInteraction.SELECTABLE)

    def draggable_interaction(self) -> CardStyles:
        return self.interaction(CardInteraction.DRAGGABLE)

    def custom(self, classes: str | Iterable[str]) -> CardStyles:
        return self._with(_custom=self._custom + split_custom(classes))

    def custom_classes(self, classes: str) -> CardStyles:
        return self._with(_custom=self._custom + tuple(classes.split()))

    def _interaction_classes(self) -> list[str]:
        tokens = split_classes(INTERACTION_CLASSES[self._interaction])
        hover_lift = HOVER_ELEVATION.get(self._elevation)
        if self._interaction in _LIFTS_ON_HOVER and hover_lift:
            # The elevation's hover shadow replaces the interaction's.
            tokens = [t for t in tokens if not t.startswith("hover:shadow-")]
            tokens.append(hover_lift)
        return tokens

    def classes(self) -> str:
        fragments = [
            BASE_CLASSES,
            ELEVATION_CLASSES[self._elevation],
            surface_classes(self.theme, self._surface, BRANDED_SURFACE),
            SPACING_CLASSES[self._spacing],
            *self._interaction_classes(),
        ]
        if self._selected:
            fragments.append(f"ring-2 ring-offset-2 {self.theme.ring_color_class(Color.PRIMARY)}")
        fragments.extend(self._custom)
        return canonicalize(fragments)

    build = classes


def card_styles(theme: ColorProvider) -> CardStyles:
    return CardStyles(theme)


def card_classes_from_strings(
    theme: ColorProvider,
    surface: str,
    elevation: str,
    spacing: str,
    interaction: str,
    selected: bool = False,
) -> str:
    return (
        card_styles(theme)
        .surface_str(surface)
        .elevation_str(elevation)
        .spacing_str(spacing)
        .interaction_str(interaction)
        .selected(selected)
        .classes()
    )
