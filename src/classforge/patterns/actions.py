"""
Action semantics.

Describes what an action means (intent), how important it is (hierarchy)
and where it lives (context). Context styles replace the hierarchy's
styles for the same property family, so a toolbar action never carries
both ``text-sm`` and ``text-xs``.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum

from classforge.canonical import canonicalize
from classforge.colors import Color, ColorProvider
from classforge.fluent import Fluent, enum_choices, parse_choice, split_custom


class ActionIntent(StrEnum):
    PRIMARY = "primary"
    SECONDARY = "secondary"
    CONSTRUCTIVE = "constructive"
    DESTRUCTIVE = "destructive"
    NAVIGATION = "navigation"
    INFORMATIONAL = "informational"


class ActionHierarchy(StrEnum):
    HERO = "hero"
    PRIMARY = "primary"
    SECONDARY = "secondary"
    TERTIARY = "tertiary"
    MINIMAL = "minimal"


class ActionContext(StrEnum):
    STANDALONE = "standalone"
    FORM = "form"
    NAVIGATION = "navigation"
    INLINE = "inline"
    TOOLBAR = "toolbar"
    FLOATING = "floating"


# Styles keyed by property family; a context entry replaces the hierarchy
# entry with the same family.
HIERARCHY_STYLES: dict[ActionHierarchy, dict[str, str]] = {
    ActionHierarchy.HERO: {
        "font_size": "text-xl",
        "font_weight": "font-bold",
        "padding_x": "px-8",
        "padding_y": "py-4",
        "radius": "rounded-lg",
        "shadow": "shadow-lg",
    },
    ActionHierarchy.PRIMARY: {
        "font_size": "text-base",
        "font_weight": "font-semibold",
        "padding_x": "px-6",
        "padding_y": "py-3",
        "radius": "rounded-md",
        "shadow": "shadow-md",
    },
    ActionHierarchy.SECONDARY: {
        "font_size": "text-sm",
        "font_weight": "font-medium",
        "padding_x": "px-4",
        "padding_y": "py-2",
        "radius": "rounded-md",
        "shadow": "shadow-sm",
    },
    ActionHierarchy.TERTIARY: {
        "font_size": "text-sm",
        "font_weight": "font-normal",
        "padding_x": "px-3",
        "padding_y": "py-1.5",
        "radius": "rounded",
    },
    ActionHierarchy.MINIMAL: {
        "font_size": "text-xs",
        "font_weight": "font-normal",
        "padding_x": "px-2",
        "padding_y": "py-1",
        "radius": "rounded",
    },
}

CONTEXT_STYLES: dict[ActionContext, dict[str, str]] = {
    ActionContext.STANDALONE: {},
    ActionContext.FORM: {"min_width": "min-w-24"},
    ActionContext.NAVIGATION: {"width": "w-full", "justify": "justify-start"},
    ActionContext.INLINE: {"display": "inline", "underline_offset": "underline-offset-2"},
    ActionContext.TOOLBAR: {"height": "h-8", "padding_x": "px-2", "font_size": "text-xs"},
    ActionContext.FLOATING: {
        "radius": "rounded-full",
        "width": "w-14",
        "height": "h-14",
        "shadow": "shadow-xl",
    },
}

_INTENT_CHOICES = enum_choices(
    ActionIntent,
    create=ActionIntent.CONSTRUCTIVE,
    danger=ActionIntent.DESTRUCTIVE,
    info=ActionIntent.INFORMATIONAL,
)
_HIERARCHY_CHOICES = enum_choices(ActionHierarchy, standard=ActionHierarchy.SECONDARY)
_CONTEXT_CHOICES = enum_choices(ActionContext)


def parse_intent(value: str) -> ActionIntent | None:
    return parse_choice(value, _INTENT_CHOICES)


def parse_action_hierarchy(value: str) -> ActionHierarchy | None:
    return parse_choice(value, _HIERARCHY_CHOICES)


def parse_context(value: str) -> ActionContext | None:
    return parse_choice(value, _CONTEXT_CHOICES)


def intent_colors(theme: ColorProvider, intent: ActionIntent) -> str:
    """Color fragments for an action intent."""
    match intent:
        case ActionIntent.PRIMARY:
            return " ".join(
                [
                    theme.bg_class(Color.PRIMARY),
                    theme.text_class(Color.TEXT_INVERSE),
                    f"hover:{theme.bg_class(Color.INTERACTIVE_HOVER)}",
                ]
            )
        case ActionIntent.SECONDARY:
            return " ".join(
                [
                    theme.bg_class(Color.SURFACE),
                    theme.text_class(Color.TEXT_PRIMARY),
                    theme.border_class(Color.BORDER),
                    "border",
                ]
            )
        case ActionIntent.CONSTRUCTIVE:
            return f"{theme.bg_class(Color.SUCCESS)} {theme.text_class(Color.TEXT_INVERSE)} hover:bg-green-600"
        case ActionIntent.DESTRUCTIVE:
            return f"{theme.bg_class(Color.ERROR)} {theme.text_class(Color.TEXT_INVERSE)} hover:bg-red-600"
        case ActionIntent.NAVIGATION:
            return " ".join(
                [
                    "bg-transparent",
                    theme.text_class(Color.TEXT_PRIMARY),
                    f"hover:{theme.bg_class(Color.BACKGROUND)}",
                ]
            )
        case ActionIntent.INFORMATIONAL:
            return f"bg-transparent {theme.text_class(Color.TEXT_SECONDARY)} hover:underline"


@dataclass(frozen=True)
class ActionSemantics(Fluent):
    """Semantic meaning of a user action."""

    theme: ColorProvider
    _intent: ActionIntent = ActionIntent.SECONDARY
    _hierarchy: ActionHierarchy = ActionHierarchy.SECONDARY
    _context: ActionContext = ActionContext.STANDALONE
    _urgent: bool = False
    _custom: tuple[str, ...] = ()

    @property
    def current_intent(self) -> ActionIntent:
        return self._intent

    @property
    def current_hierarchy(self) -> ActionHierarchy:
        return self._hierarchy

    @property
    def current_context(self) -> ActionContext:
        return self._context

    @property
    def is_urgent(self) -> bool:
        return self._urgent

    def intent(self, intent: ActionIntent) -> ActionSemantics:
        return self._with(_intent=intent)

    def hierarchy(self, hierarchy: ActionHierarchy) -> ActionSemantics:
        return self._with(_hierarchy=hierarchy)

    def context(self, context: ActionContext) -> ActionSemantics:
        return self._with(_context=context)

    def urgent(self, urgent: bool = True) -> ActionSemantics:
        return self._with(_urgent=urgent)

    def custom(self, classes: str | Iterable[str]) -> ActionSemantics:
        return self._with(_custom=self._custom + split_custom(classes))

    def intent_str(self, value: str) -> ActionSemantics:
        parsed = parse_intent(value)
        return self if parsed is None else self.intent(parsed)

    def hierarchy_str(self, value: str) -> ActionSemantics:
        parsed = parse_action_hierarchy(value)
        return self if parsed is None else self.hierarchy(parsed)

    def context_str(self, value: str) -> ActionSemantics:
        parsed = parse_context(value)
        return self if parsed is None else self.context(parsed)

    # Semantic shortcuts

    def primary(self) -> ActionSemantics:
        return self._with(_intent=ActionIntent.PRIMARY, _hierarchy=ActionHierarchy.PRIMARY)

    def secondary(self) -> ActionSemantics:
        return self._with(_intent=ActionIntent.SECONDARY, _hierarchy=ActionHierarchy.SECONDARY)

    def destructive(self) -> ActionSemantics:
        return self._with(_intent=ActionIntent.DESTRUCTIVE)

    def hero(self) -> ActionSemantics:
        return self._with(_intent=ActionIntent.PRIMARY, _hierarchy=ActionHierarchy.HERO)

    def navigation(self) -> ActionSemantics:
        return self._with(_intent=ActionIntent.NAVIGATION, _context=ActionContext.NAVIGATION)

    def layout_styles(self) -> dict[str, str]:
        """Hierarchy styles with context replacements applied, keyed by family."""
        return {**HIERARCHY_STYLES[self._hierarchy], **CONTEXT_STYLES[self._context]}

    def classes(self) -> str:
        fragments = [intent_colors(self.theme, self._intent), *self.layout_styles().values()]
        if self._urgent:
            fragments.append("animate-pulse")
        fragments.extend(self._custom)
        return canonicalize(fragments)


def action_semantics(theme: ColorProvider) -> ActionSemantics:
    return ActionSemantics(theme)
