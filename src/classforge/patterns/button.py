"""
Button pattern.

Composes ActionSemantics (what the button means), InteractiveElement (how
it responds) and FocusManagement (how it is reached by keyboard) into one
button experience that can be applied to any element.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from classforge.canonical import canonicalize, drop_prefixed
from classforge.colors import ColorProvider
from classforge.fluent import Fluent, split_custom

from .actions import ActionContext, ActionHierarchy, ActionIntent, ActionSemantics
from .focus import FocusBehavior, FocusManagement
from .interactions import InteractionIntensity, InteractiveElement, InteractiveState


@dataclass(frozen=True)
class ButtonSemanticInfo:
    action_intent: ActionIntent
    is_primary: bool
    is_destructive: bool
    is_disabled: bool
    is_loading: bool
    is_selected: bool


@dataclass(frozen=True)
class ButtonPattern(Fluent):
    """
    Semantic button.

    ``disabled`` and ``loading`` are flags rather than one state slot, so
    they can be toggled in any order; loading takes precedence when both
    are set.
    """

    theme: ColorProvider
    action: ActionSemantics
    interactive: InteractiveElement
    focus: FocusManagement
    _disabled: bool = False
    _loading: bool = False
    _selected: bool = False
    _custom: tuple[str, ...] = ()

    @classmethod
    def create(cls, theme: ColorProvider) -> ButtonPattern:
        return cls(
            theme=theme,
            action=ActionSemantics(theme).secondary().context(ActionContext.STANDALONE),
            interactive=InteractiveElement(theme)
            .hoverable()
            .focusable()
            .pressable()
            .standard_interaction(),
            focus=FocusManagement(theme).button(),
        )

    # === Action semantics ===

    def primary_action(self) -> ButtonPattern:
        return self._with(action=self.action.primary())

    def secondary_action(self) -> ButtonPattern:
        return self._with(action=self.action.secondary())

    def destructive_action(self) -> ButtonPattern:
        return self._with(action=self.action.destructive())

    def navigation_action(self) -> ButtonPattern:
        return self._with(action=self.action.navigation())

    def intent(self, intent: ActionIntent) -> ButtonPattern:
        return self._with(action=self.action.intent(intent))

    def intent_str(self, value: str) -> ButtonPattern:
        return self._with(action=self.action.intent_str(value))

    def hero_prominence(self) -> ButtonPattern:
        return self._with(action=self.action.hierarchy(ActionHierarchy.HERO))

    def primary_prominence(self) -> ButtonPattern:
        return self._with(action=self.action.hierarchy(ActionHierarchy.PRIMARY))

    def standard_prominence(self) -> ButtonPattern:
        return self._with(action=self.action.hierarchy(ActionHierarchy.SECONDARY))

    def tertiary_prominence(self) -> ButtonPattern:
        return self._with(action=self.action.hierarchy(ActionHierarchy.TERTIARY))

    def minimal_prominence(self) -> ButtonPattern:
        return self._with(action=self.action.hierarchy(ActionHierarchy.MINIMAL))

    def prominence_str(self, value: str) -> ButtonPattern:
        return self._with(action=self.action.hierarchy_str(value))

    def inline_context(self) -> ButtonPattern:
        return self._with(action=self.action.context(ActionContext.INLINE))

    def form_context(self) -> ButtonPattern:
        return self._with(action=self.action.context(ActionContext.FORM))

    def toolbar_context(self) -> ButtonPattern:
        return self._with(action=self.action.context(ActionContext.TOOLBAR))

    def floating_context(self) -> ButtonPattern:
        return self._with(action=self.action.context(ActionContext.FLOATING))

    def context_str(self, value: str) -> ButtonPattern:
        return self._with(action=self.action.context_str(value))

    def urgent(self) -> ButtonPattern:
        return self._with(action=self.action.urgent())

    # === Interactive behavior ===

    def gentle_interaction(self) -> ButtonPattern:
        return self._with(interactive=self.interactive.intensity(InteractionIntensity.GENTLE))

    def standard_interaction(self) -> ButtonPattern:
        return self._with(interactive=self.interactive.intensity(InteractionIntensity.STANDARD))

    def prominent_interaction(self) -> ButtonPattern:
        return self._with(interactive=self.interactive.intensity(InteractionIntensity.PROMINENT))

    def custom_interaction(self, classes: str) -> ButtonPattern:
        return self._with(interactive=self.interactive.custom(classes))

    # === Focus management ===

    def menu_item_focus(self) -> ButtonPattern:
        return self._with(focus=self.focus.menu_item())

    def link_focus(self) -> ButtonPattern:
        return self._with(focus=self.focus.link())

    def toggle_focus(self) -> ButtonPattern:
        return self._with(focus=self.focus.toggle())

    def subtle_focus(self) -> ButtonPattern:
        return self._with(focus=self.focus.focus_behavior(FocusBehavior.SUBTLE))

    def prominent_focus(self) -> ButtonPattern:
        return self._with(focus=self.focus.focus_behavior(FocusBehavior.PROMINENT))

    # === State ===

    def disabled(self, disabled: bool = True) -> ButtonPattern:
        return self._with(_disabled=disabled)

    def loading(self, loading: bool = True) -> ButtonPattern:
        return self._with(_loading=loading)

    def selected(self, selected: bool = True) -> ButtonPattern:
        return self._with(_selected=selected)

    def hover(self) -> ButtonPattern:
        return self._with(interactive=self.interactive.hover())

    def active(self) -> ButtonPattern:
        return self._with(interactive=self.interactive.active())

    def focused(self) -> ButtonPattern:
        return self._with(interactive=self.interactive.focused())

    def custom(self, classes: str | Iterable[str]) -> ButtonPattern:
        return self._with(_custom=self._custom + split_custom(classes))

    # === Rendering ===

    def _effective_interactive(self) -> InteractiveElement:
        if self._loading:
            return self.interactive.state(InteractiveState.LOADING)
        if self._disabled:
            return self.interactive.state(InteractiveState.DISABLED)
        return self.interactive

    def classes(self) -> str:
        # The focus family belongs to FocusManagement.
        interactive = drop_prefixed(self._effective_interactive().classes(), "focus:")
        fragments = [
            self.action.classes(),
            interactive,
            self.focus.classes(),
        ]
        if self._selected:
            fragments.append("bg-opacity-80")
        fragments.extend(self._custom)
        return canonicalize(fragments)

    def accessibility_attributes(self) -> dict[str, str]:
        attrs = self.focus.data_attributes()
        if self._disabled:
            attrs["aria-disabled"] = "true"
        if self._loading:
            attrs["aria-busy"] = "true"
        if self._selected:
            attrs["aria-pressed"] = "true"
        return attrs

    def semantic_info(self) -> ButtonSemanticInfo:
        intent = self.action.current_intent
        return ButtonSemanticInfo(
            action_intent=intent,
            is_primary=intent is ActionIntent.PRIMARY,
            is_destructive=intent is ActionIntent.DESTRUCTIVE,
            is_disabled=self._disabled,
            is_loading=self._loading,
            is_selected=self._selected,
        )


# =============================================================================
# Constructors
# =============================================================================


def button_pattern(theme: ColorProvider) -> ButtonPattern:
    return ButtonPattern.create(theme)


def primary_button(theme: ColorProvider) -> ButtonPattern:
    return button_pattern(theme).primary_action().primary_prominence().standard_interaction()


def secondary_button(theme: ColorProvider) -> ButtonPattern:
    return button_pattern(theme).secondary_action().standard_prominence().standard_interaction()


def destructive_button(theme: ColorProvider) -> ButtonPattern:
    return button_pattern(theme).destructive_action().standard_prominence().standard_interaction()


def hero_button(theme: ColorProvider) -> ButtonPattern:
    return (
        button_pattern(theme)
        .primary_action()
        .hero_prominence()
        .prominent_interaction()
        .prominent_focus()
    )


def navigation_button(theme: ColorProvider) -> ButtonPattern:
    return (
        button_pattern(theme)
        .navigation_action()
        .tertiary_prominence()
        .gentle_interaction()
        .menu_item_focus()
    )


def button_link(theme: ColorProvider) -> ButtonPattern:
    return (
        button_pattern(theme)
        .secondary_action()
        .inline_context()
        .gentle_interaction()
        .link_focus()
    )
