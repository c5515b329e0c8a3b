"""Tests for action semantics, interaction behavior and focus management."""

from classforge.patterns.actions import ActionContext, ActionHierarchy, ActionIntent, action_semantics
from classforge.patterns.focus import FocusBehavior, focus_management
from classforge.patterns.interactions import InteractionIntensity, interactive_element


class TestActionSemantics:
    def test_primary_intent_colors(self, theme):
        classes = action_semantics(theme).primary().classes().split()
        assert "bg-jupiter-blue-500" in classes
        assert "text-white" in classes
        assert "hover:bg-jupiter-blue-600" in classes

    def test_toolbar_context_replaces_hierarchy(self, theme):
        classes = action_semantics(theme).primary().context(ActionContext.TOOLBAR).classes().split()
        assert "text-xs" in classes
        assert "text-base" not in classes
        assert "px-2" in classes
        assert "px-6" not in classes

    def test_intent_aliases(self, theme):
        base = action_semantics(theme)
        assert base.intent_str("danger").current_intent is ActionIntent.DESTRUCTIVE
        assert base.intent_str("create").current_intent is ActionIntent.CONSTRUCTIVE
        assert base.intent_str("info").current_intent is ActionIntent.INFORMATIONAL

    def test_unknown_intent_ignored(self, theme):
        base = action_semantics(theme).primary()
        assert base.intent_str("explode") is base

    def test_hero_hierarchy(self, theme):
        sem = action_semantics(theme).hero()
        assert sem.current_hierarchy is ActionHierarchy.HERO
        assert "text-xl" in sem.classes().split()

    def test_urgent(self, theme):
        assert "animate-pulse" in action_semantics(theme).urgent().classes().split()


class TestInteractiveElement:
    def test_hover_intensity(self, theme):
        classes = interactive_element(theme).hoverable().prominent_interaction().classes().split()
        assert "hover:scale-110" in classes
        assert "cursor-pointer" in classes

    def test_disabled_has_no_hover(self, theme):
        classes = interactive_element(theme).hoverable().pressable().disabled().classes().split()
        assert "cursor-not-allowed" in classes
        assert "opacity-50" in classes
        assert "pointer-events-none" in classes
        assert not any(c.startswith("hover:") or c.startswith("active:") for c in classes)

    def test_loading(self, theme):
        classes = interactive_element(theme).hoverable().loading().classes().split()
        assert "cursor-wait" in classes
        assert "opacity-75" in classes

    def test_intensity_alias(self, theme):
        element = interactive_element(theme).intensity_str("subtle")
        assert element.current_intensity is InteractionIntensity.GENTLE

    def test_static_element_is_empty(self, theme):
        assert interactive_element(theme).classes() == ""


class TestFocusManagement:
    def test_standard_ring(self, theme):
        classes = focus_management(theme).button().classes().split()
        assert classes == sorted(
            [
                "focus:outline-none",
                "focus:ring-2",
                "focus:ring-jupiter-blue-300",
                "focus:ring-offset-2",
            ]
        )

    def test_not_focusable(self, theme):
        assert focus_management(theme).focusable(False).classes() == ""

    def test_button_attributes(self, theme):
        assert focus_management(theme).button().data_attributes() == {
            "tabindex": "0",
            "role": "button",
        }

    def test_toggle_attributes(self, theme):
        attrs = focus_management(theme).toggle().data_attributes()
        assert attrs["aria-pressed"] == "false"

    def test_expandable_attributes(self, theme):
        attrs = focus_management(theme).expandable().data_attributes()
        assert attrs["aria-expanded"] == "false"

    def test_menu_item_is_subtle(self, theme):
        focus = focus_management(theme).menu_item()
        assert focus.current_behavior is FocusBehavior.SUBTLE
        assert focus.data_attributes()["role"] == "menuitem"

    def test_explicit_tab_index(self, theme):
        assert focus_management(theme).tab_index(-1).data_attributes()["tabindex"] == "-1"
