"""
Composition helpers.

``compose`` merges class strings, patterns and builders into one
canonical string. The ``*_component`` functions are ready-made call
sites: they configure a pattern from plain strings and return its
classes together with the element's static ARIA attributes.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable

from classforge.builders.interactive import interactive_input
from classforge.canonical import canonicalize
from classforge.colors import Color, ColorProvider
from classforge.patterns.button import button_pattern
from classforge.patterns.card import card_pattern


@runtime_checkable
class Buildable(Protocol):
    def build(self) -> str: ...


@runtime_checkable
class Renderable(Protocol):
    def classes(self) -> str: ...


ClassSource = str | Buildable | Renderable | None


def render(source: ClassSource) -> str:
    """Render one source; ``build()`` wins over ``classes()``."""
    if source is None:
        return ""
    if isinstance(source, str):
        return source
    if isinstance(source, Buildable):
        return source.build()
    if isinstance(source, Renderable):
        return source.classes()
    raise TypeError(f"Cannot render classes from {type(source).__name__}")


def compose(*sources: ClassSource) -> str:
    """Canonical union of strings, patterns and builders."""
    return canonicalize(render(source) for source in sources)


@dataclass(frozen=True)
class ComponentClasses:
    """Final classes for one element plus its static attributes."""

    classes: str
    attributes: dict[str, str] = field(default_factory=dict)

    def __str__(self) -> str:
        return self.classes


def button_component(
    theme: ColorProvider,
    intent: str = "primary",
    prominence: str = "standard",
    disabled: bool = False,
    loading: bool = False,
    full_width: bool = False,
    custom: str | None = None,
) -> ComponentClasses:
    pattern = (
        button_pattern(theme)
        .intent_str(intent)
        .prominence_str(prominence)
        .disabled(disabled)
        .loading(loading)
    )
    attributes = {"type": "button", **pattern.accessibility_attributes()}
    return ComponentClasses(
        classes=compose(pattern, "w-full" if full_width else None, custom),
        attributes=attributes,
    )


def card_component(
    theme: ColorProvider,
    elevation: str = "subtle",
    surface: str = "standard",
    spacing: str = "standard",
    interaction: str = "static",
    selected: bool = False,
    custom: str | None = None,
) -> ComponentClasses:
    pattern = (
        card_pattern(theme)
        .elevation_str(elevation)
        .surface_str(surface)
        .spacing_str(spacing)
        .interaction_str(interaction)
        .selected(selected)
    )
    return ComponentClasses(
        classes=compose(pattern, custom),
        attributes=pattern.accessibility_attributes(),
    )


def input_component(
    theme: ColorProvider,
    invalid: bool = False,
    disabled: bool = False,
    custom: str | None = None,
) -> ComponentClasses:
    ring = Color.ERROR if invalid else Color.PRIMARY
    builder = (
        interactive_input(theme)
        .standard_style()
        .hover()
        .border_primary()
        .focus()
        .outline_none()
        .classes(f"ring-2 ring-offset-2 {theme.ring_color_class(ring)}")
        .disabled()
        .opacity_50()
        .cursor_not_allowed()
    )
    attributes: dict[str, str] = {}
    if invalid:
        attributes["aria-invalid"] = "true"
    if disabled:
        attributes["aria-disabled"] = "true"
    return ComponentClasses(classes=compose(builder, custom), attributes=attributes)


__all__ = [
    "ComponentClasses",
    "button_component",
    "card_component",
    "compose",
    "input_component",
    "render",
]
