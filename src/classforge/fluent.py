"""
Shared plumbing for patterns and builders.

Patterns and builders are frozen dataclasses. Every setter returns an
updated copy, so a configured value can be rendered any number of times
and shared between renders.

String setters go through ``parse_choice``: a pure lookup that returns
``None`` for anything it does not recognise. The setter then leaves the
value unchanged.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import replace
from enum import Enum
from typing import Any, TypeVar

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=Enum)
F = TypeVar("F", bound="Fluent")


def normalize_choice(value: str) -> str:
    """Lower-case and use hyphens: ``"Body_Large "`` -> ``"body-large"``."""
    return value.strip().lower().replace("_", "-").replace(" ", "-")


def enum_choices(enum_cls: type[E], **aliases: E) -> dict[str, E]:
    """
    Build a lookup table from an enum's values plus extra aliases.

    Alias keyword names use underscores; they are normalized like input.
    """
    choices = {normalize_choice(str(member.value)): member for member in enum_cls}
    for name, member in aliases.items():
        choices[normalize_choice(name)] = member
    return choices


def parse_choice(value: str | None, choices: Mapping[str, E]) -> E | None:
    """Look up a string in a choice table; ``None`` when unknown."""
    if value is None:
        return None
    found = choices.get(normalize_choice(value))
    if found is None:
        logger.debug(f"Ignoring unrecognised option {value!r}")
    return found


def split_custom(classes: str | Iterable[str]) -> tuple[str, ...]:
    """Normalize custom class input (string or iterable) to a tuple of fragments."""
    if isinstance(classes, str):
        return (classes,) if classes.strip() else ()
    return tuple(c for c in classes if c and c.strip())


class Fluent:
    """Mixin for frozen dataclasses configured through chained calls."""

    def _with(self: F, **changes: Any) -> F:
        return replace(self, **changes)  # type: ignore[type-var]


__all__ = [
    "Fluent",
    "enum_choices",
    "normalize_choice",
    "parse_choice",
    "split_custom",
]
