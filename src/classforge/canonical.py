"""
Class canonicalization.

Every pattern and builder funnels its fragments through ``canonicalize``
so the final class string has no duplicate tokens and a stable,
lexicographic order.

Grouped variants (``hover:(a b)``) are treated as a single token: the
whitespace inside the parentheses never splits it, and the inner tokens
are canonicalized recursively.
"""

from __future__ import annotations

from collections.abc import Iterable


def split_classes(text: str) -> list[str]:
    """Split a class string on whitespace, keeping ``prefix:(...)`` groups whole."""
    tokens: list[str] = []
    current: list[str] = []
    depth = 0

    for char in text:
        if char == "(":
            depth += 1
        elif char == ")" and depth > 0:
            depth -= 1

        if char.isspace() and depth == 0:
            if current:
                tokens.append("".join(current))
                current = []
            continue
        current.append(char)

    if current:
        if depth > 0:
            # Unclosed group: not atomic, split the run like plain classes.
            tokens.extend("".join(current).split())
        else:
            tokens.append("".join(current))
    return tokens


def drop_prefixed(classes: str, *prefixes: str) -> str:
    """Remove the tokens of ``classes`` that start with any of ``prefixes``."""
    return " ".join(token for token in split_classes(classes) if not token.startswith(prefixes))


def _normalize_token(token: str) -> str:
    """Canonicalize the inside of a variant group; plain tokens pass through."""
    open_at = token.find("(")
    if open_at == -1 or not token.endswith(")"):
        return token

    prefix = token[:open_at]
    inner = canonicalize([token[open_at + 1 : -1]])
    if not inner:
        return ""
    return f"{prefix}({inner})"


def canonicalize(fragments: Iterable[str | None]) -> str:
    """
    Merge class fragments into one deduplicated, sorted string.

    Args:
        fragments: Whitespace-separated class strings. ``None`` and empty
            entries are ignored.

    Returns:
        Tokens joined by single spaces, sorted ascending, each appearing once.
    """
    seen: set[str] = set()
    for fragment in fragments:
        if not fragment:
            continue
        for token in split_classes(fragment):
            normalized = _normalize_token(token)
            if normalized:
                seen.add(normalized)
    return " ".join(sorted(seen))


def merge_classes(*fragments: str | None) -> str:
    """Varargs form of :func:`canonicalize`."""
    return canonicalize(fragments)


def variant_group(prefix: str, fragments: Iterable[str]) -> str:
    """
    Render fragments as one grouped variant token, e.g. ``hover:(a b)``.

    Returns an empty string when there is nothing to group.
    """
    inner = canonicalize(fragments)
    if not inner:
        return ""
    return f"{prefix}:({inner})"


def expand_variant_groups(classes: str) -> str:
    """
    Expand grouped variants into per-token prefixes.

    ``hover:(bg-red-500 scale-105)`` becomes
    ``hover:bg-red-500 hover:scale-105``, for CSS frameworks that do not
    understand the grouped form. The result is canonicalized.
    """
    expanded: list[str] = []
    for token in split_classes(classes):
        open_at = token.find("(")
        if open_at == -1 or not token.endswith(")"):
            expanded.append(token)
            continue
        prefix = token[:open_at]
        for inner in split_classes(token[open_at + 1 : -1]):
            expanded.append(f"{prefix}{inner}")
    return canonicalize(expanded)


__all__ = [
    "canonicalize",
    "drop_prefixed",
    "expand_variant_groups",
    "merge_classes",
    "split_classes",
    "variant_group",
]
