"""
Rendered Class Caching

Memoizes rendered class strings for pattern and builder values. Values
are immutable and their rendering is deterministic, so the value itself
(through its repr) is the cache key.

The cache is injected by the caller; patterns and builders never hold one.
"""

from __future__ import annotations

import hashlib
import logging
import threading
from collections import OrderedDict
from collections.abc import Callable
from typing import Any

from classforge.composition import render as default_render

logger = logging.getLogger(__name__)

DEFAULT_MAX_ENTRIES = 1024


class ClassCache:
    """Bounded in-memory LRU cache of rendered class strings."""

    def __init__(self, max_entries: int = DEFAULT_MAX_ENTRIES):
        """
        Initialize class cache.

        Args:
            max_entries: Entries kept before the least recently used is evicted
        """
        if max_entries < 1:
            raise ValueError("max_entries must be at least 1")
        self.max_entries = max_entries
        self.hits = 0
        self.misses = 0
        self._entries: OrderedDict[str, str] = OrderedDict()
        self._lock = threading.Lock()

    def _compute_key(self, value: Any) -> str:
        """
        Compute the key for a value.

        Args:
            value: Pattern or builder value

        Returns:
            SHA-256 hash string of the value's type and repr
        """
        text = f"{type(value).__module__}.{type(value).__qualname__}:{value!r}"
        return hashlib.sha256(text.encode()).hexdigest()

    def get(self, value: Any) -> str | None:
        key = self._compute_key(value)
        with self._lock:
            classes = self._entries.get(key)
            if classes is None:
                self.misses += 1
                return None
            self._entries.move_to_end(key)
            self.hits += 1
            return classes

    def set(self, value: Any, classes: str) -> None:
        key = self._compute_key(value)
        with self._lock:
            self._entries[key] = classes
            self._entries.move_to_end(key)
            while len(self._entries) > self.max_entries:
                evicted, _ = self._entries.popitem(last=False)
                logger.debug(f"Evicted cached classes {evicted[:12]}")

    def get_or_render(self, value: Any, render: Callable[[Any], str] | None = None) -> str:
        """
        Return cached classes for a value, rendering on a miss.

        Args:
            value: Pattern or builder value
            render: Renderer; defaults to ``value.build()`` or ``value.classes()``

        Returns:
            Rendered class string
        """
        cached = self.get(value)
        if cached is not None:
            return cached

        classes = (render or default_render)(value)
        self.set(value, classes)
        return classes

    def invalidate(self, value: Any) -> None:
        key = self._compute_key(value)
        with self._lock:
            self._entries.pop(key, None)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()
            self.hits = 0
            self.misses = 0

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, value: Any) -> bool:
        key = self._compute_key(value)
        with self._lock:
            return key in self._entries


__all__ = ["ClassCache", "DEFAULT_MAX_ENTRIES"]
