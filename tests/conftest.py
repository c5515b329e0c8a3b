"""Shared pytest fixtures for classforge tests."""

import pytest

from classforge.themes import Theme, default_theme, get_theme


@pytest.fixture
def theme() -> Theme:
    """Return the default (vibe) theme."""
    return default_theme()


@pytest.fixture
def blue_theme() -> Theme:
    """Return a theme whose primary color is blue-600."""
    return default_theme().with_overrides(primary="blue-600")


@pytest.fixture
def jupiter() -> Theme:
    found = get_theme("jupiter")
    assert found is not None
    return found
