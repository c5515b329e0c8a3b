"""
Built-in theme presets.

Each preset is a complete :class:`Theme`. Look them up by key with
``get_theme`` or derive a variant with ``Theme.with_overrides``.
"""

from __future__ import annotations

from .models import Palette, Theme, ThemeGradients

DEFAULT_THEME_KEY = "vibe"


# =============================================================================
# Vibe (default)
# =============================================================================

VIBE_THEME = Theme(
    name="Vibe",
    description="Default theme: tech blue brand with green and orange accents",
    palette=Palette(
        primary="jupiter-blue-500",
        secondary="jupiter-green-500",
        accent="jupiter-orange-500",
        interactive="jupiter-blue-500",
        interactive_hover="jupiter-blue-600",
        interactive_active="jupiter-blue-700",
    ),
)


# =============================================================================
# Water & Wellness
# =============================================================================

WATER_WELLNESS_THEME = Theme(
    name="Water & Wellness",
    description="Calm water blues and wellness greens",
    palette=Palette(),
)


# =============================================================================
# Jupiter Software
# =============================================================================

JUPITER_THEME = Theme(
    name="Jupiter Software",
    description="Planetary orange with tech blue",
    palette=Palette(
        primary="jupiter-orange-500",
        secondary="jupiter-blue-500",
        accent="jupiter-orange-400",
        success="green-500",
        warning="amber-500",
        error="red-500",
        info="jupiter-blue-500",
        surface="jupiter-gray-50",
        background="white",
        foreground="jupiter-gray-900",
        border="jupiter-gray-200",
        text_primary="jupiter-gray-900",
        text_secondary="jupiter-gray-700",
        text_tertiary="jupiter-gray-500",
        text_inverse="white",
        interactive="jupiter-orange-500",
        interactive_hover="jupiter-orange-600",
        interactive_active="jupiter-orange-700",
        interactive_disabled="jupiter-gray-300",
    ),
    hex_palette=Palette(
        primary="#FF6B35",
        secondary="#4A90E2",
        accent="#FF8C5A",
        success="#10B981",
        warning="#F59E0B",
        error="#EF4444",
        info="#4A90E2",
        surface="#F8FAFC",
        background="#FFFFFF",
        foreground="#1A202C",
        border="#E2E8F0",
        text_primary="#1A202C",
        text_secondary="#374151",
        text_tertiary="#64748B",
        text_inverse="#FFFFFF",
        interactive="#FF6B35",
        interactive_hover="#F49D37",
        interactive_active="#E8944A",
        interactive_disabled="#CBD5E1",
    ),
    gradients=ThemeGradients(
        primary="bg-gradient-to-r from-jupiter-orange-500 to-jupiter-orange-600",
        secondary="bg-gradient-to-r from-jupiter-blue-500 to-jupiter-blue-600",
        hero="bg-gradient-to-br from-jupiter-orange-50 via-white to-jupiter-blue-50",
        brand="bg-gradient-to-r from-jupiter-orange-600 to-jupiter-blue-600",
    ),
)


# =============================================================================
# LLASI
# =============================================================================

_LLASI_CSS = """\
:root {
  /* LLASI Brand Colors */
  --color-deep-charcoal: #212121;
  --color-pure-white: #ffffff;
  --color-warm-cream: #F4EEDA;
  --color-soft-gray: #6b6b6b;
  --color-border-gray: #e6e6e6;

  /* Extended Palette */
  --color-active-black: #000000;
  --color-light-gray: #e5e5e5;
  --color-highlight-gray: #f7f7f7;
  --color-footer-gray: #ebebeb;
  --color-input-gray: #d6d6d6;

  /* Accent Colors */
  --color-sale-red: #c60c0c;
  --color-brand-accent: #8e8e8e;

  /* Semantic Mappings */
  --color-text-primary: var(--color-deep-charcoal);
  --color-text-secondary: var(--color-soft-gray);
  --color-text-inactive: var(--color-light-gray);
  --color-bg-primary: var(--color-pure-white);
  --color-bg-secondary: var(--color-warm-cream);
  --color-bg-footer: var(--color-footer-gray);
  --color-button-primary: var(--color-deep-charcoal);
  --color-button-primary-text: var(--color-pure-white);
  --color-button-hover: var(--color-active-black);
  --color-sale: var(--color-sale-red);
  --color-border: var(--color-border-gray);
}"""

LLASI_THEME = Theme(
    name="LLASI",
    description="Deep charcoal on warm cream, retail styling",
    palette=Palette(
        primary="slate-900",
        secondary="slate-600",
        accent="slate-500",
        success="emerald-600",
        warning="amber-600",
        error="red-600",
        info="blue-600",
        surface="white",
        background="amber-50",
        foreground="slate-50",
        border="slate-200",
        text_primary="slate-900",
        text_secondary="slate-600",
        text_tertiary="slate-400",
        text_inverse="white",
        interactive="slate-900",
        interactive_hover="black",
        interactive_active="black",
        interactive_disabled="slate-300",
    ),
    hex_palette=Palette(
        primary="#212121",
        secondary="#6B6B6B",
        accent="#8E8E8E",
        success="",
        warning="",
        error="#C60C0C",
        info="",
        surface="#FFFFFF",
        background="#F4EEDA",
        foreground="",
        border="#E6E6E6",
        text_primary="#212121",
        text_secondary="#6B6B6B",
        text_tertiary="#E5E5E5",
        text_inverse="#FFFFFF",
        interactive="#212121",
        interactive_hover="#000000",
        interactive_active="#000000",
        interactive_disabled="#E5E5E5",
    ),
    css_custom_properties=_LLASI_CSS,
)


# =============================================================================
# Psychedelic
# =============================================================================

PSYCHEDELIC_THEME = Theme(
    name="Psychedelic",
    description="Electric neon on black",
    palette=Palette(
        primary="fuchsia-500",
        secondary="lime-400",
        accent="cyan-400",
        success="emerald-400",
        warning="orange-400",
        error="rose-400",
        info="violet-400",
        surface="slate-900",
        background="black",
        foreground="white",
        border="purple-500",
        text_primary="white",
        text_secondary="gray-200",
        text_tertiary="gray-400",
        text_inverse="black",
        interactive="fuchsia-500",
        interactive_hover="fuchsia-400",
        interactive_active="fuchsia-600",
        interactive_disabled="gray-600",
    ),
)


THEME_PRESETS: dict[str, Theme] = {
    "vibe": VIBE_THEME,
    "water-wellness": WATER_WELLNESS_THEME,
    "jupiter": JUPITER_THEME,
    "llasi": LLASI_THEME,
    "psychedelic": PSYCHEDELIC_THEME,
}


def get_theme(name: str) -> Theme | None:
    """
    Get a theme preset by key.

    Keys are matched case-insensitively; underscores and spaces count as
    hyphens (``"Water_Wellness"`` finds ``water-wellness``).
    """
    key = name.strip().lower().replace("_", "-").replace(" ", "-")
    return THEME_PRESETS.get(key)


def list_themes() -> list[str]:
    """List available preset keys."""
    return list(THEME_PRESETS.keys())


def default_theme() -> Theme:
    return THEME_PRESETS[DEFAULT_THEME_KEY]


__all__ = [
    "DEFAULT_THEME_KEY",
    "JUPITER_THEME",
    "LLASI_THEME",
    "PSYCHEDELIC_THEME",
    "THEME_PRESETS",
    "VIBE_THEME",
    "WATER_WELLNESS_THEME",
    "default_theme",
    "get_theme",
    "list_themes",
]
