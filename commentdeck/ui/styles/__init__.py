"""Styling system: theme, palette, spacing and component style variants."""

from .theme import theme_config, COLORS, TYPOGRAPHY, SPACING, CSS_SPACING, SIZING
from .styles import styles, button_variants, card_variants, field_style, BOX_SHADOWS, TRANSITIONS, WIDTHS

__all__ = [
    "theme_config",
    "styles",
    "button_variants",
    "card_variants",
    "field_style",
    "COLORS",
    "TYPOGRAPHY",
    "SPACING",
    "CSS_SPACING",
    "SIZING",
    "BOX_SHADOWS",
    "TRANSITIONS",
    "WIDTHS",
]
