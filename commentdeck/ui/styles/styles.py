"""Global styles and reusable style variants for the dashboard."""

import reflex as rx

from .theme import COLORS, CSS_SPACING, SIZING, TYPOGRAPHY

styles = {
    "body": {
        "background_color": COLORS["background"],
        "color": COLORS["text"],
        "font_family": TYPOGRAPHY["font_family"],
        "margin": "0",
        "padding": "0",
    },
    rx.heading: {
        "color": COLORS["text"],
        "font_weight": TYPOGRAPHY["font_weights"]["semibold"],
    },
    rx.text: {
        "color": COLORS["text"],
        "line_height": "1.5",
    },
}

BOX_SHADOWS = {
    "sm": "0 1px 2px rgba(0, 0, 0, 0.05)",
    "lg": "0 8px 16px rgba(0, 0, 0, 0.08)",
}

TRANSITIONS = {
    "normal": "all 0.2s ease",
}

WIDTHS = {
    "full": "100%",
}

button_variants = {
    "primary": {
        "background_color": COLORS["primary"],
        "color": COLORS["primary_text"],
        "border": "none",
        "cursor": "pointer",
    },
    "muted": {
        "background_color": COLORS["surface_muted"],
        "color": COLORS["text_muted"],
        "border": "none",
        "cursor": "pointer",
        "_hover": {"background_color": COLORS["border"]},
    },
    "ghost": {
        "background_color": COLORS["transparent"],
        "color": COLORS["text_muted"],
        "border": "none",
        "cursor": "pointer",
        "_hover": {"color": COLORS["text"]},
    },
}

card_variants = {
    "default": {
        "background": COLORS["surface"],
        "border": f"{SIZING['border_width']} solid {COLORS['border']}",
        "border_radius": SIZING["border_radius"],
        "box_shadow": BOX_SHADOWS["sm"],
        "width": WIDTHS["full"],
    },
}

field_style = {
    "background": COLORS["background"],
    "border": f"{SIZING['border_width']} solid {COLORS['border']}",
    "border_radius": "6px",
    "padding": f"{CSS_SPACING['sm']} 0.75rem",
    "color": COLORS["text"],
}
