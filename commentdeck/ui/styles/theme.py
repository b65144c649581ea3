"""Light theme configuration for the dashboard."""

import reflex as rx

COLORS = {
    "primary": "#2563eb",  # Blue
    "primary_text": "#ffffff",
    "background": "#f9fafb",  # Page gray
    "surface": "#ffffff",
    "surface_muted": "#f3f4f6",
    "text": "#111827",
    "text_muted": "#6b7280",
    "border": "#e5e7eb",
    "error": "#dc2626",
    "transparent": "transparent",
}

TYPOGRAPHY = {
    "font_family": "Inter, system-ui, sans-serif",
    "font_sizes": {
        "xs": "0.75rem",
        "sm": "0.875rem",
        "base": "1rem",
        "lg": "1.125rem",
        "xl": "1.25rem",
        "2xl": "1.5rem",
    },
    "font_weights": {
        "normal": "400",
        "medium": "500",
        "semibold": "600",
        "bold": "700",
    },
}

# Spacing constants (using Reflex scale 0-9)
SPACING = {
    "xs": "1",
    "sm": "2",
    "md": "4",
    "lg": "6",
    "xl": "8",
}

# CSS spacing for direct use
CSS_SPACING = {
    "xs": "0.25rem",
    "sm": "0.5rem",
    "md": "1rem",
    "lg": "1.5rem",
    "xl": "2rem",
    "2xl": "3rem",
}

SIZING = {
    "border_radius": "8px",
    "border_width": "1px",
    "avatar": "2rem",
    "avatar_large": "5rem",
    "max_width_content": "80rem",
    "search_width": "20rem",
    "full_height": "100vh",
}

theme_config = rx.theme(
    appearance="light",
    accent_color="blue",
    gray_color="gray",
    radius="medium",
)
