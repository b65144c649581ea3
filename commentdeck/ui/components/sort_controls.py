import reflex as rx

from commentdeck.comments import SortField
from commentdeck.ui.state import DashboardState
from commentdeck.ui.styles import COLORS, CSS_SPACING, SIZING, SPACING, TRANSITIONS, TYPOGRAPHY, button_variants

SORT_LABELS = {
    SortField.POST_ID: "Post ID",
    SortField.NAME: "Name",
    SortField.EMAIL: "Email",
}


def sort_button(field: SortField) -> rx.Component:
    """Toggle button for one sortable field; highlighted with an arrow while active."""
    active = DashboardState.sort_field == field.value
    return rx.button(
        rx.text(SORT_LABELS[field]),
        rx.cond(
            active,
            rx.text(DashboardState.sort_indicators[field.value], font_size=TYPOGRAPHY["font_sizes"]["xs"]),
        ),
        on_click=DashboardState.toggle_sort(field.value),
        background_color=rx.cond(active, COLORS["primary"], button_variants["muted"]["background_color"]),
        color=rx.cond(active, COLORS["primary_text"], button_variants["muted"]["color"]),
        font_size=TYPOGRAPHY["font_sizes"]["sm"],
        font_weight=TYPOGRAPHY["font_weights"]["medium"],
        padding=f"{CSS_SPACING['sm']} 0.75rem",
        border_radius=SIZING["border_radius"],
        transition=TRANSITIONS["normal"],
        cursor="pointer",
    )


def sort_controls() -> rx.Component:
    return rx.hstack(
        rx.text(
            "Sort by:",
            font_size=TYPOGRAPHY["font_sizes"]["sm"],
            font_weight=TYPOGRAPHY["font_weights"]["medium"],
            color=COLORS["text_muted"],
        ),
        *[sort_button(field) for field in SortField],
        spacing=SPACING["sm"],
        align="center",
        flex_wrap="wrap",
    )
