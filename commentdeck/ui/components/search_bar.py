import reflex as rx

from commentdeck.ui.state import DashboardState
from commentdeck.ui.styles import COLORS, SIZING, WIDTHS


def search_bar(placeholder: str = "Search comments...") -> rx.Component:
    """Search input over name, email and body, with a clear button while a term is set."""
    return rx.input(
        rx.input.slot(rx.icon("search", size=16, color=COLORS["text_muted"])),
        rx.cond(
            DashboardState.search != "",
            rx.input.slot(
                rx.icon_button(
                    rx.icon("x", size=14),
                    variant="ghost",
                    size="1",
                    color_scheme="gray",
                    on_click=DashboardState.clear_search,
                ),
            ),
        ),
        value=DashboardState.search,
        on_change=DashboardState.update_search,
        placeholder=placeholder,
        size="2",
        width=WIDTHS["full"],
        max_width=["none", "none", "none", SIZING["search_width"]],
    )
