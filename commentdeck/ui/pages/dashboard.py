"""Comments dashboard page - search, sort and paginate all comments."""

import reflex as rx

from commentdeck.ui.components import (
    comments_table,
    error_state,
    header,
    loading_state,
    pagination,
    search_bar,
    sort_controls,
)
from commentdeck.ui.state import DashboardState, ProfileState
from commentdeck.ui.styles import COLORS, CSS_SPACING, SIZING, card_variants


def control_panel() -> rx.Component:
    """Sort buttons on the left, search on the right; stacked on narrow screens."""
    return rx.box(
        rx.flex(
            sort_controls(),
            search_bar(),
            direction=rx.breakpoints(initial="column", lg="row"),
            justify="between",
            align=rx.breakpoints(initial="stretch", lg="center"),
            gap=CSS_SPACING["md"],
        ),
        padding=[CSS_SPACING["md"], CSS_SPACING["md"], CSS_SPACING["lg"]],
        margin_bottom=CSS_SPACING["lg"],
        **card_variants["default"],
    )


def dashboard_content() -> rx.Component:
    return rx.box(
        control_panel(),
        rx.box(
            comments_table(),
            pagination(),
            overflow="hidden",
            **card_variants["default"],
        ),
        padding=f"{CSS_SPACING['xl']} {CSS_SPACING['lg']}",
        margin_x="auto",
        max_width=SIZING["max_width_content"],
    )


def dashboard_page() -> rx.Component:
    """Dashboard with loading and error states around the comments view."""
    return rx.box(
        header(
            ProfileState.initials,
            ProfileState.header_name,
            ProfileState.header_status,
            href="/profile",
        ),
        rx.cond(
            DashboardState.loading,
            loading_state("Loading comments..."),
            rx.cond(
                DashboardState.error != "",
                error_state("Error loading comments", DashboardState.error),
                dashboard_content(),
            ),
        ),
        min_height=SIZING["full_height"],
        background=COLORS["background"],
        on_unmount=DashboardState.release,
    )


# Filters are restored before the comments fetch starts
on_load = [DashboardState.restore_filters, DashboardState.load_comments, ProfileState.load_profile]
