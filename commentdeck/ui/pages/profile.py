"""User profile page - details of the first user returned by the users endpoint."""

import reflex as rx

from commentdeck.ui.components import avatar, empty_state, header, loading_state
from commentdeck.ui.state import ProfileState
from commentdeck.ui.styles import COLORS, CSS_SPACING, SIZING, SPACING, TYPOGRAPHY, card_variants, field_style

DASHBOARD_ROUTE = "/dashboard"


def form_field(label: str, value) -> rx.Component:
    """Read-only labelled value."""
    return rx.vstack(
        rx.text(
            label,
            font_size=TYPOGRAPHY["font_sizes"]["sm"],
            font_weight=TYPOGRAPHY["font_weights"]["medium"],
            color=COLORS["text_muted"],
        ),
        rx.box(rx.text(value), width="100%", **field_style),
        spacing=SPACING["sm"],
        width="100%",
    )


def back_bar() -> rx.Component:
    return rx.hstack(
        rx.icon_button(
            rx.icon("chevron-left", size=20),
            variant="ghost",
            color_scheme="gray",
            on_click=rx.redirect(DASHBOARD_ROUTE),
        ),
        rx.text(
            f"Welcome, {ProfileState.name}",
            font_size=TYPOGRAPHY["font_sizes"]["xl"],
            font_weight=TYPOGRAPHY["font_weights"]["semibold"],
        ),
        spacing=SPACING["sm"],
        align="center",
        margin_bottom=CSS_SPACING["lg"],
    )


def profile_card() -> rx.Component:
    return rx.box(
        rx.hstack(
            avatar(
                ProfileState.initials,
                background=COLORS["surface_muted"],
                color=COLORS["text_muted"],
                size=SIZING["avatar_large"],
            ),
            rx.vstack(
                rx.heading(ProfileState.name, size="5"),
                rx.text(ProfileState.email, color=COLORS["text_muted"]),
                spacing="1",
            ),
            spacing=SPACING["lg"],
            align="center",
            margin_bottom=CSS_SPACING["xl"],
        ),
        rx.grid(
            form_field("User ID", ProfileState.user_id),
            form_field("Name", ProfileState.name),
            form_field("Email ID", ProfileState.email),
            form_field("Address", ProfileState.address),
            form_field("Phone", ProfileState.phone),
            columns=rx.breakpoints(initial="1", md="2"),
            spacing=SPACING["xl"],
            width="100%",
        ),
        padding=[CSS_SPACING["xl"], CSS_SPACING["xl"], CSS_SPACING["2xl"]],
        **card_variants["default"],
    )


def profile_content() -> rx.Component:
    return rx.box(
        back_bar(),
        profile_card(),
        padding=CSS_SPACING["lg"],
        margin_x="auto",
        max_width=SIZING["max_width_content"],
    )


def profile_page() -> rx.Component:
    """Profile with loading, error and no-data states."""
    return rx.box(
        header(
            ProfileState.initials,
            ProfileState.header_name,
            ProfileState.header_status,
            avatar_background=rx.cond(ProfileState.has_user, COLORS["primary"], COLORS["text_muted"]),
        ),
        rx.cond(
            ProfileState.loading,
            loading_state("Loading profile..."),
            rx.cond(
                ProfileState.has_user,
                profile_content(),
                empty_state(
                    "No user data found",
                    "Back to Dashboard",
                    rx.redirect(DASHBOARD_ROUTE),
                    detail=ProfileState.error,
                ),
            ),
        ),
        min_height=SIZING["full_height"],
        background=COLORS["background"],
        on_unmount=ProfileState.release,
    )


on_load = ProfileState.load_profile
