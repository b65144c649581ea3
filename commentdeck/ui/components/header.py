"""Top bar shared by the dashboard and profile pages.

Shows the product mark on the left and the current user's avatar, name and status on the right.
"""

import reflex as rx

from commentdeck.ui.styles import BOX_SHADOWS, COLORS, CSS_SPACING, SIZING, SPACING, TRANSITIONS, TYPOGRAPHY, WIDTHS


def avatar(
    initials, background=COLORS["primary"], color: str = COLORS["primary_text"], size: str = SIZING["avatar"]
) -> rx.Component:
    """Round avatar with the user's initials."""
    return rx.center(
        rx.text(
            initials,
            color=color,
            font_size=TYPOGRAPHY["font_sizes"]["sm"],
            font_weight=TYPOGRAPHY["font_weights"]["medium"],
        ),
        width=size,
        height=size,
        border_radius="50%",
        background=background,
    )


def header(initials, name, status, avatar_background=COLORS["primary"], href: str | None = None) -> rx.Component:
    """Page header with the user badge.

    Args:
        initials: Avatar initials, a string or a state Var.
        name: Display name.
        status: Secondary line under the name.
        avatar_background: Avatar fill color.
        href: When given, the user badge links to this route.

    Returns:
        The header bar component.
    """
    badge = rx.hstack(
        avatar(initials, background=avatar_background),
        rx.vstack(
            rx.text(
                name,
                font_size=TYPOGRAPHY["font_sizes"]["sm"],
                font_weight=TYPOGRAPHY["font_weights"]["medium"],
            ),
            rx.text(status, font_size=TYPOGRAPHY["font_sizes"]["xs"], color=COLORS["text_muted"]),
            spacing="0",
            display=["none", "flex"],
        ),
        spacing=SPACING["sm"],
        align="center",
        padding=f"{CSS_SPACING['sm']} 0.75rem",
        border_radius=SIZING["border_radius"],
        transition=TRANSITIONS["normal"],
        _hover={"background": COLORS["surface_muted"]} if href else {},
    )

    return rx.box(
        rx.hstack(
            rx.text(
                "CommentDeck",
                font_size=TYPOGRAPHY["font_sizes"]["2xl"],
                font_weight=TYPOGRAPHY["font_weights"]["bold"],
                color=COLORS["primary"],
            ),
            rx.spacer(),
            rx.link(badge, href=href, underline="none") if href else badge,
            justify="between",
            align="center",
            width=WIDTHS["full"],
        ),
        padding=f"{CSS_SPACING['md']} {CSS_SPACING['lg']}",
        background=COLORS["surface"],
        border_bottom=f"{SIZING['border_width']} solid {COLORS['border']}",
        box_shadow=BOX_SHADOWS["lg"],
    )
