import reflex as rx

from commentdeck.ui.state import DashboardState
from commentdeck.ui.controllers import PAGE_SIZE_LABELS
from commentdeck.ui.styles import COLORS, CSS_SPACING, SPACING, TYPOGRAPHY


def page_button(n) -> rx.Component:
    """Button for page ``n``; ``n`` is a Var coming from ``rx.foreach``."""
    return rx.button(
        rx.text(n),
        variant=rx.cond(n == DashboardState.current_page, "solid", "ghost"),
        size="1",
        on_click=DashboardState.go_to_page(n),
    )


def page_summary() -> rx.Component:
    return rx.text(DashboardState.pagination_label, font_size=TYPOGRAPHY["font_sizes"]["sm"])


def page_size_selector(label: str = "/ Page") -> rx.Component:
    return rx.hstack(
        rx.text(label, font_size=TYPOGRAPHY["font_sizes"]["sm"], color=COLORS["text_muted"]),
        rx.select(
            PAGE_SIZE_LABELS,
            value=DashboardState.page_size_value,
            on_change=DashboardState.update_page_size,
            size="1",
        ),
        spacing=SPACING["sm"],
        align="center",
    )


def pagination() -> rx.Component:
    """Item range, Prev/Next, the condensed page window and the page size selector.

    The page window comes precomputed from ``DashboardState.pages``; rendering only uses ``rx.foreach`` and
    ``rx.cond`` so it works with Vars.
    """
    prev_button = rx.icon_button(
        rx.icon("chevron-left", size=16),
        variant="ghost",
        size="1",
        disabled=DashboardState.prev_disabled,
        on_click=DashboardState.previous_page,
    )
    next_button = rx.icon_button(
        rx.icon("chevron-right", size=16),
        variant="ghost",
        size="1",
        disabled=DashboardState.next_disabled,
        on_click=DashboardState.next_page,
    )
    desktop = rx.hstack(
        page_summary(),
        rx.hstack(
            prev_button,
            rx.foreach(
                DashboardState.pages,
                lambda item: rx.cond(
                    item["kind"] == "ellipsis",
                    rx.text("...", font_size=TYPOGRAPHY["font_sizes"]["sm"], color=COLORS["text_muted"]),
                    page_button(item["n"]),
                ),
            ),
            next_button,
            page_size_selector(),
            spacing=SPACING["sm"],
            align="center",
        ),
        justify="between",
        align="center",
        width="100%",
        display=["none", "none", "flex"],
    )

    mobile = rx.vstack(
        page_summary(),
        rx.hstack(
            rx.button("Prev", variant="outline", size="1", disabled=DashboardState.prev_disabled,
                      on_click=DashboardState.previous_page),
            rx.text(DashboardState.page_position, font_size=TYPOGRAPHY["font_sizes"]["sm"], weight="medium"),
            rx.button("Next", variant="outline", size="1", disabled=DashboardState.next_disabled,
                      on_click=DashboardState.next_page),
            spacing=SPACING["sm"],
            align="center",
        ),
        page_size_selector("Show:"),
        align="center",
        spacing=SPACING["md"],
        width="100%",
        display=["flex", "flex", "none"],
    )

    return rx.box(
        desktop,
        mobile,
        padding=f"{CSS_SPACING['md']} {CSS_SPACING['lg']}",
        background=COLORS["surface"],
    )
