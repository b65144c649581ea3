import reflex as rx

from commentdeck.comments import SortField
from commentdeck.ui.state import DashboardState
from commentdeck.ui.styles import COLORS, CSS_SPACING, SIZING, TYPOGRAPHY

COLUMNS = [
    {"id": "post_id", "label": "Post ID", "sort": SortField.POST_ID, "width": "7rem"},
    {"id": "name", "label": "Name", "sort": SortField.NAME, "width": "16rem"},
    {"id": "email", "label": "Email", "sort": SortField.EMAIL, "width": "16rem"},
    {"id": "body", "label": "Comment", "sort": None, "width": "auto"},
]


def _header_cell(col: dict) -> rx.Component:
    label = rx.text(col["label"], font_size=TYPOGRAPHY["font_sizes"]["xs"], weight="bold", color=COLORS["text_muted"])
    sort = col["sort"]
    if sort is None:
        return rx.table.column_header_cell(label, width=col["width"])
    return rx.table.column_header_cell(
        rx.hstack(
            label,
            rx.text(DashboardState.sort_indicators[sort.value], font_size=TYPOGRAPHY["font_sizes"]["xs"]),
            spacing="1",
            align="center",
            cursor="pointer",
            on_click=DashboardState.toggle_sort(sort.value),
        ),
        width=col["width"],
    )


def _row(row) -> rx.Component:
    return rx.table.row(
        rx.table.cell(rx.text(row["post_id"], font_size=TYPOGRAPHY["font_sizes"]["sm"])),
        rx.table.cell(rx.text(row["name"], font_size=TYPOGRAPHY["font_sizes"]["sm"], weight="medium")),
        rx.table.cell(rx.text(row["email"], font_size=TYPOGRAPHY["font_sizes"]["sm"], color=COLORS["primary"])),
        rx.table.cell(_body(row)),
        _hover={"background": COLORS["background"]},
    )


def _body(row) -> rx.Component:
    """Comment body; long bodies start as a preview with a See more / See less toggle."""
    expanded = DashboardState.expanded_ids.contains(row["id"])
    return rx.text(
        rx.cond(expanded, row["body"], row["preview"]),
        rx.cond(
            row["expandable"],
            rx.link(
                rx.cond(expanded, " See less", " See more"),
                on_click=DashboardState.toggle_comment(row["id"]),
                font_size=TYPOGRAPHY["font_sizes"]["xs"],
                font_weight=TYPOGRAPHY["font_weights"]["medium"],
                color=COLORS["primary"],
                cursor="pointer",
            ),
        ),
        font_size=TYPOGRAPHY["font_sizes"]["sm"],
        color=COLORS["text_muted"],
    )


def _empty_row() -> rx.Component:
    return rx.table.row(
        rx.table.cell(
            rx.center(
                rx.text("No comments match your search.", color=COLORS["text_muted"]),
                padding=CSS_SPACING["xl"],
            ),
            col_span=len(COLUMNS),
        ),
    )


def comments_table() -> rx.Component:
    """The current page of comments, or a single empty row when nothing matches."""
    return rx.table.root(
        rx.table.header(
            rx.table.row(*[_header_cell(col) for col in COLUMNS], background=COLORS["background"]),
        ),
        rx.table.body(
            rx.cond(
                DashboardState.has_rows,
                rx.foreach(DashboardState.rows, _row),
                _empty_row(),
            ),
        ),
        variant="ghost",
        width="100%",
        border_bottom=f"{SIZING['border_width']} solid {COLORS['border']}",
    )
