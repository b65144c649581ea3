from commentdeck.ui.components.comments_table import comments_table
from commentdeck.ui.components.header import avatar, header
from commentdeck.ui.components.pagination import pagination
from commentdeck.ui.components.search_bar import search_bar
from commentdeck.ui.components.sort_controls import sort_controls
from commentdeck.ui.components.status import empty_state, error_state, loading_state

__all__ = [
    "avatar",
    "comments_table",
    "empty_state",
    "error_state",
    "header",
    "loading_state",
    "pagination",
    "search_bar",
    "sort_controls",
]
