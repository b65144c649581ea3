from typing import Any, Dict, List

import reflex as rx

from commentdeck.comments import PAGE_SIZE_OPTIONS, Comment, PageChanged, RecordSource, SearchChanged, SortRequested
from commentdeck.ui.controllers import STORAGE_KEY, DashboardController, LoadGuard, sort_arrows


class DashboardState(rx.State):
    """Comments dashboard: fetched records, persisted filters and the visible page."""

    # -------------------------- Persisted filters ----------------------------
    stored_filters: str = rx.LocalStorage("", name=STORAGE_KEY, sync=True)

    search: str = ""
    sort_field: str = ""
    sort_direction: str = ""
    current_page: int = 1
    page_size: int = PAGE_SIZE_OPTIONS[0]

    # -------------------------- Visible page ---------------------------------
    rows: List[Dict[str, Any]] = []
    pages: List[Dict[str, Any]] = []
    total_items: int = 0
    total_pages: int = 0
    start_index: int = 0
    end_index: int = 0
    pagination_label: str = ""
    prev_disabled: bool = True
    next_disabled: bool = True

    expanded_ids: List[int] = []

    loading: bool = True
    error: str = ""

    # -------------------------- Internal ------------------------------------
    _comments: List[Comment] = []
    _loading_token: int = 0  # prevents stale writes

    # -------------------------- Derived --------------------------------------
    @rx.var
    def page_position(self) -> str:
        return f"{self.current_page} of {self.total_pages}"

    @rx.var
    def has_rows(self) -> bool:
        return bool(self.rows)

    @rx.var
    def page_size_value(self) -> str:
        return str(self.page_size)

    @rx.var
    def sort_indicators(self) -> Dict[str, str]:
        return sort_arrows(self.sort_field, self.sort_direction)

    # -------------------------- Lifecycle ------------------------------------
    def restore_filters(self):
        """Load the persisted filters before the first render."""
        self._controller().restore()

    @rx.event(background=True)
    async def load_comments(self):
        async with self:
            token = DashboardController(self).begin_load()

        result = await RecordSource().fetch_comments()

        async with self:
            DashboardController(self).finish_load(token, result)

    def release(self):
        """Invalidate any in-flight fetch when the dashboard is torn down."""
        LoadGuard(self).release()

    # ------------------------------- Events ----------------------------------
    def update_search(self, term: str):
        self._controller().dispatch(SearchChanged(term))

    def clear_search(self):
        self._controller().dispatch(SearchChanged(""))

    def toggle_sort(self, field: str):
        self._controller().dispatch(SortRequested(field))

    def go_to_page(self, page: int):
        self._controller().dispatch(PageChanged(int(page)))

    def previous_page(self):
        self._controller().previous_page()

    def next_page(self):
        self._controller().next_page()

    def update_page_size(self, value: str):
        self._controller().set_page_size(value)

    def toggle_comment(self, comment_id: int):
        self._controller().toggle_comment(comment_id)

    def _controller(self) -> DashboardController:
        return DashboardController(self)
