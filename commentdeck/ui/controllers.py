"""Event flow behind the dashboard and profile states.

The controllers read and write the fields of whatever state object they wrap, so the same code runs against a
``rx.State`` (or its background-task proxy) and against a plain namespace in tests.
"""

from typing import Any, Dict, List, Optional

from commentdeck.comments import (
    PAGE_SIZE_OPTIONS,
    Comment,
    FetchResult,
    FilterIntent,
    FilterState,
    FilterStateStore,
    PageChanged,
    PageSizeChanged,
    SortDirection,
    SortField,
    SortState,
    dump_filter_state,
    process_comments,
    reduce_filter_state,
)
from commentdeck.core import CoreSettings, get_logger
from commentdeck.users import User, format_address, format_user_id, select_profile_user, user_initials

logger = get_logger("ui.controllers")

STORAGE_KEY = CoreSettings().COMMENTDECK_DASHBOARD.STORAGE_KEY
PAGE_SIZE_LABELS = [str(size) for size in PAGE_SIZE_OPTIONS]
SORT_ARROWS = {SortDirection.ASC.value: "↑", SortDirection.DESC.value: "↓"}
BODY_PREVIEW_LENGTH = 100


def truncate_text(text: str, max_length: int = BODY_PREVIEW_LENGTH) -> str:
    if len(text) <= max_length:
        return text
    return text[:max_length] + "..."


def comment_row(comment: Comment) -> Dict[str, Any]:
    """Table row for a comment. The Post ID column shows the record's own ``postId``."""
    return {
        "id": comment.id,
        "post_id": comment.post_id,
        "name": comment.name,
        "email": comment.email,
        "body": comment.body,
        "preview": truncate_text(comment.body),
        "expandable": len(comment.body) > BODY_PREVIEW_LENGTH,
    }


def page_buttons(pages: List[Optional[int]]) -> List[Dict[str, Any]]:
    """Display model for the pager: ``{"kind": "page", "n": p}`` or ``{"kind": "ellipsis", "n": 0}``."""
    return [{"kind": "ellipsis", "n": 0} if p is None else {"kind": "page", "n": p} for p in pages]


def sort_arrows(sort_field: str, sort_direction: str) -> Dict[str, str]:
    """Arrow shown next to each sort control; empty for inactive fields."""
    arrow = SORT_ARROWS.get(sort_direction, "")
    return {field.value: arrow if field.value == sort_field else "" for field in SortField}


class _LocalStorageAdapter:
    """Exposes the state's LocalStorage var as a KeyValueStorage bound to a single key."""

    def __init__(self, state):
        self._state = state

    def get(self, key: str) -> Optional[str]:
        return self._state.stored_filters or None

    def set(self, key: str, value: str) -> None:
        self._state.stored_filters = value


class LoadGuard:
    """Fetch tokens kept in a state's ``_loading_token`` backend var.

    A fetch takes a token when it starts. ``release`` or a newer fetch makes the token stale, and the result of a
    fetch holding a stale token must be dropped.
    """

    def __init__(self, state):
        self._state = state

    def begin(self) -> int:
        self._state._loading_token += 1
        return self._state._loading_token

    def release(self) -> None:
        self._state._loading_token += 1

    def is_current(self, token: int) -> bool:
        return token == self._state._loading_token


class DashboardController:
    """Filters, paging and loading for the comments dashboard.

    Intents run through the filter-state reducer, the result is written to the state's LocalStorage var and the
    visible page is recomputed. Invalid intents are logged and leave the state untouched.
    """

    def __init__(self, state, key: str = STORAGE_KEY):
        self._state = state
        self.key = key

    # ------------------------------ Filters ----------------------------------
    def restore(self) -> FilterState:
        """Apply the filters persisted in the browser, or the defaults when there are none."""
        filters = FilterStateStore(_LocalStorageAdapter(self._state), key=self.key).state
        self.apply(filters)
        return filters

    def dispatch(self, intent: FilterIntent) -> bool:
        try:
            filters = reduce_filter_state(self.filters(), intent)
        except ValueError as e:
            logger.warning(f"Ignoring invalid dashboard intent {intent!r}: {e}")
            return False
        self._state.stored_filters = dump_filter_state(filters)
        self.apply(filters)
        return True

    def set_page_size(self, value: str) -> bool:
        try:
            page_size = int(value)
        except ValueError:
            logger.warning(f"Ignoring non-numeric page size {value!r}.")
            return False
        return self.dispatch(PageSizeChanged(page_size))

    def previous_page(self) -> bool:
        if self._state.prev_disabled:
            return False
        return self.dispatch(PageChanged(self._state.current_page - 1))

    def next_page(self) -> bool:
        if self._state.next_disabled:
            return False
        return self.dispatch(PageChanged(self._state.current_page + 1))

    def filters(self) -> FilterState:
        state = self._state
        sort = SortState()
        if state.sort_field:
            sort = SortState(field=SortField(state.sort_field), direction=SortDirection(state.sort_direction))
        return FilterState(search=state.search, sort=sort, current_page=state.current_page, page_size=state.page_size)

    def apply(self, filters: FilterState) -> None:
        state = self._state
        state.search = filters.search
        state.sort_field = filters.sort.field.value if filters.sort.field else ""
        state.sort_direction = filters.sort.direction.value if filters.sort.direction else ""
        state.current_page = filters.current_page
        state.page_size = filters.page_size
        self.refresh()

    def refresh(self) -> None:
        state = self._state
        processed = process_comments(state._comments, self.filters())
        info = processed.info
        state.rows = [comment_row(comment) for comment in processed.comments]
        state.pages = page_buttons(processed.pages)
        state.total_items = info.total_items
        state.total_pages = info.total_pages
        state.start_index = info.start_index
        state.end_index = info.end_index
        state.pagination_label = info.label
        state.prev_disabled = not info.has_previous
        state.next_disabled = not info.has_next

    # ------------------------------ Rows -------------------------------------
    def toggle_comment(self, comment_id: int) -> None:
        """Show or hide the full body of one comment."""
        comment_id = int(comment_id)
        expanded = self._state.expanded_ids
        if comment_id in expanded:
            self._state.expanded_ids = [i for i in expanded if i != comment_id]
        else:
            self._state.expanded_ids = expanded + [comment_id]

    # ------------------------------ Loading ----------------------------------
    def begin_load(self) -> int:
        self._state.loading = True
        self._state.error = ""
        return LoadGuard(self._state).begin()

    def finish_load(self, token: int, result: FetchResult[Comment]) -> bool:
        """Apply a finished fetch. Returns False and changes nothing when ``token`` is stale."""
        if not LoadGuard(self._state).is_current(token):
            logger.debug("Discarding stale comments fetch.")
            return False
        self._state._comments = result.records
        self._state.error = result.error or ""
        self._state.loading = False
        self.refresh()
        return True


class ProfileController:
    """Loading and display fields for the profile of the first user."""

    def __init__(self, state):
        self._state = state

    def begin_load(self) -> int:
        self._state.loading = True
        self._state.error = ""
        return LoadGuard(self._state).begin()

    def finish_load(self, token: int, result: FetchResult[User]) -> bool:
        if not LoadGuard(self._state).is_current(token):
            logger.debug("Discarding stale users fetch.")
            return False
        self._state.error = result.error or ""
        self.show(select_profile_user(result.records))
        self._state.loading = False
        return True

    def show(self, user: Optional[User]) -> None:
        state = self._state
        state.has_user = user is not None
        if user is None:
            state.initials = "?"
            state.name = state.email = state.user_id = state.address = state.phone = ""
            return
        state.initials = user_initials(user.name)
        state.name = user.name
        state.email = user.email
        state.user_id = format_user_id(user.id)
        state.address = format_address(user.address)
        state.phone = user.phone
