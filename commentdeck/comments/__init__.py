"""Comment records and the search, sort and paginate pipeline behind the dashboard."""

from commentdeck.comments.filter_state import (
    FilterIntent,
    PageChanged,
    PageSizeChanged,
    SearchChanged,
    SortRequested,
    reduce_filter_state,
)
from commentdeck.comments.models import (
    PAGE_SIZE_OPTIONS,
    SEARCHABLE_FIELDS,
    Comment,
    FilterState,
    PaginationInfo,
    SortDirection,
    SortField,
    SortState,
)
from commentdeck.comments.pagination import PageSlice, page_numbers, paginate_comments
from commentdeck.comments.pipeline import ProcessedComments, process_comments
from commentdeck.comments.search import search_comments
from commentdeck.comments.sorting import next_sort_direction, sort_comments, toggle_sort
from commentdeck.comments.source import FetchResult, RecordSource
from commentdeck.comments.store import (
    FilterStateStore,
    KeyValueStorage,
    MemoryStorage,
    dump_filter_state,
    load_filter_state,
)

__all__ = [
    "PAGE_SIZE_OPTIONS",
    "SEARCHABLE_FIELDS",
    "Comment",
    "FetchResult",
    "FilterIntent",
    "FilterState",
    "FilterStateStore",
    "KeyValueStorage",
    "MemoryStorage",
    "PageChanged",
    "PageSizeChanged",
    "PageSlice",
    "PaginationInfo",
    "ProcessedComments",
    "RecordSource",
    "SearchChanged",
    "SortDirection",
    "SortField",
    "SortRequested",
    "SortState",
    "dump_filter_state",
    "load_filter_state",
    "next_sort_direction",
    "page_numbers",
    "paginate_comments",
    "process_comments",
    "reduce_filter_state",
    "search_comments",
    "sort_comments",
    "toggle_sort",
]
