"""User intents and the single reducer that applies them to a ``FilterState``.

Search, sort and page-size changes always send the user back to the first page; a page change touches
nothing else.
"""

from dataclasses import dataclass
from typing import Union

from commentdeck.comments.models import FilterState, SortField
from commentdeck.comments.sorting import toggle_sort


@dataclass(frozen=True)
class SearchChanged:
    term: str


@dataclass(frozen=True)
class SortRequested:
    field: Union[SortField, str]


@dataclass(frozen=True)
class PageChanged:
    page: int


@dataclass(frozen=True)
class PageSizeChanged:
    page_size: int


FilterIntent = Union[SearchChanged, SortRequested, PageChanged, PageSizeChanged]


def reduce_filter_state(state: FilterState, intent: FilterIntent) -> FilterState:
    """Return the filter state that results from applying ``intent`` to ``state``.

    Raises:
        ValueError: If the intent carries a value outside its allowed set (page below 1, unsupported page
            size, unknown sort field).
        TypeError: If ``intent`` is not a known intent type.
    """
    if isinstance(intent, SearchChanged):
        return state.evolve(search=intent.term, current_page=1)
    if isinstance(intent, SortRequested):
        return state.evolve(sort=toggle_sort(state.sort, intent.field), current_page=1)
    if isinstance(intent, PageSizeChanged):
        return state.evolve(page_size=intent.page_size, current_page=1)
    if isinstance(intent, PageChanged):
        return state.evolve(current_page=intent.page)
    raise TypeError(f"Unsupported filter intent: {intent!r}")
