from dataclasses import dataclass
from typing import List, Optional, Sequence

from commentdeck.comments.models import Comment, PaginationInfo

MAX_VISIBLE_PAGES = 5


@dataclass(frozen=True)
class PageSlice:
    """Comments on the current page together with their pagination metadata."""

    comments: List[Comment]
    info: PaginationInfo


def paginate_comments(comments: Sequence[Comment], current_page: int, page_size: int) -> PageSlice:
    """Slice an ordered collection into the requested page.

    The page number is not clamped: a page past the end yields an empty slice, with a display start
    greater than the display end.

    Args:
        comments: The filtered and sorted collection.
        current_page: 1-based page number.
        page_size: Number of comments per page.

    Returns:
        PageSlice: The comments in ``[start, end)`` and the derived ``PaginationInfo``.

    Raises:
        ValueError: If ``current_page`` or ``page_size`` is smaller than 1.
    """
    if page_size < 1:
        raise ValueError(f"page_size must be at least 1, got {page_size}")
    if current_page < 1:
        raise ValueError(f"current_page must be at least 1, got {current_page}")

    info = PaginationInfo.compute(len(comments), current_page, page_size)
    start = info.start_index - 1
    return PageSlice(comments=list(comments[start : info.end_index]), info=info)


def page_numbers(current_page: int, total_pages: int) -> List[Optional[int]]:
    """
    Condensed page list for the pager, ``None`` standing for an ellipsis.

    All pages are listed when they fit in ``MAX_VISIBLE_PAGES``. Otherwise the first and last pages are
    always shown, the first four pages near the start, the last four near the end, and the current page
    with its neighbours in between.

    Example:
        >>> page_numbers(5, 10)
        [1, None, 4, 5, 6, None, 10]
    """
    if total_pages <= MAX_VISIBLE_PAGES:
        return list(range(1, total_pages + 1))
    if current_page <= 3:
        return [1, 2, 3, 4, None, total_pages]
    if current_page >= total_pages - 2:
        return [1, None, *range(total_pages - 3, total_pages + 1)]
    return [1, None, current_page - 1, current_page, current_page + 1, None, total_pages]
