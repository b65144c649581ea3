from dataclasses import dataclass
from typing import List, Optional, Sequence

from commentdeck.comments.models import Comment, FilterState, PaginationInfo
from commentdeck.comments.pagination import paginate_comments, page_numbers
from commentdeck.comments.search import search_comments
from commentdeck.comments.sorting import sort_comments


@dataclass(frozen=True)
class ProcessedComments:
    """Everything the dashboard renders for one filter state."""

    comments: List[Comment]
    info: PaginationInfo
    pages: List[Optional[int]]


def process_comments(comments: Sequence[Comment], filter_state: FilterState) -> ProcessedComments:
    """Run search, sort and pagination over the full collection.

    A pure function of its inputs; it is recomputed from scratch on every call.
    """
    matched = search_comments(comments, filter_state.search)
    ordered = sort_comments(matched, filter_state.sort)
    page = paginate_comments(ordered, filter_state.current_page, filter_state.page_size)
    return ProcessedComments(
        comments=page.comments,
        info=page.info,
        pages=page_numbers(page.info.current_page, page.info.total_pages),
    )
