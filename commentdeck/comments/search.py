from typing import Sequence

from commentdeck.comments.models import SEARCHABLE_FIELDS, Comment


def matches(comment: Comment, term: str) -> bool:
    """Whether the lowercased term occurs in any searchable field of the comment."""
    needle = term.lower()
    return any(needle in getattr(comment, field).lower() for field in SEARCHABLE_FIELDS)


def search_comments(comments: Sequence[Comment], term: str) -> Sequence[Comment]:
    """Filter comments by a case-insensitive substring match on name, email and body.

    A blank term returns the input unchanged.
    """
    if not term.strip():
        return comments
    return [comment for comment in comments if matches(comment, term)]
