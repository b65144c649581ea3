import unicodedata
from typing import Any, Callable, Optional, Sequence

from commentdeck.comments.models import Comment, SortDirection, SortField, SortState

_DIRECTION_CYCLE: dict[Optional[SortDirection], Optional[SortDirection]] = {
    None: SortDirection.ASC,
    SortDirection.ASC: SortDirection.DESC,
    SortDirection.DESC: None,
}


# CLDR root order of ASCII whitespace, punctuation and symbols; all of them sort before digits and letters
_SYMBOL_ORDER = "\t\n\r _-,;:!?.'\"()[]{}@*/\\&#%`^+<=>|~$"
_SYMBOL_RANK = {ch: rank for rank, ch in enumerate(_SYMBOL_ORDER)}


def _primary_weight(ch: str) -> tuple[int, int, str]:
    if ch in _SYMBOL_RANK:
        return 0, _SYMBOL_RANK[ch], ch
    if ch.isdigit():
        return 2, 0, ch
    if unicodedata.category(ch)[0] in "PSZ":
        return 1, 0, ch
    return 3, 0, ch


def collation_key(value: str) -> tuple[tuple[tuple[int, int, str], ...], str, str]:
    """Sort key following the root locale's string comparison.

    At the primary level punctuation and symbols sort first, then digits, then letters, with accents and
    case removed. Accents break ties next, and lowercase sorts before uppercase last.
    """
    decomposed = unicodedata.normalize("NFKD", value)
    base = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return tuple(_primary_weight(ch) for ch in base.casefold()), value.casefold(), value.swapcase()


def sort_key(field: SortField) -> Callable[[Comment], Any]:
    attribute = field.attribute
    if field.is_numeric:
        return lambda comment: getattr(comment, attribute)
    return lambda comment: collation_key(getattr(comment, attribute))


def sort_comments(comments: Sequence[Comment], sort_state: SortState) -> Sequence[Comment]:
    """Order comments by the active sort field and direction.

    Without an active field the input is returned as-is. Records with equal keys keep their relative
    order in both directions.
    """
    if not sort_state.is_active:
        return comments
    return sorted(
        comments,
        key=sort_key(sort_state.field),
        reverse=sort_state.direction is SortDirection.DESC,
    )


def next_sort_direction(direction: Optional[SortDirection]) -> Optional[SortDirection]:
    """Advance the direction cycle: none -> asc -> desc -> none."""
    return _DIRECTION_CYCLE[direction]


def toggle_sort(sort_state: SortState, field: SortField | str) -> SortState:
    """Apply a click on a sort control.

    A field other than the active one always starts at ascending. Clicking the active field advances its
    direction, and the field is cleared once the cycle returns to none.
    """
    field = SortField(field)
    if sort_state.field is not field:
        return SortState(field=field, direction=SortDirection.ASC)

    direction = next_sort_direction(sort_state.direction)
    if direction is None:
        return SortState()
    return SortState(field=field, direction=direction)
