from typing import Dict, Optional, Protocol

from pydantic import ValidationError

from commentdeck.comments.filter_state import (
    FilterIntent,
    PageChanged,
    PageSizeChanged,
    SearchChanged,
    SortRequested,
    reduce_filter_state,
)
from commentdeck.comments.models import FilterState, SortField
from commentdeck.core import CommentDeck, ifnone


class KeyValueStorage(Protocol):
    """Durable string storage, e.g. the browser's localStorage."""

    def get(self, key: str) -> Optional[str]: ...

    def set(self, key: str, value: str) -> None: ...


class MemoryStorage:
    """In-process ``KeyValueStorage``."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._data: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value


def dump_filter_state(state: FilterState) -> str:
    """Serialize a filter state to the JSON document kept in storage."""
    return state.model_dump_json(by_alias=True)


def load_filter_state(raw: str) -> FilterState:
    """Parse a stored JSON document back into a filter state.

    Raises:
        ValueError: If the document is not valid JSON or does not describe a valid filter state.
    """
    return FilterState.model_validate_json(raw)


class FilterStateStore(CommentDeck):
    """Holds the dashboard's filter state and persists it after every change.

    Every mutation goes through ``dispatch`` and the filter-state reducer, and the whole state is written
    back to storage under a single key. On construction the stored value is restored; a missing or
    invalid value falls back to the defaults.

    Example::

        store = FilterStateStore(MemoryStorage())
        store.search("laudantium")
        store.sort("name")
        store.state.current_page  # 1
    """

    def __init__(self, storage: Optional[KeyValueStorage] = None, key: Optional[str] = None, **kwargs):
        super().__init__(**kwargs)
        self.storage = ifnone(storage, MemoryStorage())
        self.key = ifnone(key, self.config.COMMENTDECK_DASHBOARD.STORAGE_KEY)
        self._state = self.restore()

    @property
    def state(self) -> FilterState:
        return self._state

    def default_state(self) -> FilterState:
        return FilterState(page_size=self.config.COMMENTDECK_DASHBOARD.DEFAULT_PAGE_SIZE)

    def restore(self) -> FilterState:
        """Read the stored filter state, falling back to defaults when it is missing or invalid."""
        raw = self.storage.get(self.key)
        if raw is None:
            return self.default_state()
        try:
            return load_filter_state(raw)
        except (ValidationError, ValueError) as e:
            self.logger.warning(f"Discarding invalid stored filter state under '{self.key}': {e}")
            return self.default_state()

    def dispatch(self, intent: FilterIntent) -> FilterState:
        """Apply an intent through the reducer and persist the result."""
        self._state = reduce_filter_state(self._state, intent)
        self._persist()
        return self._state

    def search(self, term: str) -> FilterState:
        return self.dispatch(SearchChanged(term))

    def sort(self, field: SortField | str) -> FilterState:
        return self.dispatch(SortRequested(field))

    def set_page(self, page: int) -> FilterState:
        return self.dispatch(PageChanged(page))

    def set_page_size(self, page_size: int) -> FilterState:
        return self.dispatch(PageSizeChanged(page_size))

    def _persist(self) -> None:
        self.storage.set(self.key, dump_filter_state(self._state))
        self.logger.debug(f"Persisted filter state under '{self.key}'.")
