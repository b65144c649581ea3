"""Read-only access to the remote comments and users endpoints."""

from dataclasses import dataclass, field
from typing import Generic, List, Optional, TypeVar

import httpx
from pydantic import TypeAdapter, ValidationError

from commentdeck.comments.models import Comment
from commentdeck.core import CommentDeck, ifnone
from commentdeck.users.models import User

T = TypeVar("T")

_COMMENTS_ADAPTER = TypeAdapter(List[Comment])
_USERS_ADAPTER = TypeAdapter(List[User])


@dataclass(frozen=True)
class FetchResult(Generic[T]):
    """Outcome of a fetch. On failure ``records`` is empty and ``error`` describes what went wrong."""

    records: List[T] = field(default_factory=list)
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class RecordSource(CommentDeck):
    """Fetches record collections once per page load.

    Failures never raise: they are logged and reported through ``FetchResult.error``. There are no retries.

    Args:
        comments_url: Comments endpoint, defaults to ``COMMENTDECK_API.COMMENTS_URL``.
        users_url: Users endpoint, defaults to ``COMMENTDECK_API.USERS_URL``.
        timeout: Request timeout in seconds, defaults to ``COMMENTDECK_API.TIMEOUT_SECONDS``.
        transport: Optional httpx transport, e.g. ``httpx.MockTransport`` in tests.
    """

    def __init__(
        self,
        comments_url: Optional[str] = None,
        users_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        **kwargs,
    ):
        super().__init__(**kwargs)
        api = self.config.COMMENTDECK_API
        self.comments_url = ifnone(comments_url, api.COMMENTS_URL)
        self.users_url = ifnone(users_url, api.USERS_URL)
        self.timeout = float(ifnone(timeout, api.TIMEOUT_SECONDS))
        self.transport = transport

    async def fetch_comments(self) -> FetchResult[Comment]:
        return await self._fetch(self.comments_url, _COMMENTS_ADAPTER)

    async def fetch_users(self) -> FetchResult[User]:
        return await self._fetch(self.users_url, _USERS_ADAPTER)

    async def _fetch(self, url: str, adapter: TypeAdapter) -> FetchResult:
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                response = await client.get(url)
        except httpx.HTTPError as e:
            return self._failed(url, str(e) or type(e).__name__)

        if not response.is_success:
            return self._failed(url, f"HTTP error! status: {response.status_code}")

        try:
            records = adapter.validate_json(response.content)
        except ValidationError as e:
            return self._failed(url, f"Invalid response payload ({e.error_count()} validation errors)")

        self.logger.info(f"Fetched {len(records)} records from {url}.")
        return FetchResult(records=records)

    def _failed(self, url: str, message: str) -> FetchResult:
        self.logger.error(f"Failed to fetch {url}: {message}")
        return FetchResult(error=message)
