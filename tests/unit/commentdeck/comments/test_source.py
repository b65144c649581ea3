import logging

import httpx
import pytest

from commentdeck.comments import Comment, FetchResult, RecordSource
from commentdeck.users import User

COMMENTS_URL = "https://api.test/comments"
USERS_URL = "https://api.test/users"

COMMENT_PAYLOAD = [
    {"postId": 1, "id": 1, "name": "id labore", "email": "Eliseo@gardner.biz", "body": "laudantium enim"},
    {"postId": 1, "id": 2, "name": "quo vero", "email": "Jayne_Kuhic@sydney.com", "body": "est natus"},
]

USER_PAYLOAD = [
    {
        "id": 1,
        "name": "Leanne Graham",
        "username": "Bret",
        "email": "Sincere@april.biz",
        "address": {
            "street": "Kulas Light",
            "suite": "Apt. 556",
            "city": "Gwenborough",
            "zipcode": "92998-3874",
            "geo": {"lat": "-37.3159", "lng": "81.1496"},
        },
        "phone": "1-770-736-8031 x56442",
        "website": "hildegard.org",
        "company": {"name": "Romaguera-Crona", "catchPhrase": "Multi-layered", "bs": "harness real-time e-markets"},
    }
]


def make_source(handler) -> RecordSource:
    return RecordSource(comments_url=COMMENTS_URL, users_url=USERS_URL, transport=httpx.MockTransport(handler))


class TestFetchResult:
    def test_ok(self):
        assert FetchResult(records=[1]).ok
        assert not FetchResult(error="boom").ok
        assert FetchResult(error="boom").records == []


class TestRecordSource:
    """Tests for fetching comments and users over HTTP."""

    def test_defaults_from_config(self):
        source = RecordSource()
        assert source.comments_url == "https://jsonplaceholder.typicode.com/comments"
        assert source.users_url == "https://jsonplaceholder.typicode.com/users"
        assert source.timeout == 10.0

    @pytest.mark.asyncio
    async def test_fetch_comments_success(self):
        requested = []

        def handler(request: httpx.Request) -> httpx.Response:
            requested.append(str(request.url))
            return httpx.Response(200, json=COMMENT_PAYLOAD)

        result = await make_source(handler).fetch_comments()

        assert result.ok
        assert requested == [COMMENTS_URL]
        assert result.records == [Comment.model_validate(item) for item in COMMENT_PAYLOAD]
        assert result.records[0].post_id == 1

    @pytest.mark.asyncio
    async def test_fetch_users_success(self):
        result = await make_source(lambda request: httpx.Response(200, json=USER_PAYLOAD)).fetch_users()
        assert result.ok
        assert isinstance(result.records[0], User)
        assert result.records[0].company.catch_phrase == "Multi-layered"

    @pytest.mark.asyncio
    async def test_http_error_status(self, caplog):
        result = await make_source(lambda request: httpx.Response(500)).fetch_comments()
        assert result.records == []
        assert result.error == "HTTP error! status: 500"
        assert any(r.levelno == logging.ERROR and "HTTP error! status: 500" in r.getMessage() for r in caplog.records)

    @pytest.mark.asyncio
    async def test_not_found_status(self):
        result = await make_source(lambda request: httpx.Response(404)).fetch_users()
        assert result.error == "HTTP error! status: 404"

    @pytest.mark.asyncio
    async def test_transport_error(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("Connection refused", request=request)

        result = await make_source(handler).fetch_comments()
        assert not result.ok
        assert result.records == []
        assert result.error == "Connection refused"

    @pytest.mark.asyncio
    async def test_timeout(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("", request=request)

        result = await make_source(handler).fetch_comments()
        assert result.error == "ReadTimeout"

    @pytest.mark.asyncio
    async def test_invalid_payload(self):
        result = await make_source(lambda request: httpx.Response(200, json=[{"id": "x"}])).fetch_comments()
        assert result.records == []
        assert result.error.startswith("Invalid response payload")

    @pytest.mark.asyncio
    async def test_invalid_json(self):
        result = await make_source(lambda request: httpx.Response(200, text="<html>")).fetch_comments()
        assert result.records == []
        assert result.error == "Invalid response payload (1 validation errors)"
