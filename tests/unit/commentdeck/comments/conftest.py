import pytest

from commentdeck.comments import Comment


def _make_comment(id: int, post_id: int = 1, name: str = "", email: str = "", body: str = "") -> Comment:
    return Comment(
        id=id,
        post_id=post_id,
        name=name or f"comment {id}",
        email=email or f"user{id}@example.com",
        body=body or f"body of comment {id}",
    )


@pytest.fixture
def make_comment():
    """Factory for comments with generated defaults for any field not given."""
    return _make_comment


@pytest.fixture
def comments():
    """Three comments with distinct names, emails and bodies."""
    return [
        _make_comment(1, post_id=2, name="Alpha", email="alice@x.io", body="first body"),
        _make_comment(2, post_id=1, name="Beta", email="bob@y.io", body="second body"),
        _make_comment(3, post_id=3, name="Gamma", email="carol@z.io", body="third body mentions alpha"),
    ]


@pytest.fixture
def many_comments():
    """25 comments, ids 1..25, five per post."""
    return [_make_comment(i, post_id=(i - 1) // 5 + 1) for i in range(1, 26)]
