from types import SimpleNamespace
from unittest.mock import patch

import pytest

from commentdeck.comments import (
    Comment,
    FetchResult,
    FilterState,
    FilterStateStore,
    PageChanged,
    PageSizeChanged,
    SearchChanged,
    SortDirection,
    SortRequested,
    dump_filter_state,
    load_filter_state,
)
from commentdeck.ui.controllers import (
    BODY_PREVIEW_LENGTH,
    DashboardController,
    LoadGuard,
    PAGE_SIZE_LABELS,
    STORAGE_KEY,
    ProfileController,
    _LocalStorageAdapter,
    comment_row,
    page_buttons,
    sort_arrows,
    truncate_text,
)
from commentdeck.users import Address, Company, Geo, User


class TestDashboardHelpers:
    """Tests for the display models computed by the dashboard state."""

    def test_comment_row_shows_true_post_id(self):
        comment = Comment(postId=7, id=31, name="n", email="e@x.io", body="b")
        assert comment_row(comment) == {
            "id": 31,
            "post_id": 7,
            "name": "n",
            "email": "e@x.io",
            "body": "b",
            "preview": "b",
            "expandable": False,
        }

    def test_long_body_gets_preview(self):
        body = "x" * (BODY_PREVIEW_LENGTH + 1)
        row = comment_row(Comment(postId=1, id=1, name="n", email="e@x.io", body=body))
        assert row["expandable"] is True
        assert row["preview"] == "x" * BODY_PREVIEW_LENGTH + "..."
        assert row["body"] == body

    def test_truncate_text(self):
        assert truncate_text("short") == "short"
        assert truncate_text("x" * BODY_PREVIEW_LENGTH) == "x" * BODY_PREVIEW_LENGTH
        assert truncate_text("abcdef", max_length=3) == "abc..."

    def test_page_buttons(self):
        assert page_buttons([1, None, 4, 5, 6, None, 10]) == [
            {"kind": "page", "n": 1},
            {"kind": "ellipsis", "n": 0},
            {"kind": "page", "n": 4},
            {"kind": "page", "n": 5},
            {"kind": "page", "n": 6},
            {"kind": "ellipsis", "n": 0},
            {"kind": "page", "n": 10},
        ]

    def test_sort_arrows_inactive(self):
        assert sort_arrows("", "") == {"postId": "", "name": "", "email": ""}

    @pytest.mark.parametrize("direction, arrow", [(SortDirection.ASC, "↑"), (SortDirection.DESC, "↓")])
    def test_sort_arrows_active(self, direction, arrow):
        indicators = sort_arrows("email", direction.value)
        assert indicators == {"postId": "", "name": "", "email": arrow}

    def test_page_size_labels(self):
        assert PAGE_SIZE_LABELS == ["10", "50", "100"]


class TestLocalStorageAdapter:
    """Tests for persisting the filter state through the state's LocalStorage var."""

    def test_empty_value_reads_as_missing(self):
        adapter = _LocalStorageAdapter(SimpleNamespace(stored_filters=""))
        assert adapter.get(STORAGE_KEY) is None

    def test_store_round_trip_through_adapter(self):
        state = SimpleNamespace(stored_filters="")
        store = FilterStateStore(_LocalStorageAdapter(state), key=STORAGE_KEY)
        store.search("quo")
        store.set_page_size(50)

        assert load_filter_state(state.stored_filters).search == "quo"
        restored = FilterStateStore(_LocalStorageAdapter(state), key=STORAGE_KEY).state
        assert restored.page_size == 50
        assert restored.current_page == 1

    def test_garbage_in_local_storage_falls_back_to_defaults(self):
        state = SimpleNamespace(stored_filters="{broken")
        store = FilterStateStore(_LocalStorageAdapter(state), key=STORAGE_KEY)
        assert store.state.page_size == 10
        assert store.state.search == ""


def _comments(count: int):
    return [
        Comment(postId=(i - 1) // 5 + 1, id=i, name=f"name {i}", email=f"user{i}@x.io", body=f"body {i}")
        for i in range(1, count + 1)
    ]


@pytest.fixture
def dashboard():
    """Namespace carrying the same fields as DashboardState, loaded with 25 comments."""
    state = SimpleNamespace(
        stored_filters="",
        search="",
        sort_field="",
        sort_direction="",
        current_page=1,
        page_size=10,
        rows=[],
        pages=[],
        total_items=0,
        total_pages=0,
        start_index=0,
        end_index=0,
        pagination_label="",
        prev_disabled=True,
        next_disabled=True,
        expanded_ids=[],
        loading=True,
        error="",
        _comments=_comments(25),
        _loading_token=0,
    )
    DashboardController(state).refresh()
    return state


@pytest.fixture
def profile():
    """Namespace carrying the same fields as ProfileState."""
    return SimpleNamespace(
        loading=True,
        error="",
        has_user=False,
        initials="...",
        name="",
        email="",
        user_id="",
        address="",
        phone="",
        _loading_token=0,
    )


@pytest.fixture
def user():
    return User(
        id=1,
        name="Leanne Graham",
        username="Bret",
        email="Sincere@april.biz",
        address=Address(
            street="Kulas Light",
            suite="Apt. 556",
            city="Gwenborough",
            zipcode="92998-3874",
            geo=Geo(lat="-37.3159", lng="81.1496"),
        ),
        phone="1-770-736-8031 x56442",
        website="hildegard.org",
        company=Company(name="Romaguera-Crona", catch_phrase="Multi-layered", bs="e-markets"),
    )


class TestLoadGuard:
    """Tests for the fetch tokens that keep late results off the page."""

    def test_tokens_increase(self):
        state = SimpleNamespace(_loading_token=0)
        guard = LoadGuard(state)
        assert guard.begin() == 1
        assert guard.begin() == 2
        assert guard.is_current(2)
        assert not guard.is_current(1)

    def test_release_makes_token_stale(self):
        state = SimpleNamespace(_loading_token=0)
        token = LoadGuard(state).begin()
        LoadGuard(state).release()
        assert not LoadGuard(state).is_current(token)


class TestDashboardController:
    """Tests for the event flow behind DashboardState."""

    def test_refresh_fills_visible_page(self, dashboard):
        assert [row["id"] for row in dashboard.rows] == list(range(1, 11))
        assert dashboard.total_items == 25
        assert dashboard.total_pages == 3
        assert dashboard.pagination_label == "1 to 10 of 25 items"
        assert dashboard.prev_disabled is True
        assert dashboard.next_disabled is False

    def test_restore_applies_stored_filters(self, dashboard):
        dashboard.stored_filters = dump_filter_state(FilterState(search="name 2", page_size=50))
        filters = DashboardController(dashboard).restore()

        assert filters.search == "name 2"
        assert dashboard.search == "name 2"
        assert dashboard.page_size == 50
        # "name 2" and "name 20".."name 25"
        assert dashboard.total_items == 7
        assert dashboard.pagination_label == "1 to 7 of 7 items"

    def test_restore_without_stored_value_uses_defaults(self, dashboard):
        DashboardController(dashboard).restore()
        assert (dashboard.search, dashboard.current_page, dashboard.page_size) == ("", 1, 10)
        assert dashboard.sort_field == ""

    def test_restore_with_garbage_falls_back_and_warns(self, dashboard, caplog):
        dashboard.stored_filters = "{broken"
        DashboardController(dashboard).restore()
        assert dashboard.page_size == 10
        assert "Discarding invalid stored filter state" in caplog.text

    def test_dispatch_persists_and_applies(self, dashboard):
        controller = DashboardController(dashboard)
        assert controller.dispatch(PageChanged(3)) is True
        assert controller.dispatch(SortRequested("email")) is True

        assert dashboard.current_page == 1
        assert (dashboard.sort_field, dashboard.sort_direction) == ("email", "asc")
        stored = load_filter_state(dashboard.stored_filters)
        assert stored.sort.field.value == "email"
        assert stored.current_page == 1

    def test_keystrokes_do_not_build_a_store(self, dashboard):
        with patch("commentdeck.ui.controllers.FilterStateStore") as store_cls:
            controller = DashboardController(dashboard)
            for ch in "laudantium":
                controller.dispatch(SearchChanged(dashboard.search + ch))
        store_cls.assert_not_called()
        assert dashboard.search == "laudantium"
        assert load_filter_state(dashboard.stored_filters).search == "laudantium"

    def test_search_resets_page(self, dashboard):
        controller = DashboardController(dashboard)
        controller.dispatch(PageChanged(2))
        controller.dispatch(SearchChanged("name 1"))
        assert dashboard.current_page == 1
        assert dashboard.total_items == 11

    @pytest.mark.parametrize("intent", [SortRequested("body"), PageSizeChanged(7), PageChanged(0)])
    def test_invalid_intent_keeps_state_and_warns(self, dashboard, caplog, intent):
        controller = DashboardController(dashboard)
        controller.dispatch(PageChanged(2))
        stored = dashboard.stored_filters
        rows = list(dashboard.rows)

        assert controller.dispatch(intent) is False
        assert dashboard.current_page == 2
        assert dashboard.page_size == 10
        assert dashboard.sort_field == ""
        assert dashboard.stored_filters == stored
        assert dashboard.rows == rows
        assert "Ignoring invalid dashboard intent" in caplog.text

    def test_non_numeric_page_size_is_ignored(self, dashboard, caplog):
        assert DashboardController(dashboard).set_page_size("lots") is False
        assert dashboard.page_size == 10
        assert dashboard.stored_filters == ""
        assert "Ignoring non-numeric page size" in caplog.text

    def test_page_size_from_select_value(self, dashboard):
        DashboardController(dashboard).set_page_size("50")
        assert dashboard.page_size == 50
        assert dashboard.total_pages == 1
        assert dashboard.next_disabled is True

    def test_previous_page_stops_at_first_page(self, dashboard):
        controller = DashboardController(dashboard)
        assert controller.previous_page() is False
        assert dashboard.current_page == 1
        assert dashboard.stored_filters == ""

    def test_next_page_stops_at_last_page(self, dashboard):
        controller = DashboardController(dashboard)
        assert controller.next_page() is True
        assert controller.next_page() is True
        assert dashboard.current_page == 3
        assert dashboard.next_disabled is True
        assert controller.next_page() is False
        assert dashboard.current_page == 3
        assert dashboard.pagination_label == "21 to 25 of 25 items"

    def test_previous_page_moves_back(self, dashboard):
        controller = DashboardController(dashboard)
        controller.dispatch(PageChanged(3))
        assert controller.previous_page() is True
        assert dashboard.current_page == 2
        assert dashboard.prev_disabled is False

    def test_toggle_comment(self, dashboard):
        controller = DashboardController(dashboard)
        controller.toggle_comment(4)
        controller.toggle_comment("7")
        assert dashboard.expanded_ids == [4, 7]
        controller.toggle_comment(4)
        assert dashboard.expanded_ids == [7]

    def test_finish_load_applies_current_result(self, dashboard):
        controller = DashboardController(dashboard)
        token = controller.begin_load()
        assert dashboard.loading is True

        assert controller.finish_load(token, FetchResult(records=_comments(3))) is True
        assert dashboard.loading is False
        assert dashboard.error == ""
        assert dashboard.total_items == 3

    def test_finish_load_reports_error(self, dashboard):
        controller = DashboardController(dashboard)
        token = controller.begin_load()
        controller.finish_load(token, FetchResult(error="HTTP error! status: 500"))
        assert dashboard.error == "HTTP error! status: 500"
        assert dashboard.loading is False
        assert dashboard.rows == []

    def test_result_after_release_is_dropped(self, dashboard):
        controller = DashboardController(dashboard)
        token = controller.begin_load()
        LoadGuard(dashboard).release()

        assert controller.finish_load(token, FetchResult(records=_comments(3))) is False
        assert dashboard.loading is True
        assert dashboard.total_items == 25

    def test_older_fetch_loses_to_newer(self, dashboard):
        controller = DashboardController(dashboard)
        first = controller.begin_load()
        second = controller.begin_load()

        assert controller.finish_load(second, FetchResult(records=_comments(2))) is True
        assert controller.finish_load(first, FetchResult(records=_comments(9))) is False
        assert dashboard.total_items == 2


class TestProfileController:
    """Tests for the event flow behind ProfileState."""

    def test_finish_load_shows_first_user(self, profile, user):
        controller = ProfileController(profile)
        token = controller.begin_load()
        assert controller.finish_load(token, FetchResult(records=[user])) is True

        assert profile.loading is False
        assert profile.has_user is True
        assert profile.initials == "LG"
        assert profile.user_id == "00000001"
        assert profile.address == "Kulas Light, Apt. 556, Gwenborough"
        assert profile.phone == "1-770-736-8031 x56442"

    def test_empty_result_shows_no_user(self, profile):
        controller = ProfileController(profile)
        token = controller.begin_load()
        controller.finish_load(token, FetchResult(error="HTTP error! status: 404"))

        assert profile.has_user is False
        assert profile.initials == "?"
        assert profile.name == ""
        assert profile.error == "HTTP error! status: 404"

    def test_result_after_release_is_dropped(self, profile, user):
        controller = ProfileController(profile)
        token = controller.begin_load()
        LoadGuard(profile).release()

        assert controller.finish_load(token, FetchResult(records=[user])) is False
        assert profile.loading is True
        assert profile.has_user is False
        assert profile.initials == "..."
