from commentdeck.comments import FilterState, process_comments


class TestProcessComments:
    """Tests for the search, sort and paginate pipeline."""

    def test_search_then_sort_then_paginate(self, many_comments):
        state = FilterState(search="comment 1", sort={"field": "postId", "direction": "desc"}, page_size=10)
        result = process_comments(many_comments, state)
        # 11 matches: id 1 on post 1, ids 10..19 on posts 2..4
        assert result.info.total_items == 11
        assert result.info.total_pages == 2
        assert [c.post_id for c in result.comments] == [4, 4, 4, 4, 3, 3, 3, 3, 3, 2]
        assert [c.id for c in result.comments][:5] == [16, 17, 18, 19, 11]
        assert result.pages == [1, 2]

    def test_second_page_of_matches(self, many_comments):
        state = FilterState(search="comment 1", sort={"field": "postId", "direction": "desc"}, current_page=2)
        result = process_comments(many_comments, state)
        assert [c.id for c in result.comments] == [1]
        assert result.info.label == "11 to 11 of 11 items"

    def test_no_filters_is_identity_on_first_page(self, many_comments):
        result = process_comments(many_comments, FilterState())
        assert result.comments == many_comments[:10]
        assert result.pages == [1, 2, 3]

    def test_empty_input(self):
        result = process_comments([], FilterState(search="x"))
        assert result.comments == []
        assert result.info.total_pages == 0
        assert result.pages == []

    def test_is_pure(self, many_comments):
        state = FilterState(search="comment 2", current_page=1)
        assert process_comments(many_comments, state) == process_comments(many_comments, state)
