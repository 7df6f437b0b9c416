"""
Tests for offset/limit and page-based pagination.
"""

import math

import pytest

from hello_plugin.core.pagination import paginate, slice_offset_limit

ITEMS = ["a", "b", "c"]


class TestOffsetLimit:
    def test_window(self):
        assert slice_offset_limit(ITEMS, 0, 10) == ["a", "b", "c"]
        assert slice_offset_limit(ITEMS, 1, 1) == ["b"]

    def test_offset_past_end(self):
        assert slice_offset_limit(ITEMS, 5, 10) == []

    def test_negative_values_are_clamped(self):
        assert slice_offset_limit(ITEMS, -3, 2) == ["a", "b"]
        assert slice_offset_limit(ITEMS, 0, -1) == []

    @pytest.mark.parametrize("offset", range(-1, 5))
    @pytest.mark.parametrize("limit", range(0, 5))
    def test_never_exceeds_limit(self, offset, limit):
        window = slice_offset_limit(ITEMS, offset, limit)
        assert len(window) <= limit
        assert all(item in ITEMS for item in window)


class TestPageSize:
    def test_single_page_holds_everything(self):
        result = paginate(ITEMS, 1, 5)

        assert result.items == ["a", "b", "c"]
        assert result.total_count == 3
        assert result.total_pages == 1
        assert result.has_next_page is False
        assert result.has_previous_page is False

    def test_last_partial_page(self):
        result = paginate(ITEMS, 2, 2)

        assert result.items == ["c"]
        assert result.total_pages == 2
        assert result.current_page == 2
        assert result.has_next_page is False
        assert result.has_previous_page is True

    def test_first_of_two_pages(self):
        result = paginate(ITEMS, 1, 2)
        assert result.items == ["a", "b"]
        assert result.has_next_page is True

    def test_page_past_end_keeps_totals(self):
        result = paginate(ITEMS, 4, 2)
        assert result.items == []
        assert result.total_count == 3
        assert result.total_pages == 2

    def test_empty_collection(self):
        result = paginate([], 1, 5)
        assert result.items == []
        assert result.total_pages == 0
        assert result.has_next_page is False

    @pytest.mark.parametrize("page_size", [0, -4])
    def test_non_positive_page_size_is_clamped(self, page_size):
        result = paginate(ITEMS, 1, page_size)
        assert result.page_size == 1
        assert result.items == ["a"]
        assert result.total_pages == 3

    def test_page_below_one_is_clamped(self):
        result = paginate(ITEMS, 0, 2)
        assert result.current_page == 1
        assert result.items == ["a", "b"]

    @pytest.mark.parametrize("total", [0, 1, 4, 9, 10])
    @pytest.mark.parametrize("page_size", [1, 3, 10])
    @pytest.mark.parametrize("page", [1, 2, 5])
    def test_metadata_invariants(self, total, page_size, page):
        result = paginate(list(range(total)), page, page_size)

        assert result.total_pages == math.ceil(total / page_size)
        assert result.has_next_page == (page < result.total_pages)
        assert result.has_previous_page == (page > 1)
        assert len(result.items) <= page_size
