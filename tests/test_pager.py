"""Tests for page-number pagination."""

import math
from unittest.mock import MagicMock

import pytest

from volcdns_webhook.dns.pager import fetch_all
from volcdns_webhook.errors import InvalidArgumentError, ProviderError


def _pages_for(total, page_size):
    items = list(range(total))

    def fetch(page_number, size):
        start = (page_number - 1) * size
        return items[start : start + size], total

    return MagicMock(side_effect=fetch)


class TestFetchAll:
    @pytest.mark.parametrize("total,page_size", [(0, 10), (1, 10), (10, 10), (11, 10), (250, 100), (7, 3)])
    def test_fetch_count_matches_page_coverage(self, total, page_size):
        fetch = _pages_for(total, page_size)

        items = fetch_all(page_size, fetch)

        assert items == list(range(total))
        assert fetch.call_count == max(1, math.ceil(total / page_size))

    def test_pages_requested_from_one_in_order(self):
        fetch = _pages_for(25, 10)

        fetch_all(10, fetch)

        assert [c.args for c in fetch.call_args_list] == [(1, 10), (2, 10), (3, 10)]

    def test_short_page_does_not_stop_when_total_not_covered(self):
        fetch = MagicMock(side_effect=[(["a"], 5), (["b"], 5), ([], 5)])

        items = fetch_all(2, fetch)

        assert items == ["a", "b"]
        assert fetch.call_count == 3

    def test_stops_on_reported_total_even_if_more_exist(self):
        fetch = MagicMock(side_effect=[(["a", "b"], 2), (["c"], 3)])

        assert fetch_all(2, fetch) == ["a", "b"]
        assert fetch.call_count == 1

    def test_error_at_page_k_propagates_without_partial_results(self):
        fetch = MagicMock(side_effect=[(["a"], 10), (["b"], 10), ProviderError("list zones", "boom")])

        with pytest.raises(ProviderError, match="failed to list zones: boom"):
            fetch_all(1, fetch)
        assert fetch.call_count == 3

    @pytest.mark.parametrize("page_size", [0, -1])
    def test_rejects_non_positive_page_size(self, page_size):
        fetch = MagicMock()

        with pytest.raises(InvalidArgumentError, match="pageSize must be greater than 0"):
            fetch_all(page_size, fetch)
        fetch.assert_not_called()
