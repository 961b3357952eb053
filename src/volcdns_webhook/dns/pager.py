"""Page-number pagination over provider list calls."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import TypeVar

from volcdns_webhook.errors import InvalidArgumentError

T = TypeVar("T")


def fetch_all(page_size: int, fetch_page: Callable[[int, int], tuple[Sequence[T], int]]) -> list[T]:
    """Fetch every page and concatenate the items in fetch order.

    ``fetch_page(page_number, page_size)`` returns ``(items, total_count)``.
    Pages are numbered from 1. Fetching stops once the pages fetched so far
    cover ``total_count``, regardless of how many items the last page held.
    Exceptions from ``fetch_page`` propagate and discard any collected items.
    """
    if page_size <= 0:
        raise InvalidArgumentError("pageSize must be greater than 0")

    items: list[T] = []
    page_number = 1
    while True:
        page, total = fetch_page(page_number, page_size)
        items.extend(page)
        if page_number * page_size >= total:
            return items
        page_number += 1
