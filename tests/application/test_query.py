"""Unit tests for the search, sort and pagination helpers."""

from __future__ import annotations

from dataclasses import dataclass

import pytest

from mock_api.application.query import (
    USER_SEARCH_FIELDS,
    coerce_page_number,
    filter_items,
    query_page,
    sort_newest_first,
)
from mock_api.infrastructure.seed import seed_users


@dataclass
class Item:
    name: str
    created_at: str
    description: str | None = None


def _items(count: int) -> list[Item]:
    return [Item(name=f"item-{index:02d}", created_at=f"2024-01-{index + 1:02d}T00:00:00.000Z") for index in range(count)]


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        (None, 1),
        ("", 1),
        ("abc", 1),
        ("2", 2),
        (" 3 ", 3),
        ("0", 1),
        ("-4", 1),
        ("1.5", 1),
        (5, 5),
        (0, 1),
    ],
)
def test_coerce_page_number(raw, expected):
    assert coerce_page_number(raw) == expected


def test_first_page_of_seed_users():
    page = query_page(seed_users(), USER_SEARCH_FIELDS, page_size=10)

    assert len(page.data) == 10
    assert page.next == 2
    assert page.prev is None
    assert page.pages == 2


def test_last_page_of_seed_users():
    page = query_page(seed_users(), USER_SEARCH_FIELDS, page="2", page_size=10)

    assert len(page.data) == 6
    assert page.next is None
    assert page.prev == 1
    assert page.pages == 2


def test_out_of_range_page_keeps_navigation_relative_to_total():
    page = query_page(_items(4), ("name",), page=5, page_size=10)

    assert page.data == []
    assert page.pages == 1
    assert page.next is None
    assert page.prev == 4


def test_empty_collection_has_zero_pages():
    page = query_page([], ("name",), page_size=10)

    assert page.data == []
    assert page.pages == 0
    assert page.next is None
    assert page.prev is None


def test_search_without_matches_has_zero_pages():
    page = query_page(seed_users(), USER_SEARCH_FIELDS, search="zzz-no-match", page_size=10)

    assert page.data == []
    assert page.pages == 0
    assert page.next is None


@pytest.mark.parametrize("size", [1, 3, 4, 7, 10])
def test_pages_are_full_except_the_last(size):
    items = _items(23)
    first = query_page(items, ("name",), page_size=size)
    seen = []
    for number in range(1, first.pages + 1):
        page = query_page(items, ("name",), page=number, page_size=size)
        if number < first.pages:
            assert len(page.data) == size
        else:
            assert 0 < len(page.data) <= size
        seen.extend(page.data)

    assert first.pages == -(-23 // size)
    assert len(seen) == 23


def test_search_is_case_insensitive_substring_on_declared_fields():
    items = [
        Item(name="Alpha", created_at="2024-01-01T00:00:00.000Z", description="first"),
        Item(name="beta", created_at="2024-01-02T00:00:00.000Z", description="ALPHABET soup"),
        Item(name="gamma", created_at="2024-01-03T00:00:00.000Z", description="alp"),
    ]

    assert [item.name for item in filter_items(items, ("name", "description"), "ALPH")] == ["Alpha", "beta"]
    assert [item.name for item in filter_items(items, ("name",), "alph")] == ["Alpha"]


def test_search_treats_missing_values_as_empty():
    items = [Item(name="delta", created_at="2024-01-01T00:00:00.000Z", description=None)]

    assert filter_items(items, ("description",), "none") == []


def test_empty_search_does_not_filter():
    items = _items(3)

    assert filter_items(items, ("name",), "") == items
    assert filter_items(items, ("name",), None) == items


def test_results_are_sorted_newest_first_without_mutating_input():
    items = _items(5)
    original = list(items)

    page = query_page(items, ("name",), page_size=10)

    assert [item.name for item in page.data] == ["item-04", "item-03", "item-02", "item-01", "item-00"]
    assert items == original


def test_ties_keep_collection_order():
    stamp = "2024-01-01T00:00:00.000Z"
    items = [Item(name="a", created_at=stamp), Item(name="b", created_at=stamp)]

    assert [item.name for item in sort_newest_first(items)] == ["a", "b"]


def test_page_size_must_be_positive():
    with pytest.raises(ValueError):
        query_page(_items(2), ("name",), page_size=0)
