"""Search, sort and pagination over an in-memory collection."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from typing import Any, TypeVar

from mock_api.domain.entities import Page

T = TypeVar("T")

USER_SEARCH_FIELDS: tuple[str, ...] = ("first", "last")
ROLE_SEARCH_FIELDS: tuple[str, ...] = ("name", "description")


def coerce_page_number(raw: Any) -> int:
    """Return ``raw`` as a 1-based page number, falling back to 1.

    Missing values, values that are not whole numbers and values below 1 all
    coerce to the first page.
    """

    if raw is None or isinstance(raw, bool):
        return 1
    if isinstance(raw, int):
        return raw if raw >= 1 else 1
    try:
        page = int(str(raw).strip())
    except ValueError:
        return 1
    return page if page >= 1 else 1


def _field_text(item: Any, field: str) -> str:
    value = getattr(item, field, None)
    return "" if value is None else str(value)


def filter_items(items: Iterable[T], fields: Sequence[str], search: str | None) -> list[T]:
    """Keep the items where ``search`` occurs in any of ``fields``, ignoring case."""

    if not search:
        return list(items)
    term = search.lower()
    return [
        item
        for item in items
        if any(term in _field_text(item, field).lower() for field in fields)
    ]


def sort_newest_first(items: Iterable[T]) -> list[T]:
    # ISO-8601 strings order chronologically; sorted() is stable for ties.
    return sorted(items, key=lambda item: getattr(item, "created_at"), reverse=True)


def query_page(
    collection: Iterable[T],
    search_fields: Sequence[str],
    search: str | None = None,
    page: Any = None,
    *,
    page_size: int,
) -> Page[T]:
    """Return one page of ``collection`` filtered by ``search``, newest first.

    ``next`` and ``prev`` are derived from the requested page number and the
    total page count of the filtered set, so an out-of-range page yields an
    empty ``data`` slice with navigation still pointing back into range.
    """

    if page_size <= 0:
        raise ValueError("page_size must be a positive integer")

    matches = sort_newest_first(filter_items(collection, search_fields, search))
    page_number = coerce_page_number(page)
    pages = math.ceil(len(matches) / page_size)
    start = (page_number - 1) * page_size

    return Page(
        data=matches[start : start + page_size],
        next=page_number + 1 if page_number < pages else None,
        prev=page_number - 1 if page_number > 1 else None,
        pages=pages,
    )


__all__ = [
    "ROLE_SEARCH_FIELDS",
    "USER_SEARCH_FIELDS",
    "coerce_page_number",
    "filter_items",
    "query_page",
    "sort_newest_first",
]
