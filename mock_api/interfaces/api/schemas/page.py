"""Paginated listing schema."""

from typing import Generic, TypeVar

from pydantic import BaseModel

ItemT = TypeVar("ItemT")


class PageRead(BaseModel, Generic[ItemT]):
    data: list[ItemT]
    next: int | None
    prev: int | None
    pages: int
