"""Domain entity describing one page of a listing."""

from dataclasses import dataclass, field
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass
class Page(Generic[T]):
    """Slice of a filtered, sorted collection plus its navigation links.

    ``next`` and ``prev`` are 1-based page numbers, or ``None`` when there is
    no such page. ``pages`` is the total page count of the filtered set.
    """

    data: list[T] = field(default_factory=list)
    next: int | None = None
    prev: int | None = None
    pages: int = 0


__all__ = ["Page"]
