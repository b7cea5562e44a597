"""Paged result container and page-window arithmetic."""

from __future__ import annotations

import math
from collections.abc import Callable, Iterator, Sequence
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")
U = TypeVar("U")


def clamp_page_size(requested: int, max_page_size: int) -> int:
    return min(requested, max_page_size)


def page_offset(page_number: int, page_size: int) -> int:
    """Number of rows to skip before ``page_number`` (1-based)."""
    return (page_number - 1) * page_size


@dataclass(frozen=True)
class PagedList(Generic[T]):
    """One page of an already filtered and ordered result.

    ``total_count`` is the size of the whole result, not of this page;
    ``total_pages`` and the navigation flags are always derived from it.
    """

    items: tuple[T, ...]
    total_count: int
    current_page: int
    page_size: int

    def __post_init__(self) -> None:
        if self.total_count < 0:
            raise ValueError("total_count must not be negative")
        if self.page_size < 1:
            raise ValueError("page_size must be at least 1")
        if self.current_page < 1:
            raise ValueError("current_page must be at least 1")
        object.__setattr__(self, "items", tuple(self.items))

    @classmethod
    def create(cls, source: Sequence[T], page_number: int, page_size: int) -> PagedList[T]:
        """Window an in-memory sequence."""
        start = page_offset(page_number, page_size)
        return cls(
            items=tuple(source[start : start + page_size]),
            total_count=len(source),
            current_page=page_number,
            page_size=page_size,
        )

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total_count / self.page_size)

    @property
    def has_previous(self) -> bool:
        return self.current_page > 1

    @property
    def has_next(self) -> bool:
        return self.current_page < self.total_pages

    def map(self, fn: Callable[[T], U]) -> PagedList[U]:
        return PagedList(
            items=tuple(fn(item) for item in self.items),
            total_count=self.total_count,
            current_page=self.current_page,
            page_size=self.page_size,
        )

    def __iter__(self) -> Iterator[T]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)
