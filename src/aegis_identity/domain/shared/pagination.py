"""Pagination primitives shared by the list queries."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")

DEFAULT_PAGE_SIZE = 20
MAX_PAGE_SIZE = 100


@dataclass(frozen=True)
class PageRequest:
    """A 1-based page request with an optional case-insensitive search term."""

    page: int = 1
    limit: int = DEFAULT_PAGE_SIZE
    search: str | None = None
    is_active: bool | None = None

    def __post_init__(self) -> None:
        if self.page < 1:
            msg = "page must be >= 1"
            raise ValueError(msg)
        if not 1 <= self.limit <= MAX_PAGE_SIZE:
            msg = f"limit must be between 1 and {MAX_PAGE_SIZE}"
            raise ValueError(msg)

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


@dataclass(frozen=True)
class Page(Generic[T]):
    """One page of results plus the total number of matches."""

    items: list[T]
    total: int
    page: int
    limit: int

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total / self.limit) if self.limit else 0
