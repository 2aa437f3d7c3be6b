"""Pagination — page/offset arithmetic for list endpoints.

Invariants:
    - Pages are 1-based
    - Callers fetch page_size + 1 rows; the extra row only signals has_more
"""

from dataclasses import dataclass
from typing import Sequence, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class PageMeta:
    page: int
    page_size: int
    has_more: bool


def page_offset(page: int, page_size: int) -> int:
    return (page - 1) * page_size


def trim_to_page(rows: Sequence[T], page: int, page_size: int) -> tuple[list[T], PageMeta]:
    """Drop the look-ahead row and report whether more pages exist."""
    items = list(rows[:page_size])
    return items, PageMeta(page, page_size, len(rows) > page_size)
