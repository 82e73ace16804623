"""Favorite-first ordering of aggregated SKUs."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from functools import cmp_to_key
from typing import Any, Iterable

from stock_monitor.common.models import Sku

SORTABLE_KEYS = ("id", "name", "url", "total_stock", "total_variation")


class SortDirection(str, Enum):
    """Sort direction for a table column."""
    ASC = "asc"
    DESC = "desc"


@dataclass(frozen=True)
class SortConfig:
    """Column and direction the table is sorted by."""
    key: str = "name"
    direction: SortDirection = SortDirection.ASC

    def __post_init__(self) -> None:
        if self.key not in SORTABLE_KEYS:
            raise ValueError(f"Cannot sort by '{self.key}'")


def next_sort_config(current: SortConfig, key: str) -> SortConfig:
    """Sort config after clicking the ``key`` column header.

    Clicking the active column while ascending flips it to descending;
    any other click sorts ascending by the clicked column.
    """
    if current.key == key and current.direction == SortDirection.ASC:
        return SortConfig(key=key, direction=SortDirection.DESC)
    return SortConfig(key=key, direction=SortDirection.ASC)


def _compare_values(a: Any, b: Any, direction: SortDirection) -> int:
    if a is None or b is None:
        return 0
    sign = 1 if direction == SortDirection.ASC else -1
    if a < b:
        return -sign
    if a > b:
        return sign
    return 0


def sort_skus(
    skus: Iterable[Sku],
    sort_config: SortConfig,
    favorites: Iterable[str] = (),
) -> list[Sku]:
    """Return a new list with favorites first, then by ``sort_config``.

    Ties keep their input order.
    """
    favorite_ids = set(favorites)

    def compare(a: Sku, b: Sku) -> int:
        a_fav = a.id in favorite_ids
        b_fav = b.id in favorite_ids
        if a_fav and not b_fav:
            return -1
        if b_fav and not a_fav:
            return 1
        return _compare_values(
            getattr(a, sort_config.key, None),
            getattr(b, sort_config.key, None),
            sort_config.direction,
        )

    return sorted(skus, key=cmp_to_key(compare))
