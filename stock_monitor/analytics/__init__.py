"""Aggregation and ordering of SKU stock data."""

from .aggregator import process_sku, process_skus, process_variation, window_start_for
from .sorter import SORTABLE_KEYS, SortConfig, SortDirection, next_sort_config, sort_skus

__all__ = [
    "process_sku",
    "process_skus",
    "process_variation",
    "window_start_for",
    "SORTABLE_KEYS",
    "SortConfig",
    "SortDirection",
    "next_sort_config",
    "sort_skus",
]
