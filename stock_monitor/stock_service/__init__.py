# Stock Service — remote SKU history fetcher with sample-data fallback
"""
Stock Service module for loading raw SKU stock history.

Fetches the full catalogue from the stock API and falls back to a freshly
generated synthetic catalogue whenever the API cannot be used.
"""

from .client import StockService
from .sample_data import build_sample_skus, generate_history

__all__ = [
    "StockService",
    "build_sample_skus",
    "generate_history",
]
