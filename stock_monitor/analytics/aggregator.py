"""Per-period stock aggregation.

Turns raw SKU history into display-ready figures for a lookback window:

    window_start = now - period days
    in-window    = entries with timestamp >= window_start
    current      = last in-window reading
    variation    = last in-window stock - first in-window stock

Readings with an unreadable timestamp are skipped. A variation with no
reading in the window counts as zero stock and zero variation. Product
totals are plain sums over the product's variations. The raw input is never
modified.
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone

from stock_monitor.common.models import (
    HistoryEntry,
    RawSku,
    RawVariation,
    Sku,
    Variation,
    ensure_utc,
    parse_timestamp,
)

logger = logging.getLogger(__name__)


def window_start_for(period: int, now: datetime) -> datetime:
    """Start of the lookback window ending at ``now``."""
    if period <= 0:
        raise ValueError(f"period must be a positive number of days, got {period}")
    return now - timedelta(days=period)


def _in_window(raw: RawVariation, window_start: datetime) -> list[HistoryEntry]:
    entries = []
    for entry in raw.history:
        try:
            ts = parse_timestamp(entry.timestamp)
        except ValueError:
            logger.warning("Skipping unreadable timestamp %r in %s", entry.timestamp, raw.name)
            continue
        if ts >= window_start:
            entries.append(HistoryEntry(timestamp=ts, stock=entry.stock))
    return entries


def process_variation(
    raw: RawVariation,
    window_start: datetime,
    now: datetime,
) -> Variation:
    """Aggregate one variation over the window starting at ``window_start``."""
    relevant = _in_window(raw, ensure_utc(window_start))

    if relevant:
        latest = relevant[-1]
        initial = relevant[0]
    else:
        latest = initial = HistoryEntry(timestamp=now, stock=0)

    return Variation(
        name=raw.name,
        history=relevant,
        current_stock=latest.stock,
        variation=latest.stock - initial.stock,
    )


def process_sku(raw: RawSku, window_start: datetime, now: datetime) -> Sku:
    """Aggregate every variation of a product and sum the totals."""
    variations = [process_variation(v, window_start, now) for v in raw.variations]
    return Sku(
        id=raw.id,
        name=raw.name,
        url=raw.url,
        variations=variations,
        total_stock=sum(v.current_stock for v in variations),
        total_variation=sum(v.variation for v in variations),
    )


def process_skus(
    raw_skus: list[RawSku],
    period: int,
    now: datetime | None = None,
) -> list[Sku]:
    """Aggregate a whole catalogue for a ``period``-day window.

    Args:
        raw_skus: SKUs as fetched from the stock service.
        period: Lookback window in days (1 or 7 in the dashboard).
        now: Reference time; defaults to the current UTC time.

    Returns:
        Derived SKUs in the same order as the input.

    Raises:
        ValueError: If ``period`` is not positive.
    """
    now = ensure_utc(now) if now else datetime.now(timezone.utc)
    start = window_start_for(period, now)
    return [process_sku(sku, start, now) for sku in raw_skus]
