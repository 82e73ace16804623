"""Shared Pydantic data models for Stock Monitor.

Raw models mirror the JSON returned by the stock history service.
Derived models are what the aggregator hands to the dashboard.
"""

from __future__ import annotations

from datetime import datetime, timezone

from pydantic import BaseModel, Field, field_validator


def ensure_utc(value: datetime) -> datetime:
    """Return ``value`` as an aware datetime, taking naive values as UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def parse_timestamp(value: str) -> datetime:
    """Parse an ISO-8601 timestamp into an aware datetime.

    A trailing ``Z`` is accepted; naive timestamps are taken as UTC.

    Raises:
        ValueError: If ``value`` is not an ISO-8601 timestamp.
    """
    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    return ensure_utc(datetime.fromisoformat(text))


# === Wire models ===

class RawHistoryEntry(BaseModel):
    """Single stock reading as received from the API."""
    timestamp: str
    stock: int = Field(ge=0)

    @field_validator("timestamp")
    @classmethod
    def check_timestamp(cls, v: str) -> str:
        parse_timestamp(v)
        return v


class RawVariation(BaseModel):
    """A purchasable option of a product with its chronological history."""
    name: str
    history: list[RawHistoryEntry] = []


class RawSku(BaseModel):
    """Product record as received from the API."""
    id: str
    name: str
    url: str = ""
    variations: list[RawVariation] = []


# === Derived models ===

class HistoryEntry(BaseModel):
    """Stock reading with its timestamp parsed."""
    timestamp: datetime
    stock: int


class Variation(BaseModel):
    """Variation with its in-window history and period delta."""
    name: str
    history: list[HistoryEntry] = []
    current_stock: int = 0
    variation: int = 0


class Sku(BaseModel):
    """Product with per-variation aggregates and product totals."""
    id: str
    name: str
    url: str = ""
    variations: list[Variation] = []
    total_stock: int = 0
    total_variation: int = 0
