"""Synthetic SKU catalogue used when the stock API is unavailable.

Each call builds a fresh dataset, so the noise differs between loads and
callers can never mutate a shared copy.
"""

from __future__ import annotations

import math
import random
from datetime import datetime, timedelta, timezone

from stock_monitor.common.models import RawHistoryEntry, RawSku, RawVariation

# Amplitude of the random noise added to each daily reading
NOISE_AMPLITUDE = 5

# (id, name, [(variation name, start stock, daily change), ...])
SAMPLE_CATALOGUE: list[tuple[str, str, list[tuple[str, int, float]]]] = [
    (
        "TS-BL-01",
        "Camiseta Básica de Algodão",
        [
            ("Azul - P", 150, -2.5),
            ("Azul - M", 200, -3),
            ("Preto - M", 180, -1.5),
            ("Branco - G", 120, -0.5),
        ],
    ),
    (
        "CL-DN-05",
        "Calça Jeans Slim Fit",
        [
            ("Azul Escuro - 40", 80, -1),
            ("Preto - 42", 95, -1.8),
        ],
    ),
    (
        "SH-SN-12",
        "Tênis Esportivo Performance",
        [
            ("Branco/Vermelho - 41", 50, -0.8),
            ("Preto/Cinza - 42", 65, -1.2),
            ("Azul Marinho - 40", 30, -0.2),
        ],
    ),
]

SAMPLE_DAYS = 7


def _search_url(name: str) -> str:
    return "https://www.google.com/search?q=" + name.replace(" ", "+")


def generate_history(
    days: int,
    start_stock: int,
    daily_change: float,
    now: datetime | None = None,
    rng: random.Random | None = None,
) -> list[RawHistoryEntry]:
    """Generate ``days + 1`` daily readings ending at ``now``.

    Stock drifts by ``daily_change`` per day with a little noise and never
    goes below zero.
    """
    now = now or datetime.now(timezone.utc)
    rng = rng or random.Random()

    history: list[RawHistoryEntry] = []
    for i in range(days, -1, -1):
        timestamp = now - timedelta(days=i)
        noise = (rng.random() - 0.5) * NOISE_AMPLITUDE
        # Halves round up
        stock = math.floor(start_stock + (days - i) * daily_change + noise + 0.5)
        history.append(
            RawHistoryEntry(
                timestamp=timestamp.isoformat().replace("+00:00", "Z"),
                stock=max(0, stock),
            )
        )
    return history


def build_sample_skus(
    now: datetime | None = None,
    rng: random.Random | None = None,
) -> list[RawSku]:
    """Build the full synthetic catalogue."""
    now = now or datetime.now(timezone.utc)
    rng = rng or random.Random()

    return [
        RawSku(
            id=sku_id,
            name=name,
            url=_search_url(name),
            variations=[
                RawVariation(
                    name=variation_name,
                    history=generate_history(SAMPLE_DAYS, start, change, now, rng),
                )
                for variation_name, start, change in variations
            ],
        )
        for sku_id, name, variations in SAMPLE_CATALOGUE
    ]
