"""Shared test fixtures for Stock Monitor."""

import sys
from datetime import datetime, timedelta, timezone
from pathlib import Path
from unittest.mock import MagicMock

import pytest

# Ensure the package is importable without installation
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from stock_monitor.common.config import Settings
from stock_monitor.common.models import RawHistoryEntry, RawSku, RawVariation
from stock_monitor.common.storage import KeyValueStore
from stock_monitor.dashboard.favorites import FavoritesStore
from stock_monitor.dashboard.state import DashboardState


def iso(dt: datetime) -> str:
    """Serialize a datetime the way the stock API does."""
    return dt.isoformat().replace("+00:00", "Z")


@pytest.fixture
def now() -> datetime:
    """Reference time for window calculations.

    Tied to the wall clock so the dashboard state, which aggregates against
    the current time, sees the same windows as the explicit-``now`` tests.
    """
    return datetime.now(timezone.utc).replace(microsecond=0)


@pytest.fixture
def test_settings(tmp_path) -> Settings:
    """Settings with the key-value store redirected to a temp file."""
    settings = Settings()
    settings.dashboard.store_path = str(tmp_path / "store.json")
    return settings


@pytest.fixture
def kv_store(tmp_path) -> KeyValueStore:
    return KeyValueStore(tmp_path / "store.json")


@pytest.fixture
def favorites(kv_store, test_settings) -> FavoritesStore:
    return FavoritesStore(store=kv_store, settings=test_settings)


@pytest.fixture
def sample_raw_skus(now) -> list[RawSku]:
    """Three products with known histories relative to ``now``."""
    return [
        RawSku(
            id="TS-BL-01",
            name="Camiseta Básica de Algodão",
            url="https://example.com/camiseta",
            variations=[
                RawVariation(
                    name="Azul - P",
                    history=[
                        RawHistoryEntry(timestamp=iso(now - timedelta(days=6)), stock=100),
                        RawHistoryEntry(timestamp=iso(now), stock=90),
                    ],
                ),
                RawVariation(
                    name="Preto - M",
                    history=[
                        RawHistoryEntry(timestamp=iso(now - timedelta(days=10)), stock=80),
                        RawHistoryEntry(timestamp=iso(now - timedelta(hours=12)), stock=70),
                        RawHistoryEntry(timestamp=iso(now), stock=75),
                    ],
                ),
            ],
        ),
        RawSku(
            id="CL-DN-05",
            name="Calça Jeans Slim Fit",
            url="https://example.com/calca",
            variations=[
                RawVariation(
                    name="Azul Escuro - 40",
                    history=[
                        RawHistoryEntry(timestamp=iso(now - timedelta(days=3)), stock=40),
                    ],
                ),
            ],
        ),
        RawSku(
            id="SH-SN-12",
            name="Tênis Esportivo Performance",
            url="https://example.com/tenis",
            variations=[
                RawVariation(
                    name="Branco/Vermelho - 41",
                    history=[
                        RawHistoryEntry(timestamp=iso(now - timedelta(days=20)), stock=55),
                    ],
                ),
            ],
        ),
    ]


@pytest.fixture
def mock_service(sample_raw_skus) -> MagicMock:
    """Stock service double returning the sample catalogue."""
    service = MagicMock()
    service.get_all_skus.return_value = sample_raw_skus
    service.last_error = None
    return service


@pytest.fixture
def mock_generator() -> MagicMock:
    generator = MagicMock()
    generator.generate.return_value = "## Resumo Geral\nEstoque em queda."
    return generator


@pytest.fixture
def dashboard_state(mock_service, mock_generator, favorites, test_settings) -> DashboardState:
    """Dashboard state wired to test doubles and a temp favorites file."""
    return DashboardState(
        service=mock_service,
        generator=mock_generator,
        favorites=favorites,
        settings=test_settings,
    )
