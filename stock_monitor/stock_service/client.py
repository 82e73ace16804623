"""Stock Service — fetch SKU stock history from the remote API.

A single GET is issued for the whole catalogue. Any failure (network,
non-2xx status, bad JSON, unexpected payload shape) is logged, turned into
a user-facing notice, and answered with the synthetic sample catalogue.

Usage:
    with StockService() as service:
        skus = service.get_all_skus()
        if service.last_error:
            print(service.last_error)
"""

from __future__ import annotations

from typing import Callable

import httpx
from pydantic import TypeAdapter, ValidationError

from stock_monitor.common.config import Settings, settings as default_settings
from stock_monitor.common.logging import get_logger
from stock_monitor.common.models import RawSku

from .sample_data import build_sample_skus

logger = get_logger("stock_service")

_SKU_LIST = TypeAdapter(list[RawSku])


class StockService:
    """Client for the ``/api/skus`` endpoint with sample-data fallback.

    Args:
        settings: Application settings (API base URL, timeout, mock flag).
        client: Optional pre-built httpx client, mostly for tests.
        sample_factory: Callable producing the fallback catalogue.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        client: httpx.Client | None = None,
        sample_factory: Callable[[], list[RawSku]] = build_sample_skus,
    ) -> None:
        self.settings = settings or default_settings
        self._client = client or httpx.Client(timeout=self.settings.api.timeout_seconds)
        self._sample_factory = sample_factory
        self.last_error: str | None = None

    def get_all_skus(self) -> list[RawSku]:
        """Return every SKU with its raw history.

        Returns:
            SKUs from the API, or the synthetic catalogue when the API fails
            or mock mode is enabled. ``last_error`` holds the notice for the
            failed case and is reset on success.
        """
        self.last_error = None

        if self.settings.api.use_mock_data:
            logger.warning("Mock mode enabled: serving sample data")
            return self._sample_factory()

        url = self.settings.skus_url
        try:
            resp = self._client.get(url)
            if not resp.is_success:
                raise httpx.HTTPStatusError(
                    f"Falha ao buscar dados da API. Status: {resp.status_code}",
                    request=resp.request,
                    response=resp,
                )
            skus = _SKU_LIST.validate_python(resp.json())
        except (httpx.HTTPError, ValidationError, ValueError) as e:
            logger.error("Could not fetch SKUs from %s: %s", url, e)
            self.last_error = (
                f"Erro ao conectar com o servidor: {e}. Exibindo dados de exemplo."
            )
            return self._sample_factory()

        logger.info("Fetched %d SKUs from %s", len(skus), url)
        return skus

    def close(self) -> None:
        """Close the underlying HTTP client."""
        self._client.close()

    def __enter__(self) -> StockService:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()
