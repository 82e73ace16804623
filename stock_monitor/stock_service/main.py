"""CLI entry point for the stock service module.

Usage:
    python -m stock_monitor.stock_service.main
    python -m stock_monitor.stock_service.main --period 1 --output data/skus.json
    python -m stock_monitor.stock_service.main --mock
"""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path

from stock_monitor.analytics.aggregator import process_skus
from stock_monitor.common.config import Settings

from .client import StockService

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
)
logger = logging.getLogger(__name__)


def main() -> None:
    parser = argparse.ArgumentParser(description="Stock history fetcher")
    parser.add_argument(
        "--period",
        type=int,
        default=7,
        help="Lookback window in days for the summary (default: 7)",
    )
    parser.add_argument(
        "--mock",
        action="store_true",
        help="Skip the API and use the sample catalogue",
    )
    parser.add_argument(
        "--output",
        type=str,
        help="Write the raw SKU payload to this JSON file",
    )

    args = parser.parse_args()

    settings = Settings.load()
    if args.mock:
        settings.api.use_mock_data = True

    with StockService(settings) as service:
        raw_skus = service.get_all_skus()
        if service.last_error:
            logger.warning(service.last_error)

    for sku in process_skus(raw_skus, args.period):
        logger.info(
            "  [%s] %s: stock=%d, variation=%+d",
            sku.id,
            sku.name,
            sku.total_stock,
            sku.total_variation,
        )

    if args.output:
        Path(args.output).parent.mkdir(parents=True, exist_ok=True)
        Path(args.output).write_text(
            json.dumps(
                [s.model_dump() for s in raw_skus], ensure_ascii=False, indent=2
            ),
            encoding="utf-8",
        )
        logger.info("Output written to %s", args.output)


if __name__ == "__main__":
    main()
