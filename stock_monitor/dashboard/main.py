"""CLI entry point for the dashboard.

Usage:
    # Serve the dashboard:
    python -m stock_monitor.dashboard.main --host 0.0.0.0 --port 8000

    # Render a one-off static snapshot:
    python -m stock_monitor.dashboard.main --snapshot data/exports/dashboard.html --period 1
"""

from __future__ import annotations

import argparse
import logging
import os
from pathlib import Path

import uvicorn

from .renderer import DashboardRenderer
from .state import DashboardState

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
)
logger = logging.getLogger(__name__)


def _write_snapshot(output_path: str, period: int | None) -> None:
    state = DashboardState()
    try:
        state.load()
        if period is not None:
            state.set_period(period)
        html = DashboardRenderer().render(state)
    finally:
        state.service.close()

    Path(output_path).parent.mkdir(parents=True, exist_ok=True)
    Path(output_path).write_text(html, encoding="utf-8")
    logger.info("Snapshot written to %s", output_path)


def main() -> None:
    parser = argparse.ArgumentParser(description="Stock Monitor dashboard")
    parser.add_argument(
        "--host",
        type=str,
        default=os.getenv("STOCK_MONITOR_HOST", "127.0.0.1"),
        help="Bind address (default: 127.0.0.1)",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=int(os.getenv("STOCK_MONITOR_PORT", "8000")),
        help="Port (default: 8000)",
    )
    parser.add_argument(
        "--reload",
        action="store_true",
        help="Auto-reload on code changes (development)",
    )
    parser.add_argument(
        "--snapshot",
        type=str,
        help="Render the dashboard to this HTML file and exit",
    )
    parser.add_argument(
        "--period",
        type=int,
        help="Lookback window in days for --snapshot",
    )

    args = parser.parse_args()

    if args.snapshot:
        _write_snapshot(args.snapshot, args.period)
        return

    uvicorn.run(
        "stock_monitor.dashboard.app:create_app",
        factory=True,
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level="info",
    )


if __name__ == "__main__":
    main()
