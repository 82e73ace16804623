"""
Stock Monitor web application.
FastAPI app serving the server-rendered dashboard.
"""

from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException
from fastapi.responses import HTMLResponse, RedirectResponse

from stock_monitor import __version__
from stock_monitor.common.logging import get_logger

from .renderer import DashboardRenderer
from .state import DashboardState

logger = get_logger("web")


def _back_home() -> RedirectResponse:
    return RedirectResponse(url="/", status_code=303)


def create_app(
    state: DashboardState | None = None,
    renderer: DashboardRenderer | None = None,
) -> FastAPI:
    """Build the dashboard app around a single shared state.

    Args:
        state: Dashboard state; a default one is created when omitted.
        renderer: Page renderer; defaults to the packaged templates.

    Returns:
        Configured FastAPI application.
    """
    state = state or DashboardState()
    renderer = renderer or DashboardRenderer()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Load the catalogue once at startup."""
        logger.info("Starting Stock Monitor v%s", __version__)
        if state.loading:
            state.load()
        yield
        state.service.close()

    app = FastAPI(title="Stock Monitor", version=__version__, lifespan=lifespan)
    app.state.dashboard = state

    def _require_sku(sku_id: str):
        sku = state.get_sku(sku_id)
        if sku is None:
            raise HTTPException(status_code=404, detail=f"Unknown SKU '{sku_id}'")
        return sku

    @app.get("/", response_class=HTMLResponse)
    def dashboard() -> str:
        return renderer.render(state)

    @app.get("/api/skus")
    def list_skus() -> list[dict]:
        """Aggregated SKUs for the current period and ordering."""
        return [s.model_dump(mode="json") for s in state.processed_data()]

    @app.post("/reload")
    def reload() -> RedirectResponse:
        state.load()
        return _back_home()

    @app.post("/period/{days}")
    def set_period(days: int) -> RedirectResponse:
        try:
            state.set_period(days)
        except ValueError as e:
            raise HTTPException(status_code=400, detail=str(e))
        return _back_home()

    @app.post("/sort/{key}")
    def sort_by(key: str) -> RedirectResponse:
        try:
            state.handle_sort(key)
        except ValueError as e:
            raise HTTPException(status_code=400, detail=str(e))
        return _back_home()

    @app.post("/favorites/{sku_id}")
    def toggle_favorite(sku_id: str) -> RedirectResponse:
        _require_sku(sku_id)
        state.toggle_favorite(sku_id)
        return _back_home()

    @app.post("/expand/{sku_id}")
    def toggle_expand(sku_id: str) -> RedirectResponse:
        _require_sku(sku_id)
        state.toggle_expand(sku_id)
        return _back_home()

    @app.post("/skus/{sku_id}/analyze")
    def analyze(sku_id: str) -> RedirectResponse:
        state.analyze_sku(_require_sku(sku_id))
        return _back_home()

    @app.post("/modal/close")
    def close_modal() -> RedirectResponse:
        state.close_modal()
        return _back_home()

    @app.post("/notice/dismiss")
    def dismiss_notice() -> RedirectResponse:
        state.dismiss_notice()
        return _back_home()

    return app
