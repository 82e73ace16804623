# Dashboard — stateful stock table, favorites, analysis modal
"""
Dashboard module for the stock monitor web UI.

Holds the shared dashboard state, persists favorites locally, and renders
the table/cards page with Jinja2 behind a small FastAPI app.
"""

from .app import create_app
from .chart import build_chart
from .favorites import FavoritesStore
from .renderer import DashboardRenderer, render_dashboard
from .state import DashboardState

__all__ = [
    "create_app",
    "build_chart",
    "FavoritesStore",
    "DashboardRenderer",
    "render_dashboard",
    "DashboardState",
]
