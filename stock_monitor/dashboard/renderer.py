"""
Dashboard Renderer.
Handles Jinja2 template loading and rendering of the dashboard page.
"""

from pathlib import Path
from typing import Any, Optional

import markdown as md
from jinja2 import Environment, FileSystemLoader, select_autoescape
from markupsafe import Markup, escape

from .chart import build_chart
from .state import DashboardState

PERIOD_LABELS = {1: "1 Dia"}


def format_signed(value: int) -> str:
    """Render a delta with an explicit ``+`` for gains."""
    return f"+{value}" if value > 0 else str(value)


def delta_class(value: int) -> str:
    """CSS class for a stock delta."""
    if value > 0:
        return "delta-up"
    if value < 0:
        return "delta-down"
    return "delta-flat"


def period_label(days: int) -> str:
    return PERIOD_LABELS.get(days, f"{days} Dias")


def render_markdown(text: str) -> Markup:
    """Convert LLM markdown to HTML. Raw HTML in the input is escaped."""
    return Markup(md.markdown(str(escape(text or "")), extensions=["tables"]))


class DashboardRenderer:
    """
    Renders the stock dashboard using Jinja2 templates.

    Usage:
        renderer = DashboardRenderer()
        html = renderer.render(state)
    """

    def __init__(self, templates_dir: Optional[Path] = None):
        """
        Initialize the dashboard renderer.

        Args:
            templates_dir: Path to templates directory.
                          Defaults to ./templates relative to this file.
        """
        if templates_dir is None:
            templates_dir = Path(__file__).parent / "templates"

        self.templates_dir = templates_dir
        self.env = Environment(
            loader=FileSystemLoader(str(templates_dir)),
            autoescape=select_autoescape(["html", "xml"]),
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.env.filters["signed"] = format_signed
        self.env.filters["delta_class"] = delta_class
        self.env.filters["period_label"] = period_label
        self.env.filters["markdown"] = render_markdown

    def build_context(self, state: DashboardState) -> dict[str, Any]:
        """
        Collect template variables from the dashboard state.

        Args:
            state: Current dashboard state

        Returns:
            Template context dictionary
        """
        skus = [] if state.loading or state.error else state.processed_data()
        selected = state.selected_sku if state.modal_open else None
        return {
            "loading": state.loading,
            "error": state.error,
            "notice": state.notice,
            "skus": skus,
            "favorites": set(state.favorites.ids),
            "expanded": state.expanded,
            "period": state.period,
            "periods": state.settings.dashboard.periods,
            "sort_key": state.sort_config.key,
            "sort_direction": state.sort_config.direction.value,
            "selected_sku": selected,
            "chart": build_chart(selected) if selected else None,
            "analysis": state.analysis,
            "analysis_loading": state.analysis_loading,
        }

    def render(self, state: DashboardState) -> str:
        """
        Render the full dashboard page.

        Args:
            state: Current dashboard state

        Returns:
            Rendered HTML string
        """
        template = self.env.get_template("dashboard.html")
        return template.render(**self.build_context(state))


def render_dashboard(state: DashboardState) -> str:
    """
    Convenience function to render the dashboard.

    Args:
        state: Current dashboard state

    Returns:
        Rendered HTML string
    """
    renderer = DashboardRenderer()
    return renderer.render(state)
