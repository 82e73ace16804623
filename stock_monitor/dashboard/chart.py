"""Line-chart series for the SKU analysis modal.

One series per variation, plotted against the shared set of dates and
scaled into an SVG viewport so the template only has to draw polylines.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from stock_monitor.common.models import Sku
from stock_monitor.insight.prompts import format_date_br

CHART_WIDTH = 720
CHART_HEIGHT = 260
CHART_PADDING = 32


def series_color(index: int) -> str:
    """Distinct hue per series."""
    return f"hsl({index * 100}, 70%, 50%)"


@dataclass
class ChartPoint:
    label: str
    stock: int
    x: float = 0.0
    y: float = 0.0


@dataclass
class ChartSeries:
    name: str
    color: str
    points: list[ChartPoint] = field(default_factory=list)

    @property
    def svg_points(self) -> str:
        """Points in SVG ``polyline`` syntax."""
        return " ".join(f"{p.x:.1f},{p.y:.1f}" for p in self.points)


@dataclass
class Chart:
    series: list[ChartSeries]
    labels: list[str]
    min_stock: int
    max_stock: int
    width: int = CHART_WIDTH
    height: int = CHART_HEIGHT
    padding: int = CHART_PADDING

    @property
    def is_empty(self) -> bool:
        return not any(s.points for s in self.series)


def build_chart(sku: Sku) -> Chart:
    """Build scaled chart series from a SKU's in-window history."""
    series = [
        ChartSeries(
            name=v.name,
            color=series_color(i),
            points=[
                ChartPoint(label=format_date_br(h.timestamp), stock=h.stock)
                for h in v.history
            ],
        )
        for i, v in enumerate(sku.variations)
    ]

    # Categorical x axis: each date appears once, in first-seen order
    labels: list[str] = []
    for s in series:
        for p in s.points:
            if p.label not in labels:
                labels.append(p.label)

    stocks = [p.stock for s in series for p in s.points]
    min_stock = min(stocks, default=0)
    max_stock = max(stocks, default=0)

    chart = Chart(series=series, labels=labels, min_stock=min_stock, max_stock=max_stock)
    _scale(chart)
    return chart


def _scale(chart: Chart) -> None:
    plot_w = chart.width - 2 * chart.padding
    plot_h = chart.height - 2 * chart.padding
    x_step = plot_w / max(len(chart.labels) - 1, 1)
    span = max(chart.max_stock - chart.min_stock, 1)
    x_index = {label: i for i, label in enumerate(chart.labels)}

    for s in chart.series:
        for p in s.points:
            p.x = chart.padding + x_index[p.label] * x_step
            p.y = chart.padding + plot_h * (1 - (p.stock - chart.min_stock) / span)
