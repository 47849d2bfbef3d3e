"""Compact trend line for dashboard cards."""

from __future__ import annotations

import plotly.graph_objects as go

from src.dashboard.components.formatting import apply_plot_layout_hygiene

SPARK_WIDTH = 540.0
SPARK_HEIGHT = 36.0
SPARK_COLOR = '#60a5fa'


def sparkline_coordinates(
    data: list[float],
    *,
    width: float = SPARK_WIDTH,
    height: float = SPARK_HEIGHT,
) -> list[tuple[float, float]]:
    """Map values onto a `width` x `height` box, min at the bottom edge."""
    if not data:
        return []
    lo = min(data)
    hi = max(data)
    span = (hi - lo) or 1.0
    steps = (len(data) - 1) or 1
    return [((i / steps) * width, height - ((v - lo) / span) * height) for i, v in enumerate(data)]


def build_sparkline_figure(data: list[float], *, color: str = SPARK_COLOR) -> go.Figure:
    coords = sparkline_coordinates(data)
    fig = go.Figure()
    fig.add_scatter(
        x=[x for x, _ in coords],
        y=[y for _, y in coords],
        mode='lines',
        line=dict(color=color, width=2),
        hoverinfo='skip',
    )
    fig.update_xaxes(range=[0, SPARK_WIDTH], visible=False, fixedrange=True)
    fig.update_yaxes(range=[SPARK_HEIGHT, 0], visible=False, fixedrange=True)
    fig.update_layout(height=60)
    return apply_plot_layout_hygiene(fig)
