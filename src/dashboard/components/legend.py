"""Legend, tooltip rows and stat cards derived from the chart hover index."""

from __future__ import annotations

from dataclasses import dataclass

import streamlit as st

from src.dashboard.components.formatting import money
from src.models.series import HoverAt, HoverState, Series, effective_index


@dataclass(frozen=True)
class LegendRow:
    name: str
    color: str
    value: float
    formatted: str


def legend_rows(series: list[Series], hover: HoverState, *, currency: str = 'USD') -> list[LegendRow]:
    """One row per series at the hovered index, or the last index when idle."""
    if not series:
        return []
    count = min(len(s.points) for s in series)
    idx = effective_index(hover, count)
    rows = []
    for s in series:
        value = float(s.points[idx].value)
        rows.append(LegendRow(name=s.name, color=s.color, value=value, formatted=money(value, currency)))
    return rows


def tooltip_rows(series: list[Series], hover: HoverState, *, currency: str = 'USD') -> list[LegendRow]:
    """Rows for the floating tooltip, which only exists while hovering."""
    if not isinstance(hover, HoverAt):
        return []
    return legend_rows(series, hover, currency=currency)


def effective_period(series: list[Series], hover: HoverState) -> int | None:
    if not series:
        return None
    count = min(len(s.points) for s in series)
    return series[0].points[effective_index(hover, count)].period


def render_legend(series: list[Series], hover: HoverState, *, currency: str = 'USD') -> None:
    """Render a compact swatch + name + value legend below the chart."""
    rows = legend_rows(series, hover, currency=currency)
    if not rows:
        return
    cols = st.columns(len(rows))
    for col, row in zip(cols, rows):
        col.markdown(
            f'<span style="display:inline-block;width:10px;height:10px;border-radius:2px;'
            f'background:{row.color}"></span> '
            f'<span style="color:#94a3b8">{row.name}</span> **{row.formatted}**',
            unsafe_allow_html=True,
        )


def render_stat_cards(series: list[Series], hover: HoverState, *, currency: str = 'USD') -> None:
    """One metric card per scenario, tracking the same index as the legend."""
    rows = legend_rows(series, hover, currency=currency)
    if not rows:
        return
    for col, row in zip(st.columns(len(rows)), rows):
        col.metric(row.name, row.formatted)
