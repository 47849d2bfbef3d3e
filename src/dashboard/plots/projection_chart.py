"""Interactive area/line chart for multi-scenario projections.

The chart is drawn in surface pixels: the x axis spans `[0, width]` and the
y axis `[height, 0]`, so `ChartScale` output is used directly as trace
coordinates. Hover is a two-state machine (`NoHover` / `HoverAt(i)`) owned by
`ProjectionChart`; every transition is pushed to the optional
`on_hover_index_change` observer.
"""

from __future__ import annotations

import hashlib
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

import plotly.graph_objects as go
import streamlit as st

from src.calculations.scale import DEFAULT_HEIGHT, DEFAULT_PADDING, DEFAULT_WIDTH, ChartScale
from src.dashboard.components.formatting import apply_plot_layout_hygiene, hex_to_rgba
from src.dashboard.components.legend import tooltip_rows
from src.data.validator import validate_series
from src.models.series import NO_HOVER, HoverAt, HoverState, Series, hover_index, series_signature
from src.utils.logging import get_logger

LOGGER = get_logger(__name__)

HoverCallback = Callable[[int | None], None]

AREA_OPACITY = 0.16
LINE_WIDTH = 2.5
MARKER_SIZE = 9
GRID_DIVISIONS = 5
MUTED_COLOR = '#94a3b8'
BORDER_COLOR = '#334155'
PANEL_COLOR = '#1e293b'
TOOLTIP_OFFSET = 10.0
TOOLTIP_TOP = 12.0
TOOLTIP_MIN_WIDTH = 180.0
LABEL_OFFSET = 6.0


def _fmt(value: float) -> str:
    return ('%.2f' % value).rstrip('0').rstrip('.')


@dataclass(frozen=True)
class TooltipAnchor:
    """Placement of the tooltip box relative to the hover guide."""

    x: float
    y: float
    xanchor: str
    xshift: float


class ProjectionChart:
    """Renderer and hover tracker for a set of series sharing one period axis."""

    def __init__(
        self,
        series: list[Series],
        *,
        width: float = DEFAULT_WIDTH,
        height: float = DEFAULT_HEIGHT,
        padding: float = DEFAULT_PADDING,
        on_hover_index_change: HoverCallback | None = None,
        truncate: bool = False,
    ) -> None:
        self._width = float(width)
        self._height = float(height)
        self._padding = float(padding)
        self._truncate = truncate
        self._observer = on_hover_index_change
        self._series, self.warnings = self._validated(series)
        self._scale = self._build_scale()
        self._hover: HoverState = NO_HOVER

    def _validated(self, series: list[Series]) -> tuple[list[Series], list[str]]:
        validated, warnings = validate_series(series, truncate=self._truncate)
        for warning in warnings:
            LOGGER.warning(warning)
        return validated, warnings

    def _build_scale(self) -> ChartScale:
        return ChartScale.for_series(self._series, width=self._width, height=self._height, padding=self._padding)

    @property
    def series(self) -> list[Series]:
        return list(self._series)

    @property
    def scale(self) -> ChartScale:
        return self._scale

    @property
    def hover(self) -> HoverState:
        return self._hover

    @property
    def hover_index(self) -> int | None:
        return hover_index(self._hover)

    @property
    def periods(self) -> list[int]:
        return self._series[0].periods

    def _transition(self, state: HoverState) -> None:
        self._hover = state
        if self._observer is not None:
            self._observer(hover_index(state))

    def pointer_move(self, px: float) -> int:
        """Hover the index nearest to horizontal surface position `px`."""
        idx = self._scale.index_at(px)
        self._transition(HoverAt(idx))
        return idx

    def pointer_leave(self) -> None:
        self._transition(NO_HOVER)

    def pointer_cancel(self) -> None:
        self.pointer_leave()

    def set_series(self, series: list[Series]) -> None:
        """Rebind to a new series set. Always returns to idle."""
        self._series, self.warnings = self._validated(series)
        self._scale = self._build_scale()
        self._transition(NO_HOVER)

    def resize(self, width: float, height: float, padding: float | None = None) -> None:
        self._width = float(width)
        self._height = float(height)
        if padding is not None:
            self._padding = float(padding)
        self._scale = self._build_scale()

    def line_path(self, series: Series) -> str:
        """Open SVG path through every point of `series`."""
        sc = self._scale
        return ' '.join(
            f'{"M" if i == 0 else "L"} {_fmt(sc.x(i))} {_fmt(sc.y(p.value))}'
            for i, p in enumerate(series.points[: sc.count])
        )

    def area_path(self, series: Series) -> str:
        """Closed SVG path between the series line and the baseline."""
        sc = self._scale
        base = _fmt(sc.baseline)
        return (
            f'{self.line_path(series)} L {_fmt(sc.x(sc.count - 1))} {base} '
            f'L {_fmt(sc.x(0))} {base} Z'
        )

    def marker_points(self) -> list[tuple[Series, float, float]]:
        """(series, x, y) of the hover dots; empty when idle."""
        idx = self.hover_index
        if idx is None:
            return []
        sc = self._scale
        return [(s, sc.x(idx), sc.y(s.points[idx].value)) for s in self._series]

    def tooltip_anchor(self, index: int) -> TooltipAnchor:
        """Tooltip sits right of the guide, or left of it when it would overflow."""
        gx = self._scale.x(index)
        if gx + TOOLTIP_OFFSET + TOOLTIP_MIN_WIDTH > self._scale.width:
            return TooltipAnchor(x=gx, y=TOOLTIP_TOP, xanchor='right', xshift=-TOOLTIP_OFFSET)
        return TooltipAnchor(x=gx, y=TOOLTIP_TOP, xanchor='left', xshift=TOOLTIP_OFFSET)

    def _tooltip_text(self, currency: str) -> str:
        idx = self.hover_index
        lines = [f'<span style="color:{MUTED_COLOR}">Year {self.periods[idx]}</span>']
        for row in tooltip_rows(self._series, self._hover, currency=currency):
            lines.append(f'<span style="color:{row.color}">■</span> {row.name}  <b>{row.formatted}</b>')
        return '<br>'.join(lines)

    def figure(self, *, currency: str = 'USD') -> go.Figure:
        """Build the Plotly figure for the current series and hover state."""
        sc = self._scale
        xs = [sc.x(i) for i in range(sc.count)]
        fig = go.Figure()

        for s in self._series:
            ys = [sc.y(p.value) for p in s.points[: sc.count]]
            fig.add_scatter(
                x=xs + [xs[-1], xs[0]],
                y=ys + [sc.baseline, sc.baseline],
                mode='lines',
                fill='toself',
                fillcolor=hex_to_rgba(s.color, AREA_OPACITY),
                line=dict(width=0),
                hoverinfo='skip',
                name=f'{s.name} area',
            )
        for s in self._series:
            fig.add_scatter(
                x=xs,
                y=[sc.y(p.value) for p in s.points[: sc.count]],
                mode='lines',
                line=dict(color=s.color, width=LINE_WIDTH),
                hoverinfo='skip',
                name=s.name,
            )

        # Transparent column targets so a click anywhere maps to the nearest period.
        fig.add_scatter(
            x=xs,
            y=[sc.top + (sc.baseline - sc.top) / 2.0] * len(xs),
            mode='markers',
            marker=dict(size=18, color='rgba(0,0,0,0)'),
            customdata=self.periods[: sc.count],
            hoverinfo='none',
            unselected=dict(marker=dict(opacity=0)),
            selected=dict(marker=dict(opacity=0)),
            name='hover targets',
        )

        for yy in sc.grid_lines(GRID_DIVISIONS):
            fig.add_shape(
                type='line',
                x0=sc.inner_left,
                x1=sc.inner_right,
                y0=yy,
                y1=yy,
                line=dict(color=BORDER_COLOR, width=1),
                opacity=0.18,
                layer='below',
            )

        for i, period in enumerate(self.periods[: sc.count]):
            fig.add_annotation(
                x=sc.x(i),
                y=sc.height - LABEL_OFFSET,
                text=str(period),
                showarrow=False,
                font=dict(size=12, color=MUTED_COLOR),
                yanchor='bottom',
            )

        idx = self.hover_index
        if idx is not None:
            gx = sc.x(idx)
            fig.add_shape(
                type='line',
                x0=gx,
                x1=gx,
                y0=sc.top,
                y1=sc.baseline,
                line=dict(color=BORDER_COLOR, width=1, dash='dash'),
                name='hover guide',
            )
            dots = self.marker_points()
            fig.add_scatter(
                x=[x for _, x, _ in dots],
                y=[y for _, _, y in dots],
                mode='markers',
                marker=dict(
                    size=MARKER_SIZE,
                    color=[s.color for s, _, _ in dots],
                    line=dict(color='white', width=1.5),
                ),
                hoverinfo='skip',
                name='hover markers',
            )
            anchor = self.tooltip_anchor(idx)
            fig.add_annotation(
                x=anchor.x,
                y=anchor.y,
                xanchor=anchor.xanchor,
                yanchor='top',
                xshift=anchor.xshift,
                text=self._tooltip_text(currency),
                showarrow=False,
                align='left',
                bgcolor=PANEL_COLOR,
                bordercolor=BORDER_COLOR,
                borderwidth=1,
                borderpad=8,
                font=dict(size=12),
                name='tooltip',
            )

        fig.update_xaxes(range=[0, sc.width], visible=False, fixedrange=True)
        fig.update_yaxes(range=[sc.height, 0], visible=False, fixedrange=True)
        fig.update_layout(
            height=int(sc.height),
            hovermode='x',
            hoverdistance=-1,
            dragmode=False,
            clickmode='event+select',
        )
        return apply_plot_layout_hygiene(fig)


def selected_pointer_x(selection_state: Any) -> float | None:
    """Horizontal surface position of the latest selected point, if any."""
    if not isinstance(selection_state, dict):
        selection_state = getattr(selection_state, '__dict__', None) or {}
    selection = selection_state.get('selection') or {}
    points = selection.get('points') if isinstance(selection, dict) else getattr(selection, 'points', None)
    if not points:
        return None
    x = points[-1].get('x') if isinstance(points[-1], dict) else None
    return None if x is None else float(x)


def sync_hover_from_selection(chart: ProjectionChart, selection_state: Any) -> None:
    """Replay the widget selection as pointer events on `chart`."""
    x = selected_pointer_x(selection_state)
    if x is None:
        if chart.hover_index is not None:
            chart.pointer_leave()
        return
    chart.pointer_move(x)


def chart_widget_key(prefix: str, series: list[Series]) -> str:
    """Widget key bound to the series set, so a new set starts without a selection."""
    digest = hashlib.sha1(series_signature(series).encode('utf-8')).hexdigest()[:12]
    return f'{prefix}_{digest}'


def render_projection_chart(chart: ProjectionChart, *, key: str, currency: str = 'USD') -> None:
    """Render `chart` and drive its hover state from point selections."""
    widget_key = chart_widget_key(key, chart.series)
    sync_hover_from_selection(chart, st.session_state.get(widget_key))
    st.plotly_chart(
        chart.figure(currency=currency),
        key=widget_key,
        on_select='rerun',
        selection_mode='points',
        width='stretch',
        config={'displayModeBar': False},
    )
