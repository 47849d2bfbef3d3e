from __future__ import annotations

import pytest

from src.dashboard.plots.projection_chart import (
    ProjectionChart,
    chart_widget_key,
    selected_pointer_x,
    sync_hover_from_selection,
)
from src.models.series import NO_HOVER, HoverAt, Series, SeriesPoint


def _series(name: str, values: list[float], color: str = '#7c7cff', start: int = 2026) -> Series:
    return Series(name=name, color=color, points=tuple(SeriesPoint(start + i, v) for i, v in enumerate(values)))


def _pair() -> list[Series]:
    return [_series('A', [0.0, 50.0, 100.0]), _series('B', [0.0, 25.0, 50.0], color='#53c1a9')]


def _chart(calls: list | None = None, **kwargs) -> ProjectionChart:
    observer = calls.append if calls is not None else None
    return ProjectionChart(_pair(), width=300.0, height=200.0, padding=20.0, on_hover_index_change=observer, **kwargs)


def test_chart_starts_idle() -> None:
    chart = _chart()
    assert chart.hover == NO_HOVER
    assert chart.hover_index is None
    assert chart.marker_points() == []
    assert chart.periods == [2026, 2027, 2028]


def test_pointer_move_snaps_to_nearest_index_and_notifies() -> None:
    calls: list = []
    chart = _chart(calls)
    assert chart.pointer_move(150.0) == 1
    assert chart.hover == HoverAt(1)
    assert chart.pointer_move(-50.0) == 0
    assert chart.pointer_move(1000.0) == 2
    assert calls == [1, 0, 2]


def test_pointer_leave_and_cancel_return_to_idle() -> None:
    calls: list = []
    chart = _chart(calls)
    chart.pointer_move(280.0)
    chart.pointer_leave()
    assert chart.hover_index is None
    chart.pointer_move(20.0)
    chart.pointer_cancel()
    assert chart.hover_index is None
    assert calls == [2, None, 0, None]


def test_set_series_resets_hover() -> None:
    calls: list = []
    chart = _chart(calls)
    chart.pointer_move(280.0)
    chart.set_series([_series('C', [1.0, 2.0])])
    assert chart.hover_index is None
    assert calls[-1] is None
    assert [s.name for s in chart.series] == ['C']
    assert chart.scale.count == 2


def test_resize_keeps_hover_and_rescales() -> None:
    chart = _chart()
    chart.pointer_move(150.0)
    chart.resize(600.0, 400.0)
    assert chart.hover_index == 1
    assert chart.scale.x(2) == pytest.approx(580.0)


def test_line_and_area_paths() -> None:
    chart = _chart()
    line = chart.line_path(chart.series[0])
    assert line.startswith('M 20 180 L 150 ')
    assert line.count('L') == 2
    area = chart.area_path(chart.series[0])
    assert area.startswith(line)
    assert area.endswith('L 280 180 L 20 180 Z')


def test_marker_points_follow_hover() -> None:
    chart = _chart()
    chart.pointer_move(280.0)
    dots = chart.marker_points()
    assert [s.name for s, _, _ in dots] == ['A', 'B']
    assert all(x == pytest.approx(280.0) for _, x, _ in dots)
    assert dots[0][2] < dots[1][2]


def test_tooltip_anchor_flips_near_right_edge() -> None:
    chart = _chart()
    left = chart.tooltip_anchor(0)
    assert left.xanchor == 'left'
    assert left.xshift == pytest.approx(10.0)
    right = chart.tooltip_anchor(2)
    assert right.xanchor == 'right'
    assert right.xshift == pytest.approx(-10.0)
    assert right.x == pytest.approx(280.0)


def test_figure_idle_has_no_hover_artifacts() -> None:
    fig = _chart().figure()
    names = [t.name for t in fig.data]
    assert names == ['A area', 'B area', 'A', 'B', 'hover targets']
    assert fig.data[0].fill == 'toself'
    assert len(fig.layout.shapes) == 6
    assert [a.text for a in fig.layout.annotations] == ['2026', '2027', '2028']
    assert tuple(fig.layout.xaxis.range) == (0, 300.0)
    assert tuple(fig.layout.yaxis.range) == (200.0, 0)


def test_figure_hovered_adds_guide_markers_and_tooltip() -> None:
    chart = _chart()
    chart.pointer_move(150.0)
    fig = chart.figure(currency='USD')
    assert [t.name for t in fig.data][-1] == 'hover markers'
    assert len(fig.data[-1].x) == 2
    assert len(fig.layout.shapes) == 7
    tooltip = [a for a in fig.layout.annotations if a.name == 'tooltip']
    assert len(tooltip) == 1
    assert 'Year 2027' in tooltip[0].text
    assert '$50.00' in tooltip[0].text
    assert '$25.00' in tooltip[0].text


def test_chart_rejects_invalid_series() -> None:
    with pytest.raises(ValueError):
        ProjectionChart([])
    with pytest.raises(ValueError):
        ProjectionChart([_series('A', [1.0, 2.0]), _series('B', [1.0])])
    with pytest.raises(ValueError):
        ProjectionChart([_series('A', [1.0, 2.0]), _series('B', [1.0, 2.0], start=2030)])


def test_chart_truncates_when_allowed() -> None:
    chart = ProjectionChart([_series('A', [1.0, 2.0, 3.0]), _series('B', [1.0, 2.0])], truncate=True)
    assert [len(s) for s in chart.series] == [2, 2]
    assert chart.warnings


def test_selected_pointer_x() -> None:
    assert selected_pointer_x(None) is None
    assert selected_pointer_x({'selection': {'points': []}}) is None
    assert selected_pointer_x({'selection': {'points': [{'x': 20.0}, {'x': 150.0}]}}) == pytest.approx(150.0)


def test_sync_hover_from_selection() -> None:
    calls: list = []
    chart = _chart(calls)
    sync_hover_from_selection(chart, {'selection': {'points': []}})
    assert calls == []
    sync_hover_from_selection(chart, {'selection': {'points': [{'x': 150.0}]}})
    assert chart.hover_index == 1
    sync_hover_from_selection(chart, {'selection': {'points': []}})
    assert chart.hover_index is None
    assert calls == [1, None]


def test_chart_widget_key_tracks_series_set() -> None:
    a = chart_widget_key('proj', _pair())
    assert a == chart_widget_key('proj', _pair())
    assert a.startswith('proj_')
    assert a != chart_widget_key('proj', [_series('A', [0.0, 50.0, 101.0])])
