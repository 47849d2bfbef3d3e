from __future__ import annotations

import pytest

from src.calculations.scale import ChartScale, domain_max
from src.models.series import Series, SeriesPoint


def _series(values: list[float], name: str = 'S') -> Series:
    return Series(name=name, color='#000000', points=tuple(SeriesPoint(2024 + i, v) for i, v in enumerate(values)))


def test_x_spans_inner_band() -> None:
    sc = ChartScale(width=900.0, height=320.0, padding=30.0, count=11, max_value=100.0)
    assert sc.x(0) == pytest.approx(30.0)
    assert sc.x(5) == pytest.approx(450.0)
    assert sc.x(10) == pytest.approx(870.0)


def test_y_maps_zero_to_baseline_and_max_to_top() -> None:
    sc = ChartScale(width=900.0, height=320.0, padding=30.0, count=11, max_value=100.0)
    assert sc.y(0.0) == pytest.approx(290.0)
    assert sc.y(100.0) == pytest.approx(30.0)
    assert sc.y(50.0) == pytest.approx(160.0)
    assert sc.baseline == pytest.approx(290.0)
    assert sc.top == pytest.approx(30.0)


def test_y_with_empty_domain_does_not_divide_by_zero() -> None:
    sc = ChartScale(width=100.0, height=100.0, padding=10.0, count=2, max_value=0.0)
    assert sc.y(0.0) == pytest.approx(90.0)


def test_single_point_sits_on_left_padding() -> None:
    sc = ChartScale(width=900.0, height=320.0, padding=30.0, count=1, max_value=1.0)
    assert sc.x(0) == pytest.approx(30.0)
    assert sc.index_at(0.0) == 0
    assert sc.index_at(900.0) == 0


def test_index_at_clamps_and_rounds_to_nearest() -> None:
    sc = ChartScale(width=900.0, height=320.0, padding=30.0, count=11, max_value=100.0)
    assert sc.index_at(-100.0) == 0
    assert sc.index_at(5000.0) == 10
    assert sc.index_at(450.0) == 5
    assert sc.index_at(71.0) == 0
    assert sc.index_at(73.0) == 1
    assert sc.index_at(sc.x(7)) == 7


def test_domain_max_adds_headroom() -> None:
    assert domain_max([_series([0.0, 50.0, 100.0])]) == pytest.approx(105.0)
    assert domain_max([_series([0.0, 0.0])]) == pytest.approx(1.0)
    assert domain_max([]) == pytest.approx(1.0)


def test_for_series_uses_shortest_count_and_domain() -> None:
    sc = ChartScale.for_series([_series([1.0, 2.0, 3.0]), _series([4.0, 200.0])], width=300.0, height=200.0, padding=20.0)
    assert sc.count == 2
    assert sc.max_value == pytest.approx(210.0)
    assert sc.min_value == 0.0


def test_grid_lines_evenly_spaced_top_to_bottom() -> None:
    sc = ChartScale(width=900.0, height=320.0, padding=30.0, count=11, max_value=100.0)
    assert sc.grid_lines(5) == pytest.approx([30.0, 82.0, 134.0, 186.0, 238.0, 290.0])


@pytest.mark.parametrize('count', [1, 2, 3, 4, 7, 10, 11, 30])
def test_index_at_inverts_x_for_every_index(count: int) -> None:
    sc = ChartScale(width=900.0, height=320.0, padding=30.0, count=count, max_value=100.0)
    xs = [sc.x(k) for k in range(count)]
    assert xs == sorted(xs)
    assert xs[0] == pytest.approx(30.0)
    if count > 1:
        assert xs[-1] == pytest.approx(870.0)
    assert [sc.index_at(x) for x in xs] == list(range(count))
