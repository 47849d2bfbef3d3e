from __future__ import annotations

import pytest

from src.calculations.projection import (
    DEFAULT_SCENARIOS,
    ProjectionParameters,
    build_projection_series,
    project_growth,
    project_parameters,
    projection_frame,
)


def test_project_growth_compounds_yearly_from_anchor() -> None:
    points = project_growth(1000.0, 0.0, 5, 0.10, anchor_year=2024)
    assert [p.period for p in points] == [2024, 2025, 2026, 2027, 2028, 2029]
    assert [round(p.value, 2) for p in points] == [1000.0, 1100.0, 1210.0, 1331.0, 1464.1, 1610.51]


def test_project_growth_ten_years_at_five_percent() -> None:
    points = project_growth(1000.0, 0.0, 10, 0.05, anchor_year=2026)
    assert len(points) == 11
    assert points[-1].period == 2036
    assert points[-1].value == pytest.approx(1628.89, abs=0.01)


def test_project_growth_adds_contribution_before_growth() -> None:
    points = project_growth(1000.0, 100.0, 2, 0.10, anchor_year=2024)
    assert points[0].value == pytest.approx(1000.0)
    assert points[1].value == pytest.approx(1210.0)
    assert points[2].value == pytest.approx(1441.0)


def test_project_growth_zero_horizon_is_start_only() -> None:
    points = project_growth(2500.0, 50.0, 0, 0.09, anchor_year=2030)
    assert len(points) == 1
    assert points[0].period == 2030
    assert points[0].value == pytest.approx(2500.0)


def test_project_growth_one_period() -> None:
    points = project_growth(0.0, 0.0, 1, 0.04, anchor_year=2030)
    assert [p.value for p in points] == [0.0, 0.0]


def test_project_growth_negative_horizon_raises() -> None:
    with pytest.raises(ValueError):
        project_growth(1000.0, 0.0, -1, 0.05, anchor_year=2024)


def test_project_growth_is_non_decreasing_for_positive_inputs() -> None:
    values = [p.value for p in project_growth(10_000.0, 0.0, 10, 0.06, anchor_year=2024)]
    assert all(b >= a for a, b in zip(values, values[1:]))


def test_project_parameters_matches_project_growth() -> None:
    params = ProjectionParameters(start_value=500.0, periodic_contribution=10.0, horizon_periods=3, annual_rate=0.09)
    assert project_parameters(params, anchor_year=2024) == project_growth(500.0, 10.0, 3, 0.09, anchor_year=2024)


def test_build_projection_series_default_scenarios() -> None:
    series = build_projection_series(10_000.0, anchor_year=2026)
    assert [s.name for s in series] == ['Conservative', 'Moderate', 'Aggressive']
    assert [s.color for s in series] == ['#7c7cff', '#53c1a9', '#d17bff']
    for s in series:
        assert len(s) == 11
        assert s.periods[0] == 2026
        assert s.periods[-1] == 2036
        assert s.values[0] == pytest.approx(10_000.0)
    finals = [s.values[-1] for s in series]
    assert finals[0] < finals[1] < finals[2]


def test_build_projection_series_custom_horizon_and_scenarios() -> None:
    series = build_projection_series(100.0, years=3, scenarios=DEFAULT_SCENARIOS[:1], anchor_year=2020)
    assert len(series) == 1
    assert series[0].periods == [2020, 2021, 2022, 2023]


def test_projection_frame_is_wide_by_year() -> None:
    series = build_projection_series(1000.0, years=2, anchor_year=2024)
    df = projection_frame(series)
    assert df.columns.tolist() == ['Year', 'Conservative', 'Moderate', 'Aggressive']
    assert df['Year'].tolist() == [2024, 2025, 2026]
    assert df.loc[1, 'Conservative'] == pytest.approx(1040.0)
    assert df.loc[1, 'Aggressive'] == pytest.approx(1090.0)


def test_projection_frame_empty() -> None:
    assert projection_frame([]).columns.tolist() == ['Year']
