"""Compound growth projection for invested balances."""

from __future__ import annotations

from dataclasses import dataclass

import pandas as pd

from src.models.series import Series, SeriesPoint
from src.utils.date_utils import current_year

DEFAULT_PROJECTION_YEARS = 10


@dataclass(frozen=True)
class ProjectionParameters:
    """Inputs of a single growth projection."""

    start_value: float
    periodic_contribution: float
    horizon_periods: int
    annual_rate: float


@dataclass(frozen=True)
class RateScenario:
    """Named annual growth rate drawn as one chart series."""

    name: str
    annual_rate: float
    color: str


DEFAULT_SCENARIOS: tuple[RateScenario, ...] = (
    RateScenario('Conservative', 0.04, '#7c7cff'),
    RateScenario('Moderate', 0.06, '#53c1a9'),
    RateScenario('Aggressive', 0.09, '#d17bff'),
)


def project_growth(
    start_value: float,
    periodic_contribution: float,
    horizon_periods: int,
    annual_rate: float,
    *,
    anchor_year: int | None = None,
) -> tuple[SeriesPoint, ...]:
    """Project a balance forward with yearly compounding.

    Point 0 is the start value at the anchor year. Each later point adds the
    contribution to the previous value and then applies one year of growth:
    `value_y = (value_{y-1} + contribution) * (1 + rate)`.
    """
    horizon = int(horizon_periods)
    if horizon < 0:
        raise ValueError(f'horizon_periods must be >= 0, got {horizon_periods}.')
    anchor = current_year() if anchor_year is None else int(anchor_year)
    contribution = float(periodic_contribution)
    growth = 1.0 + float(annual_rate)

    points: list[SeriesPoint] = []
    value = float(start_value)
    for y in range(horizon + 1):
        if y > 0:
            value = (value + contribution) * growth
        points.append(SeriesPoint(period=anchor + y, value=value))
    return tuple(points)


def project_parameters(params: ProjectionParameters, *, anchor_year: int | None = None) -> tuple[SeriesPoint, ...]:
    return project_growth(
        params.start_value,
        params.periodic_contribution,
        params.horizon_periods,
        params.annual_rate,
        anchor_year=anchor_year,
    )


def build_projection_series(
    start_value: float,
    *,
    years: int = DEFAULT_PROJECTION_YEARS,
    contribution: float = 0.0,
    scenarios: tuple[RateScenario, ...] | list[RateScenario] = DEFAULT_SCENARIOS,
    anchor_year: int | None = None,
) -> list[Series]:
    """Return one series per rate scenario, all on the same period axis."""
    anchor = current_year() if anchor_year is None else int(anchor_year)
    return [
        Series(
            name=scenario.name,
            color=scenario.color,
            points=project_growth(start_value, contribution, years, scenario.annual_rate, anchor_year=anchor),
        )
        for scenario in scenarios
    ]


def projection_frame(series: list[Series]) -> pd.DataFrame:
    """Wide table with a `Year` column and one value column per series."""
    if not series:
        return pd.DataFrame(columns=['Year'])
    out = pd.DataFrame({'Year': series[0].periods})
    for s in series:
        values = s.values
        out[s.name] = pd.Series(values[: len(out)], dtype=float)
    return out
