"""Mapping from the projection data domain to the chart drawing surface."""

from __future__ import annotations

import math
from dataclasses import dataclass

from src.models.series import Series

DEFAULT_WIDTH = 900.0
DEFAULT_HEIGHT = 320.0
DEFAULT_PADDING = 30.0
HEADROOM = 1.05


def domain_max(series: list[Series]) -> float:
    """Upper bound of the value axis: 5% above the largest value, 1 when that is zero."""
    values = [p.value for s in series for p in s.points]
    if not values:
        return 1.0
    top = max(values) * HEADROOM
    return top or 1.0


@dataclass(frozen=True)
class ChartScale:
    """Pure coordinate mapping for a fixed-size surface.

    Surface pixels grow rightwards in x and downwards in y; the value axis
    runs from `min_value` at the bottom padding edge to `max_value` at the
    top padding edge.
    """

    width: float = DEFAULT_WIDTH
    height: float = DEFAULT_HEIGHT
    padding: float = DEFAULT_PADDING
    count: int = 1
    min_value: float = 0.0
    max_value: float = 1.0

    @classmethod
    def for_series(
        cls,
        series: list[Series],
        *,
        width: float = DEFAULT_WIDTH,
        height: float = DEFAULT_HEIGHT,
        padding: float = DEFAULT_PADDING,
    ) -> ChartScale:
        count = min((len(s.points) for s in series), default=1)
        return cls(
            width=float(width),
            height=float(height),
            padding=float(padding),
            count=max(int(count), 1),
            min_value=0.0,
            max_value=domain_max(series),
        )

    @property
    def inner_left(self) -> float:
        return self.padding

    @property
    def inner_right(self) -> float:
        return self.width - self.padding

    @property
    def top(self) -> float:
        return self.padding

    @property
    def baseline(self) -> float:
        return self.height - self.padding

    def x(self, index: float) -> float:
        if self.count <= 1:
            return self.padding
        return self.padding + (index / (self.count - 1)) * (self.width - 2 * self.padding)

    def y(self, value: float) -> float:
        span = (self.max_value - self.min_value) or 1.0
        return (self.height - self.padding) - ((value - self.min_value) / span) * (self.height - 2 * self.padding)

    def index_at(self, px: float) -> int:
        """Nearest point index for a horizontal pixel position.

        The position is clamped to the inner band, normalized to [0, 1] and
        rounded half-up onto the index grid.
        """
        if self.count <= 1:
            return 0
        clamped = max(self.inner_left, min(self.inner_right, float(px)))
        band = (self.inner_right - self.inner_left) or 1.0
        t = (clamped - self.inner_left) / band
        idx = int(math.floor(t * (self.count - 1) + 0.5))
        return min(max(idx, 0), self.count - 1)

    def grid_lines(self, divisions: int = 5) -> list[float]:
        """Y pixel positions of evenly spaced horizontal grid lines, top to bottom."""
        step = (self.height - 2 * self.padding) / divisions
        return [self.padding + i * step for i in range(divisions + 1)]
