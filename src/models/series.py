"""Projection series and chart hover state models."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SeriesPoint:
    """One projected value at one future period (calendar year)."""

    period: int
    value: float


@dataclass(frozen=True)
class Series:
    """Named, colored sequence of projected values across a period axis."""

    name: str
    color: str
    points: tuple[SeriesPoint, ...]

    def __len__(self) -> int:
        return len(self.points)

    @property
    def periods(self) -> list[int]:
        return [p.period for p in self.points]

    @property
    def values(self) -> list[float]:
        return [p.value for p in self.points]


@dataclass(frozen=True)
class NoHover:
    """No active pointer over the chart; presentation falls back to the last index."""


@dataclass(frozen=True)
class HoverAt:
    """Pointer is over the chart, nearest to the point at `index`."""

    index: int


HoverState = NoHover | HoverAt

NO_HOVER = NoHover()


def hover_index(state: HoverState) -> int | None:
    """Return the hovered index, or None when idle."""
    if isinstance(state, HoverAt):
        return state.index
    return None


def effective_index(state: HoverState, count: int) -> int:
    """Resolve the index shown by tooltip, legend and stat cards.

    Idle resolves to the last point; a hovered index is clamped into range.
    """
    last = max(int(count) - 1, 0)
    if isinstance(state, HoverAt):
        return min(max(int(state.index), 0), last)
    return last


def series_signature(series: list[Series]) -> str:
    """Stable text identity of a series set, used to detect rebinding."""
    parts = []
    for s in series:
        values = ','.join(f'{p.period}:{p.value:.6f}' for p in s.points)
        parts.append(f'{s.name}|{s.color}|{values}')
    return ';'.join(parts)


def hover_from_index(index: int | None) -> HoverState:
    """Rebuild a hover state from a notified index."""
    return NO_HOVER if index is None else HoverAt(int(index))
