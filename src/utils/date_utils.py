"""Date helpers shared across calculations and dashboard layers."""

from __future__ import annotations

from datetime import date, datetime

import pandas as pd


def to_timestamp(value: pd.Timestamp | datetime | date | str) -> pd.Timestamp:
    """Convert an input value to a timezone-naive pandas Timestamp."""
    ts = pd.Timestamp(value)
    if ts.tz is not None:
        ts = ts.tz_convert(None)
    return ts


def today() -> pd.Timestamp:
    """Return today's date as a normalized Timestamp."""
    return pd.Timestamp.today().normalize()


def today_iso() -> str:
    """Return the current date in `YYYY-MM-DD` form."""
    return today().date().isoformat()


def current_year() -> int:
    return int(today().year)


def trailing_window(as_of: pd.Timestamp | datetime | date | str, days: int) -> tuple[pd.Timestamp, pd.Timestamp]:
    """Return the inclusive `[as_of - days + 1, as_of]` window."""
    end = to_timestamp(as_of).normalize()
    start = end - pd.Timedelta(days=max(int(days), 1) - 1)
    return start, end
