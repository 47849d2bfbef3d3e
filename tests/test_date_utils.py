import pandas as pd

from src.utils.date_utils import current_year, to_timestamp, today, today_iso, trailing_window


def test_to_timestamp_drops_timezone() -> None:
    ts = to_timestamp(pd.Timestamp('2026-10-18 12:00', tz='UTC'))
    assert ts.tz is None
    assert ts == pd.Timestamp('2026-10-18 12:00')


def test_today_helpers_agree() -> None:
    assert today_iso() == today().date().isoformat()
    assert current_year() == today().year


def test_trailing_window_is_inclusive() -> None:
    start, end = trailing_window('2026-10-18', 30)
    assert end == pd.Timestamp('2026-10-18')
    assert start == pd.Timestamp('2026-09-19')
    assert trailing_window('2026-10-18', 0) == (pd.Timestamp('2026-10-18'), pd.Timestamp('2026-10-18'))
