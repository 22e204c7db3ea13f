"""Canonical date grids for each target frequency."""

from datetime import date

import pandas as pd

from fred_database.models import Frequency


def observation_end(today: date | None = None, horizon_years: int = 4) -> pd.Timestamp:
    """Last date to request: today plus `horizon_years` calendar years."""
    today_ts = pd.Timestamp(today or date.today()).normalize()
    return today_ts + pd.DateOffset(years=horizon_years)


def normalize_start(start: date | str | pd.Timestamp, frequency: Frequency) -> pd.Timestamp:
    """
    Move a start date onto the grid of `frequency`.

    Annual starts go back to January 1st, quarterly and monthly starts to the
    first day of their period. Weekly starts go forward to the next Friday.
    Aggregated series are dated on these points, so the grid has to be too.
    """
    ts = pd.Timestamp(start).normalize()
    offset = frequency.grid_offset
    if frequency is Frequency.WEEKLY:
        return offset.rollforward(ts)
    return offset.rollback(ts)


def build_calendar_grid(
    start: date | str | pd.Timestamp,
    end: date | str | pd.Timestamp,
    frequency: Frequency,
) -> pd.DatetimeIndex:
    """
    Build the gap-free date index for one target frequency.

    Args:
        start: First date; normalized with `normalize_start`
        end: Last allowed date (inclusive)
        frequency: Target frequency

    Returns:
        DatetimeIndex named "date", one entry per calendar step
    """
    start_ts = pd.Timestamp(start).normalize()
    end_ts = pd.Timestamp(end).normalize()
    if end_ts < start_ts:
        raise ValueError(f"End date {end_ts.date()} is before start date {start_ts.date()}")

    return pd.date_range(
        start=normalize_start(start_ts, frequency),
        end=end_ts,
        freq=frequency.grid_offset,
        name="date",
    )


def shift_to_anchor(index: pd.DatetimeIndex, frequency: Frequency) -> pd.DatetimeIndex:
    """
    Re-date a finished table to its anchor convention.

    Quarterly rows move to the first day of the quarter's third month and
    annual rows to July 1st. Only valid once all series are merged.
    """
    shift = frequency.anchor_shift
    if shift is None:
        return index
    return pd.DatetimeIndex(index + shift, name=index.name)
