from datetime import date

import numpy as np
import pandas as pd
import pytest

from fred_database.config import Settings
from fred_database.models import Frequency, FredSeries


def make_series(
    series_id: str,
    frequency: Frequency,
    dates,
    values,
    **fields,
) -> FredSeries:
    observations = pd.Series(
        np.asarray(values, dtype=float),
        index=pd.DatetimeIndex(pd.to_datetime(list(dates)), name="date"),
        name=series_id,
    )
    fields.setdefault("title", f"Title of {series_id}")
    fields.setdefault("units", "Index")
    fields.setdefault("seasonal_adjustment", "Not Seasonally Adjusted")
    fields.setdefault("source", "Test Source")
    return FredSeries(series_id=series_id, frequency=frequency, observations=observations, **fields)


class FakeSource:
    """In-memory source; entries may be exceptions to raise on fetch."""

    def __init__(self, series: dict) -> None:
        self.series = series
        self.calls: list[tuple[str, pd.Timestamp, pd.Timestamp]] = []

    def fetch(self, series_id, start, end) -> FredSeries:
        self.calls.append((series_id, start, end))
        entry = self.series[series_id]
        if isinstance(entry, Exception):
            raise entry
        obs = entry.observations
        clipped = obs[(obs.index >= start) & (obs.index <= end)]
        return entry.with_observations(clipped)


@pytest.fixture
def today() -> date:
    return date(2024, 6, 15)


@pytest.fixture
def settings() -> Settings:
    return Settings(fred_api_key="test-key", max_workers=1)
