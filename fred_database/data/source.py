"""Interface of the per-series data source."""

from typing import Protocol

import pandas as pd

from fred_database.models import FredSeries


class SeriesSource(Protocol):
    """Anything that can fetch one series between two dates."""

    def fetch(self, series_id: str, start: pd.Timestamp, end: pd.Timestamp) -> FredSeries:
        ...
