"""Descriptive fields for every merged series, one column per series."""

import pandas as pd

from fred_database.errors import DuplicateSeriesError
from fred_database.models import FredSeries


METADATA_FIELDS = ["Title", "Units", "SA", "Source"]


def _clean(value: object) -> str:
    return "" if value is None else str(value).strip()


class MetadataTable:
    """Accumulates the metadata table for one target frequency.

    Rows are Title, Units (lower-cased), SA and Source; columns are series
    identifiers in the order they were recorded. Recording the same
    identifier twice raises DuplicateSeriesError.
    """

    def __init__(self) -> None:
        self._columns: dict[str, list[str]] = {}

    def __contains__(self, series_id: str) -> bool:
        return series_id in self._columns

    def __len__(self) -> int:
        return len(self._columns)

    @property
    def columns(self) -> list[str]:
        return list(self._columns)

    def check_new(self, series_id: str) -> None:
        if series_id in self._columns:
            raise DuplicateSeriesError(
                f"Series {series_id} has already been recorded for this frequency"
            )

    def record(self, series: FredSeries) -> None:
        """Add one column for `series`."""
        self.check_new(series.series_id)
        self._columns[series.series_id] = [
            _clean(series.title),
            _clean(series.units).lower(),
            _clean(series.seasonal_adjustment),
            _clean(series.source),
        ]

    def copy(self) -> "MetadataTable":
        other = MetadataTable()
        other._columns = dict(self._columns)
        return other

    def to_frame(self) -> pd.DataFrame:
        return pd.DataFrame(
            self._columns, index=pd.Index(METADATA_FIELDS), columns=self.columns, dtype=object
        )
