"""Owns one target frequency's data and metadata tables until finalized."""

import logging
from datetime import date
from enum import Enum

import pandas as pd

from fred_database.alignment.calendar import build_calendar_grid, shift_to_anchor
from fred_database.errors import BuilderStateError
from fred_database.models import Frequency, FredSeries, FrequencyResult
from fred_database.tables.merger import merge_series
from fred_database.tables.metadata import MetadataTable


logger = logging.getLogger(__name__)


class BuilderState(Enum):
    """Lifecycle of a FrequencyTableBuilder."""
    EMPTY = "empty"  # grid only
    ACCUMULATING = "accumulating"
    FINALIZED = "finalized"


def drop_missing_edges(table: pd.DataFrame) -> pd.DataFrame:
    """Remove leading and trailing rows where every column is missing."""
    if table.columns.empty:
        return table
    rows = table.notna().any(axis=1).to_numpy().nonzero()[0]
    if len(rows) == 0:
        return table.iloc[0:0]
    return table.iloc[rows[0] : rows[-1] + 1]


class FrequencyTableBuilder:
    """
    Build the table for one target frequency.

    Protocol: create (grid-only table) -> add_series() per series, in order
    -> finalize(). A failed add_series() leaves both tables as they were.
    """

    def __init__(
        self,
        frequency: Frequency,
        start: date | str | pd.Timestamp,
        end: date | str | pd.Timestamp,
    ) -> None:
        self.frequency = frequency
        self.grid = build_calendar_grid(start, end, frequency)
        self._table = pd.DataFrame(index=self.grid)
        self._metadata = MetadataTable()
        self.state = BuilderState.EMPTY

    @property
    def series_ids(self) -> list[str]:
        return self._metadata.columns

    @property
    def table(self) -> pd.DataFrame:
        """Current (unfinalized) data table."""
        return self._table.copy()

    def add_series(self, series: FredSeries, values: pd.Series) -> None:
        """
        Merge `values` (already on this frequency's bins) as a new column.

        Args:
            series: Fetched series, source of the column name and metadata
            values: Prepared observations for this frequency
        """
        if self.state is BuilderState.FINALIZED:
            raise BuilderStateError(
                f"{self.frequency.value} table is finalized; cannot add {series.series_id}"
            )

        self._metadata.check_new(series.series_id)
        metadata = self._metadata.copy()
        metadata.record(series)
        # Realigned weekly dates can fall into the period before the grid
        if len(self.grid):
            values = values[pd.DatetimeIndex(values.index) >= self.grid[0]]
        table = merge_series(self._table, series.series_id, values)

        self._table = table
        self._metadata = metadata
        self.state = BuilderState.ACCUMULATING

    def finalize(self) -> FrequencyResult:
        """
        Finish the tables: order columns as in the metadata, apply the
        anchor shift, drop leading and trailing rows without data.
        """
        if self.state is BuilderState.FINALIZED:
            raise BuilderStateError(f"{self.frequency.value} table already finalized")

        metadata = self._metadata.to_frame()
        data = self._table[metadata.columns.tolist()].copy()
        data.index = shift_to_anchor(pd.DatetimeIndex(data.index, name="date"), self.frequency)
        data = drop_missing_edges(data)

        self.state = BuilderState.FINALIZED
        logger.info(
            f"{self.frequency.value}: {len(metadata.columns)} series, "
            f"{len(data)} rows"
        )
        return FrequencyResult(frequency=self.frequency, data=data, metadata=metadata)
