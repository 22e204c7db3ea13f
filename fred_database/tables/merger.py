"""Outer-join new series into a per-frequency table."""

import pandas as pd

from fred_database.errors import DuplicateSeriesError


def merge_series(table: pd.DataFrame, column: str, values: pd.Series) -> pd.DataFrame:
    """
    Add `values` to `table` as a new column using an outer join on dates.

    The result's index is the sorted union of both indexes; cells missing on
    either side are NaN. Existing columns keep their order and the new
    column is appended. `table` itself is left untouched.
    """
    if column in table.columns:
        raise DuplicateSeriesError(f"Column {column} already present in table")

    incoming = pd.to_numeric(values, errors="coerce").astype(float).rename(column)
    incoming.index = pd.DatetimeIndex(incoming.index, name=table.index.name)

    merged = table.join(incoming.to_frame(), how="outer", sort=True)
    merged.index.name = table.index.name
    return merged
