"""Aggregate a series to a coarser frequency (interpolate, then mean)."""

import logging

import numpy as np
import pandas as pd

from fred_database.alignment.weekly import realign_weekly
from fred_database.errors import FrequencyMismatchError
from fred_database.models import Frequency, FredSeries


logger = logging.getLogger(__name__)

# Weekly bins are (Saturday, Friday] labelled by the Friday; all other bins
# start on the first day of the period and carry that date.
_BIN_SIDES = {
    Frequency.WEEKLY: {"closed": "right", "label": "right"},
}
_DEFAULT_SIDES = {"closed": "left", "label": "left"}


def reduce_frequency(
    observations: pd.Series, native: Frequency, target: Frequency
) -> pd.Series:
    """
    Convert `observations` sampled at `native` to `target` frequency.

    Steps:
        1. Append a missing value one native step after the last date.
        2. Linearly interpolate interior gaps (no extrapolation).
        3. Average each target period. A period holding any missing value
           stays missing.

    Step 1 makes the period containing the end of the sample incomplete, so
    a partially observed last quarter is dropped instead of averaged over
    fewer months. Partially covered periods at the start of the sample are
    averaged from whatever data exists.

    Args:
        observations: Values on a DatetimeIndex at the native frequency
        native: Native frequency of the series
        target: Requested frequency, coarser than or equal to `native`

    Returns:
        Series on the target frequency's bins (same name as the input)
    """
    if target is native:
        return observations
    if not target.is_coarser_than(native):
        raise FrequencyMismatchError(
            f"Cannot reduce {native.value} data to {target.value}: "
            "target frequency must be coarser"
        )

    values = pd.to_numeric(observations, errors="coerce").astype(float)
    values.index = pd.DatetimeIndex(values.index, name="date")
    values = values.sort_index()
    if values.empty:
        return pd.Series(
            dtype=float, index=pd.DatetimeIndex([], name="date"), name=observations.name
        )

    # Mark the unit after the last observation as missing
    values.loc[values.index[-1] + native.step] = np.nan

    filled = values.interpolate(method="time", limit_area="inside")

    sides = _BIN_SIDES.get(target, _DEFAULT_SIDES)
    bins = filled.resample(target.grid_offset, **sides)
    means = bins.mean()
    incomplete = bins.count() < bins.size()

    reduced = means.mask(incomplete)
    reduced.index.name = "date"
    reduced.name = observations.name
    return reduced


def prepare_series(series: FredSeries, target: Frequency) -> pd.Series:
    """
    Turn a fetched series into a column for the `target` table.

    Weekly series are first moved to Fridays; series finer than the target
    are reduced. A series already at the target passes through unchanged.
    """
    observations = series.observations
    if series.frequency is Frequency.WEEKLY:
        observations = realign_weekly(observations)

    if series.frequency is not target:
        logger.debug(
            f"  {series.series_id}: aggregating {series.frequency.value} -> {target.value}"
        )
    return reduce_frequency(observations, series.frequency, target).rename(
        series.series_id
    )
