"""Move weekly observations onto Fridays so they merge on equal dates."""

import pandas as pd


# Days to add, keyed by weekday (Monday=0). Monday and Tuesday go back to
# the previous Friday, Wednesday and Thursday forward to the coming one.
FRIDAY_SHIFT: dict[int, int] = {
    0: -3,
    1: -4,
    2: 2,
    3: 1,
    4: 0,
    5: -1,
    6: -2,
}


def realign_weekly(observations: pd.Series) -> pd.Series:
    """
    Shift a weekly series so every observation falls on a Friday.

    The weekday of the first observation is assumed to hold for the whole
    series; all dates are moved by the same number of days.
    """
    if observations.empty:
        return observations

    index = pd.DatetimeIndex(observations.index)
    days = FRIDAY_SHIFT[index[0].weekday()]
    if days == 0:
        return observations

    shifted = observations.copy()
    shifted.index = pd.DatetimeIndex(index + pd.Timedelta(days=days), name=index.name)
    return shifted
