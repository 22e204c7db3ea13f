import pandas as pd
import pytest

from fred_database.alignment import FRIDAY_SHIFT, realign_weekly


def _weekly(start: str, periods: int = 4) -> pd.Series:
    index = pd.date_range(start, periods=periods, freq="7D", name="date")
    return pd.Series(range(periods), index=index, dtype=float, name="W")


@pytest.mark.parametrize("weekday", range(7))
def test_every_weekday_lands_on_friday(weekday: int) -> None:
    # 2024-01-01 is a Monday
    start = pd.Timestamp("2024-01-01") + pd.Timedelta(days=weekday)
    series = _weekly(str(start.date()))

    out = realign_weekly(series)

    assert (out.index.weekday == 4).all()
    assert (out.index - series.index == pd.Timedelta(days=FRIDAY_SHIFT[weekday])).all()
    assert list(out.to_numpy()) == list(series.to_numpy())


def test_monday_goes_back_and_wednesday_goes_forward() -> None:
    monday = realign_weekly(_weekly("2024-01-01"))
    wednesday = realign_weekly(_weekly("2024-01-03"))

    assert monday.index[0] == pd.Timestamp("2023-12-29")
    assert wednesday.index[0] == pd.Timestamp("2024-01-05")


def test_friday_series_is_unchanged() -> None:
    series = _weekly("2024-01-05")

    out = realign_weekly(series)

    pd.testing.assert_series_equal(out, series)
    pd.testing.assert_series_equal(realign_weekly(out), series)


def test_first_observation_decides_the_shift() -> None:
    index = pd.DatetimeIndex(pd.to_datetime(["2024-01-01", "2024-01-10"]), name="date")
    series = pd.Series([1.0, 2.0], index=index)

    out = realign_weekly(series)

    # Both move back three days, whatever their own weekday
    assert list(out.index) == list(pd.to_datetime(["2023-12-29", "2024-01-07"]))


def test_empty_series() -> None:
    empty = pd.Series(dtype=float, index=pd.DatetimeIndex([]))
    assert realign_weekly(empty).empty
