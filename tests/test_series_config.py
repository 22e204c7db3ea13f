from pathlib import Path

import pandas as pd
import pytest

from fred_database.config import build_request, clean_identifiers, load_series_workbook
from fred_database.errors import ConfigurationError
from fred_database.models import Frequency


def test_sections_are_matched_case_insensitively_and_ordered() -> None:
    request = build_request(
        {
            "Quarterly": ["GDP", " GDP ", "", None, "PCE"],
            "MONTHLY": ["UNRATE"],
            "notes": ["ignored"],
        },
        ["2000-01-15"],
    )

    assert request.frequencies == [Frequency.MONTHLY, Frequency.QUARTERLY]
    assert request.series[Frequency.QUARTERLY] == ["GDP", "PCE"]
    assert request.series[Frequency.MONTHLY] == ["UNRATE"]
    assert request.start_dates[Frequency.MONTHLY] == pd.Timestamp("2000-01-01")
    assert request.start_dates[Frequency.QUARTERLY] == pd.Timestamp("2000-01-01")


def test_last_start_date_is_reused() -> None:
    request = build_request(
        {"annual": ["X"], "daily": ["Y"], "monthly": ["Z"]},
        ["2001-03-04", "1990-02-10"],
    )

    assert request.start_dates == {
        Frequency.DAILY: pd.Timestamp("2001-03-04"),
        Frequency.MONTHLY: pd.Timestamp("1990-02-01"),
        Frequency.ANNUAL: pd.Timestamp("1990-01-01"),
    }


def test_yearly_is_accepted_for_annual() -> None:
    request = build_request({"yearly": ["GDPA"]}, ["2000-01-01"])
    assert request.frequencies == [Frequency.ANNUAL]


def test_section_without_identifiers_is_still_requested() -> None:
    request = build_request({"weekly": [], "monthly": ["A"]}, ["2000-01-01"])
    assert request.series[Frequency.WEEKLY] == []


def test_no_frequency_section_is_fatal() -> None:
    with pytest.raises(ConfigurationError, match="no sections"):
        build_request({"Sheet1": ["GDP"]}, ["2000-01-01"])


@pytest.mark.parametrize("start_dates", ["2000-01-01", 20000101, []])
def test_start_dates_must_be_a_list(start_dates) -> None:
    with pytest.raises(ConfigurationError):
        build_request({"monthly": ["A"]}, start_dates)


@pytest.mark.parametrize("bad", ["not-a-date", 2000])
def test_malformed_start_date(bad) -> None:
    with pytest.raises(ConfigurationError):
        build_request({"monthly": ["A"]}, [bad])


def test_clean_identifiers() -> None:
    assert clean_identifiers(["A", float("nan"), " B", "A", "", None, "C "]) == ["A", "B", "C"]


def test_load_series_workbook(tmp_path: Path) -> None:
    path = tmp_path / "series.xlsx"
    with pd.ExcelWriter(path, engine="openpyxl") as writer:
        pd.DataFrame([["A", "C"], ["B", None]]).to_excel(
            writer, sheet_name="monthly", header=False, index=False
        )
        pd.DataFrame([["GDPC1"]]).to_excel(
            writer, sheet_name="Quarterly", header=False, index=False
        )

    mapping = load_series_workbook(path)
    request = build_request(mapping, ["2000-01-01"])

    assert request.series[Frequency.MONTHLY] == ["A", "B", "C"]
    assert request.series[Frequency.QUARTERLY] == ["GDPC1"]


def test_missing_workbook(tmp_path: Path) -> None:
    with pytest.raises(ConfigurationError, match="not found"):
        load_series_workbook(tmp_path / "missing.xlsx")
