"""Which series to download at which frequency, and from when."""

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from datetime import date
from pathlib import Path

import pandas as pd

from fred_database.alignment.calendar import normalize_start
from fred_database.errors import ConfigurationError, UnsupportedFrequencyError
from fred_database.models import Frequency


logger = logging.getLogger(__name__)


@dataclass
class SeriesRequest:
    """Series identifiers and start dates per target frequency.

    Both mappings are ordered finest frequency first.
    """

    series: dict[Frequency, list[str]] = field(default_factory=dict)
    start_dates: dict[Frequency, pd.Timestamp] = field(default_factory=dict)

    @property
    def frequencies(self) -> list[Frequency]:
        return list(self.series)


def clean_identifiers(values: Sequence[object]) -> list[str]:
    """Strip identifiers, drop empty cells and duplicates (first one wins)."""
    seen: set[str] = set()
    cleaned: list[str] = []
    for value in values:
        if value is None or (isinstance(value, float) and pd.isna(value)):
            continue
        identifier = str(value).strip()
        if not identifier or identifier in seen:
            continue
        seen.add(identifier)
        cleaned.append(identifier)
    return cleaned


def _parse_start_date(value: object) -> pd.Timestamp:
    if not isinstance(value, (str, date)):
        raise ConfigurationError(
            f"Start dates must be date strings (yyyy-mm-dd), got {value!r}"
        )
    try:
        parsed = pd.Timestamp(value)
    except ValueError as e:
        raise ConfigurationError(f"Malformed start date {value!r}: {e}") from e
    if pd.isna(parsed):
        raise ConfigurationError(f"Malformed start date {value!r}")
    return parsed.normalize()


def build_request(
    mapping: Mapping[str, Sequence[object]],
    start_dates: Sequence[object],
) -> SeriesRequest:
    """
    Build a validated request from raw configuration.

    Args:
        mapping: Frequency name (case-insensitive) -> series identifiers.
            Keys that are not one of the five frequencies are ignored.
        start_dates: One start date per requested frequency, finest first.
            If fewer dates than frequencies are given, the last one is
            reused for the remaining frequencies.

    Returns:
        SeriesRequest with cleaned identifiers and normalized start dates

    Raises:
        ConfigurationError: no frequency recognized, or bad start dates
    """
    collected: dict[Frequency, list[object]] = {}
    for key, values in mapping.items():
        try:
            freq = Frequency.parse(key)
        except UnsupportedFrequencyError:
            logger.warning(f"Ignoring unknown frequency section {key!r}")
            continue
        collected.setdefault(freq, []).extend(list(values))

    if not collected:
        raise ConfigurationError(
            "The configuration contains no sections called either daily, "
            "weekly, monthly, quarterly, or annual."
        )

    if isinstance(start_dates, (str, bytes)) or not isinstance(
        start_dates, Sequence
    ):
        raise ConfigurationError(
            "Start dates need to be a list of date strings, "
            f"got {type(start_dates).__name__}"
        )
    if len(start_dates) == 0:
        raise ConfigurationError("At least one start date is required")

    parsed_dates = [_parse_start_date(value) for value in start_dates]

    request = SeriesRequest()
    for i, freq in enumerate(sorted(collected, key=lambda f: f.rank)):
        start = parsed_dates[min(i, len(parsed_dates) - 1)]
        request.series[freq] = clean_identifiers(collected[freq])
        request.start_dates[freq] = normalize_start(start, freq)
        if request.start_dates[freq] != start:
            logger.info(
                f"{freq.value}: start date {start.date()} normalized to "
                f"{request.start_dates[freq].date()}"
            )

    return request


def load_series_workbook(path: str | Path) -> dict[str, list[object]]:
    """
    Read series identifiers from an Excel workbook.

    Each sheet named after a frequency lists identifiers, one per cell.
    Cells are read column by column.
    """
    workbook = Path(path).expanduser()
    if not workbook.exists():
        raise ConfigurationError(f"Series workbook not found: {workbook}")

    sheets = pd.read_excel(workbook, sheet_name=None, header=None, dtype=str)
    mapping: dict[str, list[object]] = {}
    for name, frame in sheets.items():
        mapping[str(name)] = list(frame.to_numpy().ravel(order="F"))
    return mapping
