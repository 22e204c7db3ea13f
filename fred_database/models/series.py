"""Data models for FRED series and per-frequency results."""

from dataclasses import dataclass, replace
from enum import Enum

import pandas as pd

from fred_database.errors import UnsupportedFrequencyError


class Frequency(Enum):
    """Supported sampling frequencies, ordered finest to coarsest."""

    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    QUARTERLY = "quarterly"
    ANNUAL = "annual"

    @classmethod
    def parse(cls, label: str) -> "Frequency":
        """
        Parse a frequency name or a FRED frequency label.

        FRED labels can carry a qualifier after a comma
        (e.g. "Weekly, Ending Friday"); only the part before it counts.
        """
        name = str(label).split(",", 1)[0].strip().lower()
        name = _ALIASES.get(name, name)
        try:
            return cls(name)
        except ValueError:
            raise UnsupportedFrequencyError(
                f"Unsupported frequency {label!r}. "
                f"Expected one of: {', '.join(f.value for f in cls)}"
            ) from None

    @property
    def rank(self) -> int:
        """Position in the finest-to-coarsest ordering."""
        return _ORDER.index(self)

    def is_coarser_than(self, other: "Frequency") -> bool:
        return self.rank > other.rank

    @property
    def step(self) -> pd.DateOffset:
        """One calendar unit of this frequency."""
        return _STEPS[self]

    @property
    def grid_offset(self) -> pd.DateOffset:
        """Offset the calendar grid and aggregation bins are laid out on."""
        return _GRID_OFFSETS[self]

    @property
    def anchor_shift(self) -> pd.DateOffset | None:
        """Shift applied to the finished table's dates, if any."""
        return _ANCHOR_SHIFTS.get(self)


_ORDER = list(Frequency)

_ALIASES = {"yearly": "annual", "day": "daily", "week": "weekly"}

_STEPS = {
    Frequency.DAILY: pd.DateOffset(days=1),
    Frequency.WEEKLY: pd.DateOffset(weeks=1),
    Frequency.MONTHLY: pd.DateOffset(months=1),
    Frequency.QUARTERLY: pd.DateOffset(months=3),
    Frequency.ANNUAL: pd.DateOffset(years=1),
}

# Weeks end on Friday; coarser frequencies are dated on the first day of
# the period (annual on January 1st until finalization).
_GRID_OFFSETS = {
    Frequency.DAILY: pd.offsets.Day(),
    Frequency.WEEKLY: pd.offsets.Week(weekday=4),
    Frequency.MONTHLY: pd.offsets.MonthBegin(),
    Frequency.QUARTERLY: pd.offsets.QuarterBegin(startingMonth=1),
    Frequency.ANNUAL: pd.offsets.YearBegin(),
}

# Quarterly data "occurs" on the first day of the third month of the
# quarter, annual data on July 1st.
_ANCHOR_SHIFTS = {
    Frequency.QUARTERLY: pd.DateOffset(months=2),
    Frequency.ANNUAL: pd.DateOffset(months=6),
}


@dataclass(frozen=True, eq=False)
class FredSeries:
    """A single series as returned by the data source."""

    series_id: str
    frequency: Frequency
    observations: pd.Series  # float values on a DatetimeIndex, NaN = missing
    title: str = ""
    units: str = ""
    seasonal_adjustment: str = ""
    source: str = ""

    def with_observations(self, observations: pd.Series) -> "FredSeries":
        """Return a copy carrying new observations (e.g. after realignment)."""
        return replace(self, observations=observations)


@dataclass(frozen=True, eq=False)
class FrequencyResult:
    """Finalized data and metadata tables for one target frequency."""

    frequency: Frequency
    data: pd.DataFrame
    metadata: pd.DataFrame

    @property
    def series_ids(self) -> list[str]:
        return list(self.metadata.columns)
