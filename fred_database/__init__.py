"""Download FRED series and merge them into one table per frequency."""

from fred_database.models import Frequency, FredSeries, FrequencyResult
from fred_database.orchestrator import FredDatabaseBuilder, build_database

__all__ = [
    "Frequency",
    "FredSeries",
    "FrequencyResult",
    "FredDatabaseBuilder",
    "build_database",
]
