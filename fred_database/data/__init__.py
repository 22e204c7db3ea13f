"""Data fetching."""

from .fred_fetcher import FredFetcher
from .source import SeriesSource

__all__ = ["FredFetcher", "SeriesSource"]
