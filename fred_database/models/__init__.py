"""Data models."""

from .series import Frequency, FredSeries, FrequencyResult

__all__ = ["Frequency", "FredSeries", "FrequencyResult"]
