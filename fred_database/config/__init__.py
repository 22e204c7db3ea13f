"""Settings and series configuration."""

from .settings import Settings
from .series_config import (
    SeriesRequest,
    build_request,
    clean_identifiers,
    load_series_workbook,
)

__all__ = [
    "Settings",
    "SeriesRequest",
    "build_request",
    "clean_identifiers",
    "load_series_workbook",
]
