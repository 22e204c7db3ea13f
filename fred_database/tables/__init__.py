"""Per-frequency data and metadata tables."""

from .builder import BuilderState, FrequencyTableBuilder, drop_missing_edges
from .merger import merge_series
from .metadata import METADATA_FIELDS, MetadataTable

__all__ = [
    "BuilderState",
    "FrequencyTableBuilder",
    "METADATA_FIELDS",
    "MetadataTable",
    "drop_missing_edges",
    "merge_series",
]
