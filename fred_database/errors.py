"""Exception types raised while building the FRED database."""


class FredDatabaseError(Exception):
    """Base class for all errors raised by this package."""


class ConfigurationError(FredDatabaseError, ValueError):
    """The series request or settings cannot be used. Aborts the run."""


class UnsupportedFrequencyError(FredDatabaseError, ValueError):
    """A frequency label is not one of daily/weekly/monthly/quarterly/annual."""


class FrequencyMismatchError(FredDatabaseError, ValueError):
    """A series cannot be reduced to the requested target frequency."""


class DuplicateSeriesError(FredDatabaseError, ValueError):
    """A series identifier was already added to a frequency table."""


class BuilderStateError(FredDatabaseError, RuntimeError):
    """A table builder was used out of order (e.g. after finalize)."""


class SourceConnectionError(FredDatabaseError, ConnectionError):
    """The data source could not be reached at setup time."""
