"""Configuration settings for the FRED downloader."""

from dataclasses import dataclass, field
import os

from dotenv import load_dotenv

from fred_database.errors import ConfigurationError


load_dotenv()


def _env_float(name: str, default: float) -> float:
    value = os.getenv(name, "")
    return float(value) if value.strip() else default


def _env_int(name: str, default: int) -> int:
    value = os.getenv(name, "")
    return int(value) if value.strip() else default


@dataclass
class Settings:
    """Application settings."""

    fred_api_key: str = field(default_factory=lambda: os.getenv("FRED_API_KEY", ""))
    # Data is downloaded up to this many years past today (e.g. FOMC forecasts)
    horizon_years: int = field(
        default_factory=lambda: _env_int("FRED_HORIZON_YEARS", 4)
    )
    connect_retry_delay: float = field(
        default_factory=lambda: _env_float("FRED_CONNECT_RETRY_DELAY", 10.0)
    )
    request_timeout: float = field(
        default_factory=lambda: _env_float("FRED_REQUEST_TIMEOUT", 30.0)
    )
    max_workers: int = field(default_factory=lambda: _env_int("FRED_MAX_WORKERS", 1))

    def validate(self) -> None:
        """Validate required settings."""
        if not self.fred_api_key:
            raise ConfigurationError(
                "FRED_API_KEY not set. Get one at: "
                "https://fred.stlouisfed.org/docs/api/api_key.html"
            )
        if self.horizon_years < 0:
            raise ConfigurationError("horizon_years must be non-negative")
        if self.max_workers < 1:
            raise ConfigurationError("max_workers must be at least 1")
