"""FRED API client returning one series with its metadata."""

import logging
import threading

import httpx
import pandas as pd

from fred_database.config import Settings
from fred_database.models import Frequency, FredSeries


logger = logging.getLogger(__name__)


class FredFetcher:
    """Fetches series observations and descriptive fields from the FRED API."""

    BASE_URL = "https://api.stlouisfed.org/fred"

    def __init__(
        self,
        settings: Settings | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.settings = settings or Settings()
        self.settings.validate()
        self._transport = transport
        self._client: httpx.Client | None = None
        self._client_lock = threading.Lock()

    @property
    def client(self) -> httpx.Client:
        """Lazy-initialize HTTP client (shared by worker threads)."""
        with self._client_lock:
            if self._client is None:
                self._client = httpx.Client(
                    timeout=self.settings.request_timeout, transport=self._transport
                )
            return self._client

    def close(self) -> None:
        """Close HTTP client."""
        with self._client_lock:
            if self._client is not None:
                self._client.close()
                self._client = None

    def __enter__(self) -> "FredFetcher":
        return self

    def __exit__(self, *args) -> None:
        self.close()

    def _get(self, path: str, **params) -> dict:
        """GET a FRED endpoint and return the decoded JSON body."""
        response = self.client.get(
            f"{self.BASE_URL}/{path}",
            params={
                **params,
                "api_key": self.settings.fred_api_key,
                "file_type": "json",
            },
        )
        response.raise_for_status()
        data = response.json()

        if "error_message" in data:
            raise ValueError(data["error_message"])

        return data

    def connect(self) -> None:
        """Check that the API is reachable (raises httpx.TransportError if not)."""
        self._get("category", category_id=0)

    def _fetch_series_info(self, series_id: str) -> dict:
        """Fetch metadata for a series from FRED."""
        data = self._get("series", series_id=series_id)

        if "seriess" not in data or not data["seriess"]:
            raise ValueError(f"Series {series_id} not found")

        return data["seriess"][0]

    def _fetch_source(self, series_id: str) -> str:
        """Name of the first source of the release the series belongs to."""
        releases = self._get("series/release", series_id=series_id).get("releases", [])
        if not releases:
            return ""

        sources = self._get("release/sources", release_id=releases[0]["id"]).get(
            "sources", []
        )
        return sources[0].get("name", "") if sources else ""

    def _fetch_observations(
        self, series_id: str, start: pd.Timestamp, end: pd.Timestamp
    ) -> pd.Series:
        """
        Fetch observations between `start` and `end` (inclusive).

        Returns:
            Float series on a DatetimeIndex; FRED's "." becomes NaN
        """
        data = self._get(
            "series/observations",
            series_id=series_id,
            observation_start=pd.Timestamp(start).strftime("%Y-%m-%d"),
            observation_end=pd.Timestamp(end).strftime("%Y-%m-%d"),
        )

        observations = data.get("observations", [])
        if not observations:
            raise ValueError(f"No observations returned for {series_id}")

        df = pd.DataFrame(observations)
        values = pd.Series(
            pd.to_numeric(df["value"], errors="coerce").astype(float).to_numpy(),
            index=pd.DatetimeIndex(pd.to_datetime(df["date"]), name="date"),
            name=series_id,
        )
        return values.sort_index()

    def fetch(self, series_id: str, start: pd.Timestamp, end: pd.Timestamp) -> FredSeries:
        """
        Fetch a single series with its descriptive fields.

        Args:
            series_id: FRED series ID
            start: First observation date
            end: Last observation date

        Returns:
            FredSeries with native frequency parsed from FRED's label
        """
        logger.info(f"Fetching {series_id}...")

        info = self._fetch_series_info(series_id)
        frequency = Frequency.parse(info.get("frequency", ""))
        observations = self._fetch_observations(series_id, start, end)

        # Use FRED's spelling of the ID (requests are case-insensitive)
        resolved_id = str(info.get("id", series_id)).strip() or series_id
        logger.info(
            f"  {resolved_id}: {len(observations)} {frequency.value} observations"
        )

        return FredSeries(
            series_id=resolved_id,
            frequency=frequency,
            observations=observations.rename(resolved_id),
            title=info.get("title", ""),
            units=info.get("units", ""),
            seasonal_adjustment=info.get("seasonal_adjustment", ""),
            source=self._fetch_source(series_id),
        )
