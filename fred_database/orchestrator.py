"""Download configured series and assemble one table per frequency."""

import logging
import time
from collections.abc import Callable
from concurrent.futures import ThreadPoolExecutor
from datetime import date

import httpx
import pandas as pd

from fred_database.alignment import observation_end, prepare_series
from fred_database.config import SeriesRequest, Settings
from fred_database.data import FredFetcher, SeriesSource
from fred_database.errors import SourceConnectionError
from fred_database.models import Frequency, FredSeries, FrequencyResult
from fred_database.tables import FrequencyTableBuilder


logger = logging.getLogger(__name__)


def connect_with_retry(
    connect: Callable[[], None],
    delay: float,
    sleep: Callable[[float], None] = time.sleep,
) -> None:
    """Run `connect`, retrying once after `delay` seconds on a connection error."""
    try:
        connect()
        return
    except (httpx.TransportError, ConnectionError) as e:
        logger.warning(f"Connection to data source failed ({e}); retrying in {delay:g}s")

    sleep(delay)
    try:
        connect()
    except (httpx.TransportError, ConnectionError) as e:
        raise SourceConnectionError(f"Could not connect to data source: {e}") from e


class FredDatabaseBuilder:
    """Builds the per-frequency tables from a series source."""

    def __init__(
        self,
        source: SeriesSource,
        settings: Settings | None = None,
        today: date | None = None,
    ) -> None:
        self.source = source
        self.settings = settings or Settings()
        self.today = today

    def build(self, request: SeriesRequest) -> dict[Frequency, FrequencyResult]:
        """
        Build all requested frequencies, finest first.

        Returns:
            Dict mapping each requested frequency to its finalized tables
        """
        obs_end = observation_end(self.today, self.settings.horizon_years)
        results: dict[Frequency, FrequencyResult] = {}

        for freq in request.frequencies:
            results[freq] = self.build_frequency(
                freq,
                request.series[freq],
                request.start_dates[freq],
                obs_end,
            )

        return results

    def _fetch_and_prepare(
        self,
        series_id: str,
        freq: Frequency,
        start: pd.Timestamp,
        end: pd.Timestamp,
    ) -> tuple[FredSeries, pd.Series]:
        series = self.source.fetch(series_id, start, end)
        return series, prepare_series(series, freq)

    def build_frequency(
        self,
        freq: Frequency,
        series_ids: list[str],
        start: pd.Timestamp,
        end: pd.Timestamp,
    ) -> FrequencyResult:
        """
        Fetch, align and merge every series of one target frequency.

        A series that fails anywhere along the way is logged and skipped;
        the others are still merged, in configured order.
        """
        builder = FrequencyTableBuilder(freq, start, end)
        total = len(series_ids)
        errors: dict[str, str] = {}

        if self.settings.max_workers > 1 and total > 1:
            with ThreadPoolExecutor(max_workers=self.settings.max_workers) as executor:
                futures = [
                    executor.submit(self._fetch_and_prepare, sid, freq, start, end)
                    for sid in series_ids
                ]
                for i, (sid, future) in enumerate(zip(series_ids, futures), start=1):
                    self._merge_one(builder, sid, future.result, errors, i, total)
        else:
            for i, sid in enumerate(series_ids, start=1):
                self._merge_one(
                    builder,
                    sid,
                    lambda sid=sid: self._fetch_and_prepare(sid, freq, start, end),
                    errors,
                    i,
                    total,
                )

        if errors:
            logger.warning(
                f"FRED, {freq.value}: skipped {len(errors)} series: {list(errors.keys())}"
            )

        return builder.finalize()

    def _merge_one(
        self,
        builder: FrequencyTableBuilder,
        series_id: str,
        produce: Callable[[], tuple[FredSeries, pd.Series]],
        errors: dict[str, str],
        position: int,
        total: int,
    ) -> None:
        freq = builder.frequency.value
        try:
            series, values = produce()
            builder.add_series(series, values)
        except httpx.HTTPStatusError as e:
            logger.error(
                f"Something went wrong when downloading series {series_id}: "
                f"HTTP {e.response.status_code}"
            )
            errors[series_id] = str(e)
            return
        except Exception as e:
            logger.error(f"Something went wrong when downloading series {series_id}: {e}")
            errors[series_id] = str(e)
            return

        logger.info(f"FRED, {freq}: {position} of {total} downloaded.")


def build_database(
    request: SeriesRequest,
    settings: Settings | None = None,
    today: date | None = None,
) -> dict[Frequency, FrequencyResult]:
    """Connect to FRED and build every requested frequency table."""
    settings = settings or Settings()
    with FredFetcher(settings) as fetcher:
        connect_with_retry(fetcher.connect, settings.connect_retry_delay)
        return FredDatabaseBuilder(fetcher, settings, today).build(request)


def main() -> None:
    """CLI entry point."""
    import argparse
    import sys

    from fred_database.config import build_request, load_series_workbook

    parser = argparse.ArgumentParser(
        description="Download FRED series and merge them into one table per frequency"
    )
    parser.add_argument(
        "workbook",
        type=str,
        help="Excel file with sheets named daily/weekly/monthly/quarterly/annual",
    )
    parser.add_argument(
        "--start",
        nargs="+",
        required=True,
        help="Start date (yyyy-mm-dd) per frequency, finest first; the last one is reused",
    )
    parser.add_argument(
        "--workers",
        type=int,
        default=None,
        help="Fetch series of one frequency in parallel with this many workers",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    try:
        settings = Settings()
        if args.workers is not None:
            settings.max_workers = args.workers
        request = build_request(load_series_workbook(args.workbook), args.start)
        results = build_database(request, settings)
    except ValueError as e:
        print(f"Configuration error: {e}")
        sys.exit(1)
    except SourceConnectionError as e:
        print(f"Connection error: {e}")
        sys.exit(1)
    except httpx.HTTPStatusError as e:
        print(f"API error: {e.response.status_code} - {e.response.text}")
        sys.exit(1)

    print("\nDone.")
    print("-" * 70)
    for freq, result in results.items():
        if result.data.empty:
            print(f"{freq.value:10} | no data")
            continue
        first = result.data.index[0].date()
        last = result.data.index[-1].date()
        print(
            f"{freq.value:10} | {len(result.series_ids):3} series | "
            f"{len(result.data):6} rows | {first} .. {last}"
        )


if __name__ == "__main__":
    main()
