"""
Yahoo Finance price source: daily closes via yfinance.
The fetch runs in a worker thread bounded by a timeout; any failure is
logged and reported as "no data".
"""

import logging
import math
from concurrent.futures import ThreadPoolExecutor, TimeoutError as FuturesTimeoutError
from typing import Optional

from portfolio_service.core.money import to_money
from portfolio_service.core.timezone import utc_start_of_day
from portfolio_service.domain.models import PricePoint

logger = logging.getLogger(__name__)

DEFAULT_PERIOD = "1mo"
DEFAULT_FETCH_TIMEOUT_SECONDS = 10.0


# Lazy import so tests can patch before import
def _get_yf():
    import yfinance as yf
    return yf


def _fetch_history_impl(symbol: str, period: str) -> list[PricePoint]:
    """Call yfinance and return the daily closes for one symbol. No cache."""
    yf = _get_yf()
    df = yf.Ticker(symbol).history(period=period, interval="1d", auto_adjust=False)
    if df is None or df.empty or "Close" not in df:
        return []

    points: dict = {}
    for ts, close in df["Close"].items():
        if close is None:
            continue
        try:
            close = float(close)
        except (TypeError, ValueError):
            continue
        if math.isnan(close):
            continue
        # Exchange-local trading day, keyed by its UTC midnight
        day = utc_start_of_day(ts.date())
        points[day] = PricePoint(date=day, price=to_money(close))
    return [points[day] for day in sorted(points)]


class YahooPriceSource:
    """Fetches one period of daily closes from Yahoo Finance."""

    def __init__(
        self,
        period: str = DEFAULT_PERIOD,
        fetch_timeout_seconds: float = DEFAULT_FETCH_TIMEOUT_SECONDS,
    ):
        self._period = period
        self._fetch_timeout = fetch_timeout_seconds

    def fetch_series(self, symbol: str) -> Optional[list[PricePoint]]:
        """Return ascending daily closes, or None on timeout/failure/empty data."""
        # Don't wait on shutdown: a hung request must not outlive the timeout for the caller
        ex = ThreadPoolExecutor(max_workers=1)
        try:
            fut = ex.submit(_fetch_history_impl, symbol, self._period)
            series = fut.result(timeout=self._fetch_timeout)
        except FuturesTimeoutError:
            logger.warning("Timed out fetching price history for %s", symbol)
            return None
        except Exception:
            logger.exception("Failed to get or parse price history for %s", symbol)
            return None
        finally:
            ex.shutdown(wait=False)

        if not series:
            logger.info("No price history returned for %s", symbol)
            return None
        return series
