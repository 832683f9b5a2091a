"""Market price cache with per-symbol TTL refresh."""

import logging
from datetime import date, datetime, timedelta
from decimal import Decimal
from threading import Lock
from typing import Callable, Union

from portfolio_service.core.exceptions import DateNotFoundError, SymbolNotFoundError
from portfolio_service.core.timezone import now_utc, utc_start_of_day
from portfolio_service.domain.models import PriceCacheEntry
from portfolio_service.providers.price_source import PriceSource

logger = logging.getLogger(__name__)

DEFAULT_TTL_SECONDS = 15 * 60


class PriceCache:
    """
    Cache of historical and latest prices per symbol.

    Wraps a price source with lazy refresh and graceful degradation: data
    is fetched when a symbol was never fetched or is older than the TTL,
    and a failed fetch keeps serving whatever was cached before.

    The check-then-refresh sequence is not atomic per symbol. Two callers
    may both see a stale entry and both fetch; the last merge wins.
    """

    def __init__(
        self,
        source: PriceSource,
        ttl_seconds: float = DEFAULT_TTL_SECONDS,
        clock: Callable[[], datetime] = now_utc,
    ):
        self._source = source
        self._ttl = timedelta(seconds=ttl_seconds)
        self._clock = clock
        self._entries: dict[str, PriceCacheEntry] = {}
        self._lock = Lock()

    def get_price(self, symbol: str, on_date: Union[datetime, date]) -> Decimal:
        """
        Return the close for symbol on the given day.

        Raises SymbolNotFoundError when the symbol has no data at all,
        DateNotFoundError when it has data but none for that day.
        """
        day = utc_start_of_day(on_date)
        with self._lock:
            entry = self._entries.get(symbol)
            cached = entry is not None and day in entry.history and not self._is_stale(entry)
        if not cached:
            self._refresh(symbol)

        with self._lock:
            entry = self._entries.get(symbol)
            if entry is None or not entry.has_data:
                raise SymbolNotFoundError(symbol)
            if day not in entry.history:
                raise DateNotFoundError(symbol, day.date().isoformat())
            return entry.history[day]

    def get_latest_price(self, symbol: str) -> Decimal:
        """Return the latest close for symbol; SymbolNotFoundError if none."""
        self._refresh_if_needed(symbol)

        with self._lock:
            entry = self._entries.get(symbol)
            if entry is None or entry.latest_price is None:
                raise SymbolNotFoundError(symbol)
            return entry.latest_price

    def get_available_dates(self, symbol: str) -> list[datetime]:
        """Return the cached trading days for symbol, newest first."""
        self._refresh_if_needed(symbol)

        with self._lock:
            entry = self._entries.get(symbol)
            if entry is None or not entry.history:
                raise SymbolNotFoundError(symbol)
            return sorted(entry.history, reverse=True)

    def _refresh_if_needed(self, symbol: str) -> None:
        with self._lock:
            entry = self._entries.get(symbol)
            needed = entry is None or not entry.has_data or self._is_stale(entry)
        if needed:
            self._refresh(symbol)

    def _refresh(self, symbol: str) -> None:
        """
        Fetch and merge a fresh series, unless the entry is still within TTL.

        The fetch itself runs outside the lock.
        """
        with self._lock:
            entry = self._entries.get(symbol)
            if entry is not None and not self._is_stale(entry):
                return

        logger.debug("Refreshing market data for %s", symbol)
        series = self._source.fetch_series(symbol)
        if not series:
            # Keep serving stale data (if any); retry on the next lookup
            logger.info("No market data fetched for %s; keeping cached data", symbol)
            return

        with self._lock:
            # Entries are only created once a symbol has data
            entry = self._entries.setdefault(symbol, PriceCacheEntry(symbol=symbol))
            entry.merge_series(series, refreshed_at=self._clock())

    def _is_stale(self, entry: PriceCacheEntry) -> bool:
        """Check whether the entry is outside the TTL (or was never refreshed)."""
        if entry.last_refreshed is None:
            return True
        return self._clock() - entry.last_refreshed > self._ttl
