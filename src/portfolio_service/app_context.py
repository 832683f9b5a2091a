"""Application context for in-process service management.

Owns the process-lifetime state: price cache, position ledger and bucket
index. Nothing is persisted; a restart starts from empty.
"""

from threading import RLock
from typing import Optional

from portfolio_service.config.settings import Settings, get_settings
from portfolio_service.providers import PriceSource, StubPriceSource, YahooPriceSource
from portfolio_service.services import (
    BucketIndex,
    PortfolioAggregator,
    PositionLedger,
    PriceCache,
)


def build_price_source(settings: Settings) -> PriceSource:
    """Create the configured external price source."""
    if settings.price_source == "stub":
        return StubPriceSource()
    return YahooPriceSource(
        period=settings.price_history_period,
        fetch_timeout_seconds=settings.price_fetch_timeout_seconds,
    )


class AppContext:
    """
    Application context providing in-process access to all services.

    Components are created lazily and shared by every request.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        price_source: Optional[PriceSource] = None,
    ):
        """
        Initialize application context.

        Args:
            settings: Optional settings. If not provided, uses global settings.
            price_source: Optional price source override (tests, offline use).
        """
        self._settings = settings
        self._price_source = price_source

        # Service instances (lazy initialized)
        self._price_cache: Optional[PriceCache] = None
        self._ledger: Optional[PositionLedger] = None
        self._bucket_index: Optional[BucketIndex] = None
        self._portfolio: Optional[PortfolioAggregator] = None
        self._lock = RLock()

    @property
    def settings(self) -> Settings:
        if self._settings is None:
            self._settings = get_settings()
        return self._settings

    @property
    def price_cache(self) -> PriceCache:
        """Get the PriceCache instance."""
        with self._lock:
            if self._price_cache is None:
                source = self._price_source or build_price_source(self.settings)
                self._price_cache = PriceCache(
                    source=source,
                    ttl_seconds=self.settings.price_cache_ttl_seconds,
                )
            return self._price_cache

    @property
    def ledger(self) -> PositionLedger:
        """Get the PositionLedger instance."""
        with self._lock:
            if self._ledger is None:
                self._ledger = PositionLedger()
            return self._ledger

    @property
    def bucket_index(self) -> BucketIndex:
        """Get the BucketIndex instance."""
        with self._lock:
            if self._bucket_index is None:
                self._bucket_index = BucketIndex()
            return self._bucket_index

    @property
    def portfolio(self) -> PortfolioAggregator:
        """Get the PortfolioAggregator instance."""
        with self._lock:
            if self._portfolio is None:
                self._portfolio = PortfolioAggregator(
                    price_cache=self.price_cache,
                    ledger=self.ledger,
                    bucket_index=self.bucket_index,
                )
            return self._portfolio


# Global application context (singleton per process)
_app_context: Optional[AppContext] = None
_app_context_lock = RLock()


def get_app_context() -> AppContext:
    """Get or create the global application context."""
    global _app_context
    with _app_context_lock:
        if _app_context is None:
            _app_context = AppContext()
        return _app_context


def set_app_context(context: Optional[AppContext]) -> None:
    """Set (or clear) the global application context."""
    global _app_context
    _app_context = context
