"""
Pytest configuration and fixtures for the portfolio bucket service tests.

This module provides:
- UTC date helpers and a controllable clock
- Deterministic and failing price sources
- Component fixtures (price cache, ledger, bucket index, aggregator)
- A FastAPI test client wired to a fresh in-memory context
- An invariant check for the bucket index mirror maps
"""

from datetime import datetime, timedelta
from decimal import Decimal
from typing import Optional

import pytest
from fastapi.testclient import TestClient

from portfolio_service.app_context import AppContext, set_app_context
from portfolio_service.config.settings import Settings, reset_settings, set_settings
from portfolio_service.core.timezone import UTC_TZ
from portfolio_service.domain.models import PricePoint
from portfolio_service.main import app
from portfolio_service.services import (
    BucketIndex,
    PortfolioAggregator,
    PositionLedger,
    PriceCache,
)


# =============================================================================
# TIME HELPERS
# =============================================================================


def utc_date(year: int, month: int, day: int, hour: int = 0, minute: int = 0) -> datetime:
    """Create a localized datetime in UTC."""
    return UTC_TZ.localize(datetime(year, month, day, hour, minute))


AUG_11 = utc_date(2023, 8, 11)
SEPT_7 = utc_date(2023, 9, 7)
SEPT_8 = utc_date(2023, 9, 8)


class FakeClock:
    """Manually advanced clock for TTL tests."""

    def __init__(self, start: Optional[datetime] = None):
        self.now = start or utc_date(2023, 9, 8, 16, 0)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now += timedelta(**kwargs)


@pytest.fixture
def clock() -> FakeClock:
    """Provide a clock fixed at 2023-09-08 16:00 UTC."""
    return FakeClock()


# =============================================================================
# PRICE SOURCE FIXTURES
# =============================================================================


class FixedPriceSource:
    """
    Deterministic price source for testing.

    Serves configured closes per symbol and records every fetch.
    """

    # Closes on the trade dates used across tests; the newest close is the latest price
    DEFAULT_SERIES = {
        "NVDA": {AUG_11: "408.55", SEPT_7: "462.41", SEPT_8: "455.72"},
        "AMZN": {AUG_11: "138.41", SEPT_7: "137.85", SEPT_8: "138.23"},
        "TSLA": {AUG_11: "242.65", SEPT_7: "251.49", SEPT_8: "248.50"},
        "GS": {AUG_11: "327.20", SEPT_7: "333.45", SEPT_8: "338.10"},
    }

    def __init__(self, series: Optional[dict[str, dict[datetime, str]]] = None):
        self._series = {
            symbol: dict(points)
            for symbol, points in (series if series is not None else self.DEFAULT_SERIES).items()
        }
        self.calls: list[str] = []
        self.failing = False

    def set_series(self, symbol: str, points: dict[datetime, str]) -> None:
        self._series[symbol] = dict(points)

    def fetch_series(self, symbol: str) -> Optional[list[PricePoint]]:
        self.calls.append(symbol)
        if self.failing or symbol not in self._series:
            return None
        return [
            PricePoint(date=day, price=Decimal(price))
            for day, price in sorted(self._series[symbol].items())
        ]

    def call_count(self, symbol: str) -> int:
        return self.calls.count(symbol)


class FailingPriceSource:
    """Price source that never has data."""

    def __init__(self):
        self.calls = 0

    def fetch_series(self, symbol: str) -> Optional[list[PricePoint]]:
        self.calls += 1
        return None


@pytest.fixture
def price_source() -> FixedPriceSource:
    """Provide deterministic price source."""
    return FixedPriceSource()


@pytest.fixture
def failing_source() -> FailingPriceSource:
    """Provide a price source that always fails."""
    return FailingPriceSource()


# =============================================================================
# COMPONENT FIXTURES
# =============================================================================


@pytest.fixture
def price_cache(price_source, clock) -> PriceCache:
    """Provide PriceCache with 15 minute TTL on the fake clock."""
    return PriceCache(source=price_source, ttl_seconds=15 * 60, clock=clock)


@pytest.fixture
def ledger() -> PositionLedger:
    return PositionLedger()


@pytest.fixture
def bucket_index() -> BucketIndex:
    return BucketIndex()


@pytest.fixture
def portfolio(price_cache, ledger, bucket_index) -> PortfolioAggregator:
    """Provide PortfolioAggregator over the test components."""
    return PortfolioAggregator(
        price_cache=price_cache,
        ledger=ledger,
        bucket_index=bucket_index,
    )


# =============================================================================
# INVARIANTS
# =============================================================================


def assert_index_symmetric(index: BucketIndex) -> None:
    """Check symbol in forward[bucket] <=> bucket in reverse[symbol]."""
    forward = index._bucket_to_symbols
    reverse = index._symbol_to_buckets
    for bucket, symbols in forward.items():
        for symbol in symbols:
            assert bucket in reverse.get(symbol, set()), f"{symbol} in {bucket} has no reverse link"
    for symbol, buckets in reverse.items():
        for bucket in buckets:
            assert symbol in forward.get(bucket, set()), f"{bucket} on {symbol} has no forward link"


# =============================================================================
# API TEST CLIENT FIXTURE
# =============================================================================


@pytest.fixture
def client(price_source) -> TestClient:
    """Provide FastAPI test client over a fresh in-memory context."""
    settings = Settings(price_source="stub")
    set_settings(settings)
    set_app_context(AppContext(settings=settings, price_source=price_source))
    with TestClient(app) as c:
        yield c
    set_app_context(None)
    reset_settings()
