"""Stub price source for offline/testing use."""

from datetime import timedelta
from decimal import Decimal
from typing import Optional
import random

from portfolio_service.core.money import to_money
from portfolio_service.core.timezone import now_utc, utc_start_of_day
from portfolio_service.domain.models import PricePoint


# Deterministic closing prices for common symbols (most recent close)
_STUB_PRICES: dict[str, Decimal] = {
    "AAPL": Decimal("185.50"),
    "AMZN": Decimal("138.23"),
    "GOOGL": Decimal("142.75"),
    "GS": Decimal("338.10"),
    "MSFT": Decimal("378.25"),
    "NVDA": Decimal("455.72"),
    "TSLA": Decimal("248.50"),
    "META": Decimal("505.50"),
    "SPY": Decimal("485.25"),
    "QQQ": Decimal("418.75"),
}

HISTORY_DAYS = 31


class StubPriceSource:
    """
    Stub source with deterministic fake daily closes for offline operation.

    Produces one month of weekday closes ending yesterday (UTC). Known
    symbols end on a fixed price; unknown symbols get a price derived from
    a per-symbol seed. Symbols starting with "$" have no data.
    """

    def __init__(self, seed: int = 42, history_days: int = HISTORY_DAYS):
        """Initialize with optional random seed for reproducibility."""
        self._seed = seed
        self._history_days = history_days

    def fetch_series(self, symbol: str) -> Optional[list[PricePoint]]:
        """Return stub closes for the symbol, oldest first."""
        if not symbol or symbol.startswith("$"):
            return None

        rng = random.Random(f"{self._seed}:{symbol}")
        last_close = _STUB_PRICES.get(symbol)
        if last_close is None:
            last_close = to_money(50 + rng.random() * 200)

        end = utc_start_of_day(now_utc()) - timedelta(days=1)
        days = [end - timedelta(days=offset) for offset in range(self._history_days)]
        trading_days = sorted(d for d in days if d.weekday() < 5)

        points: list[PricePoint] = []
        price = last_close
        # Walk backwards from the last close so the newest point is stable
        for day in reversed(trading_days):
            points.append(PricePoint(date=day, price=price))
            change = Decimal(str((rng.random() - 0.5) * 0.04))
            price = to_money(price / (1 + change))
        points.reverse()
        return points
