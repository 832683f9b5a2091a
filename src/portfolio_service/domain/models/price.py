"""Market price domain models."""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Optional


@dataclass(frozen=True)
class PricePoint:
    """Closing price of a symbol on one trading day (keyed by UTC midnight)."""

    date: datetime
    price: Decimal


@dataclass
class PriceCacheEntry:
    """
    Cached market data for one symbol.

    History only ever grows: refreshed series are overlaid onto it.
    latest_price is the close of the most recent point of the last
    fetched series, not necessarily the newest date in history.
    """

    symbol: str
    history: dict[datetime, Decimal] = field(default_factory=dict)
    latest_price: Optional[Decimal] = None
    last_refreshed: Optional[datetime] = None

    @property
    def has_data(self) -> bool:
        """Return True once any price has been cached for the symbol."""
        return bool(self.history) or self.latest_price is not None

    def merge_series(self, series: list[PricePoint], refreshed_at: datetime) -> None:
        """Overlay a freshly fetched series onto the history."""
        for point in series:
            self.history[point.date] = point.price
        self.latest_price = max(series, key=lambda point: point.date).price
        self.last_refreshed = refreshed_at
