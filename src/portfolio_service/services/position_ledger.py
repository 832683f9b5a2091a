"""Position ledger: one running cost-basis position per symbol."""

import logging
from threading import Lock
from typing import Optional

from portfolio_service.core.money import Number
from portfolio_service.domain.models import SymbolPosition, TradeType

logger = logging.getLogger(__name__)


class PositionLedger:
    """
    Ledger of open positions keyed by symbol.

    Positions are immutable values; each order replaces the symbol's value
    under the ledger lock. A position closed to zero shares is removed.
    """

    def __init__(self):
        self._positions: dict[str, SymbolPosition] = {}
        self._lock = Lock()

    def apply_order(
        self,
        symbol: str,
        trade_type: TradeType,
        share_count: int,
        price_per_share: Number,
    ) -> Optional[SymbolPosition]:
        """
        Fold an order into the symbol's position.

        The caller must reject non-positive share counts. Returns the new
        position, or None if the order closed it.
        """
        with self._lock:
            current = self._positions.get(symbol)
            if current is None:
                merged = SymbolPosition.of(trade_type, symbol, share_count, price_per_share)
            else:
                merged = current.merge_with_order(trade_type, share_count, price_per_share)

            if merged is None:
                del self._positions[symbol]
            else:
                self._positions[symbol] = merged

        if merged is None:
            logger.info("Closed position in %s", symbol)
        elif current is not None and merged.trade_type is not current.trade_type:
            logger.info(
                "Reversed position in %s to %s %d @ %s",
                symbol,
                merged.trade_type.value,
                merged.total_shares_absolute,
                merged.average_cost_per_share,
            )
        else:
            logger.debug(
                "Position in %s now %s %d @ %s",
                symbol,
                merged.trade_type.value,
                merged.total_shares_absolute,
                merged.average_cost_per_share,
            )
        return merged

    def get(self, symbol: str) -> Optional[SymbolPosition]:
        """Return the open position for symbol, if any."""
        with self._lock:
            return self._positions.get(symbol)

    def contains(self, symbol: str) -> bool:
        with self._lock:
            return symbol in self._positions

    def symbols(self) -> list[str]:
        """Return the symbols with an open position, sorted."""
        with self._lock:
            return sorted(self._positions)
