"""Price source protocol."""

from typing import Optional, Protocol

from portfolio_service.domain.models import PricePoint


class PriceSource(Protocol):
    """
    Protocol for external market price sources.

    Implementations fetch a recent series of daily closes for a symbol.
    Graceful degradation: any transport, decoding or status failure is
    reported as None, never raised.
    """

    def fetch_series(self, symbol: str) -> Optional[list[PricePoint]]:
        """
        Fetch daily closes for a symbol.

        Returns points ordered by ascending date (keyed by UTC midnight),
        or None when no data could be obtained.
        """
        ...
