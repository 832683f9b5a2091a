"""Domain models package."""

from portfolio_service.domain.models.enums import TradeType
from portfolio_service.domain.models.position import SymbolPosition
from portfolio_service.domain.models.price import PricePoint, PriceCacheEntry

__all__ = [
    "TradeType",
    "SymbolPosition",
    "PricePoint",
    "PriceCacheEntry",
]
