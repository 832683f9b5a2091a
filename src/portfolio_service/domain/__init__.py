"""Domain layer - pure business models with no external dependencies."""

from portfolio_service.domain.models import (
    TradeType,
    SymbolPosition,
    PricePoint,
    PriceCacheEntry,
)

__all__ = [
    "TradeType",
    "SymbolPosition",
    "PricePoint",
    "PriceCacheEntry",
]
