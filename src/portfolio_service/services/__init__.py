"""Service layer - business logic orchestration."""

from portfolio_service.services.price_cache import PriceCache
from portfolio_service.services.position_ledger import PositionLedger
from portfolio_service.services.bucket_index import BucketIndex
from portfolio_service.services.portfolio_aggregator import (
    PortfolioAggregator,
    OrderRequest,
    BucketsUpdateRequest,
)

__all__ = [
    "PriceCache",
    "PositionLedger",
    "BucketIndex",
    "PortfolioAggregator",
    "OrderRequest",
    "BucketsUpdateRequest",
]
