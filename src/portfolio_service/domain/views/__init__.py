"""View models for service outputs."""

from portfolio_service.domain.views.portfolio import (
    ProfitLossView,
    StockPositionView,
    BucketPositionView,
)

__all__ = [
    "ProfitLossView",
    "StockPositionView",
    "BucketPositionView",
]
