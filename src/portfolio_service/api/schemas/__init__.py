"""Pydantic schemas for API request/response."""

from portfolio_service.api.schemas.position import (
    OrderRequestSchema,
    BucketsUpdateRequestSchema,
    StockPositionResponse,
    ProfitLossResponse,
    BucketPositionResponse,
)

__all__ = [
    "OrderRequestSchema",
    "BucketsUpdateRequestSchema",
    "StockPositionResponse",
    "ProfitLossResponse",
    "BucketPositionResponse",
]
