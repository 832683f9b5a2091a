"""Pydantic schemas for position endpoints."""

from datetime import datetime
from decimal import Decimal
from typing import Any

from pydantic import BaseModel, Field, field_validator

from portfolio_service.core.timezone import parse_datetime_utc, to_utc
from portfolio_service.domain.models import TradeType
from portfolio_service.domain.views import BucketPositionView, StockPositionView


class OrderRequestSchema(BaseModel):
    """Request schema for placing an order."""

    type: TradeType
    symbol: str = Field(..., min_length=1)
    date: datetime = Field(..., description="Trade date; naive values are taken as UTC")
    quantity: int
    buckets: set[str] = Field(default_factory=set)

    @field_validator("date", mode="before")
    @classmethod
    def parse_trade_date(cls, value: Any) -> Any:
        if isinstance(value, str):
            return parse_datetime_utc(value)
        if isinstance(value, datetime):
            return to_utc(value)
        return value


class BucketsUpdateRequestSchema(BaseModel):
    """Request schema for adding/removing a held symbol to/from buckets."""

    symbol: str = Field(..., min_length=1)
    buckets: set[str] = Field(default_factory=set)


class StockPositionResponse(BaseModel):
    """Response schema for a single position valuation."""

    symbol: str
    trade_type: TradeType
    quantity: int
    total_purchase_cost: Decimal
    total_market_value: Decimal
    avg_cost_per_share: Decimal
    profit_loss_amount: Decimal
    profit_loss_percent: Decimal
    buckets: list[str]

    @classmethod
    def from_view(cls, view: StockPositionView) -> "StockPositionResponse":
        return cls(
            symbol=view.symbol,
            trade_type=view.trade_type,
            quantity=view.quantity,
            total_purchase_cost=view.total_purchase_cost,
            total_market_value=view.total_market_value,
            avg_cost_per_share=view.avg_cost_per_share,
            profit_loss_amount=view.profit_loss_amount,
            profit_loss_percent=view.profit_loss_percent,
            buckets=view.buckets,
        )


class ProfitLossResponse(BaseModel):
    """Profit/loss amount and percentage of one position."""

    amount: Decimal
    percent: Decimal


class BucketPositionResponse(BaseModel):
    """Response schema for a bucket valuation."""

    name: str
    total_number_of_shares_long: int
    total_number_of_shares_short: int
    total_purchase_cost: Decimal
    total_market_value: Decimal
    number_of_positions: int
    profit_loss_amount: Decimal
    profit_loss_percent: Decimal
    bucket_breakdown: dict[str, ProfitLossResponse]

    @classmethod
    def from_view(cls, view: BucketPositionView) -> "BucketPositionResponse":
        return cls(
            name=view.name,
            total_number_of_shares_long=view.total_number_of_shares_long,
            total_number_of_shares_short=view.total_number_of_shares_short,
            total_purchase_cost=view.total_purchase_cost,
            total_market_value=view.total_market_value,
            number_of_positions=view.number_of_positions,
            profit_loss_amount=view.profit_loss_amount,
            profit_loss_percent=view.profit_loss_percent,
            bucket_breakdown={
                symbol: ProfitLossResponse(amount=pl.amount, percent=pl.percent)
                for symbol, pl in view.bucket_breakdown.items()
            },
        )
