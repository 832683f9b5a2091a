"""Position endpoints: orders, bucket membership and valuation."""

from fastapi import APIRouter, Depends, Response, status

from portfolio_service.api.deps import get_portfolio
from portfolio_service.api.schemas import (
    BucketsUpdateRequestSchema,
    OrderRequestSchema,
    StockPositionResponse,
)
from portfolio_service.services import BucketsUpdateRequest, OrderRequest, PortfolioAggregator

router = APIRouter(prefix="/positions", tags=["positions"])


@router.post("/orders", status_code=status.HTTP_204_NO_CONTENT)
def add_order(
    data: OrderRequestSchema,
    portfolio: PortfolioAggregator = Depends(get_portfolio),
) -> Response:
    """Place a BUY or SELL order at the symbol's close on the trade date."""
    portfolio.add_order(
        OrderRequest(
            trade_type=data.type,
            symbol=data.symbol,
            trade_date=data.date,
            quantity=data.quantity,
            buckets=data.buckets,
        )
    )
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/buckets", status_code=status.HTTP_204_NO_CONTENT)
def add_symbol_to_buckets(
    data: BucketsUpdateRequestSchema,
    portfolio: PortfolioAggregator = Depends(get_portfolio),
) -> Response:
    """Add a held symbol to buckets (missing buckets are created)."""
    portfolio.add_to_buckets(BucketsUpdateRequest(symbol=data.symbol, buckets=data.buckets))
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/buckets/remove", status_code=status.HTTP_204_NO_CONTENT)
def remove_symbol_from_buckets(
    data: BucketsUpdateRequestSchema,
    portfolio: PortfolioAggregator = Depends(get_portfolio),
) -> Response:
    """Remove a held symbol from buckets."""
    portfolio.remove_from_buckets(BucketsUpdateRequest(symbol=data.symbol, buckets=data.buckets))
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{symbol}", response_model=StockPositionResponse)
def get_position(
    symbol: str,
    portfolio: PortfolioAggregator = Depends(get_portfolio),
) -> StockPositionResponse:
    """Value the open position in a symbol at its latest price."""
    return StockPositionResponse.from_view(portfolio.get_position(symbol))
