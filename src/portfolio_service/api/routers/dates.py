"""Trading date lookup endpoint."""

from datetime import datetime

from fastapi import APIRouter, Depends

from portfolio_service.api.deps import get_portfolio
from portfolio_service.services import PortfolioAggregator

router = APIRouter(prefix="/dates", tags=["dates"])


@router.get("/{symbol}", response_model=list[datetime])
def get_available_dates(
    symbol: str,
    portfolio: PortfolioAggregator = Depends(get_portfolio),
) -> list[datetime]:
    """Trading days with a cached close for the symbol, newest first."""
    return portfolio.get_available_dates(symbol)
