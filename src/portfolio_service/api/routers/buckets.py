"""Bucket management endpoints."""

from fastapi import APIRouter, Depends, Response, status

from portfolio_service.api.deps import get_portfolio
from portfolio_service.api.schemas import BucketPositionResponse
from portfolio_service.services import PortfolioAggregator

router = APIRouter(prefix="/buckets", tags=["buckets"])


@router.get("", response_model=dict[str, list[str]])
def list_buckets(
    portfolio: PortfolioAggregator = Depends(get_portfolio),
) -> dict[str, list[str]]:
    """List all buckets with their symbols, both sorted by name."""
    return portfolio.list_buckets()


@router.post("/{name}", status_code=status.HTTP_201_CREATED)
def create_bucket(
    name: str,
    portfolio: PortfolioAggregator = Depends(get_portfolio),
) -> Response:
    """Create an empty bucket."""
    portfolio.create_bucket(name)
    return Response(status_code=status.HTTP_201_CREATED)


@router.delete("/{name}", status_code=status.HTTP_204_NO_CONTENT)
def delete_bucket(
    name: str,
    portfolio: PortfolioAggregator = Depends(get_portfolio),
) -> Response:
    """Delete a bucket; held symbols stay open but lose the membership."""
    portfolio.delete_bucket(name)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{name}/position", response_model=BucketPositionResponse)
def get_bucket_position(
    name: str,
    portfolio: PortfolioAggregator = Depends(get_portfolio),
) -> BucketPositionResponse:
    """Aggregate valuation of every position in the bucket."""
    return BucketPositionResponse.from_view(portfolio.get_bucket_valuation(name))
