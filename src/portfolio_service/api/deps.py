"""Dependency injection for FastAPI."""

from portfolio_service.app_context import get_app_context
from portfolio_service.services import PortfolioAggregator


def get_portfolio() -> PortfolioAggregator:
    """Provide the process-wide PortfolioAggregator instance."""
    return get_app_context().portfolio
