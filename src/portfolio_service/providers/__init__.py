"""Market price sources module."""

from portfolio_service.providers.price_source import PriceSource
from portfolio_service.providers.stub_provider import StubPriceSource
from portfolio_service.providers.yahoo_provider import YahooPriceSource

__all__ = [
    "PriceSource",
    "StubPriceSource",
    "YahooPriceSource",
]
