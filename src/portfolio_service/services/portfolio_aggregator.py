"""Portfolio aggregator: orders, bucket membership and valuation reports."""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal

from portfolio_service.core.exceptions import (
    EmptyBucketSetError,
    InvalidQuantityError,
    NoSuchHoldingError,
)
from portfolio_service.core.money import percent_of
from portfolio_service.core.timezone import utc_start_of_day
from portfolio_service.domain.models import SymbolPosition, TradeType
from portfolio_service.domain.views import BucketPositionView, ProfitLossView, StockPositionView
from portfolio_service.services.bucket_index import BucketIndex
from portfolio_service.services.position_ledger import PositionLedger
from portfolio_service.services.price_cache import PriceCache

logger = logging.getLogger(__name__)


@dataclass
class OrderRequest:
    """Input data for placing an order."""

    trade_type: TradeType
    symbol: str
    trade_date: datetime
    quantity: int
    buckets: set[str] = field(default_factory=set)


@dataclass
class BucketsUpdateRequest:
    """Input data for adding a held symbol to, or removing it from, buckets."""

    symbol: str
    buckets: set[str] = field(default_factory=set)


class PortfolioAggregator:
    """
    Orchestrates the price cache, position ledger and bucket index.

    An order updates the ledger and then the bucket index. The two stores
    are not updated atomically together: a concurrent reader may see the
    new position before its bucket memberships, or the other way round.
    """

    def __init__(
        self,
        price_cache: PriceCache,
        ledger: PositionLedger,
        bucket_index: BucketIndex,
    ):
        self._prices = price_cache
        self._ledger = ledger
        self._buckets = bucket_index

    # -------------------------------------------------------------------------
    # Orders and membership
    # -------------------------------------------------------------------------

    def add_order(self, request: OrderRequest) -> None:
        """
        Apply an order at the symbol's close on the trade date.

        The requested buckets are always added first. If the order closes
        the position, every membership of the symbol is removed afterwards,
        so the symbol ends up in none of the requested buckets.
        """
        if request.quantity <= 0:
            raise InvalidQuantityError(request.quantity)

        price = self._prices.get_price(request.symbol, utc_start_of_day(request.trade_date))
        merged = self._ledger.apply_order(
            request.symbol,
            request.trade_type,
            request.quantity,
            price,
        )

        self._buckets.add_membership(request.symbol, request.buckets)
        if merged is None:
            self._buckets.remove_all_memberships(request.symbol)

    def add_to_buckets(self, request: BucketsUpdateRequest) -> None:
        self._check_bucket_update(request)
        self._buckets.add_membership(request.symbol, request.buckets)

    def remove_from_buckets(self, request: BucketsUpdateRequest) -> None:
        self._check_bucket_update(request)
        for bucket in request.buckets:
            self._buckets.remove_membership(bucket, request.symbol)

    def _check_bucket_update(self, request: BucketsUpdateRequest) -> None:
        if not self._ledger.contains(request.symbol):
            raise NoSuchHoldingError(request.symbol)
        if not request.buckets:
            raise EmptyBucketSetError(request.symbol)

    # -------------------------------------------------------------------------
    # Bucket management and dates
    # -------------------------------------------------------------------------

    def create_bucket(self, name: str) -> None:
        self._buckets.create_bucket(name)

    def delete_bucket(self, name: str) -> None:
        self._buckets.delete_bucket(name)

    def list_buckets(self) -> dict[str, list[str]]:
        return self._buckets.list_buckets()

    def get_available_dates(self, symbol: str) -> list[datetime]:
        return self._prices.get_available_dates(symbol)

    # -------------------------------------------------------------------------
    # Valuation
    # -------------------------------------------------------------------------

    def get_position(self, symbol: str) -> StockPositionView:
        """
        Value the open position in symbol at its latest price.

        Raises NoSuchHoldingError if nothing is held.
        """
        position = self._ledger.get(symbol)
        if position is None:
            raise NoSuchHoldingError(symbol)

        latest_price = self._prices.get_latest_price(symbol)

        return StockPositionView(
            symbol=symbol,
            trade_type=position.trade_type,
            quantity=position.total_shares,
            total_purchase_cost=position.total_purchase_cost,
            total_market_value=position.market_value(latest_price),
            avg_cost_per_share=position.average_cost_per_share,
            profit_loss_amount=position.profit_loss_amount(latest_price),
            profit_loss_percent=position.profit_loss_percent(latest_price),
            buckets=self._buckets.buckets_for(symbol),
        )

    def get_bucket_valuation(self, bucket: str) -> BucketPositionView:
        """
        Aggregate valuation of every position in a bucket.

        An empty bucket yields an all-zero report. Raises
        BucketNotFoundError if the bucket doesn't exist.
        """
        symbols = self._buckets.symbols_in(bucket)

        positions: list[SymbolPosition] = []
        for symbol in sorted(symbols):
            position = self._ledger.get(symbol)
            if position is None:
                # Closed between the membership read and now
                logger.debug("Skipping %s in bucket %s: no open position", symbol, bucket)
                continue
            positions.append(position)

        if not positions:
            return BucketPositionView(name=bucket)

        latest_prices = {p.symbol: self._prices.get_latest_price(p.symbol) for p in positions}

        shares_long = 0
        shares_short = 0
        total_cost = Decimal("0.00")
        market_value = Decimal("0.00")
        profit_loss = Decimal("0.00")
        breakdown: dict[str, ProfitLossView] = {}

        for position in positions:
            price = latest_prices[position.symbol]
            if position.is_long:
                shares_long += position.total_shares
            else:
                shares_short += position.total_shares
            total_cost += position.total_purchase_cost
            market_value += position.market_value(price)
            profit_loss += position.profit_loss_amount(price)
            breakdown[position.symbol] = ProfitLossView(
                amount=position.profit_loss_amount(price),
                percent=position.profit_loss_percent(price),
            )

        return BucketPositionView(
            name=bucket,
            total_number_of_shares_long=shares_long,
            total_number_of_shares_short=shares_short,
            total_purchase_cost=total_cost,
            total_market_value=market_value,
            number_of_positions=len(positions),
            profit_loss_amount=profit_loss,
            profit_loss_percent=percent_of(profit_loss, total_cost),
            bucket_breakdown=breakdown,
        )
