"""View models for position and bucket valuation outputs."""

from dataclasses import dataclass, field
from decimal import Decimal

from portfolio_service.domain.models.enums import TradeType


@dataclass
class ProfitLossView:
    """Profit/loss amount and percentage of one position."""

    amount: Decimal
    percent: Decimal


@dataclass
class StockPositionView:
    """Valuation snapshot of a single open position."""

    symbol: str
    trade_type: TradeType
    quantity: int  # signed: negative when short
    total_purchase_cost: Decimal
    total_market_value: Decimal
    avg_cost_per_share: Decimal
    profit_loss_amount: Decimal
    profit_loss_percent: Decimal
    buckets: list[str] = field(default_factory=list)


@dataclass
class BucketPositionView:
    """Aggregate valuation snapshot of all positions in a bucket."""

    name: str
    total_number_of_shares_long: int = 0
    total_number_of_shares_short: int = 0  # sum of signed short counts (<= 0)
    total_purchase_cost: Decimal = field(default_factory=lambda: Decimal("0.00"))
    total_market_value: Decimal = field(default_factory=lambda: Decimal("0.00"))
    number_of_positions: int = 0
    profit_loss_amount: Decimal = field(default_factory=lambda: Decimal("0.00"))
    profit_loss_percent: Decimal = field(default_factory=lambda: Decimal("0.00"))
    bucket_breakdown: dict[str, ProfitLossView] = field(default_factory=dict)
