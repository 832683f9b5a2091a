"""SymbolPosition domain model and the order-merge algorithm."""

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional

from portfolio_service.core.money import CENTS, Number, percent_of, to_money
from portfolio_service.domain.models.enums import TradeType


@dataclass(frozen=True)
class SymbolPosition:
    """
    Open position in one symbol (immutable).

    Only the trade type, share count and average cost are stored; totals
    and the signed share count are derived on read. Every order produces a
    new value through merge_with_order().
    """

    trade_type: TradeType
    symbol: str
    total_shares_absolute: int
    average_cost_per_share: Decimal

    def __post_init__(self) -> None:
        if isinstance(self.trade_type, str):
            object.__setattr__(self, "trade_type", TradeType(self.trade_type))
        if self.total_shares_absolute <= 0:
            raise ValueError(f"Position share count must be positive: {self.total_shares_absolute}")
        object.__setattr__(self, "average_cost_per_share", to_money(self.average_cost_per_share))

    @classmethod
    def of(
        cls,
        trade_type: TradeType,
        symbol: str,
        total_shares: int,
        price_per_share: Number,
    ) -> "SymbolPosition":
        """Open a fresh position at the given execution price."""
        return cls(
            trade_type=trade_type,
            symbol=symbol,
            total_shares_absolute=total_shares,
            average_cost_per_share=to_money(price_per_share),
        )

    @property
    def is_long(self) -> bool:
        return self.trade_type is TradeType.BUY

    @property
    def total_shares(self) -> int:
        """Signed share count: positive when long, negative when short."""
        return self.total_shares_absolute * self.trade_type.sign

    @property
    def total_purchase_cost(self) -> Decimal:
        return (self.average_cost_per_share * self.total_shares_absolute).quantize(CENTS)

    def merge_with_order(
        self,
        order_type: TradeType,
        share_amount: int,
        price_per_share: Number,
    ) -> Optional["SymbolPosition"]:
        """
        Fold an order into this position.

        Returns the resulting position, or None if the order closes it
        exactly. A same-direction order re-weights the average cost; a
        partial close keeps it; an order that overshoots reverses the
        position and opens the remainder at the order's price.
        """
        order_price = to_money(price_per_share)

        if order_type is self.trade_type:
            new_total_shares = self.total_shares_absolute + share_amount
            total_paid = self.total_purchase_cost + order_price * share_amount
            return SymbolPosition(
                trade_type=self.trade_type,
                symbol=self.symbol,
                total_shares_absolute=new_total_shares,
                average_cost_per_share=(total_paid / new_total_shares).quantize(
                    CENTS, rounding=ROUND_HALF_UP
                ),
            )

        net_shares = self.total_shares_absolute - share_amount
        if net_shares == 0:
            return None

        if net_shares > 0:
            return SymbolPosition(
                trade_type=self.trade_type,
                symbol=self.symbol,
                total_shares_absolute=net_shares,
                average_cost_per_share=self.average_cost_per_share,
            )

        # Equivalent to closing the position, then opening the remainder
        return SymbolPosition(
            trade_type=self.trade_type.opposite(),
            symbol=self.symbol,
            total_shares_absolute=-net_shares,
            average_cost_per_share=order_price,
        )

    def profit_loss_amount(self, market_price: Number) -> Decimal:
        price = to_money(market_price)
        return ((price - self.average_cost_per_share) * self.total_shares_absolute * self.trade_type.sign).quantize(
            CENTS
        )

    def profit_loss_percent(self, market_price: Number) -> Decimal:
        return percent_of(self.profit_loss_amount(market_price), self.total_purchase_cost)

    def market_value(self, market_price: Number) -> Decimal:
        """Unsigned value of the shares at the given price."""
        return (to_money(market_price) * self.total_shares_absolute).quantize(CENTS)
