"""Enumerations for domain models."""

from enum import Enum


class TradeType(str, Enum):
    """
    Direction of an order or a position.

    A BUY position is long, a SELL position is short.
    """

    BUY = "BUY"
    SELL = "SELL"

    @property
    def sign(self) -> int:
        return 1 if self is TradeType.BUY else -1

    def opposite(self) -> "TradeType":
        return TradeType.SELL if self is TradeType.BUY else TradeType.BUY
