"""Fixed-point helpers for currency values."""

from decimal import ROUND_HALF_UP, Decimal
from typing import Union

CENTS = Decimal("0.01")
# Ratios are held at 4 places before being scaled to a percentage
RATIO_PLACES = Decimal("0.0001")

Number = Union[Decimal, float, int, str]


def to_money(value: Number) -> Decimal:
    """Convert a value to a 2-decimal currency amount, rounding half up."""
    if isinstance(value, float):
        value = str(value)
    return Decimal(value).quantize(CENTS, rounding=ROUND_HALF_UP)


def percent_of(amount: Decimal, base: Decimal) -> Decimal:
    """
    Return amount / base as a percentage rounded to 2 places.

    The ratio is rounded to 4 places first, then scaled by 100.
    """
    if base == 0:
        return Decimal("0.00")
    ratio = (amount / base).quantize(RATIO_PLACES, rounding=ROUND_HALF_UP)
    return (ratio * 100).quantize(CENTS, rounding=ROUND_HALF_UP)
