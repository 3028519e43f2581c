"""
Arithmetic Core for the Tippr engine.

Money is carried as Decimal and quantized to cents after every operation
that can introduce a fractional cent. Ties round half away from zero
(ROUND_HALF_UP), so 0.125 becomes 0.13.
"""

from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Union

from .models import ZERO

Number = Union[Decimal, int, float, str]

CENT = Decimal("0.01")
HUNDRED = Decimal("100")


def to_decimal(value: Number) -> Decimal:
    """
    Convert a number to Decimal without picking up binary float noise.

    Floats go through their shortest repr, so 0.1 becomes Decimal("0.1")
    rather than 0.1000000000000000055511151231257827...

    Raises:
        ValueError: If the value is not a finite number
    """
    if isinstance(value, Decimal):
        result = value
    else:
        try:
            result = Decimal(str(value))
        except InvalidOperation:
            raise ValueError(f"Not a number: {value!r}")
    if not result.is_finite():
        raise ValueError(f"Not a finite number: {value!r}")
    return result


def round2(value: Number) -> Decimal:
    """Round to the nearest cent, ties away from zero."""
    return to_decimal(value).quantize(CENT, rounding=ROUND_HALF_UP)


def to_cents(value: Number) -> int:
    """Convert an amount to an integer number of cents."""
    return int(round2(value) * 100)


def from_cents(cents: int) -> Decimal:
    """Convert an integer number of cents back to an amount."""
    return (Decimal(cents) / HUNDRED).quantize(CENT)


def calculate_tip(bill: Number, tip_percent: Number) -> Decimal:
    """
    Calculate the tip for a bill.

    Args:
        bill: Bill amount
        tip_percent: Tip percentage (15 = 15%)

    Returns:
        Tip amount rounded to cents (0 for a non-positive bill or negative tip)
    """
    bill = to_decimal(bill)
    tip_percent = to_decimal(tip_percent)

    if bill <= 0 or tip_percent < 0:
        return ZERO

    return round2(bill * tip_percent / HUNDRED)


def calculate_total(bill: Number, tip: Number) -> Decimal:
    """Bill plus tip, rounded to cents."""
    return round2(to_decimal(bill) + to_decimal(tip))
