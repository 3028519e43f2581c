"""
Rounding Policy for the Tippr engine.

Snaps a total to a whole currency unit. This is coarser than the cent
rounding in the arithmetic core and only ever applied to a final total.
"""

from decimal import Decimal, ROUND_CEILING, ROUND_FLOOR
from typing import Union

from .arithmetic import Number, round2, to_decimal
from .models import RoundMode

_WHOLE_UNIT = Decimal("1")


def apply_rounding(total: Number, mode: Union[RoundMode, str]) -> Decimal:
    """
    Round a total to a whole unit according to the mode.

    Args:
        total: Total amount
        mode: RoundMode, or its value ("none", "up", "down")

    Returns:
        The total, 2-decimal normalized

    Raises:
        ValueError: If mode is not a known round mode
    """
    mode = RoundMode(mode)
    total = to_decimal(total)

    if mode is RoundMode.UP:
        return round2(total.quantize(_WHOLE_UNIT, rounding=ROUND_CEILING))
    if mode is RoundMode.DOWN:
        return round2(total.quantize(_WHOLE_UNIT, rounding=ROUND_FLOOR))
    return round2(total)
