"""
Breakdown Engine for the Tippr engine.

This module runs the full calculation for one bill:
1. Calculate the tip from the bill and percentage
2. Add it to the bill for the subtotal
3. Snap the subtotal to a whole unit (if a round mode is set)
4. Split the final total (if a split count is given)

This is the main entry point for callers that already hold validated values.
"""

from typing import List, Optional, Union

from .arithmetic import Number, calculate_tip, calculate_total, round2
from .formatting import format_percent, format_with_separators
from .models import Breakdown, RoundMode
from .rounding import apply_rounding
from .settings import CalculatorSettings, calculator_settings
from .split import calculate_split


def calculate_breakdown(
    bill: Number,
    tip_percent: Number,
    round_mode: Union[RoundMode, str] = RoundMode.NONE,
    split_count: Optional[Union[int, float]] = None,
    settings: CalculatorSettings = calculator_settings,
) -> Breakdown:
    """
    Calculate every display value for a bill.

    Args:
        bill: Validated bill amount
        tip_percent: Validated tip percentage
        round_mode: Whole-unit rounding for the total
        split_count: Number of people to split between (None = no split)
        settings: Calculator settings (uses defaults if not provided)

    Returns:
        Breakdown with tip, subtotal, total and optional split
    """
    round_mode = RoundMode(round_mode)

    tip_amount = calculate_tip(bill, tip_percent)
    subtotal = calculate_total(bill, tip_amount)
    total = apply_rounding(subtotal, round_mode)

    split = None
    if split_count is not None:
        split = calculate_split(total, split_count, settings)

    return Breakdown(
        bill=round2(bill),
        tip_percent=round2(tip_percent),
        tip_amount=tip_amount,
        subtotal=subtotal,
        round_mode=round_mode,
        total=total,
        split=split,
    )


def explain_breakdown(breakdown: Breakdown) -> str:
    """
    Generate a human-readable summary of a breakdown.

    This can be used for:
    - Logging and debugging
    - Plain-text receipts

    Args:
        breakdown: The breakdown to explain

    Returns:
        Multi-line summary string
    """
    lines: List[str] = [
        f"Bill: ${format_with_separators(breakdown.bill)}",
        f"Tip ({format_percent(breakdown.tip_percent)}): ${format_with_separators(breakdown.tip_amount)}",
    ]

    if breakdown.round_mode is RoundMode.NONE or breakdown.total == breakdown.subtotal:
        lines.append(f"Total: ${format_with_separators(breakdown.total)}")
    else:
        lines.append(
            f"Total: ${format_with_separators(breakdown.total)} "
            f"(rounded {breakdown.round_mode.value} from ${format_with_separators(breakdown.subtotal)})"
        )

    split = breakdown.split
    if split is not None:
        if split.is_even:
            lines.append(f"Per person ({split.split_count}): ${format_with_separators(split.per_person)}")
        else:
            lines.append(f"Split {split.split_count} ways: {split.distribution}")

    return "\n".join(lines)
