"""
Split Engine for the Tippr engine.

Divides a total between participants so the shares always add back up to
the total exactly. All the division happens in integer cents:

    per_person_cents = total_cents // count
    remainder_cents  = total_cents - per_person_cents * count

The first `remainder_cents` participants each pay one extra cent, so the
number of people absorbing a penny is as small as it can be and never
negative.
"""

import math
from typing import Union

from .arithmetic import Number, from_cents, to_cents
from .formatting import format_currency
from .models import SplitResult
from .sanitize import digits_only
from .settings import CalculatorSettings, calculator_settings


def clamp_split_count(
    split_count: Union[int, float],
    settings: CalculatorSettings = calculator_settings,
) -> int:
    """
    Force a split count into the configured bounds.

    Fractional counts are floored before clamping. NaN counts fall back to
    the minimum.
    """
    if isinstance(split_count, float) and math.isnan(split_count):
        return settings.min_split_count
    if isinstance(split_count, float) and math.isinf(split_count):
        return settings.max_split_count if split_count > 0 else settings.min_split_count

    count = math.floor(split_count)
    return max(settings.min_split_count, min(settings.max_split_count, count))


def parse_split_count(
    raw: str,
    settings: CalculatorSettings = calculator_settings,
) -> int:
    """
    Parse a split count typed as free text.

    Non-digits are dropped, empty input means the minimum, and the result
    is clamped to the configured bounds.
    """
    cleaned = digits_only(raw)
    if not cleaned:
        return settings.min_split_count
    return clamp_split_count(int(cleaned), settings)


def describe_distribution(per_person_cents: int, remainder_cents: int, split_count: int) -> str:
    """
    Summarize an uneven split, e.g. "1 pays $19.66, 2 pay $19.67".

    Returns an empty string for an even split.
    """
    if remainder_cents <= 0:
        return ""

    base_payers = split_count - remainder_cents
    base = f"{base_payers} {_verb(base_payers)} {format_currency(from_cents(per_person_cents))}"
    extra = f"{remainder_cents} {_verb(remainder_cents)} {format_currency(from_cents(per_person_cents + 1))}"

    return f"{base}, {extra}"


def _verb(count: int) -> str:
    return "pays" if count == 1 else "pay"


def calculate_split(
    total: Number,
    split_count: Union[int, float],
    settings: CalculatorSettings = calculator_settings,
) -> SplitResult:
    """
    Split a total between participants.

    Args:
        total: Total amount (non-negative)
        split_count: Number of people, clamped to the configured bounds
        settings: Calculator settings (uses defaults if not provided)

    Returns:
        SplitResult whose shares reconcile to the total in cents

    Raises:
        ValueError: If total is negative
    """
    count = clamp_split_count(split_count, settings)
    total_cents = to_cents(total)

    if total_cents < 0:
        raise ValueError(f"Cannot split a negative total: {total}")

    per_person_cents, remainder_cents = divmod(total_cents, count)

    return SplitResult(
        per_person=from_cents(per_person_cents),
        per_person_cents=per_person_cents,
        remainder_cents=remainder_cents,
        split_count=count,
        distribution=describe_distribution(per_person_cents, remainder_cents, count),
    )
