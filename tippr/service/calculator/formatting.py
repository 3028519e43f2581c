"""Display formatting for amounts."""

from .arithmetic import Number, round2


def format_with_separators(value: Number) -> str:
    """
    Format an amount with thousands separators and exactly 2 decimals.

    Example:
        1234567.5 -> "1,234,567.50"
    """
    return f"{round2(value):,.2f}"


def format_currency(value: Number) -> str:
    """Format an amount as dollars, e.g. "$19.67"."""
    return f"${round2(value):.2f}"


def format_percent(value: Number) -> str:
    """Format a percentage without trailing zeros, e.g. "18%" or "17.5%"."""
    return f"{round2(value).normalize():f}%"
