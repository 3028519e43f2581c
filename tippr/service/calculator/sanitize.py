"""
Input Sanitizer for the Tippr engine.

Turns free text typed or pasted by a user into a normalized numeric string.
This is purely textual: nothing here parses numbers.
"""

import re

_NON_NUMERIC = re.compile(r"[^0-9.]")
_NON_DIGIT = re.compile(r"[^0-9]")


def sanitize_numeric_text(raw: str) -> str:
    """
    Normalize raw text to digits and at most one decimal point.

    Rules:
        1. Drop every character that is not a digit or '.'
        2. Keep the first '.', drop any later ones (the digit groups
           after them are joined up)
        3. Prefix '0' when the text starts with '.'

    The function is idempotent.

    Examples:
        "$1,234.56" -> "1234.56"
        "12.34.56"  -> "12.3456"
        ".99"       -> "0.99"

    Args:
        raw: Raw user input

    Returns:
        Normalized numeric text (may be empty)
    """
    cleaned = _NON_NUMERIC.sub("", raw or "")

    head, dot, tail = cleaned.partition(".")
    if dot:
        cleaned = head + dot + tail.replace(".", "")

    if cleaned.startswith("."):
        cleaned = "0" + cleaned

    return cleaned


def digits_only(raw: str) -> str:
    """Every digit of the raw text, in order."""
    return _NON_DIGIT.sub("", raw or "")
