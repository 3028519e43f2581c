"""
Bill and Tip Validators for the Tippr engine.

Validators never raise on bad input. Every outcome is reported through a
ValidationResult so the caller can keep the last good value on screen and
surface the message verbatim.
"""

from decimal import Decimal, InvalidOperation
from typing import Optional

from .arithmetic import round2
from .models import ValidationResult
from .sanitize import digits_only, sanitize_numeric_text
from .settings import CalculatorSettings, calculator_settings


def parse_sanitized(text: str) -> Optional[Decimal]:
    """
    Parse sanitized numeric text.

    Returns:
        The value, or None when the text holds no number
    """
    if not text:
        return None
    try:
        value = Decimal(text)
    except InvalidOperation:
        return None
    return value if value.is_finite() else None


def looks_like_card_number(
    raw: str,
    settings: CalculatorSettings = calculator_settings,
) -> bool:
    """
    Detect a pasted payment card number.

    The check is shape-based: enough digits and no decimal point. A decimal
    point means the user is typing an amount, however long.

    Args:
        raw: Raw user input, before sanitizing
        settings: Calculator settings (uses defaults if not provided)

    Returns:
        True if the input should be treated as a card number
    """
    return len(digits_only(raw)) >= settings.card_number_min_digits and "." not in raw


def validate_bill_amount(
    raw: str,
    settings: CalculatorSettings = calculator_settings,
) -> ValidationResult:
    """
    Validate a raw bill amount.

    Policy:
        1. Empty input: valid 0.00 (nothing entered yet)
        2. Card-number-shaped input: rejected
        3. Unparsable or negative: rejected
        4. Above max_bill_amount: rejected as implausible
        5. Above large_amount_threshold: accepted with a warning
        6. Anything else: accepted silently

    Args:
        raw: Raw user input
        settings: Calculator settings (uses defaults if not provided)

    Returns:
        ValidationResult with the amount rounded to cents
    """
    if not raw or not raw.strip():
        return ValidationResult(is_valid=True, sanitized=round2(0))

    if looks_like_card_number(raw, settings):
        return ValidationResult.rejected(settings.invalid_bill_message)

    value = parse_sanitized(sanitize_numeric_text(raw))

    if value is None or value < 0:
        return ValidationResult.rejected(settings.invalid_bill_message)

    if value > settings.max_bill_amount:
        return ValidationResult.rejected(settings.invalid_bill_message)

    if value > settings.large_amount_threshold:
        return ValidationResult(
            is_valid=True,
            sanitized=round2(value),
            warning=settings.large_amount_warning,
        )

    return ValidationResult(is_valid=True, sanitized=round2(value))


def validate_tip_percent(
    raw: str,
    settings: CalculatorSettings = calculator_settings,
) -> ValidationResult:
    """
    Validate a raw tip percentage.

    Empty input is not special-cased: it holds no number and is rejected.
    Values above the cap are accepted as the cap itself, with capped=True.

    Args:
        raw: Raw user input
        settings: Calculator settings (uses defaults if not provided)

    Returns:
        ValidationResult with the percentage rounded to 2 decimals
    """
    value = parse_sanitized(sanitize_numeric_text(raw))

    if value is None or value < 0:
        return ValidationResult.rejected(settings.invalid_tip_message)

    if value > settings.max_tip_percent:
        return ValidationResult(
            is_valid=True,
            sanitized=round2(settings.max_tip_percent),
            warning=settings.tip_capped_warning.format(
                max_tip=format(settings.max_tip_percent, "f"),
            ),
            capped=True,
        )

    return ValidationResult(is_valid=True, sanitized=round2(value))
