"""
Calculation Engine for Tippr
"""

from .models import Breakdown, RoundMode, SplitResult, ValidationResult
from .settings import CalculatorSettings, calculator_settings
from .sanitize import sanitize_numeric_text
from .validation import validate_bill_amount, validate_tip_percent
from .arithmetic import calculate_tip, calculate_total, round2
from .rounding import apply_rounding
from .split import calculate_split, parse_split_count
from .formatting import format_with_separators
from .breakdown import calculate_breakdown, explain_breakdown
from .state import CalculatorState, initial_state, is_preset_tip, reduce, summarize

__all__ = [
    # Settings
    "CalculatorSettings",
    "calculator_settings",
    # Models
    "Breakdown",
    "RoundMode",
    "SplitResult",
    "ValidationResult",
    # Sanitizer
    "sanitize_numeric_text",
    # Validation
    "validate_bill_amount",
    "validate_tip_percent",
    # Arithmetic
    "calculate_tip",
    "calculate_total",
    "round2",
    # Rounding
    "apply_rounding",
    # Split
    "calculate_split",
    "parse_split_count",
    # Formatting
    "format_with_separators",
    # Breakdown
    "calculate_breakdown",
    "explain_breakdown",
    # State
    "CalculatorState",
    "initial_state",
    "is_preset_tip",
    "reduce",
    "summarize",
]
