"""
Data models for the calculation engine.

These models represent the values passed between pipeline stages, from a
validated input to the final, display-ready breakdown. All of them are
immutable and created fresh per call.
"""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import List, Optional


ZERO = Decimal("0.00")


class RoundMode(str, Enum):
    """How a total is snapped to a whole currency unit."""
    NONE = "none"
    UP = "up"      # Ceiling to the next whole unit
    DOWN = "down"  # Floor to the previous whole unit


@dataclass(frozen=True)
class ValidationResult:
    """
    Outcome of validating one raw input field.

    Attributes:
        is_valid: False when the input was rejected outright
        sanitized: The usable value (always 0 when rejected)
        warning: Non-blocking message to surface alongside a valid value
        error: Message to surface verbatim when rejected
        capped: True when the value was clamped to its maximum
    """
    is_valid: bool
    sanitized: Decimal
    warning: Optional[str] = None
    error: Optional[str] = None
    capped: bool = False

    @classmethod
    def rejected(cls, error: str) -> "ValidationResult":
        return cls(is_valid=False, sanitized=ZERO, error=error)

    def to_dict(self) -> dict:
        return {
            "is_valid": self.is_valid,
            "sanitized": self.sanitized,
            "warning": self.warning,
            "error": self.error,
            "capped": self.capped,
        }


@dataclass(frozen=True)
class SplitResult:
    """
    A total divided between a number of participants.

    Attributes:
        per_person: Base amount every participant pays
        per_person_cents: The same base amount in cents
        remainder_cents: How many participants pay one extra cent (0 = even split)
        split_count: Number of participants after clamping
        distribution: Human-readable summary, empty for an even split
    """
    per_person: Decimal
    per_person_cents: int
    remainder_cents: int
    split_count: int
    distribution: str = ""

    @property
    def is_even(self) -> bool:
        return self.remainder_cents == 0

    @property
    def total_cents(self) -> int:
        return self.per_person_cents * self.split_count + self.remainder_cents

    def shares(self) -> List[Decimal]:
        """Every participant's amount, the higher payers first."""
        higher = Decimal(self.per_person_cents + 1) / 100
        return [
            (higher if i < self.remainder_cents else self.per_person).quantize(ZERO)
            for i in range(self.split_count)
        ]


@dataclass(frozen=True)
class Breakdown:
    """
    Every display value for one bill.

    Attributes:
        bill: Validated bill amount
        tip_percent: Validated tip percentage
        tip_amount: Tip in currency
        subtotal: Bill plus tip, before whole-unit rounding
        round_mode: Rounding applied to the subtotal
        total: Final total after rounding
        split: Split of the final total (None when not splitting)
    """
    bill: Decimal
    tip_percent: Decimal
    tip_amount: Decimal
    subtotal: Decimal
    round_mode: RoundMode
    total: Decimal
    split: Optional[SplitResult] = None
