"""Data transfer objects for calculation operations."""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import List, Optional

from tippr.service.calculator import Breakdown, RoundMode, SplitResult
from tippr.service.calculator.formatting import format_with_separators


@dataclass(frozen=True)
class CalculationRequest:
    """Input data for a full tip calculation."""
    bill_amount: str
    tip_percent: str
    round_mode: RoundMode = RoundMode.NONE
    split_count: Optional[int] = None

    def validate(self) -> List[str]:
        errors = []

        if self.bill_amount is None:
            errors.append("bill_amount is required")

        if self.tip_percent is None:
            errors.append("tip_percent is required")

        if self.split_count is not None and self.split_count < 1:
            errors.append("split_count must be at least 1")

        return errors


@dataclass(frozen=True)
class SplitDTO:
    """Split details included in calculation responses."""

    per_person: Decimal
    remainder_cents: int
    split_count: int
    distribution: str
    shares: List[Decimal]

    @classmethod
    def from_result(cls, split: SplitResult) -> "SplitDTO":
        return cls(
            per_person=split.per_person,
            remainder_cents=split.remainder_cents,
            split_count=split.split_count,
            distribution=split.distribution,
            shares=split.shares(),
        )


@dataclass(frozen=True)
class CalculationResponse:
    """Response data for a full tip calculation."""

    bill: Decimal
    tip_percent: Decimal
    tip_amount: Decimal
    subtotal: Decimal
    round_mode: RoundMode
    total: Decimal
    total_formatted: str
    split: Optional[SplitDTO]
    warnings: List[str] = field(default_factory=list)
    tip_capped: bool = False

    @classmethod
    def from_breakdown(
        cls,
        breakdown: Breakdown,
        warnings: List[str],
        tip_capped: bool = False,
    ) -> "CalculationResponse":
        return cls(
            bill=breakdown.bill,
            tip_percent=breakdown.tip_percent,
            tip_amount=breakdown.tip_amount,
            subtotal=breakdown.subtotal,
            round_mode=breakdown.round_mode,
            total=breakdown.total,
            total_formatted=format_with_separators(breakdown.total),
            split=SplitDTO.from_result(breakdown.split) if breakdown.split else None,
            warnings=list(warnings),
            tip_capped=tip_capped,
        )
