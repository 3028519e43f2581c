"""Calculation service - orchestrates the tip calculation use cases."""

from decimal import Decimal
from typing import Union

import structlog

from tippr.application.dto import CalculationRequest, CalculationResponse
from tippr.domain.exceptions import (
    InvalidBillAmountException,
    InvalidCalculationRequestException,
    InvalidTipPercentException,
)
from tippr.service.calculator import (
    CalculatorSettings,
    SplitResult,
    ValidationResult,
    calculate_breakdown,
    calculate_split,
    calculator_settings,
    validate_bill_amount,
    validate_tip_percent,
)
from tippr.service.calculator.breakdown import explain_breakdown

logger = structlog.get_logger(__name__)


class CalculationService:
    """
    Application service for tip calculation use cases.
    """

    def __init__(self, settings: CalculatorSettings = calculator_settings):
        self._settings = settings

    def calculate(self, request: CalculationRequest) -> CalculationResponse:
        """
        Validate raw inputs and compute the full breakdown.

        Args:
            request: Raw bill and tip text plus rounding/split options

        Returns:
            CalculationResponse with every display value and any warnings

        Raises:
            InvalidCalculationRequestException: If the request is malformed
            InvalidBillAmountException: If the bill amount is rejected
            InvalidTipPercentException: If the tip percentage is rejected
        """
        errors = request.validate()
        if errors:
            raise InvalidCalculationRequestException("; ".join(errors))

        log = logger.bind(
            round_mode=request.round_mode.value,
            split_count=request.split_count,
        )
        log.info("calculation_requested")

        bill = validate_bill_amount(request.bill_amount, self._settings)
        if not bill.is_valid:
            log.info("bill_rejected", error=bill.error)
            raise InvalidBillAmountException(bill.error, raw_value=request.bill_amount)

        tip = validate_tip_percent(request.tip_percent, self._settings)
        if not tip.is_valid:
            log.info("tip_rejected", error=tip.error)
            raise InvalidTipPercentException(tip.error, raw_value=request.tip_percent)

        warnings = [w for w in (bill.warning, tip.warning) if w]
        if warnings:
            log.info("calculation_warnings", warnings=warnings, tip_capped=tip.capped)

        breakdown = calculate_breakdown(
            bill=bill.sanitized,
            tip_percent=tip.sanitized,
            round_mode=request.round_mode,
            split_count=request.split_count,
            settings=self._settings,
        )

        log.info(
            "calculation_completed",
            total=str(breakdown.total),
            uneven_split=breakdown.split is not None and not breakdown.split.is_even,
        )
        log.debug("calculation_breakdown", summary=explain_breakdown(breakdown))

        return CalculationResponse.from_breakdown(breakdown, warnings, tip_capped=tip.capped)

    def validate_bill(self, raw: str) -> ValidationResult:
        """Validate a bill amount without raising on rejection."""
        result = validate_bill_amount(raw, self._settings)
        logger.debug("bill_validated", is_valid=result.is_valid, warning=result.warning)
        return result

    def validate_tip(self, raw: str) -> ValidationResult:
        """Validate a tip percentage without raising on rejection."""
        result = validate_tip_percent(raw, self._settings)
        logger.debug("tip_validated", is_valid=result.is_valid, capped=result.capped)
        return result

    def split(self, total: Decimal, split_count: Union[int, float]) -> SplitResult:
        """
        Split a total between participants.

        Raises:
            InvalidCalculationRequestException: If the total is negative
        """
        if total < 0:
            raise InvalidCalculationRequestException("total cannot be negative")

        result = calculate_split(total, split_count, self._settings)

        logger.info(
            "split_calculated",
            split_count=result.split_count,
            remainder_cents=result.remainder_cents,
        )
        return result
