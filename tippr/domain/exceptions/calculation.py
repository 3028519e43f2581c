"""Calculation-related domain exceptions."""

from .base import DomainException


class InvalidBillAmountException(DomainException):
    """Raised when a calculation is requested with a rejected bill amount."""

    def __init__(self, message: str, raw_value: str = ""):
        super().__init__(
            message=message,
            code="INVALID_BILL_AMOUNT",
        )
        self.raw_value = raw_value


class InvalidTipPercentException(DomainException):
    """Raised when a calculation is requested with a rejected tip percentage."""

    def __init__(self, message: str, raw_value: str = ""):
        super().__init__(
            message=message,
            code="INVALID_TIP_PERCENT",
        )
        self.raw_value = raw_value


class InvalidCalculationRequestException(DomainException):
    """Raised when a calculation request is malformed."""

    def __init__(self, message: str):
        super().__init__(
            message=message,
            code="INVALID_CALCULATION_REQUEST",
        )
