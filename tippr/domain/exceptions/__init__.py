"""Domain Exceptions - Business rule violations and domain errors."""

from .base import DomainException
from .calculation import (
    InvalidBillAmountException,
    InvalidCalculationRequestException,
    InvalidTipPercentException,
)

__all__ = [
    "DomainException",
    "InvalidBillAmountException",
    "InvalidCalculationRequestException",
    "InvalidTipPercentException",
]
