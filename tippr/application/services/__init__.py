"""Application services (use cases)."""

from .calculation_service import CalculationService

__all__ = [
    "CalculationService",
]
