"""Dependency injection for FastAPI."""

from typing import Annotated

from fastapi import Depends

from tippr.application.services import CalculationService
from tippr.service.calculator import CalculatorSettings
from tippr.service.calculator.settings import get_calculator_settings


# Settings dependencies
def get_engine_settings() -> CalculatorSettings:
    """Get the CalculatorSettings used by request handlers."""
    return get_calculator_settings()


# Service dependencies
def get_calculation_service(
    engine_settings: Annotated[CalculatorSettings, Depends(get_engine_settings)],
) -> CalculationService:
    """Get a CalculationService instance."""
    return CalculationService(settings=engine_settings)
