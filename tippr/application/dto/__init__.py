"""Data Transfer Objects for application layer."""

from .calculation import CalculationRequest, CalculationResponse, SplitDTO

__all__ = [
    "CalculationRequest",
    "CalculationResponse",
    "SplitDTO",
]
