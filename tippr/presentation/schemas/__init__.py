"""Pydantic schemas for API request/response validation."""

from .calculation import (
    CalculationRequestSchema,
    CalculationResponseSchema,
    SplitRequestSchema,
    SplitResponseSchema,
)
from .validation import TipPresetsSchema, ValidationRequestSchema, ValidationResultSchema
from .error import ErrorResponseSchema

__all__ = [
    "CalculationRequestSchema",
    "CalculationResponseSchema",
    "SplitRequestSchema",
    "SplitResponseSchema",
    "ValidationRequestSchema",
    "ValidationResultSchema",
    "TipPresetsSchema",
    "ErrorResponseSchema",
]
