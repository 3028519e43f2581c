"""Validation-related Pydantic schemas."""

from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class ValidationRequestSchema(BaseModel):
    """Schema for POST /v1/validation/* request body."""

    model_config = ConfigDict(
        json_schema_extra={"examples": [{"value": "$1,234.56"}]}
    )

    value: str = Field(
        ...,
        max_length=256,
        description="Raw text exactly as typed or pasted by the user",
        examples=["$1,234.56"],
    )


class ValidationResultSchema(BaseModel):
    """Schema for a field validation result."""

    is_valid: bool = Field(
        ...,
        description="False when the input was rejected",
    )
    sanitized: Decimal = Field(
        ...,
        description="Usable value (0 when rejected)",
        examples=["1234.56"],
    )
    warning: Optional[str] = Field(
        None,
        description="Non-blocking warning to show with a valid value",
        examples=["That's a large amount - continue?"],
    )
    error: Optional[str] = Field(
        None,
        description="Rejection message to show verbatim",
        examples=["Please enter a valid bill amount"],
    )
    capped: bool = Field(
        False,
        description="True when the value was clamped to its maximum",
    )


class TipPresetsSchema(BaseModel):
    """Schema for GET /v1/validation/tip/presets response body."""

    presets: List[Decimal] = Field(
        ...,
        description="Preset tip percentages, in display order",
        examples=[["15", "18", "20", "25"]],
    )
    default_tip_percent: Decimal = Field(
        ...,
        description="Tip percentage selected before the user picks one",
        examples=["18"],
    )
    max_tip_percent: Decimal = Field(
        ...,
        description="Custom tips above this are capped",
        examples=["100"],
    )
