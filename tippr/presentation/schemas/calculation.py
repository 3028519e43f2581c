"""Calculation-related Pydantic schemas."""

from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from tippr.service.calculator import RoundMode


class CalculationRequestSchema(BaseModel):
    """Schema for POST /v1/calculation request body."""

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "bill_amount": "59.00",
                    "tip_percent": "18",
                    "round_mode": "none",
                    "split_count": 3,
                }
            ]
        }
    )
    bill_amount: str = Field(
        ...,
        max_length=64,
        description="Raw bill text; sanitized and validated server-side",
        examples=["59.00"],
    )
    tip_percent: str = Field(
        ...,
        max_length=32,
        description="Raw tip percentage text (15 = 15%)",
        examples=["18"],
    )
    round_mode: RoundMode = Field(
        RoundMode.NONE,
        description="Snap the total to a whole unit: none, up or down",
    )
    split_count: Optional[int] = Field(
        None,
        ge=1,
        description="Number of people to split between (clamped to the configured maximum)",
        examples=[3],
    )


class SplitSchema(BaseModel):
    """Schema for split details in a response."""

    per_person: Decimal = Field(
        ...,
        description="Base amount every participant pays",
        examples=["19.66"],
    )
    remainder_cents: int = Field(
        ...,
        ge=0,
        description="Number of participants paying one extra cent (0 = even split)",
        examples=[2],
    )
    split_count: int = Field(
        ...,
        ge=1,
        description="Number of participants after clamping",
        examples=[3],
    )
    distribution: str = Field(
        ...,
        description="Summary of an uneven split, empty when even",
        examples=["1 pays $19.66, 2 pay $19.67"],
    )
    shares: List[Decimal] = Field(
        ...,
        description="Every participant's amount, higher payers first",
        examples=[["19.67", "19.67", "19.66"]],
    )


class CalculationResponseSchema(BaseModel):
    """Schema for POST /v1/calculation response body."""

    bill: Decimal = Field(..., description="Validated bill amount", examples=["59.00"])
    tip_percent: Decimal = Field(..., description="Validated tip percentage", examples=["18.00"])
    tip_amount: Decimal = Field(..., description="Tip amount", examples=["10.62"])
    subtotal: Decimal = Field(..., description="Bill plus tip before rounding", examples=["69.62"])
    round_mode: RoundMode = Field(..., description="Rounding applied to the total")
    total: Decimal = Field(..., description="Final total", examples=["69.62"])
    total_formatted: str = Field(
        ...,
        description="Final total with thousands separators",
        examples=["69.62"],
    )
    split: Optional[SplitSchema] = Field(
        None,
        description="Split of the final total (null when not splitting)",
    )
    warnings: List[str] = Field(
        default_factory=list,
        description="Non-blocking warnings to surface to the user",
    )
    tip_capped: bool = Field(
        False,
        description="True when the tip was capped at the maximum",
    )


class SplitRequestSchema(BaseModel):
    """Schema for POST /v1/split request body."""

    model_config = ConfigDict(
        json_schema_extra={"examples": [{"total": "59.00", "split_count": 3}]}
    )

    total: Decimal = Field(
        ...,
        ge=0,
        max_digits=12,
        description="Total amount to split",
        examples=["59.00"],
    )
    split_count: float = Field(
        ...,
        allow_inf_nan=False,
        description="Number of people; fractional counts are floored, then clamped",
        examples=[3],
    )


class SplitResponseSchema(SplitSchema):
    """Schema for POST /v1/split response body."""

    total: Decimal = Field(..., description="Total that was split", examples=["59.00"])
