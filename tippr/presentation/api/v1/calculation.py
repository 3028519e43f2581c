"""Calculation API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends

from tippr.application.dto import CalculationRequest
from tippr.application.services import CalculationService
from tippr.core.dependencies import get_calculation_service
from tippr.core.metrics import record_calculation, record_split, track_calculation_latency
from tippr.presentation.schemas import (
    CalculationRequestSchema,
    CalculationResponseSchema,
    ErrorResponseSchema,
)
from tippr.presentation.schemas.calculation import SplitSchema

calculation_router = APIRouter(
    prefix="/calculation",
    responses={
        400: {"model": ErrorResponseSchema, "description": "Bill or tip rejected"},
    },
)


@calculation_router.post(
    "",
    response_model=CalculationResponseSchema,
    status_code=200,
    summary="Calculate Tip and Total",
    description="""Validate a raw bill and tip, then compute tip, total, rounding and split""",
    responses={
        200: {"description": "Calculation completed (warnings may be present)"},
    },
)
async def create_calculation(
    request: CalculationRequestSchema,
    calculation_service: Annotated[CalculationService, Depends(get_calculation_service)],
) -> CalculationResponseSchema:
    """
    Calculate every display value for a bill.

    Rejected input returns 400 with the message to show the user.
    """
    dto = CalculationRequest(
        bill_amount=request.bill_amount,
        tip_percent=request.tip_percent,
        round_mode=request.round_mode,
        split_count=request.split_count,
    )

    with track_calculation_latency():
        response = calculation_service.calculate(dto)

    record_calculation(completed=True)
    if response.split is not None:
        record_split(response.split.remainder_cents)

    return CalculationResponseSchema(
        bill=response.bill,
        tip_percent=response.tip_percent,
        tip_amount=response.tip_amount,
        subtotal=response.subtotal,
        round_mode=response.round_mode,
        total=response.total,
        total_formatted=response.total_formatted,
        split=None if response.split is None else SplitSchema(
            per_person=response.split.per_person,
            remainder_cents=response.split.remainder_cents,
            split_count=response.split.split_count,
            distribution=response.split.distribution,
            shares=response.split.shares,
        ),
        warnings=response.warnings,
        tip_capped=response.tip_capped,
    )
