"""Split API endpoint."""

from typing import Annotated

from fastapi import APIRouter, Depends

from tippr.application.services import CalculationService
from tippr.core.dependencies import get_calculation_service
from tippr.core.metrics import record_split
from tippr.service.calculator import round2
from tippr.presentation.schemas import (
    ErrorResponseSchema,
    SplitRequestSchema,
    SplitResponseSchema,
)

split_router = APIRouter(
    prefix="/split",
    responses={
        400: {"model": ErrorResponseSchema, "description": "Invalid split request"},
    },
)


@split_router.post(
    "",
    response_model=SplitResponseSchema,
    summary="Split a Total",
    description="""Split a total between 1-50 people, distributing leftover cents fairly""",
)
async def create_split(
    request: SplitRequestSchema,
    calculation_service: Annotated[CalculationService, Depends(get_calculation_service)],
) -> SplitResponseSchema:
    """
    Split a total between participants.

    Leftover cents go one each to as few people as possible.
    """
    result = calculation_service.split(request.total, request.split_count)
    record_split(result.remainder_cents)

    return SplitResponseSchema(
        total=round2(request.total),
        per_person=result.per_person,
        remainder_cents=result.remainder_cents,
        split_count=result.split_count,
        distribution=result.distribution,
        shares=result.shares(),
    )
