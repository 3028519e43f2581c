"""Validation API endpoints.

Rejected input is a normal 200 response here: the result carries
is_valid/error so a client can validate on every keystroke. Only a body
that is not a `{"value": str}` object, or whose value exceeds the schema's
length limit, is refused with 422.
"""

from typing import Annotated

from fastapi import APIRouter, Depends

from tippr.application.services import CalculationService
from tippr.core.dependencies import get_calculation_service, get_engine_settings
from tippr.core.metrics import record_validation
from tippr.presentation.schemas import (
    TipPresetsSchema,
    ValidationRequestSchema,
    ValidationResultSchema,
)
from tippr.service.calculator import CalculatorSettings

validation_router = APIRouter(
    prefix="/validation",
    responses={
        422: {"description": "Malformed body, or value longer than 256 characters"},
    },
)


@validation_router.post(
    "/bill",
    response_model=ValidationResultSchema,
    summary="Validate Bill Amount",
    description="Sanitize and validate a raw bill amount.",
)
async def validate_bill(
    request: ValidationRequestSchema,
    calculation_service: Annotated[CalculationService, Depends(get_calculation_service)],
) -> ValidationResultSchema:
    result = calculation_service.validate_bill(request.value)
    record_validation("bill", result.is_valid, warning=result.warning is not None)
    return ValidationResultSchema(**result.to_dict())


@validation_router.post(
    "/tip",
    response_model=ValidationResultSchema,
    summary="Validate Tip Percentage",
    description="Sanitize and validate a raw tip percentage (capped at the maximum).",
)
async def validate_tip(
    request: ValidationRequestSchema,
    calculation_service: Annotated[CalculationService, Depends(get_calculation_service)],
) -> ValidationResultSchema:
    result = calculation_service.validate_tip(request.value)
    record_validation("tip", result.is_valid, capped=result.capped)
    return ValidationResultSchema(**result.to_dict())


@validation_router.get(
    "/tip/presets",
    response_model=TipPresetsSchema,
    summary="Tip Presets",
    description="Preset tip percentages, the default tip and the tip cap.",
)
async def get_tip_presets(
    engine_settings: Annotated[CalculatorSettings, Depends(get_engine_settings)],
) -> TipPresetsSchema:
    return TipPresetsSchema(
        presets=engine_settings.tip_presets,
        default_tip_percent=engine_settings.default_tip_percent,
        max_tip_percent=engine_settings.max_tip_percent,
    )
