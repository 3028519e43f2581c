from fastapi import APIRouter

from .calculation import calculation_router
from .split import split_router
from .validation import validation_router

router = APIRouter()

router.include_router(calculation_router, tags=["Calculations"])
router.include_router(validation_router, tags=["Validation"])
router.include_router(split_router, tags=["Splits"])
