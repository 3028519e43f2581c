"""Error handling middleware and exception handlers."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
import structlog

from tippr.core.metrics import record_calculation
from tippr.domain.exceptions import (
    DomainException,
    InvalidBillAmountException,
    InvalidTipPercentException,
)
from .request_context import get_request_id

logger = structlog.get_logger(__name__)


def error_handler_middleware(app: FastAPI) -> None:
    """
    Register exception handlers with the FastAPI app.

    Maps domain exceptions to appropriate HTTP responses.
    """

    @app.exception_handler(InvalidBillAmountException)
    async def invalid_bill_handler(
        request: Request,
        exc: InvalidBillAmountException,
    ) -> JSONResponse:
        """Handle rejected bill amounts."""
        record_calculation(completed=False)
        return JSONResponse(
            status_code=400,
            content=exc.to_response(get_request_id()),
        )

    @app.exception_handler(InvalidTipPercentException)
    async def invalid_tip_handler(
        request: Request,
        exc: InvalidTipPercentException,
    ) -> JSONResponse:
        """Handle rejected tip percentages."""
        record_calculation(completed=False)
        return JSONResponse(
            status_code=400,
            content=exc.to_response(get_request_id()),
        )

    @app.exception_handler(DomainException)
    async def domain_exception_handler(
        request: Request,
        exc: DomainException,
    ) -> JSONResponse:
        """Handle generic domain exceptions."""
        logger.warning(
            "domain_exception",
            request_id=get_request_id(),
            code=exc.code,
            message=exc.message,
        )
        return JSONResponse(
            status_code=400,
            content=exc.to_response(get_request_id()),
        )

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """Handle unexpected exceptions."""
        logger.exception(
            "unhandled_exception",
            request_id=get_request_id(),
            error=str(exc),
            error_type=type(exc).__name__,
        )
        return JSONResponse(
            status_code=500,
            content={
                "error": "INTERNAL_ERROR",
                "message": "An unexpected error occurred.",
                "request_id": get_request_id(),
            },
        )
