"""
Tippr - Main Application Entry Point

A tip calculation and bill-splitting service. Every endpoint is a thin,
stateless adapter over the pure engine in tippr.service.calculator.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

import structlog
from fastapi import FastAPI, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import RedirectResponse

from tippr import __version__
from tippr.core.config import settings
from tippr.core.logging import setup_logging
from tippr.core.metrics import get_metrics, get_metrics_content_type
from tippr.presentation.api import api_router
from tippr.presentation.middleware import (
    LoggingMiddleware,
    RequestContextMiddleware,
    error_handler_middleware,
)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan manager.

    Sets up logging on startup and logs shutdown.
    """
    setup_logging()

    logger = structlog.get_logger(__name__)
    logger.info("application_started", version=__version__)

    yield

    logger.info("application_stopped")


app = FastAPI(
    title="Tippr",
    description="Tip Calculation & Bill-Splitting Service",
    version=__version__,
    debug=settings.debug,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_allow_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(LoggingMiddleware)
app.add_middleware(RequestContextMiddleware)

error_handler_middleware(app)

app.include_router(api_router)


@app.get("/metrics", include_in_schema=False)
async def metrics() -> Response:
    """Prometheus metrics endpoint."""
    return Response(
        content=get_metrics(),
        media_type=get_metrics_content_type(),
    )


@app.get("/", include_in_schema=False)
async def root():
    """Redirect to API documentation."""

    return RedirectResponse(url="/docs")
