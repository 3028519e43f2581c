"""Prometheus metrics for the Tippr service.

Metrics are organized into two categories:

Business Metrics (for Product):
- tippr_calculation_total: Full calculations by outcome
- tippr_validation_total: Field validations by field and outcome
- tippr_split_total: Splits by kind (even/uneven)

Technical Metrics (for Engineering/SRE):
- tippr_calculation_latency_seconds: Calculation latency
- tippr_http_requests_total: HTTP requests by endpoint/status
- tippr_http_request_latency_seconds: HTTP latency by endpoint
"""

import time
from contextlib import contextmanager
from typing import Generator

from prometheus_client import Counter, Histogram, REGISTRY, generate_latest
from prometheus_client.exposition import CONTENT_TYPE_LATEST


# =============================================================================
# Business Metrics (Product dashboards)
# =============================================================================

calculation_total = Counter(
    "tippr_calculation_total",
    "Total number of full tip calculations",
    ["outcome"],  # completed, rejected
)

validation_total = Counter(
    "tippr_validation_total",
    "Total number of field validations",
    ["field", "outcome"],  # field: bill, tip; outcome: valid, warning, capped, rejected
)

split_total = Counter(
    "tippr_split_total",
    "Total number of splits calculated",
    ["kind"],  # even, uneven
)


# =============================================================================
# Technical Metrics (Engineering/SRE dashboards)
# =============================================================================

calculation_latency = Histogram(
    "tippr_calculation_latency_seconds",
    "Calculation latency in seconds",
    buckets=[0.0005, 0.001, 0.0025, 0.005, 0.01, 0.025, 0.05, 0.1],
)

http_requests_total = Counter(
    "tippr_http_requests_total",
    "Total HTTP requests by endpoint and status",
    ["method", "endpoint", "status"],
)

http_request_latency = Histogram(
    "tippr_http_request_latency_seconds",
    "HTTP request latency by endpoint",
    ["method", "endpoint"],
    buckets=[0.001, 0.005, 0.01, 0.05, 0.1, 0.25, 0.5, 1.0],
)


# =============================================================================
# Helper Functions
# =============================================================================

def record_calculation(completed: bool) -> None:
    """Record a full calculation in metrics."""
    outcome = "completed" if completed else "rejected"
    calculation_total.labels(outcome=outcome).inc()


def record_validation(field: str, is_valid: bool, warning: bool = False, capped: bool = False) -> None:
    """Record a field validation outcome."""
    if not is_valid:
        outcome = "rejected"
    elif capped:
        outcome = "capped"
    elif warning:
        outcome = "warning"
    else:
        outcome = "valid"
    validation_total.labels(field=field, outcome=outcome).inc()


def record_split(remainder_cents: int) -> None:
    """Record a split, labelled by whether it divided evenly."""
    split_total.labels(kind="even" if remainder_cents == 0 else "uneven").inc()


@contextmanager
def track_calculation_latency() -> Generator[None, None, None]:
    """Context manager to track calculation latency."""
    start = time.perf_counter()
    try:
        yield
    finally:
        duration = time.perf_counter() - start
        calculation_latency.observe(duration)


def record_http_request(method: str, endpoint: str, status: int, duration: float) -> None:
    """Record an HTTP request."""
    http_requests_total.labels(method=method, endpoint=endpoint, status=str(status)).inc()
    http_request_latency.labels(method=method, endpoint=endpoint).observe(duration)


def get_metrics() -> bytes:
    """Get current metrics in Prometheus format."""
    return generate_latest(REGISTRY)


def get_metrics_content_type() -> str:
    """Get the content type for metrics response."""
    return CONTENT_TYPE_LATEST
