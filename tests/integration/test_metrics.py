"""
Integration tests for metrics tracking.

These tests verify:
1. Metrics endpoint returns valid Prometheus format
2. Business metrics (calculations, validations, splits) are incremented
3. Technical metrics (latency) are recorded
"""

from typing import Dict, Optional

import pytest
from httpx import AsyncClient

from tippr.core.metrics import REGISTRY


def sample(name: str, labels: Optional[Dict[str, str]] = None) -> float:
    """Current value of a metric sample, 0 when it has not been recorded yet."""
    return REGISTRY.get_sample_value(name, labels or {}) or 0.0


# =============================================================================
# Metrics Endpoint Tests
# =============================================================================

class TestMetricsEndpoint:
    """Tests for GET /metrics endpoint."""

    @pytest.mark.asyncio
    async def test_metrics_endpoint_returns_200(
        self,
        client: AsyncClient,
    ):
        """The /metrics endpoint should return 200."""
        response = await client.get("/metrics")

        assert response.status_code == 200

    @pytest.mark.asyncio
    async def test_metrics_endpoint_returns_prometheus_format(
        self,
        client: AsyncClient,
    ):
        """The /metrics endpoint should return Prometheus text format."""
        response = await client.get("/metrics")

        content_type = response.headers.get("content-type", "")
        assert "text/plain" in content_type or "text/openmetrics" in content_type
        assert "# HELP" in response.text
        assert "# TYPE" in response.text

    @pytest.mark.asyncio
    async def test_metrics_include_custom_metrics(
        self,
        client: AsyncClient,
    ):
        """The /metrics endpoint should include Tippr-specific metrics."""
        content = (await client.get("/metrics")).text

        # Business metrics
        assert "tippr_calculation_total" in content
        assert "tippr_validation_total" in content
        assert "tippr_split_total" in content

        # Technical metrics
        assert "tippr_calculation_latency_seconds" in content


# =============================================================================
# Calculation Metrics Tests
# =============================================================================

class TestCalculationMetrics:
    """Tests for calculation-related metrics tracking."""

    @pytest.mark.asyncio
    async def test_completed_calculation_increments_counter(
        self,
        client: AsyncClient,
        uneven_split_request: dict,
    ):
        """Completed calculations should increment tippr_calculation_total{outcome="completed"}."""
        labels = {"outcome": "completed"}
        before = sample("tippr_calculation_total", labels)

        response = await client.post("/v1/calculation", json=uneven_split_request)
        assert response.status_code == 200

        assert sample("tippr_calculation_total", labels) == before + 1

    @pytest.mark.asyncio
    async def test_rejected_calculation_increments_counter(
        self,
        client: AsyncClient,
    ):
        """Rejected bills should increment tippr_calculation_total{outcome="rejected"}."""
        labels = {"outcome": "rejected"}
        before = sample("tippr_calculation_total", labels)

        response = await client.post("/v1/calculation", json={
            "bill_amount": "4111111111111111",
            "tip_percent": "18",
        })
        assert response.status_code == 400

        assert sample("tippr_calculation_total", labels) == before + 1

    @pytest.mark.asyncio
    async def test_calculation_latency_tracked(
        self,
        client: AsyncClient,
        even_split_request: dict,
    ):
        """Calculation latency should be recorded as a histogram."""
        before = sample("tippr_calculation_latency_seconds_count")

        response = await client.post("/v1/calculation", json=even_split_request)
        assert response.status_code == 200

        assert sample("tippr_calculation_latency_seconds_count") == before + 1


# =============================================================================
# Split Metrics Tests
# =============================================================================

class TestSplitMetrics:
    """Tests for split metrics tracking."""

    @pytest.mark.asyncio
    async def test_split_kinds_tracked(
        self,
        client: AsyncClient,
    ):
        """Even and uneven splits are counted separately."""
        even_before = sample("tippr_split_total", {"kind": "even"})
        uneven_before = sample("tippr_split_total", {"kind": "uneven"})

        await client.post("/v1/split", json={"total": "54.00", "split_count": 4})
        await client.post("/v1/split", json={"total": "59.00", "split_count": 3})

        assert sample("tippr_split_total", {"kind": "even"}) == even_before + 1
        assert sample("tippr_split_total", {"kind": "uneven"}) == uneven_before + 1

    @pytest.mark.asyncio
    async def test_calculation_without_split_not_counted(
        self,
        client: AsyncClient,
    ):
        before = sample("tippr_split_total", {"kind": "even"})

        await client.post("/v1/calculation", json={"bill_amount": "20", "tip_percent": "20"})

        assert sample("tippr_split_total", {"kind": "even"}) == before


# =============================================================================
# Validation Metrics Tests
# =============================================================================

class TestValidationMetrics:
    """Tests for field validation metrics."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "path,value,field,outcome",
        [
            ("/v1/validation/bill", "45.00", "bill", "valid"),
            ("/v1/validation/bill", "12345", "bill", "warning"),
            ("/v1/validation/bill", "4111111111111111", "bill", "rejected"),
            ("/v1/validation/tip", "150", "tip", "capped"),
            ("/v1/validation/tip", "", "tip", "rejected"),
        ],
    )
    async def test_validation_outcomes_tracked(
        self,
        client: AsyncClient,
        path: str,
        value: str,
        field: str,
        outcome: str,
    ):
        labels = {"field": field, "outcome": outcome}
        before = sample("tippr_validation_total", labels)

        response = await client.post(path, json={"value": value})
        assert response.status_code == 200

        assert sample("tippr_validation_total", labels) == before + 1
