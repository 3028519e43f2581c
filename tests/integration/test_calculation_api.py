"""
Integration tests for the Calculation API endpoints.

These tests verify:
1. POST /v1/calculation - Full tip calculation
2. POST /v1/validation/bill and /v1/validation/tip - Field validation
3. POST /v1/split - Penny-exact splits
4. Health check and request tracing headers
"""

import pytest
from httpx import AsyncClient


# =============================================================================
# POST /v1/calculation Tests
# =============================================================================

class TestCreateCalculation:
    """Tests for POST /v1/calculation endpoint."""

    @pytest.mark.asyncio
    async def test_even_split(
        self,
        client: AsyncClient,
        even_split_request: dict,
    ):
        """45.00 + 20% = 54.00, which splits evenly four ways."""
        response = await client.post("/v1/calculation", json=even_split_request)

        assert response.status_code == 200

        data = response.json()
        assert data["bill"] == "45.00"
        assert data["tip_amount"] == "9.00"
        assert data["subtotal"] == "54.00"
        assert data["total"] == "54.00"
        assert data["round_mode"] == "up"
        assert data["warnings"] == []
        assert data["tip_capped"] is False

        split = data["split"]
        assert split["per_person"] == "13.50"
        assert split["remainder_cents"] == 0
        assert split["distribution"] == ""
        assert split["shares"] == ["13.50"] * 4

    @pytest.mark.asyncio
    async def test_uneven_split(
        self,
        client: AsyncClient,
        uneven_split_request: dict,
    ):
        """59.00 split three ways leaves two pennies for two people."""
        response = await client.post("/v1/calculation", json=uneven_split_request)

        assert response.status_code == 200

        data = response.json()
        assert data["total"] == "59.00"
        assert data["round_mode"] == "none"

        split = data["split"]
        assert split["per_person"] == "19.66"
        assert split["remainder_cents"] == 2
        assert split["distribution"] == "1 pays $19.66, 2 pay $19.67"
        assert split["shares"] == ["19.67", "19.67", "19.66"]

    @pytest.mark.asyncio
    async def test_no_split(self, client: AsyncClient):
        response = await client.post(
            "/v1/calculation",
            json={"bill_amount": "100", "tip_percent": "15"},
        )

        assert response.status_code == 200
        assert response.json()["split"] is None
        assert response.json()["total"] == "115.00"

    @pytest.mark.asyncio
    async def test_warnings_and_capped_tip(self, client: AsyncClient):
        """Large bills and capped tips are reported but not rejected."""
        response = await client.post(
            "/v1/calculation",
            json={"bill_amount": "$12,500", "tip_percent": "150"},
        )

        assert response.status_code == 200

        data = response.json()
        assert data["tip_percent"] == "100.00"
        assert data["tip_capped"] is True
        assert data["total"] == "25000.00"
        assert data["total_formatted"] == "25,000.00"
        assert data["warnings"] == [
            "That's a large amount - continue?",
            "Maximum tip is 100%",
        ]

    @pytest.mark.asyncio
    async def test_card_number_rejected(self, client: AsyncClient):
        response = await client.post(
            "/v1/calculation",
            json={"bill_amount": "4111111111111111", "tip_percent": "18"},
        )

        assert response.status_code == 400

        data = response.json()
        assert data["error"] == "INVALID_BILL_AMOUNT"
        assert data["message"] == "Please enter a valid bill amount"
        assert data["request_id"]

    @pytest.mark.asyncio
    async def test_oversized_bill_rejected(self, client: AsyncClient):
        response = await client.post(
            "/v1/calculation",
            json={"bill_amount": "1000000.01", "tip_percent": "18"},
        )

        assert response.status_code == 400
        assert response.json()["error"] == "INVALID_BILL_AMOUNT"

    @pytest.mark.asyncio
    async def test_empty_tip_rejected(self, client: AsyncClient):
        response = await client.post(
            "/v1/calculation",
            json={"bill_amount": "45.00", "tip_percent": ""},
        )

        assert response.status_code == 400

        data = response.json()
        assert data["error"] == "INVALID_TIP_PERCENT"
        assert data["message"] == "Please enter a valid tip percentage"

    @pytest.mark.asyncio
    async def test_unknown_round_mode_is_422(self, client: AsyncClient):
        response = await client.post(
            "/v1/calculation",
            json={"bill_amount": "45.00", "tip_percent": "18", "round_mode": "sideways"},
        )

        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_zero_split_count_is_422(self, client: AsyncClient):
        response = await client.post(
            "/v1/calculation",
            json={"bill_amount": "45.00", "tip_percent": "18", "split_count": 0},
        )

        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_custom_settings(self, strict_client: AsyncClient):
        """Engine limits come from the injected settings."""
        response = await strict_client.post(
            "/v1/calculation",
            json={"bill_amount": "200", "tip_percent": "10", "split_count": 20},
        )

        assert response.status_code == 200

        data = response.json()
        assert data["warnings"] == ["That's a large amount - continue?"]
        assert data["split"]["split_count"] == 5

        response = await strict_client.post(
            "/v1/calculation",
            json={"bill_amount": "600", "tip_percent": "10"},
        )
        assert response.status_code == 400


# =============================================================================
# Validation Endpoint Tests
# =============================================================================

class TestValidation:
    """Tests for POST /v1/validation/* endpoints."""

    @pytest.mark.asyncio
    async def test_bill_valid(self, client: AsyncClient):
        response = await client.post("/v1/validation/bill", json={"value": "$1,234.56"})

        assert response.status_code == 200
        assert response.json() == {
            "is_valid": True,
            "sanitized": "1234.56",
            "warning": None,
            "error": None,
            "capped": False,
        }

    @pytest.mark.asyncio
    async def test_bill_rejection_is_data(self, client: AsyncClient):
        """A rejected bill is a 200 with is_valid false, not an HTTP error."""
        response = await client.post("/v1/validation/bill", json={"value": "1000000.01"})

        assert response.status_code == 200

        data = response.json()
        assert data["is_valid"] is False
        assert data["sanitized"] == "0.00"
        assert data["error"] == "Please enter a valid bill amount"

    @pytest.mark.asyncio
    async def test_bill_empty_is_valid(self, client: AsyncClient):
        response = await client.post("/v1/validation/bill", json={"value": ""})

        assert response.status_code == 200
        assert response.json()["is_valid"] is True
        assert response.json()["sanitized"] == "0.00"

    @pytest.mark.asyncio
    async def test_tip_capped(self, client: AsyncClient):
        response = await client.post("/v1/validation/tip", json={"value": "100.01"})

        assert response.status_code == 200

        data = response.json()
        assert data["is_valid"] is True
        assert data["capped"] is True
        assert data["sanitized"] == "100.00"
        assert data["warning"] == "Maximum tip is 100%"

    @pytest.mark.asyncio
    async def test_tip_at_cap(self, client: AsyncClient):
        response = await client.post("/v1/validation/tip", json={"value": "100"})

        assert response.json()["capped"] is False

    @pytest.mark.asyncio
    async def test_long_paste_is_rejected_as_data(self, client: AsyncClient):
        """A long pasted string is a rejected bill, not a 422."""
        response = await client.post(
            "/v1/validation/bill",
            json={"value": "Card: 4111 1111 1111 1111, exp 12/29, cvv 123, name on card J SMITH, zip 90210"},
        )

        assert response.status_code == 200
        assert response.json()["is_valid"] is False
        assert response.json()["error"] == "Please enter a valid bill amount"

    @pytest.mark.asyncio
    async def test_tip_presets(self, client: AsyncClient):
        response = await client.get("/v1/validation/tip/presets")

        assert response.status_code == 200
        assert response.json() == {
            "presets": ["15", "18", "20", "25"],
            "default_tip_percent": "18",
            "max_tip_percent": "100",
        }

    @pytest.mark.asyncio
    async def test_tip_presets_follow_settings(self, strict_client: AsyncClient):
        response = await strict_client.get("/v1/validation/tip/presets")

        assert response.json()["presets"] == ["10", "12.5"]


# =============================================================================
# Split Endpoint Tests
# =============================================================================

class TestSplit:
    """Tests for POST /v1/split endpoint."""

    @pytest.mark.asyncio
    async def test_uneven_split(self, client: AsyncClient):
        response = await client.post("/v1/split", json={"total": "59.00", "split_count": 3})

        assert response.status_code == 200

        data = response.json()
        assert data["total"] == "59.00"
        assert data["per_person"] == "19.66"
        assert data["remainder_cents"] == 2
        assert data["shares"] == ["19.67", "19.67", "19.66"]

    @pytest.mark.asyncio
    async def test_fractional_count_floored(self, client: AsyncClient):
        response = await client.post("/v1/split", json={"total": "10", "split_count": 2.7})

        assert response.status_code == 200
        assert response.json()["split_count"] == 2
        assert response.json()["per_person"] == "5.00"

    @pytest.mark.asyncio
    async def test_count_clamped(self, client: AsyncClient):
        response = await client.post("/v1/split", json={"total": "10", "split_count": 0})
        assert response.json()["split_count"] == 1

        response = await client.post("/v1/split", json={"total": "10", "split_count": 99})
        assert response.json()["split_count"] == 50

    @pytest.mark.asyncio
    async def test_negative_total_is_422(self, client: AsyncClient):
        response = await client.post("/v1/split", json={"total": "-1", "split_count": 2})

        assert response.status_code == 422


# =============================================================================
# Health & Tracing Tests
# =============================================================================

class TestServiceEndpoints:
    """Tests for health and request tracing."""

    @pytest.mark.asyncio
    async def test_health(self, client: AsyncClient):
        response = await client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"
        assert response.json()["version"]

    @pytest.mark.asyncio
    async def test_request_id_echoed(self, client: AsyncClient):
        response = await client.get("/health", headers={"X-Request-ID": "test-123"})

        assert response.headers["X-Request-ID"] == "test-123"

    @pytest.mark.asyncio
    async def test_request_id_generated(self, client: AsyncClient):
        response = await client.get("/health")

        assert response.headers.get("X-Request-ID")
