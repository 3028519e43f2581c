"""
Fixtures for integration tests.

Provides:
- Test client for the FastAPI app
- A client wired to custom calculator settings
- Common request bodies
"""

from decimal import Decimal
from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from tippr.main import app
from tippr.core.dependencies import get_engine_settings
from tippr.service.calculator import CalculatorSettings


# =============================================================================
# App Client Fixtures
# =============================================================================

@pytest_asyncio.fixture
async def client() -> AsyncGenerator[AsyncClient, None]:
    """Create a test client for the app with default settings."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def strict_settings() -> CalculatorSettings:
    """Calculator settings with low limits."""
    return CalculatorSettings(
        large_amount_threshold=Decimal("100"),
        max_bill_amount=Decimal("500"),
        max_split_count=5,
        tip_presets_json="[10, 12.5]",
    )


@pytest_asyncio.fixture
async def strict_client(
    strict_settings: CalculatorSettings,
) -> AsyncGenerator[AsyncClient, None]:
    """Create a test client whose engine uses strict_settings."""
    app.dependency_overrides[get_engine_settings] = lambda: strict_settings

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


# =============================================================================
# Helper Fixtures
# =============================================================================

@pytest.fixture
def even_split_request() -> dict:
    """45.00 with a 20% tip, rounded up, split four ways."""
    return {
        "bill_amount": "45.00",
        "tip_percent": "20",
        "round_mode": "up",
        "split_count": 4,
    }


@pytest.fixture
def uneven_split_request() -> dict:
    """50.00 with an 18% tip, split three ways."""
    return {
        "bill_amount": "50.00",
        "tip_percent": "18",
        "split_count": 3,
    }
