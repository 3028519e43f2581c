"""Version 1 of the Tippr API."""

from .health import health_router
from .router import router as v1_router

__all__ = ["health_router", "v1_router"]
