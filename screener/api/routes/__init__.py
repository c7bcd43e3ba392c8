from __future__ import annotations

from screener.api.routes.health import router as health_router
from screener.api.routes.screening import router as screening_router

__all__ = ["health_router", "screening_router"]
