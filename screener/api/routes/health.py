from __future__ import annotations

from fastapi import APIRouter, Request

router = APIRouter(tags=["Health"])


@router.get("/health")
def health_check(request: Request) -> dict:
    """Liveness check; also reports which model the service is wired to."""
    service = getattr(request.app.state, "analysis_service", None)
    model = getattr(getattr(service, "llm", None), "model", None)
    return {"status": "ok", "model": model}
