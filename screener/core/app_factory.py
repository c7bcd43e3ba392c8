"""Application factory for the screening API.

Centralizes app construction (logging, model client, middleware, handlers,
routers) so tests can build an app around a fake model client.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI

from screener.adapters.llm.base import AbstractLLMClient
from screener.adapters.llm.factory import create_llm_client
from screener.api.routes import health_router, screening_router
from screener.core.config import settings
from screener.core.exception_handlers import setup_exception_handlers
from screener.core.logging import configure_logging
from screener.core.middleware import request_id_middleware
from screener.services.analysis_service import AnalysisService

logger = logging.getLogger(__name__)


def create_app(llm: AbstractLLMClient | None = None) -> FastAPI:
    """Create and configure the FastAPI application instance.

    Args:
        llm: Model client to use; built from settings when omitted.

    Returns:
        Configured FastAPI app.

    Raises:
        ValidationAppError: No API credential configured (startup is refused).
    """
    configure_logging(settings.log)

    if llm is None:
        llm = create_llm_client()

    app = FastAPI(
        title="Resume Screener API",
        description=(
            "Ranks a batch of up to ten resumes against a job description "
            "using a generative model. Returns score, summary, strengths, "
            "gaps and a recommendation per candidate."
        ),
        version="0.1.0",
        debug=settings.app.debug,
    )
    app.state.analysis_service = AnalysisService(llm=llm)

    app.middleware("http")(request_id_middleware)
    setup_exception_handlers(app)

    app.include_router(screening_router, prefix="/v1")
    app.include_router(health_router)

    logger.info(
        "app.created",
        extra={"provider": settings.llm.provider, "model": llm.model, "env": settings.app_env},
    )
    return app
