"""Global exception handlers rendering every failure as an AnalysisError body.

Response shape::

    {"error": {"code", "title", "message", "request_id", "details"?}}

- ValidationAppError → 400
- ConflictAppError → 409
- LLMAppError → 502 (the remote model failed us, not the client)
- RequestValidationError → 422 with a readable summary
- anything else → 500 with a generic message
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from screener.core.errors import AppError, ConflictAppError, LLMAppError
from screener.core.logging import get_request_id

logger = logging.getLogger(__name__)


def _status_for(exc: AppError) -> int:
    if isinstance(exc, ConflictAppError):
        return 409
    if isinstance(exc, LLMAppError):
        return 502
    return 400


def _error_response(
    status_code: int,
    *,
    code: str,
    title: str,
    message: str,
    details: dict | None = None,
) -> JSONResponse:
    content = {
        "code": code,
        "title": title,
        "message": message,
        "request_id": get_request_id(),
    }
    if details:
        content["details"] = details
    return JSONResponse(status_code=status_code, content={"error": content})


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    """Render a domain error with its title and message."""
    status_code = _status_for(exc)
    logger.warning(
        "app_error_handled",
        extra={
            "error_code": exc.code,
            "status_code": status_code,
            "has_details": bool(exc.details),
        },
    )
    analysis_error = exc.to_analysis_error()
    return _error_response(
        status_code,
        code=exc.code,
        title=analysis_error.title,
        message=analysis_error.message,
        details=dict(exc.details) if exc.details else None,
    )


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Summarise malformed form input (e.g. negative experience)."""
    fields = [".".join(str(p) for p in err.get("loc", ())) for err in exc.errors()]
    logger.info("request_validation_failed", extra={"fields": fields})
    return _error_response(
        422,
        code="invalid_request",
        title="Invalid Input",
        message="Some fields are missing or invalid: " + ", ".join(fields),
    )


async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Fallback for unexpected errors; never leaks internals to the client."""
    logger.error(
        "unhandled_exception",
        extra={
            "error_type": type(exc).__name__,
            "request_path": request.url.path,
            "request_method": request.method,
        },
        exc_info=exc,
    )
    return _error_response(
        500,
        code="internal_server_error",
        title="Analysis Failed",
        message=(
            "An unexpected error occurred while communicating with the AI. "
            "Please check your API key and network connection, then try again."
        ),
    )


def setup_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers with the app."""
    app.exception_handler(AppError)(app_error_handler)
    app.exception_handler(RequestValidationError)(request_validation_handler)
    app.exception_handler(Exception)(general_exception_handler)
