"""Application-level exception types.

Every failure that can reach a client is one of these. Each carries a
user-facing ``title``/``message`` pair so the HTTP layer can render it as an
``AnalysisError`` without inspecting the cause.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TypedDict

from screener.schemas.analysis import AnalysisError


class ErrorDetails(TypedDict, total=False):
    """Structured error context for observability and clients."""

    hint: str
    provider: str
    model: str
    file_count: int
    cause: str
    context: dict[str, Any]


@dataclass
class AppError(Exception):
    """Base error for application/domain failures.

    Attributes:
        code: Stable, machine-readable error code.
        message: Human-readable error message.
        details: Optional structured details for debugging/observability.
        title: Short heading shown above the message.
    """

    code: str
    message: str
    details: ErrorDetails | None = None
    title: str = "Error"

    def __post_init__(self) -> None:
        super().__init__(self.message)

    def to_analysis_error(self) -> AnalysisError:
        return AnalysisError(title=self.title, message=self.message)


class ValidationAppError(AppError):
    """Raised when input/config validation fails."""


class LLMAppError(AppError):
    """Raised when the remote model call or its response fails."""


class ConflictAppError(AppError):
    """Raised when an analysis is already running for the same client."""
