"""One-analysis-at-a-time guard for each browser client.

The browser disables its Analyze button while a request is outstanding; this
is the server-side counterpart. A second submission from the same client is
rejected, not queued.

Client key: the configured client id header (default X-Client-ID), falling
back to the client host.
"""

from __future__ import annotations

import hashlib
import logging
import threading
from typing import AsyncIterator

from fastapi import Request

from screener.core.config import settings
from screener.core.errors import ConflictAppError

logger = logging.getLogger(__name__)


class InFlightGuard:
    """Set of client keys with an analysis currently running.

    Per-process only; with several workers each keeps its own set.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._active: set[str] = set()

    def try_acquire(self, key: str) -> bool:
        if not key:
            raise ValueError("key must be a non-empty string")
        with self._lock:
            if key in self._active:
                return False
            self._active.add(key)
            return True

    def release(self, key: str) -> None:
        with self._lock:
            self._active.discard(key)


_guard = InFlightGuard()


def get_in_flight_guard() -> InFlightGuard:
    return _guard


def _build_client_key(request: Request) -> str:
    client_id = request.headers.get(settings.app.client_id_header)
    if client_id:
        return f"client:{client_id}"
    client_host = request.client.host if request.client else "unknown"
    return f"ip:{client_host}"


def _hash_key(key: str) -> str:
    return hashlib.sha256(key.encode()).hexdigest()[:16]


async def hold_analysis_slot(request: Request) -> AsyncIterator[None]:
    """FastAPI dependency holding the client's slot for the request's lifetime.

    Raises:
        ConflictAppError: An analysis for this client is already running.
    """
    if not settings.app.in_flight_guard_enabled:
        yield
        return

    guard = get_in_flight_guard()
    key = _build_client_key(request)
    if not guard.try_acquire(key):
        logger.warning("in_flight.rejected", extra={"key_hash": _hash_key(key)})
        raise ConflictAppError(
            code="analysis_in_progress",
            title="Analysis In Progress",
            message="An analysis is already running. Please wait for it to finish.",
        )

    try:
        yield
    finally:
        guard.release(key)
