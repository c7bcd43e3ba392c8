"""Test doubles for the remote model and uploaded files."""

import json
from typing import Any, Sequence

from screener.adapters.llm.base import AbstractLLMClient
from screener.services.file_encoder import EncodedFile


class FakeLLMClient(AbstractLLMClient):
    """Deterministic stand-in for the remote model.

    Returns ``response`` (serialised to JSON unless already a string) or
    raises ``error``; every call is recorded.
    """

    def __init__(
        self,
        response: Any = None,
        error: Exception | None = None,
        unreadable_extensions: frozenset[str] = frozenset(),
    ) -> None:
        self.model = "fake-model"
        self.unreadable_extensions = unreadable_extensions
        self.response = response if response is not None else []
        self.error = error
        self.calls: list[dict[str, Any]] = []

    async def generate_structured(
        self,
        prompt: str,
        *,
        parts: Sequence[EncodedFile] = (),
        schema: dict[str, Any] | None = None,
        temperature: float = 0.2,
    ) -> str:
        self.calls.append(
            {"prompt": prompt, "parts": list(parts), "schema": schema, "temperature": temperature}
        )
        if self.error is not None:
            raise self.error
        if isinstance(self.response, str):
            return self.response
        return json.dumps(self.response)


class FakeUpload:
    """Minimal upload: filename, content_type and an async read()."""

    def __init__(
        self,
        filename: str,
        content: bytes = b"resume",
        content_type: str | None = "application/pdf",
        error: Exception | None = None,
    ) -> None:
        self.filename = filename
        self.content_type = content_type
        self.content = content
        self.error = error

    async def read(self) -> bytes:
        if self.error is not None:
            raise self.error
        return self.content


def make_candidate(name: str, score: int, position: int = 1, **overrides: Any) -> dict[str, Any]:
    """Candidate dict in the wire (camelCase) shape the model returns."""
    candidate = {
        "position": position,
        "candidateName": name,
        "score": score,
        "summary": f"{name} has relevant backend experience.",
        "strengths": ["SQL", "API design"],
        "gaps": ["No Kubernetes"],
        "recommendation": "Recommend for Interview" if score >= 70 else "Not a Good Fit",
    }
    candidate.update(overrides)
    return candidate
