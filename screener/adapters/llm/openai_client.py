"""OpenAI LLM client adapter."""

import logging
from typing import Any, Sequence

from openai import AsyncOpenAI, AuthenticationError

from screener.adapters.llm.base import AbstractLLMClient
from screener.core.errors import LLMAppError
from screener.schemas.response_schema import build_envelope_schema
from screener.services.file_encoder import EncodedFile
from screener.utils.docx_extractor import extract_text_from_docx_bytes

logger = logging.getLogger(__name__)

DOCX_MIME_TYPE = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"


def _to_object_schema(schema: dict[str, Any]) -> dict[str, Any]:
    """Structured outputs need an object at the top level; wrap bare arrays."""
    if schema.get("type") == "object":
        return schema
    return build_envelope_schema(schema)


def _file_to_content_part(part: EncodedFile) -> dict[str, Any]:
    """Map one encoded resume to a chat completion content part.

    PDFs (and anything we can't convert) travel as inline files; plain text
    and DOCX are sent as text because the endpoint only reads PDFs inline.
    """
    if part.mime_type.startswith("text/"):
        text = part.raw_bytes.decode("utf-8", errors="replace")
        return {"type": "text", "text": f"--- {part.file_name} ---\n{text}"}

    if part.mime_type == DOCX_MIME_TYPE:
        text, _meta = extract_text_from_docx_bytes(part.raw_bytes)
        return {"type": "text", "text": f"--- {part.file_name} ---\n{text}"}

    return {
        "type": "file",
        "file": {
            "filename": part.file_name,
            "file_data": f"data:{part.mime_type};base64,{part.data}",
        },
    }


class OpenAIClient(AbstractLLMClient):
    """Client for OpenAI chat completions with inline files and structured output.

    Uses the official OpenAI Python SDK with async support. No retries are
    attempted: the SDK's own retry count is pinned to zero.
    """

    # Inline file parts are PDF-only and legacy Word has no text converter here.
    unreadable_extensions = frozenset({".doc"})

    def __init__(
        self,
        api_key: str,
        model: str,
        base_url: str | None = None,
        timeout_seconds: float = 120.0,
    ) -> None:
        """Initialize OpenAI async client.

        Args:
            api_key: OpenAI API key for authentication.
            model: Model name (e.g., "gpt-4o", "gpt-4o-mini").
            base_url: Optional custom base URL for OpenAI API.
            timeout_seconds: Timeout for requests in seconds.
        """
        self.client = AsyncOpenAI(
            api_key=api_key,
            base_url=base_url,
            timeout=timeout_seconds,
            max_retries=0,
        )
        self.model = model

    def _build_messages(
        self, prompt: str, parts: Sequence[EncodedFile]
    ) -> list[dict[str, Any]]:
        content: list[dict[str, Any]] = [{"type": "text", "text": prompt}]
        content.extend(_file_to_content_part(part) for part in parts)
        return [
            {
                "role": "system",
                "content": "Output JSON only. No extra text or markdown formatting.",
            },
            {"role": "user", "content": content},
        ]

    async def generate_structured(
        self,
        prompt: str,
        *,
        parts: Sequence[EncodedFile] = (),
        schema: dict[str, Any] | None = None,
        temperature: float = 0.2,
    ) -> str:
        """Run one chat completion and return its text.

        Raises:
            LLMAppError: ``llm_invalid_api_key`` when the key is rejected,
                ``llm_provider_error`` for any other SDK failure.
        """
        request_params: dict[str, Any] = {
            "model": self.model,
            "messages": self._build_messages(prompt, parts),
            "temperature": temperature,
        }

        if schema is not None:
            request_params["response_format"] = {
                "type": "json_schema",
                "json_schema": {
                    "name": "candidate_rankings",
                    "schema": _to_object_schema(schema),
                    "strict": True,
                },
            }

        logger.info(
            "llm.request",
            extra={"model": self.model, "file_count": len(parts), "temperature": temperature},
        )

        try:
            response = await self.client.chat.completions.create(**request_params)
        except AuthenticationError as exc:
            raise LLMAppError(
                code="llm_invalid_api_key",
                message=f"OpenAI API error: {exc}",
                details={"provider": "openai", "model": self.model},
            ) from exc
        except Exception as exc:
            raise LLMAppError(
                code="llm_provider_error",
                message=f"OpenAI API error: {exc}",
                details={"provider": "openai", "model": self.model},
            ) from exc

        content = response.choices[0].message.content
        return (content or "").strip()
