"""Resume screening orchestration.

Sequences one analysis run:
- Input checks (no remote work when the batch or description is missing)
- Concurrent file encoding and prompt assembly
- A single structured-output call to the remote model
- Response parsing, re-sorting by score and position renumbering
- Normalisation of every failure into a titled, user-readable error
"""

from __future__ import annotations

import json
import logging
from typing import Any, Callable, Sequence

from pydantic import ValidationError

from screener.adapters.llm.base import AbstractLLMClient
from screener.core.config import settings
from screener.core.errors import AppError, LLMAppError, ValidationAppError
from screener.schemas.analysis import Candidate, JobDescription
from screener.schemas.response_schema import ENVELOPE_KEY, build_response_schema
from screener.services.file_encoder import ResumeFile, encode_files
from screener.services.prompt_builder import build_full_prompt

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[float, str], None]

ANALYSIS_FAILED_TITLE = "Analysis Failed"
MISSING_INFORMATION_TITLE = "Missing Information"

MISSING_INFORMATION_MESSAGE = (
    "Please upload at least one resume and provide a job description "
    "before starting the analysis."
)
INVALID_API_KEY_MESSAGE = (
    "The provided API key is invalid. Please check your environment variables."
)
INVALID_FORMAT_MESSAGE = (
    "The AI returned an invalid response format. "
    "This may be a temporary issue. Please try again."
)

# Markers providers put in the failure text when the credential is rejected.
INVALID_KEY_MARKERS = ("API_KEY_INVALID", "invalid_api_key")


class ResponseFormatError(ValueError):
    """The model answered, but not with a parseable candidate list."""


def finalize_ranking(candidates: Sequence[Candidate]) -> list[Candidate]:
    """Sort by score descending and renumber positions from 1.

    The sort is stable: equal scores keep the order the model returned them
    in. Applying it to an already-ranked list returns an equal list.
    """
    ranked = sorted(candidates, key=lambda c: c.score, reverse=True)
    return [
        candidate.model_copy(update={"position": index})
        for index, candidate in enumerate(ranked, start=1)
    ]


def parse_candidates(text: str) -> list[Candidate]:
    """Parse the model's raw answer into candidate records.

    Accepts a bare JSON array or an object holding the array under
    ``candidates``.

    Raises:
        ResponseFormatError: If the text is not JSON or not candidate-shaped.
    """
    try:
        payload: Any = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ResponseFormatError(f"response is not valid JSON: {exc}") from exc

    if isinstance(payload, dict) and ENVELOPE_KEY in payload:
        payload = payload[ENVELOPE_KEY]

    if not isinstance(payload, list):
        raise ResponseFormatError(
            f"expected a JSON array of candidates, got {type(payload).__name__}"
        )

    try:
        return [Candidate.model_validate(item) for item in payload]
    except ValidationError as exc:
        raise ResponseFormatError(
            f"candidate entry does not match schema: {exc.error_count()} error(s)"
        ) from exc


def _is_invalid_credential(exc: BaseException) -> bool:
    if isinstance(exc, LLMAppError) and exc.code == "llm_invalid_api_key":
        return True
    text = str(exc)
    return any(marker in text for marker in INVALID_KEY_MARKERS)


def _normalize_failure(exc: Exception) -> AppError:
    """Map any failure of the remote/parse stage to a user-facing error."""
    if _is_invalid_credential(exc):
        return LLMAppError(
            code="llm_invalid_api_key",
            title=ANALYSIS_FAILED_TITLE,
            message=INVALID_API_KEY_MESSAGE,
        )
    if isinstance(exc, ResponseFormatError):
        return LLMAppError(
            code="llm_invalid_response",
            title=ANALYSIS_FAILED_TITLE,
            message=INVALID_FORMAT_MESSAGE,
            details={"cause": str(exc)},
        )
    underlying = exc.message if isinstance(exc, AppError) else str(exc)
    return LLMAppError(
        code="llm_call_failed",
        title=ANALYSIS_FAILED_TITLE,
        message=f"An error occurred during AI analysis: {underlying}",
    )


class AnalysisService:
    """Ranks a batch of resumes against one job description.

    Attributes:
        llm: Remote model adapter.
        temperature: Decoding temperature passed on every call.
    """

    def __init__(self, llm: AbstractLLMClient, temperature: float | None = None) -> None:
        self.llm = llm
        self.temperature = (
            settings.llm.temperature if temperature is None else temperature
        )

    @staticmethod
    def _validate_inputs(job: JobDescription, resumes: Sequence[ResumeFile]) -> None:
        if not resumes or not job.description.strip():
            raise ValidationAppError(
                code="missing_information",
                title=MISSING_INFORMATION_TITLE,
                message=MISSING_INFORMATION_MESSAGE,
                details={"file_count": len(resumes)},
            )

    async def analyze(
        self,
        job: JobDescription,
        resumes: Sequence[ResumeFile],
        on_progress: ProgressCallback | None = None,
    ) -> list[Candidate]:
        """Score and rank resumes against the job description.

        Args:
            job: Hiring criteria.
            resumes: Uploaded files, in the order the user added them.
            on_progress: Optional ``(fraction, message)`` callback invoked at
                10%, 40%, 80% and 100%.

        Returns:
            Candidates ordered by score with positions 1..N.

        Raises:
            ValidationAppError: Missing resumes or blank description.
            LLMAppError: Any encoding, remote or parsing failure, normalised.
        """

        def report(fraction: float, message: str) -> None:
            logger.info(
                "analysis.progress",
                extra={"progress": fraction, "progress_message": message},
            )
            if on_progress is not None:
                on_progress(fraction, message)

        self._validate_inputs(job, resumes)

        try:
            report(0.1, "Building prompt and converting files...")
            parts = await encode_files(resumes)
            prompt = build_full_prompt(job, [part.file_name for part in parts])

            report(0.4, "Sending request to AI model...")
            raw_text = await self.llm.generate_structured(
                prompt,
                parts=parts,
                schema=build_response_schema(),
                temperature=self.temperature,
            )

            report(0.8, "Parsing AI response...")
            candidates = finalize_ranking(parse_candidates(raw_text))
        except Exception as exc:
            error = _normalize_failure(exc)
            logger.warning(
                "analysis.failed",
                extra={
                    "error_code": error.code,
                    "error_type": type(exc).__name__,
                    "file_count": len(resumes),
                },
            )
            raise error from exc

        report(1.0, "Analysis complete!")
        logger.info(
            "analysis.completed",
            extra={"file_count": len(resumes), "candidate_count": len(candidates)},
        )
        return candidates
