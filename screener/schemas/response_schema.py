"""JSON schema handed to the model to constrain its output shape."""

from __future__ import annotations

import copy
from typing import Any

from screener.schemas.analysis import RECOMMENDATIONS

ENVELOPE_KEY = "candidates"

REQUIRED_FIELDS: tuple[str, ...] = (
    "position",
    "candidateName",
    "score",
    "summary",
    "strengths",
    "gaps",
    "recommendation",
)

_CANDIDATE_SCHEMA: dict[str, Any] = {
    "type": "object",
    "properties": {
        "position": {
            "type": "integer",
            "description": "The rank of the candidate, starting from 1.",
        },
        "candidateName": {
            "type": "string",
            "description": (
                "The candidate's name, derived from the file name "
                "(e.g., 'John_Doe_CV.pdf' becomes 'John Doe')."
            ),
        },
        "score": {
            "type": "integer",
            "description": "A score from 0-100 indicating the candidate's match to the job description.",
        },
        "summary": {
            "type": "string",
            "description": "A concise 2-3 sentence summary of the candidate's profile and fit for the role.",
        },
        "strengths": {
            "type": "array",
            "items": {"type": "string"},
            "description": "A list of key strengths and qualifications that align with the job.",
        },
        "gaps": {
            "type": "array",
            "items": {"type": "string"},
            "description": "A list of notable gaps or areas where the candidate falls short.",
        },
        "recommendation": {
            "type": "string",
            "enum": list(RECOMMENDATIONS),
            "description": (
                "A final recommendation: 'Recommend for Interview', "
                "'Consider for Other Roles', or 'Not a Good Fit'."
            ),
        },
    },
    "required": list(REQUIRED_FIELDS),
    "additionalProperties": False,
}


def build_response_schema() -> dict[str, Any]:
    """Return the schema of the candidate array (a fresh copy each call)."""
    return {
        "type": "array",
        "items": copy.deepcopy(_CANDIDATE_SCHEMA),
    }


def build_envelope_schema(items_schema: dict[str, Any] | None = None) -> dict[str, Any]:
    """Wrap an array schema in an object under ``candidates``.

    Structured-output modes that only accept an object at the top level get
    ``{"candidates": [...]}`` instead of a bare array. Defaults to the
    candidate array.
    """
    return {
        "type": "object",
        "properties": {ENVELOPE_KEY: items_schema or build_response_schema()},
        "required": [ENVELOPE_KEY],
        "additionalProperties": False,
    }
