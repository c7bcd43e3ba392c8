"""Pydantic schemas for resume screening requests and results.

Field names are snake_case in Python and camelCase on the wire, matching the
shape the remote model is asked to produce.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

Recommendation = Literal[
    "Recommend for Interview",
    "Consider for Other Roles",
    "Not a Good Fit",
]

RECOMMENDATIONS: tuple[str, ...] = (
    "Recommend for Interview",
    "Consider for Other Roles",
    "Not a Good Fit",
)

SortKey = Literal["score", "candidateName"]
SortDirection = Literal["asc", "desc"]


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class JobDescription(_CamelModel):
    """Hiring criteria the resumes are compared against."""

    title: str = Field("", description="Job title, e.g. 'Senior Frontend Developer'.")
    description: str = Field("", description="Full free-text job description.")
    required_skills: str = Field(
        "",
        description="Comma-separated required skills (free text, not parsed).",
    )
    desirable_skills: str = Field(
        "",
        description="Comma-separated desirable skills (free text, not parsed).",
    )
    experience: int = Field(
        0,
        ge=0,
        description="Minimum years of experience.",
    )


class Candidate(_CamelModel):
    """Assessment of one resume, as produced by the remote model."""

    position: int = Field(..., description="1-based rank after sorting by score.")
    candidate_name: str = Field(
        ...,
        description="Candidate name derived from the resume file name.",
    )
    score: int = Field(..., ge=0, le=100, description="Match score from 0 to 100.")
    summary: str = Field(..., description="2-3 sentence profile summary.")
    strengths: list[str] = Field(..., description="Strengths aligned with the job.")
    gaps: list[str] = Field(..., description="Notable gaps against the requirements.")
    recommendation: Recommendation = Field(..., description="Final recommendation label.")


class CandidateView(Candidate):
    """Candidate row as shown in the results table."""

    score_band: Literal["excellent", "good", "fair", "poor"] = Field(
        ...,
        description="Colour band for the score badge.",
    )


class AnalysisError(BaseModel):
    """User-facing failure descriptor."""

    title: str
    message: str


class AnalysisResponse(_CamelModel):
    """Ranked screening report returned to the browser."""

    candidates: list[CandidateView] = Field(
        default_factory=list,
        description="Candidates in display order; position always reflects score rank.",
    )
    warnings: list[str] = Field(
        default_factory=list,
        description="Files skipped before analysis (over capacity or unsupported extension).",
    )
    sort_by: SortKey = Field("score", description="Display sort key applied.")
    direction: SortDirection = Field("desc", description="Display sort direction applied.")
