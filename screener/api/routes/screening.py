from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, File, Form, Query, Request, UploadFile

from screener.core.config import settings
from screener.core.in_flight import hold_analysis_slot
from screener.schemas.analysis import (
    AnalysisResponse,
    JobDescription,
    SortDirection,
    SortKey,
)
from screener.services.analysis_service import AnalysisService
from screener.services.resume_batch import ResumeBatch
from screener.services.results_view import build_rows

router = APIRouter(tags=["Screening"])


def get_analysis_service(request: Request) -> AnalysisService:
    """Service built once by the app factory (see create_app)."""
    return request.app.state.analysis_service


@router.post(
    "/resumes/analyze",
    response_model=AnalysisResponse,
    dependencies=[Depends(hold_analysis_slot)],
)
async def analyze_resumes(
    service: Annotated[AnalysisService, Depends(get_analysis_service)],
    title: Annotated[str, Form(description="Job title")] = "",
    description: Annotated[str, Form(description="Full job description")] = "",
    required_skills: Annotated[str, Form(description="Comma-separated required skills")] = "",
    desirable_skills: Annotated[str, Form(description="Comma-separated desirable skills")] = "",
    experience: Annotated[int, Form(ge=0, description="Minimum years of experience")] = 0,
    resumes: Annotated[
        list[UploadFile] | None,
        File(description="Resume files (.pdf, .doc, .docx, .txt), up to 10"),
    ] = None,
    sort_by: Annotated[SortKey, Query(description="Results table sort column")] = "score",
    direction: Annotated[SortDirection, Query(description="Results table sort direction")] = "desc",
) -> AnalysisResponse:
    """Rank uploaded resumes against a job description.

    Files over the batch capacity, with an unsupported extension, or of a
    type the configured model cannot read are dropped and reported in
    ``warnings``. Errors are rendered by the global exception handlers as
    ``{"error": {"title", "message", ...}}``.
    """
    job = JobDescription(
        title=title,
        description=description,
        required_skills=required_skills,
        desirable_skills=desirable_skills,
        experience=experience,
    )

    batch: ResumeBatch[UploadFile] = ResumeBatch(
        capacity=settings.app.max_resumes,
        allowed_extensions=settings.app.allowed_extension_set - service.llm.unreadable_extensions,
    )
    warnings = batch.add(resumes or [])

    candidates = await service.analyze(job, batch.files)

    return AnalysisResponse(
        candidates=build_rows(candidates, sort_by, direction),
        warnings=warnings,
        sort_by=sort_by,
        direction=direction,
    )
