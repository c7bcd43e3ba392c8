"""Tests for prompt and manifest construction."""

from screener.schemas.analysis import JobDescription
from screener.services.prompt_builder import (
    build_file_manifest,
    build_full_prompt,
    build_prompt,
)


def test_build_prompt_embeds_all_job_fields(backend_job: JobDescription) -> None:
    prompt = build_prompt(backend_job)

    assert "**Title:** Backend Engineer" in prompt
    assert "**Core Description:** Build and operate our order processing services." in prompt
    assert "**Required Skills:** Go,SQL" in prompt
    assert "**Desirable Skills:** Docker" in prompt
    assert "**Minimum Years of Experience:** 3" in prompt


def test_build_prompt_lists_instructions() -> None:
    prompt = build_prompt(JobDescription(description="x"))

    assert "score from 0 to 100" in prompt
    assert '"Recommend for Interview", "Consider for Other Roles", or "Not a Good Fit"' in prompt
    assert "derived from the filename" in prompt
    assert "JSON array" in prompt
    assert "highest score to lowest score" in prompt


def test_build_prompt_does_not_escape_free_text() -> None:
    job = JobDescription(description='Use {braces}, "quotes" and **markdown**\nnewline')

    assert 'Use {braces}, "quotes" and **markdown**\nnewline' in build_prompt(job)


def test_build_file_manifest_numbers_from_one() -> None:
    manifest = build_file_manifest(["Alice_Smith.pdf", "Bob_Jones.txt"])

    assert manifest == "Resume 1: Alice_Smith.pdf\nResume 2: Bob_Jones.txt"


def test_build_file_manifest_empty() -> None:
    assert build_file_manifest([]) == ""


def test_build_full_prompt_appends_manifest(backend_job: JobDescription) -> None:
    full = build_full_prompt(backend_job, ["Alice_Smith.pdf"])

    assert full.startswith(build_prompt(backend_job))
    assert full.endswith("\n\n**Attached Resumes:**\nResume 1: Alice_Smith.pdf")
