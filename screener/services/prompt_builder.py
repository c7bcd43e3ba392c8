"""Prompt construction for the resume screening call."""

from __future__ import annotations

from typing import Sequence

from screener.schemas.analysis import JobDescription


def build_prompt(job: JobDescription) -> str:
    """Render the job fields into the screening instructions.

    Job text is interpolated as-is; nothing is escaped.

    Args:
        job: Job description supplied by the user.

    Returns:
        Instruction prompt for the model.
    """
    return f"""
You are an expert HR recruitment specialist with decades of experience. Your task is to analyze the provided resumes against the following job description.

**Job Description:**
- **Title:** {job.title}
- **Core Description:** {job.description}
- **Required Skills:** {job.required_skills}
- **Desirable Skills:** {job.desirable_skills}
- **Minimum Years of Experience:** {job.experience}

**Your Task:**
1.  Carefully read and interpret each resume provided.
2.  Compare each candidate's skills, experience, and qualifications against the job description.
3.  For each candidate, provide a final score from 0 to 100 representing their suitability for the role. 100 is a perfect match.
4.  Provide a concise 2-3 sentence summary of the candidate's profile.
5.  List their key strengths that align with the job requirements.
6.  List any notable gaps or areas where they fall short of the requirements.
7.  Provide a final recommendation: "Recommend for Interview", "Consider for Other Roles", or "Not a Good Fit".
8.  The candidate's name should be derived from the filename.
9.  Return the analysis as a JSON array of objects, strictly following the provided schema. Rank the candidates in the final array from highest score to lowest score.
""".strip()


def build_file_manifest(file_names: Sequence[str]) -> str:
    """One ``Resume N: <name>`` line per attached file, N starting at 1."""
    return "\n".join(
        f"Resume {index}: {name}" for index, name in enumerate(file_names, start=1)
    )


def build_full_prompt(job: JobDescription, file_names: Sequence[str]) -> str:
    """Prompt plus the attachment manifest so outputs can be matched to files."""
    return f"{build_prompt(job)}\n\n**Attached Resumes:**\n{build_file_manifest(file_names)}"
