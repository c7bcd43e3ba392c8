"""Display ordering and labelling for the results table."""

from __future__ import annotations

from typing import Sequence

from screener.schemas.analysis import Candidate, CandidateView, SortDirection, SortKey


def sort_candidates(
    candidates: Sequence[Candidate],
    key: SortKey = "score",
    direction: SortDirection = "desc",
) -> list[Candidate]:
    """Reorder candidates for display without touching ``position``.

    Equal keys keep their incoming order in both directions.
    """
    if key == "candidateName":
        def sort_key(c: Candidate) -> object:
            return c.candidate_name.casefold()
    elif key == "score":
        def sort_key(c: Candidate) -> object:
            return c.score
    else:
        raise ValueError(f"Unsupported sort key: {key!r}")

    if direction not in ("asc", "desc"):
        raise ValueError(f"Unsupported sort direction: {direction!r}")

    return sorted(candidates, key=sort_key, reverse=direction == "desc")


def score_band(score: int) -> str:
    if score >= 85:
        return "excellent"
    if score >= 70:
        return "good"
    if score >= 50:
        return "fair"
    return "poor"


def build_rows(
    candidates: Sequence[Candidate],
    key: SortKey = "score",
    direction: SortDirection = "desc",
) -> list[CandidateView]:
    """Sorted table rows, each tagged with its score band."""
    return [
        CandidateView(**c.model_dump(), score_band=score_band(c.score))
        for c in sort_candidates(candidates, key, direction)
    ]
