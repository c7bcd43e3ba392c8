"""Tests for results table ordering and score bands."""

import pytest

from helpers import make_candidate
from screener.schemas.analysis import Candidate
from screener.services.analysis_service import finalize_ranking
from screener.services.results_view import build_rows, score_band, sort_candidates


@pytest.fixture
def ranked() -> list[Candidate]:
    raw = [
        make_candidate("bob Jones", 60),
        make_candidate("Alice Smith", 90),
        make_candidate("Cara Lee", 75),
        make_candidate("Dan Wu", 75),
    ]
    return finalize_ranking([Candidate.model_validate(c) for c in raw])


def test_default_is_score_descending(ranked: list[Candidate]) -> None:
    rows = sort_candidates(ranked)

    assert [c.candidate_name for c in rows] == ["Alice Smith", "Cara Lee", "Dan Wu", "bob Jones"]


def test_score_ascending_keeps_tie_order(ranked: list[Candidate]) -> None:
    rows = sort_candidates(ranked, "score", "asc")

    assert [c.candidate_name for c in rows] == ["bob Jones", "Cara Lee", "Dan Wu", "Alice Smith"]


def test_name_sort_is_case_insensitive(ranked: list[Candidate]) -> None:
    asc = sort_candidates(ranked, "candidateName", "asc")
    desc = sort_candidates(ranked, "candidateName", "desc")

    assert [c.candidate_name for c in asc] == ["Alice Smith", "bob Jones", "Cara Lee", "Dan Wu"]
    assert [c.candidate_name for c in desc] == ["Dan Wu", "Cara Lee", "bob Jones", "Alice Smith"]


def test_display_sort_does_not_renumber(ranked: list[Candidate]) -> None:
    rows = sort_candidates(ranked, "candidateName", "asc")

    assert {c.candidate_name: c.position for c in rows} == {
        "Alice Smith": 1,
        "Cara Lee": 2,
        "Dan Wu": 3,
        "bob Jones": 4,
    }


def test_unknown_sort_key(ranked: list[Candidate]) -> None:
    with pytest.raises(ValueError):
        sort_candidates(ranked, "summary")  # type: ignore[arg-type]


def test_unknown_direction(ranked: list[Candidate]) -> None:
    with pytest.raises(ValueError):
        sort_candidates(ranked, "score", "sideways")  # type: ignore[arg-type]


@pytest.mark.parametrize(
    ("score", "band"),
    [(100, "excellent"), (85, "excellent"), (84, "good"), (70, "good"), (69, "fair"), (50, "fair"), (49, "poor"), (0, "poor")],
)
def test_score_band(score: int, band: str) -> None:
    assert score_band(score) == band


def test_build_rows_tags_band(ranked: list[Candidate]) -> None:
    rows = build_rows(ranked)

    assert [(r.candidate_name, r.score_band) for r in rows] == [
        ("Alice Smith", "excellent"),
        ("Cara Lee", "good"),
        ("Dan Wu", "good"),
        ("bob Jones", "fair"),
    ]
    assert rows[0].model_dump(by_alias=True)["scoreBand"] == "excellent"
