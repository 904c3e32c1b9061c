from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from acadscreening.core import (
    apply_query,
    dashboard_stats,
    filter_candidates,
    query_candidates,
    sort_candidates,
    status_label,
)
from acadscreening.schemas import Candidate, CandidateStatus, DashboardQuery, SortField

BASE_DATE = datetime(2024, 1, 1, tzinfo=timezone.utc)


def build_candidate(candidate_id: str, **kwargs) -> Candidate:
    defaults = {
        "id": candidate_id,
        "name": f"Candidate {candidate_id}",
        "email": f"{candidate_id}@example.org",
        "institution": "Example University",
        "submission_date": BASE_DATE,
    }
    defaults.update(kwargs)
    return Candidate(**defaults)


def sample_candidates() -> list[Candidate]:
    return [
        build_candidate("a", name="alice Smith", institution="MIT", total_score=40,
                        submission_date=BASE_DATE + timedelta(days=2)),
        build_candidate("b", name="Bob Jones", email="bob@oxford.ac.uk", institution="Oxford",
                        status="approved", total_score=55, submission_date=BASE_DATE),
        build_candidate("c", name="Carol White", institution="mit media lab", status="rejected",
                        total_score=40, submission_date=BASE_DATE + timedelta(days=1)),
        build_candidate("d", name="Dan Brown", institution="ETH", status="flagged",
                        total_score=10, submission_date=BASE_DATE + timedelta(days=3)),
    ]


def ids(candidates: list[Candidate]) -> list[str]:
    return [candidate.id for candidate in candidates]


def test_empty_search_and_all_status_returns_everything_sorted():
    result = query_candidates(sample_candidates(), "", "all", "totalScore", "desc")

    assert ids(result) == ["b", "a", "c", "d"]


def test_default_query_sorts_newest_first():
    result = apply_query(sample_candidates(), DashboardQuery())

    assert ids(result) == ["d", "a", "c", "b"]


def test_search_is_case_insensitive_substring_over_name_email_institution():
    candidates = sample_candidates()

    assert ids(filter_candidates(candidates, "MIT")) == ["a", "c"]
    assert ids(filter_candidates(candidates, "OXFORD.AC")) == ["b"]
    assert ids(filter_candidates(candidates, "brown")) == ["d"]
    assert filter_candidates(candidates, "nobody") == []


def test_status_filter_matches_exact_status():
    candidates = sample_candidates()

    assert ids(filter_candidates(candidates, status_filter="approved")) == ["b"]
    assert ids(filter_candidates(candidates, status_filter=CandidateStatus.PENDING)) == ["a"]


def test_unknown_status_filter_raises():
    with pytest.raises(ValueError):
        filter_candidates(sample_candidates(), status_filter="archived")


def test_filter_composition_is_order_independent():
    candidates = sample_candidates()

    search_first = filter_candidates(filter_candidates(candidates, "mit"), status_filter="rejected")
    status_first = filter_candidates(filter_candidates(candidates, status_filter="rejected"), "mit")
    combined = filter_candidates(candidates, "mit", "rejected")

    assert set(ids(search_first)) == set(ids(status_first)) == set(ids(combined)) == {"c"}


def test_string_sort_is_case_insensitive():
    result = sort_candidates(sample_candidates(), "name", "asc")

    assert ids(result) == ["a", "b", "c", "d"]


def test_institution_and_status_sorts():
    candidates = sample_candidates()

    assert ids(sort_candidates(candidates, SortField.INSTITUTION, "asc")) == ["d", "a", "c", "b"]
    assert ids(sort_candidates(candidates, SortField.STATUS, "asc")) == ["b", "d", "a", "c"]


def test_submission_date_sorts_as_instants_across_offsets():
    plus_two = timezone(timedelta(hours=2))
    early = build_candidate("early", submission_date=datetime(2024, 1, 1, 11, tzinfo=plus_two))
    late = build_candidate("late", submission_date=datetime(2024, 1, 1, 10, tzinfo=timezone.utc))

    assert ids(sort_candidates([late, early], "submissionDate", "asc")) == ["early", "late"]


def test_sort_is_stable_for_equal_keys_in_both_directions():
    candidates = sample_candidates()

    ascending = sort_candidates(candidates, "totalScore", "asc")
    descending = sort_candidates(ascending, "totalScore", "desc")
    again = sort_candidates(descending, "totalScore", "asc")

    assert ids(ascending) == ["d", "a", "c", "b"]
    assert ids(descending) == ["b", "a", "c", "d"]
    assert ids(again) == ids(ascending)


def test_unknown_sort_field_raises():
    with pytest.raises(ValueError):
        sort_candidates(sample_candidates(), "email", "asc")


def test_query_does_not_mutate_input():
    candidates = sample_candidates()
    before = ids(candidates)

    query_candidates(candidates, "", "all", "name", "desc")

    assert ids(candidates) == before


def test_dashboard_stats_counts_every_status():
    stats = dashboard_stats(sample_candidates())

    assert stats.total == 4
    assert stats.pending == stats.approved == stats.rejected == stats.flagged == 1
    assert set(stats.by_status) == set(CandidateStatus)
    assert stats.average_score == pytest.approx(145 / 4)


def test_dashboard_stats_empty():
    stats = dashboard_stats([])

    assert stats.total == 0
    assert stats.average_score == 0.0


def test_status_label_covers_every_status():
    assert [status_label(status) for status in CandidateStatus] == [
        "Pending",
        "Approved",
        "Rejected",
        "Flagged",
    ]
