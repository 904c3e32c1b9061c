"""Dashboard filtering, sorting and summary statistics.

Everything here is a pure function of its inputs. Callers recompute the
full result whenever the candidate list or any query input changes.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Callable, Iterable

from ..schemas import (
    Candidate,
    CandidateStatus,
    DashboardQuery,
    SortDirection,
    SortField,
)

_SORT_KEYS: dict[SortField, Callable[[Candidate], Any]] = {
    SortField.NAME: lambda candidate: candidate.name.lower(),
    SortField.INSTITUTION: lambda candidate: candidate.institution.lower(),
    SortField.SUBMISSION_DATE: lambda candidate: candidate.submission_date,
    SortField.TOTAL_SCORE: lambda candidate: candidate.total_score,
    SortField.STATUS: lambda candidate: candidate.status.value,
}

_STATUS_LABELS: dict[CandidateStatus, str] = {
    CandidateStatus.PENDING: "Pending",
    CandidateStatus.APPROVED: "Approved",
    CandidateStatus.REJECTED: "Rejected",
    CandidateStatus.FLAGGED: "Flagged",
}


@dataclass(slots=True)
class DashboardStats:
    """Headline numbers shown above the candidate table."""

    total: int
    by_status: dict[CandidateStatus, int] = field(default_factory=dict)
    average_score: float = 0.0

    @property
    def pending(self) -> int:
        return self.by_status.get(CandidateStatus.PENDING, 0)

    @property
    def approved(self) -> int:
        return self.by_status.get(CandidateStatus.APPROVED, 0)

    @property
    def rejected(self) -> int:
        return self.by_status.get(CandidateStatus.REJECTED, 0)

    @property
    def flagged(self) -> int:
        return self.by_status.get(CandidateStatus.FLAGGED, 0)


def parse_status_filter(value: str | CandidateStatus) -> CandidateStatus | None:
    """Return the status to match, or None for ``"all"``."""
    if isinstance(value, CandidateStatus):
        return value
    if value == "all":
        return None
    try:
        return CandidateStatus(value)
    except ValueError as exc:
        raise ValueError(f"Unknown status filter: {value!r}") from exc


def matches_search(candidate: Candidate, search_term: str) -> bool:
    if search_term == "":
        return True
    needle = search_term.lower()
    return (
        needle in candidate.name.lower()
        or needle in candidate.email.lower()
        or needle in candidate.institution.lower()
    )


def matches_status(candidate: Candidate, status: CandidateStatus | None) -> bool:
    return status is None or candidate.status == status


def filter_candidates(
    candidates: Iterable[Candidate],
    search_term: str = "",
    status_filter: str | CandidateStatus = "all",
) -> list[Candidate]:
    status = parse_status_filter(status_filter)
    return [
        candidate
        for candidate in candidates
        if matches_search(candidate, search_term) and matches_status(candidate, status)
    ]


def sort_candidates(
    candidates: Iterable[Candidate],
    sort_field: str | SortField = SortField.SUBMISSION_DATE,
    sort_direction: str | SortDirection = SortDirection.DESC,
) -> list[Candidate]:
    """Stable sort; equal keys keep their input order in both directions."""
    key = _SORT_KEYS[SortField(sort_field)]
    reverse = SortDirection(sort_direction) is SortDirection.DESC
    return sorted(candidates, key=key, reverse=reverse)


def query_candidates(
    candidates: Iterable[Candidate],
    search_term: str = "",
    status_filter: str | CandidateStatus = "all",
    sort_field: str | SortField = SortField.SUBMISSION_DATE,
    sort_direction: str | SortDirection = SortDirection.DESC,
) -> list[Candidate]:
    """Filter by search term and status, then sort."""
    filtered = filter_candidates(candidates, search_term, status_filter)
    return sort_candidates(filtered, sort_field, sort_direction)


def apply_query(candidates: Iterable[Candidate], query: DashboardQuery) -> list[Candidate]:
    return query_candidates(
        candidates,
        search_term=query.search_term,
        status_filter=query.status_filter,
        sort_field=query.sort_field,
        sort_direction=query.sort_direction,
    )


def dashboard_stats(candidates: Iterable[Candidate]) -> DashboardStats:
    items = list(candidates)
    by_status = {status: 0 for status in CandidateStatus}
    for candidate in items:
        by_status[candidate.status] += 1
    average = sum(c.total_score for c in items) / len(items) if items else 0.0
    return DashboardStats(total=len(items), by_status=by_status, average_score=average)


def status_label(status: CandidateStatus) -> str:
    return _STATUS_LABELS[status]


def format_submission_date(value: datetime) -> str:
    return value.date().isoformat()
