"""Core evaluation engine components."""

from __future__ import annotations

# NOTE: keep imports explicit for export clarity.
from .candidates import CandidateStore
from .dashboard import (
    DashboardStats,
    apply_query,
    dashboard_stats,
    filter_candidates,
    query_candidates,
    sort_candidates,
    status_label,
)
from .defaults import DEFAULT_PUBLICATION_SOURCES
from .scoring import (
    assign_source,
    reconcile_total,
    score_for_source,
    score_publication,
    total_score,
)
from .sources import SourceLookup, SourceRegistry

__all__ = [
    "CandidateStore",
    "DEFAULT_PUBLICATION_SOURCES",
    "DashboardStats",
    "SourceLookup",
    "SourceRegistry",
    "apply_query",
    "assign_source",
    "dashboard_stats",
    "filter_candidates",
    "query_candidates",
    "reconcile_total",
    "score_for_source",
    "score_publication",
    "sort_candidates",
    "status_label",
    "total_score",
]
