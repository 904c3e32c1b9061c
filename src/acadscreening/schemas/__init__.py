"""Pydantic schema definitions for candidates, sources and queries."""

from __future__ import annotations

from .candidate import Candidate, CandidateStatus, Publication, PublicationType
from .export import ExportFormat, ExportOptions
from .query import DashboardQuery, SortDirection, SortField, StatusFilter
from .source import PublicationSource
from .submission import CandidateSubmission, PersonalInfo, PublicationDraft

__all__ = [
    "Candidate",
    "CandidateStatus",
    "CandidateSubmission",
    "DashboardQuery",
    "ExportFormat",
    "ExportOptions",
    "PersonalInfo",
    "Publication",
    "PublicationDraft",
    "PublicationSource",
    "PublicationType",
    "SortDirection",
    "SortField",
    "StatusFilter",
]
