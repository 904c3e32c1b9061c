"""Submission, review and export workflow assembly."""

from __future__ import annotations

import uuid
from datetime import datetime
from pathlib import Path
from typing import Any, Callable

import pendulum
import structlog

from .core import (
    CandidateStore,
    DashboardStats,
    SourceRegistry,
    apply_query,
    assign_source,
    dashboard_stats,
    reconcile_total,
    total_score,
)
from .export import CandidateExporter
from .schemas import (
    Candidate,
    CandidateStatus,
    CandidateSubmission,
    DashboardQuery,
    ExportFormat,
    ExportOptions,
    Publication,
    PublicationDraft,
)


_UNSET: Any = object()


def _new_id() -> str:
    return uuid.uuid4().hex


def _utc_now() -> datetime:
    return pendulum.now("UTC")


class EvaluationPipeline:
    """End-to-end orchestrator over the registry, store and exporter."""

    def __init__(
        self,
        *,
        registry: SourceRegistry,
        store: CandidateStore,
        exporter: CandidateExporter | None = None,
        id_factory: Callable[[], str] | None = None,
        now_provider: Callable[[], datetime] | None = None,
    ) -> None:
        self._registry = registry
        self._store = store
        self._exporter = exporter or CandidateExporter(registry)
        self._id_factory = id_factory or _new_id
        self._now_provider = now_provider or _utc_now
        self._logger = structlog.get_logger(__name__)

    @property
    def registry(self) -> SourceRegistry:
        return self._registry

    @property
    def store(self) -> CandidateStore:
        return self._store

    def submit(self, submission: CandidateSubmission | dict[str, Any]) -> Candidate:
        """Score a validated submission and store it as a pending candidate."""
        if not isinstance(submission, CandidateSubmission):
            submission = CandidateSubmission.model_validate(submission)

        publications = [self._score_draft(draft) for draft in submission.publications]
        candidate = Candidate(
            id=self._id_factory(),
            **submission.personal.model_dump(),
            submission_date=self._now_provider(),
            status=CandidateStatus.PENDING,
            total_score=total_score(publications),
            publications=publications,
        )
        unresolved = [pub.source for pub in publications if self._registry.get_by_id(pub.source) is None]
        if unresolved:
            self._logger.warning(
                "submission.unknown_sources",
                candidate_id=candidate.id,
                sources=unresolved,
            )
        return self._store.create(candidate)

    def review(
        self,
        candidate_id: str,
        *,
        status: CandidateStatus | str | None = None,
        reviewer_notes: str | None = _UNSET,
        reviewer_score: int | None = _UNSET,
    ) -> Candidate | None:
        """Apply reviewer edits; returns None when the candidate is unknown.

        Omitted arguments leave a field unchanged. Passing ``None`` for
        ``reviewer_notes`` or ``reviewer_score`` clears it.
        """
        candidate = self._store.get_by_id(candidate_id)
        if candidate is None:
            self._logger.info("review.not_found", candidate_id=candidate_id)
            return None
        previous_status = candidate.status
        if status is not None:
            candidate.status = status
        if reviewer_notes is not _UNSET:
            candidate.reviewer_notes = reviewer_notes
        if reviewer_score is not _UNSET:
            candidate.reviewer_score = reviewer_score
        self._store.update(candidate)
        if candidate.status != previous_status:
            self._logger.info(
                "review.status_changed",
                candidate_id=candidate_id,
                previous=previous_status.value,
                current=candidate.status.value,
            )
        return candidate

    def reconcile(self, candidate_id: str) -> Candidate | None:
        """Recompute a stored total from its publication score snapshots."""
        candidate = self._store.get_by_id(candidate_id)
        if candidate is None:
            return None
        reconciled = reconcile_total(candidate)
        if reconciled.total_score != candidate.total_score:
            self._store.update(reconciled)
            self._logger.info(
                "candidate.reconciled",
                candidate_id=candidate_id,
                previous_total=candidate.total_score,
                total_score=reconciled.total_score,
            )
        return reconciled

    def dashboard(self, query: DashboardQuery | None = None) -> list[Candidate]:
        return apply_query(self._store.list(), query or DashboardQuery())

    def stats(self) -> DashboardStats:
        return dashboard_stats(self._store.list())

    def export(
        self,
        *,
        query: DashboardQuery | None = None,
        options: ExportOptions | None = None,
        fmt: ExportFormat | str = ExportFormat.CSV,
        output_dir: str | Path = ".",
    ) -> Path | None:
        """Export the current dashboard view."""
        return self._exporter.export(
            self.dashboard(query),
            options=options,
            fmt=fmt,
            output_dir=output_dir,
        )

    def _score_draft(self, draft: PublicationDraft) -> Publication:
        publication = Publication(
            id=self._id_factory(),
            title=draft.title,
            type=draft.type,
            doi=draft.doi,
            url=draft.url,
            publication_date=draft.publication_date,
        )
        return assign_source(publication, draft.source, self._registry)
