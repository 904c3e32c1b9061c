"""Publication scoring against the source registry.

A publication's ``score`` is copied from its source's points when the source
is set or changed and is never refreshed afterwards. Editing a source's
points, or deleting the source, leaves already-scored publications alone.
Candidate totals are sums of those stored snapshots.
"""

from __future__ import annotations

from typing import Iterable

from ..schemas import Candidate, Publication
from .sources import SourceLookup


def score_for_source(source_id: str | None, registry: SourceLookup) -> int:
    """Return the source's points, or 0 for an empty or unknown id."""
    if not source_id:
        return 0
    source = registry.get_by_id(source_id)
    if source is None:
        return 0
    return source.points


def score_publication(publication: Publication, registry: SourceLookup) -> int:
    return score_for_source(publication.source, registry)


def assign_source(
    publication: Publication,
    source_id: str,
    registry: SourceLookup,
) -> Publication:
    """Return a copy pointing at ``source_id``.

    The score snapshot is retaken only when the source actually changes.
    """
    updated = publication.model_copy(deep=True)
    if source_id == publication.source:
        return updated
    updated.source = source_id
    updated.score = score_for_source(source_id, registry)
    return updated


def total_score(publications: Iterable[Publication]) -> int:
    return sum(publication.score for publication in publications)


def reconcile_total(candidate: Candidate) -> Candidate:
    """Return a copy whose total matches its stored publication scores.

    Publication scores themselves are not re-resolved against the registry.
    """
    reconciled = candidate.model_copy(deep=True)
    reconciled.total_score = total_score(reconciled.publications)
    return reconciled
