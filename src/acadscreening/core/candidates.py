"""Candidate collection with create/update/delete/fetch operations."""

from __future__ import annotations

from typing import Any

import structlog
from pydantic import ValidationError as PydanticValidationError

from ..errors import DuplicateCandidateError, StorageError
from ..schemas import Candidate
from ..storage import CANDIDATES_KEY, KeyValueStore


class CandidateStore:
    """Candidate records persisted as one collection under a store key.

    Each mutation writes the complete new collection before replacing the
    held one. ``update`` and ``delete`` on an unknown id do nothing. Status
    values are written as given; no transition is ever refused.
    """

    def __init__(self, store: KeyValueStore, *, key: str = CANDIDATES_KEY) -> None:
        self._store = store
        self._key = key
        self._candidates: list[Candidate] | None = None
        self._logger = structlog.get_logger(__name__)

    def list(self) -> list[Candidate]:
        return [candidate.model_copy(deep=True) for candidate in self._held()]

    def get_by_id(self, candidate_id: str) -> Candidate | None:
        for candidate in self._held():
            if candidate.id == candidate_id:
                return candidate.model_copy(deep=True)
        return None

    def exists(self, candidate_id: str) -> bool:
        return any(candidate.id == candidate_id for candidate in self._held())

    def create(self, candidate: Candidate) -> Candidate:
        if self.exists(candidate.id):
            raise DuplicateCandidateError(candidate.id)
        stored = candidate.model_copy(deep=True)
        self._commit([*self._held(), stored])
        self._logger.info(
            "candidate.created",
            candidate_id=stored.id,
            total_score=stored.total_score,
            publication_count=len(stored.publications),
        )
        return stored.model_copy(deep=True)

    def update(self, candidate: Candidate) -> None:
        current = self._held()
        index = next(
            (i for i, existing in enumerate(current) if existing.id == candidate.id),
            None,
        )
        if index is None:
            self._logger.debug("candidate.update_skipped", candidate_id=candidate.id)
            return
        updated = list(current)
        updated[index] = candidate.model_copy(deep=True)
        self._commit(updated)
        self._logger.info(
            "candidate.updated",
            candidate_id=candidate.id,
            status=candidate.status.value,
        )

    def delete(self, candidate_id: str) -> None:
        current = self._held()
        remaining = [candidate for candidate in current if candidate.id != candidate_id]
        if len(remaining) == len(current):
            self._logger.debug("candidate.delete_skipped", candidate_id=candidate_id)
            return
        self._commit(remaining)
        self._logger.info("candidate.deleted", candidate_id=candidate_id)

    def _held(self) -> list[Candidate]:
        if self._candidates is None:
            self._candidates = self._load()
        return self._candidates

    def _load(self) -> list[Candidate]:
        raw: Any = self._store.get(self._key)
        if raw is None:
            return []
        if not isinstance(raw, list):
            raise StorageError(self._key, "stored value is not a list")
        try:
            return [Candidate.model_validate(item) for item in raw]
        except PydanticValidationError as exc:
            raise StorageError(self._key, f"invalid candidate record ({exc})") from exc

    def _commit(self, candidates: list[Candidate]) -> None:
        self._store.set(self._key, [candidate.to_record() for candidate in candidates])
        self._candidates = candidates
