"""Publication source registry."""

from __future__ import annotations

import math
from typing import Any, Protocol, runtime_checkable

import structlog
from pydantic import ValidationError as PydanticValidationError

from ..errors import StorageError, ValidationError
from ..schemas import PublicationSource
from ..storage import SOURCES_KEY, KeyValueStore
from .defaults import default_sources


@runtime_checkable
class SourceLookup(Protocol):
    """Anything that resolves a source id; unknown ids resolve to None."""

    def get_by_id(self, source_id: str) -> PublicationSource | None:
        """Return the source or None."""


class SourceRegistry:
    """Ordered publication source table persisted under one store key.

    The table is loaded lazily. When the key has never been written, the
    built-in default table is used. Mutations persist the complete new list
    first and only then replace the held list, so a failed write leaves the
    registry as it was.
    """

    def __init__(self, store: KeyValueStore, *, key: str = SOURCES_KEY) -> None:
        self._store = store
        self._key = key
        self._sources: list[PublicationSource] | None = None
        self._logger = structlog.get_logger(__name__)

    def list(self) -> list[PublicationSource]:
        return [source.model_copy() for source in self._held()]

    def get_by_id(self, source_id: str) -> PublicationSource | None:
        for source in self._held():
            if source.id == source_id:
                return source.model_copy()
        return None

    def upsert(self, source: PublicationSource) -> PublicationSource:
        """Insert a new source or replace the one with the same id in place."""
        errors = self.validate(source)
        if errors:
            self._logger.warning("source.rejected", source_id=source.id, errors=errors)
            raise ValidationError(errors)

        stored = source.model_copy()
        current = self._held()
        updated = list(current)
        for index, existing in enumerate(updated):
            if existing.id == stored.id:
                updated[index] = stored
                action = "replaced"
                break
        else:
            updated.append(stored)
            action = "inserted"

        self._commit(updated)
        self._logger.info(
            "source.upserted",
            source_id=stored.id,
            action=action,
            category=stored.category,
            points=stored.points,
        )
        return stored.model_copy()

    def delete(self, source_id: str) -> None:
        """Remove a source. Publications that reference it keep their score."""
        current = self._held()
        updated = [source for source in current if source.id != source_id]
        if len(updated) == len(current):
            return
        self._commit(updated)
        self._logger.info("source.deleted", source_id=source_id)

    def group_by_category(self) -> dict[str, list[PublicationSource]]:
        grouped: dict[str, list[PublicationSource]] = {}
        for source in self.list():
            grouped.setdefault(source.category, []).append(source)
        return grouped

    def categories(self) -> list[str]:
        return list(self.group_by_category().keys())

    def search(self, term: str = "", category: str = "all") -> list[PublicationSource]:
        """Case-insensitive substring match on name or category."""
        needle = term.lower()
        return [
            source
            for source in self.list()
            if (needle in source.name.lower() or needle in source.category.lower())
            and (category == "all" or source.category == category)
        ]

    def average_points(self) -> int:
        sources = self._held()
        if not sources:
            return 0
        mean = sum(source.points for source in sources) / len(sources)
        return math.floor(mean + 0.5)

    @staticmethod
    def validate(source: PublicationSource) -> list[str]:
        errors: list[str] = []
        if not source.name.strip():
            errors.append("name must not be empty")
        if not source.category.strip():
            errors.append("category must not be empty")
        if source.points < 0:
            errors.append("points must be >= 0")
        return errors

    def _held(self) -> list[PublicationSource]:
        if self._sources is None:
            self._sources = self._load()
        return self._sources

    def _load(self) -> list[PublicationSource]:
        raw: Any = self._store.get(self._key)
        if raw is None:
            self._logger.debug("sources.defaults_loaded")
            return default_sources()
        if not isinstance(raw, list):
            raise StorageError(self._key, "stored value is not a list")
        try:
            return [PublicationSource.model_validate(item) for item in raw]
        except PydanticValidationError as exc:
            raise StorageError(self._key, f"invalid source record ({exc})") from exc

    def _commit(self, sources: list[PublicationSource]) -> None:
        self._store.set(
            self._key,
            [source.model_dump(mode="json", exclude_none=True) for source in sources],
        )
        self._sources = sources
