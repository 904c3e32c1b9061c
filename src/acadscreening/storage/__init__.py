"""Key-value persistence for candidate and source collections."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from .json_store import JsonFileStore
from .memory import InMemoryStore

CANDIDATES_KEY = "candidates"
SOURCES_KEY = "publicationSources"


@runtime_checkable
class KeyValueStore(Protocol):
    """Whole-collection store contract.

    Each key maps to one JSON-compatible value that is always read and
    replaced in full. ``set`` either stores the whole value or raises
    ``StorageError`` leaving the previous value in place.
    """

    def get(self, key: str) -> Any | None:
        """Return the stored value, or None when the key has never been set."""

    def set(self, key: str, value: Any) -> None:
        """Replace the value stored under ``key``."""


__all__ = [
    "CANDIDATES_KEY",
    "SOURCES_KEY",
    "InMemoryStore",
    "JsonFileStore",
    "KeyValueStore",
]
