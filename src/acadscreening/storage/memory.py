"""In-process store used for tests and throwaway sessions."""

from __future__ import annotations

import copy
from typing import Any

from ..errors import StorageError


class InMemoryStore:
    """Dict-backed store; values are deep-copied on the way in and out."""

    def __init__(self, initial: dict[str, Any] | None = None) -> None:
        self._data: dict[str, Any] = copy.deepcopy(initial) if initial else {}
        self.fail_writes = False

    def get(self, key: str) -> Any | None:
        if key not in self._data:
            return None
        return copy.deepcopy(self._data[key])

    def set(self, key: str, value: Any) -> None:
        if self.fail_writes:
            raise StorageError(key, "write rejected (quota exceeded)")
        self._data[key] = copy.deepcopy(value)
