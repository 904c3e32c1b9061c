"""JSON file store: one document per key under a base directory."""

from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path
from typing import Any

import structlog

from ..errors import StorageError


class JsonFileStore:
    """Persist each key as ``<base_path>/<key>.json``.

    Writes go to a temporary file in the same directory and are moved into
    place with ``os.replace`` so a reader never sees a partial document.
    """

    def __init__(self, base_path: str | Path):
        self._base_path = Path(base_path)
        self._logger = structlog.get_logger(__name__)

    @property
    def base_path(self) -> Path:
        return self._base_path

    def path_for(self, key: str) -> Path:
        return self._base_path / f"{key}.json"

    def get(self, key: str) -> Any | None:
        path = self.path_for(key)
        if not path.exists():
            return None
        try:
            with path.open("r", encoding="utf-8") as handle:
                return json.load(handle)
        except json.JSONDecodeError as exc:
            raise StorageError(key, f"invalid JSON in {path} ({exc})") from exc
        except OSError as exc:
            raise StorageError(key, f"cannot read {path} ({exc})") from exc

    def set(self, key: str, value: Any) -> None:
        path = self.path_for(key)
        tmp_name: str | None = None
        try:
            payload = json.dumps(value, ensure_ascii=False, indent=2)
            path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                dir=path.parent, prefix=f".{key}.", suffix=".tmp"
            )
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                handle.write(payload)
            os.replace(tmp_name, path)
            tmp_name = None
        except (OSError, TypeError, ValueError) as exc:
            self._logger.error("storage.write_failed", key=key, path=str(path), error=str(exc))
            raise StorageError(key, f"cannot write {path} ({exc})") from exc
        finally:
            if tmp_name is not None and os.path.exists(tmp_name):
                os.unlink(tmp_name)
