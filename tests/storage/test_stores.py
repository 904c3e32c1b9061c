from __future__ import annotations

import json
from pathlib import Path

import pytest

from acadscreening.errors import StorageError
from acadscreening.storage import InMemoryStore, JsonFileStore, KeyValueStore


def test_in_memory_store_copies_values():
    store = InMemoryStore()
    value = [{"id": "1"}]

    store.set("candidates", value)
    value[0]["id"] = "changed"
    fetched = store.get("candidates")
    fetched.append({"id": "2"})

    assert store.get("candidates") == [{"id": "1"}]
    assert store.get("publicationSources") is None
    assert isinstance(store, KeyValueStore)


def test_in_memory_store_failed_write_keeps_previous_value():
    store = InMemoryStore({"candidates": [{"id": "1"}]})
    store.fail_writes = True

    with pytest.raises(StorageError):
        store.set("candidates", [])

    assert store.get("candidates") == [{"id": "1"}]


def test_json_file_store_round_trip(tmp_path: Path):
    store = JsonFileStore(tmp_path / "data")

    assert store.get("candidates") is None
    store.set("candidates", [{"id": "1", "name": "Zoë"}])

    path = tmp_path / "data" / "candidates.json"
    assert path.exists()
    assert json.loads(path.read_text(encoding="utf-8")) == [{"id": "1", "name": "Zoë"}]
    assert store.get("candidates") == [{"id": "1", "name": "Zoë"}]
    assert not list((tmp_path / "data").glob("*.tmp"))


def test_json_file_store_invalid_json_raises_storage_error(tmp_path: Path):
    (tmp_path / "candidates.json").write_text("{broken", encoding="utf-8")
    store = JsonFileStore(tmp_path)

    with pytest.raises(StorageError) as exc:
        store.get("candidates")
    assert exc.value.key == "candidates"


def test_json_file_store_write_failure_leaves_existing_file(tmp_path: Path):
    store = JsonFileStore(tmp_path)
    store.set("candidates", [{"id": "1"}])

    with pytest.raises(StorageError):
        store.set("candidates", [{"id": object()}])

    assert store.get("candidates") == [{"id": "1"}]


def test_json_file_store_unwritable_base_path(tmp_path: Path):
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory", encoding="utf-8")
    store = JsonFileStore(blocker)

    with pytest.raises(StorageError):
        store.set("publicationSources", [])
