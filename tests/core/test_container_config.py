from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from acadscreening.config import ConfigManager, load_config_file
from acadscreening.container import create_container
from acadscreening.schemas import SortDirection, SortField
from acadscreening.schemas.config import AppConfig, load_config
from acadscreening.storage import InMemoryStore, JsonFileStore


def test_create_container_defaults_to_memory():
    container = create_container()

    assert isinstance(container.store(), InMemoryStore)
    assert container.source_registry() is container.source_registry()
    assert container.pipeline().registry is container.source_registry()


def test_create_container_with_overrides(tmp_path: Path):
    container = create_container(
        settings={
            "storage": {"backend": "json", "path": str(tmp_path)},
            "export": {"options": {"reviewerNotes": True, "publications": False}},
            "dashboard": {"sortField": "totalScore", "sortDirection": "asc"},
        }
    )

    store = container.store()
    options = container.export_options()
    query = container.dashboard_query()

    assert isinstance(store, JsonFileStore)
    assert store.base_path == tmp_path
    assert options.reviewer_notes is True
    assert options.publications is False
    assert query.sort_field is SortField.TOTAL_SCORE
    assert query.sort_direction is SortDirection.ASC


def test_create_container_rejects_unknown_backend():
    with pytest.raises(ValueError):
        create_container(settings={"storage": {"backend": "redis"}})


def test_load_config_validation():
    data = {
        "storage": {"backend": "memory"},
        "dashboard": {"statusFilter": "flagged"},
        "export": {"format": "json"},
    }
    app_config = load_config(data)
    assert isinstance(app_config, AppConfig)
    settings = app_config.to_settings()
    assert settings["storage"]["backend"] == "memory"
    assert settings["dashboard"]["status_filter"] == "flagged"
    assert settings["export"]["format"] == "json"
    assert isinstance(create_container(settings=settings).store(), InMemoryStore)


def test_load_config_rejects_non_mapping_and_unknown_keys():
    with pytest.raises(ValidationError):
        load_config(["not", "a", "mapping"])
    with pytest.raises(ValidationError):
        load_config({"storage": {"backend": "memory", "extra": 1}})


def test_config_manager_loads_yaml(tmp_path: Path):
    (tmp_path / "config.yaml").write_text(
        "storage:\n  backend: json\n  path: /tmp/acad\nlogging:\n  level: DEBUG\n",
        encoding="utf-8",
    )

    manager = ConfigManager(tmp_path)
    app_config = manager.load_app_config()

    assert app_config.storage.path == "/tmp/acad"
    assert app_config.logging.level == "DEBUG"
    assert load_config_file(tmp_path / "config.yaml") == app_config
