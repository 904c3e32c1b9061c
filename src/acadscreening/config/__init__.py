"""Configuration management utilities."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from ..schemas.config import AppConfig, load_config


class ConfigManager:
    """YAML-backed configuration loader."""

    def __init__(self, base_path: str | Path):
        self._base_path = Path(base_path)

    def path_for(self, name: str) -> Path:
        return self._base_path / f"{name}.yaml"

    def load(self, name: str) -> dict[str, Any]:
        """Load a YAML configuration by name without file extension."""
        with self.path_for(name).open("r", encoding="utf-8") as handle:
            return yaml.safe_load(handle) or {}

    def load_app_config(self, name: str = "config") -> AppConfig:
        """Load and validate the application configuration."""
        return load_config(self.load(name))


def load_config_file(path: str | Path) -> AppConfig:
    """Validate a YAML file at an explicit path into ``AppConfig``."""
    with Path(path).open("r", encoding="utf-8") as handle:
        return load_config(yaml.safe_load(handle) or {})


__all__ = ["ConfigManager", "load_config_file"]
