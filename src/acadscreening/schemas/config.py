"""Pydantic configuration schema for YAML input."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .export import ExportFormat, ExportOptions
from .query import DashboardQuery


class StorageConfig(BaseModel):
    backend: Literal["json", "memory"] = "json"
    path: str = "data"

    model_config = ConfigDict(extra="forbid")


class ExportConfig(BaseModel):
    format: ExportFormat = ExportFormat.CSV
    output_dir: str = "."
    options: ExportOptions = Field(default_factory=ExportOptions)

    model_config = ConfigDict(extra="forbid")


class LoggingConfig(BaseModel):
    level: str = "INFO"
    json_output: bool = True

    model_config = ConfigDict(extra="forbid")


class AppConfig(BaseModel):
    storage: StorageConfig = Field(default_factory=StorageConfig)
    export: ExportConfig = Field(default_factory=ExportConfig)
    dashboard: DashboardQuery = Field(default_factory=DashboardQuery)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = ConfigDict(extra="forbid")

    def to_settings(self) -> dict[str, Any]:
        """Return the settings mapping consumed by ``create_container``."""
        return {
            "storage": self.storage.model_dump(mode="json"),
            "export": self.export.model_dump(mode="json"),
            "dashboard": self.dashboard.model_dump(mode="json"),
        }


def load_config(raw: Any) -> AppConfig:
    if not isinstance(raw, dict):
        raise ValidationError.from_exception_data(
            "AppConfig",
            [{"type": "dict_type", "loc": ("config",), "input": raw}],
        )
    return AppConfig.model_validate(raw)
