"""Dependency injection container for the evaluation engine."""

from __future__ import annotations

from typing import Any

from dependency_injector import containers, providers

from .core import CandidateStore, SourceRegistry
from .export import CandidateExporter
from .pipeline import EvaluationPipeline
from .schemas import DashboardQuery, ExportOptions
from .storage import InMemoryStore, JsonFileStore


class AcademicScreeningContainer(containers.DeclarativeContainer):
    """Dependency-injector container definition."""

    config = providers.Configuration()

    store = providers.Singleton(InMemoryStore)

    source_registry = providers.Singleton(SourceRegistry, store=store)

    candidate_store = providers.Singleton(CandidateStore, store=store)

    exporter = providers.Singleton(CandidateExporter, registry=source_registry)

    export_options = providers.Factory(ExportOptions)

    dashboard_query = providers.Factory(DashboardQuery)

    pipeline = providers.Factory(
        EvaluationPipeline,
        registry=source_registry,
        store=candidate_store,
        exporter=exporter,
    )


def create_container(*, settings: dict[str, Any] | None = None) -> AcademicScreeningContainer:
    """Instantiate container with optional overrides.

    Without settings everything lives in memory. A ``storage`` section with
    ``backend: json`` switches to JSON files under ``storage.path``.
    """

    container = AcademicScreeningContainer()

    if not settings:
        return container

    container.config.from_dict(settings)

    storage_settings = settings.get("storage", {}) if isinstance(settings, dict) else {}
    backend = storage_settings.get("backend", "json")
    if backend == "json":
        container.store.override(
            providers.Singleton(JsonFileStore, storage_settings.get("path", "data"))
        )
    elif backend != "memory":
        raise ValueError(f"Unsupported storage backend: {backend!r}")

    export_settings = settings.get("export", {}) if isinstance(settings, dict) else {}
    if export_settings.get("options"):
        options = ExportOptions.model_validate(export_settings["options"])
        container.export_options.override(providers.Object(options))

    dashboard_settings = settings.get("dashboard")
    if dashboard_settings:
        query = DashboardQuery.model_validate(dashboard_settings)
        container.dashboard_query.override(providers.Object(query))

    return container
