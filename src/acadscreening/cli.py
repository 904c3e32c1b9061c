"""Typer CLI entrypoint for candidate review administration."""

from __future__ import annotations

import json
import uuid
from pathlib import Path
from typing import Any, Optional

import typer
from pydantic import ValidationError as PydanticValidationError

from .config import load_config_file
from .container import AcademicScreeningContainer, create_container
from .core.dashboard import format_submission_date, status_label
from .errors import AcademicScreeningError
from .logging import configure_logging
from .schemas import (
    CandidateStatus,
    DashboardQuery,
    ExportFormat,
    ExportOptions,
    PublicationSource,
    SortDirection,
    SortField,
)

app = typer.Typer(help="Academic candidate evaluation CLI.", no_args_is_help=True)
sources_app = typer.Typer(help="Manage the publication source registry.", no_args_is_help=True)
app.add_typer(sources_app, name="sources")


def _container(ctx: typer.Context) -> AcademicScreeningContainer:
    return ctx.find_root().obj


def _fail(message: str) -> None:
    typer.echo(message, err=True)
    raise typer.Exit(code=1)


@app.callback()
def _global_options(
    ctx: typer.Context,
    data_dir: Optional[Path] = typer.Option(
        None, file_okay=False, help="Directory holding candidates.json and publicationSources.json."
    ),
    config: Optional[Path] = typer.Option(None, exists=True, readable=True, dir_okay=False, help="YAML config path."),
    log_level: Optional[str] = typer.Option(None, help="Log level for structured logging."),
) -> None:
    """Load configuration and build the container shared by all commands."""
    settings: dict[str, Any] = {"storage": {"backend": "json", "path": "data"}}
    json_output = True
    level = "INFO"
    if config:
        try:
            app_config = load_config_file(config)
        except PydanticValidationError as exc:
            raise typer.BadParameter(str(exc), param_name="config") from exc
        settings = app_config.to_settings()
        level = app_config.logging.level
        json_output = app_config.logging.json_output
    if data_dir is not None:
        settings["storage"] = {"backend": "json", "path": str(data_dir)}

    configure_logging(log_level or level, json_output=json_output)
    ctx.obj = create_container(settings=settings)


@app.command()
def submit(
    ctx: typer.Context,
    submission: Path = typer.Argument(..., exists=True, readable=True, dir_okay=False, help="Submission JSON path."),
) -> None:
    """Score a submission file and store it as a pending candidate."""
    pipeline = _container(ctx).pipeline()
    try:
        payload = json.loads(submission.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        _fail(f"Invalid submission JSON: {exc}")
    try:
        candidate = pipeline.submit(payload)
    except PydanticValidationError as exc:
        _fail(f"Submission rejected:\n{exc}")
    except AcademicScreeningError as exc:
        _fail(str(exc))
    typer.echo(
        f"Submitted candidate {candidate.id} with {len(candidate.publications)} "
        f"publication(s), total score {candidate.total_score}."
    )


@app.command("list")
def list_candidates(
    ctx: typer.Context,
    search: Optional[str] = typer.Option(None, help="Substring of name, email or institution."),
    status: Optional[str] = typer.Option(None, help="Status to show, or 'all'."),
    sort: Optional[SortField] = typer.Option(None, help="Sort field."),
    direction: Optional[SortDirection] = typer.Option(None, help="Sort direction."),
) -> None:
    """Show the filtered and sorted candidate table."""
    container = _container(ctx)
    query = _build_query(container, search=search, status=status, sort=sort, direction=direction)
    try:
        candidates = container.pipeline().dashboard(query)
    except AcademicScreeningError as exc:
        _fail(str(exc))
    if not candidates:
        typer.echo("No candidates found")
        return
    for candidate in candidates:
        typer.echo(
            "\t".join(
                [
                    candidate.id,
                    candidate.name,
                    candidate.institution,
                    status_label(candidate.status),
                    str(candidate.total_score),
                    format_submission_date(candidate.submission_date),
                ]
            )
        )


@app.command()
def review(
    ctx: typer.Context,
    candidate_id: str = typer.Argument(..., help="Candidate id."),
    status: Optional[CandidateStatus] = typer.Option(None, help="New review status."),
    notes: Optional[str] = typer.Option(None, help="Reviewer notes."),
    score: Optional[int] = typer.Option(None, min=1, max=5, help="Reviewer score (1-5)."),
    clear_notes: bool = typer.Option(False, "--clear-notes", help="Remove the reviewer notes."),
    clear_score: bool = typer.Option(False, "--clear-score", help="Remove the reviewer score."),
) -> None:
    """Update a candidate's status, notes or reviewer score."""
    if clear_notes and notes is not None:
        raise typer.BadParameter("--notes and --clear-notes are exclusive", param_name="notes")
    if clear_score and score is not None:
        raise typer.BadParameter("--score and --clear-score are exclusive", param_name="score")
    edits: dict[str, Any] = {}
    if clear_notes or notes is not None:
        edits["reviewer_notes"] = notes
    if clear_score or score is not None:
        edits["reviewer_score"] = score
    try:
        candidate = _container(ctx).pipeline().review(candidate_id, status=status, **edits)
    except AcademicScreeningError as exc:
        _fail(str(exc))
    if candidate is None:
        _fail(f"Candidate not found: {candidate_id}")
    typer.echo(f"Candidate {candidate.id} is {candidate.status.value}.")


@app.command()
def reconcile(
    ctx: typer.Context,
    candidate_id: str = typer.Argument(..., help="Candidate id."),
) -> None:
    """Recompute a candidate's total from its stored publication scores."""
    try:
        candidate = _container(ctx).pipeline().reconcile(candidate_id)
    except AcademicScreeningError as exc:
        _fail(str(exc))
    if candidate is None:
        _fail(f"Candidate not found: {candidate_id}")
    typer.echo(f"Candidate {candidate.id} total score {candidate.total_score}.")


@app.command()
def stats(ctx: typer.Context) -> None:
    """Print headline counts and the average total score."""
    try:
        summary = _container(ctx).pipeline().stats()
    except AcademicScreeningError as exc:
        _fail(str(exc))
    typer.echo(f"total: {summary.total}")
    for status in CandidateStatus:
        typer.echo(f"{status.value}: {summary.by_status[status]}")
    typer.echo(f"average score: {summary.average_score:.1f}")


@app.command()
def export(
    ctx: typer.Context,
    fmt: Optional[ExportFormat] = typer.Option(None, "--format", help="Export format."),
    output_dir: Optional[Path] = typer.Option(None, file_okay=False, help="Directory for the export file."),
    personal_info: Optional[bool] = typer.Option(None, "--personal-info/--no-personal-info"),
    publications: Optional[bool] = typer.Option(None, "--publications/--no-publications"),
    scoring: Optional[bool] = typer.Option(None, "--scoring/--no-scoring"),
    reviewer_notes: Optional[bool] = typer.Option(None, "--reviewer-notes/--no-reviewer-notes"),
    search: Optional[str] = typer.Option(None, help="Substring of name, email or institution."),
    status: Optional[str] = typer.Option(None, help="Status to export, or 'all'."),
) -> None:
    """Export the current dashboard view as CSV or JSON."""
    container = _container(ctx)
    query = _build_query(container, search=search, status=status, sort=None, direction=None)

    overrides = {
        "personal_info": personal_info,
        "publications": publications,
        "scoring": scoring,
        "reviewer_notes": reviewer_notes,
    }
    base_options = container.export_options()
    options = ExportOptions.model_validate(
        {
            **base_options.model_dump(),
            **{key: value for key, value in overrides.items() if value is not None},
        }
    )

    export_config = container.config.export() or {}
    chosen_format = fmt or ExportFormat(export_config.get("format", ExportFormat.CSV.value))
    target_dir = output_dir or Path(export_config.get("output_dir", "."))

    try:
        path = container.pipeline().export(
            query=query, options=options, fmt=chosen_format, output_dir=target_dir
        )
    except AcademicScreeningError as exc:
        _fail(str(exc))
    if path is None:
        typer.echo("Nothing to export.")
        return
    typer.echo(f"Exported to {path}.")


@sources_app.command("list")
def list_sources(
    ctx: typer.Context,
    search: str = typer.Option("", help="Substring of name or category."),
    category: str = typer.Option("all", help="Category to show, or 'all'."),
) -> None:
    """List publication sources grouped by category."""
    registry = _container(ctx).source_registry()
    grouped: dict[str, list[PublicationSource]] = {}
    try:
        matches = registry.search(search, category)
    except AcademicScreeningError as exc:
        _fail(str(exc))
    for source in matches:
        grouped.setdefault(source.category, []).append(source)
    for name, members in grouped.items():
        typer.echo(name)
        for source in members:
            typer.echo(f"  {source.id}\t{source.name}\t{source.points} pts")


@sources_app.command("upsert")
def upsert_source(
    ctx: typer.Context,
    source_id: Optional[str] = typer.Option(None, "--id", help="Source id; generated when omitted."),
    name: str = typer.Option(..., help="Publication name."),
    category: str = typer.Option(..., help="Category."),
    points: int = typer.Option(..., help="Points awarded per publication."),
    description: Optional[str] = typer.Option(None, help="Optional description."),
) -> None:
    """Add a source or replace the one with the same id."""
    registry = _container(ctx).source_registry()
    source_id = source_id or uuid.uuid4().hex
    source = PublicationSource(
        id=source_id,
        name=name,
        category=category,
        points=points,
        description=description or None,
    )
    try:
        registry.upsert(source)
    except AcademicScreeningError as exc:
        _fail(str(exc))
    typer.echo(f"Saved source {source_id}.")


@sources_app.command("delete")
def delete_source(
    ctx: typer.Context,
    source_id: str = typer.Argument(..., help="Source id."),
) -> None:
    """Remove a source. Existing publication scores are kept."""
    try:
        _container(ctx).source_registry().delete(source_id)
    except AcademicScreeningError as exc:
        _fail(str(exc))
    typer.echo(f"Deleted source {source_id}.")


def _build_query(
    container: AcademicScreeningContainer,
    *,
    search: str | None,
    status: str | None,
    sort: SortField | None,
    direction: SortDirection | None,
) -> DashboardQuery:
    updates = {
        "search_term": search,
        "status_filter": status,
        "sort_field": sort,
        "sort_direction": direction,
    }
    base = container.dashboard_query()
    try:
        return DashboardQuery.model_validate(
            {
                **base.model_dump(),
                **{key: value for key, value in updates.items() if value is not None},
            }
        )
    except PydanticValidationError as exc:
        raise typer.BadParameter(str(exc)) from exc


def main() -> None:
    app()


if __name__ == "__main__":
    main()
