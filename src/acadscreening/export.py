"""Flatten candidates into export records and encode them as CSV or JSON."""

from __future__ import annotations

import csv
import io
import json
from pathlib import Path
from typing import Iterable, Sequence, Union

import structlog

from .core.sources import SourceLookup
from .schemas import Candidate, ExportFormat, ExportOptions, Publication

ExportValue = Union[str, int, float]
ExportRecord = dict[str, ExportValue]

EXPORT_FILENAMES: dict[ExportFormat, str] = {
    ExportFormat.CSV: "candidates_export.csv",
    ExportFormat.JSON: "candidates_export.json",
}

PUBLICATION_FIELDS: tuple[str, ...] = (
    "title",
    "type",
    "source",
    "category",
    "score",
    "date",
    "doi",
    "url",
)


def publication_key(position: int, field: str) -> str:
    """Column name for a publication attribute; ``position`` is 1-based."""
    return f"publication_{position}_{field}"


class ExportRecordBuilder:
    """Build one flat record per candidate for the selected field groups.

    ``id``, ``submissionDate`` and ``status`` are always present. Publication
    source name and category are looked up in the registry at build time, so
    a deleted source exports as empty strings while the frozen score is kept.
    """

    def __init__(self, registry: SourceLookup, options: ExportOptions | None = None) -> None:
        self._registry = registry
        self._options = options or ExportOptions()

    @property
    def options(self) -> ExportOptions:
        return self._options

    def build(self, candidate: Candidate) -> ExportRecord:
        record: ExportRecord = {
            "id": candidate.id,
            "submissionDate": candidate.submission_date.isoformat(),
            "status": candidate.status.value,
        }
        if self._options.personal_info:
            record.update(self._personal_info(candidate))
        if self._options.scoring:
            record.update(self._scoring(candidate))
        if self._options.reviewer_notes:
            record.update(self._reviewer_notes(candidate))
        if self._options.publications:
            for position, publication in enumerate(candidate.publications, start=1):
                record.update(self._publication(position, publication))
        return record

    def build_many(self, candidates: Iterable[Candidate]) -> list[ExportRecord]:
        return [self.build(candidate) for candidate in candidates]

    @staticmethod
    def _personal_info(candidate: Candidate) -> ExportRecord:
        return {
            "name": candidate.name,
            "email": candidate.email,
            "institution": candidate.institution,
            "department": candidate.department or "",
            "position": candidate.position or "",
            "phone": candidate.phone or "",
            "orcid": candidate.orcid or "",
        }

    @staticmethod
    def _scoring(candidate: Candidate) -> ExportRecord:
        count = len(candidate.publications)
        if not count:
            average: int | float = 0
        elif candidate.total_score % count == 0:
            average = candidate.total_score // count
        else:
            average = candidate.total_score / count
        return {
            "totalScore": candidate.total_score,
            "publicationCount": count,
            "averagePublicationScore": average,
        }

    @staticmethod
    def _reviewer_notes(candidate: Candidate) -> ExportRecord:
        return {
            "reviewerNotes": candidate.reviewer_notes or "",
            "reviewerScore": candidate.reviewer_score if candidate.reviewer_score is not None else "",
        }

    def _publication(self, position: int, publication: Publication) -> ExportRecord:
        source = self._registry.get_by_id(publication.source) if publication.source else None
        values: dict[str, ExportValue] = {
            "title": publication.title,
            "type": publication.type.value,
            "source": source.name if source else "",
            "category": source.category if source else "",
            "score": publication.score,
            "date": publication.publication_date.isoformat(),
            "doi": publication.doi or "",
            "url": publication.url or "",
        }
        return {publication_key(position, name): values[name] for name in PUBLICATION_FIELDS}


def encode_csv(records: Sequence[ExportRecord]) -> str:
    """Encode records as comma-separated text.

    The header is taken from the first record only. Later records are
    written in that column order with missing keys left empty and keys the
    first record lacks dropped.
    """
    if not records:
        return ""
    header = list(records[0].keys())
    buffer = io.StringIO()
    writer = csv.DictWriter(
        buffer,
        fieldnames=header,
        restval="",
        extrasaction="ignore",
        lineterminator="\n",
    )
    writer.writeheader()
    writer.writerows(records)
    return buffer.getvalue()


def encode_json(records: Sequence[ExportRecord]) -> str:
    return json.dumps(list(records), ensure_ascii=False, indent=2)


class CandidateExporter:
    """Write candidate exports to ``candidates_export.<format>``."""

    def __init__(self, registry: SourceLookup) -> None:
        self._registry = registry
        self._logger = structlog.get_logger(__name__)

    def build_records(
        self,
        candidates: Iterable[Candidate],
        options: ExportOptions | None = None,
    ) -> list[ExportRecord]:
        return ExportRecordBuilder(self._registry, options).build_many(candidates)

    def render(
        self,
        candidates: Iterable[Candidate],
        options: ExportOptions | None = None,
        fmt: ExportFormat | str = ExportFormat.CSV,
    ) -> str:
        records = self.build_records(candidates, options)
        if ExportFormat(fmt) is ExportFormat.CSV:
            return encode_csv(records)
        return encode_json(records)

    def export(
        self,
        candidates: Iterable[Candidate],
        options: ExportOptions | None = None,
        fmt: ExportFormat | str = ExportFormat.CSV,
        output_dir: str | Path = ".",
    ) -> Path | None:
        """Write the export file, replacing any previous one.

        Returns None without writing when a CSV export has no rows.
        """
        fmt = ExportFormat(fmt)
        records = self.build_records(candidates, options)
        if fmt is ExportFormat.CSV and not records:
            self._logger.info("export.skipped", format=fmt.value, reason="no_records")
            return None

        content = encode_csv(records) if fmt is ExportFormat.CSV else encode_json(records)
        path = Path(output_dir) / EXPORT_FILENAMES[fmt]
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        self._logger.info(
            "export.written",
            format=fmt.value,
            path=str(path),
            record_count=len(records),
        )
        return path
