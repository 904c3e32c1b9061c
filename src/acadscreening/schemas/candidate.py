from __future__ import annotations

from datetime import date, datetime, timezone
from enum import Enum

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_serializer,
    field_validator,
)
from pydantic.alias_generators import to_camel


class CandidateStatus(str, Enum):
    """Review status; any status may follow any other."""

    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"
    FLAGGED = "flagged"


class PublicationType(str, Enum):
    JOURNAL = "journal"
    CONFERENCE = "conference"
    BOOK = "book"
    CHAPTER = "chapter"
    PATENT = "patent"
    OTHER = "other"


class Publication(BaseModel):
    """Publication embedded in a candidate record.

    ``score`` is a snapshot of the referenced source's points taken when the
    source was set; it does not follow later registry edits.
    """

    id: str
    title: str
    type: PublicationType = PublicationType.JOURNAL
    source: str = ""
    doi: str | None = None
    url: str | None = None
    publication_date: date
    score: int = 0

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        validate_assignment=True,
        extra="ignore",
    )


class Candidate(BaseModel):
    """Submitted candidate with personal data and publication list."""

    id: str
    name: str
    email: str
    institution: str
    department: str | None = None
    position: str | None = None
    phone: str | None = None
    orcid: str | None = None
    submission_date: datetime
    status: CandidateStatus = CandidateStatus.PENDING
    total_score: int = 0
    publications: list[Publication] = Field(default_factory=list)
    reviewer_notes: str | None = None
    reviewer_score: int | None = Field(default=None, ge=1, le=5)

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        validate_assignment=True,
        extra="ignore",
    )

    @field_validator("submission_date")
    @classmethod
    def _assume_utc(cls, value: datetime) -> datetime:
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value

    @field_serializer("submission_date", when_used="json")
    def _serialize_submission_date(self, value: datetime) -> str:
        return value.isoformat()

    def to_record(self) -> dict:
        """Return the camelCase mapping used for persistence."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
