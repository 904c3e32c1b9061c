"""Validated input for a new candidate submission."""

from __future__ import annotations

import re
from datetime import date

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from .candidate import PublicationType

EMAIL_RE = re.compile(r"\S+@\S+\.\S+")
ORCID_RE = re.compile(r"^\d{4}-\d{4}-\d{4}-\d{3}[\dX]$")
DOI_RE = re.compile(r"^10\.\d+/.+")
URL_RE = re.compile(r"^https?://.+")

_INPUT_CONFIG = ConfigDict(
    alias_generator=to_camel,
    populate_by_name=True,
    str_strip_whitespace=True,
    extra="forbid",
)


def _blank_to_none(value: str | None) -> str | None:
    if value is None:
        return None
    return value or None


class PersonalInfo(BaseModel):
    """Contact and affiliation details entered by the candidate."""

    name: str = Field(min_length=1)
    email: str = Field(min_length=1)
    institution: str = Field(min_length=1)
    department: str | None = None
    position: str | None = None
    phone: str | None = None
    orcid: str | None = None

    model_config = _INPUT_CONFIG

    @field_validator("department", "position", "phone", "orcid")
    @classmethod
    def _optional_blank(cls, value: str | None) -> str | None:
        return _blank_to_none(value)

    @field_validator("email")
    @classmethod
    def _check_email(cls, value: str) -> str:
        if not EMAIL_RE.search(value):
            raise ValueError("Invalid email format")
        return value

    @field_validator("orcid")
    @classmethod
    def _check_orcid(cls, value: str | None) -> str | None:
        if value is not None and not ORCID_RE.match(value):
            raise ValueError("Invalid ORCID format (xxxx-xxxx-xxxx-xxxx)")
        return value


class PublicationDraft(BaseModel):
    """Publication as entered, before it is scored."""

    title: str = Field(min_length=1)
    type: PublicationType = PublicationType.JOURNAL
    source: str = Field(min_length=1)
    doi: str | None = None
    url: str | None = None
    publication_date: date

    model_config = _INPUT_CONFIG

    @field_validator("doi", "url")
    @classmethod
    def _optional_blank(cls, value: str | None) -> str | None:
        return _blank_to_none(value)

    @field_validator("doi")
    @classmethod
    def _check_doi(cls, value: str | None) -> str | None:
        if value is not None and not DOI_RE.match(value):
            raise ValueError("Invalid DOI format")
        return value

    @field_validator("url")
    @classmethod
    def _check_url(cls, value: str | None) -> str | None:
        if value is not None and not URL_RE.match(value):
            raise ValueError("Invalid URL format")
        return value


class CandidateSubmission(BaseModel):
    personal: PersonalInfo
    publications: list[PublicationDraft] = Field(min_length=1)

    model_config = _INPUT_CONFIG
