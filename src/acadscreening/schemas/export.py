"""Export field selection."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ExportFormat(str, Enum):
    CSV = "csv"
    JSON = "json"


class ExportOptions(BaseModel):
    """Attribute groups to include in each exported record."""

    personal_info: bool = True
    publications: bool = True
    scoring: bool = True
    reviewer_notes: bool = False

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
    )
