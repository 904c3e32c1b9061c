"""Dashboard query parameters."""

from __future__ import annotations

from enum import Enum
from typing import Literal, Union

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from .candidate import CandidateStatus

StatusFilter = Union[CandidateStatus, Literal["all"]]


class SortField(str, Enum):
    NAME = "name"
    INSTITUTION = "institution"
    SUBMISSION_DATE = "submissionDate"
    TOTAL_SCORE = "totalScore"
    STATUS = "status"


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"


class DashboardQuery(BaseModel):
    """The five dashboard inputs, defaulting to newest submissions first."""

    search_term: str = ""
    status_filter: StatusFilter = "all"
    sort_field: SortField = SortField.SUBMISSION_DATE
    sort_direction: SortDirection = SortDirection.DESC

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
    )
