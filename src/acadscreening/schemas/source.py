from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class PublicationSource(BaseModel):
    """Publication venue with its category and prestige points.

    Loading is lenient so that any stored table can be read back; the
    registry enforces non-empty name/category and non-negative points on
    write.
    """

    id: str
    name: str
    category: str
    points: int = 0
    description: str | None = None

    model_config = ConfigDict(extra="ignore")
