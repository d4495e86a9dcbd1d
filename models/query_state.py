from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class QueryState(BaseModel):
    """Mutable search/paging cursor owned by a single engine."""

    query: str = ""
    page: int = 1
    page_size: int = Field(default=6, gt=0)

    model_config = ConfigDict(extra="forbid", validate_assignment=True)
