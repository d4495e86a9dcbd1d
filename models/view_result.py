from __future__ import annotations

from typing import List, Tuple

from pydantic import BaseModel, ConfigDict

from .team_member import TeamMember


class ViewResult(BaseModel):
    """Read-only snapshot of what a view should display for one query/page state."""

    visible: Tuple[TeamMember, ...]
    total_matches: int
    total_pages: int
    page: int
    query: str = ""
    page_size: int = 6
    total_records: int = 0

    model_config = ConfigDict(extra="forbid", frozen=True)

    @property
    def has_previous(self) -> bool:
        return self.page > 1

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages

    @property
    def page_numbers(self) -> List[int]:
        return list(range(1, self.total_pages + 1))

    @property
    def is_empty(self) -> bool:
        return self.total_matches == 0

    @property
    def show_pagination(self) -> bool:
        return self.total_pages > 1
