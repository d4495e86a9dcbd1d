from __future__ import annotations

import logging
import math
from typing import List, NamedTuple, Optional, Sequence, Tuple

from config.settings import get_settings
from models.query_state import QueryState
from models.team_member import TeamMember
from models.view_result import ViewResult
from ports.store import RecordStorePort

logger = logging.getLogger(__name__)


class PageSlice(NamedTuple):
    visible: Tuple[TeamMember, ...]
    page: int
    total_pages: int


def matches(record: TeamMember, query: str) -> bool:
    """Case-insensitive substring match over name, title, bio and skills."""
    needle = (query or "").casefold()
    if not needle:
        return True
    if needle in record.name.casefold() or needle in record.title.casefold():
        return True
    if record.bio and needle in record.bio.casefold():
        return True
    return any(needle in skill.casefold() for skill in record.skills)


def filter_records(records: Sequence[TeamMember], query: str) -> List[TeamMember]:
    """Stable filter: matching records in their original order."""
    if not query:
        return list(records)
    return [r for r in records if matches(r, query)]


def total_pages_for(count: int, page_size: int) -> int:
    return max(1, math.ceil(count / page_size))


def clamp_page(requested_page: int, total_pages: int) -> int:
    return max(1, min(int(requested_page), total_pages))


def paginate(filtered: Sequence[TeamMember], page_size: int, requested_page: int) -> PageSlice:
    """Slice one page out of ``filtered``.

    Out-of-range pages are clamped into ``[1, total_pages]``; they never raise.
    An empty ``filtered`` still has one (empty) page.
    """
    if page_size < 1:
        raise ValueError(f"page_size must be positive, got {page_size}")
    total_pages = total_pages_for(len(filtered), page_size)
    page = clamp_page(requested_page, total_pages)
    start = (page - 1) * page_size
    return PageSlice(tuple(filtered[start:start + page_size]), page, total_pages)


def build_view(
    records: Sequence[TeamMember],
    query: str,
    page: int,
    page_size: int,
) -> ViewResult:
    filtered = filter_records(records, query)
    return _view_from(filtered, len(records), query, page, page_size)


def _view_from(
    filtered: Sequence[TeamMember],
    total_records: int,
    query: str,
    page: int,
    page_size: int,
) -> ViewResult:
    page_slice = paginate(filtered, page_size, page)
    return ViewResult(
        visible=page_slice.visible,
        total_matches=len(filtered),
        total_pages=page_slice.total_pages,
        page=page_slice.page,
        query=query,
        page_size=page_size,
        total_records=total_records,
    )


class QueryEngine:
    """Owns one QueryState over a RecordStore and recomputes the view after each transition.

    ``reset_page_on_query`` decides what a query change does to the cursor:
    back to page 1 (default), or keep the current page re-clamped to the new results.
    """

    def __init__(
        self,
        store: RecordStorePort,
        page_size: Optional[int] = None,
        reset_page_on_query: Optional[bool] = None,
    ):
        settings = get_settings()
        if page_size is None:
            page_size = settings.page_size
        if reset_page_on_query is None:
            reset_page_on_query = settings.reset_page_on_query
        if page_size < 1:
            raise ValueError(f"page_size must be positive, got {page_size}")

        self.store = store
        self.reset_page_on_query = reset_page_on_query
        self._state = QueryState(page_size=page_size)
        self._filtered: List[TeamMember] = filter_records(store.all(), self._state.query)
        self._result = self.recompute()

    @property
    def state(self) -> QueryState:
        return self._state.model_copy()

    @property
    def result(self) -> ViewResult:
        return self._result

    @property
    def page_size(self) -> int:
        return self._state.page_size

    def recompute(self) -> ViewResult:
        """Derive the view from the current state; stores the clamped page back."""
        state = self._state
        result = _view_from(
            self._filtered,
            len(self.store),
            state.query,
            state.page,
            state.page_size,
        )
        state.page = result.page
        self._result = result
        return result

    def on_query_change(self, new_query: str) -> ViewResult:
        new_query = new_query or ""
        self._state.query = new_query
        self._filtered = filter_records(self.store.all(), new_query)
        if self.reset_page_on_query:
            self._state.page = 1
        result = self.recompute()
        logger.debug(
            f"Query changed, {result.total_matches} matches",
            extra={"step": "query", "query": new_query, "page": result.page, "total_pages": result.total_pages},
        )
        return result

    def on_page_request(self, requested_page: int) -> ViewResult:
        self._state.page = clamp_page(requested_page, self._result.total_pages)
        result = self.recompute()
        logger.debug(
            f"Page requested: {requested_page}",
            extra={"step": "page", "query": self._state.query, "page": result.page, "total_pages": result.total_pages},
        )
        return result

    def next_page(self) -> ViewResult:
        return self.on_page_request(self._state.page + 1)

    def previous_page(self) -> ViewResult:
        return self.on_page_request(self._state.page - 1)
