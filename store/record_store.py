from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Iterable, Iterator, Optional, Sequence, Tuple, Union

from models.team_member import TeamMember
from pipelines.runner import Pipeline, RunContext
from pipelines.steps.read_source import ReadSource
from pipelines.steps.validate_records import ValidateRecords

logger = logging.getLogger(__name__)

Source = Union[str, Path, Sequence[Dict[str, Any]], Dict[str, Any]]


class RecordStore:
    """Read-only, ordered set of directory records.

    Build it with :meth:`load`; it never changes afterwards.
    """

    def __init__(self, records: Iterable[TeamMember] = ()):
        self._records: Tuple[TeamMember, ...] = tuple(records)
        self._by_id: Dict[int, TeamMember] = {r.id: r for r in self._records}

    @classmethod
    def load(cls, source: Source) -> "RecordStore":
        """Parse and validate ``source`` once. Raises MalformedDataError on any bad entry."""
        ctx = RunContext(source=source)
        pipeline = Pipeline([
            ReadSource(),
            ValidateRecords(),
        ])
        ctx = pipeline.run(ctx)
        store = cls(ctx.records)
        logger.info(
            f"Loaded {len(store)} records",
            extra={"step": "load", "status": "ok"},
        )
        return store

    def all(self) -> Tuple[TeamMember, ...]:
        return self._records

    def get(self, record_id: int) -> Optional[TeamMember]:
        return self._by_id.get(record_id)

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[TeamMember]:
        return iter(self._records)
