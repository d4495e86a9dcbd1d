from __future__ import annotations

from typing import Iterator, Optional, Protocol, Sequence

from models.team_member import TeamMember


class RecordStorePort(Protocol):
    def all(self) -> Sequence[TeamMember]:
        ...

    def get(self, record_id: int) -> Optional[TeamMember]:
        ...

    def __len__(self) -> int:
        ...

    def __iter__(self) -> Iterator[TeamMember]:
        ...
