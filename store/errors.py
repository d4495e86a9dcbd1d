from __future__ import annotations

from typing import Iterable, List, Optional


class MalformedDataError(ValueError):
    """Raised when the directory source cannot be loaded as a whole."""

    def __init__(self, message: str, errors: Optional[Iterable[str]] = None):
        self.errors: List[str] = list(errors or [])
        if self.errors:
            message = f"{message}: " + "; ".join(self.errors)
        super().__init__(message)
