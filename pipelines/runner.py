from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import Any, Protocol, List, Optional

logger = logging.getLogger(__name__)


@dataclass
class RunContext:
    source: Any = None
    entries: list = field(default_factory=list)
    records: list = field(default_factory=list)
    meta: dict = field(default_factory=dict)


class Step(Protocol):
    def run(self, ctx: RunContext) -> RunContext:
        ...


class Pipeline:
    """Runs steps in order over one RunContext; a raising step aborts the run."""

    def __init__(self, steps: List[Step]):
        self.steps = steps

    def run(self, ctx: Optional[RunContext] = None) -> RunContext:
        ctx = ctx if ctx is not None else RunContext()
        for step in self.steps:
            name = type(step).__name__
            started = time.perf_counter()
            ctx = step.run(ctx)
            elapsed_ms = int((time.perf_counter() - started) * 1000)
            ctx.meta.setdefault("steps", []).append(name)
            logger.debug(f"{name} finished in {elapsed_ms} ms", extra={"step": name, "status": "ok"})
        return ctx
