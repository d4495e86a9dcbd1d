from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, List

from pipelines.runner import RunContext
from store.errors import MalformedDataError

logger = logging.getLogger(__name__)

# Wrapper keys accepted when the document is an object rather than a bare array
_LIST_KEYS = ("members", "records")


def _unwrap(data: Any) -> List[Any]:
    if isinstance(data, dict):
        for key in _LIST_KEYS:
            if key in data:
                data = data[key]
                break
        else:
            raise MalformedDataError(
                "Directory document must be an array of records",
                [f"object has none of the keys: {', '.join(_LIST_KEYS)}"],
            )
    if not isinstance(data, (list, tuple)):
        raise MalformedDataError(
            "Directory document must be an array of records",
            [f"got {type(data).__name__}"],
        )
    return list(data)


class ReadSource:
    """Resolve ctx.source (path or parsed data) into a list of raw entries."""

    def run(self, ctx: RunContext) -> RunContext:
        source = ctx.source
        if isinstance(source, (str, Path)):
            path = Path(source)
            text = path.read_text(encoding="utf-8")
            try:
                data = json.loads(text)
            except json.JSONDecodeError as e:
                raise MalformedDataError(f"Invalid JSON in {path}", [str(e)]) from e
            ctx.meta["source_name"] = str(path)
        else:
            data = source
            ctx.meta["source_name"] = "<memory>"
        ctx.entries = _unwrap(data)
        logger.info(
            f"Read {len(ctx.entries)} entries from {ctx.meta['source_name']}",
            extra={"step": "read_source", "status": "ok"},
        )
        return ctx
