from __future__ import annotations

from data_validator import RecordValidator
from pipelines.runner import RunContext
from store.errors import MalformedDataError


class ValidateRecords:
    def __init__(self) -> None:
        self.validator = RecordValidator()

    def run(self, ctx: RunContext) -> RunContext:
        outcome = self.validator.validate_all_records(ctx.entries or [])
        ctx.meta["validation_stats"] = self.validator.get_validation_stats()
        # All-or-nothing: one bad entry rejects the whole source
        if outcome['errors']:
            raise MalformedDataError("Directory data is malformed", outcome['errors'])
        ctx.records = outcome['records']
        return ctx
