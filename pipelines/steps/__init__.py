# Namespace for pipeline steps
from .read_source import ReadSource  # noqa: F401
from .validate_records import ValidateRecords  # noqa: F401
