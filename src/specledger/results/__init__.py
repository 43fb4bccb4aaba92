from .models import (
    AssertionResult,
    Location,
    PerfStats,
    ResultStatus,
    RunSummary,
    SnapshotSummary,
    create_empty_run_summary,
)

__all__ = [
    "AssertionResult",
    "Location",
    "PerfStats",
    "ResultStatus",
    "RunSummary",
    "SnapshotSummary",
    "create_empty_run_summary",
]
