from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_serializer
from pydantic.alias_generators import to_camel

from specledger.events.models import FailedAssertion
from specledger.formatting.error_chain import dump_error

ResultStatus = Literal["passed", "failed", "pending", "todo", "skipped"]


class _HostModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Location(_HostModel):
    line: int
    column: int


class AssertionResult(_HostModel):
    ancestor_titles: list[str]
    title: str
    full_name: str
    status: ResultStatus
    duration: int | None = None
    location: Location | None = None
    failure_messages: list[str] = Field(default_factory=list)
    failure_details: list[FailedAssertion] = Field(default_factory=list)
    # The engine only reports failed expectations.
    num_passing_asserts: int = 0

    @field_serializer("failure_details")
    def _serialize_failure_details(self, details: list[FailedAssertion]) -> list[dict[str, Any]]:
        return [
            {
                "message": detail.message,
                "stack": detail.stack,
                "matcherName": detail.matcher_name,
                "error": dump_error(detail.error),
                "passed": detail.passed,
            }
            for detail in details
        ]


class SnapshotSummary(_HostModel):
    added: int = 0
    file_deleted: bool = False
    matched: int = 0
    unchecked: int = 0
    unmatched: int = 0
    updated: int = 0


class PerfStats(_HostModel):
    start: int = 0
    end: int = 0
    runtime: int = 0
    slow: bool = False


class RunSummary(_HostModel):
    console: Any = None
    failure_message: str | None = None
    leaks: bool = False
    num_failing_tests: int = 0
    num_passing_tests: int = 0
    num_pending_tests: int = 0
    num_todo_tests: int = 0
    open_handles: list[Any] = Field(default_factory=list)
    perf_stats: PerfStats = Field(default_factory=PerfStats)
    skipped: bool = False
    snapshot: SnapshotSummary = Field(default_factory=SnapshotSummary)
    test_exec_error: Any = None
    test_file_path: str = ""
    test_results: list[AssertionResult] = Field(default_factory=list)

    @property
    def num_total_tests(self) -> int:
        return len(self.test_results)

    def to_host_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)


def create_empty_run_summary(test_path: str = "") -> RunSummary:
    return RunSummary(test_file_path=test_path)
