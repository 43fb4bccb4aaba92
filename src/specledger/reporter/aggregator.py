from __future__ import annotations

from concurrent.futures import Future
import logging
import time
from typing import Callable, Literal

from specledger.config.models import GlobalConfig, ProjectConfig
from specledger.events.models import SpecEvent, SuiteEvent
from specledger.formatting.failure import failure_message
from specledger.formatting.results import (
    FailureFormatter,
    format_results_errors,
    join_failure_messages,
)
from specledger.results.models import (
    AssertionResult,
    Location,
    ResultStatus,
    RunSummary,
    SnapshotSummary,
    create_empty_run_summary,
)

from .context import SpecTimer, SuiteContext
from .future import ResultView

logger = logging.getLogger(__name__)

RunState = Literal["idle", "running", "done"]


def _result_status(spec: SpecEvent) -> ResultStatus:
    status = spec.status
    if status is None:
        return "failed" if spec.failed_expectations else "passed"
    if status == "disabled":
        return "pending"
    return status


class RunAggregator:
    """Collects one test file's lifecycle events into a ``RunSummary``.

    The engine drives the ``*_started``/``*_done`` callbacks synchronously and
    in order. The summary is only reachable through ``get_summary()``, a
    read-only view of a future that ``run_done()`` resolves exactly once.
    """

    def __init__(
        self,
        global_config: GlobalConfig | None = None,
        project_config: ProjectConfig | None = None,
        test_path: str = "",
        *,
        failure_formatter: FailureFormatter = format_results_errors,
        empty_summary: Callable[[str], RunSummary] = create_empty_run_summary,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._global_config = global_config or GlobalConfig()
        self._project_config = project_config or ProjectConfig()
        self._test_path = test_path
        self._failure_formatter = failure_formatter
        self._empty_summary = empty_summary
        self._suites = SuiteContext()
        self._timer = SpecTimer(clock)
        self._test_results: list[AssertionResult] = []
        self._state: RunState = "idle"
        self._future: Future[RunSummary] = Future()
        # Running futures cannot be cancelled.
        self._future.set_running_or_notify_cancel()
        self._summary = ResultView(self._future)

    @property
    def state(self) -> RunState:
        return self._state

    @property
    def test_path(self) -> str:
        return self._test_path

    def get_summary(self) -> ResultView[RunSummary]:
        return self._summary

    def _resolve(self, summary: RunSummary) -> None:
        if self._future.done():
            logger.warning("Summary for %s already settled; dropping result", self._test_path)
            return
        self._future.set_result(summary)

    def _reject(self, exc: BaseException) -> None:
        if self._future.done():
            logger.warning("Summary for %s already settled; dropping error %r", self._test_path, exc)
            return
        self._future.set_exception(exc)

    def _accepting(self, event: str) -> bool:
        if self._state == "done":
            logger.warning("Ignoring %s received after run completion", event)
            return False
        if self._state == "idle":
            logger.debug("%s received before run start; starting run", event)
            self._state = "running"
        return True

    def run_started(self) -> None:
        if self._state == "done":
            logger.warning("Ignoring run_start received after run completion")
            return
        self._state = "running"
        logger.debug("Run started for %s", self._test_path)

    def suite_started(self, suite: SuiteEvent) -> None:
        if self._accepting("suite_start"):
            self._suites.enter(suite.description)

    def suite_done(self, suite: SuiteEvent | None = None) -> None:
        if self._accepting("suite_done"):
            self._suites.exit()

    def spec_started(self, spec: SpecEvent) -> None:
        if self._accepting("spec_start"):
            self._timer.start(spec.id)

    def spec_done(self, spec: SpecEvent) -> None:
        if self._accepting("spec_done"):
            self._test_results.append(self._extract_spec_result(spec, self._suites.snapshot()))

    def run_done(self) -> None:
        if self._state == "done":
            logger.warning("run_done received more than once for %s", self._test_path)
            return
        self._state = "done"
        try:
            summary = self._build_summary()
        except Exception as exc:
            logger.exception("Failed to assemble run summary for %s", self._test_path)
            self._reject(exc)
            return
        finally:
            self._timer.clear()
        logger.debug(
            "Run done for %s: %d failing, %d passing, %d pending, %d todo",
            self._test_path,
            summary.num_failing_tests,
            summary.num_passing_tests,
            summary.num_pending_tests,
            summary.num_todo_tests,
        )
        self._resolve(summary)

    def _failure_message(self, results: list[AssertionResult]) -> str | None:
        try:
            return self._failure_formatter(
                results,
                self._project_config,
                self._global_config,
                self._test_path,
            )
        except Exception:
            logger.exception("Failure formatter raised; using plain failure messages")
            return join_failure_messages(results)

    def _build_summary(self) -> RunSummary:
        num_failing_tests = 0
        num_passing_tests = 0
        num_pending_tests = 0
        num_todo_tests = 0
        test_results = list(self._test_results)
        for test_result in test_results:
            if test_result.status == "failed":
                num_failing_tests += 1
            elif test_result.status == "pending":
                num_pending_tests += 1
            elif test_result.status == "todo":
                num_todo_tests += 1
            else:
                num_passing_tests += 1

        return self._empty_summary(self._test_path).model_copy(
            update={
                "console": None,
                "failure_message": self._failure_message(test_results),
                "num_failing_tests": num_failing_tests,
                "num_passing_tests": num_passing_tests,
                "num_pending_tests": num_pending_tests,
                "num_todo_tests": num_todo_tests,
                "snapshot": SnapshotSummary(),
                "test_file_path": self._test_path,
                "test_results": test_results,
            }
        )

    def _extract_spec_result(self, spec: SpecEvent, ancestor_titles: list[str]) -> AssertionResult:
        status = _result_status(spec)
        location = None
        if spec.source_location is not None:
            location = Location(
                line=spec.source_location.line,
                column=spec.source_location.column,
            )
        failure_messages: list[str] = []
        failure_details = []
        for failed in spec.failed_expectations:
            failure_messages.append(failure_message(failed))
            failure_details.append(failed)

        return AssertionResult(
            ancestor_titles=ancestor_titles,
            title=spec.description,
            full_name=spec.full_name,
            status=status,
            duration=self._timer.stop(spec.id, status),
            location=location,
            failure_messages=failure_messages,
            failure_details=failure_details,
        )
