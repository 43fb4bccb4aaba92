from __future__ import annotations

import logging
import time
from typing import Callable

logger = logging.getLogger(__name__)

UNTIMED_STATUSES = frozenset({"pending", "skipped"})


class SuiteContext:
    """Names of the suites currently open, root first."""

    def __init__(self) -> None:
        self._stack: list[str] = []

    def __len__(self) -> int:
        return len(self._stack)

    def enter(self, name: str) -> None:
        self._stack.append(name)

    def exit(self) -> None:
        if not self._stack:
            logger.debug("Suite exit with no open suite; ignoring")
            return
        self._stack.pop()

    def snapshot(self) -> list[str]:
        return list(self._stack)


class SpecTimer:
    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self._start_times: dict[str, float] = {}

    def __len__(self) -> int:
        return len(self._start_times)

    def start(self, spec_id: str) -> None:
        self._start_times[spec_id] = self._clock()

    def stop(self, spec_id: str, status: str) -> int | None:
        """Return elapsed milliseconds for ``spec_id``, or None if it did not run."""
        start = self._start_times.pop(spec_id, None)
        if start is None:
            logger.debug("No start time recorded for spec %s", spec_id)
            return None
        if status in UNTIMED_STATUSES:
            return None
        elapsed_ms = round((self._clock() - start) * 1000)
        return max(0, elapsed_ms)

    def clear(self) -> None:
        self._start_times.clear()
