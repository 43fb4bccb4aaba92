from __future__ import annotations

from typing import Iterable

from specledger.events.messages import (
    LifecycleMessage,
    RunDoneMessage,
    RunStartMessage,
    SpecDoneMessage,
    SpecStartMessage,
    SuiteDoneMessage,
    SuiteStartMessage,
)
from specledger.results.models import RunSummary

from .aggregator import RunAggregator
from .future import ResultView


def replay_events(aggregator: RunAggregator, events: Iterable[LifecycleMessage]) -> ResultView[RunSummary]:
    """Feed recorded lifecycle events to ``aggregator`` in order."""
    for event in events:
        if isinstance(event, RunStartMessage):
            aggregator.run_started()
        elif isinstance(event, SuiteStartMessage):
            aggregator.suite_started(event)
        elif isinstance(event, SuiteDoneMessage):
            aggregator.suite_done(event)
        elif isinstance(event, SpecStartMessage):
            aggregator.spec_started(event)
        elif isinstance(event, SpecDoneMessage):
            aggregator.spec_done(event)
        elif isinstance(event, RunDoneMessage):
            aggregator.run_done()
        else:
            raise TypeError(f"Unsupported lifecycle event: {type(event).__name__}")
    return aggregator.get_summary()
