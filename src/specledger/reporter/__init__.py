from .aggregator import RunAggregator, RunState
from .context import SpecTimer, SuiteContext
from .future import ResultView
from .replay import replay_events

__all__ = [
    "RunAggregator",
    "ResultView",
    "RunState",
    "SpecTimer",
    "SuiteContext",
    "replay_events",
]
