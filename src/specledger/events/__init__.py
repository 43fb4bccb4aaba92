from .jsonl import JsonlParseError, iter_jsonl
from .messages import (
    LifecycleMessage,
    RunDoneMessage,
    RunStartMessage,
    SpecDoneMessage,
    SpecStartMessage,
    SuiteDoneMessage,
    SuiteStartMessage,
    parse_message,
)
from .models import ErrorInfo, FailedAssertion, SourceLocation, SpecEvent, SpecStatus, SuiteEvent

__all__ = [
    "ErrorInfo",
    "FailedAssertion",
    "JsonlParseError",
    "LifecycleMessage",
    "RunDoneMessage",
    "RunStartMessage",
    "SourceLocation",
    "SpecDoneMessage",
    "SpecEvent",
    "SpecStartMessage",
    "SpecStatus",
    "SuiteDoneMessage",
    "SuiteEvent",
    "SuiteStartMessage",
    "iter_jsonl",
    "parse_message",
]
