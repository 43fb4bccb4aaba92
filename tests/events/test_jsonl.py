from __future__ import annotations

import io
import json

import pytest

from specledger.events.jsonl import JsonlParseError, iter_jsonl
from specledger.events.messages import SpecDoneMessage, SuiteStartMessage, parse_message
from specledger.events.models import ErrorInfo


def _stream(*payloads: object) -> io.StringIO:
    lines = [payload if isinstance(payload, str) else json.dumps(payload) for payload in payloads]
    return io.StringIO("\n".join(lines) + "\n")


def test_iter_jsonl_parses_lifecycle_events() -> None:
    stream = _stream(
        {"type": "run_start"},
        "",
        {"type": "suite_start", "description": "parent"},
        {
            "type": "spec_done",
            "id": "spec0",
            "description": "works",
            "fullName": "parent works",
            "status": "failed",
            "failedExpectations": [
                {"message": "boom", "error": {"message": "boom", "cause": "disk full"}}
            ],
        },
    )

    events = list(iter_jsonl(stream))

    assert [event.type for event in events] == ["run_start", "suite_start", "spec_done"]
    assert isinstance(events[1], SuiteStartMessage)
    spec = events[2]
    assert isinstance(spec, SpecDoneMessage)
    assert spec.full_name == "parent works"
    error = spec.failed_expectations[0].error
    assert isinstance(error, ErrorInfo)
    assert error.cause == "disk full"


def test_iter_jsonl_reports_invalid_json_line() -> None:
    stream = _stream({"type": "run_start"}, "{not json")

    with pytest.raises(JsonlParseError) as excinfo:
        list(iter_jsonl(stream))

    assert excinfo.value.line_number == 2
    assert "Invalid JSON" in str(excinfo.value)


def test_iter_jsonl_reports_unknown_event_type() -> None:
    with pytest.raises(JsonlParseError) as excinfo:
        list(iter_jsonl(_stream({"type": "spec_paused"})))

    assert "Unknown event type" in excinfo.value.message


def test_iter_jsonl_reports_invalid_event_fields() -> None:
    with pytest.raises(JsonlParseError):
        list(iter_jsonl(_stream({"type": "spec_done", "status": "passed"})))


def test_parse_message_requires_object_with_type() -> None:
    with pytest.raises(ValueError):
        parse_message(["run_start"])
    with pytest.raises(ValueError):
        parse_message({"description": "parent"})


def test_error_without_message_keys_is_kept_as_is() -> None:
    message = parse_message(
        {
            "type": "spec_done",
            "id": "a",
            "status": "failed",
            "failedExpectations": [{"message": "boom", "error": {"code": 3}}],
        }
    )

    assert message.failed_expectations[0].error == {"code": 3}
