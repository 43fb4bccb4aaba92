from __future__ import annotations

from types import SimpleNamespace

from specledger.events.models import ErrorInfo, FailedAssertion
from specledger.formatting.failure import add_missing_message_to_stack, failure_message


def test_serializes_error_cause() -> None:
    nested = ErrorInfo(message="error during g", stack="Error: error during g\n    at g (spec.js:2:3)")
    error = ErrorInfo(
        message="error during f",
        stack="Error: error during f\n    at f (spec.js:1:1)",
        cause=nested,
    )
    failed = FailedAssertion(
        error=error,
        matcher_name="",
        message=error.message,
        stack=error.stack,
    )

    assert "[cause]: Error: error during g" in failure_message(failed)


def test_cause_chain_ignores_assertion_message_and_stack() -> None:
    failed = FailedAssertion(
        message="ignored",
        stack="Error: ignored",
        matcher_name="toBe",
        error=ValueError("outer"),
    )
    failed.error.__cause__ = KeyError("inner")

    assert failure_message(failed) == "ValueError: outer\n\n[cause]: KeyError: 'inner'"


def test_serialized_error_mapping_is_coerced() -> None:
    failed = FailedAssertion.model_validate(
        {
            "message": "error during f",
            "stack": "Error: error during f",
            "matcherName": None,
            "passed": False,
            "error": {
                "message": "error during f",
                "stack": "Error: error during f",
                "cause": "timeout",
            },
        }
    )

    assert isinstance(failed.error, ErrorInfo)
    assert failure_message(failed) == "Error: error during f\n\n[cause]: timeout"


def test_serialized_error_with_nested_cause_mapping() -> None:
    failed = FailedAssertion.model_validate(
        {
            "message": "outer",
            "stack": "Error: outer",
            "error": {"message": "outer", "stack": "Error: outer", "cause": {"message": "inner"}},
        }
    )

    assert isinstance(failed.error.cause, ErrorInfo)
    assert failure_message(failed) == "Error: outer\n\n[cause]: inner"


def test_serialized_error_with_non_error_cause_is_accepted() -> None:
    stack = "Error: boom\n    at f (spec.js:1:1)"
    for cause in ({"code": 3}, 42, ["a", "b"]):
        failed = FailedAssertion.model_validate(
            {
                "message": "boom",
                "stack": stack,
                "error": {"message": "boom", "stack": stack, "cause": cause},
            }
        )

        assert failed.error.cause == cause
        assert failure_message(failed) == stack


def test_stack_without_message_line_is_repaired() -> None:
    failed = FailedAssertion(
        message="No provider for Foo!",
        stack="Error\n    at injector (core.js:1:1)",
    )

    assert failure_message(failed) == "No provider for Foo!\n    at injector (core.js:1:1)"


def test_stack_with_bare_error_colon_line_is_repaired() -> None:
    stack = "Error: \n    at injector (core.js:1:1)"

    assert add_missing_message_to_stack(stack, "boom") == "boom\n    at injector (core.js:1:1)"


def test_stack_containing_message_is_unchanged() -> None:
    stack = "Error: boom\n    at f (spec.js:1:1)"
    failed = FailedAssertion(message="boom", stack=stack)

    assert failure_message(failed) == stack


def test_matcher_failures_use_message() -> None:
    failed = FailedAssertion(
        message="Expected 1 to be 2.",
        stack="Error: Expected 1 to be 2.\n    at spec.js:4:5",
        matcher_name="toBe",
    )

    assert failure_message(failed) == "Expected 1 to be 2."


def test_error_without_usable_cause_falls_back_to_stack() -> None:
    failed = FailedAssertion(
        message="boom",
        stack="Error: boom\n    at f (spec.js:1:1)",
        error=SimpleNamespace(message="boom", cause={"code": 3}),
    )

    assert failure_message(failed) == "Error: boom\n    at f (spec.js:1:1)"


def test_empty_stack_uses_message() -> None:
    assert failure_message(FailedAssertion(message="boom", stack="")) == "boom"
    assert failure_message(FailedAssertion()) == ""
