from .error_chain import (
    CIRCULAR_CAUSE,
    dump_error,
    error_cause,
    error_message,
    error_stack,
    format_error_chain,
    is_error_like,
    is_error_with_cause,
)
from .failure import add_missing_message_to_stack, failure_message
from .results import FailureFormatter, format_result_title, format_results_errors, join_failure_messages

__all__ = [
    "CIRCULAR_CAUSE",
    "FailureFormatter",
    "add_missing_message_to_stack",
    "dump_error",
    "error_cause",
    "error_message",
    "error_stack",
    "failure_message",
    "format_error_chain",
    "format_result_title",
    "format_results_errors",
    "is_error_like",
    "is_error_with_cause",
    "join_failure_messages",
]
