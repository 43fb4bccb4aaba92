from __future__ import annotations

import re

from specledger.events.models import FailedAssertion

from .error_chain import format_error_chain, is_error_with_cause

_BARE_ERROR_LINE = re.compile(r"^Error:?\s*\n")


def add_missing_message_to_stack(stack: str, message: str | None) -> str:
    # Some producers leave the message out of the stack and start it with a
    # plain "Error" line instead.
    if stack and message and message not in stack:
        return message + _BARE_ERROR_LINE.sub("\n", stack, count=1)
    return stack


def failure_message(failed: FailedAssertion) -> str:
    if is_error_with_cause(failed.error):
        return format_error_chain(failed.error, set())

    if not failed.matcher_name and isinstance(failed.stack, str) and failed.stack:
        return add_missing_message_to_stack(failed.stack, failed.message)

    return failed.message or ""
