"""Rendering of chained errors.

An error is "error-like" when it is a Python exception, or any other object
(not a string or mapping) exposing a string ``message`` or ``stack``
attribute. Serialized engine errors (``ErrorInfo``) qualify through the
latter. Causes come from ``__cause__`` for exceptions and from the ``cause``
attribute otherwise.
"""

from __future__ import annotations

import traceback
from typing import Any, Mapping

CIRCULAR_CAUSE = "[Circular cause]"


def is_error_like(value: Any) -> bool:
    if isinstance(value, BaseException):
        return True
    if value is None or isinstance(value, (str, bytes, Mapping)):
        return False
    return isinstance(getattr(value, "message", None), str) or isinstance(
        getattr(value, "stack", None), str
    )


def error_message(error: Any) -> str:
    if isinstance(error, BaseException):
        return str(error)
    message = getattr(error, "message", None)
    return message if isinstance(message, str) else ""


def error_stack(error: Any) -> str | None:
    if isinstance(error, BaseException):
        lines = traceback.format_exception(type(error), error, error.__traceback__, chain=False)
        return "".join(lines).rstrip("\n")
    stack = getattr(error, "stack", None)
    return stack if isinstance(stack, str) else None


def error_cause(error: Any) -> Any:
    if isinstance(error, BaseException) and error.__cause__ is not None:
        return error.__cause__
    return getattr(error, "cause", None)


def is_error_with_cause(value: Any) -> bool:
    """Return True when ``value`` is error-like and its cause can be chained.

    The cause must itself be a string or error-like; an error whose ``cause``
    holds some other object is treated as a plain error.
    """
    if not is_error_like(value):
        return False
    cause = error_cause(value)
    if cause is None:
        return False
    return isinstance(cause, str) or is_error_like(cause)


def format_error_chain(error: Any, seen: set[int]) -> str:
    """Render ``error`` followed by its cause chain.

    ``seen`` holds the ``id()`` of errors already rendered on this chain; a
    cause found in it is replaced with ``CIRCULAR_CAUSE``.
    """
    stack = error_stack(error)
    text = stack if stack else error_message(error)

    if not is_error_with_cause(error):
        return text

    cause = error_cause(error)
    if isinstance(cause, str):
        cause_text = cause
    elif id(cause) in seen:
        cause_text = CIRCULAR_CAUSE
    else:
        seen.add(id(error))
        cause_text = format_error_chain(cause, seen)

    return f"{text}\n\n[cause]: {cause_text}"


def dump_error(value: Any, seen: set[int] | None = None) -> Any:
    """JSON-safe view of an error value, cutting cycles with ``CIRCULAR_CAUSE``."""
    if value is None or isinstance(value, (str, int, float, bool)):
        return value
    if seen is None:
        seen = set()
    if not is_error_like(value):
        if isinstance(value, Mapping):
            seen.add(id(value))
            return {
                str(key): CIRCULAR_CAUSE if id(item) in seen else dump_error(item, seen)
                for key, item in value.items()
            }
        return repr(value)

    seen.add(id(value))
    payload: dict[str, Any] = {
        "message": error_message(value),
        "stack": error_stack(value),
    }
    cause = error_cause(value)
    if cause is not None:
        if isinstance(cause, str):
            payload["cause"] = cause
        elif id(cause) in seen:
            payload["cause"] = CIRCULAR_CAUSE
        else:
            payload["cause"] = dump_error(cause, seen)
    return payload
