from __future__ import annotations

import os
import re
from pathlib import Path
from typing import TYPE_CHECKING, Callable, Sequence

from specledger.config.models import GlobalConfig, ProjectConfig

if TYPE_CHECKING:
    from specledger.results.models import AssertionResult

FailureFormatter = Callable[
    ["Sequence[AssertionResult]", ProjectConfig, GlobalConfig, str], "str | None"
]

TITLE_BULLET = "●"
TITLE_SEPARATOR = " › "
MESSAGE_INDENT = "    "

_FRAME_LINE = re.compile(r"^\s*(at |File \")")


def _relativize(text: str, root_dir: str) -> str:
    root = str(Path(root_dir).resolve())
    if root == os.sep:
        return text
    return text.replace(root + os.sep, "")


def _clean_message(message: str, project: ProjectConfig, global_config: GlobalConfig) -> str:
    ignore = [re.compile(pattern) for pattern in project.stack_trace_ignore_patterns]
    lines: list[str] = []
    for line in message.splitlines():
        if _FRAME_LINE.match(line):
            if global_config.no_stack_trace:
                break
            if any(pattern.search(line) for pattern in ignore):
                continue
        lines.append(line)
    return _relativize("\n".join(lines), project.root_dir)


def _indent(text: str) -> str:
    return "\n".join(MESSAGE_INDENT + line if line else line for line in text.splitlines())


def format_result_title(result: AssertionResult) -> str:
    return TITLE_SEPARATOR.join([*result.ancestor_titles, result.title])


def format_results_errors(
    results: Sequence[AssertionResult],
    project: ProjectConfig,
    global_config: GlobalConfig,
    test_path: str,
) -> str | None:
    """Render one block per result carrying failure messages, or None."""
    blocks: list[str] = []
    for result in results:
        if not result.failure_messages:
            continue
        body = "\n\n".join(
            _indent(_clean_message(message, project, global_config))
            for message in result.failure_messages
        )
        blocks.append(f"  {TITLE_BULLET} {format_result_title(result)}\n\n{body}")
    if not blocks:
        return None
    return "\n\n".join(blocks)


def join_failure_messages(results: Sequence[AssertionResult]) -> str | None:
    messages = [message for result in results for message in result.failure_messages]
    return "\n\n".join(messages) if messages else None
