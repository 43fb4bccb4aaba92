from __future__ import annotations

from dataclasses import dataclass
import json
from typing import Generator, TextIO

from pydantic import ValidationError

from .messages import LifecycleMessage, parse_message


@dataclass(frozen=True)
class JsonlParseError(Exception):
    message: str
    line: str
    line_number: int

    def __str__(self) -> str:
        return f"{self.message} (line {self.line_number}): {self.line}"


def iter_jsonl(stream: TextIO) -> Generator[LifecycleMessage, None, None]:
    for line_number, line in enumerate(stream, start=1):
        stripped = line.strip()
        if not stripped:
            continue
        try:
            raw = json.loads(stripped)
        except json.JSONDecodeError as exc:
            raise JsonlParseError(
                message="Invalid JSON in event stream",
                line=stripped[:200],
                line_number=line_number,
            ) from exc
        try:
            message = parse_message(raw)
        except (ValueError, ValidationError) as exc:
            raise JsonlParseError(
                message=str(exc).splitlines()[0],
                line=stripped[:200],
                line_number=line_number,
            ) from exc
        yield message
