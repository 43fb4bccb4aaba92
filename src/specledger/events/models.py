from __future__ import annotations

from typing import Any, Literal, Mapping

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

SpecStatus = Literal["passed", "failed", "pending", "disabled", "todo", "skipped"]


def _coerce_error_mapping(value: Any) -> Any:
    if isinstance(value, Mapping) and ("message" in value or "stack" in value):
        return ErrorInfo.model_validate(dict(value))
    return value


class ErrorInfo(BaseModel):
    """Serialized error as recorded by the engine.

    ``cause`` mirrors the runtime error's ``cause``. Mappings carrying a
    ``message`` or ``stack`` become nested ``ErrorInfo``; anything else is
    kept as recorded and does not form a chain.
    """

    message: str = ""
    stack: str | None = None
    cause: Any = None

    model_config = ConfigDict(extra="ignore")

    @field_validator("cause", mode="before")
    @classmethod
    def _coerce_cause(cls, value: Any) -> Any:
        return _coerce_error_mapping(value)


class SourceLocation(BaseModel):
    line: int
    column: int

    model_config = ConfigDict(extra="ignore")


class FailedAssertion(BaseModel):
    message: str = ""
    stack: str | None = None
    matcher_name: str | None = None
    error: Any = None
    passed: bool = False

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    @field_validator("error", mode="before")
    @classmethod
    def _coerce_error(cls, value: Any) -> Any:
        return _coerce_error_mapping(value)


class SuiteEvent(BaseModel):
    description: str

    model_config = ConfigDict(extra="ignore")


class SpecEvent(BaseModel):
    id: str
    description: str = ""
    full_name: str = ""
    # Unset until the engine reports the spec as finished.
    status: SpecStatus | None = None
    failed_expectations: list[FailedAssertion] = Field(default_factory=list)
    source_location: SourceLocation | None = None

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )
