from __future__ import annotations

from typing import Any, Literal, Union

from pydantic import BaseModel, ConfigDict

from .models import SpecEvent, SuiteEvent


class RunStartMessage(BaseModel):
    type: Literal["run_start"]

    model_config = ConfigDict(extra="ignore")


class RunDoneMessage(BaseModel):
    type: Literal["run_done"]

    model_config = ConfigDict(extra="ignore")


class SuiteStartMessage(SuiteEvent):
    type: Literal["suite_start"]


class SuiteDoneMessage(SuiteEvent):
    type: Literal["suite_done"]


class SpecStartMessage(SpecEvent):
    type: Literal["spec_start"]


class SpecDoneMessage(SpecEvent):
    type: Literal["spec_done"]


LifecycleMessage = Union[
    RunStartMessage,
    RunDoneMessage,
    SuiteStartMessage,
    SuiteDoneMessage,
    SpecStartMessage,
    SpecDoneMessage,
]

_MESSAGE_TYPES: dict[str, type[BaseModel]] = {
    "run_start": RunStartMessage,
    "run_done": RunDoneMessage,
    "suite_start": SuiteStartMessage,
    "suite_done": SuiteDoneMessage,
    "spec_start": SpecStartMessage,
    "spec_done": SpecDoneMessage,
}


def parse_message(data: Any) -> LifecycleMessage:
    if not isinstance(data, dict):
        raise ValueError("Lifecycle event must be a JSON object")
    msg_type = data.get("type")
    if not isinstance(msg_type, str):
        raise ValueError("Lifecycle event missing type field")
    model = _MESSAGE_TYPES.get(msg_type)
    if model is None:
        raise ValueError(f"Unknown event type: {msg_type}")
    return model.model_validate(data)
