from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class GlobalConfig(BaseModel):
    root_dir: str = "."
    no_stack_trace: bool = False
    output_dir: str | None = None

    model_config = ConfigDict(extra="forbid", frozen=True)


class ProjectConfig(BaseModel):
    root_dir: str = "."
    stack_trace_ignore_patterns: list[str] = Field(default_factory=list)

    model_config = ConfigDict(extra="forbid", frozen=True)


class ReporterConfig(BaseModel):
    global_config: GlobalConfig = Field(default_factory=GlobalConfig, alias="global")
    project: ProjectConfig = Field(default_factory=ProjectConfig)

    model_config = ConfigDict(extra="forbid", frozen=True, populate_by_name=True)
