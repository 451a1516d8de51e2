from __future__ import annotations

from typing import Any, Literal

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator, model_validator

# Config models map YAML sections to typed structures.

INT64_MAX = 2**63 - 1


class StepDecl(BaseModel):
    # Step declaration mirrors pipeline.steps entries; "config" is passed to the step factory.
    model_config = ConfigDict(extra="forbid")
    name: str
    config: dict[str, Any] = Field(default_factory=dict)


class PipelineConfig(BaseModel):
    # Pipeline configuration holds the ordered step list.
    model_config = ConfigDict(extra="forbid")
    steps: list[StepDecl]


class GenerationConfig(BaseModel):
    # Range to solve for and the value added to every emitted output.
    model_config = ConfigDict(extra="forbid")
    max: int = Field(ge=1)
    offset: int = 1
    # "all" emits a unit for every number in 1..max; a list restricts output to those numbers.
    targets: Literal["all"] | list[int] = "all"

    @field_validator("targets")
    @classmethod
    def _positive_targets(cls, value: Literal["all"] | list[int]) -> Literal["all"] | list[int]:
        if isinstance(value, list) and any(n < 1 for n in value):
            raise ValueError("generation.targets entries must be >= 1")
        return value

    @model_validator(mode="after")
    def _targets_within_max(self) -> GenerationConfig:
        if isinstance(self.targets, list) and any(n > self.max for n in self.targets):
            raise ValueError("generation.targets entries must be <= generation.max")
        return self


class SieveConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["wheel", "eratosthenes"] = "wheel"


class OptimizerConfig(BaseModel):
    # Disabling the optimizer emits every number from its exact factorization.
    model_config = ConfigDict(extra="forbid")
    enabled: bool = True
    tie_break: Literal["largest", "smallest"] = "largest"


class EmitterConfig(BaseModel):
    # Largest value an emitted unit may compute; defaults to the signed 64-bit range.
    model_config = ConfigDict(extra="forbid")
    value_limit: int = Field(default=INT64_MAX, ge=1)


class RenderConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")
    format: Literal["python", "json", "summary"] = "python"
    prefix: str = "count_to"
    emit_name: str = "print"

    @field_validator("prefix", "emit_name")
    @classmethod
    def _identifier(cls, value: str) -> str:
        if not value.isidentifier():
            raise ValueError(f"{value!r} is not a valid Python identifier")
        return value


class OutputConfig(BaseModel):
    # "-" writes to stdout; any other value is a file path.
    model_config = ConfigDict(extra="forbid")
    file_path: str = Field(default="-", validation_alias=AliasChoices("file_path", "file"))
    atomic_replace: bool = False


class LoggingConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")
    level: Literal["debug", "info", "warning", "error"] = "info"
    sink: Literal["stderr", "jsonl", "none"] = "stderr"
    path: str | None = None

    @model_validator(mode="after")
    def _require_path(self) -> LoggingConfig:
        # For jsonl sink, a path is required to avoid silent defaults.
        if self.sink == "jsonl" and not self.path:
            raise ValueError("logging.path is required when sink is 'jsonl'")
        return self


class ScenarioConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")
    name: str
    description: str | None = None


class AppConfig(BaseModel):
    # AppConfig is the top-level typed view of configuration.
    model_config = ConfigDict(extra="forbid")
    version: int
    scenario: ScenarioConfig
    pipeline: PipelineConfig
    generation: GenerationConfig
    sieve: SieveConfig = Field(default_factory=SieveConfig)
    optimizer: OptimizerConfig = Field(default_factory=OptimizerConfig)
    emitter: EmitterConfig = Field(default_factory=EmitterConfig)
    render: RenderConfig = Field(default_factory=RenderConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
