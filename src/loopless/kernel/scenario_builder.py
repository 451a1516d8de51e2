from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass

from loopless.kernel.scenario import Scenario, StepSpec
from loopless.kernel.step_registry import StepFactory, StepRegistry, UnknownStepError


class InvalidScenarioConfigError(ValueError):
    pass


class StepBuildError(RuntimeError):
    # A step factory rejected its config or wiring; the original error is kept as cause.
    def __init__(self, step_name: str, cause: Exception) -> None:
        super().__init__(f"Failed to build step '{step_name}': {cause}")
        self.step_name = step_name
        self.cause = cause


@dataclass(frozen=True, slots=True)
class ScenarioBuilder:
    """Turn ``pipeline.steps`` declarations into a runnable :class:`Scenario`.

    Every declaration is checked against the registry before any factory
    runs, so a typo in the last step name is reported without building
    (and opening resources for) the earlier ones.
    """

    registry: StepRegistry

    def build(
        self,
        *,
        scenario_id: str,
        steps: Sequence[Mapping[str, object]],
        wiring: dict[str, object],
    ) -> Scenario:
        if not steps:
            raise InvalidScenarioConfigError("pipeline.steps must declare at least one step")

        resolved = [self._resolve(idx, decl) for idx, decl in enumerate(steps)]
        built: list[StepSpec] = []
        for name, factory, config in resolved:
            try:
                step = factory(config, wiring)
            except Exception as exc:  # noqa: BLE001 - surfaced with the step name
                raise StepBuildError(name, exc) from exc
            built.append(StepSpec(name=name, step=step))
        return Scenario(scenario_id=scenario_id, steps=built)

    def _resolve(self, idx: int, decl: Mapping[str, object]) -> tuple[str, StepFactory, dict[str, object]]:
        name = decl.get("name")
        if not isinstance(name, str):
            raise InvalidScenarioConfigError(f"pipeline.steps[{idx}].name must be a string")
        if name not in self.registry:
            raise UnknownStepError(f"pipeline.steps[{idx}]: unknown step '{name}'")
        config = decl.get("config", {})
        if not isinstance(config, dict):
            raise InvalidScenarioConfigError(f"pipeline.steps[{idx}].config must be a mapping")
        return name, self.registry.get(name), config
