from __future__ import annotations

from dataclasses import dataclass

from loopless.kernel.context import ContextFactory
from loopless.kernel.runner import Runner
from loopless.kernel.scenario import Scenario
from loopless.kernel.scenario_builder import ScenarioBuilder
from loopless.observability.logging import StructuredLogger
from loopless.usecases.config_models import AppConfig
from loopless.usecases.wiring import build_step_registry


@dataclass(frozen=True, slots=True)
class AppRuntime:
    # AppRuntime is a small bundle for runner + scenario.
    runner: Runner
    scenario: Scenario


def build_runtime(*, config: AppConfig, wiring: dict[str, object], run_id: str = "run") -> AppRuntime:
    # Composition root wires registry, builder, and runner from the typed config.
    registry = build_step_registry(config, wiring)
    scenario = ScenarioBuilder(registry).build(
        scenario_id=config.scenario.name,
        steps=[step.model_dump() for step in config.pipeline.steps],
        wiring=wiring,
    )
    logger = wiring.get("logger")
    runner = Runner(
        scenario=scenario,
        context_factory=ContextFactory(run_id, config.scenario.name),
        logger=logger if isinstance(logger, StructuredLogger) else None,
    )
    return AppRuntime(runner=runner, scenario=scenario)
