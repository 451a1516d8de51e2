from __future__ import annotations

from typing import Any, TypeVar

from pydantic import BaseModel

from loopless.kernel.step_registry import StepRegistry
from loopless.usecases.config_models import AppConfig
from loopless.usecases.steps import (
    BuildCatalog,
    BuildSieve,
    EmitCallTree,
    OptimizeCatalog,
    RenderUnit,
    SelectTargets,
    VerifyUnit,
    WriteOutput,
)

SectionT = TypeVar("SectionT", bound=BaseModel)


def build_step_registry(config: AppConfig, wiring: dict[str, object]) -> StepRegistry:
    # Step registry is built from typed config + wiring; per-step "config" entries override sections.
    registry = StepRegistry()

    registry.register(
        "build_sieve",
        lambda cfg, w: BuildSieve(sieve_builder=_require(w, "sieve_builder"), logger=w.get("logger")),
    )

    registry.register("build_catalog", lambda cfg, w: BuildCatalog())

    def optimize_catalog(cfg: dict[str, object], w: dict[str, object]) -> OptimizeCatalog:
        section = _override(config.optimizer, cfg)
        return OptimizeCatalog(enabled=section.enabled, tie_break=section.tie_break, logger=w.get("logger"))

    registry.register("optimize_catalog", optimize_catalog)

    targets = None if config.generation.targets == "all" else tuple(config.generation.targets)
    registry.register("select_targets", lambda cfg, w: SelectTargets(targets=targets))

    registry.register(
        "emit_call_tree",
        lambda cfg, w: EmitCallTree(value_limit=_override(config.emitter, cfg).value_limit),
    )

    registry.register("verify_unit", lambda cfg, w: VerifyUnit())

    def render_unit(cfg: dict[str, object], w: dict[str, object]) -> RenderUnit:
        section = _override(config.render, cfg)
        return RenderUnit(format=section.format, prefix=section.prefix, emit_name=section.emit_name)

    registry.register("render_unit", render_unit)

    registry.register(
        "write_output",
        lambda cfg, w: WriteOutput(output_sink=_require(w, "output_sink")),
    )

    return registry


def _override(section: SectionT, cfg: dict[str, object]) -> SectionT:
    # Step overrides go through the section model, so they get the same validation as YAML sections.
    if not cfg:
        return section
    return type(section).model_validate({**section.model_dump(), **cfg})


def _require(wiring: dict[str, object], key: str) -> Any:
    # Wiring must provide required ports; raise KeyError to fail fast.
    if key not in wiring:
        raise KeyError(f"Missing wiring dependency: {key}")
    return wiring[key]
