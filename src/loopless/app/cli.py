from __future__ import annotations

import argparse
from collections.abc import Sequence
from pathlib import Path

from loopless.adapters.factory import build_wiring
from loopless.adapters.log_sinks import StderrLogSink
from loopless.config.loader import ConfigError, load_config, parse_config
from loopless.domain.errors import LooplessError
from loopless.kernel.composition_root import build_runtime
from loopless.kernel.scenario_builder import InvalidScenarioConfigError, StepBuildError
from loopless.kernel.step_registry import UnknownStepError
from loopless.observability.logging import StructuredLogger
from loopless.ports.output_sink import OutputSink
from loopless.usecases.config_models import AppConfig, StepDecl
from loopless.usecases.messages import GenerationRequest

EXIT_OK = 0
EXIT_INVALID = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="loopless",
        description="Generate loop-free, branch-free code that counts from offset to offset+n-1",
    )
    parser.add_argument("--config", help="Path to YAML config (packaged default when omitted)")
    parser.add_argument("--max", type=int, help="Generate units for every number in 1..MAX")
    parser.add_argument("--offset", type=int, help="Value added to every emitted output")
    parser.add_argument("--only", type=int, nargs="+", metavar="N", help="Emit units only for these numbers")
    parser.add_argument("--format", choices=["python", "json", "summary"], help="Rendering of each unit")
    parser.add_argument("--output", help="Output file path ('-' for stdout)")
    parser.add_argument("--sieve", choices=["wheel", "eratosthenes"], help="Prime sieve implementation")
    parser.add_argument("--optimizer", choices=["enable", "disable"], help="Override optimizer enabled flag")
    parser.add_argument("--tie-break", choices=["largest", "smallest"], help="Preferred base among equal-cost candidates")
    parser.add_argument(
        "--verify",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Execute every generated unit and check its output before writing it",
    )
    parser.add_argument("--log-level", choices=["debug", "info", "warning", "error"])
    return parser


def parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    # Parse CLI arguments; caller passes argv for testability.
    return build_parser().parse_args(argv)


def apply_overrides(config: AppConfig, args: argparse.Namespace) -> AppConfig:
    # CLI overrides take precedence over config; the result is validated again as a whole.
    if args.max is not None:
        config.generation.max = args.max
    if args.offset is not None:
        config.generation.offset = args.offset
    if args.only is not None:
        config.generation.targets = list(args.only)
    if args.format is not None:
        config.render.format = args.format
    if args.output is not None:
        config.output.file_path = args.output
    if args.sieve is not None:
        config.sieve.kind = args.sieve
    if args.optimizer is not None:
        config.optimizer.enabled = args.optimizer == "enable"
    if args.tie_break is not None:
        config.optimizer.tie_break = args.tie_break
    if args.log_level is not None:
        config.logging.level = args.log_level
    if args.verify is not None:
        _toggle_verify(config, enabled=args.verify)
    return parse_config(config.model_dump())


def _toggle_verify(config: AppConfig, *, enabled: bool) -> None:
    steps = config.pipeline.steps
    names = [step.name for step in steps]
    if not enabled:
        config.pipeline.steps = [step for step in steps if step.name != "verify_unit"]
        return
    if "verify_unit" in names:
        return
    # Verification sits right after emission so a broken unit is never written.
    position = names.index("emit_call_tree") + 1 if "emit_call_tree" in names else len(steps)
    steps.insert(position, StepDecl(name="verify_unit"))


def run(argv: Sequence[str] | None = None) -> int:
    # Thin orchestration wrapper; generation logic lives in the pipeline steps.
    args = parse_args(argv)
    try:
        config = apply_overrides(load_config(Path(args.config) if args.config else None), args)
    except ConfigError as exc:
        StructuredLogger(sink=StderrLogSink()).error("invalid configuration", detail=str(exc))
        return EXIT_INVALID

    wiring = build_wiring(config)
    output_sink = wiring["output_sink"]
    logger = wiring["logger"]
    assert isinstance(output_sink, OutputSink)
    assert isinstance(logger, StructuredLogger)
    request = GenerationRequest(max_n=config.generation.max, offset=config.generation.offset)
    try:
        runtime = build_runtime(config=config, wiring=wiring, run_id="cli")
        runtime.runner.run([request], output_sink=lambda _: None)
    except (StepBuildError, InvalidScenarioConfigError, UnknownStepError) as exc:
        # Per-step overrides are validated while the scenario is built.
        logger.error("invalid configuration", detail=str(exc))
        return EXIT_INVALID
    except LooplessError:
        # The runner has already logged the failing step with its reason.
        return EXIT_INVALID
    finally:
        output_sink.close()
        logger.close()
    return EXIT_OK
