from __future__ import annotations

import time
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Protocol

from loopless.kernel.context import Context, ContextFactory
from loopless.kernel.scenario import Scenario
from loopless.observability.logging import StructuredLogger


class OutputSink(Protocol):
    # Runner output callback for final messages; sink implementation is external.
    def __call__(self, msg: object) -> None:
        raise NotImplementedError("Runner output sink is a callback")


@dataclass(frozen=True, slots=True)
class Runner:
    # Runner executes a Scenario per input message in strict order.
    scenario: Scenario
    context_factory: ContextFactory
    on_error: Callable[[Context, Exception], None] | None = None
    logger: StructuredLogger | None = None

    def run(self, inputs: Iterable[object], *, output_sink: OutputSink) -> list[Context]:
        # Depth-first execution per input; fan-out order is preserved into later steps.
        contexts: list[Context] = []
        for raw in inputs:
            ctx = self.context_factory.new()
            contexts.append(ctx)
            work: list[object] = [raw]
            started = time.perf_counter()
            step_name = ""
            try:
                for step_spec in self.scenario.steps:
                    step_name = step_spec.name
                    next_work: list[object] = []
                    for msg in work:
                        next_work.extend(list(step_spec.step(msg, ctx)))
                    work = next_work
                    if not work:
                        break
            except Exception as exc:
                ctx.error(type(exc).__name__, str(exc), step=step_name)
                self._log_failure(ctx, step_name, exc)
                if self.on_error is not None:
                    self.on_error(ctx, exc)
                    continue
                raise

            for msg in work:
                output_sink(msg)
            ctx.metric_set("run.duration_ms", (time.perf_counter() - started) * 1000.0)
            if self.logger is not None:
                self.logger.info("run complete", scenario=self.scenario.scenario_id, metrics=dict(ctx.metrics))
        return contexts

    def _log_failure(self, ctx: Context, step_name: str, exc: Exception) -> None:
        if self.logger is None:
            return
        self.logger.error(
            "step failed",
            scenario=self.scenario.scenario_id,
            step=step_name,
            trace_id=ctx.trace_id,
            error=type(exc).__name__,
            detail=str(exc),
        )
