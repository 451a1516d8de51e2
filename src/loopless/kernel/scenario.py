from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass

from loopless.kernel.context import Context

# A pipeline step takes one message and fans out zero or more messages for the next step.
StepFn = Callable[[object, Context | None], Iterable[object]]


@dataclass(frozen=True, slots=True)
class StepSpec:
    # Built step bound to the name it was declared with under pipeline.steps.
    name: str
    step: StepFn


@dataclass(frozen=True, slots=True)
class Scenario:
    # Generation pipeline in declaration order; the runner walks it depth-first per input.
    scenario_id: str
    steps: Sequence[StepSpec]

    @property
    def step_names(self) -> list[str]:
        return [spec.name for spec in self.steps]
