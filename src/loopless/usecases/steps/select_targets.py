from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from loopless.domain.errors import InvalidRangeError
from loopless.kernel.context import Context
from loopless.usecases.messages import OptimizedCatalog, TargetSolution


@dataclass(frozen=True, slots=True)
class SelectTargets:
    # Fans out one TargetSolution per selected number, ascending; None selects 1..max.
    targets: Sequence[int] | None = None

    def __call__(self, msg: OptimizedCatalog, ctx: Context | None) -> list[TargetSolution]:
        numbers = range(1, msg.request.max_n + 1) if self.targets is None else sorted(set(self.targets))
        selected: list[TargetSolution] = []
        for number in numbers:
            if number not in msg.optimized:
                raise InvalidRangeError(f"target {number} is outside 1..{msg.request.max_n}")
            selected.append(
                TargetSolution(
                    solution=msg.optimized[number],
                    local=msg.local[number],
                    offset=msg.request.offset,
                )
            )
        if ctx is not None:
            ctx.metric_set("targets.selected", len(selected))
        return selected
