from __future__ import annotations

from dataclasses import dataclass

from loopless.kernel.context import Context
from loopless.services.emitter import INT64_MAX, emit
from loopless.usecases.messages import EmittedUnit, TargetSolution


@dataclass(frozen=True, slots=True)
class EmitCallTree:
    value_limit: int = INT64_MAX

    def __call__(self, msg: TargetSolution, ctx: Context | None) -> list[EmittedUnit]:
        tree = emit(msg.solution, msg.offset, value_limit=self.value_limit)
        if ctx is not None:
            ctx.metric_add("emitter.call_statements", tree.call_statement_count)
        return [EmittedUnit(target=msg, tree=tree)]
