from __future__ import annotations

from dataclasses import dataclass

from loopless.domain.errors import VerificationError
from loopless.kernel.context import Context
from loopless.services.emitter import execute
from loopless.usecases.messages import EmittedUnit


@dataclass(frozen=True, slots=True)
class VerifyUnit:
    # Self-check: run the tree and compare against the exact expected range and cost.

    def __call__(self, msg: EmittedUnit, ctx: Context | None) -> list[EmittedUnit]:
        outputs: list[int] = []
        executed = execute(msg.tree, outputs.append)
        solution = msg.target.solution
        expected = list(range(msg.target.offset, msg.target.offset + solution.number))
        if outputs != expected:
            raise VerificationError(f"unit for {solution.number} does not emit {expected[0]}..{expected[-1]} in order")
        if executed != solution.operation_count:
            raise VerificationError(
                f"unit for {solution.number} used {executed} calls, expected {solution.operation_count}"
            )
        if ctx is not None:
            ctx.metric_add("verify.units")
        return [msg]
