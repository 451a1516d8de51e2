from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from loopless.kernel.context import Context
from loopless.services.renderers import render_json, render_python, render_summary
from loopless.usecases.messages import EmittedUnit, OutputLine


@dataclass(frozen=True, slots=True)
class RenderUnit:
    format: Literal["python", "json", "summary"] = "python"
    prefix: str = "count_to"
    emit_name: str = "print"

    def __call__(self, msg: EmittedUnit, ctx: Context | None) -> list[OutputLine]:
        solution = msg.target.solution
        if self.format == "json":
            text = render_json(msg.tree, solution)
        elif self.format == "summary":
            text = render_summary(solution, msg.target.local)
        else:
            # Two blank lines keep consecutive units apart in one module.
            lines = render_python(msg.tree, prefix=self.prefix, emit_name=self.emit_name)
            text = "\n".join(lines) + "\n\n"
        return [OutputLine(number=solution.number, text=text)]
