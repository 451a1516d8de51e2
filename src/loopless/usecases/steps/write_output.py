from __future__ import annotations

from dataclasses import dataclass

from loopless.kernel.context import Context
from loopless.ports.output_sink import OutputSink
from loopless.usecases.messages import OutputLine


@dataclass(frozen=True, slots=True)
class WriteOutput:
    # Sink is responsible for persistence; step just delegates.
    output_sink: OutputSink

    def __call__(self, msg: OutputLine, ctx: Context | None) -> list[OutputLine]:
        self.output_sink.write_line(msg.text)
        if ctx is not None:
            ctx.metric_add("output.units")
        return []
