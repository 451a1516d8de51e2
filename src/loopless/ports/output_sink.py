from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class OutputSink(Protocol):
    """Destination for rendered units.

    ``write_line`` receives one rendered unit at a time: a whole Python
    module fragment, a compact JSON record or a summary line. The sink adds
    the line terminator itself.
    """

    def write_line(self, line: str) -> None:
        raise NotImplementedError("OutputSink is a port; use a concrete adapter.")

    def close(self) -> None:
        # Called once per CLI run, after success or failure.
        raise NotImplementedError("OutputSink is a port; use a concrete adapter.")
