from __future__ import annotations

from typing import Protocol, runtime_checkable

from loopless.observability.logging import LogMessage


# LogSink port receives structured log records.
@runtime_checkable
class LogSink(Protocol):
    def emit(self, message: LogMessage) -> None:
        """Persist or print one structured log record."""
        raise NotImplementedError("LogSink is a port; use a concrete adapter.")

    def close(self) -> None:
        """Release any file handle held by the sink."""
        raise NotImplementedError("LogSink is a port; use a concrete adapter.")
