from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import TextIO

from loopless.observability.logging import LogMessage, log_to_dict


class StderrLogSink:
    # Compact JSON per record on stderr; stdout stays reserved for generated code.
    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    def emit(self, message: LogMessage) -> None:
        target = self._stream if self._stream is not None else sys.stderr
        target.write(json.dumps(log_to_dict(message), separators=(",", ":"), ensure_ascii=False) + "\n")

    def close(self) -> None:
        # The stream is shared with the process; only flush it.
        target = self._stream if self._stream is not None else sys.stderr
        target.flush()


class JsonlLogSink:
    # File-backed structured log sink.
    def __init__(self, path: Path) -> None:
        self._path = path
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._file = self._path.open("a", encoding="utf-8")

    def emit(self, message: LogMessage) -> None:
        payload = json.dumps(log_to_dict(message), separators=(",", ":"), ensure_ascii=False)
        self._file.write(payload + "\n")
        self._file.flush()

    def close(self) -> None:
        # Idempotent; the CLI closes the sink even after a failed run.
        if not self._file.closed:
            self._file.close()


class NullLogSink:
    def emit(self, message: LogMessage) -> None:
        _ = message

    def close(self) -> None:
        return None
