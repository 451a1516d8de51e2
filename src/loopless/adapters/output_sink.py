from __future__ import annotations

import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import TextIO

from loopless.ports.output_sink import OutputSink


@dataclass
class FileOutputSink(OutputSink):
    """Write rendered units to ``path``.

    Nothing touches the filesystem until the first unit arrives, so a run
    that fails while building the catalog leaves no empty file behind. With
    ``atomic_replace`` the units go to ``<path>.tmp`` and replace ``path``
    only on close.
    """

    path: Path
    atomic_replace: bool = False
    encoding: str = "utf-8"
    _handle: TextIO | None = field(default=None, init=False, repr=False)
    _temp_path: Path | None = field(default=None, init=False, repr=False)

    def write_line(self, line: str) -> None:
        handle = self._handle if self._handle is not None else self._open()
        handle.write(line + "\n")

    def close(self) -> None:
        if self._handle is None:
            return
        self._handle.close()
        self._handle = None
        if self._temp_path is not None:
            self._temp_path.replace(self.path)
            self._temp_path = None

    def _open(self) -> TextIO:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        target = self.path
        if self.atomic_replace:
            self._temp_path = target = self.path.with_name(self.path.name + ".tmp")
        self._handle = target.open("w", encoding=self.encoding)
        return self._handle


@dataclass
class StreamOutputSink(OutputSink):
    # Stdout by default, looked up per call so pytest's capsys sees the output; never closed here.
    stream: TextIO | None = None

    def _target(self) -> TextIO:
        return self.stream if self.stream is not None else sys.stdout

    def write_line(self, line: str) -> None:
        self._target().write(line + "\n")

    def close(self) -> None:
        self._target().flush()


@dataclass
class MemoryOutputSink(OutputSink):
    # Keeps units in a list for callers that embed the generator.
    lines: list[str] = field(default_factory=list)
    closed: bool = False

    def write_line(self, line: str) -> None:
        self.lines.append(line)

    def close(self) -> None:
        self.closed = True
