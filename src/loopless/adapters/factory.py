from __future__ import annotations

from pathlib import Path

from loopless.adapters.log_sinks import JsonlLogSink, NullLogSink, StderrLogSink
from loopless.adapters.output_sink import FileOutputSink, StreamOutputSink
from loopless.adapters.sieve import SIEVE_BUILDERS
from loopless.observability.logging import StructuredLogger
from loopless.ports.log_sink import LogSink
from loopless.ports.output_sink import OutputSink
from loopless.ports.sieve_builder import SieveBuilder
from loopless.usecases.config_models import AppConfig, LoggingConfig, OutputConfig, SieveConfig


def sieve_builder(config: SieveConfig) -> SieveBuilder:
    return SIEVE_BUILDERS[config.kind]()


def output_sink(config: OutputConfig) -> OutputSink:
    # "-" selects stdout so generated code can be piped straight into an interpreter.
    if config.file_path == "-":
        return StreamOutputSink()
    return FileOutputSink(Path(config.file_path), atomic_replace=config.atomic_replace)


def log_sink(config: LoggingConfig) -> LogSink:
    if config.sink == "jsonl":
        assert config.path is not None
        return JsonlLogSink(Path(config.path))
    if config.sink == "none":
        return NullLogSink()
    return StderrLogSink()


def logger(config: LoggingConfig) -> StructuredLogger:
    return StructuredLogger(sink=log_sink(config), level=config.level)


def build_wiring(config: AppConfig) -> dict[str, object]:
    # Wiring bundle consumed by the step registry.
    return {
        "sieve_builder": sieve_builder(config.sieve),
        "output_sink": output_sink(config.output),
        "logger": logger(config.logging),
    }
