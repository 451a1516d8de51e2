from .log_sinks import JsonlLogSink, NullLogSink, StderrLogSink
from .output_sink import FileOutputSink, MemoryOutputSink, StreamOutputSink
from .sieve import EratosthenesSieveBuilder, WheelSieveBuilder

# Adapters expose concrete implementations for ports.
__all__ = [
    "EratosthenesSieveBuilder",
    "FileOutputSink",
    "JsonlLogSink",
    "MemoryOutputSink",
    "NullLogSink",
    "StderrLogSink",
    "StreamOutputSink",
    "WheelSieveBuilder",
]
