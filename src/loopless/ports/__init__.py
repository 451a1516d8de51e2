from .log_sink import LogSink
from .output_sink import OutputSink
from .sieve_builder import SieveBuilder

# Public port exports keep wiring explicit at composition time.
__all__ = [
    "LogSink",
    "OutputSink",
    "SieveBuilder",
]
