from __future__ import annotations

from typing import Protocol, runtime_checkable


# SieveBuilder port: produces the ascending primes up to a bound.
@runtime_checkable
class SieveBuilder(Protocol):
    def build(self, max_n: int) -> tuple[int, ...]:
        """Return every prime <= max_n in ascending order."""
        # Port contract has no implementation; calling it directly is a wiring error.
        raise NotImplementedError("SieveBuilder is a port; use a concrete adapter.")
