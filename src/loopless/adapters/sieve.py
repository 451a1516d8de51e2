from __future__ import annotations

import math
from dataclasses import dataclass

from loopless.domain.errors import InvalidRangeError
from loopless.ports.sieve_builder import SieveBuilder


@dataclass(frozen=True, slots=True)
class WheelSieveBuilder(SieveBuilder):
    # Trial division over the 6k+-1 wheel; only primes up to isqrt(candidate) are tried.

    def build(self, max_n: int) -> tuple[int, ...]:
        _check_bound(max_n)
        primes = [p for p in (3, 5) if p <= max_n]

        # Alternating +2/+4 from 5 visits 7, 11, 13, 17, 19, ... and never a multiple of 2 or 3.
        candidate = 5
        step = 2
        ceiling = 0
        while candidate + step <= max_n:
            candidate += step
            step = 6 - step
            # Divisor ceiling only grows: candidates are increasing.
            while ceiling < len(primes) and primes[ceiling] * primes[ceiling] <= candidate:
                ceiling += 1
            if all(candidate % primes[i] for i in range(ceiling)):
                primes.append(candidate)

        # The wheel covers odd numbers only, so 2 goes in front at the end.
        if max_n >= 2:
            primes.insert(0, 2)
        return tuple(primes)


@dataclass(frozen=True, slots=True)
class EratosthenesSieveBuilder(SieveBuilder):
    # Boolean sieve of Eratosthenes; same contract as the wheel builder.

    def build(self, max_n: int) -> tuple[int, ...]:
        _check_bound(max_n)
        if max_n < 2:
            return ()

        is_prime = [True] * (max_n + 1)
        is_prime[0] = False
        is_prime[1] = False

        for p in range(2, math.isqrt(max_n) + 1):
            if is_prime[p]:
                for multiple in range(p * p, max_n + 1, p):
                    is_prime[multiple] = False

        return tuple(n for n, flag in enumerate(is_prime) if flag)


def _check_bound(max_n: int) -> None:
    if max_n < 0:
        raise InvalidRangeError(f"sieve bound must be non-negative, got {max_n}")


SIEVE_BUILDERS: dict[str, type[SieveBuilder]] = {
    "wheel": WheelSieveBuilder,
    "eratosthenes": EratosthenesSieveBuilder,
}
