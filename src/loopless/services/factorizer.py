from __future__ import annotations

from collections.abc import Sequence

from loopless.domain.errors import InvalidInputError


def factorize(number: int, sieve: Sequence[int]) -> tuple[int, ...]:
    # Trial division by ascending sieve primes; 1 maps to the sentinel (1,).
    if number < 1:
        raise InvalidInputError(f"factorization is defined for positive integers only, got {number}")
    if number == 1:
        return (1,)

    factors: list[int] = []
    remainder = number
    for prime in sieve:
        # Past isqrt(remainder) nothing divides it except the remainder itself.
        if prime * prime > remainder:
            break
        while remainder % prime == 0:
            factors.append(prime)
            remainder //= prime

    # Whatever is left is a prime the sieve did not need to (or could not) reach.
    if remainder > 1:
        factors.append(remainder)
    return tuple(factors)
