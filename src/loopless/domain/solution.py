from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SolutionInfo:
    """How one number is reached: a base factorization plus trailing single emissions.

    ``number == product(factorization) + extra_addition`` and
    ``operation_count == sum(factorization) + extra_addition`` hold for every
    instance; the constructor rejects records that break either identity.
    """

    number: int
    factorization: tuple[int, ...]
    extra_addition: int
    operation_count: int

    def __post_init__(self) -> None:
        if self.number < 1:
            raise ValueError("SolutionInfo.number must be >= 1")
        if not self.factorization:
            raise ValueError("SolutionInfo.factorization must not be empty")
        # Factors are >= 2; the only exception is the sentinel (1,) used for number 1.
        if self.factorization != (1,) and any(factor < 2 for factor in self.factorization):
            raise ValueError("SolutionInfo.factorization entries must be >= 2 unless it is exactly (1,)")
        if self.operation_count < 1:
            raise ValueError("SolutionInfo.operation_count must be >= 1")
        if self.extra_addition < 0:
            raise ValueError("SolutionInfo.extra_addition must be non-negative")
        if self.number != math.prod(self.factorization) + self.extra_addition:
            raise ValueError("SolutionInfo.number must equal product(factorization) + extra_addition")
        if self.operation_count != sum(self.factorization) + self.extra_addition:
            raise ValueError("SolutionInfo.operation_count must equal sum(factorization) + extra_addition")

    @classmethod
    def local(cls, number: int, factorization: tuple[int, ...]) -> SolutionInfo:
        # Exact, unextended solution: the factorization alone spans the number.
        return cls(
            number=number,
            factorization=tuple(factorization),
            extra_addition=0,
            operation_count=sum(factorization),
        )

    @classmethod
    def extended(cls, base: SolutionInfo, target: int) -> SolutionInfo:
        # Reuse the base factorization and pad the gap with single emissions.
        if target < base.number:
            raise ValueError("extension target must not be below the base number")
        extra = target - base.number
        return cls(
            number=target,
            factorization=base.factorization,
            extra_addition=base.extra_addition + extra,
            operation_count=base.operation_count + extra,
        )

    @property
    def base_number(self) -> int:
        return self.number - self.extra_addition

    @property
    def level_count(self) -> int:
        return len(self.factorization)
