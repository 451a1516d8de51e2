from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass

from loopless.domain.errors import InvalidRangeError
from loopless.domain.solution import SolutionInfo
from loopless.services.factor_merger import merge_twos
from loopless.services.factorizer import factorize


@dataclass(frozen=True, slots=True)
class SolutionCatalog:
    # Dense, immutable number -> SolutionInfo table for 1..max; index is number - 1.
    solutions: tuple[SolutionInfo, ...]

    def __post_init__(self) -> None:
        for index, solution in enumerate(self.solutions):
            if solution.number != index + 1:
                raise ValueError(f"catalog slot {index + 1} holds solution for {solution.number}")

    def __getitem__(self, number: int) -> SolutionInfo:
        if not 1 <= number <= len(self.solutions):
            raise KeyError(number)
        return self.solutions[number - 1]

    def __len__(self) -> int:
        return len(self.solutions)

    def __iter__(self) -> Iterator[SolutionInfo]:
        return iter(self.solutions)

    def __contains__(self, number: object) -> bool:
        return isinstance(number, int) and 1 <= number <= len(self.solutions)

    @property
    def max_number(self) -> int:
        return len(self.solutions)

    def items(self) -> Iterator[tuple[int, SolutionInfo]]:
        return ((solution.number, solution) for solution in self.solutions)


def build_catalog(max_n: int, sieve: Sequence[int]) -> SolutionCatalog:
    # Exact, unextended solution for every number: the baseline the optimizer tries to beat.
    if max_n < 1:
        raise InvalidRangeError(f"catalog needs max >= 1, got {max_n}")
    return SolutionCatalog(
        solutions=tuple(
            SolutionInfo.local(number, merge_twos(factorize(number, sieve)))
            for number in range(1, max_n + 1)
        )
    )
