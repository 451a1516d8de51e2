from __future__ import annotations

import math

import pytest

from loopless.adapters.sieve import WheelSieveBuilder
from loopless.domain.solution import SolutionInfo
from loopless.services.catalog import SolutionCatalog, build_catalog
from loopless.services.optimizer import (
    best_extension,
    count_improvements,
    extension_cost,
    optimize,
    total_savings,
)

MAX_N = 400


@pytest.fixture(scope="module")
def local() -> SolutionCatalog:
    return build_catalog(MAX_N, WheelSieveBuilder().build(MAX_N))


@pytest.fixture(scope="module")
def optimized(local: SolutionCatalog) -> SolutionCatalog:
    return optimize(local)


def test_extension_cost() -> None:
    base = SolutionInfo.local(36, (3, 3, 4))
    assert extension_cost(base, 38) == 12
    assert extension_cost(base, 36) == 10


def test_optimizer_never_worsens(local: SolutionCatalog, optimized: SolutionCatalog) -> None:
    for before, after in zip(local, optimized):
        assert after.operation_count <= before.operation_count


def test_total_cost_identity(optimized: SolutionCatalog) -> None:
    for number, solution in optimized.items():
        assert solution.number == number
        assert solution.operation_count == sum(solution.factorization) + solution.extra_addition
        assert number == math.prod(solution.factorization) + solution.extra_addition


def test_hundred_keeps_exact_factorization(optimized: SolutionCatalog) -> None:
    solution = optimized[100]
    assert solution.factorization == (4, 5, 5)
    assert solution.extra_addition == 0
    assert solution.operation_count == 14


def test_hundred_one_extends_hundred(optimized: SolutionCatalog) -> None:
    solution = optimized[101]
    assert solution.factorization == (4, 5, 5)
    assert solution.extra_addition == 1
    assert solution.operation_count == 15


def test_thirty_eight_reuses_thirty_six(local: SolutionCatalog, optimized: SolutionCatalog) -> None:
    assert local[38].operation_count == 21
    solution = optimized[38]
    assert solution.factorization == (3, 3, 4)
    assert solution.extra_addition == 2
    assert solution.operation_count == 12


def test_one_and_two_stay_local(optimized: SolutionCatalog) -> None:
    # 2 could be 1 + one trailing emission at equal cost; equal is not an improvement.
    assert optimized[1] == SolutionInfo.local(1, (1,))
    assert optimized[2] == SolutionInfo.local(2, (2,))


def test_linear_pass_matches_exhaustive_search(local: SolutionCatalog, optimized: SolutionCatalog) -> None:
    for target in range(1, MAX_N + 1):
        best = best_extension(local, target)
        if best is None:
            assert optimized[target] == local[target]
        else:
            assert optimized[target] == SolutionInfo.extended(best, target)


def test_exhaustive_search_is_optimal(local: SolutionCatalog, optimized: SolutionCatalog) -> None:
    for target in (17, 38, 97, 101, 211, 397):
        cheapest = min(
            [local[target].operation_count]
            + [extension_cost(local[c], target) for c in range(1, target)]
        )
        assert optimized[target].operation_count == cheapest


def test_strict_improvement_only() -> None:
    # Candidate 3 reaches 4 at cost 3 + 1 == 4, same as 4's own cost: keep local.
    catalog = SolutionCatalog(
        solutions=(
            SolutionInfo.local(1, (1,)),
            SolutionInfo.local(2, (2,)),
            SolutionInfo.local(3, (3,)),
            SolutionInfo.local(4, (4,)),
        )
    )
    assert best_extension(catalog, 4) is None
    assert optimize(catalog)[4] == catalog[4]


def _tie_catalog() -> SolutionCatalog:
    # 9 = 3*3 and 10 = 2*5 both reach 11 at cost 8 (6 + 2 vs 7 + 1); prime 11 costs 11.
    return build_catalog(11, WheelSieveBuilder().build(11))


def test_tie_break_prefers_largest_candidate() -> None:
    catalog = _tie_catalog()
    result = optimize(catalog, tie_break="largest")[11]
    assert result.operation_count == 8
    assert result.factorization == (2, 5)
    assert result.extra_addition == 1
    best = best_extension(catalog, 11, tie_break="largest")
    assert best is not None and best.number == 10


def test_tie_break_smallest_keeps_first_candidate() -> None:
    catalog = _tie_catalog()
    result = optimize(catalog, tie_break="smallest")[11]
    assert result.operation_count == 8
    assert result.factorization == (3, 3)
    assert result.extra_addition == 2
    best = best_extension(catalog, 11, tie_break="smallest")
    assert best is not None and best.number == 9


def test_improvement_counters(local: SolutionCatalog, optimized: SolutionCatalog) -> None:
    improved = count_improvements(local, optimized)
    saved = total_savings(local, optimized)
    assert improved > 0
    assert saved >= improved
    assert count_improvements(local, local) == 0
    assert total_savings(local, local) == 0
