from __future__ import annotations

from typing import Literal

from loopless.domain.solution import SolutionInfo
from loopless.services.catalog import SolutionCatalog

TieBreak = Literal["largest", "smallest"]


def extension_cost(candidate: SolutionInfo, target: int) -> int:
    # Cost of reaching target from candidate: its own calls plus one single emission per missing value.
    return candidate.operation_count + (target - candidate.number)


def best_extension(
    catalog: SolutionCatalog,
    target: int,
    *,
    tie_break: TieBreak = "largest",
) -> SolutionInfo | None:
    """Exhaustive search for the cheapest smaller base of ``target``.

    Returns the winning candidate from ``catalog`` only when extending it is
    strictly cheaper than ``catalog[target]``; otherwise ``None``.
    """
    local = catalog[target]
    best: SolutionInfo | None = None
    best_cost = local.operation_count
    for number in range(1, target):
        candidate = catalog[number]
        cost = extension_cost(candidate, target)
        if cost < best_cost or (best is not None and cost == best_cost and tie_break == "largest"):
            best = candidate
            best_cost = cost
    return best


def optimize(catalog: SolutionCatalog, *, tie_break: TieBreak = "largest") -> SolutionCatalog:
    """Replace every local solution that a smaller base plus trailing emissions beats.

    ``extension_cost(c, t) == t + (c.operation_count - c.number)``, so the
    cheapest base for ``t`` is the candidate with the smallest
    ``operation_count - number`` among all numbers below ``t``. One ascending
    pass keeping that running minimum is the full search over every
    candidate. Only strict improvements over the local cost are accepted.
    """
    optimized: list[SolutionInfo] = []
    best: SolutionInfo | None = None
    best_key = 0
    for local in catalog:
        target = local.number
        if best is not None and extension_cost(best, target) < local.operation_count:
            optimized.append(SolutionInfo.extended(best, target))
        else:
            optimized.append(local)

        # The current number becomes a candidate for every larger target.
        key = local.operation_count - local.number
        if best is None or key < best_key or (key == best_key and tie_break == "largest"):
            best = local
            best_key = key
    return SolutionCatalog(solutions=tuple(optimized))


def count_improvements(local: SolutionCatalog, optimized: SolutionCatalog) -> int:
    return sum(
        1
        for before, after in zip(local, optimized, strict=True)
        if after.operation_count < before.operation_count
    )


def total_savings(local: SolutionCatalog, optimized: SolutionCatalog) -> int:
    return sum(
        before.operation_count - after.operation_count
        for before, after in zip(local, optimized, strict=True)
    )
