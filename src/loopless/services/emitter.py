from __future__ import annotations

from collections.abc import Callable

from loopless.domain.call_tree import CallLevel, CallTree
from loopless.domain.errors import NumericOverflowError
from loopless.domain.solution import SolutionInfo

INT64_MAX = 2**63 - 1


def emit(solution: SolutionInfo, offset: int, *, value_limit: int = INT64_MAX) -> CallTree:
    """Turn a solution into its nested call structure.

    Level ``i`` fans out ``f_i`` times with stride ``multiplier_i``, the
    product of every factor after it, so the first factor is the outermost,
    coarsest level and the last one steps by 1. Walking all levels in nested
    ascending order visits ``0 .. product - 1`` once each, in order.
    """
    factors = solution.factorization
    multipliers = [1] * len(factors)
    for i in range(len(factors) - 2, -1, -1):
        multipliers[i] = _checked_mul(multipliers[i + 1], factors[i + 1], value_limit)
    base_max = _checked_mul(multipliers[0], factors[0], value_limit)

    last_value = offset + solution.number - 1
    if last_value > value_limit or offset > value_limit:
        raise NumericOverflowError(f"emitted value {last_value} exceeds limit {value_limit}")
    # Two's-complement range: the lowest value is one below the negated limit.
    if offset < -value_limit - 1:
        raise NumericOverflowError(f"emitted value {offset} is below limit {-value_limit - 1}")

    levels = tuple(
        CallLevel(index=i, factor_count=factor, multiplier=multipliers[i])
        for i, factor in enumerate(factors)
    )
    trailing = tuple(range(base_max, base_max + solution.extra_addition))
    return CallTree(
        number=solution.number,
        offset=offset,
        levels=levels,
        trailing=trailing,
        base_max=base_max,
    )


def execute(tree: CallTree, emit_value: Callable[[int], None]) -> int:
    """Interpret the tree the way the generated unit runs.

    Returns the number of distinct call statements that ran. A statement in
    a level body is written once but runs on every visit of that level, so
    it is counted by its ``(level, j)`` position rather than per run.
    """
    statements: set[tuple[int, int]] = set()

    def run_level(position: int, seed: int) -> None:
        level = tree.levels[position]
        for j, argument in enumerate(level.call_arguments(seed)):
            statements.add((position, j))
            if position + 1 < len(tree.levels):
                run_level(position + 1, argument)
            else:
                emit_value(argument + tree.offset)

    if tree.levels:
        run_level(0, 0)
    # Trailing calls live in the entry body, one row past the last level.
    for index in tree.trailing:
        statements.add((len(tree.levels), index))
        emit_value(index + tree.offset)
    return len(statements)


def _checked_mul(left: int, right: int, limit: int) -> int:
    product = left * right
    if product > limit:
        raise NumericOverflowError(f"multiplier product {left} * {right} exceeds limit {limit}")
    return product
