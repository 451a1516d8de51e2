from __future__ import annotations

from collections import Counter
from collections.abc import Iterable


def merge_twos(factorization: Iterable[int]) -> tuple[int, ...]:
    # Two chained 2-levels cost the same as one 4-level but need an extra generated function.
    counts = Counter(factorization)
    total_twos = counts.pop(2, 0) + 2 * counts.pop(4, 0)
    counts[4] = total_twos // 2
    counts[2] = total_twos % 2
    return tuple(sorted(counts.elements()))
