from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class CallLevel:
    # One generated function: it calls the next level (or the leaf) factor_count times.
    index: int
    factor_count: int
    multiplier: int

    def call_arguments(self, seed: int) -> tuple[int, ...]:
        # Arguments follow ascending j so the flat index space is walked in order.
        return tuple(seed + j * self.multiplier for j in range(self.factor_count))


@dataclass(frozen=True, slots=True)
class CallTree:
    # Nested call structure for one number; trailing holds un-offset leaf indices.
    number: int
    offset: int
    levels: tuple[CallLevel, ...]
    trailing: tuple[int, ...]
    base_max: int

    @property
    def call_statement_count(self) -> int:
        return sum(level.factor_count for level in self.levels) + len(self.trailing)

    @property
    def first_value(self) -> int:
        return self.offset

    @property
    def last_value(self) -> int:
        return self.offset + self.number - 1
