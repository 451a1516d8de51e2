from __future__ import annotations

from loopless.domain.call_tree import CallLevel, CallTree


def test_call_level_arguments_step_by_multiplier() -> None:
    level = CallLevel(index=0, factor_count=3, multiplier=12)
    assert level.call_arguments(0) == (0, 12, 24)
    assert level.call_arguments(5) == (5, 17, 29)


def test_call_tree_statement_count_includes_trailing_calls() -> None:
    tree = CallTree(
        number=38,
        offset=1,
        levels=(
            CallLevel(index=0, factor_count=3, multiplier=12),
            CallLevel(index=1, factor_count=3, multiplier=4),
            CallLevel(index=2, factor_count=4, multiplier=1),
        ),
        trailing=(36, 37),
        base_max=36,
    )
    assert tree.call_statement_count == 12
    assert tree.first_value == 1
    assert tree.last_value == 38
