from __future__ import annotations

import json

from loopless.domain.call_tree import CallTree
from loopless.domain.solution import SolutionInfo


def unit_name(tree: CallTree, prefix: str) -> str:
    return f"{prefix}_{tree.number}"


def render_python(tree: CallTree, *, prefix: str = "count_to", emit_name: str = "print") -> list[str]:
    """Render a call tree as a self-contained Python unit.

    The unit is a chain of plain functions: a leaf that outputs
    ``index + offset``, one function per level, and an entry point named
    ``<prefix>_<number>``. Only call statements appear in the bodies, so the
    rendered text has no loop, branch, comprehension or boolean operator.
    ``emit_name`` is left as a free name for the caller to bind.
    """
    entry = unit_name(tree, prefix)
    leaf = f"{entry}_leaf"
    lines = [f"def {leaf}(index):", f"    {emit_name}({_offset_expr('index', tree.offset)})", ""]

    # Innermost first so each function is defined after the one it calls.
    for level in reversed(tree.levels):
        callee = leaf if level.index == len(tree.levels) - 1 else f"{entry}_level_{level.index + 1}"
        lines.append("")
        lines.append(f"def {entry}_level_{level.index}(seed):")
        for j in range(level.factor_count):
            lines.append(f"    {callee}({_offset_expr('seed', j * level.multiplier)})")
        lines.append("")

    lines.append("")
    lines.append(f"def {entry}():")
    lines.append(f"    {entry}_level_0(0)")
    lines.extend(f"    {leaf}({index})" for index in tree.trailing)
    return lines


def render_json(tree: CallTree, solution: SolutionInfo) -> str:
    payload = {
        "number": solution.number,
        "factorization": list(solution.factorization),
        "extra_addition": solution.extra_addition,
        "operation_count": solution.operation_count,
        "offset": tree.offset,
        "levels": [
            {"index": level.index, "factor_count": level.factor_count, "multiplier": level.multiplier}
            for level in tree.levels
        ],
        "trailing": list(tree.trailing),
    }
    return json.dumps(payload, separators=(",", ":"), ensure_ascii=False)


def render_summary(solution: SolutionInfo, local: SolutionInfo) -> str:
    # One line per number, e.g. "38 = 3*3*4 + 2: 12 calls (exact 21)".
    product = "*".join(str(factor) for factor in solution.factorization)
    extension = f" + {solution.extra_addition}" if solution.extra_addition else ""
    text = f"{solution.number} = {product}{extension}: {solution.operation_count} calls"
    if local.operation_count != solution.operation_count:
        text += f" (exact {local.operation_count})"
    return text


def _offset_expr(name: str, offset: int) -> str:
    if offset > 0:
        return f"{name} + {offset}"
    if offset < 0:
        return f"{name} - {-offset}"
    return name
