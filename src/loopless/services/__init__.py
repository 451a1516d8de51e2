from .catalog import SolutionCatalog, build_catalog
from .emitter import emit, execute
from .factor_merger import merge_twos
from .factorizer import factorize
from .optimizer import best_extension, count_improvements, extension_cost, optimize, total_savings
from .renderers import render_json, render_python, render_summary

__all__ = [
    "SolutionCatalog",
    "best_extension",
    "build_catalog",
    "count_improvements",
    "emit",
    "execute",
    "extension_cost",
    "factorize",
    "merge_twos",
    "optimize",
    "render_json",
    "render_python",
    "render_summary",
    "total_savings",
]
