from loopless.domain import CallLevel, CallTree, SolutionInfo
from loopless.services import build_catalog, emit, execute, factorize, merge_twos, optimize

__all__ = [
    "CallLevel",
    "CallTree",
    "SolutionInfo",
    "build_catalog",
    "emit",
    "execute",
    "factorize",
    "merge_twos",
    "optimize",
]
