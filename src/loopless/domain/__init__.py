from .call_tree import CallLevel, CallTree
from .errors import (
    InvalidInputError,
    InvalidRangeError,
    LooplessError,
    NumericOverflowError,
    VerificationError,
)
from .reasons import ReasonCode
from .solution import SolutionInfo

# Public domain exports keep imports explicit across layers.
__all__ = [
    "CallLevel",
    "CallTree",
    "InvalidInputError",
    "InvalidRangeError",
    "LooplessError",
    "NumericOverflowError",
    "ReasonCode",
    "SolutionInfo",
    "VerificationError",
]
