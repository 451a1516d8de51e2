from __future__ import annotations

from enum import Enum


# Stable reason codes attached to every domain error.
class ReasonCode(str, Enum):
    INVALID_RANGE = "INVALID_RANGE"
    INVALID_INPUT = "INVALID_INPUT"
    NUMERIC_OVERFLOW = "NUMERIC_OVERFLOW"
    VERIFICATION_FAILED = "VERIFICATION_FAILED"
