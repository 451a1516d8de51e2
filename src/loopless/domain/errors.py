from __future__ import annotations

from .reasons import ReasonCode


class LooplessError(ValueError):
    # Base for domain failures; the reason code is the stable, machine-readable part.
    reason: ReasonCode = ReasonCode.INVALID_INPUT

    def __init__(self, message: str, *, reason: ReasonCode | None = None) -> None:
        super().__init__(message)
        if reason is not None:
            self.reason = reason


class InvalidRangeError(LooplessError):
    reason = ReasonCode.INVALID_RANGE


class InvalidInputError(LooplessError):
    reason = ReasonCode.INVALID_INPUT


class NumericOverflowError(LooplessError, OverflowError):
    reason = ReasonCode.NUMERIC_OVERFLOW


class VerificationError(LooplessError):
    reason = ReasonCode.VERIFICATION_FAILED
