from __future__ import annotations

import pytest

from loopless.domain.errors import (
    InvalidInputError,
    InvalidRangeError,
    LooplessError,
    NumericOverflowError,
    VerificationError,
)
from loopless.domain.reasons import ReasonCode


@pytest.mark.parametrize(
    ("error_type", "reason"),
    [
        (InvalidRangeError, ReasonCode.INVALID_RANGE),
        (InvalidInputError, ReasonCode.INVALID_INPUT),
        (NumericOverflowError, ReasonCode.NUMERIC_OVERFLOW),
        (VerificationError, ReasonCode.VERIFICATION_FAILED),
    ],
)
def test_errors_carry_reason_codes(error_type: type[LooplessError], reason: ReasonCode) -> None:
    exc = error_type("boom")
    assert exc.reason is reason
    assert isinstance(exc, LooplessError)
    assert isinstance(exc, ValueError)
    assert str(exc) == "boom"


def test_overflow_is_also_an_overflow_error() -> None:
    assert issubclass(NumericOverflowError, OverflowError)


def test_reason_can_be_overridden_per_instance() -> None:
    exc = InvalidInputError("bad", reason=ReasonCode.INVALID_RANGE)
    assert exc.reason is ReasonCode.INVALID_RANGE
    assert InvalidInputError("other").reason is ReasonCode.INVALID_INPUT


def test_reason_codes_are_strings() -> None:
    assert ReasonCode.NUMERIC_OVERFLOW == "NUMERIC_OVERFLOW"
