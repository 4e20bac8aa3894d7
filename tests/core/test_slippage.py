# [TESTER] v1

from __future__ import annotations

import pytest

from dipamm.core.slippage import slippage_ceiling, slippage_floor, validate_slippage
from dipamm.errors import InvalidSlippageError, U64OverflowError
from dipamm.state.canonical import U64_MAX


def test_floor_rounds_down() -> None:
    assert slippage_floor(1000, 100) == 990
    assert slippage_floor(14807, 100) == 14658
    assert slippage_floor(1000, 0) == 1000


def test_ceiling_rounds_up() -> None:
    assert slippage_ceiling(990, 100) == 1000
    assert slippage_ceiling(1000, 100) == 1011
    assert slippage_ceiling(10_000, 100) == 10_102
    assert slippage_ceiling(1000, 0) == 1000


@pytest.mark.parametrize("bps", [-1, 10_000, 12_000])
def test_out_of_range_slippage_rejected(bps: int) -> None:
    with pytest.raises(InvalidSlippageError):
        validate_slippage(bps)
    with pytest.raises(InvalidSlippageError):
        slippage_floor(1000, bps)
    with pytest.raises(InvalidSlippageError):
        slippage_ceiling(1000, bps)


def test_non_int_slippage_rejected() -> None:
    with pytest.raises(TypeError):
        validate_slippage(True)
    with pytest.raises(TypeError):
        validate_slippage(1.5)  # type: ignore[arg-type]


def test_ceiling_overflow_detected() -> None:
    with pytest.raises(U64OverflowError):
        slippage_ceiling(U64_MAX, 5000)


def test_bounds_bracket_the_amount() -> None:
    for amount in (1, 7, 999, 123_456_789):
        for bps in (0, 1, 50, 500, 9999):
            assert slippage_floor(amount, bps) <= amount <= slippage_ceiling(amount, bps)
