"""
Slippage bounds derived from a quoted amount and a tolerance in basis points.
"""

from __future__ import annotations

from ..errors import InvalidSlippageError
from ..state.canonical import check_u64


SLIPPAGE_SCALE = 10_000


def validate_slippage(slippage_bps: int) -> None:
    if not isinstance(slippage_bps, int) or isinstance(slippage_bps, bool):
        raise TypeError("slippage_bps must be an int")
    if not (0 <= slippage_bps < SLIPPAGE_SCALE):
        raise InvalidSlippageError(slippage_bps)


def slippage_floor(amount: int, slippage_bps: int) -> int:
    """Minimum acceptable amount: floor(amount * (10_000 - slippage) / 10_000)."""
    validate_slippage(slippage_bps)
    return (amount * (SLIPPAGE_SCALE - slippage_bps)) // SLIPPAGE_SCALE


def slippage_ceiling(amount: int, slippage_bps: int) -> int:
    """Maximum acceptable amount: ceil(amount * 10_000 / (10_000 - slippage))."""
    validate_slippage(slippage_bps)
    denominator = SLIPPAGE_SCALE - slippage_bps
    return check_u64(-((-amount * SLIPPAGE_SCALE) // denominator), name="max_amount")
