"""
Request parameters for swaps and liquidity operations.

`slippage_bps=None` defers to the client's configured default.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


DEFAULT_SLIPPAGE_BPS = 500  # 5%


@dataclass(frozen=True)
class SwapParams:
    """
    `amount` is the exact input for exact-in swaps and the exact output for
    exact-out swaps.
    """

    pool_id: str
    type_in: str
    type_out: str
    amount: int
    slippage_bps: Optional[int] = None


@dataclass(frozen=True)
class AddLiquidityParams:
    pool_id: str
    type_x: str
    type_y: str
    amount_x: int
    amount_y: int
    slippage_bps: Optional[int] = None


@dataclass(frozen=True)
class RemoveLiquidityParams:
    pool_id: str
    type_x: str
    type_y: str
    lp_amount: int
    slippage_bps: Optional[int] = None
