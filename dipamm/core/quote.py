"""
Pool-level quotes: swap and liquidity amounts plus slippage bounds.

Each quote takes the caller's asset types in whatever order the caller
supplied them, normalizes the pair, and picks the reserve side and the router
entry function accordingly.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..errors import LiquidityTooSmallError, ZeroAmountError
from ..state.pools import Pool
from .cpmm import (
    MIN_LIQUIDITY,
    expected_lp_mint,
    get_amount_in,
    get_amount_out,
    lp_burn_amounts,
    optimal_contribution,
)
from .ordering import AssetPair
from .slippage import slippage_ceiling, slippage_floor, validate_slippage


SWAP_EXACT_X_TO_Y = "swap_exact_x_to_y"
SWAP_EXACT_Y_TO_X = "swap_exact_y_to_x"
SWAP_X_TO_EXACT_Y = "swap_x_to_exact_y"
SWAP_Y_TO_EXACT_X = "swap_y_to_exact_x"
ADD_LIQUIDITY = "add_liquidity"
REMOVE_LIQUIDITY = "remove_liquidity"

# remove_liquidity accepts burns down to a tenth of the pool's minimum add amount
REMOVE_LIQUIDITY_DIVISOR = 10


@dataclass(frozen=True)
class SwapQuote:
    pair: AssetPair
    function: str
    amount_in: int
    amount_out: int
    # exact-in: minimum output; exact-out: maximum input
    bound: int
    exact_in: bool


@dataclass(frozen=True)
class AddLiquidityQuote:
    pair: AssetPair
    # desired amounts in canonical order; these are what the coins are split to
    desired_x: int
    desired_y: int
    optimal_x: int
    optimal_y: int
    min_x: int
    min_y: int
    expected_lp: int


@dataclass(frozen=True)
class RemoveLiquidityQuote:
    pair: AssetPair
    lp_amount: int
    amount_x: int
    amount_y: int
    min_x: int
    min_y: int


def _require_positive(name: str, amount: int) -> None:
    if not isinstance(amount, int) or isinstance(amount, bool):
        raise TypeError(f"{name} must be an int")
    if amount <= 0:
        raise ZeroAmountError(name, amount)


def quote_swap_exact_in(pool: Pool, type_in: str, type_out: str, amount_in: int, slippage_bps: int) -> SwapQuote:
    _require_positive("amount_in", amount_in)
    validate_slippage(slippage_bps)

    pair = AssetPair.of(type_in, type_out)
    reserve_in, reserve_out = pool.reserves(flipped=pair.flipped)
    amount_out = get_amount_out(pool.fee_rate, amount_in, reserve_in, reserve_out)

    return SwapQuote(
        pair=pair,
        function=SWAP_EXACT_Y_TO_X if pair.flipped else SWAP_EXACT_X_TO_Y,
        amount_in=amount_in,
        amount_out=amount_out,
        bound=slippage_floor(amount_out, slippage_bps),
        exact_in=True,
    )


def quote_swap_exact_out(pool: Pool, type_in: str, type_out: str, amount_out: int, slippage_bps: int) -> SwapQuote:
    _require_positive("amount_out", amount_out)
    validate_slippage(slippage_bps)

    pair = AssetPair.of(type_in, type_out)
    reserve_in, reserve_out = pool.reserves(flipped=pair.flipped)
    amount_in = get_amount_in(pool.fee_rate, amount_out, reserve_in, reserve_out)

    return SwapQuote(
        pair=pair,
        function=SWAP_Y_TO_EXACT_X if pair.flipped else SWAP_X_TO_EXACT_Y,
        amount_in=amount_in,
        amount_out=amount_out,
        bound=slippage_ceiling(amount_in, slippage_bps),
        exact_in=False,
    )


def quote_add_liquidity(
    pool: Pool,
    type_x: str,
    type_y: str,
    amount_x: int,
    amount_y: int,
    slippage_bps: int,
) -> AddLiquidityQuote:
    """
    Quote a deposit; `amount_x` belongs to `type_x` as given by the caller,
    which need not be the canonical X.
    """
    _require_positive("amount_x", amount_x)
    _require_positive("amount_y", amount_y)
    validate_slippage(slippage_bps)

    pair = AssetPair.of(type_x, type_y)
    desired_x, desired_y = (amount_y, amount_x) if pair.flipped else (amount_x, amount_y)

    optimal_x, optimal_y = optimal_contribution(desired_x, desired_y, pool.bal_x, pool.bal_y)
    # pools that do not report their lock fall back to the router default
    lock = pool.min_liquidity or MIN_LIQUIDITY
    expected_lp = expected_lp_mint(
        optimal_x, optimal_y, pool.bal_x, pool.bal_y, pool.lp_supply, min_liquidity=lock
    )
    if expected_lp < pool.min_add_liquidity_lp_amount:
        raise LiquidityTooSmallError(expected_lp, pool.min_add_liquidity_lp_amount, "add liquidity expected LP")

    return AddLiquidityQuote(
        pair=pair,
        desired_x=desired_x,
        desired_y=desired_y,
        optimal_x=optimal_x,
        optimal_y=optimal_y,
        min_x=slippage_floor(optimal_x, slippage_bps),
        min_y=slippage_floor(optimal_y, slippage_bps),
        expected_lp=expected_lp,
    )


def quote_remove_liquidity(
    pool: Pool,
    type_x: str,
    type_y: str,
    lp_amount: int,
    slippage_bps: int,
) -> RemoveLiquidityQuote:
    _require_positive("lp_amount", lp_amount)
    validate_slippage(slippage_bps)

    minimum = pool.min_add_liquidity_lp_amount // REMOVE_LIQUIDITY_DIVISOR
    if lp_amount < minimum:
        raise LiquidityTooSmallError(lp_amount, minimum, "remove liquidity LP amount")

    pair = AssetPair.of(type_x, type_y)
    amount_x, amount_y = lp_burn_amounts(lp_amount, pool.bal_x, pool.bal_y, pool.lp_supply)

    return RemoveLiquidityQuote(
        pair=pair,
        lp_amount=lp_amount,
        amount_x=amount_x,
        amount_y=amount_y,
        min_x=slippage_floor(amount_x, slippage_bps),
        min_y=slippage_floor(amount_y, slippage_bps),
    )
