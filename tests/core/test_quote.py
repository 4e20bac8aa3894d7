# [TESTER] v1

from __future__ import annotations

import pytest

from dipamm.core.cpmm import get_amount_out
from dipamm.core.quote import (
    SWAP_EXACT_X_TO_Y,
    SWAP_EXACT_Y_TO_X,
    SWAP_X_TO_EXACT_Y,
    SWAP_Y_TO_EXACT_X,
    quote_add_liquidity,
    quote_remove_liquidity,
    quote_swap_exact_in,
    quote_swap_exact_out,
)
from dipamm.errors import IdenticalAssetTypesError, LiquidityTooSmallError, ZeroAmountError
from dipamm.state.pools import Pool


# canonical order: WETH (shorter serialized name) is X
WETH = "0xbeef::weth::WETH"
USDC = "0xa11ce::usdc::USDC"


def _pool(**overrides: int) -> Pool:
    fields = dict(
        pool_id="0x" + "ab" * 32,
        bal_x=1_000_000,
        bal_y=1_500_000,
        fee_rate=30,
        lp_supply=1_224_744,
        min_liquidity=1000,
        min_add_liquidity_lp_amount=1000,
    )
    fields.update(overrides)
    return Pool(**fields)


def test_exact_in_x_to_y() -> None:
    quote = quote_swap_exact_in(_pool(), WETH, USDC, 10_000, 100)
    assert quote.function == SWAP_EXACT_X_TO_Y
    assert quote.pair.type_arguments == (WETH, USDC)
    assert quote.amount_in == 10_000
    assert quote.amount_out == 14807
    assert quote.bound == 14658
    assert quote.exact_in


def test_exact_in_y_to_x_uses_flipped_reserves() -> None:
    quote = quote_swap_exact_in(_pool(), USDC, WETH, 10_000, 100)
    assert quote.function == SWAP_EXACT_Y_TO_X
    assert quote.pair.type_arguments == (WETH, USDC)
    assert quote.amount_out == get_amount_out(30, 10_000, 1_500_000, 1_000_000)


def test_exact_out_bounds_input_from_above() -> None:
    quote = quote_swap_exact_out(_pool(), WETH, USDC, 14807, 100)
    assert quote.function == SWAP_X_TO_EXACT_Y
    assert quote.amount_in == 10_000
    assert quote.bound == 10_102
    assert not quote.exact_in


def test_exact_out_y_to_x() -> None:
    quote = quote_swap_exact_out(_pool(), USDC, WETH, 1000, 0)
    assert quote.function == SWAP_Y_TO_EXACT_X
    assert quote.bound == quote.amount_in


def test_swap_rejects_bad_requests() -> None:
    with pytest.raises(ZeroAmountError):
        quote_swap_exact_in(_pool(), WETH, USDC, 0, 100)
    with pytest.raises(IdenticalAssetTypesError):
        quote_swap_exact_in(_pool(), WETH, WETH, 10, 100)


def test_add_liquidity_reorders_caller_amounts() -> None:
    quote = quote_add_liquidity(_pool(), USDC, WETH, 3000, 1000, 500)
    assert (quote.desired_x, quote.desired_y) == (1000, 3000)
    assert (quote.optimal_x, quote.optimal_y) == (1000, 1500)
    assert quote.expected_lp == 1224
    assert (quote.min_x, quote.min_y) == (950, 1425)


def test_add_liquidity_below_pool_minimum_rejected() -> None:
    with pytest.raises(LiquidityTooSmallError, match="too little"):
        quote_add_liquidity(_pool(), WETH, USDC, 100, 150, 500)


def test_add_liquidity_to_empty_pool_sets_price() -> None:
    empty = _pool(bal_x=0, bal_y=0, lp_supply=0)
    quote = quote_add_liquidity(empty, WETH, USDC, 1_000_000, 4_000_000, 0)
    assert (quote.optimal_x, quote.optimal_y) == (1_000_000, 4_000_000)
    assert quote.expected_lp == 2_000_000 - 1000


def test_empty_pool_locks_its_own_minimum() -> None:
    empty = _pool(bal_x=0, bal_y=0, lp_supply=0, min_liquidity=5000)
    assert quote_add_liquidity(empty, WETH, USDC, 200_000, 200_000, 0).expected_lp == 195_000

    unreported = _pool(bal_x=0, bal_y=0, lp_supply=0, min_liquidity=0)
    assert quote_add_liquidity(unreported, WETH, USDC, 200_000, 200_000, 0).expected_lp == 199_000


def test_remove_liquidity_quote() -> None:
    quote = quote_remove_liquidity(_pool(), USDC, WETH, 12_247, 100)
    assert quote.pair.type_arguments == (WETH, USDC)
    assert (quote.amount_x, quote.amount_y) == (9999, 14999)
    assert (quote.min_x, quote.min_y) == (9899, 14849)


def test_remove_liquidity_below_tenth_of_minimum_rejected() -> None:
    with pytest.raises(LiquidityTooSmallError):
        quote_remove_liquidity(_pool(), WETH, USDC, 99, 100)
    assert quote_remove_liquidity(_pool(), WETH, USDC, 100, 100).lp_amount == 100
