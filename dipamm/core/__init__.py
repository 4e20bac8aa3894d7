"""
Core AMM algorithms: ordering, CPMM math, slippage, quotes
"""

from .cpmm import (
    MIN_LIQUIDITY,
    expected_lp_mint,
    get_amount_in,
    get_amount_out,
    lp_burn_amounts,
    mul_div,
    optimal_contribution,
)
from .ordering import AssetPair, is_sorted_types, lp_coin_type, lp_name, order_types
from .quote import (
    AddLiquidityQuote,
    RemoveLiquidityQuote,
    SwapQuote,
    quote_add_liquidity,
    quote_remove_liquidity,
    quote_swap_exact_in,
    quote_swap_exact_out,
)
from .slippage import slippage_ceiling, slippage_floor

__all__ = [
    "MIN_LIQUIDITY",
    "expected_lp_mint",
    "get_amount_in",
    "get_amount_out",
    "lp_burn_amounts",
    "mul_div",
    "optimal_contribution",
    "AssetPair",
    "is_sorted_types",
    "lp_coin_type",
    "lp_name",
    "order_types",
    "AddLiquidityQuote",
    "RemoveLiquidityQuote",
    "SwapQuote",
    "quote_add_liquidity",
    "quote_remove_liquidity",
    "quote_swap_exact_in",
    "quote_swap_exact_out",
    "slippage_ceiling",
    "slippage_floor",
]
