"""
Constant Product Market Maker (CPMM) quote math.

All functions are pure and integer-only. Intermediate products are computed
with Python's unbounded ints; every result that the chain would store as a
u64 is checked against `U64_MAX` before it is returned.

Rounding rules (consensus-relevant, they must match the on-chain router):
- amount_out rounds down (the taker receives no more than the pool gives).
- amount_in rounds down and then adds one (the taker always pays enough).
- LP mint rounds down on both sides and takes the smaller side.
"""

from __future__ import annotations

import math

from ..errors import (
    DivisionByZeroError,
    EmptyReservesError,
    ExceedsDesiredError,
    InsufficientLiquidityError,
    InvalidFeeRateError,
    U64OverflowError,
    ZeroAmountError,
)
from ..state.canonical import U64_MAX
from ..state.pools import FEE_SCALE, MAX_FEE_RATE


# LP permanently locked on the first deposit to prevent share-price manipulation at genesis
MIN_LIQUIDITY = 1000


def _require_int(name: str, value: int) -> None:
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{name} must be an int")


def _check_overflow(value: int, name: str) -> int:
    if value > U64_MAX:
        raise U64OverflowError(value, name)
    return value


def validate_fee_rate(fee_rate: int) -> None:
    _require_int("fee_rate", fee_rate)
    if not (0 <= fee_rate < MAX_FEE_RATE):
        raise InvalidFeeRateError(fee_rate)


def _validate_swap_inputs(fee_rate: int, amount: int, reserve_in: int, reserve_out: int, *, amount_name: str) -> None:
    validate_fee_rate(fee_rate)
    for name, v in ((amount_name, amount), ("reserve_in", reserve_in), ("reserve_out", reserve_out)):
        _require_int(name, v)
    if amount <= 0:
        raise ZeroAmountError(amount_name, amount)
    if reserve_in <= 0 or reserve_out <= 0:
        raise EmptyReservesError(reserve_in, reserve_out)


def mul_div(x: int, y: int, z: int) -> int:
    """floor(x * y / z), failing on a zero divisor or a result above u64."""
    for name, v in (("x", x), ("y", y), ("z", z)):
        _require_int(name, v)
    if z == 0:
        raise DivisionByZeroError(f"mul_div divisor is zero: ({x} * {y}) / {z}")
    return _check_overflow((x * y) // z, "mul_div")


def get_amount_out(fee_rate: int, amount_in: int, reserve_in: int, reserve_out: int) -> int:
    """
    Output amount for an exact input.

        net_in     = amount_in * (10_000 - fee_rate)
        amount_out = floor(net_in * reserve_out / (reserve_in * 10_000 + net_in))
    """
    _validate_swap_inputs(fee_rate, amount_in, reserve_in, reserve_out, amount_name="amount_in")

    fee_multiplier = FEE_SCALE - fee_rate
    net_in = amount_in * fee_multiplier
    denominator = reserve_in * FEE_SCALE + net_in
    if denominator == 0:
        raise DivisionByZeroError("amount_out denominator is zero")

    amount_out = (net_in * reserve_out) // denominator
    return _check_overflow(amount_out, "amount_out")


def get_amount_in(fee_rate: int, amount_out: int, reserve_in: int, reserve_out: int) -> int:
    """
    Input amount required for an exact output.

        amount_in = floor(reserve_in * amount_out * 10_000
                          / ((reserve_out - amount_out) * (10_000 - fee_rate))) + 1
    """
    _validate_swap_inputs(fee_rate, amount_out, reserve_in, reserve_out, amount_name="amount_out")

    # amount_out >= reserve_out would make the denominator zero or negative.
    if amount_out >= reserve_out:
        raise DivisionByZeroError(
            f"cannot drain reserve: amount_out ({amount_out}) >= reserve_out ({reserve_out})"
        )

    fee_multiplier = FEE_SCALE - fee_rate
    numerator = reserve_in * amount_out * FEE_SCALE
    denominator = (reserve_out - amount_out) * fee_multiplier
    if denominator <= 0:
        raise DivisionByZeroError("amount_in denominator is zero")

    amount_in = numerator // denominator + 1
    return _check_overflow(amount_in, "amount_in")


def optimal_contribution(desired_x: int, desired_y: int, reserve_x: int, reserve_y: int) -> tuple[int, int]:
    """
    Largest ratio-preserving (x, y) deposit that does not exceed either desired amount.

    An empty pool accepts the desired amounts as-is; they set the initial price.
    """
    for name, v in (
        ("desired_x", desired_x),
        ("desired_y", desired_y),
        ("reserve_x", reserve_x),
        ("reserve_y", reserve_y),
    ):
        _require_int(name, v)

    if reserve_x == 0 and reserve_y == 0:
        return desired_x, desired_y

    y_returned = mul_div(desired_x, reserve_y, reserve_x)
    if y_returned <= desired_y:
        return desired_x, y_returned

    x_returned = mul_div(desired_y, reserve_x, reserve_y)
    if x_returned >= desired_x:
        raise ExceedsDesiredError(
            f"optimal x ({x_returned}) exceeds desired x ({desired_x}) for desired y {desired_y}"
        )
    return x_returned, desired_y


def expected_lp_mint(
    contrib_x: int,
    contrib_y: int,
    reserve_x: int,
    reserve_y: int,
    lp_supply: int,
    *,
    min_liquidity: int = MIN_LIQUIDITY,
) -> int:
    """
    LP shares minted for a deposit of (contrib_x, contrib_y).

    First deposit (reserves and supply all zero):
        lp = isqrt(contrib_x * contrib_y) - min_liquidity
    Otherwise:
        lp = min(floor(lp_supply * contrib_x / reserve_x), floor(lp_supply * contrib_y / reserve_y))
    """
    for name, v in (
        ("contrib_x", contrib_x),
        ("contrib_y", contrib_y),
        ("reserve_x", reserve_x),
        ("reserve_y", reserve_y),
        ("lp_supply", lp_supply),
    ):
        _require_int(name, v)
        if v < 0:
            raise ValueError(f"{name} must be non-negative: {v}")

    if reserve_x == 0 and reserve_y == 0 and lp_supply == 0:
        root = math.isqrt(contrib_x * contrib_y)
        if root <= min_liquidity:
            raise InsufficientLiquidityError(
                f"insufficient initial liquidity: isqrt({contrib_x} * {contrib_y}) = {root} <= {min_liquidity}"
            )
        return _check_overflow(root - min_liquidity, "lp_mint")

    if reserve_x == 0 or reserve_y == 0:
        raise DivisionByZeroError(f"cannot price a deposit against reserves ({reserve_x}, {reserve_y})")

    x_liq = (lp_supply * contrib_x) // reserve_x
    y_liq = (lp_supply * contrib_y) // reserve_y
    return _check_overflow(min(x_liq, y_liq), "lp_mint")


def lp_burn_amounts(lp_amount: int, reserve_x: int, reserve_y: int, lp_supply: int) -> tuple[int, int]:
    """Assets returned for burning `lp_amount` shares (floor rounding on both sides)."""
    _require_int("lp_amount", lp_amount)
    if lp_amount <= 0:
        raise ZeroAmountError("lp_amount", lp_amount)
    if lp_amount > lp_supply:
        raise ValueError(f"cannot burn more LP than supply: {lp_amount} > {lp_supply}")
    return mul_div(reserve_x, lp_amount, lp_supply), mul_div(reserve_y, lp_amount, lp_supply)
