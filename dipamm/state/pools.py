"""
Pool and global-config snapshots, with typed decoding of their on-chain records.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from ..errors import GlobalDecodeError, PoolDecodeError
from .canonical import U64_MAX


MAX_FEE_RATE = 2000  # 20%
FEE_SCALE = 10_000


@dataclass(frozen=True)
class Pool:
    """
    Snapshot of one pool's on-chain state, reserves in canonical (X, Y) order.

    `min_liquidity` is the amount locked on the first deposit and
    `min_add_liquidity_lp_amount` the smallest LP mint the pool accepts.
    """

    pool_id: str
    bal_x: int
    bal_y: int
    fee_rate: int
    lp_supply: int
    fee_bal_x: int = 0
    fee_bal_y: int = 0
    min_liquidity: int = 0
    min_add_liquidity_lp_amount: int = 0

    def __post_init__(self) -> None:
        if not isinstance(self.pool_id, str) or not self.pool_id:
            raise ValueError("pool_id must be a non-empty str")
        for name in (
            "bal_x",
            "bal_y",
            "fee_rate",
            "lp_supply",
            "fee_bal_x",
            "fee_bal_y",
            "min_liquidity",
            "min_add_liquidity_lp_amount",
        ):
            v = getattr(self, name)
            if not isinstance(v, int) or isinstance(v, bool):
                raise TypeError(f"{name} must be an int")
            if not (0 <= v <= U64_MAX):
                raise ValueError(f"{name} must be in [0, 2^64): {v}")
        if self.fee_rate >= MAX_FEE_RATE:
            raise ValueError(f"fee_rate must be < {MAX_FEE_RATE}: {self.fee_rate}")

    def reserves(self, *, flipped: bool = False) -> tuple[int, int]:
        """(reserve_in, reserve_out) for an X->Y trade, or Y->X when `flipped`."""
        if flipped:
            return self.bal_y, self.bal_x
        return self.bal_x, self.bal_y


def _require_field(fields: Mapping[str, Any], key: str) -> Any:
    if key not in fields:
        raise PoolDecodeError(f"pool record missing field: {key}")
    return fields[key]


def _decode_u64(value: Any, *, name: str) -> int:
    # RPC JSON renders u64 as decimal strings; small values may come back as ints.
    if isinstance(value, bool):
        raise PoolDecodeError(f"{name} must be an integer, got bool")
    if isinstance(value, int):
        n = value
    elif isinstance(value, str) and value.strip().isdigit():
        n = int(value.strip(), 10)
    else:
        raise PoolDecodeError(f"{name} must be a decimal integer, got {value!r}")
    if not (0 <= n <= U64_MAX):
        raise PoolDecodeError(f"{name} out of u64 range: {n}")
    return n


def _decode_uid(value: Any) -> str:
    if isinstance(value, Mapping):
        value = value.get("id")
    if not isinstance(value, str) or not value:
        raise PoolDecodeError("pool record has no usable id")
    return value


def _decode_supply(value: Any) -> int:
    # Balance<LP> renders either as {"value": n} or {"type": ..., "fields": {"value": n}}.
    if isinstance(value, Mapping):
        inner = value.get("fields", value)
        if not isinstance(inner, Mapping) or "value" not in inner:
            raise PoolDecodeError("lp_supply has no value")
        return _decode_u64(inner["value"], name="lp_supply")
    return _decode_u64(value, name="lp_supply")


def pool_from_fields(fields: Mapping[str, Any]) -> Pool:
    """
    Decode the key/value field map of a pool object into a `Pool`.

    This is the only place where pool fields are looked up by name.
    """
    if not isinstance(fields, Mapping):
        raise PoolDecodeError("pool record must be a mapping")
    try:
        return Pool(
            pool_id=_decode_uid(_require_field(fields, "id")),
            bal_x=_decode_u64(_require_field(fields, "bal_x"), name="bal_x"),
            bal_y=_decode_u64(_require_field(fields, "bal_y"), name="bal_y"),
            fee_bal_x=_decode_u64(_require_field(fields, "fee_bal_x"), name="fee_bal_x"),
            fee_bal_y=_decode_u64(_require_field(fields, "fee_bal_y"), name="fee_bal_y"),
            fee_rate=_decode_u64(_require_field(fields, "fee_rate"), name="fee_rate"),
            lp_supply=_decode_supply(_require_field(fields, "lp_supply")),
            min_liquidity=_decode_u64(_require_field(fields, "min_liquidity"), name="min_liquidity"),
            min_add_liquidity_lp_amount=_decode_u64(
                _require_field(fields, "min_add_liquidity_lp_amount"),
                name="min_add_liquidity_lp_amount",
            ),
        )
    except PoolDecodeError:
        raise
    except (TypeError, ValueError) as exc:
        raise PoolDecodeError(f"invalid pool record: {exc}") from exc


@dataclass(frozen=True)
class Global:
    """Protocol-wide switches stored on the router's global config object."""

    global_id: str
    has_paused: bool
    is_open_protocol_fee: bool

    def __post_init__(self) -> None:
        if not isinstance(self.global_id, str) or not self.global_id:
            raise ValueError("global_id must be a non-empty str")
        for name in ("has_paused", "is_open_protocol_fee"):
            if not isinstance(getattr(self, name), bool):
                raise TypeError(f"{name} must be a bool")


def _decode_bool(fields: Mapping[str, Any], key: str) -> bool:
    if key not in fields:
        raise GlobalDecodeError(f"global record missing field: {key}")
    value = fields[key]
    if isinstance(value, bool):
        return value
    if isinstance(value, str) and value.strip().lower() in ("true", "false"):
        return value.strip().lower() == "true"
    raise GlobalDecodeError(f"{key} must be a bool, got {value!r}")


def global_from_fields(fields: Mapping[str, Any]) -> Global:
    if not isinstance(fields, Mapping):
        raise GlobalDecodeError("global record must be a mapping")
    if "id" not in fields:
        raise GlobalDecodeError("global record missing field: id")
    try:
        global_id = _decode_uid(fields["id"])
    except PoolDecodeError as exc:
        raise GlobalDecodeError("global record has no usable id") from exc
    return Global(
        global_id=global_id,
        has_paused=_decode_bool(fields, "has_paused"),
        is_open_protocol_fee=_decode_bool(fields, "is_open_protocol_fee"),
    )
