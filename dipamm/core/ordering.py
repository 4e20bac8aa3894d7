"""
Canonical ordering of asset types.

Pools are keyed by an ordered pair (X, Y). The router contract orders the two
type names by comparing their serialized form (a length-prefixed UTF-8 byte
vector) byte by byte, so the client must do exactly the same: comparing the
raw strings gives a different answer whenever the lengths differ.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..errors import IdenticalAssetTypesError
from ..state.canonical import encode_str


_ADDR_PREFIX = "0x"


def serialize_type_name(type_name: str) -> bytes:
    if not isinstance(type_name, str) or not type_name:
        raise ValueError("type name must be a non-empty str")
    return encode_str(type_name)


def compare_types(type_x: str, type_y: str) -> int:
    """-1, 0 or 1 by lexicographic comparison of the serialized type names."""
    bx = serialize_type_name(type_x)
    by = serialize_type_name(type_y)
    # bytes comparison is byte-wise unsigned with the shorter prefix first.
    if bx < by:
        return -1
    if bx > by:
        return 1
    return 0


def is_sorted_types(type_x: str, type_y: str) -> bool:
    if type_x == type_y:
        raise IdenticalAssetTypesError(type_x)
    return compare_types(type_x, type_y) < 0


def order_types(type_x: str, type_y: str) -> tuple[str, str]:
    """Return (lo, hi) in canonical order."""
    if is_sorted_types(type_x, type_y):
        return type_x, type_y
    return type_y, type_x


@dataclass(frozen=True)
class AssetPair:
    """
    Canonically ordered pair, plus whether the caller's (first, second) order was reversed.
    """

    type_x: str
    type_y: str
    flipped: bool = False

    @classmethod
    def of(cls, first: str, second: str) -> "AssetPair":
        lo, hi = order_types(first, second)
        return cls(type_x=lo, type_y=hi, flipped=lo != first)

    @property
    def type_arguments(self) -> tuple[str, str]:
        return self.type_x, self.type_y


def _strip_prefix(type_name: str) -> str:
    return type_name[2:] if type_name.startswith(_ADDR_PREFIX) else type_name


def lp_name(type_x: str, type_y: str) -> str:
    """
    Registry key of the pool for a pair.

    >>> lp_name("0x789::coin::WSOL", "0x456::coin::USDC")
    'LP-456::coin::USDC-789::coin::WSOL'
    """
    lo, hi = order_types(type_x, type_y)
    return f"LP-{_strip_prefix(lo)}-{_strip_prefix(hi)}"


def lp_coin_type(package_id: str, type_x: str, type_y: str) -> str:
    lo, hi = order_types(type_x, type_y)
    return f"{package_id}::manage::LP<{lo}, {hi}>"
