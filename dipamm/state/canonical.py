"""
Deterministic byte-level encoding primitives.

These mirror the chain's canonical serialization for the handful of value
shapes the core needs: unsigned LEB128 lengths, length-prefixed byte vectors,
little-endian u64, and fixed-width 32-byte addresses.
"""

from __future__ import annotations

import re

from ..errors import U64OverflowError


U64_MAX = (1 << 64) - 1
ADDRESS_LENGTH = 32

_HEX_CHARS_RE = re.compile(r"^[0-9a-fA-F]+$")


def _require_int(name: str, value: int) -> None:
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{name} must be an int")


def check_u64(value: int, *, name: str = "value") -> int:
    """Return `value` unchanged if it fits in an unsigned 64-bit integer."""
    _require_int(name, value)
    if value < 0:
        raise ValueError(f"{name} must be non-negative: {value}")
    if value > U64_MAX:
        raise U64OverflowError(value, name)
    return value


def encode_uvarint(value: int) -> bytes:
    """Unsigned LEB128."""
    if not isinstance(value, int) or isinstance(value, bool) or value < 0:
        raise ValueError(f"uvarint must be a non-negative int, got {value!r}")
    out = bytearray()
    n = value
    while True:
        byte = n & 0x7F
        n >>= 7
        if n:
            out.append(byte | 0x80)
        else:
            out.append(byte)
            break
    return bytes(out)


def encode_bytes(value: bytes) -> bytes:
    """Length-prefixed byte vector (`vector<u8>`)."""
    if not isinstance(value, (bytes, bytearray)):
        raise TypeError("value must be bytes")
    value_bytes = bytes(value)
    return encode_uvarint(len(value_bytes)) + value_bytes


def encode_str(value: str) -> bytes:
    if not isinstance(value, str):
        raise TypeError("value must be a str")
    return encode_bytes(value.encode("utf-8"))


def encode_u64(value: int) -> bytes:
    return check_u64(value, name="u64").to_bytes(8, byteorder="little", signed=False)


def encode_bool(value: bool) -> bytes:
    if not isinstance(value, bool):
        raise TypeError("value must be a bool")
    return b"\x01" if value else b"\x00"


def normalize_address(hex_str: str, *, name: str = "address") -> str:
    """
    Canonicalize an address or object id to lowercase, 0x-prefixed, 32-byte hex.

    Short forms such as ``0x2`` are left-padded with zeros.
    """
    if not isinstance(hex_str, str):
        raise TypeError(f"{name} must be a str")
    s = hex_str.strip()
    if s.lower().startswith("0x"):
        s = s[2:]
    if not s:
        raise ValueError(f"{name} must be non-empty")
    if len(s) > 2 * ADDRESS_LENGTH:
        raise ValueError(f"{name} longer than {ADDRESS_LENGTH} bytes")
    if not _HEX_CHARS_RE.fullmatch(s):
        raise ValueError(f"{name} must be valid hex")
    return "0x" + s.lower().rjust(2 * ADDRESS_LENGTH, "0")


def address_to_bytes(hex_str: str, *, name: str = "address") -> bytes:
    return bytes.fromhex(normalize_address(hex_str, name=name)[2:])
