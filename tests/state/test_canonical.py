# [TESTER] v1

from __future__ import annotations

import pytest

from dipamm.errors import U64OverflowError
from dipamm.state.canonical import (
    U64_MAX,
    address_to_bytes,
    check_u64,
    encode_bool,
    encode_bytes,
    encode_str,
    encode_u64,
    encode_uvarint,
    normalize_address,
)
from dipamm.state.coins import Coin, ObjectRef


@pytest.mark.parametrize(
    "value,expected",
    [
        (0, b"\x00"),
        (1, b"\x01"),
        (127, b"\x7f"),
        (128, b"\x80\x01"),
        (300, b"\xac\x02"),
        (16384, b"\x80\x80\x01"),
    ],
)
def test_uvarint(value: int, expected: bytes) -> None:
    assert encode_uvarint(value) == expected


def test_uvarint_rejects_negative() -> None:
    with pytest.raises(ValueError):
        encode_uvarint(-1)


def test_length_prefixed_vectors() -> None:
    assert encode_bytes(b"") == b"\x00"
    assert encode_bytes(b"abc") == b"\x03abc"
    assert encode_str("SUI") == b"\x03SUI"
    with pytest.raises(TypeError):
        encode_bytes("abc")  # type: ignore[arg-type]


def test_u64_little_endian() -> None:
    assert encode_u64(1) == b"\x01" + b"\x00" * 7
    assert encode_u64(U64_MAX) == b"\xff" * 8
    with pytest.raises(U64OverflowError):
        encode_u64(U64_MAX + 1)
    with pytest.raises(ValueError):
        encode_u64(-1)


def test_check_u64_rejects_bool() -> None:
    with pytest.raises(TypeError):
        check_u64(True)


def test_bool_encoding() -> None:
    assert encode_bool(True) == b"\x01"
    assert encode_bool(False) == b"\x00"
    with pytest.raises(TypeError):
        encode_bool(1)  # type: ignore[arg-type]


def test_normalize_address_pads_and_lowercases() -> None:
    assert normalize_address("0x2") == "0x" + "0" * 63 + "2"
    assert normalize_address("ABC") == "0x" + "0" * 61 + "abc"
    assert address_to_bytes("0x2") == b"\x00" * 31 + b"\x02"


@pytest.mark.parametrize("bad", ["", "0x", "0xzz", "0x" + "1" * 65])
def test_normalize_address_rejects_bad_input(bad: str) -> None:
    with pytest.raises(ValueError):
        normalize_address(bad)


def test_object_ref_key_is_normalized() -> None:
    ref = ObjectRef(object_id="0xA1", version=3, digest="d1")
    assert ref.key == normalize_address("0xa1")
    with pytest.raises(ValueError):
        ObjectRef(object_id="0x1", version=-1, digest="d")


def test_coin_ref_and_balance_validation() -> None:
    coin = Coin(coin_type="0x2::sui::SUI", object_id="0x1", version=5, digest="dg", balance=10)
    assert coin.ref == ObjectRef("0x1", 5, "dg")
    with pytest.raises(ValueError):
        Coin(coin_type="0x2::sui::SUI", object_id="0x1", version=5, digest="dg", balance=-1)
