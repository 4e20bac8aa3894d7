# [TESTER] v1

from __future__ import annotations

import importlib.util
from functools import cmp_to_key

import pytest

from dipamm.core.ordering import (
    AssetPair,
    compare_types,
    is_sorted_types,
    lp_coin_type,
    lp_name,
    order_types,
    serialize_type_name,
)
from dipamm.errors import IdenticalAssetTypesError


SUI = "0x0000000000000000000000000000000000000000000000000000000000000002::sui::SUI"
USDC = "0x5d4b302506645c37ff133b98c4b50a5ae14841659738d6d733d59d0d217a93bf::coins::USDC"


def test_serialized_name_is_length_prefixed_utf8() -> None:
    assert serialize_type_name("0x2::a::B") == bytes([9]) + b"0x2::a::B"
    assert serialize_type_name("é") == bytes([2]) + "é".encode("utf-8")


def test_shorter_name_sorts_first_regardless_of_content() -> None:
    # raw string order would put 0xa before 0xb
    assert order_types("0xa::coin::COIN", "0xb::z::Z") == ("0xb::z::Z", "0xa::coin::COIN")
    assert is_sorted_types("0xb::z::Z", "0xa::coin::COIN")


def test_equal_length_names_compare_bytewise() -> None:
    assert order_types("0x789::coin::WSOL", "0x456::coin::USDC") == (
        "0x456::coin::USDC",
        "0x789::coin::WSOL",
    )


def test_full_address_pair_ordering() -> None:
    assert order_types(USDC, SUI) == (SUI, USDC)
    assert order_types(SUI, USDC) == (SUI, USDC)


def test_multi_byte_length_prefix_compares_as_bytes() -> None:
    # len 256 -> [0x80, 0x02], len 200 -> [0xc8, 0x01]
    long_name = "a" * 256
    mid_name = "a" * 200
    assert order_types(mid_name, long_name) == (long_name, mid_name)


def test_identical_types_rejected() -> None:
    with pytest.raises(IdenticalAssetTypesError):
        is_sorted_types(SUI, SUI)
    with pytest.raises(IdenticalAssetTypesError):
        order_types(SUI, SUI)
    with pytest.raises(IdenticalAssetTypesError):
        AssetPair.of(USDC, USDC)


def test_empty_type_name_rejected() -> None:
    with pytest.raises(ValueError):
        compare_types("", SUI)


def test_asset_pair_records_caller_order() -> None:
    straight = AssetPair.of(SUI, USDC)
    flipped = AssetPair.of(USDC, SUI)
    assert straight.type_arguments == flipped.type_arguments == (SUI, USDC)
    assert not straight.flipped
    assert flipped.flipped


def test_lp_name_strips_address_prefix() -> None:
    assert lp_name("0x789::coin::WSOL", "0x456::coin::USDC") == "LP-456::coin::USDC-789::coin::WSOL"
    assert lp_name("0x456::coin::USDC", "0x789::coin::WSOL") == lp_name("0x789::coin::WSOL", "0x456::coin::USDC")


def test_lp_coin_type_uses_canonical_order() -> None:
    assert lp_coin_type("0xabc", USDC, SUI) == f"0xabc::manage::LP<{SUI}, {USDC}>"


if importlib.util.find_spec("hypothesis") is not None:
    from hypothesis import assume, given, settings
    from hypothesis import strategies as st

    names = st.text(min_size=1, max_size=300)

    @settings(max_examples=300, deadline=None)
    @given(a=names, b=names)
    def test_ordering_is_antisymmetric(a: str, b: str) -> None:
        assume(a != b)
        assert is_sorted_types(a, b) != is_sorted_types(b, a)
        assert order_types(a, b) == order_types(b, a)

    @settings(max_examples=200, deadline=None)
    @given(items=st.lists(names, min_size=3, max_size=3, unique=True))
    def test_ordering_is_transitive(items: list[str]) -> None:
        a, b, c = sorted(items, key=cmp_to_key(compare_types))
        assert is_sorted_types(a, b)
        assert is_sorted_types(b, c)
        assert is_sorted_types(a, c)
