# [TESTER] v1

from __future__ import annotations

import pytest

from dipamm.errors import U64OverflowError
from dipamm.integration.encoder import BcsEncoder
from dipamm.integration.program import Input, MoveCall, PureArg
from dipamm.state.canonical import U64_MAX


def test_pure_values() -> None:
    enc = BcsEncoder()
    assert enc.pure_u64(258) == PureArg(b"\x02\x01" + b"\x00" * 6)
    assert enc.pure_u64(U64_MAX) == PureArg(b"\xff" * 8)
    assert enc.pure_bool(True) == PureArg(b"\x01")
    assert enc.pure_address("0x2") == PureArg(b"\x00" * 31 + b"\x02")
    assert enc.pure_bytes(b"hi") == PureArg(b"\x02hi")


def test_u64_narrowing_happens_at_encode_time() -> None:
    enc = BcsEncoder()
    with pytest.raises(U64OverflowError):
        enc.pure_u64(U64_MAX + 1)
    with pytest.raises(ValueError):
        enc.pure_u64(-1)


def test_move_call_shape() -> None:
    call = BcsEncoder().move_call(
        "0x" + "3f" * 32,
        "router",
        "swap_exact_x_to_y",
        [" 0x2::sui::SUI ", "0xa::b::C"],
        [Input(0), Input(1)],
    )
    assert call == MoveCall(
        package="0x" + "3f" * 32,
        module="router",
        function="swap_exact_x_to_y",
        type_arguments=("0x2::sui::SUI", "0xa::b::C"),
        arguments=(Input(0), Input(1)),
        result_count=0,
    )


@pytest.mark.parametrize(
    "package,module,function,type_args",
    [
        ("not-hex", "router", "f", []),
        ("0x2", "", "f", []),
        ("0x2", "router", "1f", []),
        ("0x2", "router", "add-liquidity", []),
        ("0x2", "router", "f", ["  "]),
    ],
)
def test_move_call_validation(package: str, module: str, function: str, type_args: list[str]) -> None:
    with pytest.raises(ValueError):
        BcsEncoder().move_call(package, module, function, type_args, [])
