"""
Encoding of pure values and move calls.

The core only needs two capabilities from the wire format: turn a scalar or
byte value into a pure input, and turn (package, module, function, type
arguments, arguments) into a call command. `BcsEncoder` provides both using
the chain's canonical little-endian layout; callers with their own SDK can
pass any object satisfying `Encoder`.

This is the one boundary where Python ints are narrowed to 64 bits.
"""

from __future__ import annotations

from typing import Protocol, Sequence

from ..state.canonical import address_to_bytes, encode_bool, encode_bytes, encode_u64
from .program import Argument, MoveCall, PureArg


class Encoder(Protocol):
    def pure_u64(self, value: int) -> PureArg: ...

    def pure_bool(self, value: bool) -> PureArg: ...

    def pure_address(self, value: str) -> PureArg: ...

    def pure_bytes(self, value: bytes) -> PureArg: ...

    def move_call(
        self,
        package: str,
        module: str,
        function: str,
        type_arguments: Sequence[str],
        arguments: Sequence[Argument],
        result_count: int = 0,
    ) -> MoveCall: ...


def _require_identifier(name: str, value: str) -> None:
    if not isinstance(value, str) or not value:
        raise ValueError(f"{name} must be a non-empty str")
    if not (value[0].isalpha() or value[0] == "_") or not all(c.isalnum() or c == "_" for c in value):
        raise ValueError(f"{name} is not a valid identifier: {value!r}")


class BcsEncoder:
    def pure_u64(self, value: int) -> PureArg:
        return PureArg(encode_u64(value))

    def pure_bool(self, value: bool) -> PureArg:
        return PureArg(encode_bool(value))

    def pure_address(self, value: str) -> PureArg:
        return PureArg(address_to_bytes(value))

    def pure_bytes(self, value: bytes) -> PureArg:
        return PureArg(encode_bytes(value))

    def move_call(
        self,
        package: str,
        module: str,
        function: str,
        type_arguments: Sequence[str],
        arguments: Sequence[Argument],
        result_count: int = 0,
    ) -> MoveCall:
        address_to_bytes(package, name="package")
        _require_identifier("module", module)
        _require_identifier("function", function)
        type_args = tuple(t.strip() for t in type_arguments)
        if any(not t for t in type_args):
            raise ValueError("type arguments must be non-empty")
        return MoveCall(
            package=package,
            module=module,
            function=function,
            type_arguments=type_args,
            arguments=tuple(arguments),
            result_count=result_count,
        )
