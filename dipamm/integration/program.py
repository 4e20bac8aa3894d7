"""
Transaction program assembly.

A program is an ordered list of inputs (pure values and object references)
and an ordered list of commands. Commands refer to inputs and to the results
of earlier commands by position, so the assembler's one job besides
bookkeeping is to make sure every reference points backwards:

- `Input(i)` requires `i < len(inputs)`
- `Result(i)` / `NestedResult(i, j)` require `i < len(commands)` and
  `j < result_count(commands[i])`
- a bare `Result(i)` additionally requires command `i` to produce exactly
  one result

Both are checked when a command is committed, not left to the chain.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterator, Sequence, Union

from ..errors import ConsumedArgumentError, ForwardReferenceError, ProgramSealedError
from ..state.coins import ObjectRef
from ..state.canonical import normalize_address


logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Arguments
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class GasCoin:
    """The transaction's gas coin."""


@dataclass(frozen=True)
class Input:
    index: int


@dataclass(frozen=True)
class Result:
    index: int


@dataclass(frozen=True)
class NestedResult:
    index: int
    result_index: int


Argument = Union[GasCoin, Input, Result, NestedResult]


# ---------------------------------------------------------------------------
# Inputs
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class PureArg:
    """Already-encoded pure value; the assembler never looks inside."""

    value: bytes


@dataclass(frozen=True)
class OwnedObjectArg:
    ref: ObjectRef

    @property
    def object_key(self) -> str:
        return self.ref.key


@dataclass(frozen=True)
class SharedObjectArg:
    object_id: str
    initial_shared_version: int
    mutable: bool

    @property
    def object_key(self) -> str:
        return normalize_address(self.object_id, name="object_id")


CallArg = Union[PureArg, OwnedObjectArg, SharedObjectArg]


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class MoveCall:
    package: str
    module: str
    function: str
    type_arguments: tuple[str, ...]
    arguments: tuple[Argument, ...]
    result_count: int = 0

    def argument_refs(self) -> Iterator[Argument]:
        return iter(self.arguments)


@dataclass(frozen=True)
class MergeCoins:
    destination: Argument
    sources: tuple[Argument, ...]

    result_count = 0

    def argument_refs(self) -> Iterator[Argument]:
        yield self.destination
        yield from self.sources


@dataclass(frozen=True)
class SplitCoins:
    coin: Argument
    amounts: tuple[Argument, ...]

    @property
    def result_count(self) -> int:
        return len(self.amounts)

    def argument_refs(self) -> Iterator[Argument]:
        yield self.coin
        yield from self.amounts


Command = Union[MoveCall, MergeCoins, SplitCoins]


def _object_state(arg: CallArg) -> tuple:
    # everything but the id spelling
    if isinstance(arg, OwnedObjectArg):
        return ("owned", arg.ref.version, arg.ref.digest)
    if isinstance(arg, SharedObjectArg):
        return ("shared", arg.initial_shared_version, arg.mutable)
    return ("pure", arg.value)


@dataclass(frozen=True)
class TransactionProgram:
    """Finished, immutable program handed to the serializer and signer."""

    inputs: tuple[CallArg, ...]
    commands: tuple[Command, ...]

    @property
    def input_count(self) -> int:
        return len(self.inputs)

    @property
    def command_count(self) -> int:
        return len(self.commands)

    @property
    def last_command_index(self) -> int:
        if not self.commands:
            raise IndexError("program has no commands")
        return len(self.commands) - 1


# ---------------------------------------------------------------------------
# Assembler
# ---------------------------------------------------------------------------


class TransactionAssembler:
    """
    Mutable builder for a `TransactionProgram`.

    Object inputs are de-duplicated by object id: adding the same object twice
    returns the index of the first occurrence.
    """

    def __init__(self) -> None:
        self._inputs: list[CallArg] = []
        self._commands: list[Command] = []
        self._object_index: dict[str, int] = {}
        self._consumed: set[Argument] = set()
        self._sealed = False

    @property
    def input_count(self) -> int:
        return len(self._inputs)

    @property
    def command_count(self) -> int:
        return len(self._commands)

    def _require_open(self) -> None:
        if self._sealed:
            raise ProgramSealedError("program already finalized")

    # -- inputs --------------------------------------------------------------

    def add_input(self, arg: CallArg) -> int:
        self._require_open()
        if not isinstance(arg, (PureArg, OwnedObjectArg, SharedObjectArg)):
            raise TypeError(f"unsupported input type: {type(arg).__name__}")
        if isinstance(arg, PureArg):
            self._inputs.append(arg)
            return len(self._inputs) - 1

        key = arg.object_key
        existing = self._object_index.get(key)
        if existing is not None:
            if _object_state(self._inputs[existing]) != _object_state(arg):
                raise ValueError(f"conflicting input for object {key}")
            return existing
        self._inputs.append(arg)
        index = len(self._inputs) - 1
        self._object_index[key] = index
        return index

    def pure(self, arg: PureArg) -> Input:
        return Input(self.add_input(arg))

    def object(self, ref: ObjectRef) -> Input:
        return Input(self.add_input(OwnedObjectArg(ref)))

    def shared(self, arg: SharedObjectArg) -> Input:
        return Input(self.add_input(arg))

    # -- references ----------------------------------------------------------

    def input_ref(self, index: int) -> Input:
        arg = Input(index)
        self._check_ref(arg)
        return arg

    def result_ref(self, index: int) -> Result:
        arg = Result(index)
        self._check_ref(arg)
        return arg

    def nested_result_ref(self, index: int, result_index: int) -> NestedResult:
        arg = NestedResult(index, result_index)
        self._check_ref(arg)
        return arg

    def _check_ref(self, arg: Argument) -> None:
        if isinstance(arg, GasCoin):
            return
        if isinstance(arg, Input):
            if not (0 <= arg.index < len(self._inputs)):
                raise ForwardReferenceError(f"input {arg.index} out of range (have {len(self._inputs)})")
        elif isinstance(arg, (Result, NestedResult)):
            if not (0 <= arg.index < len(self._commands)):
                raise ForwardReferenceError(
                    f"command {arg.index} out of range (have {len(self._commands)})"
                )
            produced = self._commands[arg.index].result_count
            if isinstance(arg, Result) and produced != 1:
                raise ForwardReferenceError(
                    f"command {arg.index} produces {produced} result(s); use NestedResult to pick one"
                )
            slot = arg.result_index if isinstance(arg, NestedResult) else 0
            if not (0 <= slot < produced):
                raise ForwardReferenceError(
                    f"command {arg.index} produces {produced} result(s), slot {slot} requested"
                )
        else:
            raise TypeError(f"unsupported argument type: {type(arg).__name__}")
        if arg in self._consumed:
            raise ConsumedArgumentError(f"{arg} was merged away by an earlier command")

    # -- commands ------------------------------------------------------------

    def add_command(self, command: Command) -> int:
        self._require_open()
        if not isinstance(command, (MoveCall, MergeCoins, SplitCoins)):
            raise TypeError(f"unsupported command type: {type(command).__name__}")
        if command.result_count < 0:
            raise ValueError("result_count must be non-negative")

        refs = list(command.argument_refs())
        for arg in refs:
            self._check_ref(arg)
        if isinstance(command, MergeCoins):
            if not command.sources:
                raise ValueError("merge_coins needs at least one source")
            if command.destination in command.sources or len(set(command.sources)) != len(command.sources):
                raise ValueError("merge_coins sources must be distinct from each other and the destination")

        self._commands.append(command)
        index = len(self._commands) - 1
        if isinstance(command, MergeCoins):
            self._consumed.update(command.sources)
        logger.debug("command %d: %s", index, type(command).__name__)
        return index

    def merge_coins(self, destination: Argument, sources: Sequence[Argument]) -> int:
        return self.add_command(MergeCoins(destination=destination, sources=tuple(sources)))

    def split_coins(self, coin: Argument, amounts: Sequence[Argument]) -> int:
        return self.add_command(SplitCoins(coin=coin, amounts=tuple(amounts)))

    def move_call(self, call: MoveCall) -> int:
        return self.add_command(call)

    # -- finish --------------------------------------------------------------

    def finalize(self) -> TransactionProgram:
        self._require_open()
        self._sealed = True
        return TransactionProgram(inputs=tuple(self._inputs), commands=tuple(self._commands))
