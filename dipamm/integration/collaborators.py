"""
Contracts for the external collaborators the core is built against.

Transport, deserialization of object content, signing and submission all
live outside this package; these protocols are the whole surface the core
relies on. Implementations report a failed fetch by raising
`LookupFailedError`, which the core relays unchanged.
"""

from __future__ import annotations

from typing import Any, Protocol, Sequence

from ..state.coins import Coin
from ..state.pools import Global, Pool
from .program import SharedObjectArg, TransactionProgram


class PoolReader(Protocol):
    def fetch(self, pool_id: str) -> Pool: ...


class GlobalReader(Protocol):
    def fetch_global(self, global_id: str) -> Global: ...


class PoolDirectory(Protocol):
    def pool_id(self, lp_name: str) -> str: ...


class CoinSource(Protocol):
    def list_owned(self, owner: str, coin_type: str) -> Sequence[Coin]: ...


class SharedObjectResolver(Protocol):
    def resolve(self, object_id: str, mutable: bool) -> SharedObjectArg: ...


class TransactionSerializer(Protocol):
    def serialize(self, program: TransactionProgram, sender: str) -> bytes: ...


class Signer(Protocol):
    def sign(self, tx_bytes: bytes) -> bytes: ...


class Submitter(Protocol):
    def submit(self, tx_bytes: bytes, signatures: Sequence[bytes]) -> Any: ...
