"""
Owned coin objects.
"""

from __future__ import annotations

from dataclasses import dataclass

from .canonical import normalize_address


@dataclass(frozen=True)
class ObjectRef:
    """Reference to an owned object at a specific version."""

    object_id: str
    version: int
    digest: str

    def __post_init__(self) -> None:
        if not isinstance(self.object_id, str) or not self.object_id:
            raise ValueError("object_id must be a non-empty str")
        if not isinstance(self.version, int) or isinstance(self.version, bool) or self.version < 0:
            raise ValueError(f"version must be a non-negative int: {self.version!r}")
        if not isinstance(self.digest, str) or not self.digest:
            raise ValueError("digest must be a non-empty str")

    @property
    def key(self) -> str:
        return normalize_address(self.object_id, name="object_id")


@dataclass(frozen=True)
class Coin:
    coin_type: str
    object_id: str
    version: int
    digest: str
    balance: int

    def __post_init__(self) -> None:
        if not isinstance(self.balance, int) or isinstance(self.balance, bool) or self.balance < 0:
            raise ValueError(f"balance must be a non-negative int: {self.balance!r}")

    @property
    def ref(self) -> ObjectRef:
        return ObjectRef(object_id=self.object_id, version=self.version, digest=self.digest)
