"""
Test-only transaction signer (BLS12-381, via py_ecc).

The chain accepts Ed25519 and secp256k1/secp256r1 user signatures, so these
signatures will not pass on-chain verification. The signer exists to drive
`AmmClient.execute()` against in-process fakes; real wallets plug in their
own `Signer`. It signs the BLAKE2b-256 digest of the serialized transaction
prefixed with the transaction intent bytes.
"""

from __future__ import annotations

import hashlib
from typing import Union

from py_ecc.bls import G2Basic
from py_ecc.optimized_bls12_381 import curve_order as _BLS12_381_CURVE_ORDER


# intent scope = transaction data, version 0, app id 0
TRANSACTION_INTENT = bytes([0, 0, 0])


def signing_digest(tx_bytes: bytes) -> bytes:
    if not isinstance(tx_bytes, (bytes, bytearray)):
        raise TypeError("tx_bytes must be bytes")
    return hashlib.blake2b(TRANSACTION_INTENT + bytes(tx_bytes), digest_size=32).digest()


def _parse_privkey_int(privkey: int) -> int:
    sk = int(privkey)
    if sk <= 0:
        raise ValueError("privkey must be positive")
    if sk >= int(_BLS12_381_CURVE_ORDER):
        raise ValueError("privkey out of range (must be < BLS12-381 curve order)")
    return sk


def _parse_privkey(privkey: Union[int, bytes, bytearray, str]) -> int:
    if isinstance(privkey, bool):
        raise TypeError("privkey must be str|int|bytes")
    if isinstance(privkey, int):
        return _parse_privkey_int(privkey)
    if isinstance(privkey, (bytes, bytearray)):
        raw = bytes(privkey)
        if len(raw) != 32:
            raise ValueError("privkey bytes must be length 32")
        return _parse_privkey_int(int.from_bytes(raw, byteorder="big", signed=False))
    if isinstance(privkey, str):
        s = privkey.strip()
        if s.lower().startswith("0x"):
            s = s[2:]
        if len(s) != 64:
            raise ValueError("privkey hex must be 32 bytes")
        return _parse_privkey(bytes.fromhex(s))
    raise TypeError("privkey must be str|int|bytes")


class BlsSigner:
    def __init__(self, privkey: Union[int, bytes, bytearray, str]) -> None:
        self._sk = _parse_privkey(privkey)

    @classmethod
    def from_seed(cls, seed: bytes) -> "BlsSigner":
        if len(seed) < 32:
            raise ValueError("seed must be at least 32 bytes")
        return cls(G2Basic.KeyGen(seed))

    @property
    def public_key(self) -> bytes:
        return G2Basic.SkToPk(self._sk)

    def sign(self, tx_bytes: bytes) -> bytes:
        return G2Basic.Sign(self._sk, signing_digest(tx_bytes))


def verify_signature(public_key: bytes, tx_bytes: bytes, signature: bytes) -> bool:
    try:
        return bool(G2Basic.Verify(public_key, signing_digest(tx_bytes), signature))
    except (ValueError, TypeError):
        return False
