"""
Coin selection: cover a target amount from an owner's coins.

Coins are scanned in the order the coin source returned them (no sorting by
balance) and balances of distinct coins are summed until the running total
reaches the target.
When more than one coin is needed, the extra coins are merged into the first
one, then the exact target is split off and the split result is what
downstream commands consume.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Optional

from ..errors import InsufficientBalanceError, ZeroAmountError
from ..state.canonical import normalize_address
from ..state.coins import Coin
from .collaborators import CoinSource
from .encoder import BcsEncoder, Encoder
from .program import Argument, GasCoin, NestedResult, TransactionAssembler


logger = logging.getLogger(__name__)


GAS_COIN_TYPE = "0x2::sui::SUI"


def is_gas_coin_type(coin_type: str) -> bool:
    """True for the native gas coin under any address spelling (0x2, 0x000...02)."""
    parts = coin_type.split("::")
    if len(parts) != 3 or parts[1:] != ["sui", "SUI"]:
        return False
    try:
        return normalize_address(parts[0]) == normalize_address("0x2")
    except ValueError:
        return False


@dataclass(frozen=True)
class CoinSelection:
    coin_type: str
    coins: tuple[Coin, ...]
    total: int
    target: int

    @property
    def primary(self) -> Coin:
        return self.coins[0]

    @property
    def extras(self) -> tuple[Coin, ...]:
        return self.coins[1:]


@dataclass(frozen=True)
class CoinSplit:
    amount: int
    # None when the amount was split off the gas coin
    selection: Optional[CoinSelection]
    merge_index: Optional[int]
    split_index: int
    argument: Argument

    @property
    def from_gas_coin(self) -> bool:
        return self.selection is None


def select_coins(coins: Iterable[Coin], target: int, *, coin_type: str) -> CoinSelection:
    if not isinstance(target, int) or isinstance(target, bool):
        raise TypeError("target must be an int")
    if target <= 0:
        raise ZeroAmountError("target", target)

    selected: list[Coin] = []
    seen: set[str] = set()
    total = 0
    for coin in coins:
        # overlapping pages can list the same coin twice
        key = coin.ref.key
        if key in seen:
            continue
        seen.add(key)
        selected.append(coin)
        total += coin.balance
        if total >= target:
            return CoinSelection(coin_type=coin_type, coins=tuple(selected), total=total, target=target)

    raise InsufficientBalanceError(coin_type, total, target)


class CoinSelector:
    def __init__(self, source: CoinSource, encoder: Optional[Encoder] = None) -> None:
        self._source = source
        self._encoder: Encoder = encoder if encoder is not None else BcsEncoder()

    def split(self, assembler: TransactionAssembler, owner: str, coin_type: str, amount: int) -> CoinSplit:
        """
        Emit the commands that produce a coin of exactly `amount` and return its reference.
        """
        if is_gas_coin_type(coin_type):
            if not isinstance(amount, int) or isinstance(amount, bool) or amount <= 0:
                raise ZeroAmountError("amount", amount)
            split_index = assembler.split_coins(GasCoin(), [assembler.pure(self._encoder.pure_u64(amount))])
            logger.debug("split %d from gas coin at command %d", amount, split_index)
            return CoinSplit(
                amount=amount,
                selection=None,
                merge_index=None,
                split_index=split_index,
                argument=NestedResult(split_index, 0),
            )

        selection = select_coins(self._source.list_owned(owner, coin_type), amount, coin_type=coin_type)
        primary = assembler.object(selection.primary.ref)

        merge_index: Optional[int] = None
        if selection.extras:
            sources = [assembler.object(coin.ref) for coin in selection.extras]
            merge_index = assembler.merge_coins(primary, sources)

        split_index = assembler.split_coins(primary, [assembler.pure(self._encoder.pure_u64(amount))])
        logger.debug(
            "selected %d %s coin(s) totalling %d for %d; merge=%s split=%d",
            len(selection.coins),
            coin_type,
            selection.total,
            amount,
            merge_index,
            split_index,
        )
        return CoinSplit(
            amount=amount,
            selection=selection,
            merge_index=merge_index,
            split_index=split_index,
            argument=NestedResult(split_index, 0),
        )
