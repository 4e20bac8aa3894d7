"""
Transaction building: assembler, coin selection, shared objects, client
"""

from .amm_client import AmmClient, BuiltTransaction
from .coin_selector import CoinSelection, CoinSelector, CoinSplit, select_coins
from .encoder import BcsEncoder, Encoder
from .program import (
    GasCoin,
    Input,
    MergeCoins,
    MoveCall,
    NestedResult,
    OwnedObjectArg,
    PureArg,
    Result,
    SharedObjectArg,
    SplitCoins,
    TransactionAssembler,
    TransactionProgram,
)
from .shared_objects import SharedObjectCache

__all__ = [
    "AmmClient",
    "BuiltTransaction",
    "CoinSelection",
    "CoinSelector",
    "CoinSplit",
    "select_coins",
    "BcsEncoder",
    "Encoder",
    "GasCoin",
    "Input",
    "MergeCoins",
    "MoveCall",
    "NestedResult",
    "OwnedObjectArg",
    "PureArg",
    "Result",
    "SharedObjectArg",
    "SplitCoins",
    "TransactionAssembler",
    "TransactionProgram",
    "SharedObjectCache",
]
