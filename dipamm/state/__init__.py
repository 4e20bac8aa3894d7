"""
Value snapshots: pools, coins, request parameters
"""

from .coins import Coin, ObjectRef
from .params import AddLiquidityParams, RemoveLiquidityParams, SwapParams
from .pools import Global, Pool, global_from_fields, pool_from_fields

__all__ = [
    "Coin",
    "ObjectRef",
    "Global",
    "Pool",
    "global_from_fields",
    "pool_from_fields",
    "SwapParams",
    "AddLiquidityParams",
    "RemoveLiquidityParams",
]
