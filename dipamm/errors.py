"""Exception types for the AMM quote and transaction-building core.

Every error derives from ``AmmError`` and from the closest builtin, so callers
can either catch the whole family or keep using ``ValueError`` /
``OverflowError`` handlers.
"""

from __future__ import annotations

from typing import Optional


class AmmError(Exception):
    """Base class for all errors raised by this package."""


class InvalidFeeRateError(AmmError, ValueError):
    def __init__(self, fee_rate: int) -> None:
        self.fee_rate = fee_rate
        super().__init__(f"invalid fee rate: {fee_rate} (must be in [0, 2000))")


class ZeroAmountError(AmmError, ValueError):
    def __init__(self, name: str, amount: int) -> None:
        self.name = name
        self.amount = amount
        super().__init__(f"{name} must be positive: {amount}")


class EmptyReservesError(AmmError, ValueError):
    def __init__(self, reserve_in: int, reserve_out: int) -> None:
        self.reserve_in = reserve_in
        self.reserve_out = reserve_out
        super().__init__(f"reserves empty: ({reserve_in}, {reserve_out})")


class DivisionByZeroError(AmmError, ZeroDivisionError):
    pass


class U64OverflowError(AmmError, OverflowError):
    def __init__(self, value: int, name: str = "value") -> None:
        self.value = value
        super().__init__(f"u64 overflow: {name}={value}")


class ExceedsDesiredError(AmmError, ValueError):
    pass


class InvalidSlippageError(AmmError, ValueError):
    def __init__(self, slippage_bps: int) -> None:
        self.slippage_bps = slippage_bps
        super().__init__(f"slippage must be in [0, 10000) bps, got {slippage_bps}")


class IdenticalAssetTypesError(AmmError, ValueError):
    def __init__(self, asset_type: str) -> None:
        self.asset_type = asset_type
        super().__init__(f"type X and type Y cannot be the same: {asset_type}")


class InsufficientBalanceError(AmmError, ValueError):
    def __init__(self, asset_type: str, available: int, required: int) -> None:
        self.asset_type = asset_type
        self.available = available
        self.required = required
        super().__init__(
            f"{asset_type} balance is not enough: available {available}, required {required}"
        )


class MissingObjectIdError(AmmError, ValueError):
    pass


class LookupFailedError(AmmError, LookupError):
    """Raised by collaborators when a pool, coin list or object cannot be fetched."""

    def __init__(self, key: str, reason: Optional[str] = None) -> None:
        self.key = key
        self.reason = reason
        msg = f"lookup failed for {key}"
        if reason:
            msg += f": {reason}"
        super().__init__(msg)


class InsufficientLiquidityError(AmmError, ValueError):
    pass


class LiquidityTooSmallError(AmmError, ValueError):
    def __init__(self, amount: int, minimum: int, what: str) -> None:
        self.amount = amount
        self.minimum = minimum
        super().__init__(f"{what} too little: {amount} is less than {minimum}")


class ForwardReferenceError(AmmError, IndexError):
    pass


class ConsumedArgumentError(AmmError, ValueError):
    pass


class ProgramSealedError(AmmError, RuntimeError):
    pass


class PoolDecodeError(AmmError, ValueError):
    pass


class ConfigError(AmmError, ValueError):
    pass


class GlobalDecodeError(AmmError, ValueError):
    pass


class ProtocolPausedError(AmmError, RuntimeError):
    def __init__(self, global_id: str) -> None:
        self.global_id = global_id
        super().__init__(f"protocol is paused (global config {global_id})")
