"""
AMM client: turn swap and liquidity requests into finished transaction programs.

Each `build_*` method runs one quote/build cycle:

1. when a `GlobalReader` is wired in, refuse while the protocol is paused
2. fetch the pool snapshot through the `PoolReader`
3. quote amounts and slippage bounds (the config default when the
   request leaves `slippage_bps` unset)
4. select/merge/split the owner's coins into the assembler
5. append the router move call (always the last command)
6. finalize

Nothing here talks to the network directly; `execute()` relays a finished
program through the injected serializer, signer and submitter.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional, Union

from ..config import AmmConfig
from ..core.ordering import lp_coin_type, lp_name
from ..core.quote import (
    ADD_LIQUIDITY,
    REMOVE_LIQUIDITY,
    AddLiquidityQuote,
    RemoveLiquidityQuote,
    SwapQuote,
    quote_add_liquidity,
    quote_remove_liquidity,
    quote_swap_exact_in,
    quote_swap_exact_out,
)
from ..errors import ProtocolPausedError
from ..state.params import AddLiquidityParams, RemoveLiquidityParams, SwapParams
from ..state.pools import Global, Pool
from .coin_selector import CoinSelector, CoinSplit
from .collaborators import (
    CoinSource,
    GlobalReader,
    PoolDirectory,
    PoolReader,
    SharedObjectResolver,
    Signer,
    Submitter,
    TransactionSerializer,
)
from .encoder import BcsEncoder, Encoder
from .program import Argument, Input, TransactionAssembler, TransactionProgram
from .shared_objects import SharedObjectCache


logger = logging.getLogger(__name__)


Quote = Union[SwapQuote, AddLiquidityQuote, RemoveLiquidityQuote]


@dataclass(frozen=True)
class BuiltTransaction:
    program: TransactionProgram
    quote: Quote
    # amount split off the gas coin; the gas budget must leave room for it
    gas_coin_spend: int = 0


class AmmClient:
    def __init__(
        self,
        config: AmmConfig,
        pool_reader: PoolReader,
        coin_source: CoinSource,
        resolver: SharedObjectResolver,
        *,
        encoder: Optional[Encoder] = None,
        cache: Optional[SharedObjectCache] = None,
        pool_directory: Optional[PoolDirectory] = None,
        global_reader: Optional[GlobalReader] = None,
    ) -> None:
        self.config = config
        self._pools = pool_reader
        self._encoder: Encoder = encoder if encoder is not None else BcsEncoder()
        self._coins = CoinSelector(coin_source, self._encoder)
        self.shared_objects = cache if cache is not None else SharedObjectCache(resolver)
        self._directory = pool_directory
        self._globals = global_reader

    # ------------------------- read API -------------------------

    def get_pool(self, pool_id: str) -> Pool:
        return self._pools.fetch(pool_id)

    def get_pool_id(self, type_x: str, type_y: str) -> str:
        if self._directory is None:
            raise RuntimeError("no pool directory configured")
        return self._directory.pool_id(lp_name(type_x, type_y))

    def get_global(self) -> Global:
        if self._globals is None:
            raise RuntimeError("no global config reader configured")
        return self._globals.fetch_global(self.config.global_id)

    # ------------------------- write API -------------------------

    def build_swap_exact_in(self, params: SwapParams, sender: str) -> BuiltTransaction:
        self._require_active()
        pool = self.get_pool(params.pool_id)
        slippage = self._slippage(params.slippage_bps)
        quote = quote_swap_exact_in(pool, params.type_in, params.type_out, params.amount, slippage)

        asm = TransactionAssembler()
        coin = self._coins.split(asm, sender, params.type_in, quote.amount_in)
        min_out = asm.pure(self._encoder.pure_u64(quote.bound))
        self._router_call(asm, params.pool_id, quote.function, quote.pair.type_arguments, [coin.argument, min_out])

        logger.debug("swap exact in %s: %d -> %d (min %d)", quote.function, quote.amount_in, quote.amount_out, quote.bound)
        return BuiltTransaction(asm.finalize(), quote, _gas_spend(coin))

    def build_swap_exact_out(self, params: SwapParams, sender: str) -> BuiltTransaction:
        self._require_active()
        pool = self.get_pool(params.pool_id)
        slippage = self._slippage(params.slippage_bps)
        quote = quote_swap_exact_out(pool, params.type_in, params.type_out, params.amount, slippage)

        asm = TransactionAssembler()
        # The router refunds whatever part of the max input it does not use.
        coin = self._coins.split(asm, sender, params.type_in, quote.bound)
        amount_out = asm.pure(self._encoder.pure_u64(quote.amount_out))
        self._router_call(asm, params.pool_id, quote.function, quote.pair.type_arguments, [coin.argument, amount_out])

        logger.debug("swap exact out %s: %d (max in %d) -> %d", quote.function, quote.amount_in, quote.bound, quote.amount_out)
        return BuiltTransaction(asm.finalize(), quote, _gas_spend(coin))

    def build_add_liquidity(self, params: AddLiquidityParams, sender: str) -> BuiltTransaction:
        self._require_active()
        pool = self.get_pool(params.pool_id)
        slippage = self._slippage(params.slippage_bps)
        quote = quote_add_liquidity(pool, params.type_x, params.type_y, params.amount_x, params.amount_y, slippage)
        pair = quote.pair

        asm = TransactionAssembler()
        coin_x = self._coins.split(asm, sender, pair.type_x, quote.desired_x)
        coin_y = self._coins.split(asm, sender, pair.type_y, quote.desired_y)
        min_x = asm.pure(self._encoder.pure_u64(quote.min_x))
        min_y = asm.pure(self._encoder.pure_u64(quote.min_y))
        self._router_call(
            asm,
            params.pool_id,
            ADD_LIQUIDITY,
            pair.type_arguments,
            [coin_x.argument, min_x, coin_y.argument, min_y],
        )

        logger.debug("add liquidity: (%d, %d) expected lp %d", quote.optimal_x, quote.optimal_y, quote.expected_lp)
        return BuiltTransaction(asm.finalize(), quote, _gas_spend(coin_x) + _gas_spend(coin_y))

    def build_remove_liquidity(self, params: RemoveLiquidityParams, sender: str) -> BuiltTransaction:
        self._require_active()
        pool = self.get_pool(params.pool_id)
        slippage = self._slippage(params.slippage_bps)
        quote = quote_remove_liquidity(pool, params.type_x, params.type_y, params.lp_amount, slippage)
        pair = quote.pair

        asm = TransactionAssembler()
        lp_type = lp_coin_type(self.config.package_id, pair.type_x, pair.type_y)
        lp_coin = self._coins.split(asm, sender, lp_type, quote.lp_amount)
        lp_amount = asm.pure(self._encoder.pure_u64(quote.lp_amount))
        min_x = asm.pure(self._encoder.pure_u64(quote.min_x))
        min_y = asm.pure(self._encoder.pure_u64(quote.min_y))
        self._router_call(
            asm,
            params.pool_id,
            REMOVE_LIQUIDITY,
            pair.type_arguments,
            [lp_coin.argument, lp_amount, min_x, min_y],
        )

        logger.debug("remove liquidity: %d lp -> (%d, %d)", quote.lp_amount, quote.amount_x, quote.amount_y)
        return BuiltTransaction(asm.finalize(), quote)

    def execute(
        self,
        built: BuiltTransaction,
        sender: str,
        serializer: TransactionSerializer,
        signer: Signer,
        submitter: Submitter,
    ) -> Any:
        tx_bytes = serializer.serialize(built.program, sender)
        signature = signer.sign(tx_bytes)
        return submitter.submit(tx_bytes, [signature])

    # ------------------------- internals -------------------------

    def _slippage(self, slippage_bps: Optional[int]) -> int:
        return self.config.default_slippage_bps if slippage_bps is None else slippage_bps

    def _require_active(self) -> None:
        # only checked when a global reader is wired in
        if self._globals is None:
            return
        if self.get_global().has_paused:
            raise ProtocolPausedError(self.config.global_id)

    def _shared_prefix(self, asm: TransactionAssembler, pool_id: str) -> list[Input]:
        global_arg = asm.shared(self.shared_objects.get(self.config.global_id, False))
        pool_arg = asm.shared(self.shared_objects.get(pool_id, True))
        return [global_arg, pool_arg]

    def _router_call(
        self,
        asm: TransactionAssembler,
        pool_id: str,
        function: str,
        type_arguments: tuple[str, ...],
        arguments: list[Argument],
    ) -> int:
        call = self._encoder.move_call(
            self.config.package_id,
            self.config.module,
            function,
            type_arguments,
            [*self._shared_prefix(asm, pool_id), *arguments],
        )
        return asm.move_call(call)


def _gas_spend(split: CoinSplit) -> int:
    return split.amount if split.from_gas_coin else 0
