"""
Deployment configuration: which package and shared objects the router lives at.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Mapping, Union

import yaml

from .errors import ConfigError
from .state.canonical import normalize_address
from .state.params import DEFAULT_SLIPPAGE_BPS


ROUTER_MODULE = "router"

_ID_FIELDS = ("package_id", "global_id", "registered_pools_id")


@dataclass(frozen=True)
class AmmConfig:
    rpc_url: str
    package_id: str
    global_id: str
    registered_pools_id: str
    module: str = ROUTER_MODULE
    default_slippage_bps: int = DEFAULT_SLIPPAGE_BPS

    def __post_init__(self) -> None:
        if not isinstance(self.rpc_url, str) or not self.rpc_url:
            raise ConfigError("rpc_url must be a non-empty str")
        for name in _ID_FIELDS:
            try:
                normalized = normalize_address(getattr(self, name), name=name)
            except (TypeError, ValueError) as exc:
                raise ConfigError(str(exc)) from exc
            object.__setattr__(self, name, normalized)
        if not isinstance(self.module, str) or not self.module:
            raise ConfigError("module must be a non-empty str")
        bps = self.default_slippage_bps
        if not isinstance(bps, int) or isinstance(bps, bool) or not (0 <= bps < 10_000):
            raise ConfigError(f"default_slippage_bps must be in [0, 10000): {bps!r}")


MAINNET_CONFIG = AmmConfig(
    rpc_url="https://fullnode.mainnet.sui.io:443",
    package_id="0xdae28ab9ab072c647c4e8f2057a8f17dcc4847e42d6a8258df4b376ae183c872",
    global_id="0x935229a3c32399e9fb207ec8461a54f56c6af5744c64442435ac217ab28f0d59",
    registered_pools_id="0x55c65b7b67b0ccdf28e13b3b6d204e859dd19556603e3b94137a19306a7254d8",
)

TESTNET_CONFIG = AmmConfig(
    rpc_url="https://fullnode.testnet.sui.io:443",
    package_id="0x3f52d00499d65dd41602c1cd190cf6771b401ae328d46a172473a7f47be6f83f",
    global_id="0xe3d52d484e158f164a8650cfd5c8406b545f7e724f70ad40f3747dd6dc39b3c5",
    registered_pools_id="0x52523bbaac35485a1e79c9b46f6b8f53e98ebc17b317695622cb37dbbab46b67",
)

NETWORKS: Mapping[str, AmmConfig] = {
    "mainnet": MAINNET_CONFIG,
    "testnet": TESTNET_CONFIG,
}


def config_for_network(name: str) -> AmmConfig:
    key = name.strip().lower() if isinstance(name, str) else name
    if key not in NETWORKS:
        raise ConfigError(f"unknown network: {name!r} (expected one of {sorted(NETWORKS)})")
    return NETWORKS[key]


def config_from_mapping(obj: Mapping[str, Any]) -> AmmConfig:
    """
    Build a config from a mapping.

    Either names a preset (`network: testnet`) with optional overrides, or
    gives every field explicitly.
    """
    if not isinstance(obj, Mapping):
        raise ConfigError("config must be a mapping")
    fields = dict(obj)
    network = fields.pop("network", None)
    allowed = {"rpc_url", "module", "default_slippage_bps", *_ID_FIELDS}
    unknown = sorted(set(fields) - allowed)
    if unknown:
        raise ConfigError(f"unknown config keys: {unknown}")

    try:
        if network is not None:
            return replace(config_for_network(network), **fields)
        return AmmConfig(**fields)
    except TypeError as exc:
        raise ConfigError(f"incomplete config: {exc}") from exc


def load_config(path: Union[str, Path]) -> AmmConfig:
    obj = yaml.safe_load(Path(path).read_text(encoding="utf-8"))
    if obj is None:
        raise ConfigError(f"config file is empty: {path}")
    return config_from_mapping(obj)
