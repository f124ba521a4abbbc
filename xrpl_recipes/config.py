"""
Runtime configuration.

Settings are an explicit, immutable object built once at the entry point
and passed down. Nothing in the package reads the environment on its own.

Sources, highest precedence first:
    1. the process environment (or the mapping passed to from_env)
    2. a ``.env`` file (python-dotenv)

Variables:
    XRPL_NETWORK   devnet | testnet | mainnet (default: devnet)
    ISSUER_SEED    seed of the account that submits the recipes
    USER_SEED      seed of the counterparty account
    XRPL_RPC_URL   optional JSON-RPC endpoint override
    XRPL_TIMEOUT   optional HTTP timeout in seconds (default: 30)

Seeds are secrets: they are excluded from repr().
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import dotenv_values

DEFAULT_NETWORK = "devnet"
DEFAULT_TIMEOUT = 30.0


class ConfigError(ValueError):
    """Configuration is missing or invalid."""


@dataclass(frozen=True)
class Network:
    name: str
    rpc_url: str
    ws_url: str
    explorer_url: str


NETWORKS: dict[str, Network] = {
    "mainnet": Network(
        name="mainnet",
        rpc_url="https://xrplcluster.com",
        ws_url="wss://xrplcluster.com",
        explorer_url="https://livenet.xrpl.org",
    ),
    "testnet": Network(
        name="testnet",
        rpc_url="https://s.altnet.rippletest.net:51234",
        ws_url="wss://s.altnet.rippletest.net:51233",
        explorer_url="https://testnet.xrpl.org",
    ),
    "devnet": Network(
        name="devnet",
        rpc_url="https://s.devnet.rippletest.net:51234",
        ws_url="wss://s.devnet.rippletest.net:51233",
        explorer_url="https://devnet.xrpl.org",
    ),
}


def get_network(name: str) -> Network:
    try:
        return NETWORKS[name]
    except KeyError:
        raise ConfigError(
            f"unknown network {name!r}; expected one of {sorted(NETWORKS)}"
        ) from None


def explorer_tx_url(network: Network, tx_hash: str) -> str:
    return f"{network.explorer_url}/transactions/{tx_hash}"


@dataclass(frozen=True)
class Settings:
    """Everything a recipe needs to reach the ledger and sign."""

    network: Network
    issuer_seed: str = field(repr=False)
    user_seed: str = field(repr=False)
    rpc_url: str | None = None
    timeout: float = DEFAULT_TIMEOUT

    def __post_init__(self) -> None:
        if not self.issuer_seed:
            raise ConfigError("ISSUER_SEED must be set")
        if not self.user_seed:
            raise ConfigError("USER_SEED must be set")
        if self.timeout <= 0:
            raise ConfigError(f"timeout must be positive, got: {self.timeout}")

    @property
    def endpoint(self) -> str:
        """JSON-RPC URL to use: the override if set, else the network's."""
        return self.rpc_url or self.network.rpc_url

    @classmethod
    def from_env(
        cls,
        environ: Mapping[str, str] | None = None,
        *,
        dotenv_path: str | Path | None = None,
    ) -> Settings:
        """Build Settings from the environment and an optional .env file.

        Args:
            environ: Mapping to read instead of os.environ.
            dotenv_path: .env file to load. When None, ``.env`` in the
                working directory is used if it exists.

        Raises:
            ConfigError: On a missing seed, unknown network or bad timeout.
        """
        if dotenv_path is None and Path(".env").is_file():
            dotenv_path = ".env"
        values: dict[str, str | None] = {}
        if dotenv_path is not None:
            values.update(dotenv_values(dotenv_path))
        values.update(os.environ if environ is None else environ)

        raw_timeout = values.get("XRPL_TIMEOUT") or str(DEFAULT_TIMEOUT)
        try:
            timeout = float(raw_timeout)
        except ValueError:
            raise ConfigError(f"XRPL_TIMEOUT must be a number, got: {raw_timeout!r}") from None

        return cls(
            network=get_network(values.get("XRPL_NETWORK") or DEFAULT_NETWORK),
            issuer_seed=values.get("ISSUER_SEED") or "",
            user_seed=values.get("USER_SEED") or "",
            rpc_url=values.get("XRPL_RPC_URL") or None,
            timeout=timeout,
        )
