"""In-memory exchange served by the HTTP API.

Bundles the issued asset ledgers with a router and its registry. Pools do
no locking of their own, and FastAPI runs synchronous endpoints in a
thread pool, so every call into the exchange goes through ``locked()``.
"""

from __future__ import annotations

import os
import threading
from collections.abc import Iterator
from contextlib import contextmanager

import structlog
from eth_abi import encode  # type: ignore[attr-defined]
from web3 import Web3

from pairswap.assets.token import Token
from pairswap.config import DEFAULT_EXCHANGE_CONFIG, ExchangeConfig
from pairswap.errors import UnknownAsset
from pairswap.models.types import normalize_address
from pairswap.pools.registry import PoolRegistry
from pairswap.routing.router import Router

logger = structlog.get_logger()


def derive_asset_address(issuer: str, nonce: int) -> str:
    """Address of the nonce-th asset issued through an exchange.

    keccak256(abi.encode(issuer, nonce))[12:], checksummed.
    """
    digest = Web3.keccak(encode(["address", "uint256"], [Web3.to_checksum_address(issuer), nonce]))
    return Web3.to_checksum_address(bytes(digest)[12:])


class Exchange:
    """Asset ledgers plus the router/registry that trades them."""

    def __init__(self, config: ExchangeConfig = DEFAULT_EXCHANGE_CONFIG) -> None:
        self.router = Router(PoolRegistry(config))
        self._assets: dict[str, Token] = {}
        self._lock = threading.Lock()

    @property
    def registry(self) -> PoolRegistry:
        return self.router.registry

    @contextmanager
    def locked(self) -> Iterator[Exchange]:
        """Serialize access to the exchange."""
        with self._lock:
            yield self

    def issue_asset(self, name: str, symbol: str, supply: int, owner: str) -> Token:
        """Create a new asset with its whole supply minted to owner."""
        address = derive_asset_address(self.registry.address, len(self._assets))
        token = Token(address, name, symbol, initial_supply=supply, owner=owner)
        self._assets[token.address] = token
        logger.info("asset_issued", address=token.address, symbol=symbol, supply=supply)
        return token

    def get_asset(self, address: str) -> Token:
        """Ledger of an issued asset.

        Raises:
            UnknownAsset: If no asset was issued at address
        """
        token = self._assets.get(normalize_address(address))
        if token is None:
            raise UnknownAsset(f"Asset does not exist: {address}")
        return token

    @property
    def asset_count(self) -> int:
        return len(self._assets)


def _create_default_exchange() -> Exchange:
    """Create the exchange served by the API.

    The registry identity can be pinned with PAIRSWAP_REGISTRY_ADDRESS so
    that pool addresses are reproducible across deployments.
    """
    registry_address = os.environ.get("PAIRSWAP_REGISTRY_ADDRESS")
    if registry_address:
        logger.info("registry_address_configured", registry=registry_address)
        config = ExchangeConfig(registry_address=normalize_address(registry_address, validate=True))
        return Exchange(config)
    return Exchange(DEFAULT_EXCHANGE_CONFIG)


_default_exchange: Exchange | None = None


def get_default_exchange() -> Exchange:
    """Process-wide exchange served by the API (created on first use)."""
    global _default_exchange
    if _default_exchange is None:
        _default_exchange = _create_default_exchange()
    return _default_exchange
