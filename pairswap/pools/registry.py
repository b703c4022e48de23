"""Pool registry: one deterministically addressed pool per asset pair.

PoolRegistry owns the pair index. It is an explicit object with its own
storage, constructed once and handed to the router; there is no module
level registry.

Entries are append-only: a pair is indexed exactly once, by the
create_pool call that created its pool, and never removed.
"""

from __future__ import annotations

from collections.abc import Iterator

import structlog

from pairswap.assets.base import AssetLedger
from pairswap.config import DEFAULT_EXCHANGE_CONFIG, ExchangeConfig
from pairswap.errors import InvalidAssetPair, PairAlreadyExists, UnknownPool
from pairswap.models.events import PoolCreated
from pairswap.models.types import normalize_address
from pairswap.pools.addressing import compute_pair_id, compute_pool_address, pair_label
from pairswap.pools.pool import LiquidityPool
from pairswap.state.events import EventLog

logger = structlog.get_logger()


class PoolRegistry:
    """Registry of constant product pools keyed by canonical pair identifier.

    Attributes:
        config: Exchange configuration (registry identity, template,
            minimum liquidity handed to new pools)
        events: PoolCreated events, in creation order
    """

    def __init__(self, config: ExchangeConfig = DEFAULT_EXCHANGE_CONFIG) -> None:
        self.config = config
        self.events = EventLog()
        self._pair_index: dict[str, LiquidityPool] = {}

    @property
    def address(self) -> str:
        """Identity of this registry, an input to pool address derivation."""
        return self.config.registry_address

    def predict_pool_address(self, pair_id: str) -> str:
        """Address the pool for pair_id has, or will have once created."""
        return compute_pool_address(self.address, pair_id, self.config.pool_template)

    def create_pool(self, asset_x: AssetLedger, asset_y: AssetLedger) -> str:
        """Create the pool for an unordered asset pair.

        The pool keeps the assets in the order given: asset_x becomes
        asset A. The pair label uses the display names in the same order.

        Args:
            asset_x: First asset ledger
            asset_y: Second asset ledger

        Returns:
            Canonical pair identifier

        Raises:
            InvalidAssetPair: If both ledgers are the same asset
            PairAlreadyExists: If a pool exists for the pair, in either order
        """
        if normalize_address(asset_x.address) == normalize_address(asset_y.address):
            raise InvalidAssetPair()

        pair_id = compute_pair_id(asset_x.address, asset_y.address)
        label = pair_label(asset_x.name, asset_y.name)
        if pair_id in self._pair_index:
            logger.debug("pool_already_exists", pair_label=label, pair_id=pair_id)
            raise PairAlreadyExists()

        pool = LiquidityPool(
            self.predict_pool_address(pair_id),
            asset_x,
            asset_y,
            pair_id=pair_id,
            minimum_liquidity=self.config.minimum_liquidity,
        )
        self._pair_index[pair_id] = pool
        self.events.emit(PoolCreated(pair_label=label, pair_id=pair_id, pool_address=pool.address))

        logger.info(
            "pool_created",
            pair_label=label,
            pair_id=pair_id,
            pool=pool.address,
        )
        return pair_id

    def get_pool(self, pair_id: str) -> LiquidityPool:
        """Resolve a pair identifier to its pool.

        Raises:
            UnknownPool: If no pool is registered under pair_id
        """
        pool = self._pair_index.get(pair_id.lower())
        if pool is None:
            raise UnknownPool(f"Liquidity pool does not exist: {pair_id}")
        return pool

    def get_pool_address(self, pair_id: str) -> str:
        """Address of the registered pool for pair_id.

        Raises:
            UnknownPool: If no pool is registered under pair_id
        """
        return self.get_pool(pair_id).address

    def find_pool(self, address_x: str, address_y: str) -> LiquidityPool | None:
        """Pool for a pair of asset addresses, in either order, or None."""
        return self._pair_index.get(compute_pair_id(address_x, address_y))

    def __contains__(self, pair_id: object) -> bool:
        return isinstance(pair_id, str) and pair_id.lower() in self._pair_index

    def __iter__(self) -> Iterator[LiquidityPool]:
        return iter(list(self._pair_index.values()))

    @property
    def pool_count(self) -> int:
        """Return the number of pools in the registry."""
        return len(self._pair_index)
