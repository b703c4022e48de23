"""Router: caller-facing entry point to the pools of a registry.

The router resolves a pair identifier through the registry and forwards
the call to that pair's pool on behalf of the caller. The caller is the
sender of the assets and the recipient of whatever the pool pays out.

Assets move between the caller and the pool, never through the router:
before adding liquidity or swapping, the caller approves the pool
address (see PoolRegistry.get_pool_address) on the asset ledgers.
"""

from __future__ import annotations

import structlog

from pairswap.assets.base import AssetLedger
from pairswap.models.info import PoolState
from pairswap.pools.pool import LiquidityPool
from pairswap.pools.registry import PoolRegistry

logger = structlog.get_logger()


class Router:
    """Routes liquidity and swap calls to the pool of one pair per call."""

    def __init__(self, registry: PoolRegistry | None = None) -> None:
        """Initialize the router.

        Args:
            registry: Registry to resolve pairs with. A fresh registry with
                the default configuration is created when omitted.
        """
        self.registry = registry if registry is not None else PoolRegistry()

    def create_pool(self, asset_x: AssetLedger, asset_y: AssetLedger) -> str:
        """Create the pool for a new pair. See PoolRegistry.create_pool."""
        return self.registry.create_pool(asset_x, asset_y)

    def get_pool(self, pair_id: str) -> LiquidityPool:
        return self.registry.get_pool(pair_id)

    def get_pool_address(self, pair_id: str) -> str:
        return self.registry.get_pool_address(pair_id)

    def get_pool_state(self, pair_id: str) -> PoolState:
        return self.registry.get_pool(pair_id).state()

    def add_liquidity(self, caller: str, pair_id: str, amount_a: int, amount_b: int) -> int:
        """Deposit both assets of a pair on behalf of caller.

        Args:
            caller: Account supplying the assets and receiving the liquidity
            pair_id: Canonical pair identifier
            amount_a: Amount of the pool's asset A
            amount_b: Amount of the pool's asset B

        Returns:
            Liquidity minted to caller

        Raises:
            UnknownPool: If pair_id is not registered
            PairswapError: Any failure of LiquidityPool.deposit
        """
        pool = self.registry.get_pool(pair_id)
        logger.debug("routing_add_liquidity", pair_id=pair_id[:10], pool=pool.address[-8:])
        return pool.deposit(amount_a, amount_b, caller, sender=caller)

    def remove_liquidity(self, caller: str, pair_id: str, liquidity: int) -> tuple[int, int]:
        """Burn caller's liquidity in a pair's pool and pay caller both assets.

        Returns:
            (amount_a, amount_b) paid to caller

        Raises:
            UnknownPool: If pair_id is not registered
            PairswapError: Any failure of LiquidityPool.withdraw
        """
        pool = self.registry.get_pool(pair_id)
        logger.debug("routing_remove_liquidity", pair_id=pair_id[:10], pool=pool.address[-8:])
        return pool.withdraw(liquidity, caller, sender=caller)

    def swap(
        self,
        caller: str,
        pair_id: str,
        amount_a_in: int,
        amount_b_in: int,
    ) -> tuple[int, int]:
        """Swap through a pair's pool on behalf of caller.

        Returns:
            (amount_a, amount_b) per side, as returned by LiquidityPool.swap

        Raises:
            UnknownPool: If pair_id is not registered
            PairswapError: Any failure of LiquidityPool.swap
        """
        pool = self.registry.get_pool(pair_id)
        logger.debug("routing_swap", pair_id=pair_id[:10], pool=pool.address[-8:])
        return pool.swap(amount_a_in, amount_b_in, caller, sender=caller)
