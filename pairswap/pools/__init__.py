"""Pool management package.

Provides LiquidityPool, the PoolRegistry that creates one pool per pair,
and the deterministic pair/pool addressing helpers.
"""

from .addressing import compute_pair_id, compute_pool_address, pair_label, sort_assets
from .pool import LiquidityPool
from .registry import PoolRegistry

__all__ = [
    "LiquidityPool",
    "PoolRegistry",
    "compute_pair_id",
    "compute_pool_address",
    "pair_label",
    "sort_assets",
]
