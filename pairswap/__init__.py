"""pairswap - constant product liquidity pools with a deterministic pair registry."""

from pairswap.assets import AssetLedger, Token
from pairswap.config import DEFAULT_EXCHANGE_CONFIG, ExchangeConfig
from pairswap.pools import LiquidityPool, PoolRegistry
from pairswap.routing import Router

__version__ = "0.1.0"
__all__ = [
    "AssetLedger",
    "DEFAULT_EXCHANGE_CONFIG",
    "ExchangeConfig",
    "LiquidityPool",
    "PoolRegistry",
    "Router",
    "Token",
    "__version__",
]
