"""Fungible asset ledgers.

Provides the AssetLedger protocol consumed by pools and the router, the
FungibleLedger bookkeeping shared with liquidity tokens, and Token, an
in-memory asset used by the API, the demo script and the tests.
"""

from pairswap.assets.base import AssetLedger
from pairswap.assets.ledger import FungibleLedger
from pairswap.assets.token import Token

__all__ = ["AssetLedger", "FungibleLedger", "Token"]
