"""Call routing.

The Router resolves pair identifiers through a PoolRegistry and forwards
deposits, withdrawals and swaps to the resolved pool. One pair per call;
there is no multi-hop routing.
"""

from pairswap.routing.router import Router

__all__ = ["Router"]
