"""Mathematical utilities for pairswap.

This package provides the integer primitives used by pool accounting:
- isqrt: floor square root via Newton iteration (initial liquidity sizing)
"""

from pairswap.math.isqrt import isqrt

__all__ = ["isqrt"]
