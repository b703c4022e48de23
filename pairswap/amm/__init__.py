"""AMM (Automated Market Maker) pricing implementations."""

from pairswap.amm.base import AMM, MintQuote, SwapQuote
from pairswap.amm.constant_product import ConstantProduct

__all__ = [
    # Base classes
    "AMM",
    "MintQuote",
    "SwapQuote",
    # Constant product
    "ConstantProduct",
]
