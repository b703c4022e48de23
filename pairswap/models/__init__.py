"""Pydantic models for pairswap events, descriptors and API payloads."""

from pairswap.models.events import Deposit, PoolCreated, PoolEvent, Swap, Withdrawal
from pairswap.models.info import AssetInfo, ExchangeInfo, PoolState
from pairswap.models.types import Address, Hash32, Uint256

__all__ = [
    # Types
    "Address",
    "Hash32",
    "Uint256",
    # Events
    "PoolEvent",
    "Deposit",
    "Withdrawal",
    "Swap",
    "PoolCreated",
    # Descriptors
    "AssetInfo",
    "ExchangeInfo",
    "PoolState",
]
