"""Pydantic models for the HTTP API request and response bodies.

Amounts travel as uint256 decimal strings (ints are accepted on input).
"""

from pydantic import BaseModel, Field

from pairswap.models.info import AssetInfo
from pairswap.models.types import Address, Hash32, Uint256


class IssueAssetRequest(BaseModel):
    """Issue a new fixed-supply asset, minted entirely to owner."""

    name: str = Field(min_length=1, max_length=64)
    symbol: str = Field(min_length=1, max_length=16)
    supply: Uint256
    owner: Address


class AssetResponse(AssetInfo):
    """An issued asset and its total supply."""

    total_supply: Uint256


class BalanceResponse(BaseModel):
    account: Address
    balance: Uint256


class ApprovalRequest(BaseModel):
    """Let spender move up to amount of owner's balance."""

    owner: Address
    spender: Address
    amount: Uint256


class CreatePoolRequest(BaseModel):
    asset_x: Address
    asset_y: Address


class CreatePoolResponse(BaseModel):
    pair_id: Hash32
    pair_label: str
    pool_address: Address


class AddLiquidityRequest(BaseModel):
    caller: Address
    amount_a: Uint256
    amount_b: Uint256


class AddLiquidityResponse(BaseModel):
    liquidity: Uint256
    reserve_a: Uint256
    reserve_b: Uint256
    total_supply: Uint256


class RemoveLiquidityRequest(BaseModel):
    caller: Address
    liquidity: Uint256


class RemoveLiquidityResponse(BaseModel):
    amount_a: Uint256
    amount_b: Uint256
    reserve_a: Uint256
    reserve_b: Uint256
    total_supply: Uint256


class SwapRequest(BaseModel):
    """Exactly one of the two inputs must be non-zero."""

    caller: Address
    amount_a_in: Uint256 = 0
    amount_b_in: Uint256 = 0


class SwapResponse(BaseModel):
    amount_a: Uint256
    amount_b: Uint256
    reserve_a: Uint256
    reserve_b: Uint256


class QuoteResponse(BaseModel):
    amount_in: Uint256
    amount_out: Uint256
    reserve_a_after: Uint256
    reserve_b_after: Uint256


class ErrorResponse(BaseModel):
    """Body of every domain error response."""

    code: str = Field(description="Stable machine-readable error code")
    detail: str
