"""Read-only descriptors of assets and pools."""

from pydantic import BaseModel, ConfigDict, Field

from pairswap.models.types import Address, Hash32, Uint256


class AssetInfo(BaseModel):
    """Identity and display names of one asset."""

    model_config = ConfigDict(frozen=True)

    address: Address
    name: str
    symbol: str
    decimals: int = 18


class ExchangeInfo(BaseModel):
    """The two assets traded by a pool, in the pool's internal order."""

    model_config = ConfigDict(frozen=True)

    pool: Address
    pair_id: Hash32 | None = None
    asset_a: AssetInfo
    asset_b: AssetInfo


class PoolState(BaseModel):
    """Point-in-time view of a pool's reserves and liquidity supply."""

    model_config = ConfigDict(frozen=True)

    exchange: ExchangeInfo
    reserve_a: Uint256
    reserve_b: Uint256
    total_supply: Uint256 = Field(description="Outstanding liquidity tokens")
