"""Pydantic models for events emitted by pools and registries.

Events are the source of truth for the amounts an operation actually
applied. Amount fields hold Python ints and serialize to decimal strings
in JSON.
"""

from pydantic import BaseModel, ConfigDict, Field

from pairswap.models.types import Address, Hash32, Uint256


class PoolEvent(BaseModel):
    """Base for events emitted by a liquidity pool."""

    model_config = ConfigDict(frozen=True)

    pool: Address = Field(description="Address of the emitting pool")
    initiator: Address = Field(description="Account that called the operation")


class Deposit(PoolEvent):
    """Liquidity was added to a pool."""

    supplied_a: Uint256
    supplied_b: Uint256
    reserve_a: Uint256 = Field(description="Reserve of asset A after the deposit")
    reserve_b: Uint256 = Field(description="Reserve of asset B after the deposit")
    minted_a: Uint256 = Field(description="Liquidity implied by the asset A side")
    minted_b: Uint256 = Field(description="Liquidity implied by the asset B side")
    liquidity: Uint256 = Field(description="Liquidity actually minted (min of both sides)")
    total_supply: Uint256 = Field(description="Liquidity supply after the deposit")


class Withdrawal(PoolEvent):
    """Liquidity was burned and assets returned."""

    reserve_a: Uint256 = Field(description="Reserve of asset A before the withdrawal")
    reserve_b: Uint256 = Field(description="Reserve of asset B before the withdrawal")
    amount_a: Uint256
    amount_b: Uint256
    liquidity: Uint256 = Field(description="Liquidity burned")
    total_supply: Uint256 = Field(description="Liquidity supply after the withdrawal")


class Swap(PoolEvent):
    """One asset was exchanged for the other.

    Exactly one side is the input; the other holds the output amount.
    """

    recipient: Address
    amount_a: Uint256
    amount_b: Uint256
    a_to_b: bool = Field(description="True when asset A was the input")
    reserve_a: Uint256 = Field(description="Reserve of asset A after the swap")
    reserve_b: Uint256 = Field(description="Reserve of asset B after the swap")

    @property
    def amount_in(self) -> int:
        return self.amount_a if self.a_to_b else self.amount_b

    @property
    def amount_out(self) -> int:
        return self.amount_b if self.a_to_b else self.amount_a


class PoolCreated(BaseModel):
    """A registry created the pool for a new pair."""

    model_config = ConfigDict(frozen=True)

    pair_label: str = Field(description="Display label, asset names in the order given")
    pair_id: Hash32
    pool_address: Address
