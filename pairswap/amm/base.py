"""Base classes for AMM pricing implementations."""

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class SwapQuote:
    """Result of pricing a swap against a pair of reserves."""

    amount_in: int
    amount_out: int
    reserve_in_after: int
    reserve_out_after: int


@dataclass(frozen=True)
class MintQuote:
    """Liquidity minted for a deposit, with the per-side contribution terms.

    For a first deposit both terms equal the minted amount.
    """

    liquidity: int
    from_a: int
    from_b: int


class AMM(ABC):
    """Abstract base class for two-asset AMM math.

    Implementations are pure: they price operations from reserves and
    supply figures passed in, and never hold pool state.
    """

    @abstractmethod
    def get_amount_out(
        self,
        amount_in: int,
        reserve_in: int,
        reserve_out: int,
        k: int | None = None,
    ) -> int:
        """Calculate the output amount for a given input.

        Args:
            amount_in: Input asset amount
            reserve_in: Reserve of the input asset
            reserve_out: Reserve of the output asset
            k: Invariant to price against (default: reserve_in * reserve_out)

        Returns:
            Output asset amount
        """
        ...

    @abstractmethod
    def initial_liquidity(self, amount_a: int, amount_b: int) -> MintQuote:
        """Size the liquidity issued by the first deposit into an empty pool."""
        ...

    @abstractmethod
    def proportional_liquidity(
        self,
        amount_a: int,
        amount_b: int,
        reserve_a: int,
        reserve_b: int,
        total_supply: int,
    ) -> MintQuote:
        """Size the liquidity issued by a deposit into a funded pool."""
        ...

    @abstractmethod
    def liquidity_value(
        self,
        liquidity: int,
        reserve_a: int,
        reserve_b: int,
        total_supply: int,
    ) -> tuple[int, int]:
        """Amounts of each asset redeemed by burning liquidity."""
        ...
