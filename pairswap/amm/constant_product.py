"""Fee-less constant product AMM math.

A pool prices every swap against its invariant k, the product of the
reserves recorded by the last deposit or withdrawal. Swaps do not update k:
each one moves the reserves along the same curve, so rounding in one trade
does not compound into the next. No fee is deducted.

All functions here are pure integer arithmetic on non-negative amounts,
done through SafeInt so that a bad input raises instead of producing a
negative or divided-by-zero result.
"""

from __future__ import annotations

import structlog

from pairswap.amm.base import AMM, MintQuote, SwapQuote
from pairswap.constants import MINIMUM_LIQUIDITY
from pairswap.errors import (
    IncorrectLiquidityRatio,
    InsufficientInitialLiquidity,
    InsufficientLiquidityForTrade,
    InvalidAmount,
)
from pairswap.safe_int import S

logger = structlog.get_logger()


class ConstantProduct(AMM):
    """Constant product pricing and proportional liquidity accounting.

    Swap formula: amount_out = reserve_out - floor(k / (reserve_in + amount_in))

    Flooring the new output reserve rounds the output amount up, so the
    reserve product after a swap sits below k by less than the new input
    reserve. k itself is unchanged by swaps.
    """

    def __init__(self, minimum_liquidity: int = MINIMUM_LIQUIDITY) -> None:
        self.minimum_liquidity = minimum_liquidity

    def get_amount_out(
        self,
        amount_in: int,
        reserve_in: int,
        reserve_out: int,
        k: int | None = None,
    ) -> int:
        """Calculate output amount using the fee-less constant product formula.

        Args:
            amount_in: Input asset amount
            reserve_in: Reserve of the input asset (pre-trade)
            reserve_out: Reserve of the output asset (pre-trade)
            k: Pool invariant (default: reserve_in * reserve_out)

        Returns:
            Output asset amount, 0 for zero input, empty reserves, or an
            input too small to move the output reserve below reserve_out
        """
        if amount_in <= 0:
            return 0
        if reserve_in <= 0 or reserve_out <= 0:
            return 0

        invariant = S(reserve_in) * S(reserve_out) if k is None else S(k)
        new_reserve_out = invariant // (S(reserve_in) + S(amount_in))
        if new_reserve_out >= reserve_out:
            return 0
        return (S(reserve_out) - new_reserve_out).value

    def quote_swap(
        self,
        amount_in: int,
        reserve_in: int,
        reserve_out: int,
        k: int | None = None,
    ) -> SwapQuote:
        """Price a swap and enforce the single-trade liquidity bound.

        The input must be strictly smaller than the input-side reserve, and
        the trade must leave a non-zero output reserve.

        Args:
            amount_in: Input asset amount (positive)
            reserve_in: Reserve of the input asset (pre-trade)
            reserve_out: Reserve of the output asset (pre-trade)
            k: Pool invariant (default: reserve_in * reserve_out)

        Returns:
            SwapQuote with the output amount and post-trade reserves

        Raises:
            InsufficientLiquidityForTrade: If amount_in >= reserve_in or the
                output would drain reserve_out
            InvalidAmount: If the input is too small to produce any output
        """
        if amount_in >= reserve_in:
            raise InsufficientLiquidityForTrade()

        amount_out = self.get_amount_out(amount_in, reserve_in, reserve_out, k)
        if amount_out == 0:
            raise InvalidAmount(f"Swap input too small to produce output: {amount_in}")
        reserve_out_after = (S(reserve_out) - S(amount_out)).value
        if reserve_out_after == 0:
            # Only reachable when reserve_out is a single unit
            raise InsufficientLiquidityForTrade()

        return SwapQuote(
            amount_in=amount_in,
            amount_out=amount_out,
            reserve_in_after=(S(reserve_in) + S(amount_in)).to_uint256(),
            reserve_out_after=reserve_out_after,
        )

    def initial_liquidity(self, amount_a: int, amount_b: int) -> MintQuote:
        """Liquidity for the first deposit: floor(sqrt(a * b)) - minimum_liquidity.

        Raises:
            InsufficientInitialLiquidity: If the result would not be positive
        """
        root = (S(amount_a) * S(amount_b)).sqrt()
        if root <= self.minimum_liquidity:
            logger.debug(
                "initial_liquidity_too_small",
                amount_a=amount_a,
                amount_b=amount_b,
                root=root.value,
            )
            raise InsufficientInitialLiquidity()

        liquidity = (root - S(self.minimum_liquidity)).value
        return MintQuote(liquidity=liquidity, from_a=liquidity, from_b=liquidity)

    def proportional_liquidity(
        self,
        amount_a: int,
        amount_b: int,
        reserve_a: int,
        reserve_b: int,
        total_supply: int,
    ) -> MintQuote:
        """Liquidity for a deposit into a funded pool.

        The deposit must match the reserve ratio exactly
        (amount_a * reserve_b == amount_b * reserve_a). Minted liquidity is
        min(amount_a * supply // reserve_a, amount_b * supply // reserve_b),
        using pre-deposit reserves; under an exact ratio both terms only
        differ by rounding.

        Raises:
            IncorrectLiquidityRatio: If the amounts deviate from the reserve ratio
        """
        if S(amount_a) * S(reserve_b) != S(amount_b) * S(reserve_a):
            raise IncorrectLiquidityRatio()

        from_a = S(amount_a) * S(total_supply) // S(reserve_a)
        from_b = S(amount_b) * S(total_supply) // S(reserve_b)
        return MintQuote(
            liquidity=from_a.min(from_b).value,
            from_a=from_a.value,
            from_b=from_b.value,
        )

    def liquidity_value(
        self,
        liquidity: int,
        reserve_a: int,
        reserve_b: int,
        total_supply: int,
    ) -> tuple[int, int]:
        """Proportional share of each reserve: floor(reserve * liquidity / supply)."""
        amount_a = S(reserve_a) * S(liquidity) // S(total_supply)
        amount_b = S(reserve_b) * S(liquidity) // S(total_supply)
        return amount_a.value, amount_b.value

