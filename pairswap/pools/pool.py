"""Constant product liquidity pool for one asset pair.

A LiquidityPool owns two reserves and a pool-local liquidity token ledger.
It prices deposits, withdrawals and swaps with the fee-less constant
product AMM. Swaps are priced against the invariant k recorded by the last
deposit or withdrawal. Assets move through the AssetLedger interface:
- deposits and swap inputs are pulled with transfer_from, the pool's own
  address acting as spender (callers approve the pool beforehand)
- withdrawals and swap outputs are paid with transfer

Every public operation runs inside ``atomic``: on failure the reserves,
the liquidity ledger, both asset ledgers and the event log are all put
back as they were. The pool itself does no locking; calls against one
pool must be serialized by whoever drives it.
"""

from __future__ import annotations

import structlog

from pairswap.amm.base import SwapQuote
from pairswap.amm.constant_product import ConstantProduct
from pairswap.assets.base import AssetLedger
from pairswap.assets.ledger import FungibleLedger
from pairswap.constants import MINIMUM_LIQUIDITY
from pairswap.errors import (
    AmbiguousSwapDirection,
    InsufficientBalanceForSwap,
    InsufficientLiquidityBalance,
    InvalidAmount,
)
from pairswap.models.events import Deposit, Swap, Withdrawal
from pairswap.models.info import AssetInfo, ExchangeInfo, PoolState
from pairswap.models.types import normalize_address
from pairswap.state.events import EventLog
from pairswap.state.journal import atomic

logger = structlog.get_logger()

PoolSnapshot = tuple[int, int, int, object, int]


def _require_positive(**amounts: int) -> None:
    for name, amount in amounts.items():
        if not isinstance(amount, int) or isinstance(amount, bool):
            raise InvalidAmount(f"{name} must be an integer, got {type(amount).__name__}")
        if amount <= 0:
            raise InvalidAmount(f"{name} must be positive: {amount}")


class LiquidityPool:
    """Reserves and liquidity accounting for exactly one asset pair.

    Attributes:
        address: Pool address; the pool holds its reserves under it on
            both asset ledgers
        asset_a: Ledger of the first asset (pool order fixed at creation)
        asset_b: Ledger of the second asset
        pair_id: Canonical pair identifier, when created by a registry
        liquidity: Pool-local liquidity token ledger
        events: Events emitted by this pool
    """

    def __init__(
        self,
        address: str,
        asset_a: AssetLedger,
        asset_b: AssetLedger,
        *,
        pair_id: str | None = None,
        minimum_liquidity: int = MINIMUM_LIQUIDITY,
    ) -> None:
        self.address = address
        self.asset_a = asset_a
        self.asset_b = asset_b
        self.pair_id = pair_id
        self.amm = ConstantProduct(minimum_liquidity)
        self.liquidity = FungibleLedger()
        self.events = EventLog()
        self._reserve_a = 0
        self._reserve_b = 0
        self._k = 0

    def __repr__(self) -> str:
        return f"LiquidityPool({self.asset_a.symbol}/{self.asset_b.symbol}, {self.address})"

    # --- Queries ---

    @property
    def reserve_a(self) -> int:
        return self._reserve_a

    @property
    def reserve_b(self) -> int:
        return self._reserve_b

    @property
    def reserves(self) -> tuple[int, int]:
        return self._reserve_a, self._reserve_b

    @property
    def k(self) -> int:
        """Invariant swaps are priced against.

        Set to reserve_a * reserve_b by every deposit and withdrawal and left
        unchanged by swaps.
        """
        return self._k

    @property
    def total_supply(self) -> int:
        """Outstanding liquidity tokens."""
        return self.liquidity.total_supply

    def balance_of(self, account: str) -> int:
        """Liquidity token balance of an account."""
        return self.liquidity.balance_of(account)

    def exchange_info(self) -> ExchangeInfo:
        """Identity and display names of both assets."""
        return ExchangeInfo(
            pool=self.address,
            pair_id=self.pair_id,
            asset_a=_asset_info(self.asset_a),
            asset_b=_asset_info(self.asset_b),
        )

    def state(self) -> PoolState:
        return PoolState(
            exchange=self.exchange_info(),
            reserve_a=self._reserve_a,
            reserve_b=self._reserve_b,
            total_supply=self.total_supply,
        )

    def quote(self, amount_a_in: int, amount_b_in: int) -> SwapQuote:
        """Price a swap against the current reserves without executing it.

        Raises:
            InvalidAmount: If an input is negative
            AmbiguousSwapDirection: If not exactly one input is non-zero
            InsufficientLiquidityForTrade: If the input is not below its reserve
            InvalidAmount: If the input is too small to produce any output
        """
        a_to_b = self._swap_direction(amount_a_in, amount_b_in)
        if a_to_b:
            return self.amm.quote_swap(amount_a_in, self._reserve_a, self._reserve_b, self._k)
        return self.amm.quote_swap(amount_b_in, self._reserve_b, self._reserve_a, self._k)

    # --- Operations ---

    def deposit(self, amount_a: int, amount_b: int, recipient: str, *, sender: str) -> int:
        """Add both assets to the pool and mint liquidity to recipient.

        The first deposit mints floor(sqrt(amount_a * amount_b)) minus the
        minimum liquidity. Later deposits must match the reserve ratio
        exactly and mint proportionally to the existing supply.

        Args:
            amount_a: Amount of asset A to supply
            amount_b: Amount of asset B to supply
            recipient: Account credited with the minted liquidity
            sender: Account the assets are pulled from

        Returns:
            Liquidity minted

        Raises:
            InvalidAmount: If an amount is not positive
            InsufficientInitialLiquidity: If a first deposit is too small
            IncorrectLiquidityRatio: If the amounts deviate from the reserve ratio
            InsufficientAllowance, InsufficientBalance: From the asset ledgers
        """
        _require_positive(amount_a=amount_a, amount_b=amount_b)

        with atomic(self, self.asset_a, self.asset_b, operation="deposit"):
            if self.total_supply == 0:
                minted = self.amm.initial_liquidity(amount_a, amount_b)
            else:
                minted = self.amm.proportional_liquidity(
                    amount_a,
                    amount_b,
                    self._reserve_a,
                    self._reserve_b,
                    self.total_supply,
                )

            self.asset_a.transfer_from(self.address, sender, self.address, amount_a)
            self.asset_b.transfer_from(self.address, sender, self.address, amount_b)

            self._reserve_a += amount_a
            self._reserve_b += amount_b
            self._k = self._reserve_a * self._reserve_b
            self.liquidity.mint(recipient, minted.liquidity)

            self.events.emit(
                Deposit(
                    pool=self.address,
                    initiator=normalize_address(sender),
                    supplied_a=amount_a,
                    supplied_b=amount_b,
                    reserve_a=self._reserve_a,
                    reserve_b=self._reserve_b,
                    minted_a=minted.from_a,
                    minted_b=minted.from_b,
                    liquidity=minted.liquidity,
                    total_supply=self.total_supply,
                )
            )

        logger.info(
            "liquidity_added",
            pool=self.address,
            sender=sender,
            amount_a=amount_a,
            amount_b=amount_b,
            liquidity=minted.liquidity,
            total_supply=self.total_supply,
        )
        return minted.liquidity

    def withdraw(self, liquidity: int, recipient: str, *, sender: str) -> tuple[int, int]:
        """Burn sender's liquidity and pay the proportional reserves to recipient.

        Args:
            liquidity: Liquidity tokens to burn
            recipient: Account receiving both assets
            sender: Account whose liquidity is burned

        Returns:
            (amount_a, amount_b) paid out

        Raises:
            InvalidAmount: If liquidity is not positive
            InsufficientLiquidityBalance: If sender holds less than liquidity
        """
        _require_positive(liquidity=liquidity)
        if self.liquidity.balance_of(sender) < liquidity:
            raise InsufficientLiquidityBalance()

        reserve_a, reserve_b = self._reserve_a, self._reserve_b
        amount_a, amount_b = self.amm.liquidity_value(
            liquidity, reserve_a, reserve_b, self.total_supply
        )

        with atomic(self, self.asset_a, self.asset_b, operation="withdraw"):
            self.liquidity.burn(sender, liquidity)
            self._reserve_a -= amount_a
            self._reserve_b -= amount_b
            self._k = self._reserve_a * self._reserve_b
            self.asset_a.transfer(self.address, recipient, amount_a)
            self.asset_b.transfer(self.address, recipient, amount_b)

            self.events.emit(
                Withdrawal(
                    pool=self.address,
                    initiator=normalize_address(sender),
                    reserve_a=reserve_a,
                    reserve_b=reserve_b,
                    amount_a=amount_a,
                    amount_b=amount_b,
                    liquidity=liquidity,
                    total_supply=self.total_supply,
                )
            )

        logger.info(
            "liquidity_removed",
            pool=self.address,
            sender=sender,
            liquidity=liquidity,
            amount_a=amount_a,
            amount_b=amount_b,
            total_supply=self.total_supply,
        )
        return amount_a, amount_b

    def swap(
        self,
        amount_a_in: int,
        amount_b_in: int,
        recipient: str,
        *,
        sender: str,
    ) -> tuple[int, int]:
        """Exchange one asset for the other at the constant product price.

        Exactly one of the inputs is non-zero and selects the direction.

        Args:
            amount_a_in: Amount of asset A to sell (0 when selling B)
            amount_b_in: Amount of asset B to sell (0 when selling A)
            recipient: Account receiving the output asset
            sender: Account the input asset is pulled from

        Returns:
            (amount_a, amount_b): the input amount on the input side and the
            output amount on the other

        Raises:
            InvalidAmount: If an input is negative
            AmbiguousSwapDirection: If not exactly one input is non-zero
            InsufficientLiquidityForTrade: If the input is not below its reserve
            InvalidAmount: If the input is too small to produce any output
            InsufficientBalanceForSwap: If sender holds less than the input
        """
        a_to_b = self._swap_direction(amount_a_in, amount_b_in)
        if a_to_b:
            asset_in, asset_out = self.asset_a, self.asset_b
            amount_in = amount_a_in
            quote = self.amm.quote_swap(amount_in, self._reserve_a, self._reserve_b, self._k)
        else:
            asset_in, asset_out = self.asset_b, self.asset_a
            amount_in = amount_b_in
            quote = self.amm.quote_swap(amount_in, self._reserve_b, self._reserve_a, self._k)

        if asset_in.balance_of(sender) < amount_in:
            raise InsufficientBalanceForSwap()

        with atomic(self, self.asset_a, self.asset_b, operation="swap"):
            asset_in.transfer_from(self.address, sender, self.address, amount_in)
            asset_out.transfer(self.address, recipient, quote.amount_out)

            if a_to_b:
                self._reserve_a, self._reserve_b = quote.reserve_in_after, quote.reserve_out_after
                amounts = (amount_in, quote.amount_out)
            else:
                self._reserve_b, self._reserve_a = quote.reserve_in_after, quote.reserve_out_after
                amounts = (quote.amount_out, amount_in)

            self.events.emit(
                Swap(
                    pool=self.address,
                    initiator=normalize_address(sender),
                    recipient=normalize_address(recipient),
                    amount_a=amounts[0],
                    amount_b=amounts[1],
                    a_to_b=a_to_b,
                    reserve_a=self._reserve_a,
                    reserve_b=self._reserve_b,
                )
            )

        logger.info(
            "swap_executed",
            pool=self.address,
            sender=sender,
            token_in=asset_in.symbol,
            amount_in=amount_in,
            amount_out=quote.amount_out,
            reserve_a=self._reserve_a,
            reserve_b=self._reserve_b,
        )
        return amounts

    # --- Liquidity token transfers ---

    def transfer(self, sender: str, to: str, amount: int) -> None:
        """Move liquidity tokens between accounts."""
        self.liquidity.transfer(sender, to, amount)

    def approve(self, owner: str, spender: str, amount: int) -> None:
        self.liquidity.approve(owner, spender, amount)

    def transfer_from(self, spender: str, owner: str, to: str, amount: int) -> None:
        self.liquidity.transfer_from(spender, owner, to, amount)

    # --- Snapshottable ---

    def snapshot(self) -> PoolSnapshot:
        return (
            self._reserve_a,
            self._reserve_b,
            self._k,
            self.liquidity.snapshot(),
            self.events.snapshot(),
        )

    def restore(self, snapshot: PoolSnapshot) -> None:
        reserve_a, reserve_b, k, liquidity, events = snapshot
        self._reserve_a = reserve_a
        self._reserve_b = reserve_b
        self._k = k
        self.liquidity.restore(liquidity)  # type: ignore[arg-type]
        self.events.restore(events)

    @staticmethod
    def _swap_direction(amount_a_in: int, amount_b_in: int) -> bool:
        """True for A -> B, False for B -> A."""
        for name, amount in (("amount_a_in", amount_a_in), ("amount_b_in", amount_b_in)):
            if not isinstance(amount, int) or isinstance(amount, bool):
                raise InvalidAmount(f"{name} must be an integer, got {type(amount).__name__}")
            if amount < 0:
                raise InvalidAmount(f"{name} cannot be negative: {amount}")
        if (amount_a_in == 0) == (amount_b_in == 0):
            raise AmbiguousSwapDirection()
        return amount_a_in > 0


def _asset_info(asset: AssetLedger) -> AssetInfo:
    return AssetInfo(
        address=asset.address,
        name=asset.name,
        symbol=asset.symbol,
        decimals=asset.decimals,
    )
