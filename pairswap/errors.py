"""Exchange error classes.

Every failure of a pool, registry or ledger operation raises one of these.
Each class carries a stable ``code`` and a default message, so callers can
assert on the cause of a failure rather than on its occurrence.

All failures are synchronous and leave state exactly as it was before the
call; resubmitting with corrected inputs is the only recovery.
"""

from __future__ import annotations


class PairswapError(Exception):
    """Base error for exchange operations."""

    code: str = "pairswap_error"
    default_message: str = "Exchange operation failed"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidAmount(PairswapError):
    """Amount is negative, or zero where a positive amount is required."""

    code = "invalid_amount"
    default_message = "Amount must be positive"


# --- Pool errors ---


class InsufficientInitialLiquidity(PairswapError):
    """First deposit too small to mint liquidity above the minimum."""

    code = "insufficient_initial_liquidity"
    default_message = "Insufficient initial liquidity"


class IncorrectLiquidityRatio(PairswapError):
    """Deposit amounts do not match the pool's reserve ratio exactly."""

    code = "incorrect_liquidity_ratio"
    default_message = "Incorrect liquidity ratio"


class InsufficientLiquidityBalance(PairswapError):
    """Withdrawal exceeds the caller's liquidity token balance."""

    code = "insufficient_liquidity_balance"
    default_message = "Withdraw amount exceeds balance of LP Tokens"


class AmbiguousSwapDirection(PairswapError):
    """Swap must specify an input amount for exactly one asset."""

    code = "ambiguous_swap_direction"
    default_message = "Specify the amount to swap for one token only"


class InsufficientLiquidityForTrade(PairswapError):
    """Swap input is not strictly below the reserve of the same asset."""

    code = "insufficient_liquidity_for_trade"
    default_message = "Insufficient liquidity for trade"


class InsufficientBalanceForSwap(PairswapError):
    """Caller holds less of the input asset than the swap requires."""

    code = "insufficient_balance_for_swap"
    default_message = "Insufficient balance for swap"


# --- Registry errors ---


class PairAlreadyExists(PairswapError):
    """A pool has already been created for this asset pair."""

    code = "pair_already_exists"
    default_message = "Trading pair already exists"


class UnknownPool(PairswapError):
    """No pool is registered under the pair identifier."""

    code = "unknown_pool"
    default_message = "Liquidity pool does not exist"


class InvalidAssetPair(PairswapError):
    """Both sides of a pair are the same asset."""

    code = "invalid_asset_pair"
    default_message = "Trading pair requires two distinct assets"


class UnknownAsset(PairswapError):
    """No asset ledger is known under the address."""

    code = "unknown_asset"
    default_message = "Asset does not exist"


# --- Ledger errors ---


class LedgerError(PairswapError):
    """Base error for asset ledger operations."""

    code = "ledger_error"
    default_message = "Ledger operation failed"


class InsufficientBalance(LedgerError):
    """Transfer amount exceeds the owner's balance."""

    code = "insufficient_balance"
    default_message = "Transfer amount exceeds balance"


class InsufficientAllowance(LedgerError):
    """Transfer amount exceeds the spender's allowance."""

    code = "insufficient_allowance"
    default_message = "Insufficient allowance"
