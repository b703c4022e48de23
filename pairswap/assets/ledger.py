"""ERC20-shaped fungible ledger.

FungibleLedger is the bookkeeping shared by asset tokens and by each pool's
liquidity token: balances per account, allowances per (owner, spender),
and a tracked total supply. Minting and burning keep the sum of balances
equal to the total supply.

Callers are explicit: there is no ambient message sender, so every
mutating method names the account acting on the ledger.
"""

from __future__ import annotations

from pairswap.constants import UINT256_MAX
from pairswap.errors import InsufficientAllowance, InsufficientBalance, InvalidAmount
from pairswap.models.types import normalize_address


def _check_amount(amount: int) -> None:
    if not isinstance(amount, int) or isinstance(amount, bool):
        raise InvalidAmount(f"Amount must be an integer, got {type(amount).__name__}")
    if amount < 0:
        raise InvalidAmount(f"Amount cannot be negative: {amount}")


class FungibleLedger:
    """Balances, allowances and total supply of one fungible asset.

    An allowance of 2^256-1 is treated as unlimited and is not decreased
    by transfer_from.
    """

    def __init__(self) -> None:
        self._balances: dict[str, int] = {}
        self._allowances: dict[tuple[str, str], int] = {}
        self._total_supply = 0

    @property
    def total_supply(self) -> int:
        return self._total_supply

    def balance_of(self, account: str) -> int:
        return self._balances.get(normalize_address(account), 0)

    def allowance(self, owner: str, spender: str) -> int:
        return self._allowances.get((normalize_address(owner), normalize_address(spender)), 0)

    def holders(self) -> dict[str, int]:
        """Accounts with a non-zero balance."""
        return {account: amount for account, amount in self._balances.items() if amount}

    def approve(self, owner: str, spender: str, amount: int) -> None:
        """Set the amount spender may move out of owner's balance."""
        _check_amount(amount)
        self._allowances[(normalize_address(owner), normalize_address(spender))] = amount

    def transfer(self, sender: str, to: str, amount: int) -> None:
        """Move amount from sender to to.

        Raises:
            InsufficientBalance: If sender holds less than amount
        """
        _check_amount(amount)
        self._move(normalize_address(sender), normalize_address(to), amount)

    def transfer_from(self, spender: str, owner: str, to: str, amount: int) -> None:
        """Move amount from owner to to, spending spender's allowance.

        Raises:
            InsufficientAllowance: If spender's allowance is below amount
            InsufficientBalance: If owner holds less than amount
        """
        _check_amount(amount)
        owner_key = normalize_address(owner)
        key = (owner_key, normalize_address(spender))
        allowed = self._allowances.get(key, 0)
        if allowed < amount:
            raise InsufficientAllowance(
                f"Insufficient allowance: {spender} may move {allowed} of {owner}, needs {amount}"
            )

        self._move(owner_key, normalize_address(to), amount)
        if allowed != UINT256_MAX:
            self._allowances[key] = allowed - amount

    def mint(self, to: str, amount: int) -> None:
        _check_amount(amount)
        to_key = normalize_address(to)
        self._balances[to_key] = self._balances.get(to_key, 0) + amount
        self._total_supply += amount

    def burn(self, owner: str, amount: int) -> None:
        """Destroy amount from owner's balance.

        Raises:
            InsufficientBalance: If owner holds less than amount
        """
        _check_amount(amount)
        owner_key = normalize_address(owner)
        balance = self._balances.get(owner_key, 0)
        if balance < amount:
            raise InsufficientBalance(f"Burn amount exceeds balance: {amount} > {balance}")
        self._balances[owner_key] = balance - amount
        self._total_supply -= amount

    def _move(self, sender: str, to: str, amount: int) -> None:
        balance = self._balances.get(sender, 0)
        if balance < amount:
            raise InsufficientBalance(f"Transfer amount exceeds balance: {amount} > {balance}")
        self._balances[sender] = balance - amount
        self._balances[to] = self._balances.get(to, 0) + amount

    # --- Snapshottable ---

    def snapshot(self) -> tuple[dict[str, int], dict[tuple[str, str], int], int]:
        return dict(self._balances), dict(self._allowances), self._total_supply

    def restore(self, snapshot: tuple[dict[str, int], dict[tuple[str, str], int], int]) -> None:
        balances, allowances, total_supply = snapshot
        self._balances = dict(balances)
        self._allowances = dict(allowances)
        self._total_supply = total_supply
