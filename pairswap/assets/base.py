"""Interface of the asset ledgers consumed by pools and the router."""

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class AssetLedger(Protocol):
    """Protocol for the fungible asset ledgers a pool trades.

    The exchange never implements asset custody itself: pools pull deposits
    and swap inputs with transfer_from (the pool address acting as spender,
    so the caller must have approved it) and pay out with transfer.

    Ledgers must also be Snapshottable so that a failed operation can put
    back transfers it already made.
    """

    address: str
    name: str
    symbol: str
    decimals: int

    @property
    def total_supply(self) -> int: ...

    def balance_of(self, account: str) -> int: ...

    def allowance(self, owner: str, spender: str) -> int: ...

    def approve(self, owner: str, spender: str, amount: int) -> None: ...

    def transfer(self, sender: str, to: str, amount: int) -> None:
        """Move amount from sender to to.

        Raises:
            InsufficientBalance: If sender holds less than amount
        """
        ...

    def transfer_from(self, spender: str, owner: str, to: str, amount: int) -> None:
        """Move amount from owner to to on spender's allowance.

        Raises:
            InsufficientAllowance: If the allowance is below amount
            InsufficientBalance: If owner holds less than amount
        """
        ...

    def snapshot(self) -> Any: ...

    def restore(self, snapshot: Any) -> None: ...
