"""In-memory reference implementation of an asset ledger."""

from __future__ import annotations

import structlog

from pairswap.assets.ledger import FungibleLedger
from pairswap.constants import ASSET_DECIMALS
from pairswap.models.types import normalize_address

logger = structlog.get_logger()


class Token(FungibleLedger):
    """A named fungible asset at a fixed address.

    The whole initial supply is minted to the deployer, mirroring a
    fixed-supply ERC20 token.
    """

    def __init__(
        self,
        address: str,
        name: str,
        symbol: str,
        initial_supply: int = 0,
        owner: str | None = None,
        decimals: int = ASSET_DECIMALS,
    ) -> None:
        super().__init__()
        self.address = normalize_address(address, validate=True)
        self.name = name
        self.symbol = symbol
        self.decimals = decimals

        if initial_supply:
            if owner is None:
                raise ValueError("owner is required when minting an initial supply")
            self.mint(owner, initial_supply)

        logger.debug(
            "token_deployed",
            address=self.address,
            symbol=symbol,
            initial_supply=initial_supply,
        )

    def __repr__(self) -> str:
        return f"Token({self.symbol}, {self.address})"
