"""Exchange configuration."""

from dataclasses import dataclass

from pairswap.constants import DEFAULT_REGISTRY_ADDRESS, MINIMUM_LIQUIDITY, POOL_TEMPLATE


@dataclass(frozen=True)
class ExchangeConfig:
    """Centralized configuration for registries and the pools they create.

    Attributes:
        minimum_liquidity: Liquidity units withheld from the first deposit
            of every pool (default: 1000)
        registry_address: Identity of the registry; an input to pool
            address derivation
        pool_template: Bytes hashed into the init-code hash of the
            CREATE2-style pool address derivation
    """

    minimum_liquidity: int = MINIMUM_LIQUIDITY
    registry_address: str = DEFAULT_REGISTRY_ADDRESS
    pool_template: bytes = POOL_TEMPLATE

    def __post_init__(self) -> None:
        if self.minimum_liquidity < 0:
            raise ValueError(f"minimum_liquidity must be non-negative: {self.minimum_liquidity}")


# Default configuration instance
DEFAULT_EXCHANGE_CONFIG = ExchangeConfig()
