"""Protocol constants for the pairswap exchange.

Centralizes the numeric parameters of the constant-product pools and the
well-known addresses used by the registry.
"""

from pairswap.models.types import UINT256_MAX, is_valid_address

# Liquidity units withheld from the first depositor of every pool.
# Never credited to any account, so the total supply of a fresh pool is
# floor(sqrt(amount_a * amount_b)) - MINIMUM_LIQUIDITY.
MINIMUM_LIQUIDITY = 1000

# Assets are modeled with 18 decimals (1 whole unit = 10**18 base units)
ASSET_DECIMALS = 18
WAD = 10**ASSET_DECIMALS


def _validate_address(name: str, address: str) -> str:
    """Validate and return a well-known address.

    Args:
        name: Name of the address (for error messages)
        address: The address to validate

    Returns:
        The validated address

    Raises:
        ValueError: If the address is invalid
    """
    if not is_valid_address(address):
        raise ValueError(f"Invalid {name} address: {address} (must be 0x + 40 hex chars)")
    return address


# Identity of the default registry. Pool addresses are derived from it, so
# changing it changes every predicted pool address.
DEFAULT_REGISTRY_ADDRESS = _validate_address(
    "registry", "0x5fbdb2315678afecb367f032d93f642f64180aa3"
)

# Template whose keccak256 hash plays the role of the pool init-code hash
# in CREATE2-style address derivation.
POOL_TEMPLATE = b"pairswap.LiquidityPool:constant-product:v1"

# Prefix byte of CREATE2 address derivation
CREATE2_PREFIX = b"\xff"
