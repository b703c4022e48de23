"""Deterministic pair identifiers and pool addresses.

The pair identifier is order independent:
    pair_id = keccak256(abi.encodePacked(lower_address, higher_address))

The pool address is a pure function of the registry, the pair and the pool
template, following CREATE2:
    pool = keccak256(0xff ++ registry ++ pair_id ++ keccak256(template))[12:]

So anyone holding the three inputs can predict a pool's address before the
pool exists.
"""

from __future__ import annotations

from web3 import Web3

from pairswap.constants import CREATE2_PREFIX
from pairswap.models.types import normalize_address


def sort_assets(address_x: str, address_y: str) -> tuple[str, str]:
    """Return the two addresses normalized and in ascending order."""
    x = normalize_address(address_x, validate=True)
    y = normalize_address(address_y, validate=True)
    return (x, y) if x < y else (y, x)


def compute_pair_id(address_x: str, address_y: str) -> str:
    """Canonical identifier of an unordered asset pair.

    Args:
        address_x: First asset address (any case)
        address_y: Second asset address (any case)

    Returns:
        0x-prefixed lowercase hex keccak256 hash
    """
    low, high = sort_assets(address_x, address_y)
    digest = Web3.solidity_keccak(
        ["address", "address"],
        [Web3.to_checksum_address(low), Web3.to_checksum_address(high)],
    )
    return "0x" + bytes(digest).hex()


def pair_label(name_x: str, name_y: str) -> str:
    """Human-readable pair label, names in the order given (display only)."""
    return f"{name_x}/{name_y}"


def template_hash(pool_template: bytes) -> bytes:
    """keccak256 of the pool template (the init-code hash)."""
    return bytes(Web3.keccak(pool_template))


def compute_pool_address(registry_address: str, pair_id: str, pool_template: bytes) -> str:
    """CREATE2-style pool address.

    Args:
        registry_address: Address of the deploying registry
        pair_id: Canonical pair identifier (32-byte hex)
        pool_template: Template bytes hashed into the init-code hash

    Returns:
        Checksummed pool address

    Raises:
        ValueError: If the registry address or pair id is malformed
    """
    registry = bytes.fromhex(normalize_address(registry_address, validate=True)[2:])
    salt = bytes.fromhex(pair_id[2:] if pair_id.startswith("0x") else pair_id)
    if len(salt) != 32:
        raise ValueError(f"pair_id must be 32 bytes: {pair_id}")

    digest = Web3.keccak(CREATE2_PREFIX + registry + salt + template_hash(pool_template))
    return Web3.to_checksum_address(bytes(digest)[12:])
