"""Test helpers module for shared test utilities.

This module consolidates common test utilities to reduce duplication:
- constants: Accounts, asset addresses and the wei() helper
- factories: Token and pool factory functions
"""

from tests.helpers.constants import (
    ALICE,
    APPLES,
    BOB,
    DEAD,
    DEPLOYER,
    INITIAL_SUPPLY_UNITS,
    ORANGES,
    PEARS,
    PLUMS,
    wei,
)
from tests.helpers.factories import STANDALONE_POOL, make_pool, make_token

__all__ = [
    # Constants
    "DEPLOYER",
    "ALICE",
    "BOB",
    "DEAD",
    "APPLES",
    "ORANGES",
    "PEARS",
    "PLUMS",
    "INITIAL_SUPPLY_UNITS",
    "wei",
    # Factories
    "STANDALONE_POOL",
    "make_token",
    "make_pool",
]
