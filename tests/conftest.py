"""Pytest configuration and fixtures."""

import pytest

from pairswap.assets import Token
from pairswap.pools import LiquidityPool, PoolRegistry
from pairswap.routing import Router
from tests.helpers import APPLES, ORANGES, PEARS, PLUMS, make_pool, make_token


@pytest.fixture
def apples() -> Token:
    return make_token(APPLES, "Apples", "APPLE")


@pytest.fixture
def oranges() -> Token:
    return make_token(ORANGES, "Oranges", "ORANGE")


@pytest.fixture
def pears() -> Token:
    return make_token(PEARS, "Pears", "PEAR")


@pytest.fixture
def plums() -> Token:
    return make_token(PLUMS, "Plums", "PLUM")


@pytest.fixture
def pool(apples: Token, oranges: Token) -> LiquidityPool:
    """Empty Apples/Oranges pool the deployer has approved for 5,000 units of each."""
    return make_pool(apples, oranges)


@pytest.fixture
def registry() -> PoolRegistry:
    return PoolRegistry()


@pytest.fixture
def router(registry: PoolRegistry) -> Router:
    return Router(registry)
