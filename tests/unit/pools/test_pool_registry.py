"""Tests for PoolRegistry."""

import pytest

from pairswap.config import ExchangeConfig
from pairswap.errors import InvalidAssetPair, PairAlreadyExists, UnknownPool
from pairswap.models.events import PoolCreated
from pairswap.pools import PoolRegistry, compute_pair_id
from tests.helpers import APPLES, ORANGES, PEARS


class TestCreatePool:
    """Tests for pool creation."""

    def test_returns_canonical_pair_id(self, registry, apples, oranges):
        pair_id = registry.create_pool(apples, oranges)
        assert pair_id == compute_pair_id(APPLES, ORANGES)
        assert pair_id in registry
        assert registry.pool_count == 1

    def test_pool_keeps_given_order(self, registry, apples, oranges):
        pair_id = registry.create_pool(oranges, apples)
        pool = registry.get_pool(pair_id)
        assert pool.asset_a is oranges
        assert pool.asset_b is apples
        assert pool.pair_id == pair_id

    def test_pool_at_predicted_address(self, registry, apples, oranges):
        predicted = registry.predict_pool_address(compute_pair_id(APPLES, ORANGES))
        pair_id = registry.create_pool(apples, oranges)
        assert registry.get_pool_address(pair_id) == predicted

    def test_emits_pool_created(self, registry, apples, oranges):
        pair_id = registry.create_pool(apples, oranges)
        event = registry.events.last(PoolCreated)
        assert event.pair_label == "Apples/Oranges"
        assert event.pair_id == pair_id
        assert event.pool_address == registry.get_pool_address(pair_id)

    def test_duplicate_rejected_in_either_order(self, registry, apples, oranges):
        registry.create_pool(apples, oranges)
        with pytest.raises(PairAlreadyExists, match="already exists"):
            registry.create_pool(apples, oranges)
        with pytest.raises(PairAlreadyExists):
            registry.create_pool(oranges, apples)
        assert registry.pool_count == 1
        assert len(registry.events) == 1

    def test_same_asset_rejected(self, registry, apples):
        with pytest.raises(InvalidAssetPair):
            registry.create_pool(apples, apples)

    def test_independent_pairs(self, registry, apples, oranges, pears, plums):
        first = registry.create_pool(apples, oranges)
        second = registry.create_pool(pears, plums)
        third = registry.create_pool(apples, pears)
        assert len({first, second, third}) == 3
        assert registry.pool_count == 3
        assert len({pool.address for pool in registry}) == 3

    def test_minimum_liquidity_from_config(self, apples, oranges):
        registry = PoolRegistry(ExchangeConfig(minimum_liquidity=0))
        pool = registry.get_pool(registry.create_pool(apples, oranges))
        assert pool.amm.minimum_liquidity == 0


class TestLookup:
    """Tests for resolving pools."""

    def test_unknown_pair_id(self, registry):
        with pytest.raises(UnknownPool):
            registry.get_pool("0x" + "00" * 32)
        with pytest.raises(UnknownPool):
            registry.get_pool_address("0x" + "00" * 32)

    def test_lookup_case_insensitive(self, registry, apples, oranges):
        pair_id = registry.create_pool(apples, oranges)
        assert registry.get_pool(pair_id.upper().replace("0X", "0x")) is registry.get_pool(
            pair_id
        )

    def test_find_pool_by_assets(self, registry, apples, oranges):
        pair_id = registry.create_pool(apples, oranges)
        assert registry.find_pool(ORANGES, APPLES) is registry.get_pool(pair_id)
        assert registry.find_pool(APPLES, PEARS) is None

    def test_registries_are_isolated(self, apples, oranges):
        first = PoolRegistry()
        second = PoolRegistry(ExchangeConfig(registry_address="0x" + "22" * 20))
        pair_id = first.create_pool(apples, oranges)
        assert pair_id not in second
        assert second.create_pool(apples, oranges) == pair_id
        assert first.get_pool_address(pair_id) != second.get_pool_address(pair_id)


class TestExchangeConfig:
    def test_negative_minimum_rejected(self):
        with pytest.raises(ValueError):
            ExchangeConfig(minimum_liquidity=-1)
