"""Tests for the fee-less constant product AMM."""

import pytest

from pairswap.amm import ConstantProduct
from pairswap.errors import (
    IncorrectLiquidityRatio,
    InsufficientInitialLiquidity,
    InsufficientLiquidityForTrade,
    InvalidAmount,
)
from tests.helpers import wei

INITIAL_MINT = 244948974278317808819


@pytest.fixture
def amm() -> ConstantProduct:
    return ConstantProduct()


class TestGetAmountOut:
    """Tests for the swap output formula."""

    def test_reference_trade(self, amm):
        """50 in against 1000/1000 yields the floor-rounded reserve difference."""
        assert amm.get_amount_out(wei(50), wei(1000), wei(1000)) == 47619047619047619048

    def test_zero_input(self, amm):
        assert amm.get_amount_out(0, wei(1000), wei(1000)) == 0

    def test_empty_reserves(self, amm):
        assert amm.get_amount_out(wei(1), 0, wei(1000)) == 0
        assert amm.get_amount_out(wei(1), wei(1000), 0) == 0

    def test_product_does_not_grow_by_more_than_rounding(self, amm):
        """Post-trade product is k minus less than (reserve_in + amount_in)."""
        reserve_in, reserve_out, amount_in = wei(1000), wei(1000), wei(50)
        out = amm.get_amount_out(amount_in, reserve_in, reserve_out)
        k = reserve_in * reserve_out
        k_after = (reserve_in + amount_in) * (reserve_out - out)
        assert k - (reserve_in + amount_in) < k_after <= k

    def test_prices_against_given_invariant(self, amm):
        """After 50 and 10 in from 1000/1000, the third trade is priced on the seeded k."""
        reserve_a, reserve_b = wei(1060), 943396226415094339622
        seeded_k = wei(1000) * wei(1000)

        assert amm.get_amount_out(wei(40), reserve_a, reserve_b, seeded_k) == (
            34305317324185248713
        )
        # The drifted reserve product would pay one unit more
        assert amm.get_amount_out(wei(40), reserve_a, reserve_b) == 34305317324185248714

    def test_input_too_small_to_move_reserve(self, amm):
        assert amm.get_amount_out(1, 1000, 10, k=10_010) == 0


class TestQuoteSwap:
    """Tests for quote_swap and its liquidity bound."""

    def test_post_trade_reserves(self, amm):
        quote = amm.quote_swap(wei(50), wei(1000), wei(1000))
        assert quote.amount_in == wei(50)
        assert quote.amount_out == 47619047619047619048
        assert quote.reserve_in_after == wei(1050)
        assert quote.reserve_out_after == 952380952380952380952

    def test_input_equal_to_reserve_rejected(self, amm):
        """The input must be strictly below its reserve."""
        with pytest.raises(InsufficientLiquidityForTrade):
            amm.quote_swap(wei(300), wei(300), wei(200))

    def test_input_above_reserve_rejected(self, amm):
        with pytest.raises(InsufficientLiquidityForTrade):
            amm.quote_swap(wei(500), wei(300), wei(200))

    def test_just_below_reserve_accepted(self, amm):
        quote = amm.quote_swap(wei(300) - 1, wei(300), wei(200))
        assert 0 < quote.amount_out < wei(200)

    def test_single_unit_output_reserve_rejected(self, amm):
        """A trade that would empty the output reserve is refused."""
        with pytest.raises(InsufficientLiquidityForTrade):
            amm.quote_swap(5, 10, 1)

    def test_quote_uses_given_invariant(self, amm):
        quote = amm.quote_swap(wei(40), wei(1060), 943396226415094339622, wei(1000) * wei(1000))
        assert quote.amount_out == 34305317324185248713
        assert quote.reserve_out_after == 909090909090909090909

    def test_zero_output_rejected(self, amm):
        with pytest.raises(InvalidAmount, match="too small"):
            amm.quote_swap(1, 1000, 10, k=10_010)


class TestInitialLiquidity:
    """Tests for the first deposit mint."""

    def test_reference_deposit(self, amm):
        quote = amm.initial_liquidity(wei(300), wei(200))
        assert quote.liquidity == INITIAL_MINT
        assert quote.from_a == quote.from_b == INITIAL_MINT

    def test_root_equal_to_minimum_rejected(self, amm):
        with pytest.raises(InsufficientInitialLiquidity):
            amm.initial_liquidity(1000, 1000)

    def test_smallest_accepted_deposit(self, amm):
        assert amm.initial_liquidity(1001, 1001).liquidity == 1

    def test_custom_minimum(self):
        custom = ConstantProduct(minimum_liquidity=0)
        assert custom.initial_liquidity(4, 9).liquidity == 6


class TestProportionalLiquidity:
    """Tests for deposits into a funded pool."""

    def test_matching_ratio(self, amm):
        quote = amm.proportional_liquidity(
            wei(90), wei(60), wei(300), wei(200), INITIAL_MINT
        )
        assert quote.from_a == wei(90) * INITIAL_MINT // wei(300)
        assert quote.from_b == wei(60) * INITIAL_MINT // wei(200)
        assert quote.liquidity == min(quote.from_a, quote.from_b)

    def test_exact_ratio_terms_agree(self, amm):
        """Under an exact ratio both terms floor to the same amount."""
        quote = amm.proportional_liquidity(2, 3, 4, 6, 7)
        assert quote.from_a == quote.from_b == 3
        assert quote.liquidity == 3

    def test_ratio_mismatch_rejected(self, amm):
        with pytest.raises(IncorrectLiquidityRatio, match="Incorrect liquidity ratio"):
            amm.proportional_liquidity(
                wei(100), wei(60), wei(300), wei(200), INITIAL_MINT
            )


class TestLiquidityValue:
    """Tests for withdrawal amounts."""

    def test_full_supply_returns_reserves(self, amm):
        assert amm.liquidity_value(
            INITIAL_MINT, wei(400), wei(150), INITIAL_MINT
        ) == (wei(400), wei(150))

    def test_partial_share_floors(self, amm):
        amount_a, amount_b = amm.liquidity_value(1, 10, 7, 3)
        assert (amount_a, amount_b) == (3, 2)
