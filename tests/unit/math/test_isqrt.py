"""Tests for the integer square root."""

import pytest

from pairswap.math import isqrt


class TestIsqrt:
    """Tests for floor square root via Newton iteration."""

    @pytest.mark.parametrize("value", [0, 1])
    def test_trivial_values(self, value):
        """0 and 1 are their own roots."""
        assert isqrt(value) == value

    @pytest.mark.parametrize(
        "value,expected",
        [(2, 1), (3, 1), (4, 2), (8, 2), (9, 3), (15, 3), (16, 4), (99, 9), (100, 10)],
    )
    def test_small_values(self, value, expected):
        """Small values round down to the floor root."""
        assert isqrt(value) == expected

    def test_initial_liquidity_product(self):
        """Root of 300e18 * 200e18, the seed of the reference pool."""
        assert isqrt(300 * 10**18 * 200 * 10**18) == 244948974278317809819

    def test_perfect_square_of_wad(self):
        """1000e18 * 1000e18 is a perfect square."""
        assert isqrt((1000 * 10**18) ** 2) == 1000 * 10**18

    @pytest.mark.parametrize("root", [2**64 - 1, 2**128 - 1, 10**30 + 7])
    def test_floor_property_near_squares(self, root):
        """r*r <= n < (r+1)*(r+1) around large perfect squares."""
        for value in (root * root - 1, root * root, root * root + 1, (root + 1) ** 2 - 1):
            r = isqrt(value)
            assert r * r <= value < (r + 1) * (r + 1)

    def test_uint256_max(self):
        """Largest uint256 value."""
        value = 2**256 - 1
        r = isqrt(value)
        assert r == 2**128 - 1

    def test_negative_raises(self):
        """Negative input is rejected with the reference message."""
        with pytest.raises(ValueError, match="negative"):
            isqrt(-1)

    def test_non_int_raises(self):
        """Floats never enter the computation."""
        with pytest.raises(TypeError):
            isqrt(4.0)  # type: ignore[arg-type]
        with pytest.raises(TypeError):
            isqrt(True)  # type: ignore[arg-type]
