"""Tests for the shared pydantic types and event models."""

import pytest
from pydantic import ValidationError

from pairswap.models.api import SwapRequest
from pairswap.models.events import Swap
from pairswap.models.types import (
    UINT256_MAX,
    is_valid_address,
    normalize_address,
    validate_uint256,
)
from tests.helpers import ALICE, DEPLOYER

POOL = "0x1111111111111111111111111111111111111111"


class TestUint256:
    """Tests for uint256 validation."""

    def test_accepts_int_and_decimal_string(self):
        assert validate_uint256(5) == 5
        assert validate_uint256("1000000000000000000") == 10**18

    @pytest.mark.parametrize("value", [-1, "-1", UINT256_MAX + 1, "0x10", "abc", True, 1.5])
    def test_rejects_invalid(self, value):
        with pytest.raises(ValueError):
            validate_uint256(value)

    def test_boundary(self):
        assert validate_uint256(str(UINT256_MAX)) == UINT256_MAX

    def test_serializes_as_string_in_json(self):
        event = Swap(
            pool=POOL,
            initiator=DEPLOYER,
            recipient=ALICE,
            amount_a=10**20,
            amount_b=5 * 10**19,
            a_to_b=True,
            reserve_a=4 * 10**20,
            reserve_b=15 * 10**19,
        )
        data = event.model_dump(mode="json")
        assert data["amount_a"] == "100000000000000000000"
        assert data["a_to_b"] is True
        assert event.model_dump()["amount_a"] == 10**20


class TestAddresses:
    """Tests for address helpers."""

    def test_normalize(self):
        assert normalize_address("ABCDEF" + "0" * 34) == "0xabcdef" + "0" * 34
        assert normalize_address(DEPLOYER.upper().replace("0X", "0x")) == DEPLOYER

    def test_normalize_validates_on_request(self):
        with pytest.raises(ValueError):
            normalize_address("0x1234", validate=True)

    def test_is_valid_address(self):
        assert is_valid_address(DEPLOYER)
        assert not is_valid_address("0x" + "g" * 40)
        assert not is_valid_address(DEPLOYER[2:])

    def test_request_rejects_malformed_address(self):
        with pytest.raises(ValidationError):
            SwapRequest(caller="0x1234", amount_a_in="1")

    def test_request_defaults(self):
        request = SwapRequest(caller=DEPLOYER, amount_b_in="7")
        assert (request.amount_a_in, request.amount_b_in) == (0, 7)
