"""Tests for shared API model types."""

import pytest
from pydantic import ValidationError

from pricer.constants import UINT256_MAX
from pricer.models import AmountOutRequest, PoolReserves, validate_uint256


class TestValidateUint256:
    """Tests for uint256 validation."""

    def test_accepts_decimal_string(self):
        """Decimal strings pass through."""
        assert validate_uint256("1000") == "1000"

    def test_accepts_int(self):
        """Ints are converted to decimal strings."""
        assert validate_uint256(1000) == "1000"
        assert validate_uint256(UINT256_MAX) == str(UINT256_MAX)

    def test_strips_leading_zeros(self):
        """The canonical decimal form is returned."""
        assert validate_uint256("007") == "7"

    @pytest.mark.parametrize("value", ["-1", "1.5", "abc", "", "0x10", " 1", "²"])
    def test_rejects_malformed_strings(self, value):
        """Only plain ASCII digits are accepted."""
        with pytest.raises(ValueError):
            validate_uint256(value)

    @pytest.mark.parametrize("value", [-1, UINT256_MAX + 1])
    def test_rejects_out_of_range_ints(self, value):
        """Ints must fit in uint256."""
        with pytest.raises(ValueError):
            validate_uint256(value)

    def test_rejects_overflowing_string(self):
        """Strings must fit in uint256."""
        with pytest.raises(ValueError, match="overflow"):
            validate_uint256(str(UINT256_MAX + 1))

    @pytest.mark.parametrize("value", [True, 1.0, None, [1]])
    def test_rejects_other_types(self, value):
        """Only str and int are accepted."""
        with pytest.raises(ValueError):
            validate_uint256(value)


class TestRequestModels:
    """Tests for request model parsing."""

    def test_camel_case_aliases(self):
        """Requests parse camelCase JSON fields."""
        request = AmountOutRequest.model_validate(
            {"amountIn": "1000", "reserveIn": 1_000_000, "reserveOut": "2000000"}
        )
        assert request.amount_in == "1000"
        assert request.reserve_in == "1000000"

    def test_populate_by_name(self):
        """Requests can be built with Python field names."""
        request = AmountOutRequest(amount_in="1", reserve_in="2", reserve_out="3")
        assert request.reserve_out == "3"

    def test_invalid_amount_raises(self):
        """Malformed amounts fail validation."""
        with pytest.raises(ValidationError):
            AmountOutRequest.model_validate(
                {"amountIn": "-1", "reserveIn": "1", "reserveOut": "1"}
            )

    def test_pool_needs_distinct_tokens(self):
        """A pool listing one token twice fails validation."""
        with pytest.raises(ValidationError, match="must differ"):
            PoolReserves(token0="A", token1="A", reserve0="1", reserve1="1")

    def test_pool_to_snapshot(self):
        """Pool reserves convert to an integer snapshot."""
        pool = PoolReserves(token0="A", token1="B", reserve0="10", reserve1="20").to_pool()
        assert pool.get_reserves("B") == (20, 10)
