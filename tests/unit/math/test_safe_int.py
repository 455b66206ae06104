"""Tests for SafeInt bounded arithmetic wrapper."""

import pytest

from pricer.constants import UINT256_MAX
from pricer.errors import ArithmeticOverflow, PricingError
from pricer.safe_int import (
    DivisionByZero,
    S,
    SafeInt,
    SafeIntError,
    Uint256Overflow,
    Underflow,
)


class TestSafeIntConstruction:
    """Tests for SafeInt construction."""

    def test_from_int(self):
        """SafeInt can be constructed from int."""
        assert SafeInt(42).value == 42

    def test_from_safeint(self):
        """SafeInt can be constructed from another SafeInt."""
        assert SafeInt(SafeInt(42)).value == 42

    def test_from_zero(self):
        """SafeInt can hold zero."""
        assert SafeInt(0).value == 0

    def test_from_max(self):
        """SafeInt can hold the largest uint256."""
        assert SafeInt(UINT256_MAX).value == UINT256_MAX

    def test_from_negative_raises(self):
        """Negative values are not uint256."""
        with pytest.raises(Underflow):
            SafeInt(-1)

    def test_above_max_raises(self):
        """Values above 2^256-1 are rejected on construction."""
        with pytest.raises(Uint256Overflow):
            SafeInt(UINT256_MAX + 1)

    def test_from_invalid_type_raises(self):
        """SafeInt rejects invalid types."""
        with pytest.raises(TypeError):
            SafeInt("42")  # type: ignore
        with pytest.raises(TypeError):
            SafeInt(3.14)  # type: ignore
        with pytest.raises(TypeError):
            SafeInt(True)

    def test_alias_s(self):
        """S is an alias for SafeInt."""
        assert S is SafeInt
        assert isinstance(S(42), SafeInt)


class TestSafeIntArithmetic:
    """Tests for SafeInt arithmetic operations."""

    def test_add(self):
        """Addition works correctly."""
        assert (S(10) + S(5)).value == 15
        assert (S(10) + 5).value == 15
        assert (5 + S(10)).value == 15

    def test_add_overflow_raises(self):
        """Addition past 2^256-1 raises Uint256Overflow."""
        with pytest.raises(Uint256Overflow) as exc_info:
            S(UINT256_MAX) + S(1)
        assert "Overflow" in str(exc_info.value)

    def test_add_up_to_max(self):
        """Addition landing exactly on the maximum is allowed."""
        assert (S(UINT256_MAX - 1) + 1).value == UINT256_MAX

    def test_sub_positive_result(self):
        """Subtraction with positive result works."""
        assert (S(10) - S(3)).value == 7
        assert (S(10) - 3).value == 7

    def test_sub_zero_result(self):
        """Subtraction resulting in zero works."""
        assert (S(5) - S(5)).value == 0

    def test_sub_underflow_raises(self):
        """Subtraction underflow raises Underflow."""
        with pytest.raises(Underflow) as exc_info:
            S(5) - S(10)
        assert "Underflow" in str(exc_info.value)
        assert "5 - 10" in str(exc_info.value)

    def test_mul(self):
        """Multiplication works correctly."""
        assert (S(6) * S(7)).value == 42
        assert (S(6) * 7).value == 42
        assert (6 * S(7)).value == 42

    def test_mul_large(self):
        """Multiplication below the bound is exact."""
        big = 2**128
        assert (S(big) * S(big - 1)).value == big * (big - 1)

    def test_mul_overflow_raises(self):
        """Multiplication reaching 2^256 raises Uint256Overflow."""
        with pytest.raises(Uint256Overflow):
            S(2**128) * S(2**128)

    def test_floordiv(self):
        """Floor division rounds down."""
        assert (S(10) // S(3)).value == 3
        assert (S(10) // 3).value == 3

    def test_floordiv_by_zero_raises(self):
        """Division by zero raises DivisionByZero."""
        with pytest.raises(DivisionByZero) as exc_info:
            S(10) // S(0)
        assert "Division by zero" in str(exc_info.value)

    def test_truediv_raises_typeerror(self):
        """True division is not supported, to prevent float results."""
        with pytest.raises(TypeError):
            S(10) / S(3)  # type: ignore[operator]


class TestSafeIntComparison:
    """Tests for comparisons and conversions."""

    def test_equality(self):
        """SafeInt compares equal to SafeInt and int."""
        assert S(5) == S(5)
        assert S(5) == 5
        assert S(5) != 6
        assert S(5) != "5"

    def test_ordering(self):
        """Ordering works against SafeInt and int."""
        assert S(3) < S(5)
        assert S(3) <= 3
        assert S(5) > 3
        assert S(5) >= S(5)

    def test_conversions(self):
        """int(), bool(), hash() and repr() behave like the wrapped value."""
        assert int(S(7)) == 7
        assert bool(S(0)) is False
        assert bool(S(1)) is True
        assert hash(S(7)) == hash(7)
        assert repr(S(7)) == "SafeInt(7)"
        assert str(S(7)) == "7"


class TestErrorHierarchy:
    """SafeInt errors fit both the arithmetic and pricing hierarchies."""

    def test_all_errors_are_arithmetic_errors(self):
        """Every SafeInt error is an ArithmeticError."""
        for error_class in (DivisionByZero, Underflow, Uint256Overflow):
            assert issubclass(error_class, SafeIntError)
            assert issubclass(error_class, ArithmeticError)

    def test_overflow_is_pricing_error(self):
        """Overflow surfaces as the pricing ArithmeticOverflow."""
        with pytest.raises(ArithmeticOverflow) as exc_info:
            S(UINT256_MAX) * 2
        assert isinstance(exc_info.value, PricingError)
        assert exc_info.value.code == "ArithmeticOverflow"
