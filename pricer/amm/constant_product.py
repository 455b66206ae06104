"""Constant-product AMM pricing.

Constant-product pools hold reserves x and y such that x * y = k, with a
0.3% fee deducted from the input amount before it reaches the curve.
"""

from __future__ import annotations

from pricer.amm.base import AMM
from pricer.amm.fees import DEFAULT_FEE, FeeConfig
from pricer.errors import (
    InsufficientInputAmount,
    InsufficientLiquidity,
    InsufficientOutputAmount,
)
from pricer.safe_int import S


class ConstantProductAMM(AMM):
    """Constant-product AMM math.

    Formula: amount_out = (amount_in * 997 * reserve_out) / (reserve_in * 1000 + amount_in * 997)

    The 997/1000 factor accounts for the 0.3% fee. Every operation works on
    exact integers; rounding always favors the pool.
    """

    def __init__(self, fee: FeeConfig = DEFAULT_FEE) -> None:
        self.fee = fee

    def quote(
        self,
        amount_a: int,
        reserve_a: int,
        reserve_b: int,
    ) -> int:
        """Calculate the amount of token B worth amount_a at the reserve ratio.

        Formula: amount_b = amount_a * reserve_b / reserve_a (rounded down)

        Raises:
            InsufficientInputAmount: If amount_a is zero
            InsufficientLiquidity: If either reserve is zero
            ArithmeticOverflow: If any value exceeds uint256
        """
        if amount_a <= 0:
            raise InsufficientInputAmount(f"Quote amount must be positive, got {amount_a}")
        _check_reserves(reserve_a, reserve_b)

        return ((S(amount_a) * S(reserve_b)) // S(reserve_a)).value

    def get_amount_out(
        self,
        amount_in: int,
        reserve_in: int,
        reserve_out: int,
    ) -> int:
        """Calculate output amount using constant product formula.

        Formula: amount_out = (in * fee * res_out) / (res_in * scale + in * fee)

        Rounds down, so the trader never receives more than the curve allows.

        Args:
            amount_in: Input token amount
            reserve_in: Reserve of input token in pool
            reserve_out: Reserve of output token in pool

        Returns:
            Output token amount

        Raises:
            InsufficientInputAmount: If amount_in is zero
            InsufficientLiquidity: If either reserve is zero
            ArithmeticOverflow: If any intermediate value exceeds uint256
        """
        if amount_in <= 0:
            raise InsufficientInputAmount(f"Input amount must be positive, got {amount_in}")
        _check_reserves(reserve_in, reserve_out)

        amount_in_with_fee = S(amount_in) * S(self.fee.numerator)
        numerator = amount_in_with_fee * S(reserve_out)
        denominator = S(reserve_in) * S(self.fee.denominator) + amount_in_with_fee

        return (numerator // denominator).value

    def get_amount_in(
        self,
        amount_out: int,
        reserve_in: int,
        reserve_out: int,
    ) -> int:
        """Calculate required input for desired output.

        Formula: amount_in = (res_in * out * scale) / ((res_out - out) * fee) + 1

        The +1 is applied even when the division is exact, so the result may
        exceed the true minimum by one unit.

        Args:
            amount_out: Desired output token amount
            reserve_in: Reserve of input token in pool
            reserve_out: Reserve of output token in pool

        Returns:
            Required input token amount

        Raises:
            InsufficientOutputAmount: If amount_out is zero
            InsufficientLiquidity: If either reserve is zero, or amount_out
                is not strictly below reserve_out
            ArithmeticOverflow: If any intermediate value exceeds uint256
        """
        if amount_out <= 0:
            raise InsufficientOutputAmount(f"Output amount must be positive, got {amount_out}")
        _check_reserves(reserve_in, reserve_out)
        if amount_out >= reserve_out:
            raise InsufficientLiquidity(
                f"Output {amount_out} must be below reserve {reserve_out}"
            )

        numerator = S(reserve_in) * S(amount_out) * S(self.fee.denominator)
        denominator = (S(reserve_out) - S(amount_out)) * S(self.fee.numerator)

        return ((numerator // denominator) + S(1)).value


def _check_reserves(reserve_a: int, reserve_b: int) -> None:
    """Reject a pool with no liquidity on either side."""
    if reserve_a <= 0 or reserve_b <= 0:
        raise InsufficientLiquidity(f"Reserves must be positive, got ({reserve_a}, {reserve_b})")


# Default instance using the protocol fee
constant_product = ConstantProductAMM()

quote = constant_product.quote
get_amount_out = constant_product.get_amount_out
get_amount_in = constant_product.get_amount_in
