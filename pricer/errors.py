"""Pricing error classes.

Every failure of the pricing core is a synchronous validation error. Errors
abort the whole call (single hop or whole path) and are never recovered
internally.
"""


class PricingError(Exception):
    """Base error for pricing operations."""

    code: str = "PricingError"


class InsufficientInputAmount(PricingError):
    """Input (or quoted) amount is zero."""

    code = "InsufficientInputAmount"


class InsufficientOutputAmount(PricingError):
    """Requested output amount is zero."""

    code = "InsufficientOutputAmount"


class InsufficientLiquidity(PricingError):
    """A reserve is empty, or the requested output meets or exceeds the reserve."""

    code = "InsufficientLiquidity"


class InvalidPath(PricingError):
    """Path has fewer than two assets."""

    code = "InvalidPath"


class ArithmeticOverflow(PricingError, ArithmeticError):
    """An amount or intermediate value exceeds uint256."""

    code = "ArithmeticOverflow"


__all__ = [
    "ArithmeticOverflow",
    "InsufficientInputAmount",
    "InsufficientLiquidity",
    "InsufficientOutputAmount",
    "InvalidPath",
    "PricingError",
]
