"""Constant-product AMM pricer - exact integer swap quotes across paths."""

from pricer.amm import (
    DEFAULT_FEE,
    ConstantProductAMM,
    FeeConfig,
    get_amount_in,
    get_amount_out,
    quote,
)
from pricer.errors import (
    ArithmeticOverflow,
    InsufficientInputAmount,
    InsufficientLiquidity,
    InsufficientOutputAmount,
    InvalidPath,
    PricingError,
)
from pricer.pools import ConstantProductPool, ReserveBook
from pricer.routing import PathPricer, get_amounts_in, get_amounts_out

__version__ = "0.1.0"
__all__ = [
    "quote",
    "get_amount_out",
    "get_amount_in",
    "get_amounts_out",
    "get_amounts_in",
    "ConstantProductAMM",
    "FeeConfig",
    "DEFAULT_FEE",
    "PathPricer",
    "ConstantProductPool",
    "ReserveBook",
    "PricingError",
    "InsufficientInputAmount",
    "InsufficientOutputAmount",
    "InsufficientLiquidity",
    "InvalidPath",
    "ArithmeticOverflow",
    "__version__",
]
