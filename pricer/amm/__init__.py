"""AMM (Automated Market Maker) pricing implementations."""

from pricer.amm.base import AMM, ReserveLookup
from pricer.amm.constant_product import (
    ConstantProductAMM,
    constant_product,
    get_amount_in,
    get_amount_out,
    quote,
)
from pricer.amm.fees import DEFAULT_FEE, FeeConfig

__all__ = [
    # Base classes
    "AMM",
    "ReserveLookup",
    # Constant product
    "ConstantProductAMM",
    "constant_product",
    "quote",
    "get_amount_out",
    "get_amount_in",
    # Fees
    "FeeConfig",
    "DEFAULT_FEE",
]
