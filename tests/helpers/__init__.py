"""Test helpers module for shared test utilities.

- constants: Asset identifiers and reference reserves
- factories: Pool, reserve book and lookup factories
"""

from tests.helpers.constants import (
    DAI,
    USDC,
    USDC_DAI_OUT_FOR_1992,
    USDC_DAI_RESERVES,
    WBTC,
    WETH,
    WETH_USDC_OUT_FOR_1000,
    WETH_USDC_RESERVES,
)
from tests.helpers.factories import RecordingLookup, make_pool, make_reference_book

__all__ = [
    # Constants
    "WETH",
    "USDC",
    "DAI",
    "WBTC",
    "WETH_USDC_RESERVES",
    "USDC_DAI_RESERVES",
    "WETH_USDC_OUT_FOR_1000",
    "USDC_DAI_OUT_FOR_1992",
    # Factories
    "make_pool",
    "make_reference_book",
    "RecordingLookup",
]
