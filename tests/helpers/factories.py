"""Factory functions for creating test objects.

Usage:
    from tests.helpers import make_reference_book

    book = make_reference_book()
"""

from pricer.pools import ConstantProductPool, ReserveBook
from tests.helpers.constants import DAI, USDC, USDC_DAI_RESERVES, WETH, WETH_USDC_RESERVES


def make_pool(
    token0: str = WETH,
    token1: str = USDC,
    reserve0: int = WETH_USDC_RESERVES[0],
    reserve1: int = WETH_USDC_RESERVES[1],
) -> ConstantProductPool:
    """Create a pool snapshot with sensible defaults (WETH/USDC)."""
    return ConstantProductPool(token0=token0, token1=token1, reserve0=reserve0, reserve1=reserve1)


def make_reference_book() -> ReserveBook:
    """Reserve book for the WETH -> USDC -> DAI reference path.

    The USDC/DAI pool is registered as (DAI, USDC) so lookups along the
    path exercise the book's reordering.
    """
    return ReserveBook(
        [
            make_pool(),
            make_pool(
                token0=DAI,
                token1=USDC,
                reserve0=USDC_DAI_RESERVES[1],
                reserve1=USDC_DAI_RESERVES[0],
            ),
        ]
    )


class RecordingLookup:
    """Reserve lookup that records every query before delegating.

    Usage:
        lookup = RecordingLookup(make_reference_book())
        PathPricer(lookup).get_amounts_out([WETH, USDC], 1000)
        assert lookup.calls == [(WETH, USDC)]
    """

    def __init__(self, inner: ReserveBook) -> None:
        self.inner = inner
        self.calls: list[tuple[str, str]] = []

    def get_reserves(self, token_a: str, token_b: str) -> tuple[int, int]:
        self.calls.append((token_a, token_b))
        return self.inner.get_reserves(token_a, token_b)
