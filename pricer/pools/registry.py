"""In-memory reserve lookup backed by pool snapshots.

ReserveBook implements the ReserveLookup protocol consumed by PathPricer.
It stores one ConstantProductPool per unordered token pair and answers
reserve queries in the caller's argument order.
"""

from __future__ import annotations

from collections.abc import Iterable

import structlog

from pricer.pools.pool import ConstantProductPool

logger = structlog.get_logger()


class ReserveBook:
    """Registry of pool reserves keyed by token pair."""

    def __init__(self, pools: Iterable[ConstantProductPool] | None = None) -> None:
        """Initialize the book with optional pools.

        Args:
            pools: Initial pool snapshots. If None, starts empty.
        """
        self._pools: dict[frozenset[str], ConstantProductPool] = {}

        if pools:
            for pool in pools:
                self.add_pool(pool)

    @classmethod
    def from_pools(cls, pools: Iterable[ConstantProductPool]) -> ReserveBook:
        """Build a book from pool snapshots."""
        return cls(pools)

    def add_pool(self, pool: ConstantProductPool) -> None:
        """Add a pool, replacing any pool already registered for its pair."""
        key = pool.tokens
        if key in self._pools:
            logger.debug(
                "replacing_pool",
                token0=pool.token0,
                token1=pool.token1,
            )
        self._pools[key] = pool

    def get_pool(self, token_a: str, token_b: str) -> ConstantProductPool | None:
        """Get the pool for a token pair, in either order."""
        return self._pools.get(frozenset((token_a, token_b)))

    def get_reserves(self, token_a: str, token_b: str) -> tuple[int, int]:
        """Return reserves ordered as (reserve_a, reserve_b).

        An unregistered pair reports (0, 0), i.e. no liquidity.
        """
        pool = self.get_pool(token_a, token_b)
        if pool is None:
            logger.debug("pool_not_found", token_a=token_a, token_b=token_b)
            return 0, 0
        return pool.get_reserves(token_a)

    def __len__(self) -> int:
        return len(self._pools)

    def __contains__(self, pair: object) -> bool:
        if not isinstance(pair, tuple) or len(pair) != 2:
            return False
        return frozenset(pair) in self._pools
