"""Constant-product pool snapshot."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ConstantProductPool:
    """Reserves of a two-token constant-product pool at one point in time."""

    token0: str
    token1: str
    reserve0: int
    reserve1: int

    def __post_init__(self) -> None:
        if self.token0 == self.token1:
            raise ValueError(f"Pool tokens must differ, got {self.token0} twice")
        if self.reserve0 < 0 or self.reserve1 < 0:
            raise ValueError(
                f"Reserves cannot be negative: ({self.reserve0}, {self.reserve1})"
            )

    @property
    def tokens(self) -> frozenset[str]:
        """Unordered token pair, used as the pool's registry key."""
        return frozenset((self.token0, self.token1))

    def get_reserves(self, token_in: str) -> tuple[int, int]:
        """Get reserves ordered as (reserve_in, reserve_out)."""
        if token_in == self.token0:
            return self.reserve0, self.reserve1
        elif token_in == self.token1:
            return self.reserve1, self.reserve0
        else:
            raise ValueError(f"Token {token_in} not in pool")

    def get_token_out(self, token_in: str) -> str:
        """Get the output token for a given input token."""
        if token_in == self.token0:
            return self.token1
        elif token_in == self.token1:
            return self.token0
        else:
            raise ValueError(f"Token {token_in} not in pool")
