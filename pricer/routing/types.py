"""Type definitions for routing module."""

from __future__ import annotations

from dataclasses import dataclass

# One amount per path position; index 0 is always the path's first asset
AmountSequence = tuple[int, ...]


@dataclass(frozen=True)
class HopQuote:
    """Result of pricing a single hop in a multi-hop path."""

    token_in: str
    token_out: str
    reserve_in: int
    reserve_out: int
    amount_in: int
    amount_out: int


@dataclass(frozen=True)
class PathQuote:
    """Result of pricing a whole path."""

    path: tuple[str, ...]
    amounts: AmountSequence
    hops: tuple[HopQuote, ...]

    @property
    def amount_in(self) -> int:
        """Amount of the first asset entering the path."""
        return self.amounts[0]

    @property
    def amount_out(self) -> int:
        """Amount of the last asset leaving the path."""
        return self.amounts[-1]

    @property
    def is_multihop(self) -> bool:
        """Check if this path crosses more than one pool."""
        return len(self.path) > 2


__all__ = ["AmountSequence", "HopQuote", "PathQuote"]
