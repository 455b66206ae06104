"""Base classes for AMM pricing implementations."""

from abc import ABC, abstractmethod
from typing import Protocol, runtime_checkable


class AMM(ABC):
    """Abstract base class for single-hop pricing.

    Implementations are pure: they hold no balances and perform no I/O, so
    a single instance can be shared freely across threads.
    """

    @abstractmethod
    def quote(
        self,
        amount_a: int,
        reserve_a: int,
        reserve_b: int,
    ) -> int:
        """Convert an amount at the pool's current reserve ratio.

        Args:
            amount_a: Amount of token A
            reserve_a: Reserve of token A in pool
            reserve_b: Reserve of token B in pool

        Returns:
            Equivalent amount of token B (no fee, no price impact)
        """
        ...

    @abstractmethod
    def get_amount_out(
        self,
        amount_in: int,
        reserve_in: int,
        reserve_out: int,
    ) -> int:
        """Calculate output amount for a given input.

        Args:
            amount_in: Input token amount
            reserve_in: Reserve of input token in pool
            reserve_out: Reserve of output token in pool

        Returns:
            Output token amount
        """
        ...

    @abstractmethod
    def get_amount_in(
        self,
        amount_out: int,
        reserve_in: int,
        reserve_out: int,
    ) -> int:
        """Calculate required input for a desired output.

        Args:
            amount_out: Desired output token amount
            reserve_in: Reserve of input token in pool
            reserve_out: Reserve of output token in pool

        Returns:
            Required input token amount
        """
        ...


@runtime_checkable
class ReserveLookup(Protocol):
    """Protocol for resolving a token pair to its current reserves.

    The pricer calls this once per hop and never reorders the identifiers;
    any canonical ordering of the pair is the implementation's concern.
    """

    def get_reserves(self, token_a: str, token_b: str) -> tuple[int, int]:
        """Return reserves ordered as (reserve_a, reserve_b).

        A pair without liquidity is reported with a zero on either side.
        """
        ...
