"""Multi-hop pricing along a path of constant-product pools."""

from __future__ import annotations

from collections.abc import Sequence

import structlog

from pricer.amm.base import AMM, ReserveLookup
from pricer.amm.constant_product import constant_product
from pricer.errors import InvalidPath, PricingError
from pricer.routing.types import AmountSequence, HopQuote, PathQuote

logger = structlog.get_logger()


class PathPricer:
    """Chains single-hop pricing across an ordered path of pools.

    Each hop's reserves come from the reserve lookup, queried once per hop
    in traversal order. Each hop's result feeds the next hop, so hops are
    priced strictly one after another. A failure at any hop aborts the whole
    path; no partial result is returned.
    """

    def __init__(self, reserves: ReserveLookup, amm: AMM = constant_product) -> None:
        """Initialize the path pricer.

        Args:
            reserves: Collaborator resolving (token_a, token_b) to ordered reserves
            amm: Single-hop pricing implementation (default: 0.3% constant product)
        """
        self.reserves = reserves
        self.amm = amm

    def get_amounts_out(self, path: Sequence[str], amount_in: int) -> AmountSequence:
        """Amounts received at each position of the path for an exact input.

        Raises:
            InvalidPath: If the path has fewer than two assets
            PricingError: If any hop fails
        """
        return self.quote_exact_in(path, amount_in).amounts

    def get_amounts_in(self, path: Sequence[str], amount_out: int) -> AmountSequence:
        """Amounts required at each position of the path for an exact output.

        Raises:
            InvalidPath: If the path has fewer than two assets
            PricingError: If any hop fails
        """
        return self.quote_exact_out(path, amount_out).amounts

    def quote_exact_in(self, path: Sequence[str], amount_in: int) -> PathQuote:
        """Price a path forward from an exact input amount.

        Walks hops 0..n-2 in increasing order; each hop's output becomes the
        next hop's input.
        """
        path = _validate_path(path)

        hops: list[HopQuote] = []
        current = amount_in
        for i in range(len(path) - 1):
            token_in, token_out = path[i], path[i + 1]
            reserve_in, reserve_out = self.reserves.get_reserves(token_in, token_out)
            try:
                amount_out = self.amm.get_amount_out(current, reserve_in, reserve_out)
            except PricingError as err:
                _log_hop_failure("exact_in", path, i, err)
                raise
            hops.append(
                HopQuote(
                    token_in=token_in,
                    token_out=token_out,
                    reserve_in=reserve_in,
                    reserve_out=reserve_out,
                    amount_in=current,
                    amount_out=amount_out,
                )
            )
            current = amount_out

        amounts = (amount_in, *(hop.amount_out for hop in hops))
        return PathQuote(path=path, amounts=amounts, hops=tuple(hops))

    def quote_exact_out(self, path: Sequence[str], amount_out: int) -> PathQuote:
        """Price a path backward from an exact output amount.

        Walks hops n-1..1 in decreasing order; each hop's required input
        becomes the previous hop's required output.
        """
        path = _validate_path(path)

        # Collected last hop first
        hops: list[HopQuote] = []
        current = amount_out
        for i in range(len(path) - 1, 0, -1):
            token_in, token_out = path[i - 1], path[i]
            reserve_in, reserve_out = self.reserves.get_reserves(token_in, token_out)
            try:
                amount_in = self.amm.get_amount_in(current, reserve_in, reserve_out)
            except PricingError as err:
                _log_hop_failure("exact_out", path, i - 1, err)
                raise
            hops.append(
                HopQuote(
                    token_in=token_in,
                    token_out=token_out,
                    reserve_in=reserve_in,
                    reserve_out=reserve_out,
                    amount_in=amount_in,
                    amount_out=current,
                )
            )
            current = amount_in

        hops.reverse()
        amounts = (*(hop.amount_in for hop in hops), amount_out)
        return PathQuote(path=path, amounts=amounts, hops=tuple(hops))


def _validate_path(path: Sequence[str]) -> tuple[str, ...]:
    """Freeze the path, rejecting anything shorter than one hop."""
    if len(path) < 2:
        raise InvalidPath(f"Path needs at least 2 assets, got {len(path)}")
    return tuple(path)


def _log_hop_failure(direction: str, path: tuple[str, ...], hop: int, err: PricingError) -> None:
    logger.debug(
        "path_hop_failed",
        direction=direction,
        hop=hop,
        token_in=path[hop],
        token_out=path[hop + 1],
        error=err.code,
    )


def get_amounts_out(
    path: Sequence[str], amount_in: int, reserve_lookup: ReserveLookup
) -> AmountSequence:
    """Forward amounts along path using the default 0.3% constant-product AMM."""
    return PathPricer(reserve_lookup).get_amounts_out(path, amount_in)


def get_amounts_in(
    path: Sequence[str], amount_out: int, reserve_lookup: ReserveLookup
) -> AmountSequence:
    """Backward amounts along path using the default 0.3% constant-product AMM."""
    return PathPricer(reserve_lookup).get_amounts_in(path, amount_out)


__all__ = ["PathPricer", "get_amounts_in", "get_amounts_out"]
