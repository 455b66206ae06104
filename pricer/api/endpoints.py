"""API endpoints for the pricer."""

import structlog
from fastapi import APIRouter, Depends

from pricer.amm import AMM, constant_product
from pricer.models import (
    AmountInRequest,
    AmountOutRequest,
    AmountResponse,
    AmountsInRequest,
    AmountsOutRequest,
    PathQuoteResponse,
    QuoteRequest,
)
from pricer.routing import PathPricer

logger = structlog.get_logger()

router = APIRouter()


def get_amm() -> AMM:
    """Dependency provider for the single-hop pricing implementation.

    Override this in tests to inject a different AMM:
        app.dependency_overrides[get_amm] = lambda: ConstantProductAMM(fee)

    Returns:
        The AMM to price with.
    """
    return constant_product


@router.post("/quote")
async def quote(request: QuoteRequest, amm: AMM = Depends(get_amm)) -> AmountResponse:
    """Proportional amount of token B for amountA at the reserve ratio."""
    amount = amm.quote(int(request.amount_a), int(request.reserve_a), int(request.reserve_b))
    return AmountResponse(amount=str(amount))


@router.post("/amount-out")
async def amount_out(request: AmountOutRequest, amm: AMM = Depends(get_amm)) -> AmountResponse:
    """Output received for an exact input through one pool."""
    amount = amm.get_amount_out(
        int(request.amount_in), int(request.reserve_in), int(request.reserve_out)
    )
    return AmountResponse(amount=str(amount))


@router.post("/amount-in")
async def amount_in(request: AmountInRequest, amm: AMM = Depends(get_amm)) -> AmountResponse:
    """Input required for an exact output through one pool."""
    amount = amm.get_amount_in(
        int(request.amount_out), int(request.reserve_in), int(request.reserve_out)
    )
    return AmountResponse(amount=str(amount))


@router.post("/amounts-out")
async def amounts_out(
    request: AmountsOutRequest, amm: AMM = Depends(get_amm)
) -> PathQuoteResponse:
    """Amounts at every position of the path for an exact input.

    Reserves come from the pools in the request body; a hop without a
    matching pool has no liquidity.
    """
    logger.info(
        "pricing_path",
        direction="exact_in",
        hops=max(len(request.path) - 1, 0),
        pool_count=len(request.pools),
    )
    pricer = PathPricer(request.reserve_book(), amm)
    path_quote = pricer.quote_exact_in(request.path, int(request.amount_in))
    return PathQuoteResponse.from_quote(path_quote)


@router.post("/amounts-in")
async def amounts_in(
    request: AmountsInRequest, amm: AMM = Depends(get_amm)
) -> PathQuoteResponse:
    """Amounts at every position of the path for an exact output."""
    logger.info(
        "pricing_path",
        direction="exact_out",
        hops=max(len(request.path) - 1, 0),
        pool_count=len(request.pools),
    )
    pricer = PathPricer(request.reserve_book(), amm)
    path_quote = pricer.quote_exact_out(request.path, int(request.amount_out))
    return PathQuoteResponse.from_quote(path_quote)
