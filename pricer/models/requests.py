"""Pydantic models for pricing requests and responses."""

from __future__ import annotations

from pydantic import BaseModel, Field, model_validator

from pricer.models.types import AssetId, Uint256
from pricer.pools import ConstantProductPool, ReserveBook
from pricer.routing import PathQuote


class QuoteRequest(BaseModel):
    """Proportional conversion at the pool's reserve ratio."""

    amount_a: Uint256 = Field(alias="amountA")
    reserve_a: Uint256 = Field(alias="reserveA")
    reserve_b: Uint256 = Field(alias="reserveB")

    model_config = {"populate_by_name": True}


class AmountOutRequest(BaseModel):
    """Single-hop exact input."""

    amount_in: Uint256 = Field(alias="amountIn")
    reserve_in: Uint256 = Field(alias="reserveIn")
    reserve_out: Uint256 = Field(alias="reserveOut")

    model_config = {"populate_by_name": True}


class AmountInRequest(BaseModel):
    """Single-hop exact output."""

    amount_out: Uint256 = Field(alias="amountOut")
    reserve_in: Uint256 = Field(alias="reserveIn")
    reserve_out: Uint256 = Field(alias="reserveOut")

    model_config = {"populate_by_name": True}


class AmountResponse(BaseModel):
    """A single computed amount."""

    amount: Uint256


class PoolReserves(BaseModel):
    """Reserve snapshot of one pool, supplied by the caller."""

    token0: AssetId
    token1: AssetId
    reserve0: Uint256
    reserve1: Uint256

    @model_validator(mode="after")
    def check_distinct_tokens(self) -> PoolReserves:
        if self.token0 == self.token1:
            raise ValueError(f"Pool tokens must differ, got {self.token0} twice")
        return self

    def to_pool(self) -> ConstantProductPool:
        return ConstantProductPool(
            token0=self.token0,
            token1=self.token1,
            reserve0=int(self.reserve0),
            reserve1=int(self.reserve1),
        )


class _PathRequest(BaseModel):
    path: list[AssetId]
    pools: list[PoolReserves] = Field(default_factory=list)

    model_config = {"populate_by_name": True}

    def reserve_book(self) -> ReserveBook:
        """Build a reserve lookup from the pools in the request."""
        return ReserveBook.from_pools(pool.to_pool() for pool in self.pools)


class AmountsOutRequest(_PathRequest):
    """Multi-hop exact input."""

    amount_in: Uint256 = Field(alias="amountIn")


class AmountsInRequest(_PathRequest):
    """Multi-hop exact output."""

    amount_out: Uint256 = Field(alias="amountOut")


class HopResponse(BaseModel):
    """Per-hop breakdown of a path quote."""

    token_in: str = Field(serialization_alias="tokenIn")
    token_out: str = Field(serialization_alias="tokenOut")
    reserve_in: Uint256 = Field(serialization_alias="reserveIn")
    reserve_out: Uint256 = Field(serialization_alias="reserveOut")
    amount_in: Uint256 = Field(serialization_alias="amountIn")
    amount_out: Uint256 = Field(serialization_alias="amountOut")


class PathQuoteResponse(BaseModel):
    """Amounts at every position of the path, plus the hops that produced them."""

    path: list[str]
    amounts: list[Uint256]
    hops: list[HopResponse]

    @classmethod
    def from_quote(cls, quote: PathQuote) -> PathQuoteResponse:
        return cls(
            path=list(quote.path),
            amounts=[str(amount) for amount in quote.amounts],
            hops=[
                HopResponse(
                    token_in=hop.token_in,
                    token_out=hop.token_out,
                    reserve_in=str(hop.reserve_in),
                    reserve_out=str(hop.reserve_out),
                    amount_in=str(hop.amount_in),
                    amount_out=str(hop.amount_out),
                )
                for hop in quote.hops
            ],
        )


class ErrorResponse(BaseModel):
    """Body returned when pricing fails."""

    error: str
    detail: str
