"""Pydantic models for the pricing HTTP API."""

from pricer.models.requests import (
    AmountInRequest,
    AmountOutRequest,
    AmountResponse,
    AmountsInRequest,
    AmountsOutRequest,
    ErrorResponse,
    HopResponse,
    PathQuoteResponse,
    PoolReserves,
    QuoteRequest,
)
from pricer.models.types import AssetId, Uint256, validate_uint256

__all__ = [
    # Types
    "AssetId",
    "Uint256",
    "validate_uint256",
    # Requests
    "QuoteRequest",
    "AmountOutRequest",
    "AmountInRequest",
    "AmountsOutRequest",
    "AmountsInRequest",
    "PoolReserves",
    # Responses
    "AmountResponse",
    "HopResponse",
    "PathQuoteResponse",
    "ErrorResponse",
]
