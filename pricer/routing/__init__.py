"""Multi-hop pricing along token paths."""

from pricer.routing.path_pricer import PathPricer, get_amounts_in, get_amounts_out
from pricer.routing.types import AmountSequence, HopQuote, PathQuote

__all__ = [
    "PathPricer",
    "get_amounts_out",
    "get_amounts_in",
    "AmountSequence",
    "HopQuote",
    "PathQuote",
]
