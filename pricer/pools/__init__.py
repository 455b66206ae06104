"""Pool snapshots and the in-memory reserve lookup."""

from pricer.pools.pool import ConstantProductPool
from pricer.pools.registry import ReserveBook

__all__ = ["ConstantProductPool", "ReserveBook"]
