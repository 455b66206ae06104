"""Fee configuration for constant-product pricing."""

from __future__ import annotations

from dataclasses import dataclass

from pricer.constants import BPS_DENOMINATOR, FEE_DENOMINATOR, FEE_NUMERATOR


@dataclass(frozen=True)
class FeeConfig:
    """Swap fee expressed as the fraction of input that reaches the curve.

    The formulas multiply the input by ``numerator`` and the input reserve by
    ``denominator``, so the default 997/1000 retains 0.3% of every input in
    the pool.

    Attributes:
        numerator: Fee multiplier applied to the input amount (default: 997)
        denominator: Scale of the multiplier (default: 1000)
    """

    numerator: int = FEE_NUMERATOR
    denominator: int = FEE_DENOMINATOR

    def __post_init__(self) -> None:
        if self.denominator <= 0:
            raise ValueError(f"Fee denominator must be positive, got {self.denominator}")
        if not 0 < self.numerator <= self.denominator:
            raise ValueError(
                f"Fee numerator must be in (0, {self.denominator}], got {self.numerator}"
            )

    @classmethod
    def from_bps(cls, fee_bps: int) -> FeeConfig:
        """Build a config from a fee in basis points (30 = 0.3%).

        Raises:
            ValueError: If fee_bps is outside [0, 10000)
        """
        if not 0 <= fee_bps < BPS_DENOMINATOR:
            raise ValueError(f"Fee must be in [0, {BPS_DENOMINATOR}) bps, got {fee_bps}")
        return cls(numerator=BPS_DENOMINATOR - fee_bps, denominator=BPS_DENOMINATOR)

    @property
    def fee_bps(self) -> int:
        """Fee in basis points, rounded down (997/1000 -> 30)."""
        return (self.denominator - self.numerator) * BPS_DENOMINATOR // self.denominator


# Default configuration instance: the protocol's fixed 0.3% fee
DEFAULT_FEE = FeeConfig()
