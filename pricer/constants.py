"""Protocol constants for constant-product pricing.

Centralizes the numeric limits and the protocol fee.
"""

# Maximum uint256 value. Amounts and every intermediate product must fit.
UINT256_MAX = 2**256 - 1

# Protocol fee: 0.3% of the input amount stays in the pool.
# Expressed as the fraction of input that takes part in the swap (997/1000).
FEE_NUMERATOR = 997
FEE_DENOMINATOR = 1000

# Basis point scale used by FeeConfig.from_bps (10000 bps = 100%)
BPS_DENOMINATOR = 10_000
