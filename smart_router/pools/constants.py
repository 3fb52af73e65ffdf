"""UniswapV3 fee tiers.

Fees are expressed in hundredths of a basis point, so 3000 is 0.30%. The
tier is part of a V3 pool's identity and of its canonical route segment.
"""

V3_FEE_LOWEST = 100
V3_FEE_LOW = 500
V3_FEE_MEDIUM = 3000
V3_FEE_HIGH = 10000

V3_FEE_TIERS: tuple[int, ...] = (V3_FEE_LOWEST, V3_FEE_LOW, V3_FEE_MEDIUM, V3_FEE_HIGH)

# Fee assumed for snapshot entries that omit one
DEFAULT_SNAPSHOT_FEE = V3_FEE_MEDIUM

__all__ = [
    "DEFAULT_SNAPSHOT_FEE",
    "V3_FEE_HIGH",
    "V3_FEE_LOW",
    "V3_FEE_LOWEST",
    "V3_FEE_MEDIUM",
    "V3_FEE_TIERS",
]
