"""Pool models and snapshot parsing.

Module structure:
- types.py: PoolKind discriminant and the V2Pair / V3Pool snapshots
- parsing.py: Parsing of static JSON pool universes
- constants.py: UniswapV3 fee tiers
"""

from .parsing import PoolUniverse, parse_pools, parse_snapshot
from .types import AnyPool, PoolKind, V2Pair, V3Pool

__all__ = [
    "AnyPool",
    "PoolKind",
    "PoolUniverse",
    "V2Pair",
    "V3Pool",
    "parse_pools",
    "parse_snapshot",
]
