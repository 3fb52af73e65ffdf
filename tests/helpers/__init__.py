"""Test helpers module for shared test utilities.

- constants: Token addresses
- factories: Token, pool and cached route factory functions
"""

from tests.helpers.constants import (
    CHAIN_ID,
    DAI,
    TOKEN_A,
    TOKEN_B,
    TOKEN_C,
    TOKEN_D,
    TOKEN_E,
    USDC,
    USDT,
    WETH,
)
from tests.helpers.factories import (
    make_amount,
    make_cached_routes,
    make_token,
    make_v2_pair,
    make_v3_pool,
)

__all__ = [
    # Constants
    "CHAIN_ID",
    "WETH",
    "USDC",
    "DAI",
    "USDT",
    "TOKEN_A",
    "TOKEN_B",
    "TOKEN_C",
    "TOKEN_D",
    "TOKEN_E",
    # Factories
    "make_amount",
    "make_cached_routes",
    "make_token",
    "make_v2_pair",
    "make_v3_pool",
]
