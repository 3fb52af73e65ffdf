"""Pool type definitions.

Pools are immutable snapshots of a liquidity venue between two tokens.
Each pool carries an explicit ``kind`` discriminant so that code handling
a mix of pool types dispatches on the tag instead of on the class.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TypeAlias

from smart_router.models.currency import Currency, Token


class PoolKind(str, Enum):
    """Which AMM family a pool belongs to."""

    V2 = "v2"
    V3 = "v3"


class _TwoTokenPool:
    """Token lookups shared by all pool kinds."""

    token0: Token
    token1: Token

    def involves_token(self, token: Currency) -> bool:
        """Check whether the (wrapped) token is one of the pool's two tokens."""
        key = token.wrapped.key
        return key == self.token0.key or key == self.token1.key

    def other_token(self, token: Currency) -> Token:
        """Get the pool token on the opposite side of ``token``."""
        key = token.wrapped.key
        if key == self.token0.key:
            return self.token1
        elif key == self.token1.key:
            return self.token0
        else:
            raise ValueError(f"Token {token.wrapped.address} not in pool")


@dataclass(frozen=True)
class V2Pair(_TwoTokenPool):
    """A UniswapV2-style constant product pair (no fee tier)."""

    token0: Token
    token1: Token
    address: str | None = None
    kind: PoolKind = field(default=PoolKind.V2, init=False)


@dataclass(frozen=True)
class V3Pool(_TwoTokenPool):
    """A UniswapV3 concentrated liquidity pool."""

    token0: Token
    token1: Token
    fee: int  # Fee in Uniswap units (e.g., 3000 for 0.3%)
    address: str | None = None
    kind: PoolKind = field(default=PoolKind.V3, init=False)

    @property
    def fee_percent(self) -> float:
        """Fee as percentage (e.g., 0.3 for 0.3%)."""
        return self.fee / 10000


# Union type for all pool types
AnyPool: TypeAlias = V2Pair | V3Pool

__all__ = ["AnyPool", "PoolKind", "V2Pair", "V3Pool"]
