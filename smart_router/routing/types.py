"""Route models.

A route is an ordered, non-empty sequence of pools connecting an input
currency to an output currency. Routes are tagged with the protocol family
of their pools: pure V2, pure V3, or MIXED when both kinds appear.

Every route has a canonical path string and a 32-bit ``route_id`` derived
from it. The id is a best-effort cache key, collisions are possible.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, TypeAlias

from smart_router.constants import ROUTE_PATH_SEPARATOR
from smart_router.errors import UnsupportedPoolKind, UnsupportedProtocol
from smart_router.models.currency import Currency, Token
from smart_router.pools.types import AnyPool, PoolKind

_UINT32 = 1 << 32
_INT32_MAX = (1 << 31) - 1


class Protocol(str, Enum):
    """Protocol family of a route."""

    V2 = "V2"
    V3 = "V3"
    MIXED = "MIXED"


def java_string_hash(value: str) -> int:
    """Hash a string the way Java's ``String.hashCode`` does.

    Computes ``h = h * 31 + ord(ch)`` over the characters with signed
    32-bit wraparound, so ids match the ones produced by other router
    implementations for the same path.
    """
    h = 0
    for ch in value:
        h = (h * 31 + ord(ch)) % _UINT32
    return h - _UINT32 if h > _INT32_MAX else h


def _v2_segment(pool: AnyPool) -> str:
    return f"[V2]{pool.token0.key}/{pool.token1.key}"


def _v3_segment(pool: AnyPool) -> str:
    return f"[V3]{pool.token0.key}/{pool.token1.key}/{pool.fee}"  # type: ignore[union-attr]


@dataclass(frozen=True)
class BaseRoute:
    """Common route behaviour; use V2Route, V3Route or MixedRoute."""

    pools: tuple[AnyPool, ...]
    input: Currency
    output: Currency

    protocol: ClassVar[Protocol]

    def __post_init__(self) -> None:
        object.__setattr__(self, "pools", tuple(self.pools))
        if not self.pools:
            raise ValueError("Route requires at least one pool")

        current = self.input.wrapped
        seen = {current.key}
        for pool in self.pools:
            if not pool.involves_token(current):
                raise ValueError(f"Pool {pool!r} does not involve {current.address}")
            current = pool.other_token(current)
            if current.key in seen:
                raise ValueError(f"Route revisits token {current.address}")
            seen.add(current.key)

        if current.key != self.output.wrapped.key:
            raise ValueError(
                f"Route ends at {current.address}, expected {self.output.wrapped.address}"
            )

    @property
    def token_in(self) -> Token:
        # Native currency routing is not supported: routes run between wrapped tokens
        return self.input.wrapped

    @property
    def token_out(self) -> Token:
        return self.output.wrapped

    @property
    def path(self) -> list[Token]:
        """Tokens visited by the route, from input to output."""
        tokens = [self.token_in]
        for pool in self.pools:
            tokens.append(pool.other_token(tokens[-1]))
        return tokens

    def canonical_path(self) -> str:
        """Build the path string the route id is derived from.

        Raises:
            UnsupportedPoolKind: If a pool's kind does not match the route
            UnsupportedProtocol: If the route protocol is unknown
        """
        match self.protocol:
            case Protocol.V3:
                segments = [self._render(pool, allowed=(PoolKind.V3,)) for pool in self.pools]
            case Protocol.V2:
                segments = [self._render(pool, allowed=(PoolKind.V2,)) for pool in self.pools]
            case Protocol.MIXED:
                segments = [
                    self._render(pool, allowed=(PoolKind.V2, PoolKind.V3)) for pool in self.pools
                ]
            case _:
                raise UnsupportedProtocol(self.protocol)
        return ROUTE_PATH_SEPARATOR.join(segments)

    @staticmethod
    def _render(pool: AnyPool, allowed: tuple[PoolKind, ...]) -> str:
        kind = getattr(pool, "kind", None)
        if kind not in allowed:
            raise UnsupportedPoolKind(pool)
        if kind == PoolKind.V3:
            return _v3_segment(pool)
        return _v2_segment(pool)

    def route_id(self) -> int:
        """Signed 32-bit hash of the canonical path."""
        return java_string_hash(self.canonical_path())


@dataclass(frozen=True)
class V2Route(BaseRoute):
    """Route through V2 pairs only."""

    protocol: ClassVar[Protocol] = Protocol.V2


@dataclass(frozen=True)
class V3Route(BaseRoute):
    """Route through V3 pools only."""

    protocol: ClassVar[Protocol] = Protocol.V3


@dataclass(frozen=True)
class MixedRoute(BaseRoute):
    """Route mixing V2 pairs and V3 pools."""

    protocol: ClassVar[Protocol] = Protocol.MIXED


SupportedRoute: TypeAlias = V2Route | V3Route | MixedRoute


def _token_label(token: Token) -> str:
    return token.symbol or token.key


def pool_to_string(pool: AnyPool) -> str:
    """Render a pool for logs, e.g. ``WETH/USDC/3000`` or ``WETH/USDC``.

    Tokens without a symbol are shown by their lowercased address.
    """
    label = f"{_token_label(pool.token0)}/{_token_label(pool.token1)}"
    if getattr(pool, "kind", None) == PoolKind.V3:
        return f"{label}/{pool.fee}"  # type: ignore[union-attr]
    return label


def route_to_string(route: BaseRoute) -> str:
    """Render a route for logs.

    Example: ``[V3] WETH -- 0.3% [0x88e6...] --> USDC``
    """
    parts = [f"[{route.protocol.value}] ", _token_label(route.token_in)]
    for pool, token in zip(route.pools, route.path[1:], strict=True):
        address = pool.address or "unknown"
        if getattr(pool, "kind", None) == PoolKind.V3:
            parts.append(f" -- {pool.fee / 10000}% [{address}] --> ")  # type: ignore[union-attr]
        else:
            parts.append(f" -- [{address}] --> ")
        parts.append(_token_label(token))
    return "".join(parts)


__all__ = [
    "BaseRoute",
    "MixedRoute",
    "Protocol",
    "SupportedRoute",
    "V2Route",
    "V3Route",
    "java_string_hash",
    "pool_to_string",
    "route_to_string",
]
