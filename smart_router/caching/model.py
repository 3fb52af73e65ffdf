"""Cached route models.

A ``CachedRoutes`` set is the unit stored in the route cache: the weighted
routes chosen for one trade shape at one block, plus the metadata needed to
judge freshness. Freshness is measured in blocks, not wall-clock time.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum

from smart_router.models.currency import Currency, Token
from smart_router.routing.types import Protocol, SupportedRoute


class CacheMode(str, Enum):
    """Policy value gating cache reads and writes for a request shape.

    Only DARKMODE changes how the orchestrator behaves. Other values are
    passed through to backends, which may give them their own meaning.
    """

    LIVEMODE = "livemode"
    DARKMODE = "darkmode"
    TAPCOMPARE = "tapcompare"


class TradeType(str, Enum):
    """Whether the trade fixes the input or the output amount."""

    EXACT_INPUT = "exactIn"
    EXACT_OUTPUT = "exactOut"


@dataclass(frozen=True)
class CachedRoute:
    """A route and the percentage of the trade sent through it."""

    route: SupportedRoute
    percent: float

    def __post_init__(self) -> None:
        if not 0 <= self.percent <= 100:
            raise ValueError(f"Route percent must be in [0, 100], got {self.percent}")

    @property
    def protocol(self) -> Protocol:
        return self.route.protocol

    @property
    def token_in(self) -> Token:
        return self.route.token_in

    @property
    def token_out(self) -> Token:
        return self.route.token_out

    @property
    def route_path(self) -> str:
        return self.route.canonical_path()

    @property
    def route_id(self) -> int:
        return self.route.route_id()


@dataclass(frozen=True)
class CachedRoutes:
    """The weighted routes computed for one trade shape at one block.

    ``blocks_to_live`` is unset (None) until the route caching provider
    produces the populated copy that gets persisted; see
    ``with_blocks_to_live``.

    Attributes:
        routes: Weighted routes making up the (possibly split) trade
        chain_id: Chain the routes were computed for
        currency_in: Currency being sold
        currency_out: Currency being bought
        protocols_covered: Protocols present among the routes
        block_number: Block at which the underlying pool data was read
        trade_type: Exact input or exact output
        original_amount: Trade amount the routes were computed for
        blocks_to_live: Number of blocks after block_number the set stays fresh
    """

    routes: tuple[CachedRoute, ...]
    chain_id: int
    currency_in: Currency
    currency_out: Currency
    protocols_covered: frozenset[Protocol]
    block_number: int
    trade_type: TradeType
    original_amount: str
    blocks_to_live: int | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "routes", tuple(self.routes))
        object.__setattr__(self, "protocols_covered", frozenset(self.protocols_covered))
        if self.block_number < 0:
            raise ValueError(f"Block number cannot be negative: {self.block_number}")
        if self.blocks_to_live is not None and self.blocks_to_live < 0:
            raise ValueError(f"blocks_to_live cannot be negative: {self.blocks_to_live}")

    @classmethod
    def from_routes(
        cls,
        routes: Iterable[tuple[SupportedRoute, float]],
        chain_id: int,
        currency_in: Currency,
        currency_out: Currency,
        block_number: int,
        trade_type: TradeType,
        original_amount: str,
        protocols_covered: Iterable[Protocol] | None = None,
    ) -> CachedRoutes | None:
        """Build a route set from (route, percent) pairs.

        Args:
            routes: Chosen routes with their share of the trade
            protocols_covered: Protocols to record; derived from the routes
                when omitted

        Returns:
            The route set, or None if there are no routes to cache
        """
        cached = tuple(CachedRoute(route=route, percent=percent) for route, percent in routes)
        if not cached:
            return None

        if protocols_covered is None:
            protocols_covered = {route.protocol for route in cached}

        return cls(
            routes=cached,
            chain_id=chain_id,
            currency_in=currency_in,
            currency_out=currency_out,
            protocols_covered=frozenset(protocols_covered),
            block_number=block_number,
            trade_type=trade_type,
            original_amount=original_amount,
        )

    # Native currency routing is not supported: cached routes use wrapped tokens
    @property
    def token_in(self) -> Token:
        return self.currency_in.wrapped

    @property
    def token_out(self) -> Token:
        return self.currency_out.wrapped

    @property
    def quote_currency(self) -> Currency:
        """The currency the trade is quoted in.

        Exact input trades quote the output currency, exact output trades
        quote the input currency.
        """
        if self.trade_type == TradeType.EXACT_INPUT:
            return self.currency_out
        return self.currency_in

    def with_blocks_to_live(self, blocks_to_live: int) -> CachedRoutes:
        """Return a copy of this set with ``blocks_to_live`` populated.

        Raises:
            ValueError: If blocks_to_live is negative
        """
        return dataclasses.replace(self, blocks_to_live=blocks_to_live)

    def not_expired(self, block_number: int, optimistic: bool = False) -> bool:
        """Check whether the set is still fresh at ``block_number``.

        The set is fresh while ``block_number - self.block_number`` does not
        exceed ``blocks_to_live``. In optimistic mode the same comparison is
        used; callers pass a speculative (not yet mined) block number instead.
        A set without ``blocks_to_live`` is only fresh at its own block.
        """
        blocks_to_live = self.blocks_to_live or 0
        return block_number - self.block_number <= blocks_to_live


__all__ = ["CacheMode", "CachedRoute", "CachedRoutes", "TradeType"]
