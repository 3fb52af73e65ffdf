"""In-memory route cache backend.

Keeps the most recently persisted route set per (chain, token pair, trade
type, protocol set). Useful for tests, local tooling and single-process
deployments.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

import structlog

from smart_router.caching.model import CachedRoutes, CacheMode, TradeType
from smart_router.models.currency import Currency, CurrencyAmount
from smart_router.routing.types import Protocol

logger = structlog.get_logger()

CacheKey = tuple[int, str, str, TradeType, tuple[Protocol, ...]]


def _protocol_key(protocols: Iterable[Protocol]) -> tuple[Protocol, ...]:
    return tuple(sorted(set(protocols)))


class InMemoryRouteCache:
    """Route cache backend storing route sets in a dict.

    A stored set is served to requests whose protocol list matches the
    protocols the set covers, so sets for different protocol mixes of the
    same pair live side by side. Trade amounts are not part of the key.
    """

    def __init__(
        self,
        blocks_to_live: int = 1,
        cache_mode: CacheMode = CacheMode.LIVEMODE,
    ) -> None:
        """Initialize an empty cache.

        Args:
            blocks_to_live: Validity window assigned to every new entry
            cache_mode: Cache mode returned for every request
        """
        if blocks_to_live < 0:
            raise ValueError(f"blocks_to_live cannot be negative: {blocks_to_live}")
        self.blocks_to_live = blocks_to_live
        self.cache_mode = cache_mode
        self._entries: dict[CacheKey, CachedRoutes] = {}

    def __len__(self) -> int:
        return len(self._entries)

    async def get_cache_mode(
        self,
        chain_id: int,
        amount: CurrencyAmount,
        quote_currency: Currency,
        trade_type: TradeType,
        protocols: Sequence[Protocol],
    ) -> CacheMode:
        return self.cache_mode

    async def fetch_cached_routes(
        self,
        chain_id: int,
        amount: CurrencyAmount,
        quote_currency: Currency,
        trade_type: TradeType,
        protocols: Sequence[Protocol],
        block_number: int,
        optimistic: bool,
    ) -> CachedRoutes | None:
        if trade_type == TradeType.EXACT_INPUT:
            currency_in, currency_out = amount.currency, quote_currency
        else:
            currency_in, currency_out = quote_currency, amount.currency

        key = (
            chain_id,
            currency_in.wrapped.key,
            currency_out.wrapped.key,
            trade_type,
            _protocol_key(protocols),
        )
        cached_routes = self._entries.get(key)
        if cached_routes is None:
            logger.debug(
                "in_memory_route_cache_miss",
                chain_id=chain_id,
                protocols=[p.value for p in key[4]],
            )
        return cached_routes

    async def persist_cached_routes(self, cached_routes: CachedRoutes, amount: CurrencyAmount) -> bool:
        key = (
            cached_routes.chain_id,
            cached_routes.token_in.key,
            cached_routes.token_out.key,
            cached_routes.trade_type,
            _protocol_key(cached_routes.protocols_covered),
        )
        self._entries[key] = cached_routes
        return True

    async def get_blocks_to_live(self, cached_routes: CachedRoutes, amount: CurrencyAmount) -> int:
        return self.blocks_to_live

    def clear(self) -> None:
        """Drop all entries."""
        self._entries.clear()


__all__ = ["InMemoryRouteCache"]
