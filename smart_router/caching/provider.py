"""Route caching provider.

``RouteCachingProvider`` is the single entry point for route cache reads
and writes. It applies the same policy to every storage backend:

- a DARKMODE cache mode skips the backend entirely
- entries are only returned while they are fresh for the requested block
- ``blocks_to_live`` is computed once, right before an entry is persisted

The provider is built from four async hooks supplied by the backend. It
holds no mutable state and calls the hooks one after another. Hook
errors propagate unchanged: a broken backend is never reported as a miss.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol as TypingProtocol

import structlog

from smart_router.caching.model import CachedRoutes, CacheMode, TradeType
from smart_router.config import DEFAULT_ROUTING_CONFIG, RoutingConfig
from smart_router.models.currency import Currency, CurrencyAmount
from smart_router.routing.types import Protocol

logger = structlog.get_logger()


class CacheModeHook(TypingProtocol):
    """Decides the cache mode for a request shape."""

    async def __call__(
        self,
        chain_id: int,
        amount: CurrencyAmount,
        quote_currency: Currency,
        trade_type: TradeType,
        protocols: Sequence[Protocol],
    ) -> CacheMode:
        """Return the cache mode. Must be deterministic for a given input."""
        ...


class FetchCachedRoutesHook(TypingProtocol):
    """Backend-specific cache read."""

    async def __call__(
        self,
        chain_id: int,
        amount: CurrencyAmount,
        quote_currency: Currency,
        trade_type: TradeType,
        protocols: Sequence[Protocol],
        block_number: int,
        optimistic: bool,
    ) -> CachedRoutes | None:
        """Return the stored route set, or None if nothing is stored."""
        ...


class PersistCachedRoutesHook(TypingProtocol):
    """Backend-specific cache write."""

    async def __call__(self, cached_routes: CachedRoutes, amount: CurrencyAmount) -> bool:
        """Store the route set and report whether it was written."""
        ...


class BlocksToLiveHook(TypingProtocol):
    """Decides how many blocks a freshly computed route set stays valid."""

    async def __call__(self, cached_routes: CachedRoutes, amount: CurrencyAmount) -> int:
        """Return a non-negative number of blocks."""
        ...


class RouteCacheBackend(TypingProtocol):
    """A storage backend implementing all four hooks as methods."""

    async def get_cache_mode(
        self,
        chain_id: int,
        amount: CurrencyAmount,
        quote_currency: Currency,
        trade_type: TradeType,
        protocols: Sequence[Protocol],
    ) -> CacheMode: ...

    async def fetch_cached_routes(
        self,
        chain_id: int,
        amount: CurrencyAmount,
        quote_currency: Currency,
        trade_type: TradeType,
        protocols: Sequence[Protocol],
        block_number: int,
        optimistic: bool,
    ) -> CachedRoutes | None: ...

    async def persist_cached_routes(
        self, cached_routes: CachedRoutes, amount: CurrencyAmount
    ) -> bool: ...

    async def get_blocks_to_live(
        self, cached_routes: CachedRoutes, amount: CurrencyAmount
    ) -> int: ...


class RouteCachingProvider:
    """Gate route cache access through cache mode and block expiry checks.

    Usage:
        provider = RouteCachingProvider.from_backend(InMemoryRouteCache())
        cached = await provider.get_cached_route(
            chain_id, amount, quote_currency, trade_type, protocols, block_number
        )
        if cached is None:
            ...  # compute routes, then
            await provider.set_cached_route(new_cached_routes, amount)
    """

    def __init__(
        self,
        cache_mode: CacheModeHook,
        fetch_cached_routes: FetchCachedRoutesHook,
        persist_cached_routes: PersistCachedRoutesHook,
        blocks_to_live: BlocksToLiveHook,
        config: RoutingConfig = DEFAULT_ROUTING_CONFIG,
    ) -> None:
        """Initialize the provider from its hooks.

        Args:
            cache_mode: Cache mode policy
            fetch_cached_routes: Backend read
            persist_cached_routes: Backend write
            blocks_to_live: TTL policy for new entries
            config: Supplies the default read mode and the split route limit
        """
        self._cache_mode = cache_mode
        self._fetch_cached_routes = fetch_cached_routes
        self._persist_cached_routes = persist_cached_routes
        self._blocks_to_live = blocks_to_live
        self.config = config

    @classmethod
    def from_backend(
        cls,
        backend: RouteCacheBackend,
        config: RoutingConfig = DEFAULT_ROUTING_CONFIG,
    ) -> RouteCachingProvider:
        """Build a provider bound to the hook methods of a backend object."""
        return cls(
            cache_mode=backend.get_cache_mode,
            fetch_cached_routes=backend.fetch_cached_routes,
            persist_cached_routes=backend.persist_cached_routes,
            blocks_to_live=backend.get_blocks_to_live,
            config=config,
        )

    async def get_cached_route(
        self,
        chain_id: int,
        amount: CurrencyAmount,
        quote_currency: Currency,
        trade_type: TradeType,
        protocols: Sequence[Protocol],
        block_number: int,
        optimistic: bool | None = None,
    ) -> CachedRoutes | None:
        """Get a fresh cached route set for a request, if there is one.

        Args:
            chain_id: Chain of the request
            amount: Trade amount
            quote_currency: Currency the trade is quoted in
            trade_type: Exact input or exact output
            protocols: Protocols the request allows
            block_number: Block the request targets (may be speculative
                in optimistic mode)
            optimistic: Whether the caller is on an optimistic path. Defaults
                to ``config.optimistic_cached_routes``

        Returns:
            The cached route set, or None on darkmode, miss or expiry
        """
        if optimistic is None:
            optimistic = self.config.optimistic_cached_routes

        mode = await self._cache_mode(chain_id, amount, quote_currency, trade_type, protocols)
        if mode == CacheMode.DARKMODE:
            logger.debug("route_cache_darkmode", chain_id=chain_id, operation="get")
            return None

        cached_routes = await self._fetch_cached_routes(
            chain_id,
            amount,
            quote_currency,
            trade_type,
            protocols,
            block_number,
            optimistic,
        )
        return self._filter_expired(cached_routes, block_number, optimistic)

    async def set_cached_route(self, cached_routes: CachedRoutes, amount: CurrencyAmount) -> bool:
        """Persist a route set with a freshly computed ``blocks_to_live``.

        The cache mode is derived from the set itself. The set passed in is
        not modified: the backend receives a populated copy. Sets with more
        routes than ``config.max_split_routes`` are not written.

        Args:
            cached_routes: Route set to cache
            amount: Trade amount the set was computed for

        Returns:
            Whether the set was written to the cache

        Raises:
            ValueError: If the blocks-to-live hook returns a negative value
        """
        mode = await self._cache_mode(
            cached_routes.chain_id,
            amount,
            cached_routes.quote_currency,
            cached_routes.trade_type,
            sorted(cached_routes.protocols_covered),
        )
        if mode == CacheMode.DARKMODE:
            logger.debug("route_cache_darkmode", chain_id=cached_routes.chain_id, operation="set")
            return False

        if len(cached_routes.routes) > self.config.max_split_routes:
            logger.warning(
                "route_cache_too_many_routes",
                chain_id=cached_routes.chain_id,
                routes=len(cached_routes.routes),
                max_split_routes=self.config.max_split_routes,
            )
            return False

        blocks_to_live = await self._blocks_to_live(cached_routes, amount)
        populated = cached_routes.with_blocks_to_live(blocks_to_live)

        persisted = await self._persist_cached_routes(populated, amount)
        logger.debug(
            "route_cache_set",
            chain_id=populated.chain_id,
            block_number=populated.block_number,
            blocks_to_live=blocks_to_live,
            persisted=persisted,
        )
        return persisted

    @staticmethod
    def _filter_expired(
        cached_routes: CachedRoutes | None,
        block_number: int,
        optimistic: bool,
    ) -> CachedRoutes | None:
        if cached_routes is None:
            logger.debug("route_cache_miss", block_number=block_number)
            return None

        if not cached_routes.not_expired(block_number, optimistic):
            logger.debug(
                "route_cache_expired",
                block_number=block_number,
                cached_block_number=cached_routes.block_number,
                blocks_to_live=cached_routes.blocks_to_live,
                optimistic=optimistic,
            )
            return None

        logger.debug(
            "route_cache_hit",
            block_number=block_number,
            cached_block_number=cached_routes.block_number,
            routes=len(cached_routes.routes),
        )
        return cached_routes


__all__ = [
    "BlocksToLiveHook",
    "CacheModeHook",
    "FetchCachedRoutesHook",
    "PersistCachedRoutesHook",
    "RouteCacheBackend",
    "RouteCachingProvider",
]
