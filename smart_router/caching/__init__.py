"""Block-based route caching.

Module structure:
- model.py: CacheMode, TradeType, CachedRoute and CachedRoutes
- provider.py: RouteCachingProvider and the backend hook protocols
- memory.py: InMemoryRouteCache backend
"""

from smart_router.caching.memory import InMemoryRouteCache
from smart_router.caching.model import CachedRoute, CachedRoutes, CacheMode, TradeType
from smart_router.caching.provider import (
    BlocksToLiveHook,
    CacheModeHook,
    FetchCachedRoutesHook,
    PersistCachedRoutesHook,
    RouteCacheBackend,
    RouteCachingProvider,
)

__all__ = [
    "BlocksToLiveHook",
    "CacheMode",
    "CacheModeHook",
    "CachedRoute",
    "CachedRoutes",
    "FetchCachedRoutesHook",
    "InMemoryRouteCache",
    "PersistCachedRoutesHook",
    "RouteCacheBackend",
    "RouteCachingProvider",
    "TradeType",
]
