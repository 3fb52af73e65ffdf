"""Smart router core - route enumeration, route caching and gas strategy selection."""

from smart_router.caching import (
    CachedRoute,
    CachedRoutes,
    CacheMode,
    InMemoryRouteCache,
    RouteCachingProvider,
    TradeType,
)
from smart_router.config import DEFAULT_ROUTING_CONFIG, RoutingConfig
from smart_router.errors import RouterError, UnsupportedPoolKind, UnsupportedProtocol
from smart_router.gas import GasPrice, OnChainGasPriceProvider
from smart_router.routing import (
    MixedRoute,
    Protocol,
    V2Route,
    V3Route,
    compute_all_mixed_routes,
    compute_all_v2_routes,
    compute_all_v3_routes,
)

__version__ = "0.1.0"
__all__ = [
    "CacheMode",
    "CachedRoute",
    "CachedRoutes",
    "DEFAULT_ROUTING_CONFIG",
    "GasPrice",
    "InMemoryRouteCache",
    "MixedRoute",
    "OnChainGasPriceProvider",
    "Protocol",
    "RouteCachingProvider",
    "RouterError",
    "RoutingConfig",
    "TradeType",
    "UnsupportedPoolKind",
    "UnsupportedProtocol",
    "V2Route",
    "V3Route",
    "__version__",
    "compute_all_mixed_routes",
    "compute_all_v2_routes",
    "compute_all_v3_routes",
]
