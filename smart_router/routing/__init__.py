"""Route models and route enumeration.

Module structure:
- types.py: Protocol tags, V2Route / V3Route / MixedRoute and route ids
- pathfinding.py: Depth-first enumeration of routes through a pool universe
"""

from smart_router.routing.pathfinding import (
    compute_all_mixed_routes,
    compute_all_routes,
    compute_all_v2_routes,
    compute_all_v3_routes,
)
from smart_router.routing.types import (
    BaseRoute,
    MixedRoute,
    Protocol,
    SupportedRoute,
    V2Route,
    V3Route,
    java_string_hash,
    pool_to_string,
    route_to_string,
)

__all__ = [
    "BaseRoute",
    "MixedRoute",
    "Protocol",
    "SupportedRoute",
    "V2Route",
    "V3Route",
    "compute_all_mixed_routes",
    "compute_all_routes",
    "compute_all_v2_routes",
    "compute_all_v3_routes",
    "java_string_hash",
    "pool_to_string",
    "route_to_string",
]
