"""Route enumeration through a pool universe.

Enumerates every simple path from an input token to an output token using
depth-first search with backtracking. Unlike a token-graph search, the
search runs over pools, so parallel pools between the same pair of tokens
yield distinct routes.

Guarantees for every returned route:
- starts at token_in and ends at token_out
- has at most max_hops pools
- never uses the same pool twice
- never visits a token twice (token_in included)

Output order is the DFS visitation order, with pools tried in the order of
the input sequence. Callers rely on this for deterministic results.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import TypeVar

import structlog

from smart_router.models.currency import Currency, Token
from smart_router.pools.types import AnyPool, PoolKind, V2Pair, V3Pool
from smart_router.routing.types import (
    BaseRoute,
    MixedRoute,
    V2Route,
    V3Route,
    pool_to_string,
    route_to_string,
)

logger = structlog.get_logger()

RouteT = TypeVar("RouteT", bound=BaseRoute)

RouteBuilder = Callable[[list[AnyPool], Currency, Currency], RouteT]


def compute_all_routes(
    token_in: Currency,
    token_out: Currency,
    pools: Sequence[AnyPool],
    max_hops: int,
    build_route: RouteBuilder[RouteT],
) -> list[RouteT]:
    """Enumerate all simple routes from token_in to token_out.

    Args:
        token_in: Input currency (native currencies route via their wrapped token)
        token_out: Output currency
        pools: Pool universe, tried in this order
        max_hops: Maximum number of pools per route (must be >= 1)
        build_route: Builds a route from (pools, token_in, token_out)

    Returns:
        Routes in DFS order. Empty when token_in and token_out are the same.

    Raises:
        ValueError: If max_hops < 1
    """
    if max_hops < 1:
        raise ValueError(f"max_hops must be at least 1, got {max_hops}")

    target = token_out.wrapped.key
    pools_used = [False] * len(pools)
    current_route: list[AnyPool] = []
    # Native currency routing is not supported: the search runs on wrapped tokens
    tokens_visited = {token_in.wrapped.key}
    routes: list[RouteT] = []

    def compute_routes(previous_token_out: Token) -> None:
        if current_route and previous_token_out.key == target:
            routes.append(build_route(list(current_route), token_in, token_out))
            return

        if len(current_route) >= max_hops:
            return

        for i, pool in enumerate(pools):
            if pools_used[i] or not pool.involves_token(previous_token_out):
                continue

            current_token_out = pool.other_token(previous_token_out)
            if current_token_out.key in tokens_visited:
                continue

            tokens_visited.add(current_token_out.key)
            current_route.append(pool)
            pools_used[i] = True

            compute_routes(current_token_out)

            pools_used[i] = False
            current_route.pop()
            tokens_visited.discard(current_token_out.key)

    compute_routes(token_in.wrapped)

    logger.info(
        "computed_routes",
        count=len(routes),
        protocol=routes[0].protocol.value if routes else None,
        routes=[route_to_string(route) for route in routes],
        pools=[pool_to_string(pool) for pool in pools],
    )
    return routes


def compute_all_v2_routes(
    token_in: Currency,
    token_out: Currency,
    pools: Sequence[V2Pair],
    max_hops: int,
) -> list[V2Route]:
    """Enumerate routes through V2 pairs."""
    return compute_all_routes(token_in, token_out, pools, max_hops, V2Route)


def compute_all_v3_routes(
    token_in: Currency,
    token_out: Currency,
    pools: Sequence[V3Pool],
    max_hops: int,
) -> list[V3Route]:
    """Enumerate routes through V3 pools."""
    return compute_all_routes(token_in, token_out, pools, max_hops, V3Route)


def compute_all_mixed_routes(
    token_in: Currency,
    token_out: Currency,
    pools: Sequence[AnyPool],
    max_hops: int,
) -> list[MixedRoute]:
    """Enumerate routes that genuinely mix V2 and V3 pools.

    Routes made entirely of one pool kind are dropped, since the pure
    V2 and V3 enumerations already produce them.
    """
    routes = compute_all_routes(token_in, token_out, pools, max_hops, MixedRoute)
    return [
        route
        for route in routes
        if not all(pool.kind == PoolKind.V3 for pool in route.pools)
        and not all(pool.kind == PoolKind.V2 for pool in route.pools)
    ]


__all__ = [
    "RouteBuilder",
    "compute_all_mixed_routes",
    "compute_all_routes",
    "compute_all_v2_routes",
    "compute_all_v3_routes",
]
