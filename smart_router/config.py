"""Routing configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass

from smart_router.constants import DEFAULT_EIP1559_CHAINS

_TRUE_VALUES = ("true", "1", "yes")


@dataclass(frozen=True)
class RoutingConfig:
    """Centralized configuration for route computation and caching.

    Attributes:
        max_hops: Maximum number of pools in a single route (default: 3)
        max_split_routes: Maximum number of weighted routes in a split trade
        optimistic_cached_routes: Whether quote paths read the route cache in
            optimistic mode
        eip1559_chains: Chains whose gas price is read with the EIP-1559 strategy
    """

    max_hops: int = 3
    max_split_routes: int = 4
    optimistic_cached_routes: bool = False
    eip1559_chains: frozenset[int] = DEFAULT_EIP1559_CHAINS

    def __post_init__(self) -> None:
        if self.max_hops < 1:
            raise ValueError(f"max_hops must be at least 1, got {self.max_hops}")
        if self.max_split_routes < 1:
            raise ValueError(f"max_split_routes must be at least 1, got {self.max_split_routes}")

    @classmethod
    def from_env(cls) -> RoutingConfig:
        """Build a config from environment variables.

        Configuration via environment variables:
        - ROUTER_MAX_HOPS: Maximum pools per route (default: 3)
        - ROUTER_MAX_SPLIT_ROUTES: Maximum routes per split trade (default: 4)
        - ROUTER_OPTIMISTIC_CACHED_ROUTES: Use optimistic cache reads (default: false)
        - ROUTER_EIP1559_CHAINS: Comma-separated chain ids (default: built-in list)
        """
        eip1559_env = os.environ.get("ROUTER_EIP1559_CHAINS")
        eip1559_chains = (
            frozenset(int(c) for c in eip1559_env.split(",") if c.strip())
            if eip1559_env is not None
            else DEFAULT_EIP1559_CHAINS
        )
        return cls(
            max_hops=int(os.environ.get("ROUTER_MAX_HOPS", "3")),
            max_split_routes=int(os.environ.get("ROUTER_MAX_SPLIT_ROUTES", "4")),
            optimistic_cached_routes=os.environ.get(
                "ROUTER_OPTIMISTIC_CACHED_ROUTES", "false"
            ).lower()
            in _TRUE_VALUES,
            eip1559_chains=eip1559_chains,
        )


# Default configuration instance
DEFAULT_ROUTING_CONFIG = RoutingConfig()
