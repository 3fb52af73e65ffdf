#!/usr/bin/env python3
"""Enumerate candidate routes through a static pool snapshot.

Usage:
    python scripts/compute_routes.py snapshot.json --token-in 0x... --token-out 0x...
    python scripts/compute_routes.py snapshot.json --token-in 0x... --token-out 0x... \
        --protocol mixed --max-hops 2 --verbose
"""

import argparse
import json
import sys
from pathlib import Path

import structlog
from pydantic import ValidationError

from smart_router.config import RoutingConfig
from smart_router.constants import ChainId
from smart_router.logging import configure_logging
from smart_router.models import Token
from smart_router.pools import PoolKind, parse_snapshot
from smart_router.routing import (
    compute_all_mixed_routes,
    compute_all_v2_routes,
    compute_all_v3_routes,
    route_to_string,
)

logger = structlog.get_logger()


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    config = RoutingConfig.from_env()

    parser = argparse.ArgumentParser(description="Enumerate routes through a pool snapshot")
    parser.add_argument("snapshot", type=Path, help="Path to the pool snapshot JSON")
    parser.add_argument("--token-in", required=True, help="Input token address")
    parser.add_argument("--token-out", required=True, help="Output token address")
    parser.add_argument(
        "--chain-id",
        type=int,
        default=int(ChainId.MAINNET),
        help="Chain the snapshot was taken on (default: 1)",
    )
    parser.add_argument(
        "--protocol",
        choices=["v2", "v3", "mixed", "all"],
        default="all",
        help="Which route family to enumerate (default: all)",
    )
    parser.add_argument(
        "--max-hops",
        type=int,
        default=config.max_hops,
        help=f"Maximum pools per route (default: {config.max_hops})",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )

    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    if not args.snapshot.exists():
        logger.error("snapshot_not_found", path=str(args.snapshot))
        print(f"Error: Snapshot not found: {args.snapshot}")
        return 1

    try:
        with open(args.snapshot) as f:
            universe = parse_snapshot(json.load(f), args.chain_id)
    except json.JSONDecodeError as err:
        logger.error("snapshot_invalid_json", path=str(args.snapshot), error=str(err))
        print(f"Error: Snapshot is not valid JSON: {err}")
        return 1
    except ValidationError as err:
        logger.error("snapshot_invalid", path=str(args.snapshot), errors=err.error_count())
        print(f"Error: Invalid snapshot document: {err}")
        return 1
    pools = universe.pools

    try:
        token_in = Token(chain_id=args.chain_id, address=args.token_in)
        token_out = Token(chain_id=args.chain_id, address=args.token_out)
    except ValueError as err:
        print(f"Error: {err}")
        return 1

    v2_pools = [p for p in pools if p.kind == PoolKind.V2]
    v3_pools = [p for p in pools if p.kind == PoolKind.V3]

    routes = []
    if args.protocol in ("v2", "all"):
        routes.extend(compute_all_v2_routes(token_in, token_out, v2_pools, args.max_hops))
    if args.protocol in ("v3", "all"):
        routes.extend(compute_all_v3_routes(token_in, token_out, v3_pools, args.max_hops))
    if args.protocol in ("mixed", "all"):
        routes.extend(compute_all_mixed_routes(token_in, token_out, pools, args.max_hops))

    if universe.block_number is not None:
        print(f"Snapshot block: {universe.block_number}")
    print(f"Found {len(routes)} routes ({len(pools)} pools, max {args.max_hops} hops)")
    for route in routes:
        print(f"  {route.route_id():>11}  {route_to_string(route)}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
