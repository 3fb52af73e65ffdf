"""Tests for route enumeration."""

from itertools import combinations

import pytest

from smart_router.models.currency import NativeCurrency, Token
from smart_router.pools.types import PoolKind
from smart_router.routing.pathfinding import (
    compute_all_mixed_routes,
    compute_all_v2_routes,
    compute_all_v3_routes,
)
from smart_router.routing.types import MixedRoute, Protocol, V2Route, V3Route
from tests.helpers import USDC, WETH, make_token, make_v2_pair, make_v3_pool


class TestComputeAllRoutes:
    """Tests for the shared depth-first enumeration."""

    def test_chain_within_hop_limit(self, token_a, token_b, token_c, token_d) -> None:
        pools = [
            make_v2_pair(token_a, token_b),
            make_v2_pair(token_b, token_c),
            make_v2_pair(token_c, token_d),
        ]

        routes = compute_all_v2_routes(token_a, token_d, pools, max_hops=3)

        assert len(routes) == 1
        assert routes[0].pools == tuple(pools)
        assert routes[0].path == [token_a, token_b, token_c, token_d]

    def test_chain_beyond_hop_limit(self, token_a, token_b, token_c, token_d) -> None:
        pools = [
            make_v2_pair(token_a, token_b),
            make_v2_pair(token_b, token_c),
            make_v2_pair(token_c, token_d),
        ]

        assert compute_all_v2_routes(token_a, token_d, pools, max_hops=2) == []

    def test_parallel_pools_give_separate_single_hop_routes(self, token_a, token_b) -> None:
        """Two pools for the same pair: one route each, no A->B->A->B detour."""
        forward = make_v2_pair(token_a, token_b)
        backward = make_v2_pair(token_b, token_a)

        routes = compute_all_v2_routes(token_a, token_b, [forward, backward], max_hops=3)

        assert [route.pools for route in routes] == [(forward,), (backward,)]

    def test_same_token_yields_no_routes(self, token_a, token_b, token_c) -> None:
        pools = [
            make_v2_pair(token_a, token_b),
            make_v2_pair(token_b, token_c),
            make_v2_pair(token_c, token_a),
        ]

        assert compute_all_v2_routes(token_a, token_a, pools, max_hops=3) == []

    def test_no_connection(self, token_a, token_b, token_c, token_d) -> None:
        pools = [make_v2_pair(token_a, token_b), make_v2_pair(token_c, token_d)]

        assert compute_all_v2_routes(token_a, token_d, pools, max_hops=3) == []

    def test_empty_pool_universe(self, token_a, token_b) -> None:
        assert compute_all_v3_routes(token_a, token_b, [], max_hops=3) == []

    def test_dfs_order_follows_pool_order(self, token_a, token_b, token_d) -> None:
        """The two-hop route through the first pool is found before the later direct pool."""
        a_b = make_v2_pair(token_a, token_b)
        b_d = make_v2_pair(token_b, token_d)
        a_d = make_v2_pair(token_a, token_d)

        routes = compute_all_v2_routes(token_a, token_d, [a_b, b_d, a_d], max_hops=3)

        assert [route.pools for route in routes] == [(a_b, b_d), (a_d,)]

    def test_stops_at_target(self, token_a, token_b, token_c) -> None:
        """Paths reaching the output token are not extended past it."""
        a_b = make_v2_pair(token_a, token_b)
        b_c = make_v2_pair(token_b, token_c)
        a_c = make_v2_pair(token_a, token_c)

        routes = compute_all_v2_routes(token_a, token_b, [a_b, b_c, a_c], max_hops=3)

        assert [route.pools for route in routes] == [(a_b,), (a_c, b_c)]

    def test_does_not_revisit_input_token(self, token_a, token_b, token_c) -> None:
        a_b = make_v2_pair(token_a, token_b)
        b_a = make_v2_pair(token_b, token_a)
        a_c = make_v2_pair(token_a, token_c)

        routes = compute_all_v2_routes(token_a, token_c, [a_b, b_a, a_c], max_hops=3)

        assert [route.pools for route in routes] == [(a_c,)]

    def test_complete_graph_route_count(self, token_a, token_b, token_c, token_d, token_e) -> None:
        """Every simple path in a 5-token complete graph is enumerated exactly once."""
        tokens = [token_a, token_b, token_c, token_d, token_e]
        pools = [make_v3_pool(t0, t1) for t0, t1 in combinations(tokens, 2)]

        # 1 direct + 3 two-hop + 6 three-hop
        assert len(compute_all_v3_routes(token_a, token_e, pools, max_hops=3)) == 10
        # + 6 four-hop
        assert len(compute_all_v3_routes(token_a, token_e, pools, max_hops=4)) == 16

    def test_routes_respect_invariants(self, token_a, token_b, token_c, token_d, token_e) -> None:
        tokens = [token_a, token_b, token_c, token_d, token_e]
        pools = [make_v3_pool(t0, t1, fee) for t0, t1 in combinations(tokens, 2) for fee in (500, 3000)]

        for max_hops in (1, 2, 3):
            routes = compute_all_v3_routes(token_b, token_d, pools, max_hops=max_hops)
            assert routes
            for route in routes:
                assert len(route.pools) <= max_hops
                assert len({id(pool) for pool in route.pools}) == len(route.pools)
                keys = [token.key for token in route.path]
                assert len(set(keys)) == len(keys)
                assert keys[0] == token_b.key
                assert keys[-1] == token_d.key

    def test_deterministic(self, token_a, token_b, token_c, token_d) -> None:
        pools = [
            make_v3_pool(token_a, token_b),
            make_v3_pool(token_b, token_d),
            make_v3_pool(token_a, token_c),
            make_v3_pool(token_c, token_d),
            make_v3_pool(token_b, token_c),
        ]

        first = compute_all_v3_routes(token_a, token_d, pools, max_hops=3)
        second = compute_all_v3_routes(token_a, token_d, pools, max_hops=3)

        assert first == second

    def test_invalid_max_hops(self, token_a, token_b) -> None:
        with pytest.raises(ValueError, match="max_hops"):
            compute_all_v2_routes(token_a, token_b, [make_v2_pair(token_a, token_b)], max_hops=0)

    def test_route_classes_by_protocol(self, token_a, token_b) -> None:
        v2 = compute_all_v2_routes(token_a, token_b, [make_v2_pair(token_a, token_b)], 1)
        v3 = compute_all_v3_routes(token_a, token_b, [make_v3_pool(token_a, token_b)], 1)

        assert isinstance(v2[0], V2Route)
        assert v2[0].protocol == Protocol.V2
        assert isinstance(v3[0], V3Route)
        assert v3[0].protocol == Protocol.V3

    def test_native_currency_routes_through_wrapped_token(self) -> None:
        eth = NativeCurrency.on_chain(1)
        weth = make_token(WETH, "WETH")
        usdc = make_token(USDC, "USDC", decimals=6)
        pool = make_v3_pool(weth, usdc, fee=500)

        routes = compute_all_v3_routes(eth, usdc, [pool], max_hops=1)

        assert len(routes) == 1
        assert routes[0].input == eth
        assert routes[0].token_in == weth

    def test_token_case_is_ignored(self, token_a, token_b) -> None:
        upper_b = Token(chain_id=token_b.chain_id, address="0x" + token_b.address[2:].upper())
        pool = make_v2_pair(token_a, token_b)

        routes = compute_all_v2_routes(token_a, upper_b, [pool], max_hops=1)

        assert len(routes) == 1


class TestComputeAllMixedRoutes:
    """Tests for mixed V2/V3 enumeration."""

    def test_keeps_only_mixed_routes(self, token_a, token_b, token_c) -> None:
        a_b_v2 = make_v2_pair(token_a, token_b)
        b_c_v3 = make_v3_pool(token_b, token_c)
        a_c_v2 = make_v2_pair(token_a, token_c)
        b_c_v2 = make_v2_pair(token_b, token_c)

        routes = compute_all_mixed_routes(token_a, token_c, [a_b_v2, b_c_v3, a_c_v2, b_c_v2], 2)

        assert [route.pools for route in routes] == [(a_b_v2, b_c_v3)]
        assert isinstance(routes[0], MixedRoute)

    def test_never_returns_single_kind_routes(self, token_a, token_b, token_c, token_d) -> None:
        tokens = [token_a, token_b, token_c, token_d]
        pools = []
        for t0, t1 in combinations(tokens, 2):
            pools.append(make_v2_pair(t0, t1))
            pools.append(make_v3_pool(t0, t1))

        routes = compute_all_mixed_routes(token_a, token_d, pools, max_hops=3)

        assert routes
        for route in routes:
            kinds = {pool.kind for pool in route.pools}
            assert kinds == {PoolKind.V2, PoolKind.V3}

    def test_single_hop_is_never_mixed(self, token_a, token_b) -> None:
        pools = [make_v2_pair(token_a, token_b), make_v3_pool(token_a, token_b)]

        assert compute_all_mixed_routes(token_a, token_b, pools, max_hops=3) == []
