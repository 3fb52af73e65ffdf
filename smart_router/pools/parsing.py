"""Parsing of static pool universe snapshots.

A snapshot is a JSON document listing token metadata and pools:

    {
        "tokens": [{"address": "0x...", "decimals": 18, "symbol": "WETH"}],
        "pools": [
            {"kind": "v2", "address": "0x...", "token0": "0x...", "token1": "0x..."},
            {"kind": "v3", "address": "0x...", "token0": "0x...", "token1": "0x...",
             "fee": 3000}
        ]
    }

Malformed pool entries are skipped and logged rather than failing the
whole snapshot.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal

import structlog
from pydantic import BaseModel, Field, ValidationError

from smart_router.models.currency import Token
from smart_router.models.types import Address, normalize_address

from .constants import DEFAULT_SNAPSHOT_FEE, V3_FEE_TIERS
from .types import AnyPool, V2Pair, V3Pool

logger = structlog.get_logger()


class TokenSnapshot(BaseModel):
    """Token metadata in a pool snapshot."""

    address: Address
    decimals: int = Field(default=18, ge=0, le=77)
    symbol: str | None = None
    name: str | None = None


class PoolSnapshot(BaseModel):
    """A single pool entry in a snapshot."""

    kind: Literal["v2", "v3"]
    address: Address | None = None
    token0: Address
    token1: Address
    # Only meaningful for v3 pools
    fee: int | None = Field(default=None, ge=0)


class PoolUniverseSnapshot(BaseModel):
    """Top-level snapshot document."""

    tokens: list[TokenSnapshot] = Field(default_factory=list)
    pools: list[dict[str, Any]] = Field(default_factory=list)
    block_number: int | None = Field(default=None, alias="blockNumber", ge=0)

    model_config = {"populate_by_name": True}


@dataclass(frozen=True)
class PoolUniverse:
    """Pools parsed from a snapshot and the block they were read at."""

    pools: list[AnyPool]
    block_number: int | None = None


def parse_pools(payload: dict[str, Any], chain_id: int) -> list[AnyPool]:
    """Parse a snapshot payload into pools, preserving input order.

    Same as ``parse_snapshot(payload, chain_id).pools``.
    """
    return parse_snapshot(payload, chain_id).pools


def parse_snapshot(payload: dict[str, Any], chain_id: int) -> PoolUniverse:
    """Parse a snapshot payload into pools and its block number.

    Args:
        payload: Decoded JSON snapshot
        chain_id: Chain the snapshot was taken on

    Returns:
        Pools in snapshot order (invalid entries skipped) and the snapshot block

    Raises:
        pydantic.ValidationError: If the document itself (not an individual
            pool) is malformed
    """
    snapshot = PoolUniverseSnapshot.model_validate(payload)
    tokens = {
        normalize_address(t.address): Token(
            chain_id=chain_id,
            address=t.address,
            decimals=t.decimals,
            symbol=t.symbol,
            name=t.name,
        )
        for t in snapshot.tokens
    }

    pools: list[AnyPool] = []
    for index, raw in enumerate(snapshot.pools):
        try:
            entry = PoolSnapshot.model_validate(raw)
        except ValidationError as err:
            logger.debug("snapshot_pool_invalid", index=index, errors=err.error_count())
            continue

        token0 = _lookup_token(tokens, entry.token0, chain_id)
        token1 = _lookup_token(tokens, entry.token1, chain_id)
        if token0 == token1:
            logger.debug("snapshot_pool_same_token", index=index, token=token0.key)
            continue

        address = normalize_address(entry.address) if entry.address else None
        if entry.kind == "v2":
            pools.append(V2Pair(token0=token0, token1=token1, address=address))
        else:
            fee = entry.fee if entry.fee is not None else DEFAULT_SNAPSHOT_FEE
            if fee not in V3_FEE_TIERS:
                logger.debug("snapshot_pool_custom_fee", index=index, fee=fee)
            pools.append(V3Pool(token0=token0, token1=token1, fee=fee, address=address))

    logger.debug(
        "snapshot_parsed",
        chain_id=chain_id,
        pools=len(pools),
        tokens=len(tokens),
        block_number=snapshot.block_number,
    )
    return PoolUniverse(pools=pools, block_number=snapshot.block_number)


def _lookup_token(tokens: dict[str, Token], address: str, chain_id: int) -> Token:
    """Get token metadata from the snapshot, or a bare token if unlisted."""
    token = tokens.get(normalize_address(address))
    if token is None:
        token = Token(chain_id=chain_id, address=address)
        tokens[token.key] = token
    return token


__all__ = [
    "PoolSnapshot",
    "PoolUniverse",
    "PoolUniverseSnapshot",
    "TokenSnapshot",
    "parse_pools",
    "parse_snapshot",
]
