"""Router error classes.

Cache backend and gas strategy failures are not wrapped here: they
propagate to the caller as whatever exception the collaborator raised.
"""

from typing import Any


class RouterError(Exception):
    """Base error for route model operations."""

    pass


class UnsupportedPoolKind(RouterError):
    """A route contains a pool whose kind cannot be rendered into a path."""

    def __init__(self, pool: Any) -> None:
        self.pool = pool
        super().__init__(f"Unsupported pool type {pool!r}")


class UnsupportedProtocol(RouterError):
    """A route is tagged with a protocol outside V2, V3 and MIXED."""

    def __init__(self, protocol: Any) -> None:
        self.protocol = protocol
        super().__init__(f"Unsupported protocol {protocol}")


__all__ = ["RouterError", "UnsupportedPoolKind", "UnsupportedProtocol"]
