"""Gas price result and strategy protocol."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True)
class GasPrice:
    """Gas price returned by a gas price strategy."""

    gas_price_wei: int
    # Block the price was read at, when the strategy reports it
    block_number: int | None = None

    def __post_init__(self) -> None:
        if self.gas_price_wei < 0:
            raise ValueError(f"Gas price cannot be negative: {self.gas_price_wei}")


class GasPriceProvider(Protocol):
    """Protocol for gas price strategies (fee-market or legacy).

    Implementations typically perform RPC calls and may raise on network
    failure.
    """

    async def get_gas_price(
        self,
        latest_block_number: int,
        request_block_number: int | None = None,
    ) -> GasPrice:
        """Get the gas price.

        Args:
            latest_block_number: Latest block known to the caller
            request_block_number: Block the request targets, if any

        Returns:
            The gas price
        """
        ...


__all__ = ["GasPrice", "GasPriceProvider"]
