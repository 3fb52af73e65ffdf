"""Gas price strategy selection by chain."""

from __future__ import annotations

from collections.abc import Iterable

import structlog

from smart_router.config import DEFAULT_ROUTING_CONFIG, RoutingConfig
from smart_router.constants import DEFAULT_EIP1559_CHAINS
from smart_router.gas.types import GasPrice, GasPriceProvider

logger = structlog.get_logger()


class OnChainGasPriceProvider:
    """Get gas prices on chain with the strategy the chain supports.

    Chains that support EIP-1559 and the ``eth_feeHistory`` API use the
    fee-market strategy; all others use the legacy ``eth_gasPrice``
    strategy. A failing strategy is not retried with the other one.
    """

    def __init__(
        self,
        chain_id: int,
        eip1559_gas_price_provider: GasPriceProvider,
        legacy_gas_price_provider: GasPriceProvider,
        eip1559_chains: Iterable[int] = DEFAULT_EIP1559_CHAINS,
    ) -> None:
        self.chain_id = chain_id
        self.eip1559_gas_price_provider = eip1559_gas_price_provider
        self.legacy_gas_price_provider = legacy_gas_price_provider
        self.eip1559_chains = frozenset(eip1559_chains)

    @classmethod
    def from_config(
        cls,
        chain_id: int,
        eip1559_gas_price_provider: GasPriceProvider,
        legacy_gas_price_provider: GasPriceProvider,
        config: RoutingConfig = DEFAULT_ROUTING_CONFIG,
    ) -> OnChainGasPriceProvider:
        """Build a provider using the EIP-1559 chain list of a routing config."""
        return cls(
            chain_id,
            eip1559_gas_price_provider,
            legacy_gas_price_provider,
            eip1559_chains=config.eip1559_chains,
        )

    @property
    def uses_eip1559(self) -> bool:
        return self.chain_id in self.eip1559_chains

    async def get_gas_price(
        self,
        latest_block_number: int,
        request_block_number: int | None = None,
    ) -> GasPrice:
        """Get the gas price from the strategy selected for this chain."""
        if self.uses_eip1559:
            logger.debug("gas_price_strategy", chain_id=self.chain_id, strategy="eip1559")
            return await self.eip1559_gas_price_provider.get_gas_price(
                latest_block_number, request_block_number
            )

        logger.debug("gas_price_strategy", chain_id=self.chain_id, strategy="legacy")
        return await self.legacy_gas_price_provider.get_gas_price(
            latest_block_number, request_block_number
        )


__all__ = ["OnChainGasPriceProvider"]
