"""Gas price strategy selection."""

from smart_router.gas.provider import OnChainGasPriceProvider
from smart_router.gas.types import GasPrice, GasPriceProvider

__all__ = ["GasPrice", "GasPriceProvider", "OnChainGasPriceProvider"]
