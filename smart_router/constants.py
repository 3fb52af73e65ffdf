"""Protocol constants for the smart router.

Centralizes chain identifiers, wrapped native token addresses and the
chain lists used for gas strategy selection.
"""

import re
from enum import IntEnum


class ChainId(IntEnum):
    """EVM chain identifiers known to the router."""

    MAINNET = 1
    GOERLI = 5
    OPTIMISM = 10
    OPTIMISM_GOERLI = 420
    BASE = 8453
    BASE_GOERLI = 84531
    ARBITRUM_ONE = 42161
    ARBITRUM_SEPOLIA = 421614
    POLYGON_MUMBAI = 80001
    XRPL_EVM_TESTNET = 1449000


def _validate_token_address(name: str, address: str) -> str:
    """Validate and return a token address.

    Raises:
        ValueError: If the address is invalid
    """
    if not re.fullmatch(r"0x[a-fA-F0-9]{40}", address):
        raise ValueError(f"Invalid {name} address: {address} (must be 0x + 40 hex chars)")
    return address


# Chains built on the OP stack all expose eth_feeHistory
OP_STACK_CHAINS: tuple[ChainId, ...] = (
    ChainId.OPTIMISM,
    ChainId.OPTIMISM_GOERLI,
    ChainId.BASE,
    ChainId.BASE_GOERLI,
)

DEFAULT_EIP1559_CHAINS: frozenset[int] = frozenset(
    (
        ChainId.MAINNET,
        ChainId.GOERLI,
        ChainId.POLYGON_MUMBAI,
        ChainId.ARBITRUM_ONE,
        *OP_STACK_CHAINS,
    )
)

# (address, symbol, name) of the wrapped native token per chain
# All addresses are validated at import time to catch typos early
WRAPPED_NATIVE_TOKENS: dict[int, tuple[str, str, str]] = {
    ChainId.MAINNET: (
        _validate_token_address("WETH", "0xC02aaA39b223FE8D0A0e5C4F27eAD9083C756Cc2"),
        "WETH",
        "Wrapped Ether",
    ),
    ChainId.OPTIMISM: (
        _validate_token_address("WETH", "0x4200000000000000000000000000000000000006"),
        "WETH",
        "Wrapped Ether",
    ),
    ChainId.BASE: (
        _validate_token_address("WETH", "0x4200000000000000000000000000000000000006"),
        "WETH",
        "Wrapped Ether",
    ),
    ChainId.ARBITRUM_ONE: (
        _validate_token_address("WETH", "0x82aF49447D8a07e3bd95BD0d56f35241523fBab1"),
        "WETH",
        "Wrapped Ether",
    ),
    ChainId.ARBITRUM_SEPOLIA: (
        _validate_token_address("WETH", "0xc556bAe1e86B2aE9c22eA5E036b07E55E7596074"),
        "WETH",
        "Wrapped Ether",
    ),
    ChainId.XRPL_EVM_TESTNET: (
        _validate_token_address("WXRP", "0xC02aaA39b223FE8D0A0e5C4F27eAD9083C756Cc2"),
        "WXRP",
        "Wrapped XRP",
    ),
}

NATIVE_CURRENCY: dict[int, str] = {
    ChainId.MAINNET: "ETH",
    ChainId.OPTIMISM: "ETH",
    ChainId.BASE: "ETH",
    ChainId.ARBITRUM_ONE: "ETH",
    ChainId.ARBITRUM_SEPOLIA: "ETH",
    ChainId.XRPL_EVM_TESTNET: "XRP",
}

# Separator between pool segments in a canonical route path
ROUTE_PATH_SEPARATOR = "->"
