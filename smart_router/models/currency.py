"""Currency models: ERC20 tokens, chain native currencies and amounts.

Routes are always computed between ERC20 tokens. A native currency takes
part in routing through its wrapped token (see ``NativeCurrency.wrapped``).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, TypeAlias

from pydantic import BaseModel, Field

from smart_router.constants import NATIVE_CURRENCY, WRAPPED_NATIVE_TOKENS
from smart_router.models.types import Address, normalize_address


class Token(BaseModel):
    """An ERC20 token on a specific chain.

    Two tokens are equal when they live on the same chain at the same
    address, regardless of address casing or metadata.
    """

    chain_id: int = Field(alias="chainId")
    address: Address
    decimals: int = Field(default=18, ge=0, le=77)
    symbol: str | None = None
    name: str | None = None

    is_native: ClassVar[bool] = False

    model_config = {"populate_by_name": True, "frozen": True}

    @property
    def wrapped(self) -> Token:
        return self

    @property
    def key(self) -> str:
        """Lowercased address, used as the asset identity in path searches."""
        return normalize_address(self.address)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Token):
            return NotImplemented
        return self.chain_id == other.chain_id and self.key == other.key

    def __hash__(self) -> int:
        return hash((self.chain_id, self.key))


class NativeCurrency(BaseModel):
    """The native gas currency of a chain (ETH, XRP, ...)."""

    chain_id: int = Field(alias="chainId")
    symbol: str
    decimals: int = Field(default=18, ge=0, le=77)
    name: str | None = None

    is_native: ClassVar[bool] = True

    model_config = {"populate_by_name": True, "frozen": True}

    @classmethod
    def on_chain(cls, chain_id: int) -> NativeCurrency:
        """Build the native currency for a chain.

        Raises:
            ValueError: If the chain has no known native currency
        """
        symbol = NATIVE_CURRENCY.get(chain_id)
        if symbol is None:
            raise ValueError(f"No native currency known for chain {chain_id}")
        return cls(chain_id=chain_id, symbol=symbol)

    @property
    def wrapped(self) -> Token:
        return wrapped_native_currency(self.chain_id)

    @property
    def key(self) -> str:
        return self.wrapped.key


Currency: TypeAlias = Token | NativeCurrency


WRAPPED_NATIVE_CURRENCY: dict[int, Token] = {
    chain_id: Token(chain_id=chain_id, address=address, decimals=18, symbol=symbol, name=name)
    for chain_id, (address, symbol, name) in WRAPPED_NATIVE_TOKENS.items()
}


def wrapped_native_currency(chain_id: int) -> Token:
    """Get the wrapped native token of a chain.

    Raises:
        ValueError: If the chain has no wrapped native token configured
    """
    token = WRAPPED_NATIVE_CURRENCY.get(chain_id)
    if token is None:
        raise ValueError(f"Unsupported chain {chain_id}: no wrapped native currency")
    return token


@dataclass(frozen=True)
class CurrencyAmount:
    """A raw (integer, smallest unit) amount of a currency."""

    currency: Currency
    quotient: int

    def __post_init__(self) -> None:
        if self.quotient < 0:
            raise ValueError(f"Currency amount cannot be negative: {self.quotient}")

    def __str__(self) -> str:
        return f"{self.quotient} {self.currency.symbol or self.currency.key}"


__all__ = [
    "Currency",
    "CurrencyAmount",
    "NativeCurrency",
    "Token",
    "WRAPPED_NATIVE_CURRENCY",
    "wrapped_native_currency",
]
