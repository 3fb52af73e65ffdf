"""Currency and address models shared across the router."""

from smart_router.models.currency import (
    WRAPPED_NATIVE_CURRENCY,
    Currency,
    CurrencyAmount,
    NativeCurrency,
    Token,
    wrapped_native_currency,
)
from smart_router.models.types import Address, is_valid_address, normalize_address

__all__ = [
    "Address",
    "Currency",
    "CurrencyAmount",
    "NativeCurrency",
    "Token",
    "WRAPPED_NATIVE_CURRENCY",
    "is_valid_address",
    "normalize_address",
    "wrapped_native_currency",
]
