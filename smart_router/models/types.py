"""Address types shared by currency, pool and snapshot models.

Addresses are compared case-insensitively everywhere in the router; the
lowercased form is the identity used for path searches and route ids.
"""

import re
from typing import Annotated

from pydantic import Field

ADDRESS_PATTERN = r"^0x[a-fA-F0-9]{40}$"

# Ethereum address, any casing
Address = Annotated[str, Field(pattern=ADDRESS_PATTERN)]

_ADDRESS_RE = re.compile(ADDRESS_PATTERN)


def normalize_address(address: str, *, validate: bool = False) -> str:
    """Lowercase an address and make sure it carries the 0x prefix.

    Raises:
        ValueError: If validate=True and the result is not 0x + 40 hex chars
    """
    key = address.strip().lower()
    if not key.startswith("0x"):
        key = f"0x{key}"

    if validate and not is_valid_address(key):
        raise ValueError(f"Invalid address: {address}")
    return key


def is_valid_address(address: str) -> bool:
    """Check for a 0x-prefixed, 40 hex character address."""
    return isinstance(address, str) and _ADDRESS_RE.fullmatch(address) is not None


__all__ = ["ADDRESS_PATTERN", "Address", "is_valid_address", "normalize_address"]
