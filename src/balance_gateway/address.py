"""Account address parsing.

Address format: 0x followed by 40 hex digits (20 bytes), case-insensitive.
Checksum casing (EIP-55) is accepted but not enforced.
"""

import re
from dataclasses import dataclass

from balance_gateway.errors import AddressValidationError

ADDRESS_PREFIX = "0x"
ADDRESS_BYTES = 20
ADDRESS_LENGTH = len(ADDRESS_PREFIX) + ADDRESS_BYTES * 2  # 42

_ADDRESS_RE = re.compile(r"0x[0-9a-fA-F]{40}")


@dataclass(frozen=True)
class AccountAddress:
    """20-byte account identifier.

    Example:
        addr = AccountAddress.parse("0xAbC0000000000000000000000000000000000001")
        str(addr)  # "0xabc0000000000000000000000000000000000001"
    """

    raw: bytes

    def __post_init__(self):
        if len(self.raw) != ADDRESS_BYTES:
            raise AddressValidationError(
                f"Address must be {ADDRESS_BYTES} bytes, got {len(self.raw)}"
            )

    @classmethod
    def parse(cls, text: str) -> "AccountAddress":
        """Parse the wire form of an address.

        Args:
            text: Raw address string, e.g. taken from a URL path segment

        Returns:
            AccountAddress for the decoded bytes

        Raises:
            AddressValidationError: If the string is not exactly 0x + 40 hex digits
        """
        if not isinstance(text, str):
            raise AddressValidationError("Address must be a string")

        if len(text) != ADDRESS_LENGTH:
            raise AddressValidationError(
                f"Address must be {ADDRESS_LENGTH} characters, got {len(text)}"
            )

        if not text.startswith(ADDRESS_PREFIX):
            raise AddressValidationError(f"Address must start with {ADDRESS_PREFIX}")

        if not _ADDRESS_RE.fullmatch(text):
            raise AddressValidationError("Address contains non-hex characters")

        return cls(bytes.fromhex(text[len(ADDRESS_PREFIX):]))

    @property
    def hex(self) -> str:
        """Canonical lowercase form with 0x prefix."""
        return ADDRESS_PREFIX + self.raw.hex()

    def __str__(self) -> str:
        return self.hex


def parse_address(text: str) -> AccountAddress:
    """Parse an address string. See AccountAddress.parse."""
    return AccountAddress.parse(text)
