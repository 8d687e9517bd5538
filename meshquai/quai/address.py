"""
Quai Address Module

Checksum helpers for Quai addresses. Quai addresses are 20-byte,
EIP-55 checksummed hex strings whose first byte encodes the chain
location that owns them: the high nibble is the region and the low
nibble is the zone.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from eth_utils import is_hex_address, to_checksum_address

from ..exceptions import InvalidAddressError


@dataclass(frozen=True)
class Location:
    """A zone chain inside a region."""
    region: int
    zone: int

    def contains_address(self, address: str) -> bool:
        """Check whether the address is scoped to this location."""
        first_byte = int(address[2:4], 16)
        return (first_byte >> 4) == self.region and (first_byte & 0x0F) == self.zone


def checksum_address(address: str, location: Optional[Location] = None) -> Tuple[str, bool]:
    """
    Convert an address to checksum format.

    Mixed-case input is normalized, not verified against its checksum.

    Args:
        address: Hex address with 0x prefix
        location: If given, the address must belong to this location

    Returns:
        (checksum address, True), or ("", False) if the address is invalid
    """
    if not isinstance(address, str) or not address.startswith(("0x", "0X")):
        return "", False
    if not is_hex_address(address):
        return "", False
    if location is not None and not location.contains_address(address):
        return "", False
    return to_checksum_address(address), True


def must_checksum(address: str, location: Optional[Location] = None) -> str:
    """
    Like checksum_address, but raises on an invalid address.

    Raises:
        InvalidAddressError: if the address cannot be converted
    """
    checksummed, ok = checksum_address(address, location)
    if not ok:
        raise InvalidAddressError(f"invalid address {address}")
    return checksummed
