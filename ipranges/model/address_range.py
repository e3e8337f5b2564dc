"""
Inclusive address ranges.

An ``AddressRange`` is built either from two explicit boundary addresses or
from CIDR network notation, in which case the boundaries are the network
address and the last address of the block.
"""

from __future__ import annotations

from ipaddress import IPv4Address, IPv6Address, ip_address
from typing import Any, Dict, NamedTuple, Optional, Union

from ipranges.core.exceptions import RangeFormatError

Address = Union[IPv4Address, IPv6Address]


def parse_address(text: str) -> Address:
    """
    Parse a textual IPv4 or IPv6 address.

    Raises:
        RangeFormatError: If the text is not a valid address
    """
    try:
        return ip_address(text)
    except ValueError as e:
        raise RangeFormatError(f"An invalid IP address was specified ('{text}'): {e}") from e


class AddressRange(NamedTuple):
    """
    An inclusive lower/upper address boundary pair.

    Boundaries are stored as given; ``from_ip <= to_ip`` is only guaranteed
    for ranges produced by ``parse``.

    Attributes:
        from_ip: First address of the range
        to_ip: Last address of the range
    """

    from_ip: Address
    to_ip: Address

    @classmethod
    def parse(cls, text: str) -> AddressRange:
        """
        Create an AddressRange from CIDR text such as ``10.0.0.0/24``.

        Host bits set in the address part are cleared, so ``10.0.0.7/24``
        yields the same range as ``10.0.0.0/24``.

        Args:
            text: Network in ``<address>/<prefix-length>`` form

        Returns:
            The range covering the whole network block

        Raises:
            RangeFormatError: If the text is not valid CIDR notation
        """
        address_text, separator, prefix_text = text.rpartition("/")
        if not separator:
            raise RangeFormatError(f"An invalid network was specified ('{text}'), expecting '<address>/<prefix>'")

        try:
            address = ip_address(address_text)
        except ValueError as e:
            raise RangeFormatError(f"An invalid network address was specified ('{text}'): {e}") from e

        width = address.max_prefixlen
        if not (prefix_text.isascii() and prefix_text.isdigit()):
            raise RangeFormatError(f"An invalid prefix length was specified ('{text}'), expecting an integer")
        prefix = int(prefix_text)
        if prefix > width:
            raise RangeFormatError(
                f"An invalid prefix length was specified ('{text}'), expecting a value between 0 and {width}"
            )

        host_mask = (1 << (width - prefix)) - 1
        first = int(address) & ~host_mask
        return cls(type(address)(first), type(address)(first | host_mask))

    @property
    def network(self) -> Optional[str]:
        """CIDR text for the range if it is exactly one network block, else None."""
        if self.from_ip.version != self.to_ip.version:
            return None
        first, last = int(self.from_ip), int(self.to_ip)
        if last < first:
            return None
        host_bits = (last - first).bit_length()
        host_mask = (1 << host_bits) - 1
        if last - first != host_mask or first & host_mask:
            return None
        return f"{self.from_ip}/{self.from_ip.max_prefixlen - host_bits}"

    def __str__(self) -> str:
        return f"{self.from_ip}-{self.to_ip}"

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        return {"from": str(self.from_ip), "to": str(self.to_ip)}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> AddressRange:
        """Create from dictionary representation."""
        return cls(parse_address(data["from"]), parse_address(data["to"]))
