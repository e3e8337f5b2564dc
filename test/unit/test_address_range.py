"""
Unit tests for AddressRange.
"""

import os
import sys
import pytest
from ipaddress import IPv4Address, IPv6Address

# Add the parent directory to the Python path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '../..')))

from ipranges.core.exceptions import RangeFormatError
from ipranges.model import AddressRange


class TestAddressRangeParse:
    """Test suite for CIDR parsing."""

    def test_parse_network(self):
        address_range = AddressRange.parse("10.0.0.0/24")
        assert address_range.from_ip == IPv4Address("10.0.0.0")
        assert address_range.to_ip == IPv4Address("10.0.0.255")

    def test_parse_single_address(self):
        address_range = AddressRange.parse("10.0.0.5/32")
        assert address_range.from_ip == address_range.to_ip == IPv4Address("10.0.0.5")

    def test_parse_clears_host_bits(self):
        assert AddressRange.parse("10.0.0.7/24") == AddressRange.parse("10.0.0.0/24")

    def test_parse_whole_address_space(self):
        address_range = AddressRange.parse("192.0.2.1/0")
        assert address_range.from_ip == IPv4Address("0.0.0.0")
        assert address_range.to_ip == IPv4Address("255.255.255.255")

    def test_parse_ipv6(self):
        address_range = AddressRange.parse("2001:db8::1/64")
        assert address_range.from_ip == IPv6Address("2001:db8::")
        assert address_range.to_ip == IPv6Address("2001:db8::ffff:ffff:ffff:ffff")

    def test_parse_splits_on_last_slash(self):
        with pytest.raises(RangeFormatError):
            AddressRange.parse("10.0.0.0/8/24")

    @pytest.mark.parametrize("prefix", range(0, 33))
    def test_boundaries_follow_prefix_length(self, prefix):
        address_range = AddressRange.parse(f"203.0.113.77/{prefix}")
        host_size = 2 ** (32 - prefix)
        assert int(address_range.to_ip) - int(address_range.from_ip) == host_size - 1
        assert int(address_range.from_ip) % host_size == 0

    @pytest.mark.parametrize("prefix", [0, 1, 64, 127, 128])
    def test_ipv6_boundaries_follow_prefix_length(self, prefix):
        address_range = AddressRange.parse(f"2001:db8:85a3::8a2e:370:7334/{prefix}")
        host_size = 2 ** (128 - prefix)
        assert int(address_range.to_ip) - int(address_range.from_ip) == host_size - 1
        assert int(address_range.from_ip) % host_size == 0

    @pytest.mark.parametrize("text", [
        "10.0.0.0",
        "10.0.0.0/",
        "10.0.0.0/33",
        "10.0.0.0/-1",
        "10.0.0.0/abc",
        "10.0.0.0/255.255.255.0",
        "999.0.0.0/8",
        "::/129",
        "/24",
    ])
    def test_parse_invalid(self, text):
        with pytest.raises(RangeFormatError):
            AddressRange.parse(text)

    def test_format_error_is_value_error(self):
        with pytest.raises(ValueError) as exc_info:
            AddressRange.parse("not-a-network/8")
        assert "not-a-network/8" in str(exc_info.value)


class TestAddressRange:
    """Test suite for explicit ranges and helpers."""

    def test_explicit_bounds_are_kept(self):
        address_range = AddressRange(IPv4Address("10.0.0.9"), IPv4Address("10.0.0.1"))
        assert address_range.from_ip == IPv4Address("10.0.0.9")
        assert address_range.to_ip == IPv4Address("10.0.0.1")

    def test_network_for_block(self):
        assert AddressRange.parse("10.0.0.0/24").network == "10.0.0.0/24"
        assert AddressRange.parse("10.0.0.5/32").network == "10.0.0.5/32"

    def test_network_for_unaligned_range(self):
        address_range = AddressRange(IPv4Address("10.0.1.0"), IPv4Address("10.0.1.9"))
        assert address_range.network is None

    def test_network_for_inverted_range(self):
        address_range = AddressRange(IPv4Address("10.0.0.255"), IPv4Address("10.0.0.0"))
        assert address_range.network is None

    def test_str(self):
        assert str(AddressRange.parse("10.0.0.0/30")) == "10.0.0.0-10.0.0.3"

    def test_dict_conversion(self):
        address_range = AddressRange.parse("2001:db8::/126")
        assert address_range.to_dict() == {"from": "2001:db8::", "to": "2001:db8::3"}
        assert AddressRange.from_dict(address_range.to_dict()) == address_range

    def test_immutable(self):
        address_range = AddressRange.parse("10.0.0.0/24")
        with pytest.raises(AttributeError):
            address_range.from_ip = IPv4Address("10.0.0.1")
