"""Model module for IP Ranges.

This module provides the Group -> Region -> AddressRange object model.
"""

from .address_range import AddressRange, parse_address
from .group import Group, Region

__all__ = ['AddressRange', 'parse_address', 'Group', 'Region']
