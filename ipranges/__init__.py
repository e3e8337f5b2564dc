"""
IP Ranges - Parser for published network range documents.

This package reads XML documents describing named groups of network regions
and builds an in-memory Group -> Region -> AddressRange model from them.
"""

__version__ = '1.0.0'
__author__ = 'IP Ranges Team'
